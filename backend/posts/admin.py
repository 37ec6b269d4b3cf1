from django.contrib import admin
from unfold.admin import ModelAdmin

from translations.admin import TranslationInline
from .models import Category, Post


@admin.register(Category)
class CategoryAdmin(ModelAdmin):
    list_display = ["name", "slug"]
    prepopulated_fields = {"slug": ["name"]}
    inlines = [TranslationInline]


@admin.register(Post)
class PostAdmin(ModelAdmin):
    list_display = ["title", "category", "is_published", "published_at"]
    list_filter = ["is_published", "category"]
    search_fields = ["title", "content"]
    inlines = [TranslationInline]

    def get_queryset(self, request):
        return super().get_queryset(request).with_translations()
