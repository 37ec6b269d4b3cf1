from django.contrib import admin
from django.utils.translation import gettext_lazy as _
from unfold.admin import GenericTabularInline, ModelAdmin

from .models import Translation


@admin.register(Translation)
class TranslationAdmin(ModelAdmin):
    list_display = ["owner_label", "field", "locale", "short_value", "updated_at"]
    list_filter = ["content_type", "locale", "field"]
    search_fields = ["field", "value"]
    readonly_fields = [
        "content_type", "object_id", "field", "locale", "value", "created_at", "updated_at"
    ]
    list_select_related = ["content_type"]

    def has_add_permission(self, request):
        # Rows are written through the owning record.
        return False

    @admin.display(description=_("owner"))
    def owner_label(self, obj):
        return f"{obj.content_type.app_label}.{obj.content_type.model}#{obj.object_id}"

    @admin.display(description=_("value"))
    def short_value(self, obj):
        if obj.value and len(obj.value) > 80:
            return f"{obj.value[:80]}..."
        return obj.value


class TranslationInline(GenericTabularInline):
    """Read-only listing of an owner's stored translations."""

    model = Translation
    fields = ["field", "locale", "value", "updated_at"]
    readonly_fields = fields
    extra = 0
    can_delete = False

    # Values are coerced and encrypted by TranslatableModel.set_translation.
    def has_add_permission(self, request, obj=None):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
