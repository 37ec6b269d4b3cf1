from rest_framework import serializers

from translations.serializers import TranslatableModelSerializer
from .models import Category, Post


class CategorySerializer(TranslatableModelSerializer):
    class Meta:
        model = Category
        fields = ["id", "name", "slug"]


class PostSerializer(TranslatableModelSerializer):
    category = CategorySerializer(read_only=True)
    category_id = serializers.PrimaryKeyRelatedField(
        queryset=Category.objects.all(),
        write_only=True,
        source="category",
        required=False,
        allow_null=True,
    )

    class Meta:
        model = Post
        fields = [
            "id",
            "slug",
            "category",
            "category_id",
            "title",
            "content",
            "is_published",
            "view_count",
            "rating",
            "price",
            "metadata",
            "published_at",
            "release_date",
            "created_at",
            "updated_at",
        ]
