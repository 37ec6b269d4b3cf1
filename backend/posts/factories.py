import factory
from factory.django import DjangoModelFactory

from posts.models import Category, Post


class CategoryFactory(DjangoModelFactory):
    class Meta:
        model = Category

    name = factory.Sequence(lambda n: f"Category {n}")
    slug = factory.Sequence(lambda n: f"category-{n}")


class PostFactory(DjangoModelFactory):
    class Meta:
        model = Post

    title = "Original Title"
    content = "Original Content"
    slug = factory.Sequence(lambda n: f"post-{n}")
