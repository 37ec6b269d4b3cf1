from django.db import models
from django.utils.translation import gettext_lazy as _

from translations.mixins import TranslatableModel


class Category(TranslatableModel):
    name = models.CharField(_('name'), max_length=100)
    slug = models.SlugField(_('slug'), unique=True)

    class Meta:
        verbose_name = _('category')
        verbose_name_plural = _('categories')

    class Translatable:
        fields = ['name']

    def __str__(self):
        return self.name


class Post(TranslatableModel):
    created_at = models.DateTimeField(_('created at'), auto_now_add=True)
    updated_at = models.DateTimeField(_('updated at'), auto_now=True)

    category = models.ForeignKey(
        Category, on_delete=models.SET_NULL, null=True, blank=True, related_name='posts', verbose_name=_('category'))
    slug = models.SlugField(_('slug'), blank=True)

    title = models.CharField(_('title'), max_length=200)
    content = models.TextField(_('content'), blank=True)
    is_published = models.BooleanField(_('is published'), default=False)
    view_count = models.IntegerField(_('view count'), default=0)
    rating = models.FloatField(_('rating'), null=True, blank=True)
    price = models.DecimalField(_('price'), max_digits=10, decimal_places=2, null=True, blank=True)
    metadata = models.JSONField(_('metadata'), null=True, blank=True)
    published_at = models.DateTimeField(_('published at'), null=True, blank=True)
    release_date = models.DateField(_('release date'), null=True, blank=True)
    notes = models.TextField(_('notes'), blank=True)

    class Meta:
        verbose_name = _('post')
        verbose_name_plural = _('posts')

    class Translatable:
        fields = [
            'title',
            'content',
            'is_published',
            'view_count',
            'rating',
            'price',
            'metadata',
            'published_at',
            'release_date',
            'notes',
        ]
        casts = {'notes': 'encrypted'}

    def __str__(self):
        return self.title
