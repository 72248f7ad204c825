from django.db import models
from django.utils.text import slugify


class Brand(models.Model):
    """Manufacturer or label a product is sold under."""
    name = models.CharField(
        max_length=255,
        unique=True,
        verbose_name='Name'
    )
    slug = models.SlugField(
        max_length=255,
        unique=True,
        verbose_name='Slug'
    )
    url = models.URLField(
        blank=True,
        verbose_name='Website'
    )
    description = models.TextField(
        blank=True,
        verbose_name='Description'
    )
    is_visible = models.BooleanField(
        default=True,
        verbose_name='Visibility'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Created at'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Updated at'
    )

    class Meta:
        ordering = ['name']
        verbose_name = 'Brand'
        verbose_name_plural = 'Brands'

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)
