from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator, RegexValidator
from django.db import models
from django.utils import timezone
from imagekit.models import ImageSpecField
from imagekit.processors import ResizeToFill
from simple_history.models import HistoricalRecords

from apps.catalog.utils import product_slug


class ProductType(models.TextChoices):
    DOWNLOADABLE = 'downloadable', 'Downloadable'
    DELIVERABLE = 'deliverable', 'Deliverable'


def product_image_path(instance, filename):
    """
    Keep the uploaded filename, inside the attachment directory.

    The storage still applies ``get_valid_name`` (``my photo.png`` is stored
    as ``my_photo.png``) and appends a suffix when the name is taken.
    """
    return f'{settings.PRODUCT_IMAGE_DIRECTORY}/{filename}'


class Product(models.Model):
    """
    A sellable catalog item.

    The slug is derived from the name when the product is first saved and
    is never recomputed afterwards.
    """
    price_validator = RegexValidator(
        regex=r'^\d+(\.\d{1,2})?$',
        message='Enter a price like 19.99 (at most two decimal places).'
    )

    brand = models.ForeignKey(
        'catalog.Brand',
        on_delete=models.CASCADE,
        related_name='products',
        verbose_name='Brand'
    )
    categories = models.ManyToManyField(
        'catalog.Category',
        related_name='products',
        verbose_name='Categories'
    )
    name = models.CharField(
        max_length=255,
        verbose_name='Name'
    )
    slug = models.SlugField(
        max_length=255,
        unique=True,
        verbose_name='Slug'
    )
    sku = models.CharField(
        max_length=255,
        unique=True,
        verbose_name='SKU (Stock Keeping Unit)'
    )
    image = models.ImageField(
        upload_to=product_image_path,
        max_length=255,
        verbose_name='Image'
    )
    thumbnail = ImageSpecField(
        source='image',
        processors=[ResizeToFill(100, 100)],
        format='JPEG',
        options={'quality': 60}
    )
    description = models.TextField(
        blank=True,
        verbose_name='Description'
    )
    quantity = models.PositiveIntegerField(
        validators=[MinValueValidator(0), MaxValueValidator(100)],
        verbose_name='Quantity'
    )
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[price_validator],
        verbose_name='Price'
    )
    type = models.CharField(
        max_length=20,
        choices=ProductType.choices,
        verbose_name='Type'
    )
    is_visible = models.BooleanField(
        default=True,
        verbose_name='Visibility',
        help_text='Enable or disable product visibility'
    )
    is_featured = models.BooleanField(
        default=False,
        verbose_name='Featured',
        help_text='Enable or disable product featured status'
    )
    published_at = models.DateField(
        default=timezone.localdate,
        null=True,
        blank=True,
        verbose_name='Availability'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Created at'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Updated at'
    )

    # History tracking
    history = HistoricalRecords()

    class Meta:
        ordering = ['name']
        verbose_name = 'Product'
        verbose_name_plural = 'Products'

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if self._state.adding and not self.slug:
            self.slug = product_slug(self.name)
        super().save(*args, **kwargs)

    @property
    def image_url(self):
        """Public URL of the stored image, or None when there is none."""
        if not self.image:
            return None
        return self.image.url
