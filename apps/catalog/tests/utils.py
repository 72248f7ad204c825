import shutil
import tempfile
from decimal import Decimal
from io import BytesIO

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import override_settings
from PIL import Image

from apps.catalog.models import Brand, Category, Product, ProductType


def make_image(name='product.png', size=(20, 20), color='red'):
    """A small but real PNG upload."""
    buffer = BytesIO()
    Image.new('RGB', size, color).save(buffer, format='PNG')
    return SimpleUploadedFile(name, buffer.getvalue(), content_type='image/png')


def create_product(brand, categories, **kwargs):
    data = {
        'name': 'Wireless Mouse',
        'sku': 'WM-100',
        'price': Decimal('24.99'),
        'quantity': 50,
        'type': ProductType.DELIVERABLE,
    }
    data.update(kwargs)
    product = Product.objects.create(brand=brand, **data)
    product.categories.set(categories)
    return product


class CatalogDataMixin:
    """Brands and categories shared by the catalog tests."""

    @classmethod
    def setUpTestData(cls):
        super().setUpTestData()
        cls.logitech = Brand.objects.create(name='Logitech')
        cls.anker = Brand.objects.create(name='Anker')
        cls.unused_brand = Brand.objects.create(name='Nobody Uses Me')
        cls.electronics = Category.objects.create(name='Electronics')
        cls.accessories = Category.objects.create(name='Accessories', parent=cls.electronics)


class TempMediaMixin:
    """Points MEDIA_ROOT at a throwaway directory for the test class."""

    @classmethod
    def setUpClass(cls):
        cls._media_root = tempfile.mkdtemp()
        cls._media_override = override_settings(MEDIA_ROOT=cls._media_root)
        cls._media_override.enable()
        super().setUpClass()

    @classmethod
    def tearDownClass(cls):
        super().tearDownClass()
        cls._media_override.disable()
        shutil.rmtree(cls._media_root, ignore_errors=True)
