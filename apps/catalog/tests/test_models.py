from decimal import Decimal

from django.test import TestCase
from django.utils import timezone

from apps.catalog.models import Brand, Category, Product
from apps.catalog.utils import product_slug
from .utils import CatalogDataMixin, TempMediaMixin, create_product, make_image


class ProductSlugTest(TestCase):
    """Test cases for the slug transform"""

    def test_lowercase_hyphenated(self):
        self.assertEqual(product_slug('Wireless Mouse'), 'wireless-mouse')

    def test_transliterates_and_strips_punctuation(self):
        self.assertEqual(product_slug('Café Crème_2 (Large)'), 'cafe-creme-2-large')

    def test_collapses_separators(self):
        self.assertEqual(product_slug('  USB -- C   Hub!! '), 'usb-c-hub')

    def test_empty_name(self):
        self.assertEqual(product_slug(''), '')
        self.assertEqual(product_slug(None), '')


class ProductModelTest(TempMediaMixin, CatalogDataMixin, TestCase):
    """Test cases for Product model"""

    def setUp(self):
        self.product = create_product(self.logitech, [self.electronics])

    def test_product_creation(self):
        """Test product is created with derived slug and defaults"""
        self.assertEqual(self.product.slug, 'wireless-mouse')
        self.assertTrue(self.product.is_visible)
        self.assertFalse(self.product.is_featured)
        self.assertEqual(self.product.published_at, timezone.localdate())
        self.assertEqual(self.product.price, Decimal('24.99'))

    def test_slug_derived_for_any_name(self):
        for index, name in enumerate(['Mechanical Keyboard', 'Ünïcode Ñame', 'Hub 4-Port']):
            product = create_product(self.anker, [self.electronics], name=name, sku=f'SKU-{index}')
            self.assertEqual(product.slug, product_slug(name))

    def test_slug_not_recomputed_on_rename(self):
        self.product.name = 'Silent Wireless Mouse'
        self.product.save()
        self.product.refresh_from_db()
        self.assertEqual(self.product.slug, 'wireless-mouse')

    def test_product_str(self):
        self.assertEqual(str(self.product), 'Wireless Mouse')

    def test_image_url_absent(self):
        self.assertIsNone(self.product.image_url)

    def test_image_url_and_preserved_filename(self):
        self.product.image = make_image('wireless-mouse.png')
        self.product.save()
        self.assertEqual(self.product.image.name, 'form-attachments/wireless-mouse.png')
        self.assertEqual(self.product.image_url, '/media/form-attachments/wireless-mouse.png')

    def test_image_name_is_normalized_by_storage(self):
        self.product.image = make_image('my photo.png')
        self.product.save()
        self.assertEqual(self.product.image.name, 'form-attachments/my_photo.png')

    def test_history_is_recorded(self):
        self.product.quantity = 10
        self.product.save()
        self.assertEqual(self.product.history.count(), 2)
        self.assertEqual(self.product.history.first().quantity, 10)


class BrandCategoryModelTest(TestCase):
    """Test cases for Brand and Category models"""

    def test_brand_slug(self):
        brand = Brand.objects.create(name='Penguin Books')
        self.assertEqual(brand.slug, 'penguin-books')

    def test_category_full_path(self):
        root = Category.objects.create(name='Electronics')
        child = Category.objects.create(name='Accessories', parent=root)
        self.assertEqual(str(child), 'Electronics > Accessories')
        self.assertEqual(child.get_ancestors(), [root])

    def test_category_slug_is_unique(self):
        first = Category.objects.create(name='Cables')
        second = Category.objects.create(name='Cables')
        self.assertEqual(first.slug, 'cables')
        self.assertEqual(second.slug, 'cables-1')

    def test_product_categories_relation(self):
        brand = Brand.objects.create(name='Anker')
        category = Category.objects.create(name='Chargers')
        product = create_product(brand, [category], name='Power Bank', sku='PB-1')
        self.assertEqual(list(category.products.all()), [product])
        self.assertEqual(Product.objects.filter(brand=brand).count(), 1)
