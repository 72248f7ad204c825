from decimal import Decimal

import tablib
from django.test import TestCase

from apps.catalog.admin import ProductResource
from apps.catalog.models import Product
from .utils import CatalogDataMixin, create_product

HEADERS = [
    'sku', 'name', 'slug', 'description', 'brand', 'categories', 'price',
    'quantity', 'type', 'is_visible', 'is_featured', 'published_at'
]


class ProductResourceTest(CatalogDataMixin, TestCase):
    """Test cases for the product import/export resource"""

    def setUp(self):
        self.mouse = create_product(self.logitech, [self.electronics, self.accessories])

    def import_rows(self, *rows):
        dataset = tablib.Dataset(*rows, headers=HEADERS)
        return ProductResource().import_data(dataset, dry_run=False)

    def test_export(self):
        dataset = ProductResource().export()
        self.assertEqual(dataset.headers, HEADERS)

        row = dataset.dict[0]
        self.assertEqual(row['sku'], 'WM-100')
        self.assertEqual(row['slug'], 'wireless-mouse')
        self.assertEqual(row['brand'], 'Logitech')
        self.assertCountEqual(row['categories'].split(','), ['Electronics', 'Accessories'])

    def test_import_creates_product(self):
        result = self.import_rows((
            'PB-010', 'Power Bank', 'ignored', 'Charges phones', 'Anker', 'Electronics',
            '35.00', '12', 'deliverable', '1', '0', '2024-05-01'
        ))
        self.assertFalse(result.has_errors())
        self.assertFalse(result.has_validation_errors())

        product = Product.objects.get(sku='PB-010')
        self.assertEqual(product.slug, 'power-bank')
        self.assertEqual(product.brand, self.anker)
        self.assertEqual(product.price, Decimal('35.00'))
        self.assertEqual(product.quantity, 12)
        self.assertTrue(product.is_visible)
        self.assertEqual(list(product.categories.all()), [self.electronics])

    def test_import_updates_by_sku(self):
        result = self.import_rows((
            'WM-100', 'Silent Wireless Mouse', '', '', 'Logitech', 'Accessories',
            '19.99', '40', 'deliverable', '1', '1', '2024-05-01'
        ))
        self.assertFalse(result.has_errors())

        self.mouse.refresh_from_db()
        self.assertEqual(Product.objects.count(), 1)
        self.assertEqual(self.mouse.name, 'Silent Wireless Mouse')
        self.assertEqual(self.mouse.slug, 'wireless-mouse')
        self.assertTrue(self.mouse.is_featured)
        self.assertEqual(list(self.mouse.categories.all()), [self.accessories])
