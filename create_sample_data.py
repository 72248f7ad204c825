"""
Script to create sample data for trying out the shop admin.
Run with: python manage.py shell < create_sample_data.py
"""
from apps.catalog.models import (
    Brand,
    Category,
    Product,
    ProductType,
)
from decimal import Decimal

# Create Brands
print("Creating brands...")

brands = {}
for name in ['Logitech', 'Anker', 'Penguin Books']:
    brands[name], _ = Brand.objects.get_or_create(name=name)

# Create Categories
print("Creating categories...")

electronics, _ = Category.objects.get_or_create(
    slug='electronics',
    defaults={'name': 'Electronics', 'display_order': 1}
)
accessories, _ = Category.objects.get_or_create(
    slug='accessories',
    defaults={'name': 'Accessories', 'parent': electronics, 'display_order': 2}
)
books, _ = Category.objects.get_or_create(
    slug='books',
    defaults={'name': 'Books', 'display_order': 3}
)

# Create Products
print("Creating products...")

products = [
    {
        'sku': 'WM-100', 'name': 'Wireless Mouse', 'brand': brands['Logitech'],
        'price': Decimal('24.99'), 'quantity': 50, 'type': ProductType.DELIVERABLE,
        'categories': [electronics, accessories],
    },
    {
        'sku': 'KB-200', 'name': 'Mechanical Keyboard', 'brand': brands['Logitech'],
        'price': Decimal('89.90'), 'quantity': 20, 'type': ProductType.DELIVERABLE,
        'categories': [electronics, accessories],
    },
    {
        'sku': 'PB-010', 'name': 'Power Bank 10000mAh', 'brand': brands['Anker'],
        'price': Decimal('35'), 'quantity': 0, 'type': ProductType.DELIVERABLE,
        'categories': [electronics], 'is_visible': False,
    },
    {
        'sku': 'EB-001', 'name': 'Python Cookbook (eBook)', 'brand': brands['Penguin Books'],
        'price': Decimal('19.99'), 'quantity': 100, 'type': ProductType.DOWNLOADABLE,
        'categories': [books], 'is_featured': True,
    },
]

for data in products:
    categories = data.pop('categories')
    product, created = Product.objects.get_or_create(sku=data.pop('sku'), defaults=data)
    if created:
        product.categories.set(categories)
    print(f"  - {product.name} ({product.slug})")

print(f"Total: {Product.objects.count()} products")
