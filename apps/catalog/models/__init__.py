"""
Catalog models for the shop.

- Brand: label a product is sold under
- Category: hierarchical grouping, a product belongs to one or more
- Product: sellable item with price, stock and a picture
"""

from .brand import Brand
from .category import Category
from .product import Product, ProductType

__all__ = [
    'Brand',
    'Category',
    'Product',
    'ProductType',
]
