from django.utils.text import slugify


def product_slug(name):
    """
    Canonical slug of a product name: lowercase ASCII words joined by hyphens.

    Example: "Café Crème_2 (Large)" -> "cafe-creme-2-large"
    """
    return slugify((name or '').replace('_', ' '))
