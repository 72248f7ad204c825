from django_filters import rest_framework as filters
from apps.catalog.models import Brand, Product


def brands_in_use(request):
    """Brands referenced by at least one product."""
    return Brand.objects.filter(products__isnull=False).distinct()


class ProductFilter(filters.FilterSet):
    """
    Filters of the product table.

    is_visible: true (only visible), false (only hidden), absent (all)
    brand: id of a brand used by some product
    """

    is_visible = filters.BooleanFilter(field_name='is_visible')
    brand = filters.ModelChoiceFilter(queryset=brands_in_use)

    class Meta:
        model = Product
        fields = ['is_visible', 'brand']
