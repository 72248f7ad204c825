from .serializers import (
    ProductSerializer,
    ProductListSerializer,
)

__all__ = [
    'ProductSerializer',
    'ProductListSerializer',
]
