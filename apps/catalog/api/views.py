import logging

from django.contrib import admin
from rest_framework import viewsets, filters, permissions, status
from rest_framework.decorators import action
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend

from apps.catalog.exceptions import ProductWriteError, guard_product_write
from apps.catalog.models import Product
from apps.catalog.services import GlobalSearchService
from .permissions import ProductModelPermissions
from .serializers import BulkDeleteSerializer, ProductSerializer, ProductListSerializer
from .filters import ProductFilter

logger = logging.getLogger(__name__)


class ProductWriteFailed(APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = 'The product could not be saved. Please try again.'
    default_code = 'write_failed'


class ProductViewSet(viewsets.ModelViewSet):
    """
    Staff API endpoint for products.

    list: Product table (filters, search, ordering, pagination)
    retrieve: Product detail
    create: Create a product, slug derived from the name
    update: Update a product, slug unchanged
    delete: Delete a product
    """
    queryset = Product.objects.select_related('brand').prefetch_related('categories')
    permission_classes = [permissions.IsAdminUser, ProductModelPermissions]
    filterset_class = ProductFilter
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name', 'brand__name', 'price', 'quantity']
    ordering_fields = ['name', 'brand__name', 'is_visible', 'price', 'quantity', 'published_at']
    ordering = ['name']

    def get_serializer_class(self):
        if self.action == 'list':
            return ProductListSerializer
        return ProductSerializer

    def perform_create(self, serializer):
        try:
            with guard_product_write('save'):
                serializer.save()
        except ProductWriteError as exc:
            raise ProductWriteFailed(str(exc)) from exc

    def perform_update(self, serializer):
        try:
            with guard_product_write('save', serializer.instance):
                serializer.save()
        except ProductWriteError as exc:
            raise ProductWriteFailed(str(exc)) from exc

    def perform_destroy(self, instance):
        try:
            with guard_product_write('delete', instance):
                instance.delete()
        except ProductWriteError as exc:
            raise ProductWriteFailed(str(exc)) from exc

    @action(detail=False, methods=['post'])
    def bulk_delete(self, request):
        """
        Delete the selected products.

        Expected payload:
        {
            "ids": [1, 2, 3]
        }
        """
        serializer = BulkDeleteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        queryset = Product.objects.filter(pk__in=serializer.validated_data['ids'])
        try:
            with guard_product_write('delete'):
                _, per_model = queryset.delete()
        except ProductWriteError as exc:
            raise ProductWriteFailed(str(exc)) from exc

        deleted = per_model.get(Product._meta.label, 0)
        logger.info('Bulk deleted %d products', deleted)
        return Response({'deleted': deleted})

    @action(detail=False, methods=['get'])
    def search(self, request):
        """
        Global search over name, slug, description and brand name.

        Query params:
        - q: search terms (required)
        """
        term = request.query_params.get('q', '').strip()
        if not term:
            return Response(
                {'error': 'q is required'},
                status=status.HTTP_400_BAD_REQUEST
            )

        model_admin = admin.site.get_model_admin(Product)
        results = GlobalSearchService.search_model_admin(model_admin, request, term)
        return Response({'query': term, 'results': results})
