from rest_framework import serializers
from apps.catalog.models import Category, Product
from apps.catalog.utils import product_slug


class ProductListSerializer(serializers.ModelSerializer):
    """Row of the product table."""
    brand_name = serializers.CharField(source='brand.name', read_only=True)
    image_url = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = [
            'id', 'image_url', 'name', 'slug', 'brand', 'brand_name',
            'is_visible', 'price', 'quantity', 'published_at', 'type'
        ]

    def get_image_url(self, obj):
        url = obj.image_url
        if url:
            request = self.context.get('request')
            if request:
                return request.build_absolute_uri(url)
        return url


class ProductSerializer(serializers.ModelSerializer):
    """
    Create/update serializer with the same rules as the admin form.
    The slug is read-only: derived from the name on create, kept on update.
    """
    brand_name = serializers.CharField(source='brand.name', read_only=True)
    categories = serializers.PrimaryKeyRelatedField(
        many=True,
        queryset=Category.objects.all(),
        allow_empty=False
    )

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'slug', 'description', 'sku', 'price', 'quantity',
            'type', 'is_visible', 'is_featured', 'published_at', 'image',
            'brand', 'brand_name', 'categories', 'created_at', 'updated_at'
        ]
        read_only_fields = ['slug', 'created_at', 'updated_at']

    def validate(self, attrs):
        if self.instance is None:
            slug = product_slug(attrs.get('name', ''))
            if not slug:
                raise serializers.ValidationError({
                    'name': ['A slug could not be derived from this name.']
                })
            if Product.objects.filter(slug=slug).exists():
                raise serializers.ValidationError({
                    'slug': ['Product with this Slug already exists.']
                })
            attrs['slug'] = slug
        return attrs

    def get_extra_kwargs(self):
        extra_kwargs = super().get_extra_kwargs()
        if self.instance is not None:
            # Updates keep the stored image unless a new one is uploaded
            extra_kwargs.setdefault('image', {})['required'] = False
        return extra_kwargs


class BulkDeleteSerializer(serializers.Serializer):
    """Payload of the bulk delete action: {"ids": [1, 2, 3]}"""
    ids = serializers.ListField(
        child=serializers.IntegerField(min_value=1),
        allow_empty=False
    )
