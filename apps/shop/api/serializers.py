from rest_framework import serializers

from apps.shop.models import (
    Category,
    Product,
    ProductImage,
    ProductVariant,
    StockMovement,
    StoreSettings,
)
from apps.shop.services.catalog import ALL_CATEGORIES, SORT_CHOICES, SORT_NEWEST
from apps.shop.services.slugs import slugify


# =============================================================================
# Category Serializers
# =============================================================================

class CategorySerializer(serializers.ModelSerializer):
    slug = serializers.CharField(max_length=200, required=False, allow_blank=True)

    class Meta:
        model = Category
        fields = [
            'id', 'name', 'slug', 'description', 'image_url',
            'is_active', 'display_order', 'created_at', 'updated_at'
        ]
        read_only_fields = ['created_at', 'updated_at']

    def validate_slug(self, value):
        slug = slugify(value)
        if value and not slug:
            raise serializers.ValidationError('Slug inválido.')
        queryset = Category.objects.filter(slug=slug)
        if self.instance is not None:
            queryset = queryset.exclude(pk=self.instance.pk)
        if slug and queryset.exists():
            raise serializers.ValidationError('Já existe uma categoria com este slug.')
        return slug

    def update(self, instance, validated_data):
        # Keep the current slug unless a new one is given
        if not validated_data.get('slug'):
            validated_data.pop('slug', None)
        return super().update(instance, validated_data)


# =============================================================================
# Image / Variant Serializers
# =============================================================================

class ProductImageSerializer(serializers.ModelSerializer):
    class Meta:
        model = ProductImage
        fields = [
            'id', 'image_url', 'storage_path', 'alt_text',
            'display_order', 'is_primary'
        ]


class ProductVariantSerializer(serializers.ModelSerializer):
    final_price = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)
    is_in_stock = serializers.BooleanField(read_only=True)

    class Meta:
        model = ProductVariant
        fields = [
            'id', 'size', 'color', 'sku', 'stock_quantity',
            'price_adjustment', 'final_price', 'is_available', 'is_in_stock'
        ]


# =============================================================================
# Product Serializers
# =============================================================================

class ProductListSerializer(serializers.ModelSerializer):
    """Product list with stock and primary image."""
    category_name = serializers.CharField(source='category.name', read_only=True, default=None)
    total_stock = serializers.SerializerMethodField()
    primary_image = serializers.SerializerMethodField()
    is_on_sale = serializers.BooleanField(read_only=True)
    discount_percentage = serializers.IntegerField(read_only=True)

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'slug', 'price', 'compare_at_price',
            'category', 'category_name', 'is_active', 'is_featured',
            'is_on_sale', 'discount_percentage',
            'total_stock', 'primary_image', 'created_at'
        ]

    def get_total_stock(self, obj):
        # Use the queryset annotation when present
        available = getattr(obj, 'available_stock', None)
        if available is not None:
            return available
        return obj.total_stock

    def get_primary_image(self, obj):
        image = obj.primary_image
        return image.image_url if image else None


class ProductDetailSerializer(ProductListSerializer):
    """Full product with ordered images and variants."""
    images = ProductImageSerializer(many=True, read_only=True)
    variants = ProductVariantSerializer(many=True, read_only=True)

    class Meta(ProductListSerializer.Meta):
        fields = ProductListSerializer.Meta.fields + [
            'description', 'stock_quantity', 'images', 'variants', 'updated_at'
        ]


class ImageInputSerializer(serializers.Serializer):
    url = serializers.CharField(max_length=500)
    path = serializers.CharField(max_length=500, required=False, allow_blank=True, default='')
    alt = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')


class VariantInputSerializer(serializers.Serializer):
    # Numbers arrive as free text; the save service parses them
    size = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    color = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    sku = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    stock_quantity = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    price_adjustment = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class ProductWriteSerializer(serializers.Serializer):
    """
    Shape of the product form. Only types are checked here: required
    fields and numbers are validated by the save service.
    """
    name = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    slug = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    price = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    compare_at_price = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    category = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    stock_quantity = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    is_active = serializers.BooleanField(required=False, default=True)
    is_featured = serializers.BooleanField(required=False, default=False)
    images = ImageInputSerializer(many=True, required=False, default=list)
    variants = VariantInputSerializer(many=True, required=False, default=list)


# =============================================================================
# Catalog / Stock / Settings
# =============================================================================

class CatalogQuerySerializer(serializers.Serializer):
    category = serializers.CharField(required=False, allow_blank=True, default=ALL_CATEGORIES)
    q = serializers.CharField(required=False, allow_blank=True, default='')
    sort = serializers.ChoiceField(choices=SORT_CHOICES, required=False, default=SORT_NEWEST)


class StockMovementSerializer(serializers.ModelSerializer):
    product_name = serializers.CharField(source='product.name', read_only=True)
    created_by_username = serializers.CharField(
        source='created_by.username', read_only=True, default=None
    )
    quantity = serializers.IntegerField()

    class Meta:
        model = StockMovement
        fields = [
            'id', 'product', 'product_name', 'variant', 'movement_type',
            'quantity', 'notes', 'created_by', 'created_by_username', 'created_at'
        ]
        read_only_fields = ['created_by', 'created_at']


class StoreSettingsSerializer(serializers.ModelSerializer):
    class Meta:
        model = StoreSettings
        fields = [
            'store_name', 'store_description', 'contact_email', 'contact_phone',
            'instagram_handle', 'whatsapp_number', 'address', 'shipping_info',
            'updated_at'
        ]
        read_only_fields = ['updated_at']
