from .serializers import (
    CatalogQuerySerializer,
    CategorySerializer,
    ProductDetailSerializer,
    ProductImageSerializer,
    ProductListSerializer,
    ProductVariantSerializer,
    ProductWriteSerializer,
    StockMovementSerializer,
    StoreSettingsSerializer,
)

__all__ = [
    'CatalogQuerySerializer',
    'CategorySerializer',
    'ProductDetailSerializer',
    'ProductImageSerializer',
    'ProductListSerializer',
    'ProductVariantSerializer',
    'ProductWriteSerializer',
    'StockMovementSerializer',
    'StoreSettingsSerializer',
]
