from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import (
    CatalogView,
    CategoryViewSet,
    ProductViewSet,
    StockMovementViewSet,
    StoreSettingsView,
)

router = DefaultRouter()
router.register(r'categories', CategoryViewSet, basename='category')
router.register(r'products', ProductViewSet, basename='product')
router.register(r'stock-movements', StockMovementViewSet, basename='stock-movement')

urlpatterns = [
    path('catalog/', CatalogView.as_view(), name='catalog'),
    path('settings/', StoreSettingsView.as_view(), name='store-settings'),
    path('', include(router.urls)),
]
