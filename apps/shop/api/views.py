import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, mixins, status, viewsets
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.shop.models import Category, Product, StockMovement, StoreSettings
from apps.shop.services.catalog import catalog_snapshot, query_catalog
from apps.shop.services.product_save import ProductSaveError, save_product
from apps.shop.services.stock import record_movement

from .filters import CategoryFilter, ProductFilter, StockMovementFilter
from .serializers import (
    CatalogQuerySerializer,
    CategorySerializer,
    ProductDetailSerializer,
    ProductListSerializer,
    ProductWriteSerializer,
    StockMovementSerializer,
    StoreSettingsSerializer,
)

logger = logging.getLogger(__name__)

INVALID_DATA_MESSAGE = 'Dados inválidos.'


def _first_message(fields):
    for messages in fields.values():
        if isinstance(messages, dict):
            message = _first_message(messages)
        elif isinstance(messages, (list, tuple)) and messages:
            first = messages[0]
            message = _first_message(first) if isinstance(first, dict) else str(first)
        else:
            message = str(messages) if messages else None
        if message:
            return message
    return None


def validation_error_response(exc):
    """400 response with a headline message and the per-field errors."""
    if isinstance(exc, DjangoValidationError):
        if hasattr(exc, 'error_dict'):
            fields = exc.message_dict
        else:
            fields = {}
        message = _first_message(fields) or (exc.messages[0] if exc.messages else None)
    else:
        detail = exc.detail
        if isinstance(detail, dict):
            fields = detail
            message = _first_message(detail)
        else:
            fields = {}
            message = str(detail[0]) if detail else None
    return Response(
        {'error': message or INVALID_DATA_MESSAGE, 'fields': fields},
        status=status.HTTP_400_BAD_REQUEST,
    )


def server_error_response(message):
    return Response({'error': message}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class ShopErrorMixin:
    """Render validation errors from serializers and services in one shape."""

    def handle_exception(self, exc):
        if isinstance(exc, (ValidationError, DjangoValidationError)):
            return validation_error_response(exc)
        return super().handle_exception(exc)


class CategoryViewSet(ShopErrorMixin, viewsets.ModelViewSet):
    """
    API endpoint for categories.

    destroy: soft delete (is_active=False); pass ?hard=true to remove the row.
    """
    serializer_class = CategorySerializer
    filter_backends = [DjangoFilterBackend, filters.OrderingFilter]
    filterset_class = CategoryFilter
    ordering_fields = ['name', 'display_order']
    ordering = ['display_order', 'name']

    def get_queryset(self):
        queryset = Category.objects.all()
        if not self.request.user.is_authenticated:
            queryset = queryset.active()
        return queryset

    def destroy(self, request, *args, **kwargs):
        category = self.get_object()
        hard = request.query_params.get('hard', '').lower() in ('1', 'true', 'yes')
        try:
            if hard:
                category.delete()
            else:
                category.is_active = False
                category.save(update_fields=['is_active', 'updated_at'])
        except DatabaseError:
            logger.exception("Category delete failed (id=%s)", category.pk)
            return server_error_response('Erro ao excluir categoria')
        logger.info("Category %s deleted (hard=%s)", category.pk, hard)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ProductViewSet(ShopErrorMixin, viewsets.ModelViewSet):
    """
    API endpoint for products.

    list: products with total stock and primary image
    retrieve: product with ordered images and variants
    create / update: full product save, images and variants replaced
    destroy: soft delete (is_active=False)
    """
    http_method_names = ['get', 'post', 'put', 'delete', 'head', 'options']
    filter_backends = [DjangoFilterBackend, filters.OrderingFilter]
    filterset_class = ProductFilter
    ordering_fields = ['name', 'price', 'created_at', 'available_stock']
    ordering = ['-created_at', '-id']

    def get_serializer_class(self):
        if self.action == 'list':
            return ProductListSerializer
        elif self.action in ('create', 'update'):
            return ProductWriteSerializer
        return ProductDetailSerializer

    def get_queryset(self):
        queryset = (
            Product.objects.with_available_stock()
            .select_related('category')
            .prefetch_related('images')
        )
        if self.action == 'retrieve':
            queryset = queryset.prefetch_related('variants')
        if not self.request.user.is_authenticated:
            queryset = queryset.active()
        return queryset

    def list(self, request, *args, **kwargs):
        try:
            return super().list(request, *args, **kwargs)
        except DatabaseError:
            logger.exception("Product list failed")
            return server_error_response('Erro ao carregar produtos')

    def create(self, request, *args, **kwargs):
        return self._save(request, product=None, status_code=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        return self._save(request, product=self.get_object(), status_code=status.HTTP_200_OK)

    def _save(self, request, product, status_code):
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        images = data.pop('images', [])
        variants = data.pop('variants', [])
        try:
            product = save_product(data, images=images, variants=variants, product=product)
        except ProductSaveError as exc:
            return server_error_response(exc.message)

        product = self.get_queryset().prefetch_related('variants').get(pk=product.pk)
        return Response(ProductDetailSerializer(product).data, status=status_code)

    def destroy(self, request, *args, **kwargs):
        product = self.get_object()
        try:
            product.is_active = False
            product.save(update_fields=['is_active', 'updated_at'])
        except DatabaseError:
            logger.exception("Product delete failed (id=%s)", product.pk)
            return server_error_response('Erro ao excluir produto')
        logger.info("Product %s deactivated", product.pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


class CatalogView(ShopErrorMixin, APIView):
    """
    Public catalog: active products with stock, filtered by category and
    text, then sorted.
    """
    permission_classes = []

    def get(self, request):
        params = CatalogQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        query = params.validated_data
        try:
            products = catalog_snapshot()
        except DatabaseError:
            logger.exception("Catalog load failed")
            return server_error_response('Erro ao carregar produtos')

        products = query_catalog(
            products,
            category=query['category'],
            search=query['q'],
            sort=query['sort'],
        )
        return Response({
            'count': len(products),
            'results': ProductListSerializer(products, many=True).data,
        })


class StockMovementViewSet(ShopErrorMixin,
                           mixins.ListModelMixin,
                           mixins.CreateModelMixin,
                           viewsets.GenericViewSet):
    """Stock movements history; creating one applies it to the stock."""
    queryset = StockMovement.objects.select_related('product', 'created_by')
    serializer_class = StockMovementSerializer
    permission_classes = [IsAuthenticated]
    filterset_class = StockMovementFilter

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        try:
            movement = record_movement(
                data['product'],
                data['movement_type'],
                data['quantity'],
                variant=data.get('variant'),
                notes=data.get('notes', ''),
                user=request.user,
            )
        except DatabaseError:
            logger.exception("Stock movement failed (product id=%s)", data['product'].pk)
            return server_error_response('Erro ao registrar movimentação')
        return Response(self.get_serializer(movement).data, status=status.HTTP_201_CREATED)


class StoreSettingsView(ShopErrorMixin, APIView):
    """Store settings singleton. Defaults are returned until first saved."""

    def get(self, request):
        try:
            store_settings = StoreSettings.load()
        except DatabaseError:
            logger.exception("Settings load failed")
            return server_error_response('Erro ao carregar configurações')
        return Response(StoreSettingsSerializer(store_settings).data)

    def put(self, request):
        store_settings = StoreSettings.load()
        serializer = StoreSettingsSerializer(store_settings, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        try:
            serializer.save()
        except DatabaseError:
            logger.exception("Settings save failed")
            return server_error_response('Erro ao salvar configurações')
        logger.info("Store settings updated by %s", request.user)
        return Response(serializer.data)
