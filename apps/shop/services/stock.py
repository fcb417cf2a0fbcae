import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import F

from apps.shop.models import Product, ProductVariant, StockMovement

from .parsing import MAX_QUANTITY

logger = logging.getLogger(__name__)

MOVEMENT_TYPES = [choice for choice, _ in StockMovement.MOVEMENT_TYPE_CHOICES]


def _clean_quantity(movement_type, quantity):
    if movement_type not in MOVEMENT_TYPES:
        raise ValidationError(
            {'movement_type': ['Tipo deve ser in, out ou adjustment.']}
        )
    if isinstance(quantity, bool):
        raise ValidationError({'quantity': ['Quantidade inválida.']})
    try:
        quantity = int(quantity)
    except (TypeError, ValueError):
        raise ValidationError({'quantity': ['Quantidade inválida.']})
    if quantity == 0:
        raise ValidationError({'quantity': ['Quantidade é obrigatória.']})
    if movement_type != StockMovement.ADJUSTMENT and quantity < 0:
        raise ValidationError({'quantity': ['Quantidade deve ser positiva.']})
    if abs(quantity) > MAX_QUANTITY:
        raise ValidationError(
            {'quantity': ValidationError('Quantidade muito alta.', code='too_large')}
        )
    return quantity


def apply_stock_change(model, pk, delta):
    """
    Add `delta` to the stock of one Product or ProductVariant in a single
    UPDATE. Keeps the stock between zero and the column maximum.
    """
    queryset = model.objects.filter(pk=pk)
    if delta < 0:
        queryset = queryset.filter(stock_quantity__gte=-delta)
    else:
        queryset = queryset.filter(stock_quantity__lte=MAX_QUANTITY - delta)
    updated = queryset.update(stock_quantity=F('stock_quantity') + delta)
    if not updated:
        if delta < 0:
            raise ValidationError({'quantity': ['Estoque insuficiente.']})
        raise ValidationError(
            {'quantity': ValidationError('Estoque excede o máximo permitido.', code='too_large')}
        )


def record_movement(product, movement_type, quantity, variant=None, notes='', user=None):
    """
    Register a stock movement and apply it: to the variant when one is
    given, otherwise to the product's own stock.
    """
    quantity = _clean_quantity(movement_type, quantity)
    if variant is not None and variant.product_id != product.pk:
        raise ValidationError({'variant': ['Variação não pertence ao produto.']})

    movement = StockMovement(
        product=product,
        variant=variant,
        movement_type=movement_type,
        quantity=quantity,
        notes=notes or '',
        created_by=user if user is not None and user.is_authenticated else None,
    )
    with transaction.atomic():
        if variant is not None:
            apply_stock_change(ProductVariant, variant.pk, movement.quantity_change)
        else:
            apply_stock_change(Product, product.pk, movement.quantity_change)
        movement.save()

    logger.info(
        "Stock movement %s %+d on product=%s variant=%s",
        movement_type, movement.quantity_change, product.pk,
        variant.pk if variant is not None else None,
    )
    return movement
