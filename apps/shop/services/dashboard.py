from decimal import Decimal

from django.conf import settings

from apps.shop.models import Category, Product

RECENT_PRODUCTS = 5


def get_low_stock_threshold():
    return getattr(settings, 'SHOP_LOW_STOCK_THRESHOLD', 5)


def dashboard_stats():
    """Summary numbers for the admin panel home."""
    products = list(Product.objects.with_available_stock())
    threshold = get_low_stock_threshold()

    total_value = sum(
        (product.price * product.available_stock for product in products),
        Decimal('0.00'),
    )
    recent = sorted(products, key=lambda p: (p.created_at, p.pk), reverse=True)[:RECENT_PRODUCTS]

    return {
        'total_products': len(products),
        'active_products': sum(1 for product in products if product.is_active),
        'total_categories': Category.objects.active().count(),
        'low_stock_products': sum(1 for product in products if product.available_stock <= threshold),
        'total_value': total_value,
        'recent_products': [
            {
                'id': product.pk,
                'name': product.name,
                'price': product.price,
                'stock_quantity': product.available_stock,
                'created_at': product.created_at,
            }
            for product in recent
        ],
    }
