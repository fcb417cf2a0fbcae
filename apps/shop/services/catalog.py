"""
Public catalog: a snapshot of sellable products, filtered and sorted in
memory. The whole view is recomputed from the snapshot on every request;
category and text filters commute, the sort always runs last.
"""

import unicodedata

from apps.shop.models import Product

ALL_CATEGORIES = 'all'

SORT_NEWEST = 'newest'
SORT_PRICE_ASC = 'price-asc'
SORT_PRICE_DESC = 'price-desc'
SORT_NAME = 'name'

SORT_CHOICES = [
    (SORT_NEWEST, 'Mais recentes'),
    (SORT_PRICE_ASC, 'Menor preço'),
    (SORT_PRICE_DESC, 'Maior preço'),
    (SORT_NAME, 'Nome (A-Z)'),
]


def _get(item, name):
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)


def _category_of(item):
    value = _get(item, 'category_id')
    if value is None and isinstance(item, dict):
        value = item.get('category')
    return value


def collation_key(text):
    """Accent- and case-insensitive sort key, close to pt-BR collation."""
    text = text or ''
    folded = unicodedata.normalize('NFKD', text)
    base = ''.join(ch for ch in folded if not unicodedata.combining(ch))
    return (base.casefold(), text)


def filter_by_category(items, category):
    if not category or str(category) == ALL_CATEGORIES:
        return list(items)
    return [item for item in items if str(_category_of(item)) == str(category)]


def filter_by_text(items, text):
    if not text:
        return list(items)
    needle = text.lower()
    return [
        item for item in items
        if needle in (_get(item, 'name') or '').lower()
        or needle in (_get(item, 'description') or '').lower()
    ]


def sort_products(items, sort=SORT_NEWEST):
    items = list(items)
    if sort == SORT_NEWEST:
        # The snapshot is already newest first
        return items
    if sort == SORT_PRICE_ASC:
        return sorted(items, key=lambda item: _get(item, 'price'))
    if sort == SORT_PRICE_DESC:
        return sorted(items, key=lambda item: _get(item, 'price'), reverse=True)
    if sort == SORT_NAME:
        return sorted(items, key=lambda item: collation_key(_get(item, 'name')))
    raise ValueError(f"Unknown sort mode: {sort!r}")


def query_catalog(items, category=ALL_CATEGORIES, search='', sort=SORT_NEWEST):
    """Category filter, then text filter, then sort."""
    result = filter_by_category(items, category)
    result = filter_by_text(result, search)
    return sort_products(result, sort)


def catalog_snapshot():
    """
    Active products with available stock, newest first, with category and
    images loaded.
    """
    return list(
        Product.objects.active()
        .in_stock()
        .select_related('category')
        .prefetch_related('images', 'variants')
        .order_by('-created_at', '-id')
    )
