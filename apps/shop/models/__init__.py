"""
Shop models for the fashion catalog.

Model Hierarchy:
- Category: Product grouping shown in the catalog filter (Vestidos, Blusas)
- Product: Base product with price, featured/active flags
- ProductImage: Ordered image references; the first one is the primary
- ProductVariant: Size/color SKU with its own stock and price adjustment
- StockMovement: Audit trail of stock entries, exits and adjustments
- StoreSettings: Single row with the store's contact information
"""

from .category import Category
from .product import Product, ProductImage
from .variant import ProductVariant
from .stock import StockMovement
from .store_settings import StoreSettings

__all__ = [
    'Category',
    'Product',
    'ProductImage',
    'ProductVariant',
    'StockMovement',
    'StoreSettings',
]
