from django.db.models import Q
from django_filters import rest_framework as filters

from apps.shop.models import Category, Product, StockMovement


class CategoryFilter(filters.FilterSet):
    class Meta:
        model = Category
        fields = ['is_active']


class ProductFilter(filters.FilterSet):
    """Filter for the admin product list."""

    category = filters.NumberFilter(field_name='category_id')
    search = filters.CharFilter(method='filter_search')
    active = filters.BooleanFilter(field_name='is_active')
    featured = filters.BooleanFilter(field_name='is_featured')
    in_stock = filters.BooleanFilter(method='filter_in_stock')

    class Meta:
        model = Product
        fields = ['category', 'search', 'active', 'featured', 'in_stock']

    def filter_search(self, queryset, name, value):
        value = value.strip()
        if not value:
            return queryset
        return queryset.filter(Q(name__icontains=value) | Q(description__icontains=value))

    def filter_in_stock(self, queryset, name, value):
        # Relies on the available_stock annotation from the viewset queryset
        if value is True:
            return queryset.filter(available_stock__gt=0)
        elif value is False:
            return queryset.filter(available_stock__lte=0)
        return queryset


class StockMovementFilter(filters.FilterSet):
    product = filters.NumberFilter(field_name='product_id')
    variant = filters.NumberFilter(field_name='variant_id')

    class Meta:
        model = StockMovement
        fields = ['product', 'variant', 'movement_type']
