from django.contrib import admin
from django.utils.html import format_html
from import_export import resources, fields
from import_export.admin import ImportExportModelAdmin
from import_export.widgets import ForeignKeyWidget
from adminsortable2.admin import SortableAdminMixin, SortableAdminBase, SortableInlineAdminMixin
from simple_history.admin import SimpleHistoryAdmin

from .models import (
    Category,
    Product,
    ProductImage,
    ProductVariant,
    StockMovement,
    StoreSettings,
)


# =============================================================================
# Import/Export Resources
# =============================================================================

class ProductResource(resources.ModelResource):
    """Resource for importing/exporting products."""

    category_name = fields.Field(
        column_name='category',
        attribute='category',
        widget=ForeignKeyWidget(Category, 'name')
    )

    class Meta:
        model = Product
        import_id_fields = ['slug']
        fields = (
            'slug', 'name', 'category_name', 'description', 'price',
            'compare_at_price', 'stock_quantity', 'is_active', 'is_featured'
        )
        export_order = fields


class ProductVariantResource(resources.ModelResource):
    """Resource for importing/exporting variants."""

    product_slug = fields.Field(
        column_name='product',
        attribute='product',
        widget=ForeignKeyWidget(Product, 'slug')
    )

    class Meta:
        model = ProductVariant
        fields = (
            'id', 'product_slug', 'size', 'color', 'sku',
            'stock_quantity', 'price_adjustment', 'is_available'
        )
        export_order = fields


# =============================================================================
# Inlines
# =============================================================================

class ProductImageInline(SortableInlineAdminMixin, admin.TabularInline):
    model = ProductImage
    extra = 0
    fields = ['image_url', 'alt_text', 'display_order', 'image_preview']
    readonly_fields = ['image_preview']

    def image_preview(self, obj):
        if obj.image_url:
            return format_html(
                '<img src="{}" style="max-height: 50px; max-width: 100px;" />',
                obj.image_url
            )
        return '-'
    image_preview.short_description = 'Preview'


class ProductVariantInline(admin.TabularInline):
    model = ProductVariant
    extra = 0
    fields = ['size', 'color', 'sku', 'stock_quantity', 'price_adjustment', 'is_available']


# =============================================================================
# Model Admins
# =============================================================================

@admin.register(Category)
class CategoryAdmin(SortableAdminMixin, admin.ModelAdmin):
    list_display = ['name', 'slug', 'product_count', 'is_active', 'display_order']
    list_filter = ['is_active']
    search_fields = ['name', 'slug', 'description']
    prepopulated_fields = {'slug': ('name',)}

    def product_count(self, obj):
        return obj.products.count()
    product_count.short_description = 'Produtos'


@admin.register(Product)
class ProductAdmin(SortableAdminBase, ImportExportModelAdmin, SimpleHistoryAdmin):
    resource_class = ProductResource
    list_display = [
        'name', 'category', 'price', 'compare_at_price', 'stock_display',
        'is_active', 'is_featured', 'primary_image_preview', 'created_at'
    ]
    list_filter = ['is_active', 'is_featured', 'category', 'created_at']
    list_editable = ['is_active', 'is_featured']
    search_fields = ['name', 'slug', 'description']
    prepopulated_fields = {'slug': ('name',)}
    readonly_fields = ['total_stock', 'is_on_sale', 'discount_percentage', 'created_at', 'updated_at']
    inlines = [ProductImageInline, ProductVariantInline]
    list_per_page = 50

    fieldsets = (
        (None, {
            'fields': ('category', 'name', 'slug', 'description', 'is_active', 'is_featured')
        }),
        ('Preços', {
            'fields': ('price', 'compare_at_price', 'is_on_sale', 'discount_percentage')
        }),
        ('Estoque', {
            'fields': ('stock_quantity', 'total_stock')
        }),
        ('Informações', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    actions = ['activate_products', 'deactivate_products']

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('category').prefetch_related('images', 'variants')

    def save_related(self, request, form, formsets, change):
        super().save_related(request, form, formsets, change)
        # The first image after reordering is the primary one
        images = list(form.instance.images.order_by('display_order', 'id'))
        for index, image in enumerate(images):
            image.is_primary = index == 0
        ProductImage.objects.bulk_update(images, ['is_primary'])

    def stock_display(self, obj):
        stock = obj.total_stock
        if stock <= 0:
            return format_html('<span style="color: red;">Sem estoque</span>')
        return stock
    stock_display.short_description = 'Estoque'

    def primary_image_preview(self, obj):
        img = obj.primary_image
        if img:
            return format_html(
                '<img src="{}" style="max-height: 40px; max-width: 60px;" />',
                img.image_url
            )
        return '-'
    primary_image_preview.short_description = 'Imagem'

    @admin.action(description='Ativar produtos selecionados')
    def activate_products(self, request, queryset):
        count = queryset.update(is_active=True)
        self.message_user(request, f'{count} produtos ativados.')

    @admin.action(description='Desativar produtos selecionados')
    def deactivate_products(self, request, queryset):
        count = queryset.update(is_active=False)
        self.message_user(request, f'{count} produtos desativados.')


@admin.register(ProductVariant)
class ProductVariantAdmin(ImportExportModelAdmin, SimpleHistoryAdmin):
    resource_class = ProductVariantResource
    list_display = ['product', 'size', 'color', 'sku', 'stock_quantity', 'final_price', 'is_available']
    list_filter = ['is_available', 'product__category']
    list_editable = ['stock_quantity', 'is_available']
    search_fields = ['sku', 'size', 'color', 'product__name']
    autocomplete_fields = ['product']


@admin.register(StockMovement)
class StockMovementAdmin(admin.ModelAdmin):
    list_display = ['product', 'variant', 'movement_type', 'quantity', 'created_by', 'created_at']
    list_filter = ['movement_type', 'created_at']
    search_fields = ['product__name', 'variant__sku', 'notes']
    readonly_fields = ['product', 'variant', 'movement_type', 'quantity', 'notes', 'created_by', 'created_at']
    date_hierarchy = 'created_at'

    # Movements change stock; they are only created through the API
    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(StoreSettings)
class StoreSettingsAdmin(admin.ModelAdmin):
    list_display = ['store_name', 'contact_email', 'instagram_handle', 'updated_at']

    def has_add_permission(self, request):
        return not StoreSettings.objects.exists()


# =============================================================================
# Admin Site Configuration
# =============================================================================

admin.site.site_header = 'Webber Mood Admin'
admin.site.site_title = 'Webber Mood'
admin.site.index_title = 'Painel de Administração'
