from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Sum
from django.db.models.functions import Coalesce
from simple_history.models import HistoricalRecords

from apps.shop.services.slugs import unique_slug
from apps.shop.services.variants import aggregate_stock


class ProductQuerySet(models.QuerySet):
    def active(self):
        return self.filter(is_active=True)

    def with_available_stock(self):
        """
        Annotate `available_stock`: the sum of the variants' stock, or the
        product's own stock when it has no variants.
        """
        return self.annotate(
            variant_stock=Sum('variants__stock_quantity'),
        ).annotate(
            available_stock=Coalesce(
                'variant_stock', 'stock_quantity',
                output_field=models.IntegerField(),
            ),
        )

    def in_stock(self):
        return self.with_available_stock().filter(available_stock__gt=0)


class Product(models.Model):
    """
    A catalog product.
    Example: "Vestido Floral Midi", sold in sizes/colors through its variants.
    """
    category = models.ForeignKey(
        'shop.Category',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='products',
        verbose_name='Categoria'
    )
    name = models.CharField(
        max_length=255,
        verbose_name='Nome'
    )
    slug = models.SlugField(
        max_length=255,
        unique=True,
        blank=True,
        verbose_name='Slug'
    )
    description = models.TextField(
        blank=True,
        verbose_name='Descrição'
    )
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name='Preço'
    )
    compare_at_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name='Preço "De"',
        help_text='Preço "de" para mostrar desconto'
    )
    stock_quantity = models.PositiveIntegerField(
        default=0,
        verbose_name='Quantidade em estoque',
        help_text='Usado apenas quando o produto não tem variações'
    )
    is_active = models.BooleanField(
        default=True,
        verbose_name='Ativo'
    )
    is_featured = models.BooleanField(
        default=False,
        verbose_name='Destaque'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Criado em'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Atualizado em'
    )

    # History tracking
    history = HistoricalRecords()

    objects = ProductQuerySet.as_manager()

    class Meta:
        ordering = ['-created_at', '-id']
        verbose_name = 'Produto'
        verbose_name_plural = 'Produtos'

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = unique_slug(Product, self.name, exclude_pk=self.pk)
        super().save(*args, **kwargs)

    @property
    def total_stock(self):
        """Variant stock sum, falling back to the product's own stock."""
        return aggregate_stock(self.variants.all(), fallback=self.stock_quantity)

    @property
    def primary_image(self):
        images = list(self.images.all())
        for image in images:
            if image.is_primary:
                return image
        return images[0] if images else None

    @property
    def is_on_sale(self):
        return bool(self.compare_at_price and self.compare_at_price > self.price)

    @property
    def discount_percentage(self):
        if not self.is_on_sale:
            return 0
        return int(((self.compare_at_price - self.price) / self.compare_at_price) * 100)


class ProductImage(models.Model):
    """
    Image reference for a product. The file lives in object storage; only the
    public URL and the storage path are kept here.
    """
    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name='images',
        verbose_name='Produto'
    )
    image_url = models.CharField(
        max_length=500,
        verbose_name='URL da imagem'
    )
    storage_path = models.CharField(
        max_length=500,
        blank=True,
        verbose_name='Caminho no storage'
    )
    alt_text = models.CharField(
        max_length=255,
        blank=True,
        verbose_name='Texto alternativo'
    )
    display_order = models.PositiveIntegerField(
        default=0,
        verbose_name='Ordem de exibição'
    )
    is_primary = models.BooleanField(
        default=False,
        verbose_name='Imagem principal'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['display_order']
        verbose_name = 'Imagem do Produto'
        verbose_name_plural = 'Imagens do Produto'

    def __str__(self):
        return f"{self.product.name} - Imagem {self.display_order}"
