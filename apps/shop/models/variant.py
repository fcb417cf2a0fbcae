from decimal import Decimal

from django.db import models
from simple_history.models import HistoricalRecords


class ProductVariant(models.Model):
    """
    A stock-keeping unit of a product: one size/color combination with its
    own quantity and an optional price delta over the product price.
    """
    product = models.ForeignKey(
        'shop.Product',
        on_delete=models.CASCADE,
        related_name='variants',
        verbose_name='Produto'
    )
    size = models.CharField(
        max_length=50,
        blank=True,
        verbose_name='Tamanho'
    )
    color = models.CharField(
        max_length=50,
        blank=True,
        verbose_name='Cor'
    )
    sku = models.CharField(
        max_length=100,
        blank=True,
        verbose_name='SKU'
    )
    stock_quantity = models.PositiveIntegerField(
        default=0,
        verbose_name='Quantidade em estoque'
    )
    price_adjustment = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        verbose_name='Ajuste de preço',
        help_text='Somado ao preço do produto'
    )
    is_available = models.BooleanField(
        default=True,
        verbose_name='Disponível'
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

    class Meta:
        ordering = ['product', 'id']
        verbose_name = 'Variação'
        verbose_name_plural = 'Variações'

    def __str__(self):
        labels = [label for label in (self.size, self.color) if label]
        if not labels:
            return self.sku or f"{self.product.name} - Variação {self.pk}"
        return f"{self.product.name} - {' / '.join(labels)}"

    @property
    def final_price(self):
        return self.product.price + (self.price_adjustment or Decimal('0'))

    @property
    def is_in_stock(self):
        return self.is_available and self.stock_quantity > 0
