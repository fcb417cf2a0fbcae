from django.conf import settings
from django.db import models


class StockMovement(models.Model):
    """
    Audit record of a stock change. Created by the stock service, which also
    applies the quantity change to the variant (or to the product when the
    movement has no variant).
    """
    IN = 'in'
    OUT = 'out'
    ADJUSTMENT = 'adjustment'
    MOVEMENT_TYPE_CHOICES = [
        (IN, 'Entrada'),
        (OUT, 'Saída'),
        (ADJUSTMENT, 'Ajuste'),
    ]

    product = models.ForeignKey(
        'shop.Product',
        on_delete=models.CASCADE,
        related_name='stock_movements',
        verbose_name='Produto'
    )
    variant = models.ForeignKey(
        'shop.ProductVariant',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='stock_movements',
        verbose_name='Variação'
    )
    movement_type = models.CharField(
        max_length=20,
        choices=MOVEMENT_TYPE_CHOICES,
        verbose_name='Tipo'
    )
    quantity = models.IntegerField(
        verbose_name='Quantidade'
    )
    notes = models.TextField(
        blank=True,
        verbose_name='Observações'
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        verbose_name='Registrado por'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Registrado em'
    )

    class Meta:
        ordering = ['-created_at', '-id']
        verbose_name = 'Movimentação de Estoque'
        verbose_name_plural = 'Movimentações de Estoque'

    def __str__(self):
        return f"{self.product.name} - {self.get_movement_type_display()}: {self.quantity}"

    @property
    def quantity_change(self):
        """Signed change applied to the stock."""
        if self.movement_type == self.OUT:
            return -self.quantity
        return self.quantity
