from django.db import models


class StoreSettings(models.Model):
    """Store-wide contact and presentation settings (a single row)."""

    DEFAULTS = {
        'store_name': 'Webber Mood',
        'store_description': 'Estilo é sobre sentir, é vestir.',
        'contact_email': '',
        'contact_phone': '',
        'instagram_handle': '@webbermood_use',
        'whatsapp_number': '',
        'address': 'Petrópolis, RJ',
        'shipping_info': 'Envio para todo o Brasil',
    }

    store_name = models.CharField(
        max_length=200,
        default=DEFAULTS['store_name'],
        verbose_name='Nome da loja'
    )
    store_description = models.TextField(
        blank=True,
        default=DEFAULTS['store_description'],
        verbose_name='Descrição'
    )
    contact_email = models.EmailField(
        blank=True,
        verbose_name='E-mail de contato'
    )
    contact_phone = models.CharField(
        max_length=30,
        blank=True,
        verbose_name='Telefone'
    )
    instagram_handle = models.CharField(
        max_length=100,
        blank=True,
        default=DEFAULTS['instagram_handle'],
        verbose_name='Instagram'
    )
    whatsapp_number = models.CharField(
        max_length=30,
        blank=True,
        verbose_name='WhatsApp'
    )
    address = models.CharField(
        max_length=255,
        blank=True,
        default=DEFAULTS['address'],
        verbose_name='Endereço'
    )
    shipping_info = models.CharField(
        max_length=255,
        blank=True,
        default=DEFAULTS['shipping_info'],
        verbose_name='Informações de envio'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Atualizado em'
    )

    class Meta:
        verbose_name = 'Configurações da Loja'
        verbose_name_plural = 'Configurações da Loja'

    def __str__(self):
        return self.store_name

    @classmethod
    def load(cls):
        """Return the stored settings, or an unsaved instance with the defaults."""
        return cls.objects.order_by('pk').first() or cls(**cls.DEFAULTS)
