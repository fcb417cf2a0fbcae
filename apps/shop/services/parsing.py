"""
Parsing of free-text numeric form input.

Prices and quantities follow the same policy: blank input is "no value",
anything that is not a finite, non-negative number is rejected.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from django.core.exceptions import ValidationError

CENTS = Decimal('0.01')

# Product.price and friends are DecimalField(max_digits=10, decimal_places=2)
MAX_AMOUNT = Decimal('1e8')
# PositiveIntegerField upper bound
MAX_QUANTITY = 2147483647


def is_blank(value):
    return value is None or (isinstance(value, str) and not value.strip())


def parse_decimal(value, allow_negative=False):
    """
    Parse a currency amount typed by a user ("100", "100.00", "100,00").
    Returns None for blank input.
    """
    if is_blank(value):
        return None
    if isinstance(value, bool):
        raise ValidationError('Valor inválido.', code='invalid')

    text = str(value).strip()
    if ',' in text and '.' not in text:
        text = text.replace(',', '.')
    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ValidationError('Valor inválido: %(value)s', code='invalid', params={'value': value})

    if not amount.is_finite():
        raise ValidationError('Valor inválido: %(value)s', code='invalid', params={'value': value})
    if amount < 0 and not allow_negative:
        raise ValidationError('O valor não pode ser negativo.', code='negative')
    try:
        amount = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValidationError('Valor muito alto: %(value)s', code='max_digits', params={'value': value})
    if abs(amount) >= MAX_AMOUNT:
        raise ValidationError('Valor muito alto: %(value)s', code='max_digits', params={'value': value})
    return amount


def parse_quantity(value):
    """Parse a stock quantity. Blank input means zero."""
    if is_blank(value):
        return 0
    if isinstance(value, bool):
        raise ValidationError('Quantidade inválida.', code='invalid')
    if isinstance(value, int):
        quantity = value
    else:
        try:
            quantity = int(str(value).strip())
        except ValueError:
            raise ValidationError(
                'Quantidade inválida: %(value)s', code='invalid', params={'value': value}
            )
    if quantity < 0:
        raise ValidationError('A quantidade não pode ser negativa.', code='negative')
    if quantity > MAX_QUANTITY:
        raise ValidationError(
            'Quantidade muito alta: %(value)s', code='too_large', params={'value': value}
        )
    return quantity
