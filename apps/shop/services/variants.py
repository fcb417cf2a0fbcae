"""
Variant drafts edited in the product form, and stock aggregation.

Like the image list, `VariantList` is immutable: `add`, `remove` and
`update` return new lists. Position carries no meaning for variants.
"""

from dataclasses import dataclass, field, fields, replace
from decimal import Decimal

from django.core.exceptions import ValidationError

from .parsing import parse_decimal, parse_quantity

VARIANT_FIELDS = ('size', 'color', 'sku', 'stock_quantity', 'price_adjustment')


@dataclass(frozen=True)
class VariantDraft:
    size: str = ''
    color: str = ''
    sku: str = ''
    stock_quantity: int = 0
    price_adjustment: Decimal = field(default=Decimal('0.00'))

    @classmethod
    def from_dict(cls, data):
        """Build a draft from form input, parsing the numeric fields."""
        draft = cls()
        for name in VARIANT_FIELDS:
            if name in data:
                draft = draft.with_value(name, data[name])
        return draft

    def with_value(self, name, value):
        if name not in VARIANT_FIELDS:
            raise KeyError(f"Campo de variação desconhecido: {name}")
        if name == 'stock_quantity':
            value = parse_quantity(value)
        elif name == 'price_adjustment':
            value = parse_decimal(value, allow_negative=True) or Decimal('0.00')
        else:
            value = '' if value is None else str(value).strip()
        return replace(self, **{name: value})

    def to_record(self):
        return {f.name: getattr(self, f.name) for f in fields(self)}


class VariantList:
    """Immutable collection of `VariantDraft`."""

    def __init__(self, variants=()):
        self._variants = tuple(
            variant if isinstance(variant, VariantDraft) else _draft_from(variant)
            for variant in variants
        )

    def __len__(self):
        return len(self._variants)

    def __iter__(self):
        return iter(self._variants)

    def __getitem__(self, index):
        return self._variants[index]

    def __eq__(self, other):
        if not isinstance(other, VariantList):
            return NotImplemented
        return self._variants == other._variants

    def __repr__(self):
        return f"VariantList({list(self._variants)!r})"

    def _check_index(self, index):
        if not 0 <= index < len(self._variants):
            raise IndexError(f"Índice de variação fora do intervalo: {index}")

    def add(self, draft=None):
        return VariantList(self._variants + (draft or VariantDraft(),))

    def remove(self, index):
        self._check_index(index)
        return VariantList(self._variants[:index] + self._variants[index + 1:])

    def update(self, index, name, value):
        self._check_index(index)
        variants = list(self._variants)
        variants[index] = variants[index].with_value(name, value)
        return VariantList(variants)

    @property
    def total_stock(self):
        return sum(variant.stock_quantity for variant in self._variants)

    def to_records(self):
        return [variant.to_record() for variant in self._variants]


def _draft_from(variant):
    if isinstance(variant, dict):
        return VariantDraft.from_dict(variant)
    # A stored ProductVariant
    return VariantDraft(
        size=variant.size,
        color=variant.color,
        sku=variant.sku,
        stock_quantity=variant.stock_quantity,
        price_adjustment=variant.price_adjustment,
    )


def aggregate_stock(variants, fallback=0):
    """
    Stock shown for a product: the sum of its variants' quantities, or
    `fallback` (the product's own stock) when it has no variants.
    """
    variants = list(variants)
    if not variants:
        return fallback
    total = 0
    for variant in variants:
        quantity = variant['stock_quantity'] if isinstance(variant, dict) else variant.stock_quantity
        total += quantity or 0
    return total


def parse_variants(items):
    """
    Turn raw variant input into a `VariantList`. Errors are collected per
    position so the form can point at the offending row.
    """
    drafts = []
    errors = {}
    for index, item in enumerate(items):
        try:
            drafts.append(_draft_from(item) if not isinstance(item, VariantDraft) else item)
        except ValidationError as exc:
            errors[index] = exc.messages
    if errors:
        raise ValidationError(
            [
                ValidationError(f"Variação {index + 1}: {'; '.join(messages)}", code='invalid_variant')
                for index, messages in errors.items()
            ]
        )
    return VariantList(drafts)
