"""
Create-or-update of a product together with its images and variants.

Images and variants are never patched one by one: every save deletes the
product's current sets and inserts the sets from the form. All of it runs in
one transaction, so a failure in any step leaves the product as it was.
"""

import logging

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction
from simple_history.utils import bulk_create_with_history

from apps.shop.models import Category, Product, ProductImage, ProductVariant

from .images import ImageList
from .parsing import is_blank, parse_decimal, parse_quantity
from .slugs import slugify, unique_slug
from .variants import VariantList, parse_variants

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = {
    'name': 'Nome',
    'price': 'Preço',
    'category': 'Categoria',
}


class ProductSaveError(Exception):
    """The data layer failed while persisting a product."""

    def __init__(self, message='Erro ao salvar produto'):
        super().__init__(message)
        self.message = message


def get_max_images():
    return getattr(settings, 'SHOP_MAX_PRODUCT_IMAGES', 5)


def clean_product_fields(data):
    """
    Validate and normalize the scalar fields of the product form.
    Does not touch the database. Raises ValidationError with a dict of
    per-field messages.
    """
    errors = {}
    for name, label in REQUIRED_FIELDS.items():
        value = data.get(name)
        if is_blank(value):
            errors[name] = [f'{label} é obrigatório.']
    if errors:
        raise ValidationError(errors)

    cleaned = {
        'name': str(data['name']).strip(),
        'description': (data.get('description') or '').strip(),
        'is_active': bool(data.get('is_active', True)),
        'is_featured': bool(data.get('is_featured', False)),
        'category': data['category'],
    }

    for name, parser in (
        ('price', parse_decimal),
        ('compare_at_price', parse_decimal),
        ('stock_quantity', parse_quantity),
    ):
        try:
            cleaned[name] = parser(data.get(name))
        except ValidationError as exc:
            errors[name] = exc.messages

    slug = data.get('slug')
    if not is_blank(slug):
        cleaned['slug'] = slugify(slug)
        if not cleaned['slug']:
            errors['slug'] = ['Slug inválido.']

    if errors:
        raise ValidationError(errors)
    return cleaned


def _resolve_category(category):
    if isinstance(category, Category):
        return category
    try:
        return Category.objects.get(pk=category)
    except (Category.DoesNotExist, ValueError, TypeError):
        raise ValidationError({'category': ['Categoria não encontrada.']})


def save_product(data, images=(), variants=(), product=None):
    """
    Create (`product=None`) or update a product from form data.

    `images` is an ordered sequence of ImageRef/dicts (url, path, alt);
    `variants` a sequence of VariantDraft/dicts. Returns the saved product.

    Raises ValidationError before any write when the input is invalid, and
    ProductSaveError when the database fails; in that case nothing is kept.
    """
    cleaned = clean_product_fields(data)
    try:
        image_list = ImageList(images, max_images=get_max_images())
    except ValidationError as exc:
        raise ValidationError({'images': exc.messages})
    try:
        variant_list = parse_variants(variants)
    except ValidationError as exc:
        raise ValidationError({'variants': exc.messages})

    category = _resolve_category(cleaned.pop('category'))
    _check_slug_available(cleaned.get('slug'), product)
    creating = product is None
    action = 'create' if creating else 'update'

    try:
        with transaction.atomic():
            product = _upsert_product(product, cleaned, category)
            _replace_images(product, image_list)
            _replace_variants(product, variant_list)
    except DatabaseError as exc:
        logger.exception(
            "Product %s failed (product id=%s)", action, getattr(product, 'pk', None)
        )
        raise ProductSaveError() from exc

    logger.info(
        "Product %s: id=%s slug=%s images=%d variants=%d",
        action, product.pk, product.slug, len(image_list), len(variant_list),
    )
    return product


def _check_slug_available(slug, product):
    """An explicit slug must be free; only derived slugs get a numeric suffix."""
    if not slug:
        return
    queryset = Product.objects.filter(slug=slug)
    if product is not None:
        queryset = queryset.exclude(pk=product.pk)
    if queryset.exists():
        raise ValidationError({'slug': ['Já existe um produto com este slug.']})


def _upsert_product(product, cleaned, category):
    if product is None:
        product = Product()
    explicit_slug = cleaned.pop('slug', None)
    for name, value in cleaned.items():
        setattr(product, name, value)
    product.category = category
    if explicit_slug:
        product.slug = explicit_slug
    elif not product.slug:
        # Existing products keep their slug when the form leaves it blank
        product.slug = unique_slug(Product, product.name, exclude_pk=product.pk)
    product.save()
    return product


def _replace_images(product, image_list):
    ProductImage.objects.filter(product=product).delete()
    ProductImage.objects.bulk_create(
        [ProductImage(product=product, **record) for record in image_list.to_records()]
    )


def _replace_variants(product, variant_list):
    ProductVariant.objects.filter(product=product).delete()
    new_variants = [
        ProductVariant(product=product, **record) for record in variant_list.to_records()
    ]
    if new_variants:
        bulk_create_with_history(new_variants, ProductVariant)


def load_product(pk):
    """
    Fetch a product for editing: the instance plus its ImageList and
    VariantList. Raises Product.DoesNotExist for unknown ids.
    """
    product = (
        Product.objects.select_related('category')
        .prefetch_related('images', 'variants')
        .get(pk=pk)
    )
    images = ImageList.from_records(product.images.all(), max_images=None)
    variants = VariantList(product.variants.all())
    return product, images, variants
