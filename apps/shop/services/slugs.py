import re
import unicodedata

_NON_ALPHANUMERIC = re.compile(r'[^a-z0-9]+')


def slugify(value):
    """
    Build a URL-safe slug: strip diacritics, lower-case and replace every run
    of non-alphanumeric characters with a single hyphen.

    >>> slugify('Vestido Floral Ação')
    'vestido-floral-acao'
    """
    value = unicodedata.normalize('NFKD', str(value))
    value = value.encode('ascii', 'ignore').decode('ascii')
    return _NON_ALPHANUMERIC.sub('-', value.lower()).strip('-')


def unique_slug(model, value, exclude_pk=None):
    """Slugify `value` and add a numeric suffix until no other row uses it."""
    base_slug = slugify(value) or model._meta.model_name
    slug = base_slug
    counter = 1
    while model._default_manager.filter(slug=slug).exclude(pk=exclude_pk).exists():
        slug = f"{base_slug}-{counter}"
        counter += 1
    return slug
