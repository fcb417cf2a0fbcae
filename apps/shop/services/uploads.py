"""
Product photo uploads. Files are resized with imagekit and written to the
default storage; the product only keeps the returned URL/path pair.
"""

import logging
import uuid

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.files.base import ContentFile
from django.core.files.storage import default_storage
from django.utils import timezone
from imagekit import ImageSpec
from imagekit.processors import ResizeToFit

logger = logging.getLogger(__name__)

ACCEPTED_CONTENT_TYPES = ('image/jpeg', 'image/jpg', 'image/png', 'image/webp')
UPLOAD_PREFIX = 'products/'


class ProductPhoto(ImageSpec):
    processors = [ResizeToFit(1200, 1200)]
    format = 'JPEG'
    options = {'quality': 85}


def get_max_upload_bytes():
    return getattr(settings, 'SHOP_MAX_UPLOAD_MB', 5) * 1024 * 1024


def validate_upload(file):
    if file.content_type not in ACCEPTED_CONTENT_TYPES:
        raise ValidationError(
            'Tipo de arquivo inválido: %(name)s', code='invalid_type', params={'name': file.name}
        )
    if file.size > get_max_upload_bytes():
        raise ValidationError(
            'Arquivo muito grande: %(name)s', code='too_large', params={'name': file.name}
        )


def store_upload(file):
    """
    Validate, resize and store one uploaded image.
    Returns {'url', 'path', 'alt'} as expected by the image list.
    """
    validate_upload(file)
    try:
        content = ProductPhoto(source=file).generate()
    except (OSError, SyntaxError) as exc:
        # Pillow raises OSError/SyntaxError for unreadable images
        raise ValidationError(
            'Imagem inválida: %(name)s', code='invalid_image', params={'name': file.name}
        ) from exc

    now = timezone.now()
    name = f"{UPLOAD_PREFIX}{now:%Y/%m}/{uuid.uuid4().hex}.jpg"
    path = default_storage.save(name, ContentFile(content.read()))
    logger.info("Stored upload %s as %s", file.name, path)
    return {
        'url': default_storage.url(path),
        'path': path,
        'alt': file.name,
    }


def delete_upload(path):
    """Best-effort removal of a stored image. Returns True if a file was removed."""
    if not path or not path.startswith(UPLOAD_PREFIX) or not default_storage.exists(path):
        return False
    default_storage.delete(path)
    logger.info("Deleted upload %s", path)
    return True
