"""
Ordered image lists for the product form.

The list is a value: every edit returns a new `ImageList` and leaves the
original untouched. Position 0 is the primary image; the flag is derived
when the list is turned into records, never stored on the references.
"""

from dataclasses import dataclass

from django.core.exceptions import ValidationError

DEFAULT_MAX_IMAGES = 10


@dataclass(frozen=True)
class ImageRef:
    """An uploaded image: public URL, storage path and alt text."""
    url: str
    path: str = ''
    alt: str = ''

    @classmethod
    def from_dict(cls, data):
        return cls(
            url=data.get('url') or data.get('image_url') or '',
            path=data.get('path') or data.get('storage_path') or '',
            alt=data.get('alt') or data.get('alt_text') or '',
        )


class ImageList:
    """Immutable, ordered sequence of `ImageRef` with a maximum size."""

    def __init__(self, images=(), max_images=DEFAULT_MAX_IMAGES):
        self._images = tuple(
            image if isinstance(image, ImageRef) else ImageRef.from_dict(image)
            for image in images
        )
        self.max_images = max_images
        self._check_limit(len(self._images))

    def __len__(self):
        return len(self._images)

    def __iter__(self):
        return iter(self._images)

    def __getitem__(self, index):
        return self._images[index]

    def __eq__(self, other):
        if not isinstance(other, ImageList):
            return NotImplemented
        return self._images == other._images

    def __repr__(self):
        return f"ImageList({list(self._images)!r})"

    @property
    def primary(self):
        return self._images[0] if self._images else None

    @property
    def urls(self):
        return [image.url for image in self._images]

    def _check_limit(self, count):
        if self.max_images is not None and count > self.max_images:
            raise ValidationError(
                'Você pode adicionar no máximo %(max)s imagens',
                code='max_images',
                params={'max': self.max_images},
            )

    def _check_index(self, index):
        if not 0 <= index < len(self._images):
            raise IndexError(f"Índice de imagem fora do intervalo: {index}")

    def _replace(self, images):
        return ImageList(images, max_images=self.max_images)

    def append(self, *images):
        """Add images at the end. Exceeding the maximum adds nothing."""
        self._check_limit(len(self._images) + len(images))
        return self._replace(self._images + tuple(images))

    def remove(self, index):
        self._check_index(index)
        return self._replace(self._images[:index] + self._images[index + 1:])

    def swap(self, first, second):
        self._check_index(first)
        self._check_index(second)
        images = list(self._images)
        images[first], images[second] = images[second], images[first]
        return self._replace(images)

    def move(self, source, target):
        """Take the image at `source` out and reinsert it at `target`."""
        self._check_index(source)
        self._check_index(target)
        images = list(self._images)
        images.insert(target, images.pop(source))
        return self._replace(images)

    def to_records(self):
        """Rows for `ProductImage`, with display order and primary flag."""
        return [
            {
                'image_url': image.url,
                'storage_path': image.path,
                'alt_text': image.alt,
                'display_order': index,
                'is_primary': index == 0,
            }
            for index, image in enumerate(self._images)
        ]

    @classmethod
    def from_records(cls, records, max_images=DEFAULT_MAX_IMAGES):
        """Rebuild a list from stored `ProductImage` rows or dicts."""
        def order(record):
            if isinstance(record, dict):
                return record.get('display_order') or 0
            return record.display_order or 0

        refs = []
        for record in sorted(records, key=order):
            if isinstance(record, dict):
                refs.append(ImageRef.from_dict(record))
            else:
                refs.append(ImageRef(record.image_url, record.storage_path, record.alt_text))
        return cls(refs, max_images=max_images)
