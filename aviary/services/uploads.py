"""Image upload accumulation for catalog entries.

An :class:`ImageUploadBatch` collects the images submitted with one bird
form. It enforces the per-entry image limit and the allowed MIME types it was
constructed with, supports removing or clearing pending images, and finally
writes the accepted files under the upload directory.

Rule: No FastAPI here. Routers read the uploaded bytes and hand them over.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from aviary.core.config import settings
from aviary.core.exceptions import UploadRejectedError

logger = logging.getLogger(__name__)

_EXTENSIONS: dict[str, str] = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
}


@dataclass(frozen=True)
class PendingImage:
    filename: str
    content_type: str
    data: bytes = field(repr=False)
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @property
    def extension(self) -> str:
        ext = _EXTENSIONS.get(self.content_type)
        if ext:
            return ext
        return Path(self.filename).suffix.lower()


class ImageUploadBatch:
    """Pending images for one submission, bounded by ``max_images``."""

    def __init__(
        self,
        max_images: int,
        allowed_types: Iterable[str],
        max_bytes: int | None = None,
    ):
        if max_images < 0:
            raise ValueError(f"max_images must be >= 0, got {max_images}")
        self.max_images = max_images
        self.allowed_types = frozenset(allowed_types)
        self.max_bytes = max_bytes
        self._images: list[PendingImage] = []

    def __len__(self) -> int:
        return len(self._images)

    @property
    def images(self) -> tuple[PendingImage, ...]:
        return tuple(self._images)

    @property
    def limit_reached(self) -> bool:
        return len(self._images) >= self.max_images

    def add(self, filename: str, content_type: str, data: bytes) -> PendingImage:
        """Accept one image or raise :class:`UploadRejectedError`."""
        if self.limit_reached:
            raise UploadRejectedError(
                f"Limit of {self.max_images} images reached", status_code=413,
            )
        if content_type not in self.allowed_types:
            accepted = ", ".join(sorted(self.allowed_types))
            raise UploadRejectedError(
                f"'{filename}' must be an image ({accepted}), got '{content_type}'",
            )
        if not data:
            raise UploadRejectedError(f"'{filename}' is empty", status_code=400)
        if self.max_bytes is not None and len(data) > self.max_bytes:
            raise UploadRejectedError(
                f"'{filename}' exceeds the {self.max_bytes} byte limit",
                status_code=413,
            )
        image = PendingImage(filename=filename, content_type=content_type, data=data)
        self._images.append(image)
        return image

    def extend(self, files: Iterable[tuple[str, str, bytes]]) -> list[PendingImage]:
        """Add ``(filename, content_type, data)`` triples, stopping at the first refusal."""
        return [self.add(name, ctype, data) for name, ctype, data in files]

    def remove(self, image_id: str) -> bool:
        for i, image in enumerate(self._images):
            if image.id == image_id:
                del self._images[i]
                return True
        return False

    def clear(self) -> None:
        self._images.clear()

    def write_to(self, directory: Path, url_prefix: str = "/uploads") -> list[str]:
        """Persist every pending image and return their public URLs in order."""
        directory.mkdir(parents=True, exist_ok=True)
        urls: list[str] = []
        for image in self._images:
            name = f"{image.id}{image.extension}"
            (directory / name).write_bytes(image.data)
            urls.append(f"{url_prefix.rstrip('/')}/{name}")
        logger.info("Stored %d uploaded image(s) in %s", len(urls), directory)
        return urls


def discard_stored(directory: Path, urls: Iterable[str]) -> None:
    """Delete files previously written by :meth:`ImageUploadBatch.write_to`."""
    for url in urls:
        (directory / url.rsplit("/", 1)[-1]).unlink(missing_ok=True)
    logger.info("Discarded stored image(s) in %s", directory)


def new_image_batch(capacity: int | None = None) -> ImageUploadBatch:
    """Batch configured from settings; *capacity* lowers the image limit."""
    limit = settings.max_images_per_bird
    if capacity is not None:
        limit = max(0, min(limit, capacity))
    return ImageUploadBatch(
        max_images=limit,
        allowed_types=settings.allowed_image_types,
        max_bytes=settings.max_upload_size_bytes,
    )
