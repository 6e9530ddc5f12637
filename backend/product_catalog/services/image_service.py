"""
Product Catalog Backend — Image Service
=========================================

What:  Locates product image files and builds their public URLs.
How:   Filenames stored on products are resolved relative to the images
       directory; cover URLs point at the static /images mount.
Who:   Called by ProductService for the listing and image endpoints.

Path safety:
    A stored filename is untrusted input. After resolving it against the
    images directory, anything that lands outside that directory is
    reported exactly like a missing file.
"""

import logging
from pathlib import Path
from typing import Optional
from urllib.parse import quote

from product_catalog.config import settings
from product_catalog.exceptions import NotFoundError

logger = logging.getLogger(__name__)

# Characters JavaScript's encodeURIComponent leaves unescaped, on top of the
# ones urllib.parse.quote always keeps (letters, digits, "_.-~").
_URI_COMPONENT_SAFE = "!*'()"

IMAGE_NOT_FOUND_MESSAGE = "Image file not found in images folder"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


class ImageService:
    """
    Resolves image filenames and cover URLs.

    Settings are read on every call rather than captured at construction,
    so the module-level singleton follows configuration overrides.
    """

    def __init__(self, images_dir: Optional[str] = None, base_url: Optional[str] = None):
        """
        Args:
            images_dir: Override settings.images_dir (used in tests).
            base_url:   Override settings.public_base_url (used in tests).
        """
        self._images_dir = images_dir
        self._base_url = base_url

    @property
    def images_dir(self) -> Path:
        return Path(self._images_dir or settings.images_dir).resolve()

    @property
    def base_url(self) -> str:
        return (self._base_url or settings.public_base_url).rstrip("/")

    def cover_url(self, filename: Optional[str]) -> Optional[str]:
        """
        Build `<base>/images/<escaped filename>`.

        Returns None when there is no filename; the listing then shows
        `coverImageUrl: null` instead of a URL to nothing.
        """
        if not filename:
            return None
        return f"{self.base_url}/images/{encode_uri_component(filename)}"

    def resolve(self, filename: str) -> Path:
        """
        Resolve an image filename to an existing file in the images directory.

        Raises:
            NotFoundError: the file does not exist, is not a regular file,
                           or lies outside the images directory.
        """
        images_dir = self.images_dir
        path = (images_dir / filename).resolve()

        if images_dir != path and images_dir not in path.parents:
            logger.warning("Rejected image path outside images directory: %s", filename)
            raise NotFoundError(
                message=IMAGE_NOT_FOUND_MESSAGE,
                resource="image",
                resource_id=filename,
            )

        if not path.is_file():
            logger.info("Image file missing: %s", path)
            raise NotFoundError(
                message=IMAGE_NOT_FOUND_MESSAGE,
                resource="image",
                resource_id=filename,
                context={"path": str(path)},
            )

        return path


# ── Singleton Instance ────────────────────────────────────────────────────
image_service = ImageService()
