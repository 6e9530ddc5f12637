"""
Product Catalog Backend — Product Storage
===========================================

What:  The storage port (ProductRepository) and its implementations.
How:   A repository loads the whole product collection and saves the whole
       collection back. Nothing is cached between calls: every request
       reloads the file, and every mutating request rewrites it in full.
Who:   Injected into route handlers via FastAPI's Depends(get_repository).

Implementations:
    - JsonFileProductRepository: JSON array in a flat file, async I/O via aiofiles
    - InMemoryProductRepository: list of dicts held in memory (tests, scripts)

Persisted layout:
    [
      {
        "id": 1,
        "name": "Fern",
        "price": 10,
        "image": "1.jpg"
      }
    ]
    Pretty-printed with 2-space indentation, UTF-8, written in full on
    every save. Concurrent saves are not coordinated: the last one wins.
"""

import copy
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

import aiofiles
from pydantic import ValidationError as PydanticValidationError

from product_catalog.config import settings
from product_catalog.exceptions import StorageError
from product_catalog.schemas.product import Product

logger = logging.getLogger(__name__)


class ProductRepository(ABC):
    """
    Abstract storage port for the product collection.

    Contract:
        - load() returns the full ordered collection, freshly read
        - save() replaces the full collection
        - Implementation-specific failures are wrapped in StorageError
    """

    @abstractmethod
    async def load(self) -> List[Product]:
        """Read and return every stored product, in stored order."""

    @abstractmethod
    async def save(self, products: List[Product]) -> None:
        """Replace the stored collection with `products`."""

    @staticmethod
    def _parse(raw: Any, source: str) -> List[Product]:
        if not isinstance(raw, list):
            raise StorageError(
                message="Product data is malformed",
                context={"source": source, "reason": "top-level value is not an array"},
            )
        try:
            return [Product.model_validate(item) for item in raw]
        except PydanticValidationError as e:
            raise StorageError(
                message="Product data is malformed",
                context={"source": source, "reason": str(e)},
            ) from e


class JsonFileProductRepository(ProductRepository):
    """
    Stores the collection as a JSON array in a single file.

    A missing file is an error, not an empty collection: the data file is
    expected to be provisioned with at least `[]` before the service starts.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = Path(path or settings.data_file)

    async def load(self) -> List[Product]:
        try:
            async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
                raw_data = await f.read()
        except OSError as e:
            logger.error("Failed to read product data from %s: %s", self.path, str(e))
            raise StorageError(
                message="Could not read product data",
                context={"path": str(self.path), "os_error": str(e)},
            ) from e

        try:
            raw = json.loads(raw_data)
        except json.JSONDecodeError as e:
            logger.error("Product data in %s is not valid JSON: %s", self.path, str(e))
            raise StorageError(
                message="Product data is malformed",
                context={"path": str(self.path), "reason": str(e)},
            ) from e

        return self._parse(raw, str(self.path))

    async def save(self, products: List[Product]) -> None:
        payload = json.dumps(
            [product.to_record() for product in products],
            indent=2,
            ensure_ascii=False,
        )
        try:
            async with aiofiles.open(self.path, "w", encoding="utf-8") as f:
                await f.write(payload)
        except OSError as e:
            logger.error("Failed to write product data to %s: %s", self.path, str(e))
            raise StorageError(
                message="Could not write product data",
                context={"path": str(self.path), "os_error": str(e)},
            ) from e

        logger.debug("Saved %d products to %s", len(products), self.path)


class InMemoryProductRepository(ProductRepository):
    """
    Keeps the collection as plain records in memory.

    Records are deep-copied in and out so that callers mutating a loaded
    snapshot never change the stored state without calling save().
    """

    def __init__(self, records: Optional[List[Dict[str, Any]]] = None):
        self._records: List[Dict[str, Any]] = copy.deepcopy(records or [])

    @property
    def records(self) -> List[Dict[str, Any]]:
        return copy.deepcopy(self._records)

    async def load(self) -> List[Product]:
        return self._parse(copy.deepcopy(self._records), "memory")

    async def save(self, products: List[Product]) -> None:
        self._records = [product.to_record() for product in products]


def get_repository() -> ProductRepository:
    """
    FastAPI dependency that provides the product repository.

    The path is read from settings on every call, so overriding
    settings.data_file (or this dependency) takes effect immediately.
    """
    return JsonFileProductRepository(settings.data_file)
