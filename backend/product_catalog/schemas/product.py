"""
Product Catalog Backend — Pydantic Product Schemas
====================================================

What:  Pydantic models for stored products and the API request/response bodies.
How:   FastAPI parses request bodies into ProductCreate / ProductPatch and
       uses the response models to document the API in OpenAPI.

Field presence matters here. The data file is schemaless: a product only
has the keys someone gave it, and unknown keys (e.g. `coverImage`) must
survive a load → save round trip. `Product.to_record()` therefore dumps
only the fields that were actually set, plus any extra keys. Field values
are typed `Any` so nothing is coerced on the way through; only `id` is an
integer, because new ids are minted from it.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


def _present_fields(model: BaseModel) -> Dict[str, Any]:
    """Declared fields that were explicitly set, followed by any extra keys."""
    data = model.model_dump(exclude_unset=True)
    data.update(model.model_extra or {})
    return data


class Product(BaseModel):
    """
    What:  One record of the product collection, as stored in the data file.

    Only `id` is typed. The other fields hold whatever JSON value was
    stored, so a string price stays a string through load and save.
    """
    model_config = ConfigDict(extra="allow")

    id: int = Field(description="Unique product id, assigned as max(id) + 1")
    name: Any = Field(default=None, description="Display name")
    price: Any = Field(default=None, description="Price, no currency attached")
    image: Any = Field(
        default=None,
        description="Filename of the product image inside the images directory",
    )

    def to_record(self) -> Dict[str, Any]:
        """Serialize back to the dict written to the data file."""
        return _present_fields(self)

    @property
    def cover_filename(self) -> Optional[str]:
        """
        Filename used for the listing's cover URL.

        Older records carry a separate `coverImage` key; it wins over `image`
        when present.
        """
        extra = self.model_extra or {}
        cover = extra.get("coverImage")
        if cover:
            return str(cover)
        if self.image:
            return str(self.image)
        return None


class ProductCreate(BaseModel):
    """
    What:  Body of POST /api/products.

    Only name, price and image are taken from the body; other keys are
    dropped. Values are stored as sent, without type checks, and missing
    fields are simply left out of the record.
    """
    name: Any = Field(default=None, description="Display name")
    price: Any = Field(default=None, description="Price")
    image: Any = Field(default=None, description="Image filename, e.g. '9.jpg'")

    def to_fields(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class ProductPatch(BaseModel):
    """
    What:  Body of PUT /api/products/{id}.

    A patch is applied as a shallow merge: every key present in the body
    replaces the stored value, every absent key keeps its stored value.
    Extra keys are merged as well. `id` is never taken from a patch.
    """
    model_config = ConfigDict(extra="allow")

    name: Any = None
    price: Any = None
    image: Any = None

    def to_fields(self) -> Dict[str, Any]:
        fields = _present_fields(self)
        fields.pop("id", None)
        return fields


class ProductListItem(Product):
    """
    What:  Product as returned by GET /api/products.
    Adds `coverImageUrl`, derived at request time and never persisted.
    """
    coverImageUrl: Optional[str] = Field(
        default=None,
        description="Absolute URL of the cover image under /images",
    )


class ErrorResponse(BaseModel):
    """
    What:  Error body of the image endpoint, e.g. {"error": "Product not found"}.
    """
    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """
    What:  Health check response.
    `status` is "healthy" when the data file can be loaded, "unhealthy" otherwise.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    data_file: str = Field(description="Data file status: readable, unreadable")
    products: Optional[int] = Field(default=None, description="Number of stored products")
    uptime_seconds: float = Field(description="Seconds since service started")
