"""
Product Catalog Backend — Product Route Handlers
==================================================

What:  The five product endpoints under /api/products.
How:   Each handler extracts path/body data, delegates to ProductService with
       the injected repository, and shapes the HTTP response.
Who:   Called by the storefront frontend.

Route Inventory:
    GET    /api/products              → 200 JSON array with coverImageUrl
    GET    /api/products/{id}/image   → 200 image bytes
    POST   /api/products              → 201 created product
    PUT    /api/products/{id}         → 200 updated product
    DELETE /api/products/{id}         → 200 "Product deleted successfully"

Errors are raised by the service and rendered by the global handlers in
main.py (JSON for the image endpoint, plain text for PUT/DELETE).
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import FileResponse, PlainTextResponse

from product_catalog.schemas.product import (
    ErrorResponse,
    Product,
    ProductCreate,
    ProductListItem,
    ProductPatch,
)
from product_catalog.services import record_store
from product_catalog.services.product_service import product_service
from product_catalog.storage import ProductRepository, get_repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Products"])

_PLAIN_TEXT_404 = {
    "description": "Product not found",
    "content": {"text/plain": {"example": "Product not found"}},
}


@router.get(
    "/products",
    response_model=None,
    responses={200: {"description": "All products", "model": List[ProductListItem]}},
    summary="List all products",
    description=(
        "Returns every stored product, each with a `coverImageUrl` pointing at "
        "the product's image under /images."
    ),
)
async def list_products(
    repo: ProductRepository = Depends(get_repository),
) -> List[Dict[str, Any]]:
    items = await product_service.list_products(repo)
    return [item.to_record() for item in items]


@router.get(
    "/products/{product_id}/image",
    response_class=FileResponse,
    responses={
        200: {"description": "Image file", "content": {"image/*": {}}},
        400: {"description": "Product has no image", "model": ErrorResponse},
        404: {"description": "Product or image file not found", "model": ErrorResponse},
    },
    summary="Get a product's image",
)
async def get_product_image(
    product_id: str,
    repo: ProductRepository = Depends(get_repository),
) -> FileResponse:
    """
    Stream the image file named by the product's `image` field.

    The media type is guessed from the filename extension.
    """
    path = await product_service.get_image_path(
        repo, record_store.parse_id(product_id)
    )
    return FileResponse(path=str(path))


@router.post(
    "/products",
    status_code=201,
    response_model=None,
    responses={201: {"description": "Created product", "model": Product}},
    summary="Create a product",
)
async def create_product(
    data: Optional[ProductCreate] = Body(default=None),
    repo: ProductRepository = Depends(get_repository),
) -> Dict[str, Any]:
    """
    Create a product from `name`, `price` and `image`.

    Values are stored as sent. Missing fields, or a missing body, are
    accepted; the new id is max(id) + 1 (or 1).
    """
    if data is None:
        data = ProductCreate()
    product = await product_service.create_product(repo, data)
    return product.to_record()


@router.put(
    "/products/{product_id}",
    response_model=None,
    responses={
        200: {"description": "Updated product", "model": Product},
        404: _PLAIN_TEXT_404,
    },
    summary="Update a product",
)
async def update_product(
    product_id: str,
    patch: Optional[ProductPatch] = Body(default=None),
    repo: ProductRepository = Depends(get_repository),
) -> Dict[str, Any]:
    """Shallow-merge the body into the stored product; absent fields are kept."""
    if patch is None:
        patch = ProductPatch()
    product = await product_service.update_product(
        repo, record_store.parse_id(product_id), patch
    )
    return product.to_record()


@router.delete(
    "/products/{product_id}",
    response_class=PlainTextResponse,
    responses={
        200: {"content": {"text/plain": {"example": "Product deleted successfully"}}},
        404: _PLAIN_TEXT_404,
    },
    summary="Delete a product",
)
async def delete_product(
    product_id: str,
    repo: ProductRepository = Depends(get_repository),
) -> PlainTextResponse:
    message = await product_service.delete_product(repo, record_store.parse_id(product_id))
    return PlainTextResponse(message)
