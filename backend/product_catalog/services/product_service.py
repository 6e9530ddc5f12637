"""
Product Catalog Backend — Product Service (Business Logic Orchestrator)
=========================================================================

What:  Implements every product endpoint as load → operate → (save).
How:   Loads a fresh snapshot from the repository, applies a record store
       primitive, saves the whole collection for mutations, and converts
       "not found" / "no image" signals into application exceptions.
Who:   Called by route handlers, which pass in the repository.

Flow (PUT /api/products/{id}):
    ┌──────────┐    ┌──────────┐    ┌────────────────┐    ┌──────────┐
    │  Route   │───▶│  load()  │───▶│ replace_by_id  │───▶│  save()  │
    └──────────┘    └──────────┘    └────────────────┘    └──────────┘

    Not found → NotFoundError raised before save(), the file is untouched.
    StorageError from load()/save() propagates unchanged.

Design Decision:
    ProductService is stateless: the repository arrives with each call,
    so tests can hand it an InMemoryProductRepository directly.
"""

import logging
from pathlib import Path
from typing import List, Optional

from product_catalog.exceptions import NotFoundError, ValidationError
from product_catalog.schemas.product import (
    Product,
    ProductCreate,
    ProductListItem,
    ProductPatch,
)
from product_catalog.services import record_store
from product_catalog.services.image_service import image_service
from product_catalog.storage import ProductRepository

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND_MESSAGE = "Product not found"
IMAGE_NOT_SPECIFIED_MESSAGE = "Image not specified for this product"
PRODUCT_DELETED_MESSAGE = "Product deleted successfully"


class ProductService:
    """
    Business logic layer for product operations.

    Responsibilities:
        - list_products(): Listing with derived cover URLs
        - get_image_path(): Image lookup with 404 / 400 distinction
        - create_product(): Id minting and append
        - update_product(): Shallow-merge patch
        - delete_product(): Removal with not-found detection
    """

    async def list_products(self, repo: ProductRepository) -> List[ProductListItem]:
        """
        Return every product with its `coverImageUrl`.

        The URL is computed for the response only; stored records are not
        modified.
        """
        products = await repo.load()
        return [
            ProductListItem.model_validate(
                {
                    **product.to_record(),
                    "coverImageUrl": image_service.cover_url(product.cover_filename),
                }
            )
            for product in products
        ]

    async def get_image_path(self, repo: ProductRepository, product_id: Optional[int]) -> Path:
        """
        Resolve the image file of a product.

        Raises:
            NotFoundError:   no product with that id (→ 404)
            ValidationError: product has no image filename (→ 400)
            NotFoundError:   image file absent from the images folder (→ 404)
        """
        products = await repo.load()
        product = record_store.find_by_id(products, product_id)

        if product is None:
            raise NotFoundError(
                message=PRODUCT_NOT_FOUND_MESSAGE,
                resource="product",
                resource_id=product_id,
            )

        if not product.image:
            raise ValidationError(
                message=IMAGE_NOT_SPECIFIED_MESSAGE,
                field="image",
                context={"product_id": product_id},
            )

        return image_service.resolve(str(product.image))

    async def create_product(self, repo: ProductRepository, data: ProductCreate) -> Product:
        """
        Append a new product with a freshly minted id.

        Body fields are taken as given; missing ones are left off the record.
        """
        products = await repo.load()
        product = Product(id=record_store.next_id(products), **data.to_fields())
        record_store.insert(products, product)
        await repo.save(products)

        logger.info("Product created: id=%d name=%r", product.id, product.name)
        return product

    async def update_product(
        self,
        repo: ProductRepository,
        product_id: Optional[int],
        patch: ProductPatch,
    ) -> Product:
        """
        Apply `patch` to a product and persist the collection.

        Raises:
            NotFoundError (plain text): no product with that id (→ 404)
        """
        products = await repo.load()
        fields = patch.to_fields()
        updated = record_store.replace_by_id(products, product_id, fields)

        if updated is None:
            raise NotFoundError(
                message=PRODUCT_NOT_FOUND_MESSAGE,
                resource="product",
                resource_id=product_id,
                plain_text=True,
            )

        await repo.save(products)
        logger.info("Product updated: id=%d fields=%s", product_id, sorted(fields))
        return updated

    async def delete_product(self, repo: ProductRepository, product_id: Optional[int]) -> str:
        """
        Remove a product and persist the collection.

        Deleting an unknown id raises before anything is saved, so the
        stored collection is left exactly as it was.

        Raises:
            NotFoundError (plain text): no product with that id (→ 404)
        """
        products = await repo.load()
        removed = record_store.remove_by_id(products, product_id)

        if removed == 0:
            raise NotFoundError(
                message=PRODUCT_NOT_FOUND_MESSAGE,
                resource="product",
                resource_id=product_id,
                plain_text=True,
            )

        await repo.save(products)
        logger.info("Product deleted: id=%d", product_id)
        return PRODUCT_DELETED_MESSAGE


# ── Singleton Instance ────────────────────────────────────────────────────
product_service = ProductService()
