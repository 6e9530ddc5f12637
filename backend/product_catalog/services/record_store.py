"""
Product Catalog Backend — Record Store Primitives
===================================================

What:  Find/insert/update/delete over a loaded snapshot of the collection.
How:   Plain functions operating on a list of Product objects. They never
       touch storage; ProductService loads the snapshot, calls these, and
       saves the result.

Not-found is signalled in-band (None or a zero count). Turning that into
an HTTP status is the service's job.
"""

import re
from typing import Any, Dict, List, Optional

from product_catalog.schemas.product import Product

# Leading integer of a path segment: optional sign, then hex ("0x1f") or decimal digits.
_LEADING_INT = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]+)|(\d+))")


def parse_id(raw: str) -> Optional[int]:
    """
    Read the id at the start of a path segment, the way JavaScript's
    parseInt does: "7" → 7, "12abc" → 12, "0x10" → 16, "abc" → None.

    None never equals a stored id, so an unparsable segment falls through
    to the usual "not found" answer.
    """
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    sign, hex_digits, digits = match.groups()
    value = int(hex_digits, 16) if hex_digits else int(digits)
    return -value if sign == "-" else value


def next_id(products: List[Product]) -> int:
    """1 + the largest existing id, or 1 for an empty collection. Ids are never reused."""
    if not products:
        return 1
    return max(product.id for product in products) + 1


def find_by_id(products: List[Product], product_id: Optional[int]) -> Optional[Product]:
    for product in products:
        if product.id == product_id:
            return product
    return None


def insert(products: List[Product], product: Product) -> Product:
    """Append `product` at the end; no collision check, ids come from next_id()."""
    products.append(product)
    return product


def replace_by_id(
    products: List[Product],
    product_id: Optional[int],
    fields: Dict[str, Any],
) -> Optional[Product]:
    """
    Shallow-merge `fields` over the product with `product_id`.

    Keys absent from `fields` keep their stored values. The merged record
    replaces the old one at the same position. Returns the updated product,
    or None if no product has that id.
    """
    for index, product in enumerate(products):
        if product.id == product_id:
            merged = {**product.to_record(), **fields, "id": product.id}
            updated = Product.model_validate(merged)
            products[index] = updated
            return updated
    return None


def remove_by_id(products: List[Product], product_id: Optional[int]) -> int:
    """Remove every product with `product_id` in place; returns how many were removed."""
    kept = [product for product in products if product.id != product_id]
    removed = len(products) - len(kept)
    products[:] = kept
    return removed
