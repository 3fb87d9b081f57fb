from __future__ import annotations

from typing import Any

from beauty_advisor.domain.entities.product import Product

_TEXT_FIELDS = ("name", "brand", "category")
_OPTIONAL_TEXT_FIELDS = ("description", "image")


def product_from_dict(data: Any) -> Product | None:
    """Build a Product from loosely shaped JSON data, or None if the shape is wrong."""
    if not isinstance(data, dict):
        return None

    product_id = data.get("id")
    # ids compare strictly: "3" never matches 3, and bool is an int subclass
    if not isinstance(product_id, int) or isinstance(product_id, bool):
        return None

    values: dict[str, str] = {}
    for key in _TEXT_FIELDS:
        value = data.get(key)
        if not isinstance(value, str):
            return None
        values[key] = value
    for key in _OPTIONAL_TEXT_FIELDS:
        value = data.get(key, "")
        if value is None:
            value = ""
        if not isinstance(value, str):
            return None
        values[key] = value

    return Product(id=product_id, **values)


def product_to_dict(product: Product) -> dict[str, Any]:
    return {
        "id": product.id,
        "name": product.name,
        "brand": product.brand,
        "category": product.category,
        "description": product.description,
        "image": product.image,
    }


def products_from_list(items: Any) -> tuple[list[Product], int]:
    """Parse a list of product records. Returns (products, number of skipped records).

    Records with a bad shape or an id already seen earlier in the list are skipped.
    """
    if not isinstance(items, list):
        raise TypeError("expected a list of product records")
    products: list[Product] = []
    seen: set[int] = set()
    skipped = 0
    for item in items:
        product = product_from_dict(item)
        if product is None or product.id in seen:
            skipped += 1
            continue
        seen.add(product.id)
        products.append(product)
    return products, skipped
