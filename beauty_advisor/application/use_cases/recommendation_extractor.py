from __future__ import annotations

from typing import Iterable

from beauty_advisor.domain.entities.product import Product

MAX_RECOMMENDATIONS = 3

# Brands first, then product types. Order decides which products win the cap.
PRODUCT_KEYWORDS = (
    "CeraVe",
    "Maybelline",
    "Garnier",
    "L'Oréal",
    "Loreal",
    "cleanser",
    "moisturizer",
    "serum",
    "sunscreen",
    "foundation",
    "mascara",
    "lipstick",
    "shampoo",
    "conditioner",
    "cream",
)


def extract(
    response_text: str,
    catalog: Iterable[Product],
    limit: int = MAX_RECOMMENDATIONS,
) -> list[Product]:
    """
    Map free-form assistant text back to catalog products.

    For each keyword that appears in the text, every product whose name, brand
    or category contains the same keyword is collected, skipping ids already
    seen. Matching is case-insensitive substring matching and deliberately
    loose: "cream" also pulls in "moisturizing cream" and "eye cream".
    """
    products = list(catalog)
    text = (response_text or "").lower()
    found: list[Product] = []
    seen: set[int] = set()

    for keyword in PRODUCT_KEYWORDS:
        needle = keyword.lower()
        if needle not in text:
            continue
        for product in products:
            if product.id in seen:
                continue
            if (
                needle in product.name.lower()
                or needle in product.brand.lower()
                or needle in product.category.lower()
            ):
                seen.add(product.id)
                found.append(product)

    return found[:limit]
