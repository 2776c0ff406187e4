"""Product grouping and aggregation.

This module groups products by category and computes per-category
and whole-dataset price and inventory aggregates.
"""

from __future__ import annotations

from typing import Iterable, Sequence, cast

from core.errors import InvalidRangeError
from core.record_fields import require_field, require_non_negative
from core.types import Product
from transforms.grouping import group_and_reduce, group_by


def group_by_category(products: Iterable[Product]) -> dict[str, list[Product]]:
    """Group products by category in first-seen category order."""
    return group_by(products, _category_of)


def average_price_by_category(products: Iterable[Product]) -> dict[str, float]:
    """Return the mean price of each category."""
    return group_and_reduce(products, _category_of, _average_price)


def find_max_priced_product(products: Iterable[Product]) -> Product | None:
    """Return the most expensive product.

    Args:
        products: Input products.

    Returns:
        First product with the greatest price, or None for empty input.

    Raises:
        InvalidRecordError: If a price is missing or negative.
    """
    best: Product | None = None
    best_price = 0.0
    for product in products:
        price = require_non_negative(product, "price")
        if best is None or price > best_price:
            best = product
            best_price = price
    return best


def max_priced_by_category(products: Iterable[Product]) -> dict[str, Product]:
    """Return the most expensive product of each category."""
    return group_and_reduce(products, _category_of, _max_of_group)


def total_inventory_value(products: Iterable[Product]) -> float:
    """Sum price * quantity over all products."""
    return float(sum(_inventory_value(product) for product in products))


def inventory_value_by_category(products: Iterable[Product]) -> dict[str, float]:
    """Sum price * quantity per category."""
    return group_and_reduce(products, _category_of, total_inventory_value)


def count_by_category(products: Iterable[Product]) -> dict[str, int]:
    """Count products per category."""
    return group_and_reduce(products, _category_of, len)


def find_products_in_price_range(
    products: Iterable[Product],
    low: float,
    high: float,
) -> list[Product]:
    """Return products priced within [low, high], in input order.

    Raises:
        InvalidRangeError: If low > high.
        InvalidRecordError: If a price is missing or negative.
    """
    if low > high:
        raise InvalidRangeError(low, high)
    return [
        product
        for product in products
        if low <= require_non_negative(product, "price") <= high
    ]


def _category_of(product: Product) -> str:
    return require_field(product, "category")


def _average_price(group: Sequence[Product]) -> float:
    total = sum(require_non_negative(product, "price") for product in group)
    return total / len(group)


def _max_of_group(group: Sequence[Product]) -> Product:
    return cast(Product, find_max_priced_product(group))


def _inventory_value(product: Product) -> float:
    price = require_non_negative(product, "price")
    quantity = require_non_negative(product, "quantity")
    return price * quantity
