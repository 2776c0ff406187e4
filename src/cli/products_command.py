"""CLI command for product aggregation reports."""

from __future__ import annotations

import argparse
from typing import Any

from cli.sample_data import sample_products
from core.logging_config import get_logger
from transforms.product_aggregation import (
    average_price_by_category,
    count_by_category,
    find_max_priced_product,
    find_products_in_price_range,
    inventory_value_by_category,
    max_priced_by_category,
    total_inventory_value,
)

_LOGGER = get_logger(__name__)


def add_products_command(subparsers: Any) -> None:
    """Register products subcommand."""
    parser = subparsers.add_parser(
        "products",
        help="Aggregate the sample product list by category",
    )
    parser.add_argument("--min-price", type=float, help="Inclusive lower price bound")
    parser.add_argument("--max-price", type=float, help="Inclusive upper price bound")


def run_products_command(args: argparse.Namespace) -> int:
    """Print per-category aggregates, or a price range listing when bounds are given."""
    products = sample_products()
    if args.min_price is not None or args.max_price is not None:
        low = 0.0 if args.min_price is None else args.min_price
        high = float("inf") if args.max_price is None else args.max_price
        matches = find_products_in_price_range(products, low, high)
        for product in matches:
            print(f"{product.id}\t{product.name}\t{product.category}\t{product.price:.2f}")
        _LOGGER.info("price_range_rendered", low=low, high=high, row_count=len(matches))
        return 0
    averages = average_price_by_category(products)
    counts = count_by_category(products)
    values = inventory_value_by_category(products)
    top_products = max_priced_by_category(products)
    for category, average in averages.items():
        print(
            f"{category}\tcount={counts[category]}\t"
            f"avg_price={average:.2f}\t"
            f"max={top_products[category].name}\t"
            f"inventory_value={values[category]:.2f}"
        )
    most_expensive = find_max_priced_product(products)
    print(f"max_priced_product={most_expensive.name if most_expensive else '-'}")
    print(f"total_inventory_value={total_inventory_value(products):.2f}")
    _LOGGER.info("product_report_rendered", category_count=len(averages))
    return 0
