"""Filtering and sorting for the product list view."""
from typing import Iterable, List, Optional

from app.constants.dashboard import SORTABLE_FIELDS, SortDirection, StockStatus
from app.schemas.products import Product, ProductFilters, ProductSummary
from app.utils.formatters import format_currency


def _within(value, low, high) -> bool:
    if low is not None and value < low:
        return False
    if high is not None and value > high:
        return False
    return True


def matches(product: Product, filters: ProductFilters) -> bool:
    if filters.search_name and \
            filters.search_name.lower() not in product.name.lower():
        return False
    return (
        _within(product.stock_quantity,
                filters.min_stock_quantity, filters.max_stock_quantity)
        and _within(product.price, filters.min_price, filters.max_price)
        and _within(product.sold_count,
                    filters.min_sold_count, filters.max_sold_count)
        and _within(product.sold_sum,
                    filters.min_sold_sum, filters.max_sold_sum)
    )


def filter_products(products: Iterable[Product],
                    filters: ProductFilters) -> List[Product]:
    return [p for p in products if matches(p, filters)]


def sort_products(products: Iterable[Product], field: str,
                  direction: str = SortDirection.ASC) -> List[Product]:
    if field not in SORTABLE_FIELDS:
        raise ValueError(f"Cannot sort by '{field}'")
    if direction not in (SortDirection.ASC, SortDirection.DESC):
        raise ValueError(f"Unknown sort direction '{direction}'")
    return sorted(products, key=lambda p: getattr(p, field),
                  reverse=direction == SortDirection.DESC)


def apply_view(products: Iterable[Product], filters: ProductFilters,
               sort_field: Optional[str] = None,
               sort_direction: str = SortDirection.ASC) -> List[Product]:
    """Filter, then sort when a sort field is given."""
    result = filter_products(products, filters)
    if sort_field:
        result = sort_products(result, sort_field, sort_direction)
    return result


def summarize_products(products: Iterable[Product]) -> ProductSummary:
    """Dashboard header totals over the unfiltered product list."""
    products = list(products)
    inventory_value = sum(p.price * p.stock_quantity for p in products)
    revenue = sum(p.sold_sum for p in products)
    return ProductSummary(
        total_products=len(products),
        total_inventory_value=inventory_value,
        low_stock_products=sum(
            1 for p in products
            if p.stock_quantity < StockStatus.LOW_STOCK_THRESHOLD),
        total_sold_count=sum(p.sold_count for p in products),
        total_revenue=revenue,
        total_inventory_value_display=format_currency(inventory_value),
        total_revenue_display=format_currency(revenue),
    )
