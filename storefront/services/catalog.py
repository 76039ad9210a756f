"""
Catalog filtering and sorting

Pure functions over the product catalog. A product is listed when it passes
every filter dimension; within the color and size dimensions any one
selected value is enough, and an empty selection places no constraint.
"""

from typing import Iterable

from ..models.product import ALL_CATEGORIES, FilterState, Product, SortKey


def matches_category(product: Product, category: str) -> bool:
    return category == ALL_CATEGORIES or product.category == category


def matches_search(product: Product, search: str) -> bool:
    """Case-insensitive substring match on name or brand"""
    term = search.lower()
    return term in product.name.lower() or term in product.brand.lower()


def matches_price(product: Product, min_price: int, max_price: int) -> bool:
    return min_price <= product.price <= max_price


def matches_any(values: Iterable[str], product_values: list[str] | None) -> bool:
    """True for an empty selection, else when the product offers a selected value"""
    selected = set(values)
    if not selected:
        return True
    return bool(product_values) and not selected.isdisjoint(product_values)


def matches_filters(product: Product, filters: FilterState) -> bool:
    return (
        matches_category(product, filters.category)
        and matches_search(product, filters.search)
        and matches_price(product, filters.min_price, filters.max_price)
        and matches_any(filters.colors, product.colors)
        and matches_any(filters.sizes, product.sizes)
    )


def _name_key(product: Product) -> tuple[str, str]:
    # casefold first so "bow tie" sorts with "Bow Tie", then exact name.
    # Not ICU collation: punctuation and spaces compare by code point, so names
    # like "Double-Breasted" can order differently than a browser would.
    return (product.name.casefold(), product.name)


def sort_products(products: Iterable[Product], sort_by: SortKey | str) -> list[Product]:
    """
    Order products by a sort key.

    Ties keep their input order. Unknown keys sort by name.
    """
    if sort_by == SortKey.PRICE_LOW:
        return sorted(products, key=lambda p: p.price)
    if sort_by == SortKey.PRICE_HIGH:
        return sorted(products, key=lambda p: p.price, reverse=True)
    if sort_by == SortKey.RATING:
        return sorted(products, key=lambda p: p.rating, reverse=True)
    if sort_by == SortKey.REVIEWS:
        return sorted(products, key=lambda p: p.reviews, reverse=True)
    return sorted(products, key=_name_key)


def filter_products(products: Iterable[Product], filters: FilterState) -> list[Product]:
    """Apply every filter dimension, then the sort order"""
    matching = [p for p in products if matches_filters(p, filters)]
    return sort_products(matching, filters.sort_by)


def toggle_value(values: list[str], value: str) -> list[str]:
    """Add a value to a multi-select, or remove it when already selected"""
    if value in values:
        return [v for v in values if v != value]
    return [*values, value]
