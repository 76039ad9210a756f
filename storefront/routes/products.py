"""Product API routes for the storefront"""

from typing import Optional
from fastapi import APIRouter, HTTPException, Query

from ..models.product import (
    Product,
    SortKey,
    FilterState,
    FilterOptions,
    ProductSearchResponse,
    ALL_CATEGORIES,
    DEFAULT_MIN_PRICE,
    DEFAULT_MAX_PRICE,
)
from ..database.products import product_db, FILTER_COLORS, FILTER_SIZES

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=ProductSearchResponse)
async def search_products(
    category: str = Query(ALL_CATEGORIES, description="Category or 'all'"),
    search: str = Query("", description="Matches product name or brand"),
    min_price: int = Query(DEFAULT_MIN_PRICE, description="Lowest price, inclusive"),
    max_price: int = Query(DEFAULT_MAX_PRICE, description="Highest price, inclusive"),
    colors: Optional[list[str]] = Query(None, description="Any of these colors"),
    sizes: Optional[list[str]] = Query(None, description="Any of these sizes"),
    sort_by: SortKey = Query(SortKey.NAME, description="Sort order"),
):
    """
    Filter and sort the catalog.

    Stateless: the filter is taken from the query string only. Use
    /api/session/products for the session's own filter state.
    """
    filters = FilterState(
        category=category,
        search=search,
        min_price=min_price,
        max_price=max_price,
        colors=colors or [],
        sizes=sizes or [],
        sort_by=sort_by,
    )
    products = product_db.search_products(filters)

    return ProductSearchResponse(products=products, total=len(products), filters=filters)


@router.get("/categories", response_model=list[str])
async def list_categories():
    """List all product categories"""
    return [ALL_CATEGORIES, *product_db.categories()]


@router.get("/filters", response_model=FilterOptions)
async def list_filter_options():
    """List the options offered by the filter panel"""
    return FilterOptions(
        categories=[ALL_CATEGORIES, *product_db.categories()],
        colors=FILTER_COLORS,
        sizes=FILTER_SIZES,
        sort_keys=[key.value for key in SortKey],
    )


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: int):
    """Get a product by ID"""
    product = product_db.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
