"""Product and catalog filter models for the storefront"""

from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum

ALL_CATEGORIES = "all"

DEFAULT_MIN_PRICE = 0
DEFAULT_MAX_PRICE = 30000


class ProductCategory(str, Enum):
    BLAZERS = "blazers"
    TROUSERS = "trousers"
    WATCHES = "watches"
    TIES = "ties"
    SHOES = "shoes"


class SortKey(str, Enum):
    NAME = "name"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    RATING = "rating"
    REVIEWS = "reviews"


class Product(BaseModel):
    """Product in the catalog. Prices are in minor currency units."""
    id: int
    name: str
    category: ProductCategory
    price: int = Field(ge=0)
    image: str
    rating: float = Field(ge=0.0, le=5.0)
    reviews: int = Field(ge=0)
    brand: str
    colors: Optional[list[str]] = None
    sizes: Optional[list[str]] = None

    class Config:
        frozen = True


class FilterState(BaseModel):
    """Catalog filter and sort state of a session"""
    category: str = ALL_CATEGORIES
    search: str = ""
    min_price: int = DEFAULT_MIN_PRICE
    max_price: int = DEFAULT_MAX_PRICE
    colors: list[str] = []
    sizes: list[str] = []
    sort_by: SortKey = SortKey.NAME


class FilterUpdateRequest(BaseModel):
    """Partial update of the session filter state"""
    category: Optional[str] = None
    search: Optional[str] = None
    min_price: Optional[int] = None
    max_price: Optional[int] = None
    colors: Optional[list[str]] = None
    sizes: Optional[list[str]] = None
    sort_by: Optional[SortKey] = None


class FilterOptions(BaseModel):
    """Choices offered by the color and size filters"""
    categories: list[str]
    colors: list[str]
    sizes: list[str]
    sort_keys: list[str]


class ProductSearchResponse(BaseModel):
    """Response from product search"""
    products: list[Product]
    total: int
    filters: FilterState
