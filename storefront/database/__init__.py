# Catalog storage

from .products import product_db, ProductDatabase, PRODUCTS, FILTER_COLORS, FILTER_SIZES

__all__ = [
    "product_db",
    "ProductDatabase",
    "PRODUCTS",
    "FILTER_COLORS",
    "FILTER_SIZES",
]
