"""Cart models for the storefront"""

from pydantic import BaseModel, Field
from typing import Optional

from .product import Product

CartKey = tuple[int, Optional[str], Optional[str]]


class ProductSelection(BaseModel):
    """Color and size chosen for a product before it goes into the cart"""
    color: Optional[str] = None
    size: Optional[str] = None


class CartItem(BaseModel):
    """Line item in a shopping cart"""
    product: Product
    quantity: int = Field(default=1, ge=1)
    selected_color: Optional[str] = None
    selected_size: Optional[str] = None

    @property
    def key(self) -> CartKey:
        return (self.product.id, self.selected_color, self.selected_size)

    @property
    def line_total(self) -> int:
        return self.product.price * self.quantity


class CartSummary(BaseModel):
    """Totals derived from the cart lines"""
    total_items: int
    subtotal: int
    shipping: int
    free_shipping: bool
    total: int


class AddToCartRequest(BaseModel):
    """Request to add a product to the cart or buy it now"""
    product_id: int
    color: Optional[str] = None
    size: Optional[str] = None


class UpdateCartItemRequest(BaseModel):
    """Request to change a line's quantity. Values below 1 are ignored."""
    quantity: int
    color: Optional[str] = None
    size: Optional[str] = None


class CartLine(BaseModel):
    """Cart line as returned by the API"""
    product: Product
    quantity: int
    selected_color: Optional[str] = None
    selected_size: Optional[str] = None
    line_total: int


class CartResponse(BaseModel):
    """Cart API response"""
    items: list[CartLine]
    summary: CartSummary
    show_cart: bool = False
    message: Optional[str] = None
