"""Checkout and order models for the storefront"""

from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class CheckoutDraft(BaseModel):
    """Contact and delivery details being filled in at checkout"""
    email: str = ""
    phone: str = ""
    delivery_address: str = ""
    delivery_date: str = ""


class CheckoutUpdateRequest(BaseModel):
    """Partial update of the checkout draft"""
    email: Optional[str] = None
    phone: Optional[str] = None
    delivery_address: Optional[str] = None
    delivery_date: Optional[str] = None


class OrderProduct(BaseModel):
    """Snapshot of a cart line stored with an order"""
    product_id: int = Field(alias="productId")
    name: str
    quantity: int
    price: int
    color: Optional[str] = None
    size: Optional[str] = None

    class Config:
        populate_by_name = True


class OrderCreate(BaseModel):
    """Order payload sent to the record store"""
    email: str
    phone: str
    delivery_address: str = Field(alias="deliveryAddress")
    delivery_date: str = Field(alias="deliveryDate")
    products: list[OrderProduct]
    total_amount: int = Field(alias="totalAmount")
    status: OrderStatus = OrderStatus.PENDING

    class Config:
        populate_by_name = True


class Order(OrderCreate):
    """Order record as stored"""
    id: str
    created: str = ""

    @property
    def can_cancel(self) -> bool:
        return self.status == OrderStatus.PENDING


class CheckoutState(BaseModel):
    """Checkout draft together with its validation state"""
    draft: CheckoutDraft
    delivery_dates: list[str]
    errors: dict[str, str]
    can_submit: bool
    is_checking_out: bool


class CheckoutResponse(BaseModel):
    """Response from checkout"""
    success: bool
    order: Optional[Order] = None
    error_message: Optional[str] = None


class OrderView(BaseModel):
    """Order as listed in the order history"""
    order: Order
    can_cancel: bool


class OrderHistoryResponse(BaseModel):
    """Order history of the signed-in identity, newest first"""
    orders: list[OrderView]
    message: Optional[str] = None
