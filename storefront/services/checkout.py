"""
Checkout

Validates the checkout draft, builds the order payload from the cart and
submits it to the record store.
"""

import re
import logging
from datetime import date, timedelta
from typing import Optional

from shared.records import RecordStoreClient
from ..models.checkout import CheckoutDraft, Order, OrderCreate, OrderProduct, OrderStatus
from .cart import ShoppingCart, order_total

logger = logging.getLogger(__name__)

ORDERS_COLLECTION = "orders"

EMAIL_PATTERN = re.compile(r"^[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}$", re.IGNORECASE)
PHONE_PATTERN = re.compile(r"^\d{10,15}$")
NON_DIGITS = re.compile(r"\D")

DELIVERY_MIN_DAYS = 5
DELIVERY_MAX_DAYS = 10


class CheckoutValidationError(ValueError):
    """Checkout rejected before contacting the record store"""
    pass


class CheckoutInProgressError(RuntimeError):
    """A checkout for this session is already being submitted"""
    pass


def normalize_phone(value: str) -> str:
    """Keep only the digits of a typed phone number"""
    return NON_DIGITS.sub("", value)


def delivery_date_options(today: Optional[date] = None) -> list[str]:
    """Delivery dates offered at checkout, as ISO calendar dates"""
    today = today or date.today()
    return [
        (today + timedelta(days=offset)).isoformat()
        for offset in range(DELIVERY_MIN_DAYS, DELIVERY_MAX_DAYS + 1)
    ]


def new_checkout_draft(email: str = "", today: Optional[date] = None) -> CheckoutDraft:
    """Empty draft with the earliest delivery date preselected"""
    return CheckoutDraft(email=email, delivery_date=delivery_date_options(today)[0])


def draft_errors(draft: CheckoutDraft, today: Optional[date] = None) -> dict[str, str]:
    """Validate each draft field independently. Returns field -> message."""
    errors = {}

    if not EMAIL_PATTERN.match(draft.email):
        errors["email"] = "Please enter a valid email address"
    if not PHONE_PATTERN.match(draft.phone):
        errors["phone"] = "Please enter a valid phone number (10-15 digits)"
    if not draft.delivery_address.strip():
        errors["delivery_address"] = "Please enter a delivery address"
    if not draft.delivery_date or draft.delivery_date not in delivery_date_options(today):
        errors["delivery_date"] = "Please select a delivery date"

    return errors


def can_submit(draft: CheckoutDraft, cart: ShoppingCart, today: Optional[date] = None) -> bool:
    return len(cart) > 0 and not draft_errors(draft, today)


def validate_checkout(draft: CheckoutDraft, cart: ShoppingCart, today: Optional[date] = None) -> None:
    """Raise CheckoutValidationError with the first problem found"""
    if len(cart) == 0:
        raise CheckoutValidationError("Your cart is empty")

    errors = draft_errors(draft, today)
    if errors:
        raise CheckoutValidationError(next(iter(errors.values())))


def build_order(cart: ShoppingCart, draft: CheckoutDraft) -> OrderCreate:
    """Snapshot the cart and draft into an order payload"""
    products = [
        OrderProduct(
            product_id=item.product.id,
            name=item.product.name,
            quantity=item.quantity,
            price=item.product.price,
            color=item.selected_color,
            size=item.selected_size,
        )
        for item in cart.items
    ]

    return OrderCreate(
        email=draft.email,
        phone=draft.phone,
        delivery_address=draft.delivery_address,
        delivery_date=draft.delivery_date,
        products=products,
        total_amount=order_total(cart.subtotal),
        status=OrderStatus.PENDING,
    )


class CheckoutService:
    """Submits orders for storefront sessions"""

    def __init__(self, client: RecordStoreClient):
        self.client = client

    async def submit(self, session, today: Optional[date] = None) -> Order:
        """
        Validate and submit the session's checkout.

        On success the cart is emptied and the cart view closed. On any
        failure the cart and draft are left as they were.

        Raises:
            CheckoutInProgressError: if a submission is already in flight
            CheckoutValidationError: if the draft or cart is invalid
            RecordStoreError: if the record store rejects the order
        """
        if session.is_checking_out:
            raise CheckoutInProgressError("Your order is already being placed")

        validate_checkout(session.checkout, session.cart, today)
        payload = build_order(session.cart, session.checkout)

        session.is_checking_out = True
        try:
            record = await self.client.create(
                ORDERS_COLLECTION,
                payload.model_dump(mode="json", by_alias=True),
                token=session.auth.token or None,
            )
        finally:
            session.is_checking_out = False

        order = Order.model_validate(record)
        session.cart.clear()
        session.view.show_cart = False

        logger.info(
            f"Order {order.id} created: {order.total_amount} for {order.email} "
            f"({len(order.products)} lines)"
        )
        return order
