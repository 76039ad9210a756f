"""Cart API routes for the storefront"""

from typing import Optional
from fastapi import APIRouter, HTTPException, Depends, Query

from ..core.session import ShopSession
from ..models.cart import (
    AddToCartRequest,
    ProductSelection,
    UpdateCartItemRequest,
    CartResponse,
)
from ..database.products import product_db
from ..services.cart import CartValidationError
from .deps import get_session

router = APIRouter(prefix="/api/cart", tags=["Cart"])


def _cart_response(session: ShopSession, message: Optional[str] = None) -> CartResponse:
    return CartResponse(
        items=session.cart.lines(),
        summary=session.cart.summary(),
        show_cart=session.view.show_cart,
        message=message,
    )


def _selection_for(session: ShopSession, request: AddToCartRequest):
    """
    Merge any color/size sent with the request over the session's selection.

    Nothing is stored here; the caller keeps the merged selection only once
    the product is in the cart.
    """
    product = product_db.get_product(request.product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    current = session.selection_for(product.id)
    selection = ProductSelection(
        color=request.color if request.color is not None else current.color,
        size=request.size if request.size is not None else current.size,
    )
    return product, selection


@router.get("", response_model=CartResponse)
async def get_cart(session: ShopSession = Depends(get_session)):
    """Get the session's cart"""
    return _cart_response(session)


@router.post("/items", response_model=CartResponse)
async def add_to_cart(
    request: AddToCartRequest,
    session: ShopSession = Depends(get_session),
):
    """Add one unit of a product with the selected color and size"""
    product, selection = _selection_for(session, request)

    try:
        session.cart.add(product, selection)
    except CartValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    session.selections[product.id] = selection
    # the product detail panel closes once the product is in the cart
    session.view.selected_product_id = None

    return _cart_response(session, message=f"Added {product.name} to cart")


@router.post("/buy-now", response_model=CartResponse)
async def buy_now(
    request: AddToCartRequest,
    session: ShopSession = Depends(get_session),
):
    """Replace the cart with this product and open the cart"""
    product, selection = _selection_for(session, request)

    try:
        session.cart.buy_now(product, selection)
    except CartValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    session.selections[product.id] = selection
    session.view.selected_product_id = None
    session.view.show_cart = True

    return _cart_response(session, message=f"Ready to check out {product.name}")


@router.put("/items/{product_id}", response_model=CartResponse)
async def update_cart_item(
    product_id: int,
    request: UpdateCartItemRequest,
    session: ShopSession = Depends(get_session),
):
    """Update a line's quantity. Quantities below 1 leave the line unchanged."""
    updated = session.cart.update_quantity(
        product_id, request.color, request.size, request.quantity
    )
    return _cart_response(session, message="Cart updated" if updated else "Cart unchanged")


@router.delete("/items/{product_id}", response_model=CartResponse)
async def remove_from_cart(
    product_id: int,
    color: Optional[str] = Query(None),
    size: Optional[str] = Query(None),
    session: ShopSession = Depends(get_session),
):
    """Remove a line from the cart"""
    removed = session.cart.remove(product_id, color, size)
    return _cart_response(session, message="Item removed" if removed else "Cart unchanged")


@router.delete("", response_model=CartResponse)
async def clear_cart(session: ShopSession = Depends(get_session)):
    """Clear all items from cart"""
    session.cart.clear()
    return _cart_response(session, message="Cart cleared")
