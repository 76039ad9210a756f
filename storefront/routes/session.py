"""Session browsing state routes: filters, selections, likes and open panels"""

from typing import Optional
from pydantic import BaseModel
from fastapi import APIRouter, Depends, HTTPException

from ..core.session import ShopSession
from ..models.cart import ProductSelection
from ..models.product import FilterState, FilterUpdateRequest, ProductSearchResponse
from ..database.products import product_db
from .deps import get_session

router = APIRouter(prefix="/api/session", tags=["Session"])


class SessionResponse(BaseModel):
    """Session overview"""
    session_id: str
    authenticated: bool
    email: Optional[str] = None
    filters: FilterState
    liked: list[int]
    cart_items: int
    show_cart: bool
    show_history: bool
    selected_product_id: Optional[int] = None


class SelectionRequest(BaseModel):
    """Color and/or size chosen for a product"""
    color: Optional[str] = None
    size: Optional[str] = None


class ViewUpdateRequest(BaseModel):
    """Open or close panels"""
    show_cart: Optional[bool] = None
    show_history: Optional[bool] = None
    selected_product_id: Optional[int] = None
    close_product: bool = False


def _overview(session: ShopSession) -> SessionResponse:
    return SessionResponse(
        session_id=session.session_id,
        authenticated=session.auth.is_valid,
        email=session.auth.email or None,
        filters=session.filters,
        liked=sorted(session.liked),
        cart_items=session.cart.total_items,
        show_cart=session.view.show_cart,
        show_history=session.view.show_history,
        selected_product_id=session.view.selected_product_id,
    )


def _require_product(product_id: int):
    product = product_db.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.get("", response_model=SessionResponse)
async def get_session_overview(session: ShopSession = Depends(get_session)):
    """Get session details"""
    return _overview(session)


@router.get("/products", response_model=ProductSearchResponse)
async def list_session_products(session: ShopSession = Depends(get_session)):
    """Catalog filtered and sorted by the session's filter state"""
    products = product_db.search_products(session.filters)
    return ProductSearchResponse(products=products, total=len(products), filters=session.filters)


@router.patch("/filters", response_model=FilterState)
async def update_filters(
    request: FilterUpdateRequest,
    session: ShopSession = Depends(get_session),
):
    """Change one or more filter dimensions"""
    changes = request.model_dump(exclude_none=True)
    session.filters = session.filters.model_copy(update=changes)
    return session.filters


@router.post("/filters/colors/{color}", response_model=FilterState)
async def toggle_color_filter(color: str, session: ShopSession = Depends(get_session)):
    """Select or deselect a color filter"""
    session.toggle_color(color)
    return session.filters


@router.post("/filters/sizes/{size}", response_model=FilterState)
async def toggle_size_filter(size: str, session: ShopSession = Depends(get_session)):
    """Select or deselect a size filter"""
    session.toggle_size(size)
    return session.filters


@router.delete("/filters", response_model=FilterState)
async def reset_filters(session: ShopSession = Depends(get_session)):
    """Restore every filter to its default"""
    session.reset_filters()
    return session.filters


@router.put("/selections/{product_id}", response_model=ProductSelection)
async def select_options(
    product_id: int,
    request: SelectionRequest,
    session: ShopSession = Depends(get_session),
):
    """Choose the color and/or size to use when the product goes into the cart"""
    _require_product(product_id)

    selection = session.selection_for(product_id)
    if request.color is not None:
        selection = session.select_color(product_id, request.color)
    if request.size is not None:
        selection = session.select_size(product_id, request.size)
    return selection


@router.post("/likes/{product_id}")
async def toggle_like(product_id: int, session: ShopSession = Depends(get_session)):
    """Like or unlike a product"""
    _require_product(product_id)
    liked = session.toggle_like(product_id)
    return {"product_id": product_id, "liked": liked}


@router.patch("/view", response_model=SessionResponse)
async def update_view(
    request: ViewUpdateRequest,
    session: ShopSession = Depends(get_session),
):
    """Open or close the cart, order history or product detail panels"""
    if request.show_cart is not None:
        session.view.show_cart = request.show_cart

    if request.show_history is not None:
        session.view.show_history = request.show_history
        if not request.show_history:
            # closing the history drops any load still in flight
            session.history.cancel()

    if request.close_product:
        session.view.selected_product_id = None
    elif request.selected_product_id is not None:
        _require_product(request.selected_product_id)
        session.view.selected_product_id = request.selected_product_id

    return _overview(session)
