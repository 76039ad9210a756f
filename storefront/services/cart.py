"""Shopping cart state for a storefront session"""

from typing import Optional

from ..models.cart import CartItem, CartKey, CartLine, CartSummary, ProductSelection
from ..models.product import Product


class CartValidationError(ValueError):
    """A cart action was rejected because a required choice is missing"""
    pass


def validate_selection(product: Product, selection: ProductSelection, action: str = "adding to cart") -> None:
    """Require a color and a size for products that offer them"""
    if product.colors is not None and not selection.color:
        raise CartValidationError(f"Please select a color before {action}")
    if product.sizes is not None and not selection.size:
        raise CartValidationError(f"Please select a size before {action}")


class ShoppingCart:
    """
    Cart lines of one session.

    Lines are unique by (product id, color, size). Totals are derived from
    the lines on every read.
    """

    FREE_SHIPPING_THRESHOLD = 10000
    SHIPPING_FEE = 500

    def __init__(self):
        self.items: list[CartItem] = []

    def __len__(self) -> int:
        return len(self.items)

    def find(self, key: CartKey) -> Optional[CartItem]:
        """Get the line with an identity key"""
        return next((item for item in self.items if item.key == key), None)

    def add(self, product: Product, selection: ProductSelection) -> CartItem:
        """
        Add one unit of a product with the chosen color and size.

        Raises:
            CartValidationError: if the product needs a color or size that
                was not chosen. The cart is left unchanged.
        """
        validate_selection(product, selection)

        key = (product.id, selection.color, selection.size)
        existing_item = self.find(key)

        if existing_item:
            existing_item.quantity += 1
            return existing_item

        cart_item = CartItem(
            product=product,
            quantity=1,
            selected_color=selection.color,
            selected_size=selection.size,
        )
        self.items.append(cart_item)
        return cart_item

    def buy_now(self, product: Product, selection: ProductSelection) -> CartItem:
        """Replace the whole cart with a single unit of the product"""
        validate_selection(product, selection, action="proceeding")

        cart_item = CartItem(
            product=product,
            quantity=1,
            selected_color=selection.color,
            selected_size=selection.size,
        )
        self.items = [cart_item]
        return cart_item

    def remove(self, product_id: int, color: Optional[str] = None, size: Optional[str] = None) -> bool:
        """Remove the line with this identity key. Missing lines are ignored."""
        key = (product_id, color, size)
        remaining = [item for item in self.items if item.key != key]
        removed = len(remaining) != len(self.items)
        self.items = remaining
        return removed

    def update_quantity(
        self,
        product_id: int,
        color: Optional[str],
        size: Optional[str],
        quantity: int,
    ) -> bool:
        """
        Set a line's quantity.

        Quantities below 1 are ignored; removing a line takes remove().
        """
        if quantity < 1:
            return False

        item = self.find((product_id, color, size))
        if not item:
            return False

        item.quantity = quantity
        return True

    def clear(self) -> None:
        """Clear all items from cart"""
        self.items = []

    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def subtotal(self) -> int:
        return sum(item.line_total for item in self.items)

    @property
    def shipping(self) -> int:
        return shipping_for(self.subtotal)

    @property
    def total(self) -> int:
        return self.subtotal + self.shipping

    def summary(self) -> CartSummary:
        subtotal = self.subtotal
        shipping = self.shipping
        return CartSummary(
            total_items=self.total_items,
            subtotal=subtotal,
            shipping=shipping,
            free_shipping=shipping == 0,
            total=subtotal + shipping,
        )

    def lines(self) -> list[CartLine]:
        return [
            CartLine(
                product=item.product,
                quantity=item.quantity,
                selected_color=item.selected_color,
                selected_size=item.selected_size,
                line_total=item.line_total,
            )
            for item in self.items
        ]


def shipping_for(subtotal: int) -> int:
    """Shipping is free once the subtotal exceeds the threshold"""
    if subtotal > ShoppingCart.FREE_SHIPPING_THRESHOLD:
        return 0
    return ShoppingCart.SHIPPING_FEE


def order_total(subtotal: int) -> int:
    return subtotal + shipping_for(subtotal)
