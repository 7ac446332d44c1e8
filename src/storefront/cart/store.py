"""Cart container that owns the current state and its persistence."""

import structlog

from storefront.cart.state import (
    CART_STORAGE_KEY,
    EMPTY_CART,
    AddItem,
    CartDataError,
    CartState,
    ClearCart,
    LoadCart,
    ProductSnapshot,
    RemoveItem,
    UpdateQuantity,
    dump_items,
    load_items,
    reduce,
)
from storefront.cart.storage import get_storage
from storefront.cart.storage.port import CartStorage

logger = structlog.get_logger(__name__)


class CartStore:
    """Holds one client's cart.

    The saved cart is read once at construction. After that every dispatched
    action writes the full item list back to storage.
    """

    def __init__(self, storage: CartStorage | None = None) -> None:
        self._storage = storage if storage is not None else get_storage()
        self._state: CartState = EMPTY_CART
        self._restore()

    def _restore(self) -> None:
        try:
            raw = self._storage.get(CART_STORAGE_KEY)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read saved cart", key=CART_STORAGE_KEY, error=str(exc))
            return
        if not raw:
            return
        try:
            items = load_items(raw)
        except CartDataError as exc:
            logger.warning("Discarding unreadable saved cart", key=CART_STORAGE_KEY, error=str(exc))
            return
        self._state = reduce(self._state, LoadCart(items=items))

    @property
    def state(self) -> CartState:
        return self._state

    def dispatch(self, action) -> CartState:
        self._state = reduce(self._state, action)
        self._storage.set(CART_STORAGE_KEY, dump_items(self._state.items))
        return self._state

    def add_item(self, product: ProductSnapshot | dict, quantity: int = 1) -> CartState:
        if isinstance(product, dict):
            product = ProductSnapshot.from_dict(product)
        return self.dispatch(AddItem(product=product, quantity=quantity))

    def remove_item(self, product_id: str, variants: dict | None = None) -> CartState:
        return self.dispatch(RemoveItem(product_id=product_id, variants=variants))

    def update_quantity(self, product_id: str, quantity: int, variants: dict | None = None) -> CartState:
        return self.dispatch(UpdateQuantity(product_id=product_id, quantity=quantity, variants=variants))

    def clear_cart(self) -> CartState:
        return self.dispatch(ClearCart())

    def snapshot(self) -> dict:
        return self._state.snapshot()
