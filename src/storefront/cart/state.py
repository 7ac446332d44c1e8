"""Cart state, actions and the pure transition function.

The cart is a single value (``CartState``) rebuilt on every action by
``reduce``. Totals are always derived from the items, never stored apart
from them.
"""

import json
from dataclasses import dataclass, field
from uuid import uuid4

CART_STORAGE_KEY = "girly-cart"

_VARIANT_KEYS = ("size", "color", "design")


class CartDataError(ValueError):
    """Raised when a persisted cart cannot be turned back into items."""


def line_key(product_id: str, variants: dict | None = None) -> tuple:
    """Key shared by every cart action: product id plus the chosen variants."""
    chosen = {key: value for key, value in (variants or {}).items() if key in _VARIANT_KEYS and value}
    return (str(product_id), tuple(sorted(chosen.items())))


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ProductSnapshot:
    """Product as it looked when it was put in the cart.

    ``stock_quantity`` is the ceiling at add time; it is carried for display
    and never re-checked here.
    """

    id: str
    name: str
    price: float
    stock_quantity: int = 0
    image_url: str | None = None
    category: str | None = None
    size: str | None = None
    color: str | None = None
    design: str | None = None

    @property
    def selected_variants(self) -> dict:
        return {key: getattr(self, key) for key in _VARIANT_KEYS if getattr(self, key)}

    @property
    def identity(self) -> tuple:
        """Two lines are the same product when id and chosen variants match."""
        return line_key(self.id, self.selected_variants)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "stock_quantity": self.stock_quantity,
            "image_url": self.image_url,
            "category": self.category,
            "size": self.size,
            "color": self.color,
            "design": self.design,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ProductSnapshot":
        if not isinstance(data, dict):
            raise CartDataError(f"Product must be an object, got {type(data).__name__}")
        try:
            return cls(
                id=str(data["id"]),
                name=data["name"],
                price=float(data["price"]),
                stock_quantity=int(data.get("stock_quantity") or 0),
                image_url=data.get("image_url"),
                category=data.get("category"),
                size=data.get("size"),
                color=data.get("color"),
                design=data.get("design"),
            )
        except (KeyError, TypeError, ValueError, OverflowError) as exc:
            raise CartDataError(f"Invalid product in cart: {exc}") from exc


@dataclass(frozen=True)
class CartItem:
    id: str
    product: ProductSnapshot
    quantity: int

    @property
    def line_total(self) -> float:
        return self.product.price * self.quantity

    def to_dict(self) -> dict:
        return {"id": self.id, "product": self.product.to_dict(), "quantity": self.quantity}


@dataclass(frozen=True)
class CartState:
    items: tuple[CartItem, ...] = ()
    total: float = 0
    item_count: int = 0

    @classmethod
    def from_items(cls, items) -> "CartState":
        items = tuple(items)
        return cls(
            items=items,
            total=sum(item.line_total for item in items),
            item_count=sum(item.quantity for item in items),
        )

    def snapshot(self) -> dict:
        return {
            "items": [item.to_dict() for item in self.items],
            "total": self.total,
            "itemCount": self.item_count,
        }


EMPTY_CART = CartState()


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AddItem:
    product: ProductSnapshot
    quantity: int = 1


@dataclass(frozen=True)
class RemoveItem:
    product_id: str
    variants: dict | None = None

    @property
    def key(self) -> tuple:
        return line_key(self.product_id, self.variants)


@dataclass(frozen=True)
class UpdateQuantity:
    product_id: str
    quantity: int
    variants: dict | None = None

    @property
    def key(self) -> tuple:
        return line_key(self.product_id, self.variants)


@dataclass(frozen=True)
class ClearCart:
    pass


@dataclass(frozen=True)
class LoadCart:
    items: tuple[CartItem, ...] = field(default_factory=tuple)


# ---------------------------------------------------------------------------
# Transition
# ---------------------------------------------------------------------------
def _new_item_id() -> str:
    return uuid4().hex


def reduce(state: CartState, action) -> CartState:
    """Return the cart that results from applying ``action`` to ``state``."""
    if isinstance(action, AddItem):
        quantity = action.quantity or 1
        identity = action.product.identity
        if any(item.product.identity == identity for item in state.items):
            items = [
                CartItem(id=item.id, product=item.product, quantity=item.quantity + quantity)
                if item.product.identity == identity
                else item
                for item in state.items
            ]
        else:
            items = [*state.items, CartItem(id=_new_item_id(), product=action.product, quantity=quantity)]
        return CartState.from_items(items)

    if isinstance(action, RemoveItem):
        return CartState.from_items(item for item in state.items if item.product.identity != action.key)

    if isinstance(action, UpdateQuantity):
        if action.quantity <= 0:
            return reduce(state, RemoveItem(product_id=action.product_id, variants=action.variants))
        return CartState.from_items(
            CartItem(id=item.id, product=item.product, quantity=action.quantity)
            if item.product.identity == action.key
            else item
            for item in state.items
        )

    if isinstance(action, ClearCart):
        return EMPTY_CART

    if isinstance(action, LoadCart):
        return CartState.from_items(action.items)

    raise TypeError(f"Unknown cart action: {action!r}")


# ---------------------------------------------------------------------------
# Serialisation
# ---------------------------------------------------------------------------
def dump_items(items) -> str:
    return json.dumps([item.to_dict() for item in items])


def load_items(raw: str) -> tuple[CartItem, ...]:
    """Parse a persisted item list.

    Raises:
        CartDataError: If ``raw`` is not JSON or does not describe cart items.
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as exc:
        raise CartDataError(f"Saved cart is not valid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise CartDataError("Saved cart must be a list of items")

    items = []
    for entry in data:
        if not isinstance(entry, dict):
            raise CartDataError("Cart item must be an object")
        try:
            quantity = int(entry["quantity"])
            item_id = str(entry.get("id") or _new_item_id())
        except (KeyError, TypeError, ValueError, OverflowError) as exc:
            raise CartDataError(f"Invalid cart item: {exc}") from exc
        if quantity < 1:
            raise CartDataError(f"Cart item quantity must be positive, got {quantity}")
        items.append(CartItem(id=item_id, product=ProductSnapshot.from_dict(entry.get("product")), quantity=quantity))
    return tuple(items)
