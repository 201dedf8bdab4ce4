from __future__ import annotations

import logging
from dataclasses import replace

from storefront.store.cart_models import CartLineItem
from storefront.store.product_models import ProductInfo

logger = logging.getLogger(__name__)


class CartStore:
    """In-memory session cart.

    Holds at most one line item per product id, in insertion order. The
    store trusts its caller: quantities are bounded before they get here.
    Every mutation swaps in a new mapping and recalculates the item count.
    """

    def __init__(self) -> None:
        self._items: dict[int, CartLineItem] = {}
        self._item_count = 0

    @property
    def cart_items(self) -> list[CartLineItem]:
        return list(self._items.values())

    @property
    def cart_item_count(self) -> int:
        return self._item_count

    @property
    def total_price(self) -> float:
        return sum(item.subtotal for item in self._items.values())

    @property
    def is_empty(self) -> bool:
        return not self._items

    def get_one(self, id: int) -> CartLineItem | None:
        return self._items.get(id)

    def _recalculate(self, items: dict[int, CartLineItem]) -> None:
        self._items = items
        self._item_count = sum(item.quantity for item in items.values())

    def add_to_cart(self, product: ProductInfo, quantity: int) -> None:
        existing = self._items.get(product.id)
        if existing is not None:
            # keeps the original position of the line item
            updated = replace(existing, quantity=existing.quantity + quantity)
        else:
            updated = CartLineItem.from_product(product, quantity)

        self._recalculate({**self._items, product.id: updated})
        logger.debug("added %s x%d, count=%d", product.id, quantity, self._item_count)

    def increment_quantity(self, id: int) -> None:
        item = self._items.get(id)
        if item is None:
            return

        self._recalculate({**self._items, id: replace(item, quantity=item.quantity + 1)})
        logger.debug("incremented %s to %d", id, item.quantity + 1)

    def decrement_quantity(self, id: int) -> None:
        item = self._items.get(id)
        if item is None or item.quantity <= 1:
            return

        self._recalculate({**self._items, id: replace(item, quantity=item.quantity - 1)})
        logger.debug("decremented %s to %d", id, item.quantity - 1)

    def remove_from_cart(self, id: int) -> None:
        if id not in self._items:
            return

        self._recalculate({k: v for k, v in self._items.items() if k != id})
        logger.debug("removed %s", id)

    def clear_cart(self) -> None:
        self._recalculate({})
        logger.debug("cart cleared")
