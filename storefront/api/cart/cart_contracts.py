from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict

from storefront.store.cart_models import CartLineItem
from storefront.store.cart_store import CartStore
from storefront.utils.validation import format_price


class CartItemResponse(BaseModel):
    id: int
    name: str
    price: float
    price_display: str
    quantity: int
    volume: str
    description: str
    image: str

    @staticmethod
    def from_line_item(item: CartLineItem) -> CartItemResponse:
        return CartItemResponse(
            id=item.id,
            name=item.name,
            price=item.price,
            price_display=format_price(item.price),
            quantity=item.quantity,
            volume=item.volume,
            description=item.description,
            image=item.image,
        )


class CartResponse(BaseModel):
    items: List[CartItemResponse]
    item_count: int
    total_price: float
    total_price_display: str

    @staticmethod
    def from_store(cart: CartStore) -> CartResponse:
        return CartResponse(
            items=[CartItemResponse.from_line_item(item) for item in cart.cart_items],
            item_count=cart.cart_item_count,
            total_price=cart.total_price,
            total_price_display=format_price(cart.total_price),
        )


class AddToCartRequest(BaseModel):
    product_id: int
    # raw user input, clamped by validate_quantity
    quantity: Any = 1

    model_config = ConfigDict(extra="forbid")
