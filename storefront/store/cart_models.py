from __future__ import annotations

from dataclasses import dataclass

from storefront.store.product_models import ProductInfo


@dataclass(slots=True, frozen=True)
class CartLineItem:
    id: int
    name: str
    price: float
    quantity: int
    volume: str = ""
    description: str = ""
    image: str = ""

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity

    @staticmethod
    def from_product(product: ProductInfo, quantity: int) -> CartLineItem:
        return CartLineItem(
            id=product.id,
            name=product.name,
            price=product.price,
            quantity=quantity,
            volume=product.volume,
            description=product.description,
            image=product.image,
        )
