from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict

from storefront.store.checkout import PaymentMethod
from storefront.store.product_models import ProductInfo
from storefront.utils.validation import format_price


class ProductResponse(BaseModel):
    id: int
    name: str
    price: float
    price_display: str
    volume: str
    description: str
    image: str

    @staticmethod
    def from_info(info: ProductInfo) -> ProductResponse:
        return ProductResponse(
            id=info.id,
            name=info.name,
            price=info.price,
            price_display=format_price(info.price),
            volume=info.volume,
            description=info.description,
            image=info.image,
        )


class ProductPageResponse(BaseModel):
    items: List[ProductResponse]
    page: int
    pages: int


class BuyNowRequest(BaseModel):
    # raw user input, clamped by validate_quantity
    quantity: Any = 1
    payment_method: PaymentMethod = PaymentMethod.CARD

    model_config = ConfigDict(extra="forbid")
