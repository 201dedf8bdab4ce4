from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from storefront.store.checkout import CheckoutReceipt, PaymentMethod


class CheckoutRequest(BaseModel):
    payment_method: PaymentMethod

    model_config = ConfigDict(extra="forbid")


class CheckoutResponse(BaseModel):
    payment_method: PaymentMethod
    item_count: int
    total_price: float
    total_price_display: str
    message: str
    redirect_to: str
    redirect_delay_ms: int

    @staticmethod
    def from_receipt(receipt: CheckoutReceipt) -> CheckoutResponse:
        return CheckoutResponse(
            payment_method=receipt.payment_method,
            item_count=receipt.item_count,
            total_price=receipt.total_price,
            total_price_display=receipt.total_price_display,
            message=receipt.message,
            redirect_to=receipt.redirect_to,
            redirect_delay_ms=receipt.redirect_delay_ms,
        )
