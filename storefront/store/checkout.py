from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from storefront.store.cart_store import CartStore
from storefront.store.product_models import ProductInfo
from storefront.utils.validation import format_price

logger = logging.getLogger(__name__)


class PaymentMethod(str, Enum):
    CARD = "card"
    BANK_TRANSFER = "bank_transfer"
    KAKAO_PAY = "kakao_pay"
    NAVER_PAY = "naver_pay"


@dataclass(slots=True, frozen=True)
class CheckoutReceipt:
    payment_method: PaymentMethod
    item_count: int
    total_price: float
    total_price_display: str
    message: str
    redirect_to: str
    redirect_delay_ms: int


class CheckoutService:
    """Simulated checkout: nothing is charged, the cart is just emptied."""

    def __init__(self, redirect_delay_ms: int = 1500, redirect_to: str = "/"):
        self.redirect_delay_ms = redirect_delay_ms
        self.redirect_to = redirect_to

    def _receipt(
        self,
        method: PaymentMethod,
        item_count: int,
        total_price: float,
        what: str,
    ) -> CheckoutReceipt:
        total_display = format_price(total_price)
        return CheckoutReceipt(
            payment_method=method,
            item_count=item_count,
            total_price=total_price,
            total_price_display=total_display,
            message=f"Paid {total_display} for {what} by {method.value}. Thank you!",
            redirect_to=self.redirect_to,
            redirect_delay_ms=self.redirect_delay_ms,
        )

    def checkout(self, cart: CartStore, method: PaymentMethod) -> CheckoutReceipt | None:
        # an empty cart never reaches confirmation
        if cart.is_empty:
            return None

        count = cart.cart_item_count
        receipt = self._receipt(method, count, cart.total_price, f"{count} item(s)")
        cart.clear_cart()

        logger.info("Checkout confirmed: %d item(s), total %s, %s",
                    count, receipt.total_price_display, method.value)
        return receipt

    def buy_now(
        self,
        cart: CartStore,
        product: ProductInfo,
        quantity: int,
        method: PaymentMethod = PaymentMethod.CARD,
    ) -> CheckoutReceipt:
        """Purchase a single product directly; the cart is emptied as well."""
        cart.clear_cart()
        receipt = self._receipt(
            method, quantity, product.price * quantity, f"{product.name} x{quantity}"
        )

        logger.info("Buy now confirmed: product %s x%d, total %s",
                    product.id, quantity, receipt.total_price_display)
        return receipt
