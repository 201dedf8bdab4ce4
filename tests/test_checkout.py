from __future__ import annotations

from storefront.store.cart_store import CartStore
from storefront.store.checkout import CheckoutService, PaymentMethod
from storefront.store.product_models import ProductInfo

ROSE = ProductInfo(id=1, name="Rose", price=1000)
OUD = ProductInfo(id=2, name="Oud", price=250000)


def test_checkout_of_empty_cart_is_blocked() -> None:
	cart = CartStore()
	assert CheckoutService().checkout(cart, PaymentMethod.CARD) is None
	assert cart.is_empty


def test_checkout_clears_cart_and_returns_receipt() -> None:
	cart = CartStore()
	cart.add_to_cart(ROSE, 2)
	cart.add_to_cart(OUD, 4)

	receipt = CheckoutService(redirect_delay_ms=700).checkout(cart, PaymentMethod.KAKAO_PAY)

	assert receipt is not None
	assert receipt.item_count == 6
	assert receipt.total_price == 1002000
	assert receipt.total_price_display == "1,002,000"
	assert receipt.payment_method is PaymentMethod.KAKAO_PAY
	assert "1,002,000" in receipt.message
	assert receipt.redirect_to == "/"
	assert receipt.redirect_delay_ms == 700

	assert cart.is_empty
	assert cart.cart_item_count == 0


def test_buy_now_clears_cart_without_adding_product() -> None:
	cart = CartStore()
	cart.add_to_cart(OUD, 1)

	receipt = CheckoutService().buy_now(cart, ROSE, 3, PaymentMethod.NAVER_PAY)

	assert receipt.item_count == 3
	assert receipt.total_price == 3000
	assert receipt.total_price_display == "3,000"
	assert "Rose" in receipt.message
	assert cart.is_empty
