from http import HTTPStatus

from fastapi import APIRouter, HTTPException

from storefront.api.checkout_contracts import CheckoutRequest, CheckoutResponse
from storefront.api.dependencies import CartStoreDep, CatalogDep, CheckoutDep, SettingsDep
from storefront.utils.validation import validate_quantity

from .cart_contracts import (
    AddToCartRequest,
    CartResponse,
)

cart_router = APIRouter(prefix="/cart")


@cart_router.get("/")
async def get_cart(cart: CartStoreDep) -> CartResponse:
    return CartResponse.from_store(cart)


@cart_router.post(
    "/items",
    responses={
        HTTPStatus.OK: {
            "description": "Product added or its quantity merged into the existing line item",
        },
        HTTPStatus.NOT_FOUND: {
            "description": "Product is absent from the catalog or its record is invalid",
        },
    },
)
async def add_to_cart(
    body: AddToCartRequest,
    cart: CartStoreDep,
    catalog: CatalogDep,
    settings: SettingsDep,
) -> CartResponse:
    info = catalog.get_one(body.product_id)

    if info is None:
        raise HTTPException(HTTPStatus.NOT_FOUND, "Product not found")

    quantity = validate_quantity(body.quantity, 1, settings.max_quantity)
    cart.add_to_cart(info, quantity)
    return CartResponse.from_store(cart)


@cart_router.post("/items/{id}/increment")
async def increment_quantity(id: int, cart: CartStoreDep) -> CartResponse:
    cart.increment_quantity(id)
    return CartResponse.from_store(cart)


@cart_router.post("/items/{id}/decrement")
async def decrement_quantity(id: int, cart: CartStoreDep) -> CartResponse:
    cart.decrement_quantity(id)
    return CartResponse.from_store(cart)


@cart_router.delete("/items/{id}")
async def remove_from_cart(id: int, cart: CartStoreDep) -> CartResponse:
    cart.remove_from_cart(id)
    return CartResponse.from_store(cart)


@cart_router.delete("/")
async def clear_cart(cart: CartStoreDep) -> CartResponse:
    cart.clear_cart()
    return CartResponse.from_store(cart)


@cart_router.post(
    "/checkout",
    responses={
        HTTPStatus.OK: {
            "description": "Payment simulated and cart emptied",
        },
        HTTPStatus.BAD_REQUEST: {
            "description": "Checkout is blocked because the cart is empty",
        },
    },
)
async def checkout(
    body: CheckoutRequest,
    cart: CartStoreDep,
    service: CheckoutDep,
) -> CheckoutResponse:
    receipt = service.checkout(cart, body.payment_method)

    if receipt is None:
        raise HTTPException(HTTPStatus.BAD_REQUEST, "Cart is empty")

    return CheckoutResponse.from_receipt(receipt)
