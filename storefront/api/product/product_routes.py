from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query
from pydantic import PositiveInt

from storefront.api.checkout_contracts import CheckoutResponse
from storefront.api.dependencies import CartStoreDep, CatalogDep, CheckoutDep, SettingsDep
from storefront.utils.validation import validate_quantity

from .product_contracts import (
    BuyNowRequest,
    ProductPageResponse,
    ProductResponse,
)

product_router = APIRouter(prefix="/product")


@product_router.get("/")
async def get_product_list(
    catalog: CatalogDep,
    settings: SettingsDep,
    page: Annotated[PositiveInt, Query()] = 1,
) -> ProductPageResponse:
    return ProductPageResponse(
        items=[
            ProductResponse.from_info(p)
            for p in catalog.get_many(page=page, page_size=settings.page_size)
        ],
        page=page,
        pages=catalog.page_count(settings.page_size),
    )


@product_router.get(
    "/{id}",
    responses={
        HTTPStatus.OK: {
            "description": "Successfully returned requested product",
        },
        HTTPStatus.NOT_FOUND: {
            "description": "Product is absent from the catalog or its record is invalid",
        },
    },
)
async def get_product_by_id(id: int, catalog: CatalogDep) -> ProductResponse:
    info = catalog.get_one(id)

    if info is None:
        raise HTTPException(HTTPStatus.NOT_FOUND, "Product not found")

    return ProductResponse.from_info(info)


@product_router.post(
    "/{id}/buy-now",
    responses={
        HTTPStatus.NOT_FOUND: {
            "description": "Product is absent from the catalog or its record is invalid",
        },
    },
)
async def buy_now(
    id: int,
    body: BuyNowRequest,
    catalog: CatalogDep,
    cart: CartStoreDep,
    checkout: CheckoutDep,
    settings: SettingsDep,
) -> CheckoutResponse:
    info = catalog.get_one(id)

    if info is None:
        raise HTTPException(HTTPStatus.NOT_FOUND, "Product not found")

    quantity = validate_quantity(body.quantity, 1, settings.max_quantity)
    return CheckoutResponse.from_receipt(
        checkout.buy_now(cart, info, quantity, body.payment_method)
    )
