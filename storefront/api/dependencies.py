from typing import Annotated

from fastapi import Depends, Request

from storefront.config import Settings
from storefront.store.cart_store import CartStore
from storefront.store.catalog import Catalog
from storefront.store.checkout import CheckoutService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog


def get_cart_store(request: Request) -> CartStore:
    return request.app.state.cart_store


def get_checkout_service(request: Request) -> CheckoutService:
    return request.app.state.checkout_service


SettingsDep = Annotated[Settings, Depends(get_settings)]
CatalogDep = Annotated[Catalog, Depends(get_catalog)]
CartStoreDep = Annotated[CartStore, Depends(get_cart_store)]
CheckoutDep = Annotated[CheckoutService, Depends(get_checkout_service)]
