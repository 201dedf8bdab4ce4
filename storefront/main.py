from __future__ import annotations

import logging

from fastapi import FastAPI

from storefront.api.cart.cart_routes import cart_router
from storefront.api.product.product_routes import product_router
from storefront.config import Settings, load_settings
from storefront.store.cart_store import CartStore
from storefront.store.catalog import Catalog
from storefront.store.checkout import CheckoutService
from storefront.utils.logger import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, catalog: Catalog | None = None) -> FastAPI:
    """Composition root: builds the catalog, the session cart and checkout."""
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="Storefront API")

    app.state.settings = settings
    app.state.catalog = catalog if catalog is not None else Catalog.from_json(settings.catalog_path)
    app.state.cart_store = CartStore()
    app.state.checkout_service = CheckoutService(redirect_delay_ms=settings.redirect_delay_ms)

    app.include_router(product_router)
    app.include_router(cart_router)

    logger.info("Storefront ready with %d product(s)", len(app.state.catalog))
    return app
