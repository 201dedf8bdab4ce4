from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

from storefront.store.product_models import ProductInfo
from storefront.utils.validation import validate_product

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "products.json"


class Catalog:
    """Read-only product catalog.

    Records are passed through validate_product once, on construction, so
    an invalid record looks exactly like a missing one.
    """

    def __init__(self, records: Sequence[Mapping[str, Any]]) -> None:
        self._products = [p for p in map(validate_product, records) if p is not None]

        skipped = len(records) - len(self._products)
        if skipped:
            logger.warning("Skipped %d invalid catalog record(s)", skipped)

    @staticmethod
    def from_json(path: Path | str = DEFAULT_CATALOG_PATH) -> Catalog:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, list):
            raise ValueError(f"Catalog file {path} must contain a JSON array")

        logger.info("Loaded %d catalog record(s) from %s", len(data), path)
        return Catalog(data)

    def __len__(self) -> int:
        return len(self._products)

    def get_one(self, id: int) -> ProductInfo | None:
        for product in self._products:
            if product.id == id:
                return product
        return None

    def get_many(self, page: int = 1, page_size: int = 6) -> Iterable[ProductInfo]:
        offset = (page - 1) * page_size
        yield from self._products[offset:offset + page_size]

    def page_count(self, page_size: int = 6) -> int:
        return max(1, math.ceil(len(self._products) / page_size))
