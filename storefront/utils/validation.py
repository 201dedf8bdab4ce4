"""Defensive normalization of values crossing the storefront boundary.

None of these functions raise on bad input: quantities are clamped,
text is stripped of markup and invalid product records come back as None.
"""
from __future__ import annotations

import html
import math
import re
import warnings
from typing import Any, Mapping

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning

from storefront.store.product_models import ProductInfo

# elements whose content is dropped together with the tag
_DROP_WITH_CONTENT = ("script", "style", "template", "iframe", "noscript", "object", "embed")

_LEADING_INT = re.compile(r"([+-]?)(\d+)")

# longer digit runs saturate instead of being converted
_MAX_DIGITS = 18
_SATURATED = 10 ** _MAX_DIGITS


def sanitize_input(value: Any) -> str:
    """Strip all tags and attributes, returning escaped plain text.

    Non-string values are converted with ``str`` first. The result never
    contains ``<`` or ``>`` and sanitizing it again returns it unchanged.

    >>> sanitize_input("<b onclick='x()'>Rose</b> & Oud")
    'Rose &amp; Oud'
    """
    text = value if isinstance(value, str) else str(value)
    if not text:
        return ""

    with warnings.catch_warnings():
        # product image fields are URLs, which bs4 would otherwise warn about
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        soup = BeautifulSoup(text, "html.parser")
    for element in soup.find_all(_DROP_WITH_CONTENT):
        element.decompose()

    return html.escape(soup.get_text(), quote=False)


def _parse_leading_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return math.trunc(value) if math.isfinite(value) else None

    match = _LEADING_INT.match(str(value).strip())
    if match is None:
        return None

    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    num = _SATURATED if len(digits) > _MAX_DIGITS else int(digits)
    return -num if sign == "-" else num


def validate_quantity(quantity: Any, min_value: int = 1, max_value: int = 99) -> int:
    """Parse ``quantity`` as an integer and clamp it into ``[min_value, max_value]``.

    Anything that does not start with an integer falls back to ``min_value``.
    """
    num = _parse_leading_int(quantity)

    if num is None:
        return min_value

    if num < min_value:
        return min_value
    if num > max_value:
        return max_value

    return num


def _is_positive_price(price: Any) -> bool:
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        return False
    return math.isfinite(price) and price > 0


def validate_product(product: Any) -> ProductInfo | None:
    """Return a sanitized ``ProductInfo`` or None when the record is unusable.

    Required: ``id`` (non-negative integer, 0 included), non-blank ``name``
    and a positive finite numeric ``price``. Optional text fields default to
    an empty string.
    """
    if not isinstance(product, Mapping):
        return None

    raw_id = product.get("id")
    if raw_id is None or isinstance(raw_id, bool):
        return None
    product_id = _parse_leading_int(raw_id)
    if product_id is None or not 0 <= product_id < _SATURATED:
        return None

    name = product.get("name")
    if name is None or not str(name).strip():
        return None

    price = product.get("price")
    if not _is_positive_price(price):
        return None

    return ProductInfo(
        id=product_id,
        name=sanitize_input(name),
        price=price,
        volume=sanitize_input(product.get("volume") or ""),
        description=sanitize_input(product.get("description") or ""),
        image=sanitize_input(product.get("image") or ""),
    )


def format_price(price: Any) -> str:
    """Format a price for display with grouped thousands, e.g. ``1,234,567``."""
    try:
        num = float(price)
    except (TypeError, ValueError):
        return "0"

    if not math.isfinite(num):
        return "0"

    num = round(max(0.0, num), 3)
    if num.is_integer():
        return f"{int(num):,}"
    return f"{num:,}"
