"""Environment-driven configuration for the storefront service."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from storefront.store.catalog import DEFAULT_CATALOG_PATH


@dataclass(slots=True)
class Settings:
    catalog_path: Path = DEFAULT_CATALOG_PATH
    page_size: int = 6
    max_quantity: int = 99
    redirect_delay_ms: int = 1500
    log_level: str = "INFO"


def _int_env(name: str, default: int, minimum: int = 0) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}")
    return value


def load_settings() -> Settings:
    """Load environment variables (and a .env file, if any) into Settings."""
    load_dotenv()

    return Settings(
        catalog_path=Path(os.getenv("STOREFRONT_CATALOG_PATH", str(DEFAULT_CATALOG_PATH))),
        page_size=_int_env("STOREFRONT_PAGE_SIZE", 6, minimum=1),
        max_quantity=_int_env("STOREFRONT_MAX_QUANTITY", 99, minimum=1),
        redirect_delay_ms=_int_env("STOREFRONT_REDIRECT_DELAY_MS", 1500),
        log_level=os.getenv("STOREFRONT_LOG_LEVEL", "INFO").upper(),
    )
