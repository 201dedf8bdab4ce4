from __future__ import annotations

from pathlib import Path

import pytest

from storefront.config import load_settings
from storefront.store.catalog import DEFAULT_CATALOG_PATH

ENV_VARS = (
	"STOREFRONT_CATALOG_PATH",
	"STOREFRONT_PAGE_SIZE",
	"STOREFRONT_MAX_QUANTITY",
	"STOREFRONT_REDIRECT_DELAY_MS",
	"STOREFRONT_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
	for name in ENV_VARS:
		monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
	settings = load_settings()
	assert settings.catalog_path == DEFAULT_CATALOG_PATH
	assert settings.page_size == 6
	assert settings.max_quantity == 99
	assert settings.redirect_delay_ms == 1500
	assert settings.log_level == "INFO"


def test_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
	monkeypatch.setenv("STOREFRONT_CATALOG_PATH", str(tmp_path / "p.json"))
	monkeypatch.setenv("STOREFRONT_PAGE_SIZE", "12")
	monkeypatch.setenv("STOREFRONT_MAX_QUANTITY", "5")
	monkeypatch.setenv("STOREFRONT_REDIRECT_DELAY_MS", "0")
	monkeypatch.setenv("STOREFRONT_LOG_LEVEL", "debug")

	settings = load_settings()
	assert settings.catalog_path == tmp_path / "p.json"
	assert settings.page_size == 12
	assert settings.max_quantity == 5
	assert settings.redirect_delay_ms == 0
	assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("value", ["abc", "0", "-3"])
def test_invalid_page_size(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
	monkeypatch.setenv("STOREFRONT_PAGE_SIZE", value)
	with pytest.raises(ValueError, match="STOREFRONT_PAGE_SIZE"):
		load_settings()
