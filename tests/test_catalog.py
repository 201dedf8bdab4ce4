from __future__ import annotations

import json
from pathlib import Path

import pytest

from storefront.store.catalog import DEFAULT_CATALOG_PATH, Catalog


def records(n: int) -> list[dict]:
	return [{"id": i, "name": f"p{i}", "price": 1000 * i} for i in range(1, n + 1)]


def test_get_one_returns_validated_product() -> None:
	catalog = Catalog([{"id": 5, "name": "<em>Fig</em>", "price": 98000, "volume": "50ml"}])

	product = catalog.get_one(5)
	assert product is not None
	assert product.name == "Fig"
	assert product.volume == "50ml"
	assert product.description == ""


def test_invalid_and_missing_records_are_not_found() -> None:
	catalog = Catalog(
		[
			{"id": 1, "name": "ok", "price": 10},
			{"id": 2, "name": "free", "price": 0},
			{"id": 3, "price": 10},
			"garbage",
		]
	)

	assert catalog.get_one(1) is not None
	assert catalog.get_one(2) is None
	assert catalog.get_one(3) is None
	assert catalog.get_one(404) is None
	assert len(catalog) == 1


def test_pagination() -> None:
	catalog = Catalog(records(14))

	assert [p.id for p in catalog.get_many(page=1, page_size=6)] == [1, 2, 3, 4, 5, 6]
	assert [p.id for p in catalog.get_many(page=3, page_size=6)] == [13, 14]
	assert list(catalog.get_many(page=4, page_size=6)) == []
	assert catalog.page_count(6) == 3


def test_empty_catalog_has_one_page() -> None:
	assert Catalog([]).page_count(6) == 1


def test_from_json(tmp_path: Path) -> None:
	path = tmp_path / "products.json"
	path.write_text(json.dumps(records(3)), encoding="utf-8")

	catalog = Catalog.from_json(path)
	assert len(catalog) == 3
	assert catalog.get_one(2).price == 2000


def test_from_json_rejects_non_array(tmp_path: Path) -> None:
	path = tmp_path / "products.json"
	path.write_text(json.dumps({"id": 1}), encoding="utf-8")

	with pytest.raises(ValueError):
		Catalog.from_json(path)


def test_bundled_catalog_is_fully_valid() -> None:
	raw = json.loads(DEFAULT_CATALOG_PATH.read_text(encoding="utf-8"))
	catalog = Catalog.from_json()
	assert len(catalog) == len(raw) > 0
