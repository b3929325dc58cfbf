import json

import pytest
from pydantic import ValidationError

from services.order_service.catalog import Catalog, CatalogEntry, DEFAULT_CATALOG, load_catalog


class TestCatalogLookups:

    @pytest.mark.parametrize("pizza_id, name, price", [
        (1, "Margherita", 199.0),
        (2, "Pepperoni", 249.0),
        (3, "Veggie Delight", 329.0),
    ])
    def test_known_ids(self, pizza_id, name, price):
        catalog = Catalog()
        assert catalog.name_of(pizza_id) == name
        assert catalog.unit_price_of(pizza_id) == price

    @pytest.mark.parametrize("pizza_id", [0, 4, 99, -1])
    def test_unknown_id_has_no_name_and_zero_price(self, pizza_id):
        catalog = Catalog()
        assert catalog.name_of(pizza_id) is None
        assert catalog.unit_price_of(pizza_id) == 0.0

    def test_names_are_in_id_order(self):
        assert Catalog().names() == {1: "Margherita", 2: "Pepperoni", 3: "Veggie Delight"}

    def test_entries_cannot_be_mutated(self):
        entry = Catalog().entries()[0]
        with pytest.raises(ValidationError):
            entry.unit_price = 1.0

    def test_catalog_is_independent_of_source_list(self):
        entries = list(DEFAULT_CATALOG)
        catalog = Catalog(entries)
        entries.append(CatalogEntry(id=4, name="Hawaiian", unit_price=279.0))
        assert 4 not in catalog
        assert len(catalog) == 3


class TestLoadCatalog:

    def test_defaults_without_path(self, monkeypatch):
        monkeypatch.delenv("PIZZA_CATALOG_PATH", raising=False)
        assert load_catalog().names() == Catalog().names()

    def test_reads_json_file(self, tmp_path):
        path = tmp_path / "menu.json"
        path.write_text(json.dumps([
            {"id": 7, "name": "Calzone", "unit_price": 289.5},
        ]))
        catalog = load_catalog(str(path))
        assert catalog.name_of(7) == "Calzone"
        assert catalog.unit_price_of(7) == 289.5
        assert catalog.unit_price_of(1) == 0.0

    def test_reads_path_from_environment(self, tmp_path, monkeypatch):
        path = tmp_path / "menu.json"
        path.write_text(json.dumps([{"id": 1, "name": "Marinara", "unit_price": 150}]))
        monkeypatch.setenv("PIZZA_CATALOG_PATH", str(path))
        assert load_catalog().name_of(1) == "Marinara"

    def test_malformed_file_fails(self, tmp_path):
        path = tmp_path / "menu.json"
        path.write_text(json.dumps([{"id": "one", "name": "Broken"}]))
        with pytest.raises(ValidationError):
            load_catalog(str(path))
