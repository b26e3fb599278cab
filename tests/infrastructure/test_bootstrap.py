"""Tests for settings and catalogue seeding."""

import json
from pathlib import Path

import pytest

from sweetshop.domain.exceptions import InvalidEntityError, ValidationError
from sweetshop.infrastructure.bootstrap import DEFAULT_CATALOG, load_catalog, sweet_repository
from sweetshop.infrastructure.config import Settings


class TestSettings:

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.catalog_path is None
        assert settings.log_level == "WARNING"

    def test_reads_environment(self):
        settings = Settings.from_env({
            "SWEETSHOP_CATALOG": "/tmp/sweets.json",
            "SWEETSHOP_LOG_LEVEL": "debug",
        })
        assert settings.catalog_path == Path("/tmp/sweets.json")
        assert settings.log_level == "DEBUG"


class TestLoadCatalog:

    def test_loads_valid_records(self, tmp_path):
        path = tmp_path / "sweets.json"
        path.write_text(json.dumps([
            {"id": 2, "name": "Fudge", "category": "fudge", "price": 5, "quantity": 3},
        ]))
        sweets = load_catalog(path)
        assert [s.name for s in sweets] == ["Fudge"]

    def test_whole_number_floats_accepted(self, tmp_path):
        path = tmp_path / "sweets.json"
        path.write_text('[{"id": 1, "name": "A", "category": "b", "price": 1, "quantity": 20.0}]')
        sweets = load_catalog(path)
        assert sweets[0].quantity == 20

    def test_non_array_rejected(self, tmp_path):
        path = tmp_path / "sweets.json"
        path.write_text(json.dumps({"id": 1}))
        with pytest.raises(InvalidEntityError, match="JSON array"):
            load_catalog(path)

    def test_invalid_record_names_entry(self, tmp_path):
        path = tmp_path / "sweets.json"
        path.write_text(json.dumps([{"id": 1, "name": "Fudge"}]))
        with pytest.raises(ValidationError, match="entry 0"):
            load_catalog(path)


class TestSweetRepository:

    def test_seeds_from_configured_catalog(self, tmp_path):
        path = tmp_path / "sweets.json"
        path.write_text(json.dumps([
            {"id": 1, "name": "Fudge", "category": "fudge", "price": 5, "quantity": 3},
        ]))
        repo = sweet_repository(Settings(catalog_path=path))
        assert repo.get_by_id(1).name == "Fudge"

    def test_each_call_builds_an_isolated_store(self, tmp_path):
        path = tmp_path / "sweets.json"
        path.write_text(json.dumps([
            {"id": 1, "name": "Fudge", "category": "fudge", "price": 5, "quantity": 3},
        ]))
        first = sweet_repository(Settings(catalog_path=path))
        second = sweet_repository(Settings(catalog_path=path))
        first.delete(1)
        assert second.get_by_id(1) is not None

    def test_missing_configured_catalog(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            sweet_repository(Settings(catalog_path=tmp_path / "nope.json"))

    def test_bundled_catalog_is_valid(self):
        assert DEFAULT_CATALOG.exists()
        assert len(load_catalog(DEFAULT_CATALOG)) > 0
