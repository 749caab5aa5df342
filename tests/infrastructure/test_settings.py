"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from storefront.infrastructure import bootstrap
from storefront.infrastructure.persistence.in_memory_repository import InMemoryRepository
from storefront.infrastructure.persistence.json_repository import JsonFileRepository
from storefront.infrastructure.settings import DEFAULT_DATA_DIR, Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("STOREFRONT_DATA_DIR", "STOREFRONT_STORAGE", "STOREFRONT_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings.from_env()
        assert settings.data_dir == DEFAULT_DATA_DIR
        assert settings.storage == "json"
        assert settings.log_level == "WARNING"

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("STOREFRONT_STORAGE", "Memory")
        monkeypatch.setenv("STOREFRONT_LOG_LEVEL", "debug")
        settings = Settings.from_env()
        assert settings.data_dir == Path(tmp_path)
        assert settings.storage == "memory"
        assert settings.log_level == "DEBUG"

    def test_unknown_storage_rejected(self):
        with pytest.raises(ValueError, match="Unknown storage backend"):
            Settings(storage="postgres")


class TestRepositorySelection:

    def test_memory(self):
        repos = bootstrap.repositories(Settings(storage="memory"))
        assert isinstance(repos.orders, InMemoryRepository)

    def test_json(self, tmp_path):
        repos = bootstrap.repositories(Settings(data_dir=tmp_path))
        assert isinstance(repos.orders, JsonFileRepository)
        assert (tmp_path / "orders.json").exists()
