"""Tests for configuration module."""

import json
import os

import pytest

from schema_catalog.config import CatalogConfig, Config, TagSetting
from schema_catalog.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep a developer's .env or SCHEMA_CATALOG_* variables out of these tests."""
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("SCHEMA_CATALOG_"):
            monkeypatch.delenv(key)


def test_config_defaults():
    config = Config()

    assert config.catalog.tags == []
    assert config.catalog.hidden_tags == []
    assert config.catalog.root_types == []
    assert config.logging.level == "INFO"
    assert config.logging.format == "json"
    assert config.logging.file is None
    assert config.app_name == "schema-catalog"
    assert config.hidden_tags() == set()


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("SCHEMA_CATALOG_LOGGING__LEVEL", "DEBUG")
    monkeypatch.setenv("SCHEMA_CATALOG_APP_NAME", "docs-build")
    monkeypatch.setenv("SCHEMA_CATALOG_CATALOG__HIDDEN_TAGS", '["internal", "shop.models.Secret"]')
    monkeypatch.setenv("SCHEMA_CATALOG_CATALOG__TAGS", '[{"name": "beta", "visible": false}]')

    config = Config()

    assert config.logging.level == "DEBUG"
    assert config.app_name == "docs-build"
    assert config.hidden_tags() == {"internal", "shop.models.Secret", "beta"}


def test_hidden_tags_only_include_invisible_tags():
    config = Config(catalog=CatalogConfig(
        tags=[TagSetting(name="public"), TagSetting(name="internal", visible=False)],
        hidden_tags=["legacy"],
    ))
    assert config.hidden_tags() == {"internal", "legacy"}


def test_config_from_file(tmp_path):
    config_path = tmp_path / "catalog.json"
    config_path.write_text(json.dumps({
        "catalog": {"root_types": ["shop.models:Order"], "tags": [{"name": "internal", "visible": False}]},
        "logging": {"format": "console"},
    }))

    config = Config.from_file(config_path)

    assert config.catalog.root_types == ["shop.models:Order"]
    assert config.hidden_tags() == {"internal"}
    assert config.logging.format == "console"


def test_config_from_invalid_file(tmp_path):
    bad_json = tmp_path / "bad.json"
    bad_json.write_text("{not json")
    with pytest.raises(ConfigurationError):
        Config.from_file(bad_json)

    bad_tag = tmp_path / "bad_tag.json"
    bad_tag.write_text(json.dumps({"catalog": {"tags": [{"name": ""}]}}))
    with pytest.raises(ConfigurationError):
        Config.from_file(bad_tag)

    with pytest.raises(ConfigurationError):
        Config.from_file(tmp_path / "missing.json")
