"""Unit tests for core config parsing."""

from __future__ import annotations

import os

import pytest

from core.constants import DEFAULT_ISSUE_URL, DEFAULT_JSON_INDENT
from core.config import PlugstoreConfig
from core.errors import PlugstoreConfigError


def test_from_env_reads_data_root(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve data root from environment."""
    monkeypatch.setenv("PLUGSTORE_DATA_ROOT", "./.tmp-plugstore")

    config = PlugstoreConfig.from_env()

    assert config.data_root.name == ".tmp-plugstore" and config.data_root.is_absolute()


def test_from_env_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset variables should fall back to defaults."""
    monkeypatch.delenv("PLUGSTORE_JSON_INDENT", raising=False)
    monkeypatch.delenv("PLUGSTORE_ISSUE_URL", raising=False)

    config = PlugstoreConfig.from_env()

    assert config.json_indent == DEFAULT_JSON_INDENT and config.issue_url == DEFAULT_ISSUE_URL


def test_from_env_raises_for_invalid_json_indent(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for non-numeric JSON indent."""
    monkeypatch.setenv("PLUGSTORE_JSON_INDENT", "wide")

    with pytest.raises(PlugstoreConfigError):
        PlugstoreConfig.from_env()

    assert os.getenv("PLUGSTORE_JSON_INDENT") == "wide"


def test_from_env_raises_for_negative_json_indent(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for a negative JSON indent."""
    monkeypatch.setenv("PLUGSTORE_JSON_INDENT", "-1")

    with pytest.raises(PlugstoreConfigError):
        PlugstoreConfig.from_env()

    assert True


def test_from_env_raises_for_blank_data_root(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for a blank data root."""
    monkeypatch.setenv("PLUGSTORE_DATA_ROOT", "  ")

    with pytest.raises(PlugstoreConfigError):
        PlugstoreConfig.from_env()

    assert True
