"""Unit tests for plugin data objects."""

from __future__ import annotations

import pytest

from core.errors import DataDecodeError, PlugstoreConfigError, PlugstoreError
from store.plugin_data import AbstractPluginData, MappingPluginData
from tests.sample_data import GreeterSettings


class _DuplicateSettings(AbstractPluginData):
    def __init__(self) -> None:
        super().__init__("duplicate")
        self.first = self.value("name", "a")
        self.second = self.value("name", "b")


def test_value_nodes_encode_in_declaration_order() -> None:
    """Payload keys should follow declaration order."""
    settings = GreeterSettings()

    assert list(settings.encode_payload()) == ["greeting", "retries", "channels", "aliases"]


def test_duplicate_value_declaration_raises() -> None:
    """Declaring one property name twice should fail."""
    with pytest.raises(PlugstoreConfigError):
        _DuplicateSettings()
    assert True


def test_decode_payload_ignores_unknown_and_keeps_missing() -> None:
    """Unknown keys are skipped; absent keys keep current values."""
    settings = GreeterSettings()
    settings.retries.value = 9

    settings.decode_payload({"greeting": "yo", "legacy_flag": True})

    assert settings.greeting.value == "yo" and settings.retries.value == 9


def test_defaults_are_not_shared_between_instances() -> None:
    """Mutable defaults should be copied into each node."""
    first = GreeterSettings()
    second = GreeterSettings()

    first.channels.value.append("ops")

    assert second.channels.value == ["general"]


def test_decoder_converts_raw_values() -> None:
    """Node decoders should run on decoded payload entries."""
    settings = GreeterSettings()

    settings.decode_payload({"aliases": [["hi", 1], "hello"]})

    assert settings.aliases.value == {("hi", 1): "hello"}


def test_property_count_counts_declared_nodes() -> None:
    """Property count should equal the number of value nodes."""
    assert GreeterSettings().property_count == 4


def test_mapping_plugin_data_roundtrips_payload() -> None:
    """Mapping data should keep every key verbatim."""
    data = MappingPluginData("raw", {"a": 1})

    data.decode_payload({"b": [1, 2], "c": None})

    assert data.encode_payload() == {"b": [1, 2], "c": None} and data.property_count == 2


def test_save_without_binding_raises() -> None:
    """save() should require a prior load through a storage."""
    with pytest.raises(PlugstoreError, match="not bound"):
        GreeterSettings().save()
    assert True


def test_failed_decode_leaves_state_unchanged() -> None:
    """A decoder failure should not apply any earlier payload entry."""
    settings = GreeterSettings()

    with pytest.raises(DataDecodeError):
        settings.decode_payload({"greeting": "changed", "aliases": ["odd"]})

    assert settings.greeting.value == "hello" and settings.aliases.value == {}
