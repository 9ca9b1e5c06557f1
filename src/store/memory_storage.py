"""In-memory plugin data storage.

This module keeps encoded payloads in a dictionary instead of files.
It follows the same first-use and decode rules as file storage.
"""

from __future__ import annotations

import copy
from typing import Any

from core.logging_config import get_silent_logger
from core.types import PluginDataHolder
from store.data_storage import PluginDataStorage
from store.plugin_data import PluginData


class MemoryPluginDataStorage(PluginDataStorage):
    """Storage keeping a deep copy of each payload per holder and save name."""

    def __init__(self, logger: Any | None = None) -> None:
        self._logger = logger if logger is not None else get_silent_logger()
        self._payloads: dict[tuple[str, str], dict[str, Any]] = {}

    def load(self, holder: PluginDataHolder, data: PluginData) -> None:
        data.on_init(holder, self)
        stored_payload = self._payloads.get(_storage_key(holder, data))
        if stored_payload is None:
            self.store(holder, data)
        else:
            data.decode_payload(copy.deepcopy(stored_payload))
        self._logger.debug(
            "plugin_data_loaded",
            save_name=data.save_name,
            property_count=data.property_count,
        )

    def store(self, holder: PluginDataHolder, data: PluginData) -> None:
        self._payloads[_storage_key(holder, data)] = copy.deepcopy(data.encode_payload())
        self._logger.debug(
            "plugin_data_saved",
            save_name=data.save_name,
            property_count=data.property_count,
        )

    def stored_payload(self, holder: PluginDataHolder, save_name: str) -> dict[str, Any] | None:
        """Return a copy of the payload kept for a holder and save name."""
        payload = self._payloads.get((holder.data_holder_name, save_name))
        return copy.deepcopy(payload) if payload is not None else None


def _storage_key(holder: PluginDataHolder, data: PluginData) -> tuple[str, str]:
    return (holder.data_holder_name, data.save_name)
