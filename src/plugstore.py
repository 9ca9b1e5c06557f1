"""Public SDK surface for Plugstore.

This module provides a stable import path for storage users.
It re-exports the storage classes, data object bases, and errors.
"""

from __future__ import annotations

from core.config import PlugstoreConfig
from core.errors import (
    DataDecodeError,
    DataEncodeError,
    PathConflictError,
    PlugstoreConfigError,
    PlugstoreError,
    PlugstoreStoreError,
)
from core.types import DataHolder, PluginDataHolder
from store.data_storage import MultiFilePluginDataStorage, PluginDataStorage
from store.memory_storage import MemoryPluginDataStorage
from store.payload_codec import mapping_from_payload
from store.plugin_data import AbstractPluginData, MappingPluginData, PluginData, ValueNode

__all__ = [
    "AbstractPluginData",
    "DataDecodeError",
    "DataEncodeError",
    "DataHolder",
    "MappingPluginData",
    "MemoryPluginDataStorage",
    "MultiFilePluginDataStorage",
    "PathConflictError",
    "PluginData",
    "PluginDataHolder",
    "PluginDataStorage",
    "PlugstoreConfig",
    "PlugstoreConfigError",
    "PlugstoreError",
    "PlugstoreStoreError",
    "ValueNode",
    "mapping_from_payload",
]
