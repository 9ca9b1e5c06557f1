"""Shared typed models.

This module defines the holder contract used by storage components
and a minimal immutable holder implementation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class PluginDataHolder(Protocol):
    """Logical owner of one or more persisted plugin data objects."""

    @property
    def data_holder_name(self) -> str:
        """Stable name used as the holder's directory segment."""
        ...


@dataclass(frozen=True)
class DataHolder:
    """Plain data holder identified only by its name.

    Attributes:
        data_holder_name: Stable holder name, e.g. a plugin id.
    """

    data_holder_name: str

    def __str__(self) -> str:
        return self.data_holder_name
