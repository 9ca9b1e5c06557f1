"""Plugstore exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each failure mode of the load/store protocol has its own error type.
"""

from __future__ import annotations


class PlugstoreError(Exception):
    """Base exception for all Plugstore failures."""


class PlugstoreConfigError(PlugstoreError):
    """Raised for invalid runtime configuration or data declarations."""


class PlugstoreStoreError(PlugstoreError):
    """Raised for plugin data persistence failures."""


class PathConflictError(PlugstoreStoreError):
    """Raised when a storage path is occupied by the wrong entry kind."""


class DataDecodeError(PlugstoreStoreError):
    """Raised when persisted plugin data cannot be parsed."""


class DataEncodeError(PlugstoreStoreError):
    """Raised when plugin data cannot be encoded in any supported format.

    Attributes:
        primary_error: Failure raised by the YAML encoder.
        fallback_error: Failure raised by the JSON encoder.
    """

    def __init__(
        self,
        message: str,
        primary_error: BaseException,
        fallback_error: BaseException,
    ) -> None:
        super().__init__(message)
        self.primary_error = primary_error
        self.fallback_error = fallback_error
