"""Deterministic file locations for plugin data.

Each holder gets one directory under the storage root and each data
object one ``<save_name>.yml`` file inside it. Missing entries are
created; entries of the wrong kind are never coerced.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from core.constants import DATA_FILE_EXTENSION, PATH_SEPARATORS, RESERVED_PATH_SEGMENTS
from core.errors import PathConflictError, PlugstoreConfigError
from core.types import PluginDataHolder
from store.plugin_data import PluginData


def resolve_data_file(
    data_root: Path,
    holder: PluginDataHolder,
    data: PluginData,
    logger: Any,
) -> Path:
    """Resolve, and create when absent, the file backing a data object.

    Args:
        data_root: Storage root directory.
        holder: Owner of the data object.
        data: Data object to locate.
        logger: Structured logger receiving the allocation trace.

    Returns:
        Path of an existing (possibly empty) data file.

    Raises:
        PlugstoreConfigError: If a name is not a usable path segment.
        PathConflictError: If the holder directory is a file or the
            data file is a directory.
    """
    holder_name = _validate_segment(holder.data_holder_name, "holder name")
    save_name = _validate_segment(data.save_name, "save name")
    data_type_name = qualified_type_name(data)

    holder_dir = data_root / holder_name
    if holder_dir.is_file():
        raise PathConflictError(
            f"Target directory {holder_dir} for holder {holder_name} is occupied by a file "
            f"therefore data {data_type_name} can't be saved. Move the file away and retry."
        )
    holder_dir.mkdir(exist_ok=True)

    data_file = holder_dir / f"{save_name}.{DATA_FILE_EXTENSION}"
    if data_file.is_dir():
        raise PathConflictError(
            f"Target file {data_file} is occupied by a directory "
            f"therefore data {data_type_name} can't be saved. Move the directory away and retry."
        )
    data_file.touch(exist_ok=True)
    logger.debug("data_file_allocated", save_name=save_name, path=str(data_file))
    return data_file


def qualified_type_name(data: object) -> str:
    """Return ``module.QualName`` of an object's type for messages."""
    data_type = type(data)
    return f"{data_type.__module__}.{data_type.__qualname__}"


def _validate_segment(raw_name: str, label: str) -> str:
    if not raw_name:
        raise PlugstoreConfigError(f"Plugin data {label} must be a non-empty string.")
    if raw_name in RESERVED_PATH_SEGMENTS or any(sep in raw_name for sep in PATH_SEPARATORS):
        raise PlugstoreConfigError(
            f"Plugin data {label} '{raw_name}' is not a valid path segment. "
            "Use a name without path separators."
        )
    return raw_name
