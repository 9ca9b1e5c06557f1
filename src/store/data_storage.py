"""Plugin data storage and the load/store protocol.

This module persists each plugin data object as one YAML file per
holder directory. Stores fall back to JSON when the YAML encoder fails
and never truncate a file when both encoders fail.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import os
from pathlib import Path
import stat
import tempfile
from typing import Any

from core.config import PlugstoreConfig
from core.constants import DEFAULT_ISSUE_URL, DEFAULT_JSON_INDENT, TEMP_FILE_SUFFIX
from core.errors import DataEncodeError
from core.logging_config import get_silent_logger
from core.types import PluginDataHolder
from store.path_resolver import qualified_type_name, resolve_data_file
from store.payload_codec import decode_yaml, encode_json, encode_yaml
from store.plugin_data import PluginData


class PluginDataStorage(ABC):
    """Loads plugin data objects into memory and stores them back."""

    @abstractmethod
    def load(self, holder: PluginDataHolder, data: PluginData) -> None:
        """Bind ``data`` to ``holder`` and populate it from storage."""

    @abstractmethod
    def store(self, holder: PluginDataHolder, data: PluginData) -> None:
        """Persist the current state of ``data``."""


class MultiFilePluginDataStorage(PluginDataStorage):
    """Filesystem storage with one file per plugin data object.

    Layout is ``<directory_path>/<holder name>/<save name>.yml``. The
    storage does no locking: callers serialize load and store calls on
    the same data object.
    """

    def __init__(
        self,
        directory_path: Path,
        logger: Any | None = None,
        json_indent: int = DEFAULT_JSON_INDENT,
        issue_url: str = DEFAULT_ISSUE_URL,
    ) -> None:
        """Initialize storage and create its root directory.

        Args:
            directory_path: Storage root.
            logger: Structured logger; events are dropped when omitted.
            json_indent: Indentation width of fallback JSON output.
            issue_url: Where operators report YAML encoder failures.
        """
        self.directory_path = directory_path
        self._logger = logger if logger is not None else get_silent_logger()
        self._json_indent = json_indent
        self._issue_url = issue_url
        self.directory_path.mkdir(parents=True, exist_ok=True)

    @classmethod
    def from_config(
        cls,
        config: PlugstoreConfig,
        logger: Any | None = None,
    ) -> "MultiFilePluginDataStorage":
        """Build storage from runtime configuration."""
        return cls(
            config.data_root,
            logger=logger,
            json_indent=config.json_indent,
            issue_url=config.issue_url,
        )

    def data_file(self, holder: PluginDataHolder, data: PluginData) -> Path:
        """Resolve the file backing ``data``, creating it empty if absent."""
        return resolve_data_file(self.directory_path, holder, data, self._logger)

    def load(self, holder: PluginDataHolder, data: PluginData) -> None:
        """Load plugin data, writing an initial copy on first use.

        Args:
            holder: Owner of the data object.
            data: Caller-owned object populated in place.

        Raises:
            PathConflictError: If the file location is occupied.
            DataDecodeError: If persisted text is not a valid payload.
            DataEncodeError: If the first-use snapshot cannot be encoded.
        """
        data.on_init(holder, self)
        data_file = self.data_file(holder, data)
        text = data_file.read_text(encoding="utf-8")
        if text.strip():
            self._logger.warning("decoding_plugin_data", save_name=data.save_name, text=text)
            data.decode_payload(decode_yaml(text, str(data_file)))
        else:
            self._write_initial_snapshot(holder, data)
        self._logger.debug(
            "plugin_data_loaded",
            save_name=data.save_name,
            property_count=data.property_count,
        )

    def store(self, holder: PluginDataHolder, data: PluginData) -> None:
        """Encode plugin data and replace its file content.

        Args:
            holder: Owner of the data object.
            data: Object whose current state is persisted.

        Raises:
            PathConflictError: If the file location is occupied.
            DataEncodeError: If neither YAML nor JSON can encode the state.
        """
        data_file = self.data_file(holder, data)
        text, text_format = self._encode(data)
        _replace_file_text(data_file, text)
        self._logger.debug(
            "plugin_data_saved",
            save_name=data.save_name,
            property_count=data.property_count,
            format=text_format,
        )

    def _write_initial_snapshot(self, holder: PluginDataHolder, data: PluginData) -> None:
        """Store the default state of data seen for the first time."""
        self.store(holder, data)

    def _encode(self, data: PluginData) -> tuple[str, str]:
        payload = data.encode_payload()
        try:
            return encode_yaml(payload), "yaml"
        except Exception as primary_error:
            self._logger.warning(
                "yaml_encode_failed",
                save_name=data.save_name,
                error=repr(primary_error),
                hint=(
                    f"Could not save {data.save_name} in YAML format due to an exception "
                    "in the YAML encoder. Please report this exception and relevant "
                    f"configurations to {self._issue_url}"
                ),
            )
            try:
                return encode_json(payload, self._json_indent), "json"
            except Exception as fallback_error:
                raise DataEncodeError(
                    f"Exception while saving {qualified_type_name(data)}, "
                    f"saveName={data.save_name}: YAML failed with {primary_error!r}, "
                    f"JSON failed with {fallback_error!r}.",
                    primary_error=primary_error,
                    fallback_error=fallback_error,
                ) from fallback_error


def _replace_file_text(target_path: Path, text: str) -> None:
    """Replace file content through a sibling temporary file.

    The replacement keeps the permission bits of the existing file.
    """
    file_descriptor, temp_name = tempfile.mkstemp(
        prefix=f".{target_path.name}.",
        suffix=TEMP_FILE_SUFFIX,
        dir=target_path.parent,
    )
    temp_path = Path(temp_name)
    try:
        with os.fdopen(file_descriptor, "w", encoding="utf-8") as handle:
            handle.write(text)
        os.chmod(temp_path, stat.S_IMODE(target_path.stat().st_mode))
        os.replace(temp_path, target_path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise
