"""Runtime configuration model for Plugstore.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import DEFAULT_DATA_ROOT, DEFAULT_ISSUE_URL, DEFAULT_JSON_INDENT
from core.errors import PlugstoreConfigError


@dataclass(frozen=True)
class PlugstoreConfig:
    """Validated runtime configuration.

    Attributes:
        data_root: Storage root holding one directory per data holder.
        json_indent: Indentation width for fallback JSON output.
        issue_url: Where operators report YAML encoder incompatibilities.
    """

    data_root: Path
    json_indent: int
    issue_url: str

    @classmethod
    def from_env(cls) -> "PlugstoreConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            PlugstoreConfigError: If environment values are invalid.
        """
        data_root_value = os.getenv("PLUGSTORE_DATA_ROOT", str(DEFAULT_DATA_ROOT))
        json_indent_value = os.getenv("PLUGSTORE_JSON_INDENT", str(DEFAULT_JSON_INDENT))
        issue_url = os.getenv("PLUGSTORE_ISSUE_URL", DEFAULT_ISSUE_URL)
        return cls(
            data_root=_parse_data_root(data_root_value),
            json_indent=_parse_json_indent(json_indent_value),
            issue_url=issue_url,
        )


def _parse_data_root(raw_value: str) -> Path:
    if not raw_value.strip():
        raise PlugstoreConfigError(
            "Invalid PLUGSTORE_DATA_ROOT value: expected a directory path, got an empty string. "
            "Unset PLUGSTORE_DATA_ROOT or point it at a writable directory."
        )
    return Path(raw_value).expanduser().resolve()


def _parse_json_indent(raw_value: str) -> int:
    """Parse the fallback JSON indentation environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed non-negative indentation width.

    Raises:
        PlugstoreConfigError: If value is not a non-negative integer.
    """
    try:
        indent = int(raw_value)
    except ValueError as error:
        raise PlugstoreConfigError(
            "Invalid PLUGSTORE_JSON_INDENT value: "
            f"expected integer, got '{raw_value}'. "
            "Set PLUGSTORE_JSON_INDENT to a numeric value."
        ) from error
    if indent < 0:
        raise PlugstoreConfigError(
            f"Invalid PLUGSTORE_JSON_INDENT value: expected >= 0, got {indent}."
        )
    return indent
