"""Core constants used across Plugstore modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_ROOT = Path(".plugstore") / "data"
DATA_FILE_EXTENSION = "yml"
DEFAULT_JSON_INDENT = 4
DEFAULT_ISSUE_URL = "https://github.com/plugstore/plugstore/issues/new"
TEMP_FILE_SUFFIX = ".tmp"
RESERVED_PATH_SEGMENTS = (".", "..")
PATH_SEPARATORS = ("/", "\\")
