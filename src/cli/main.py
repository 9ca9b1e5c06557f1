"""Plugstore CLI entry points.
This module exposes inspection and editing commands for stored plugin data.
It maps argparse commands onto storage calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
import sys
from typing import Sequence

import yaml

from core.config import PlugstoreConfig
from core.constants import DATA_FILE_EXTENSION
from core.errors import PlugstoreError
from core.logging_config import get_logger
from core.types import DataHolder
from store.data_storage import MultiFilePluginDataStorage
from store.payload_codec import encode_yaml
from store.plugin_data import MappingPluginData


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="plugstore", description="Plugstore plugin data CLI")
    parser.add_argument("--data-root", help="Override PLUGSTORE_DATA_ROOT for this command")
    parser.add_argument("--verbose", action="store_true", help="Emit structured storage logs")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("holders", help="List holder directories")
    list_parser = subparsers.add_parser("list", help="List data names stored for a holder")
    list_parser.add_argument("holder", help="Holder name")
    for command, help_text in (
        ("path", "Resolve and print the data file path"),
        ("show", "Print stored data as YAML"),
    ):
        data_parser = subparsers.add_parser(command, help=help_text)
        data_parser.add_argument("holder", help="Holder name")
        data_parser.add_argument("name", help="Data save name")
    set_parser = subparsers.add_parser("set", help="Set one top-level key of stored data")
    set_parser.add_argument("holder", help="Holder name")
    set_parser.add_argument("name", help="Data save name")
    set_parser.add_argument("key", help="Top-level key to set")
    set_parser.add_argument("value", help="New value, parsed as a YAML scalar")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Plugstore CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        storage = _build_storage(args.data_root, args.verbose)
        if args.command == "holders":
            return _run_holders_command(storage)
        if args.command == "list":
            return _run_list_command(storage, args)
        if args.command == "path":
            return _run_path_command(storage, args)
        if args.command == "show":
            return _run_show_command(storage, args)
        if args.command == "set":
            return _run_set_command(storage, args)
    except PlugstoreError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_storage(data_root: str | None, verbose: bool) -> MultiFilePluginDataStorage:
    """Build storage with optional data-root override.

    Args:
        data_root: Optional override path.
        verbose: Whether storage events are logged.

    Returns:
        Configured storage.
    """
    config = PlugstoreConfig.from_env()
    if data_root:
        config = replace(config, data_root=Path(data_root).expanduser().resolve())
    logger = get_logger("plugstore") if verbose else None
    return MultiFilePluginDataStorage.from_config(config, logger=logger)


def _run_holders_command(storage: MultiFilePluginDataStorage) -> int:
    for holder_dir in sorted(storage.directory_path.iterdir()):
        if holder_dir.is_dir():
            print(holder_dir.name)
    return 0


def _run_list_command(storage: MultiFilePluginDataStorage, args: argparse.Namespace) -> int:
    holder_dir = storage.directory_path / args.holder
    if not holder_dir.is_dir():
        return 0
    for data_file in sorted(holder_dir.glob(f"*.{DATA_FILE_EXTENSION}")):
        if data_file.is_file():
            print(data_file.stem)
    return 0


def _run_path_command(storage: MultiFilePluginDataStorage, args: argparse.Namespace) -> int:
    data = MappingPluginData(args.name)
    print(storage.data_file(DataHolder(args.holder), data))
    return 0


def _run_show_command(storage: MultiFilePluginDataStorage, args: argparse.Namespace) -> int:
    """Handle show command.

    Args:
        storage: Plugin data storage.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    data = MappingPluginData(args.name)
    storage.load(DataHolder(args.holder), data)
    print(encode_yaml(data.values), end="")
    return 0


def _run_set_command(storage: MultiFilePluginDataStorage, args: argparse.Namespace) -> int:
    """Handle set command.

    Args:
        storage: Plugin data storage.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    data = MappingPluginData(args.name)
    storage.load(DataHolder(args.holder), data)
    data.values[args.key] = yaml.safe_load(args.value)
    data.save()
    return 0
