"""Unit tests for CLI command handling."""

from __future__ import annotations

import yaml

from cli.main import main


def test_cli_path_creates_data_file(tmp_path, capsys) -> None:
    """CLI path should print and create the holder data file."""
    exit_code = main(["--data-root", str(tmp_path), "path", "ExamplePlugin", "settings"])
    output = capsys.readouterr().out.strip()

    expected_path = (tmp_path / "ExamplePlugin" / "settings.yml").resolve()
    assert exit_code == 0 and output == str(expected_path)
    assert (tmp_path / "ExamplePlugin" / "settings.yml").is_file()


def test_cli_set_then_show_roundtrips_value(tmp_path, capsys) -> None:
    """CLI set should persist a YAML scalar that show prints back."""
    main(["--data-root", str(tmp_path), "set", "ExamplePlugin", "settings", "retries", "5"])
    capsys.readouterr()

    exit_code = main(["--data-root", str(tmp_path), "show", "ExamplePlugin", "settings"])
    output = capsys.readouterr().out

    assert exit_code == 0 and yaml.safe_load(output) == {"retries": 5}


def test_cli_show_unknown_data_writes_empty_mapping(tmp_path, capsys) -> None:
    """First show of missing data should create a non-blank file."""
    exit_code = main(["--data-root", str(tmp_path), "show", "ExamplePlugin", "fresh"])
    output = capsys.readouterr().out

    assert exit_code == 0 and output == "{}\n"
    assert (tmp_path / "ExamplePlugin" / "fresh.yml").read_text(encoding="utf-8") == "{}\n"


def test_cli_holders_and_list_print_names(tmp_path, capsys) -> None:
    """CLI should list holders and their stored data names."""
    main(["--data-root", str(tmp_path), "path", "Beta", "alpha"])
    main(["--data-root", str(tmp_path), "path", "Alpha", "settings"])
    main(["--data-root", str(tmp_path), "path", "Alpha", "messages"])
    capsys.readouterr()

    main(["--data-root", str(tmp_path), "holders"])
    holders_output = capsys.readouterr().out.split()
    main(["--data-root", str(tmp_path), "list", "Alpha"])
    list_output = capsys.readouterr().out.split()

    assert holders_output == ["Alpha", "Beta"] and list_output == ["messages", "settings"]


def test_cli_reports_path_conflict(tmp_path, capsys) -> None:
    """Storage errors should print to stderr with exit code 1."""
    (tmp_path / "ExamplePlugin").write_text("", encoding="utf-8")

    exit_code = main(["--data-root", str(tmp_path), "show", "ExamplePlugin", "settings"])
    error_output = capsys.readouterr().err

    assert exit_code == 1 and "occupied by a file" in error_output
