from pathlib import Path

import pytest

from dsn_converter.cli import parse_args, resolve_folders
from dsn_converter.common.errors import ArgumentError


def test_parse_args_defaults():
    args = parse_args(["in", "out"])
    assert args.input_folder == "in"
    assert args.output_folder == "out"
    assert args.config_dir is None
    assert args.overlay_config_dir is None
    assert args.log_level == "INFO"
    assert args.summary_path is None


def test_parse_args_requires_both_folders():
    with pytest.raises(SystemExit):
        parse_args(["in"])


def test_resolve_folders_normalizes_paths():
    args = parse_args(["data/./in/", "data/tmp/../out"])
    assert resolve_folders(args) == (Path("data/in"), Path("data/out"))


def test_resolve_folders_keeps_surrounding_spaces_in_paths():
    args = parse_args([" in ", "out/ "])
    assert resolve_folders(args) == (Path(" in "), Path("out/ "))


def test_resolve_folders_rejects_empty_paths():
    args = parse_args(["", "out"])
    with pytest.raises(ArgumentError):
        resolve_folders(args)
