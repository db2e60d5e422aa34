"""Minimal strict schema for the declaration format config."""

from __future__ import annotations

import codecs

from dsn_converter.common.errors import ConfigError

FORMAT_REQUIRED_KEYS = {
    "encoding",
    "extension",
    "separator",
    "marker_delimiter",
    "markers",
    "output",
}
MARKER_KEYS = {"pay_period", "establishment_id", "activity_code"}
OUTPUT_KEYS = {"archive_suffix", "entry_extension"}


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def _assert_non_empty_string(value, ctx: str) -> None:
    if not isinstance(value, str) or not value:
        raise ConfigError(f"{ctx} must be a non-empty string")


def _assert_total_single_byte_codec(name: str) -> None:
    try:
        codecs.lookup(name)
    except LookupError as exc:
        raise ConfigError(f"Unknown encoding: {name}") from exc
    try:
        decoded = bytes(range(256)).decode(name)
    except (LookupError, UnicodeError) as exc:
        raise ConfigError(f"Encoding {name} does not map every byte value") from exc
    if len(decoded) != 256:
        raise ConfigError(f"Encoding {name} is not a single-byte code page")


def validate_format_config(cfg: dict, *, allow_unknown: bool = False) -> dict:
    if not isinstance(cfg, dict):
        raise ConfigError("Format config must be a mapping")
    _assert_required_keys(cfg, FORMAT_REQUIRED_KEYS, "format config")
    _assert_no_unknown_keys(cfg, FORMAT_REQUIRED_KEYS, "format config", allow_unknown)

    for key in ("encoding", "extension", "separator", "marker_delimiter"):
        _assert_non_empty_string(cfg[key], key)

    if not isinstance(cfg["markers"], dict):
        raise ConfigError("markers must be a mapping")
    _assert_required_keys(cfg["markers"], MARKER_KEYS, "markers")
    _assert_no_unknown_keys(cfg["markers"], MARKER_KEYS, "markers", allow_unknown)
    for key in sorted(MARKER_KEYS):
        _assert_non_empty_string(cfg["markers"][key], f"markers.{key}")

    if not isinstance(cfg["output"], dict):
        raise ConfigError("output must be a mapping")
    _assert_required_keys(cfg["output"], OUTPUT_KEYS, "output")
    _assert_no_unknown_keys(cfg["output"], OUTPUT_KEYS, "output", allow_unknown)
    for key in sorted(OUTPUT_KEYS):
        _assert_non_empty_string(cfg["output"][key], f"output.{key}")

    _assert_total_single_byte_codec(cfg["encoding"])
    return cfg
