"""Format configuration loading and validation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dsn_converter.common.constants import (
    DEFAULT_ARCHIVE_SUFFIX,
    DEFAULT_ENCODING,
    DEFAULT_ENTRY_EXTENSION,
    DEFAULT_EXTENSION,
    DEFAULT_MARKER_DELIMITER,
    DEFAULT_MARKERS,
    DEFAULT_SEPARATOR,
    FORMAT_CONFIG_FILENAME,
)
from dsn_converter.common.errors import ConfigError
from dsn_converter.common.fs import read_yaml
from dsn_converter.common.schema import validate_format_config


@dataclass(frozen=True)
class FieldMarkers:
    pay_period: str
    establishment_id: str
    activity_code: str


@dataclass(frozen=True)
class ConversionConfig:
    encoding: str
    extension: str
    separator: str
    marker_delimiter: str
    markers: FieldMarkers
    archive_suffix: str
    entry_extension: str


def default_format_config() -> dict:
    return {
        "encoding": DEFAULT_ENCODING,
        "extension": DEFAULT_EXTENSION,
        "separator": DEFAULT_SEPARATOR,
        "marker_delimiter": DEFAULT_MARKER_DELIMITER,
        "markers": dict(DEFAULT_MARKERS),
        "output": {
            "archive_suffix": DEFAULT_ARCHIVE_SUFFIX,
            "entry_extension": DEFAULT_ENTRY_EXTENSION,
        },
    }


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def _read_config_file(path: Path) -> dict | None:
    try:
        payload = read_yaml(path)
    except OSError as exc:
        raise ConfigError(f"Unable to read config file {path}") from exc
    if payload is None:
        return None
    if not isinstance(payload, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return payload


def _load_yaml_with_overlay(base: dict, path: Path | None, overlay_path: Path | None) -> dict:
    merged = base
    if path is not None:
        if not path.exists():
            raise ConfigError(f"Missing config file: {path}")
        payload = _read_config_file(path)
        if payload is not None:
            merged = _deep_merge(merged, payload)
    if overlay_path is not None and overlay_path.exists():
        overlay = _read_config_file(overlay_path)
        if overlay is not None:
            merged = _deep_merge(merged, overlay)
    return merged


def to_conversion_config(cfg: dict) -> ConversionConfig:
    markers = cfg["markers"]
    return ConversionConfig(
        encoding=cfg["encoding"],
        extension=cfg["extension"],
        separator=cfg["separator"],
        marker_delimiter=cfg["marker_delimiter"],
        markers=FieldMarkers(
            pay_period=markers["pay_period"],
            establishment_id=markers["establishment_id"],
            activity_code=markers["activity_code"],
        ),
        archive_suffix=cfg["output"]["archive_suffix"],
        entry_extension=cfg["output"]["entry_extension"],
    )


def default_conversion_config() -> ConversionConfig:
    return to_conversion_config(validate_format_config(default_format_config()))


def load_conversion_config(
    config_dir: Path | None = None,
    *,
    allow_unknown: bool = False,
    overlay_config_dir: Path | None = None,
) -> ConversionConfig:
    """Build the immutable conversion config.

    Built-in defaults are used as the base; ``config_dir/dsn_format.yml`` (when a
    directory is given) and then the overlay file are deep-merged on top.
    """
    path = config_dir / FORMAT_CONFIG_FILENAME if config_dir is not None else None
    overlay_path = overlay_config_dir / FORMAT_CONFIG_FILENAME if overlay_config_dir is not None else None
    cfg = _load_yaml_with_overlay(default_format_config(), path, overlay_path)
    return to_conversion_config(validate_format_config(cfg, allow_unknown=allow_unknown))
