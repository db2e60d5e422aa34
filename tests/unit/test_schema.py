import pytest

from dsn_converter.common.config_loader import default_format_config
from dsn_converter.common.errors import ConfigError
from dsn_converter.common.schema import validate_format_config


def test_validate_format_config_accepts_defaults():
    validated = validate_format_config(default_format_config())
    assert validated["extension"] == ".dsn"


def test_validate_format_config_rejects_unknown_key_by_default():
    bad = default_format_config()
    bad["unexpected"] = True
    with pytest.raises(ConfigError):
        validate_format_config(bad)


def test_validate_format_config_allows_unknown_when_enabled():
    okay = default_format_config()
    okay["extra"] = 1
    validate_format_config(okay, allow_unknown=True)


def test_validate_format_config_rejects_missing_marker():
    bad = default_format_config()
    del bad["markers"]["activity_code"]
    with pytest.raises(ConfigError):
        validate_format_config(bad)


def test_validate_format_config_rejects_empty_separator():
    bad = default_format_config()
    bad["separator"] = ""
    with pytest.raises(ConfigError):
        validate_format_config(bad)


@pytest.mark.parametrize("encoding", ["utf-8", "utf-16", "no-such-codec", "rot13", "hex", "undefined"])
def test_validate_format_config_rejects_non_single_byte_encodings(encoding):
    bad = default_format_config()
    bad["encoding"] = encoding
    with pytest.raises(ConfigError):
        validate_format_config(bad)
