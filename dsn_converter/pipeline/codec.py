"""Code-page decoding and encoding of declaration text."""

from __future__ import annotations


def decode_bytes(raw: bytes, encoding: str) -> str:
    return raw.decode(encoding)


def encode_text(text: str, encoding: str) -> bytes:
    return text.encode(encoding)
