"""MPF Core - Fixed-width field decoding."""
from __future__ import annotations

from .protocol import DEFAULT_TEXT_ENCODING


def c_string(raw: bytes) -> bytes:
    """Cut a fixed-width field at its first NUL; never reads past the field."""
    end = raw.find(b"\x00")
    return raw if end == -1 else raw[:end]


def field_text(raw: bytes, encoding: str = DEFAULT_TEXT_ENCODING) -> str:
    """Decode a field for display. Undecodable bytes are shown as escapes."""
    return c_string(raw).decode(encoding, errors="backslashreplace")


def hex_label(raw: bytes) -> str:
    """Render label bytes as concatenated two-digit lowercase hex."""
    return raw.hex()
