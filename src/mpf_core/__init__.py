"""MPF Core - Shared layout constants, errors and field decoding."""
from .errors import (
    MpfError,
    MpfIoError,
    UnexpectedEofError,
    MalformedHeaderError,
    UnsupportedDataTypeError,
    TruncatedRecordError,
)
from .text import c_string, field_text, hex_label

__all__ = [
    "MpfError",
    "MpfIoError",
    "UnexpectedEofError",
    "MalformedHeaderError",
    "UnsupportedDataTypeError",
    "TruncatedRecordError",
    "c_string",
    "field_text",
    "hex_label",
]
