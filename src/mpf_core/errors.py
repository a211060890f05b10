"""MPF exception hierarchy.

Every decode failure is raised where it is detected, carries a stable code,
and stops decoding. The CLI turns these into a single FATAL line.
"""
from __future__ import annotations

ERRORS = {
    "E_IO": "Sample file could not be read",
    "E_UNEXPECTED_EOF": "Stream ended inside the header",
    "E_MALFORMED_HEADER": "Header is malformed",
    "E_UNSUPPORTED_DATA_TYPE": "Declared data type is not supported",
    "E_TRUNCATED_RECORD": "Stream ended inside a record",
}


class MpfError(Exception):
    """Base exception for all MPF decoding failures."""

    code = "E_MPF"

    def __init__(self, detail: str = ""):
        self.detail = detail
        message = ERRORS.get(self.code, "MPF decoding failed")
        super().__init__(f"{message}: {detail}" if detail else message)


class MpfIoError(MpfError):
    """Raised when the path cannot be opened or a read fails."""

    code = "E_IO"


class MalformedHeaderError(MpfError):
    """Raised for non-zero padding or a header size below the fixed minimum."""

    code = "E_MALFORMED_HEADER"


class UnexpectedEofError(MalformedHeaderError):
    """Raised when the stream ends before the header is complete."""

    code = "E_UNEXPECTED_EOF"


class UnsupportedDataTypeError(MpfError):
    """Raised once, before any record, for a data type other than unsigned char."""

    code = "E_UNSUPPORTED_DATA_TYPE"


class TruncatedRecordError(MpfError):
    """Raised when the stream ends partway through a label or a vector."""

    code = "E_TRUNCATED_RECORD"
