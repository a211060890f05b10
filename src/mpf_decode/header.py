"""MPF header decoding.

The header is read strictly front to back. Every padding byte is checked
where it is read and the first violation stops decoding.
"""
from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO

from mpf_core.errors import MalformedHeaderError, MpfIoError, UnexpectedEofError
from mpf_core.protocol import (
    CODE_LENGTH_LEN,
    CODE_TYPE_LEN,
    DATA_TYPE_LEN,
    DEFAULT_TEXT_ENCODING,
    DIMENSIONALITY_LEN,
    FORMAT_CODE_LEN,
    HEADER_FIXED_LEN,
    HEADER_SIZE_LEN,
    READ_CHUNK_SIZE,
    SAMPLE_NUMBER_LEN,
    SUPPORTED_DATA_TYPE,
    U32_FMT,
)
from mpf_core.text import c_string, field_text


@dataclass(frozen=True)
class HeaderInfo:
    """Decoded MPF header.

    String fields are kept as the raw bytes read from their fixed-width slots;
    use the ``*_text`` helpers for display.
    """

    header_size: int
    format_code: bytes
    illustration: bytes
    code_type: bytes
    label_byte_width: int
    data_type: bytes
    sample_count: int
    declared_dimensionality: int

    @property
    def is_supported_data_type(self) -> bool:
        return c_string(self.data_type) == SUPPORTED_DATA_TYPE

    def format_code_text(self, encoding: str = DEFAULT_TEXT_ENCODING) -> str:
        return field_text(self.format_code, encoding)

    def illustration_text(self, encoding: str = DEFAULT_TEXT_ENCODING) -> str:
        return field_text(self.illustration, encoding)

    def code_type_text(self, encoding: str = DEFAULT_TEXT_ENCODING) -> str:
        return field_text(self.code_type, encoding)

    def data_type_text(self, encoding: str = DEFAULT_TEXT_ENCODING) -> str:
        return field_text(self.data_type, encoding)


def read_bytes(stream: BinaryIO, n: int) -> bytes:
    """Read up to n bytes, mapping OS failures to MpfIoError.

    A short result means the stream ended; callers decide whether that is an error.
    """
    if n == 0:
        return b""
    try:
        return stream.read(n)
    except OSError as e:
        raise MpfIoError(str(e)) from e


def read_chunked(stream: BinaryIO, n: int, chunk_size: int = READ_CHUNK_SIZE) -> bytes:
    """Read up to n bytes, at most chunk_size per call, stopping early at EOF."""
    chunks: list[bytes] = []
    remaining = n
    while remaining > 0:
        chunk = read_bytes(stream, min(chunk_size, remaining))
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def _read_field(stream: BinaryIO, n: int, name: str) -> bytes:
    data = read_bytes(stream, n)
    if len(data) != n:
        raise UnexpectedEofError(f"{name} needs {n} bytes, got {len(data)}")
    return data


def _check_zero_padding(padding: bytes, name: str) -> None:
    for i, b in enumerate(padding):
        if b != 0:
            raise MalformedHeaderError(f"non-zero {name} padding (byte {i} = {b})")


def read_header(stream: BinaryIO) -> HeaderInfo:
    """Consume exactly header_size bytes from a stream positioned at offset 0."""
    # 4 bytes: header size, only the low byte is meaningful
    raw_size = _read_field(stream, HEADER_SIZE_LEN, "header size")
    header_size = raw_size[0]
    _check_zero_padding(raw_size[1:], "header-size")

    format_code = _read_field(stream, FORMAT_CODE_LEN, "format code")

    illustration_len = header_size - HEADER_FIXED_LEN
    if illustration_len < 0:
        raise MalformedHeaderError(
            f"header size {header_size} is below the {HEADER_FIXED_LEN}-byte minimum"
        )
    illustration = _read_field(stream, illustration_len, "illustration")

    code_type = _read_field(stream, CODE_TYPE_LEN, "code type")

    # 2 bytes: code length, low byte is the label width
    raw_code_length = _read_field(stream, CODE_LENGTH_LEN, "code length")
    label_byte_width = raw_code_length[0]
    _check_zero_padding(raw_code_length[1:], "code-length")
    if label_byte_width == 0:
        raise MalformedHeaderError("code length is zero, records would have no label")

    data_type = _read_field(stream, DATA_TYPE_LEN, "data type")

    (sample_count,) = struct.unpack(
        U32_FMT, _read_field(stream, SAMPLE_NUMBER_LEN, "sample number")
    )
    (declared_dimensionality,) = struct.unpack(
        U32_FMT, _read_field(stream, DIMENSIONALITY_LEN, "dimensionality")
    )

    return HeaderInfo(
        header_size=header_size,
        format_code=format_code,
        illustration=illustration,
        code_type=code_type,
        label_byte_width=label_byte_width,
        data_type=data_type,
        sample_count=int(sample_count),
        declared_dimensionality=int(declared_dimensionality),
    )
