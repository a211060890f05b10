"""Line-oriented text rendering of a decoded MPF file."""
from __future__ import annotations

from typing import Iterator

from mpf_core.protocol import DEFAULT_TEXT_ENCODING
from mpf_core.text import hex_label

from .header import HeaderInfo
from .records import Record


def header_lines(header: HeaderInfo, encoding: str = DEFAULT_TEXT_ENCODING) -> Iterator[str]:
    """Header size, format code, illustration, code type, code length, data type."""
    yield str(header.header_size)
    yield header.format_code_text(encoding)
    yield header.illustration_text(encoding)
    yield header.code_type_text(encoding)
    yield str(header.label_byte_width)
    yield header.data_type_text(encoding)


def record_line(record: Record) -> str:
    """Hex label followed by each element as a space and a 3-wide decimal."""
    return hex_label(record.label) + "".join(f" {v:3d}" for v in record.vector)
