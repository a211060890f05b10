"""MPF record stream decoding.

Records are [Label(code_length) | Vector(dimensionality * 1 byte)], concatenated
until end of stream. No seeking: one forward pass.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Iterator

from mpf_core.errors import TruncatedRecordError
from mpf_core.protocol import ELEMENT_SIZE

from .header import read_bytes, read_chunked


@dataclass(frozen=True)
class Record:
    label: bytes
    vector: tuple[int, ...]


def iter_records(
    stream: BinaryIO, label_byte_width: int, dimensionality: int
) -> Iterator[Record]:
    """Yield records until a clean EOF on a record boundary.

    The caller must have checked the header's data type beforehand.
    """
    if label_byte_width < 1:
        raise ValueError(f"label_byte_width must be >= 1, got {label_byte_width}")
    if dimensionality < 0:
        raise ValueError(f"dimensionality must be >= 0, got {dimensionality}")

    vector_len = dimensionality * ELEMENT_SIZE
    index = 0
    while True:
        first = read_bytes(stream, 1)

        # Clean EOF
        if not first:
            return

        rest = read_bytes(stream, label_byte_width - 1)
        label = first + rest
        if len(label) != label_byte_width:
            raise TruncatedRecordError(
                f"record {index}: label has {len(label)} of {label_byte_width} bytes"
            )

        data = read_chunked(stream, vector_len)
        if len(data) != vector_len:
            raise TruncatedRecordError(
                f"record {index}: vector has {len(data)} of {vector_len} bytes"
            )

        # Iterating bytes yields ints in 0..255, never sign-extended
        yield Record(label=label, vector=tuple(data))
        index += 1
