from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Iterator
from warnings import warn

from mpf_core.errors import MpfIoError, UnsupportedDataTypeError
from mpf_core.protocol import DEFAULT_DIMENSIONALITY, ELEMENT_SIZE

from .header import HeaderInfo, read_header
from .records import Record, iter_records


class MpfReader:
    """One decoding session over an MPF file: header first, then records.

    - The file handle is owned here and closed on every exit path.
    - The data type is gated once, before any record is read.
    - Vector width is an explicit choice: a fixed value (default 512),
      or the header's declared dimensionality when trust_declared is set.
    """

    def __init__(
        self,
        path: Path,
        dimensionality: int | None = None,
        trust_declared: bool = False,
    ):
        self.path = Path(path)
        self.stats = {
            "records": 0,
            "bytes_read": 0,
        }
        self._consumed = False

        try:
            self.f: BinaryIO = open(self.path, "rb")
        except OSError as e:
            raise MpfIoError(f"cannot open {self.path}: {e.strerror or e}") from e

        try:
            self.header: HeaderInfo = read_header(self.f)
            if not self.header.is_supported_data_type:
                raise UnsupportedDataTypeError(repr(self.header.data_type_text()))
            self.dimensionality = self._resolve_dimensionality(dimensionality, trust_declared)
        except BaseException:
            self.f.close()
            raise

        self.stats["bytes_read"] = self.header.header_size

    def _resolve_dimensionality(self, explicit: int | None, trust_declared: bool) -> int:
        declared = self.header.declared_dimensionality
        if explicit is not None:
            used = explicit
        elif trust_declared:
            used = declared
        else:
            used = DEFAULT_DIMENSIONALITY

        if declared != used:
            warn(f"Header declares dimensionality {declared}, decoding with {used}")
        return used

    @property
    def record_size(self) -> int:
        return self.header.label_byte_width + self.dimensionality * ELEMENT_SIZE

    def records(self) -> Iterator[Record]:
        """Stream records once; a session cannot be rewound."""
        if self._consumed:
            raise RuntimeError("records() already consumed for this session")
        self._consumed = True

        for rec in iter_records(self.f, self.header.label_byte_width, self.dimensionality):
            self.stats["records"] += 1
            self.stats["bytes_read"] += self.record_size
            yield rec

        if self.stats["records"] != self.header.sample_count:
            warn(
                f"Header declares {self.header.sample_count} samples, "
                f"decoded {self.stats['records']}"
            )

    def get_stats(self) -> dict:
        return dict(self.stats)

    def close(self) -> None:
        self.f.close()

    def __enter__(self) -> "MpfReader":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
