"""MPF Decode - Header and record stream decoding for MPF sample files."""
from .header import HeaderInfo, read_header
from .records import Record, iter_records
from .reader import MpfReader

__all__ = ["HeaderInfo", "read_header", "Record", "iter_records", "MpfReader"]
