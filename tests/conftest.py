import struct

import pytest


def build_mpf(
    records=(),
    illustration=b"",
    format_code=b"MPF\x00",
    code_type=b"GB",
    code_length=2,
    data_type=b"unsigned char",
    sample_count=None,
    dimensionality=512,
    header_size=None,
):
    """Assemble MPF bytes: header followed by raw (label + vector) records."""
    if header_size is None:
        header_size = 62 + len(illustration)
    if sample_count is None:
        sample_count = len(records)
    header = (
        bytes([header_size, 0, 0, 0])
        + format_code.ljust(8, b"\x00")
        + illustration
        + code_type.ljust(20, b"\x00")
        + bytes([code_length, 0])
        + data_type.ljust(20, b"\x00")
        + struct.pack("<I", sample_count)
        + struct.pack("<I", dimensionality)
    )
    return header + b"".join(records)


@pytest.fixture
def mpf_file(tmp_path):
    def _write(name="sample.mpf", **kwargs):
        p = tmp_path / name
        p.write_bytes(build_mpf(**kwargs))
        return p
    return _write
