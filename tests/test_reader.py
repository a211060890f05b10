import warnings

import pytest

from mpf_core.errors import MpfIoError, UnsupportedDataTypeError, TruncatedRecordError
from mpf_decode.reader import MpfReader


def _rec(label: bytes, dim: int = 512, fill: int = 0) -> bytes:
    return label + bytes([fill]) * dim


def test_unsupported_data_type_before_any_record(mpf_file, monkeypatch):
    p = mpf_file(data_type=b"short", records=[_rec(b"\xb0\xa1")])

    import mpf_decode.reader as reader_mod

    def boom(*a, **k):
        raise AssertionError("records must not be decoded")

    monkeypatch.setattr(reader_mod, "iter_records", boom)
    with pytest.raises(UnsupportedDataTypeError) as exc:
        MpfReader(p)
    assert "short" in str(exc.value)
    assert exc.value.code == "E_UNSUPPORTED_DATA_TYPE"


def test_data_type_must_match_exactly(mpf_file):
    p = mpf_file(data_type=b"unsigned char ")
    with pytest.raises(UnsupportedDataTypeError):
        MpfReader(p)


def test_missing_path_is_io_error(tmp_path):
    with pytest.raises(MpfIoError) as exc:
        MpfReader(tmp_path / "absent.mpf")
    assert exc.value.code == "E_IO"


def test_session_stats_and_close(mpf_file):
    p = mpf_file(code_length=2, records=[_rec(b"\xb0\xa1"), _rec(b"\xb0\xa2", fill=9)])
    with MpfReader(p) as reader:
        recs = list(reader.records())
        stats = reader.get_stats()
    assert [r.label for r in recs] == [b"\xb0\xa1", b"\xb0\xa2"]
    assert recs[1].vector == (9,) * 512
    assert stats == {"records": 2, "bytes_read": 62 + 2 * 514}
    assert reader.f.closed


def test_file_closed_when_header_fails(mpf_file, monkeypatch):
    p = mpf_file(header_size=61)
    opened = []

    import builtins

    real_open = builtins.open

    def tracking_open(*a, **k):
        f = real_open(*a, **k)
        opened.append(f)
        return f

    monkeypatch.setattr(builtins, "open", tracking_open)
    with pytest.raises(Exception):
        MpfReader(p)
    assert opened and all(f.closed for f in opened)


def test_file_closed_when_record_truncated(mpf_file):
    p = mpf_file(code_length=1, records=[_rec(b"\x01")[:-1]], sample_count=1)
    reader = MpfReader(p)
    with pytest.raises(TruncatedRecordError):
        with reader:
            list(reader.records())
    assert reader.f.closed


def test_fixed_dimensionality_by_default(mpf_file):
    # Declared 16 is ignored; records are decoded 512 wide
    p = mpf_file(code_length=1, dimensionality=16, records=[_rec(b"\x01")])
    with pytest.warns(UserWarning, match="declares dimensionality 16, decoding with 512"):
        reader = MpfReader(p)
    with reader:
        recs = list(reader.records())
    assert len(recs) == 1 and len(recs[0].vector) == 512


def test_trust_declared_dimensionality(mpf_file):
    p = mpf_file(code_length=1, dimensionality=16, records=[_rec(b"\x01", 16), _rec(b"\x02", 16)])
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        with MpfReader(p, trust_declared=True) as reader:
            recs = list(reader.records())
    assert reader.dimensionality == 16
    assert [len(r.vector) for r in recs] == [16, 16]


def test_explicit_dimensionality_wins(mpf_file):
    p = mpf_file(code_length=1, dimensionality=512, records=[_rec(b"\x01", 8)])
    with pytest.warns(UserWarning):
        reader = MpfReader(p, dimensionality=8, trust_declared=True)
    with reader:
        assert len(list(reader.records())) == 1


def test_sample_count_mismatch_warns(mpf_file):
    p = mpf_file(code_length=1, records=[_rec(b"\x01")], sample_count=4)
    with MpfReader(p) as reader:
        with pytest.warns(UserWarning, match="declares 4 samples, decoded 1"):
            list(reader.records())


def test_records_cannot_be_restarted(mpf_file):
    p = mpf_file(code_length=1, records=[_rec(b"\x01")])
    with MpfReader(p) as reader:
        list(reader.records())
        with pytest.raises(RuntimeError):
            list(reader.records())


def test_two_sessions_decode_identically(mpf_file):
    p = mpf_file(code_length=2, records=[_rec(b"\xc4\xe3", fill=i) for i in range(4)])
    with MpfReader(p) as a:
        first = list(a.records())
    with MpfReader(p) as b:
        second = list(b.records())
    assert first == second
