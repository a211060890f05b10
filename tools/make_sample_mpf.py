"""Generate a synthetic MPF sample file for demos and tests."""
from __future__ import annotations

import random
import struct
import sys
from pathlib import Path

from mpf_core.protocol import (
    CODE_TYPE_LEN,
    DATA_TYPE_LEN,
    DEFAULT_DIMENSIONALITY,
    FORMAT_CODE,
    FORMAT_CODE_LEN,
    HEADER_FIXED_LEN,
    SUPPORTED_DATA_TYPE,
    U32_FMT,
)

# --- CONFIGURATION ---
ILLUSTRATION = b"Character features, synthetic\x00"
CODE_TYPE = b"GB"
CODE_LENGTH = 2


def _pad(raw: bytes, width: int) -> bytes:
    return raw[:width].ljust(width, b"\x00")


def build_header(
    samples: int,
    illustration: bytes = ILLUSTRATION,
    code_type: bytes = CODE_TYPE,
    code_length: int = CODE_LENGTH,
    data_type: bytes = SUPPORTED_DATA_TYPE,
    dimensionality: int = DEFAULT_DIMENSIONALITY,
) -> bytes:
    header_size = HEADER_FIXED_LEN + len(illustration)
    return (
        bytes([header_size, 0, 0, 0])
        + _pad(FORMAT_CODE, FORMAT_CODE_LEN)
        + illustration
        + _pad(code_type, CODE_TYPE_LEN)
        + bytes([code_length, 0])
        + _pad(data_type, DATA_TYPE_LEN)
        + struct.pack(U32_FMT, samples)
        + struct.pack(U32_FMT, dimensionality)
    )


def generate_file(out: Path, samples: int, truncate: int = 0, seed: int | None = None) -> Path:
    rng = random.Random(seed)
    blob = bytearray(build_header(samples))

    # GB2312 level-1 hanzi live in rows 0xB0..0xD7
    for _ in range(samples):
        blob += bytes([rng.randint(0xB0, 0xD7), rng.randint(0xA1, 0xFE)])
        blob += bytes(rng.randint(0, 255) for _ in range(DEFAULT_DIMENSIONALITY))

    if truncate:
        blob = blob[:-truncate]

    out = Path(out)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(bytes(blob))
    print(f"GENERATED: {out} ({samples} samples, {len(blob)} bytes)")
    return out


if __name__ == "__main__":
    # Usage:
    #   python tools/make_sample_mpf.py OUT_FILE [--samples N] [--truncate K] [--seed S]

    args = [a for a in sys.argv[1:] if a]

    def pop_option(arg_list: list[str], name: str, default: int) -> tuple[int, list[str]]:
        """Remove an integer option and its value from an argv-style list."""
        if name not in arg_list:
            return default, arg_list
        i = arg_list.index(name)
        if i + 1 >= len(arg_list):
            raise SystemExit(f"{name} requires a value")
        return int(arg_list[i + 1]), arg_list[:i] + arg_list[i + 2:]

    samples, args = pop_option(args, "--samples", 3)
    truncate, args = pop_option(args, "--truncate", 0)
    seed, args = pop_option(args, "--seed", -1)

    out = args[0] if len(args) > 0 else "sample.mpf"
    generate_file(Path(out), samples, truncate=truncate, seed=None if seed < 0 else seed)
