import sys
from pathlib import Path

# Header size is 4 bytes; only byte 0 is meaningful, so byte 2 is reserved padding.
DEFAULT_OFFSET = 2

def main():
    args = sys.argv[1:]
    offset = DEFAULT_OFFSET
    if "--offset" in args:
        i = args.index("--offset")
        if i + 1 >= len(args):
            raise SystemExit("--offset requires a value")
        offset = int(args[i + 1])
        args = args[:i] + args[i + 2:]

    if len(args) != 1:
        print("Usage: corrupt_one_byte.py <file.mpf> [--offset N]")
        raise SystemExit(2)

    p = Path(args[0])
    b = bytearray(p.read_bytes())
    if not 0 <= offset < len(b):
        print(f"Offset {offset} is outside the {len(b)}-byte file.")
        raise SystemExit(2)

    b[offset] ^= 0x01
    p.write_bytes(bytes(b))
    print(f"Corrupted 1 byte at offset {offset} in {p}")

if __name__ == "__main__":
    main()
