"""MPF (Multiple Pattern Feature) protocol constants.

Single source of truth for the on-disk header layout and record sizing.
Keep this file stable. Decoder, renderer and sample generator must remain synchronized.
"""

# Header: [HeaderSize(4) | FormatCode(8) | Illustration(N) | CodeType(20) |
#          CodeLength(2) | DataType(20) | SampleNumber(4) | Dimensionality(4)]
HEADER_SIZE_LEN = 4
FORMAT_CODE_LEN = 8
CODE_TYPE_LEN = 20
CODE_LENGTH_LEN = 2
DATA_TYPE_LEN = 20
SAMPLE_NUMBER_LEN = 4
DIMENSIONALITY_LEN = 4

# Header size without the illustration text = 62 bytes
HEADER_FIXED_LEN = (
    HEADER_SIZE_LEN
    + FORMAT_CODE_LEN
    + CODE_TYPE_LEN
    + CODE_LENGTH_LEN
    + DATA_TYPE_LEN
    + SAMPLE_NUMBER_LEN
    + DIMENSIONALITY_LEN
)

# Little-endian uint32 for sample number and dimensionality
U32_FMT = "<I"

FORMAT_CODE = b"MPF\x00"

# Only one element encoding: one unsigned byte per vector component
SUPPORTED_DATA_TYPE = b"unsigned char"
ELEMENT_SIZE = 1

# Vector width used unless the caller opts into the declared value
DEFAULT_DIMENSIONALITY = 512

# Text field decoding
DEFAULT_TEXT_ENCODING = "ascii"

# Largest value the 4-byte dimensionality field can hold
MAX_DIMENSIONALITY = 0xFFFFFFFF

# Vector reads are split into chunks of at most this size
READ_CHUNK_SIZE = 64 * 1024  # 64KB
