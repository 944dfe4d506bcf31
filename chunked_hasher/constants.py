from enum import IntEnum


# Default chunk size used by the file helpers (512 KB).
DEFAULT_CHUNK_SIZE = 512 * 1024
DEFAULT_HASHER = "sha256"


class IterState(IntEnum):
    ACTIVE = 0x01
    EXHAUSTED = 0x02
    FAILED = 0x03
