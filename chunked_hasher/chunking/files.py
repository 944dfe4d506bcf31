"""Chunked hashing helpers for files on disk.

Opens a file, takes its size from ``stat`` and runs a complete chunking
pass over it, returning the ordered list of :class:`Chunk` descriptors.
"""

from pathlib import Path

from chunked_hasher.chunking.chunk import Chunk
from chunked_hasher.chunking.chunked_hasher import ChunkedHasher
from chunked_hasher.constants import DEFAULT_CHUNK_SIZE, DEFAULT_HASHER
from chunked_hasher.hashers.base import Hasher


def chunk_file(
    path: Path,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    hasher: type[Hasher] | Hasher | str = DEFAULT_HASHER,
) -> list[Chunk]:
    """Chunk a file into fixed-size pieces and digest each of them.

    Args:
        path: Path to the source file.
        chunk_size: Maximum number of bytes per chunk (default 512 KB).
        hasher: Digest provider class, instance or registry name.

    Returns:
        Ordered list of chunks, empty for an empty file.

    Raises:
        ChunkReadError: If the file cannot be read to the end.
    """
    path = Path(path)
    size = path.stat().st_size
    if size == 0:
        return []
    with path.open("rb") as f:
        return list(ChunkedHasher.fixed_chunks(f, size, chunk_size, hasher).iter_strict())


def chunk_file_dynamic(
    path: Path,
    chunk_count: int,
    hasher: type[Hasher] | Hasher | str = DEFAULT_HASHER,
) -> list[Chunk]:
    """Chunk a file into *chunk_count* pieces (plus a remainder chunk).

    Args:
        path: Path to the source file.
        chunk_count: Target number of chunks.
        hasher: Digest provider class, instance or registry name.

    Returns:
        Ordered list of chunks, empty for an empty file.

    Raises:
        ChunkReadError: If the file cannot be read to the end.
    """
    path = Path(path)
    size = path.stat().st_size
    if size == 0:
        return []
    with path.open("rb") as f:
        return list(ChunkedHasher.dynamic_chunks(f, size, chunk_count, hasher).iter_strict())
