"""Chunked hashing over a seekable byte stream.

Splits a stream into contiguous chunks, either of a fixed byte size or
into a target number of chunks, and lazily produces a :class:`Chunk`
(index, size, digest) for each of them.  Every step seeks to the chunk
offset, reads up to ``chunk_size`` bytes into a zeroed buffer and hashes
the whole buffer with the configured digest provider.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Iterator, Optional

from chunked_hasher.chunking.chunk import Chunk
from chunked_hasher.chunking.errors import (
    ChunkReadError,
    InvalidArgument,
    TruncatedStreamError,
)
from chunked_hasher.constants import IterState
from chunked_hasher.hashers.base import Hasher
from chunked_hasher.hashers.registry import get_hasher
from chunked_hasher.hashers.sha2 import Sha256Hasher


@dataclass(slots=True)
class StepResult:
    """Outcome of a single :meth:`ChunkedHasher.step` call.

    Attributes:
        status: ``ACTIVE`` when *chunk* holds a new descriptor, otherwise
            the terminal state the iterator is in.
        chunk: The produced chunk, only set while ``ACTIVE``.
        error: The failure that ended the pass, only set when ``FAILED``.
    """

    status: IterState
    chunk: Optional[Chunk] = None
    error: Optional[ChunkReadError] = None


def _check_positive(value: int, message: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidArgument(message)


def _resolve_hasher(hasher: type[Hasher] | Hasher | str) -> type[Hasher] | Hasher:
    if isinstance(hasher, str):
        return get_hasher(hasher)
    if not callable(getattr(hasher, "hash_bytes", None)):
        raise InvalidArgument(f"{hasher!r} does not provide hash_bytes()")
    return hasher


class ChunkedHasher:
    """Single-pass iterator of chunk digests over a seekable source.

    Build instances with :meth:`fixed_chunks` or :meth:`dynamic_chunks`.
    The iterator borrows *source* exclusively until the pass ends: nothing
    else may seek or read it in the meantime.  It is not restartable; a new
    pass needs a new instance.

    Plain iteration stops on the first seek or read failure exactly as it
    stops at the end of the stream.  Use :meth:`iter_strict` or
    :meth:`step` to tell the two apart.

    Attributes:
        next_chunk: Index of the next chunk to produce.
        read_data: Number of bytes consumed so far.
        state: Current :class:`IterState`.
        error: The failure that ended the pass, if any.
    """

    def __init__(
        self,
        source: BinaryIO,
        stream_size: int,
        chunk_size: int,
        hasher: type[Hasher] | Hasher | str = Sha256Hasher,
    ):
        """Initialise the iterator with an already computed chunk size.

        Args:
            source: Object supporting ``seek(offset)`` and either
                ``readinto(buf)`` or ``read(n)``.
            stream_size: Total number of bytes in *source*.
            chunk_size: Effective chunk size, at most *stream_size*.
            hasher: Digest provider class, instance or registry name.
        """
        _check_positive(stream_size, "Stream size must be greater than zero")
        _check_positive(chunk_size, "Chunk size must be greater than zero")
        if chunk_size > stream_size:
            raise InvalidArgument("Chunk size must not exceed the stream size")

        self._source: Optional[BinaryIO] = source
        self._hasher = _resolve_hasher(hasher)
        self._chunk_size = chunk_size
        self._stream_size = stream_size
        self.next_chunk = 0
        self.read_data = 0
        self.state = IterState.ACTIVE
        self.error: Optional[ChunkReadError] = None
        self._reported = False

    # ----- Construction -----------------------------------------------------

    @classmethod
    def fixed_chunks(
        cls,
        source: BinaryIO,
        stream_size: int,
        fixed_size: int,
        hasher: type[Hasher] | Hasher | str = Sha256Hasher,
    ) -> "ChunkedHasher":
        """Create a chunker producing chunks of a fixed byte size.

        The chunk size is capped at *stream_size*, so at least one chunk is
        always produced.  The last chunk holds the remainder.

        Args:
            source: The stream to hash.
            stream_size: Total stream length; file objects cannot report it.
            fixed_size: Target chunk size in bytes.
            hasher: Digest provider class, instance or registry name.

        Returns:
            A fresh :class:`ChunkedHasher`.

        Raises:
            InvalidArgument: If *stream_size* or *fixed_size* is not a
                positive integer.

        Example::

            with open("blob.bin", "rb") as f:
                chunks = list(ChunkedHasher.fixed_chunks(f, size, 40))
        """
        _check_positive(stream_size, "Stream size must be greater than zero")
        _check_positive(fixed_size, "Fixed size must be greater than zero")
        return cls(source, stream_size, min(fixed_size, stream_size), hasher)

    @classmethod
    def dynamic_chunks(
        cls,
        source: BinaryIO,
        stream_size: int,
        dynamic_amount: int,
        hasher: type[Hasher] | Hasher | str = Sha256Hasher,
    ) -> "ChunkedHasher":
        """Create a chunker splitting the stream into *dynamic_amount* chunks.

        The chunk size is ``stream_size // dynamic_amount``.  The division
        remainder is not spread over the chunks: it ends up in one extra,
        shorter trailing chunk.  Asking for more chunks than there are
        bytes yields a single chunk holding the whole stream.

        Args:
            source: The stream to hash.
            stream_size: Total stream length.
            dynamic_amount: Target number of chunks.
            hasher: Digest provider class, instance or registry name.

        Returns:
            A fresh :class:`ChunkedHasher`.

        Raises:
            InvalidArgument: If *stream_size* or *dynamic_amount* is not a
                positive integer.
        """
        _check_positive(stream_size, "Stream size must be greater than zero")
        _check_positive(dynamic_amount, "Dynamic amount must be greater than zero")
        if dynamic_amount <= stream_size:
            chunk_size = stream_size // dynamic_amount
        else:
            chunk_size = stream_size
        return cls(source, stream_size, chunk_size, hasher)

    # ----- Sizing -----------------------------------------------------------

    @property
    def chunk_size(self) -> int:
        """Size of every chunk except the trailing remainder chunk."""
        return self._chunk_size

    @property
    def stream_size(self) -> int:
        return self._stream_size

    @property
    def hasher(self) -> type[Hasher] | Hasher:
        return self._hasher

    def chunk_count(self) -> int:
        """Number of chunks a complete pass produces."""
        return -(-self._stream_size // self._chunk_size)

    # ----- Iteration --------------------------------------------------------

    def step(self) -> StepResult:
        """Produce the next chunk or report why there is none.

        Returns:
            A :class:`StepResult`.  Once the iterator is ``EXHAUSTED`` or
            ``FAILED`` every further call returns that same state.
        """
        if self.state is not IterState.ACTIVE:
            return StepResult(self.state, error=self.error)
        if self.read_data >= self._stream_size:
            return self._finish(IterState.EXHAUSTED)

        index = self.next_chunk
        try:
            self._source.seek(index * self._chunk_size)
        except (OSError, ValueError) as e:
            return self._fail(ChunkReadError(f"seek failed: {e}", index), e)
        self.next_chunk += 1

        buf = bytearray(self._chunk_size)
        try:
            read_bytes = self._read_into(buf)
        except (OSError, ValueError) as e:
            return self._fail(ChunkReadError(f"read failed: {e}", index), e)
        if read_bytes == 0:
            return self._fail(
                TruncatedStreamError(
                    f"source ended after {self.read_data} of {self._stream_size} bytes",
                    index,
                )
            )

        self.read_data += read_bytes
        # The zeroed tail of a short read is part of the hashed input.
        digest = self._hasher.hash_bytes(buf)
        return StepResult(IterState.ACTIVE, chunk=Chunk(index, read_bytes, digest))

    def __iter__(self) -> Iterator[Chunk]:
        return self

    def __next__(self) -> Chunk:
        result = self.step()
        if result.chunk is not None:
            return result.chunk
        if result.status is IterState.FAILED and not self._reported:
            self._reported = True
            print(f"[CHUNKER] Pass failed at chunk {self.error.chunk_index}: {self.error}")
        raise StopIteration

    def iter_strict(self) -> Iterator[Chunk]:
        """Yield the remaining chunks, raising if the pass fails.

        Raises:
            ChunkReadError: When the source cannot be seeked or read, or
                ends before the declared stream size.
        """
        while True:
            result = self.step()
            if result.status is IterState.EXHAUSTED:
                return
            if result.status is IterState.FAILED:
                raise result.error
            yield result.chunk

    def close(self) -> None:
        """Abandon the pass and release the source (which stays open)."""
        if self.state is IterState.ACTIVE:
            self._finish(IterState.EXHAUSTED)

    def __enter__(self) -> "ChunkedHasher":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ----- Internals --------------------------------------------------------

    def _read_into(self, buf: bytearray) -> int:
        readinto = getattr(self._source, "readinto", None)
        if readinto is not None:
            return readinto(buf) or 0
        data = self._source.read(len(buf)) or b""
        buf[: len(data)] = data
        return len(data)

    def _finish(self, state: IterState) -> StepResult:
        self.state = state
        self._source = None
        return StepResult(state, error=self.error)

    def _fail(self, error: ChunkReadError, cause: Optional[BaseException] = None) -> StepResult:
        error.__cause__ = cause
        self.error = error
        return self._finish(IterState.FAILED)
