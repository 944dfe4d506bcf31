"""Exceptions raised by the chunked hashing code."""


class InvalidArgument(ValueError):
    """A chunker or hasher was configured with an unusable parameter."""


class ChunkReadError(OSError):
    """The source could not be seeked or read during a chunking pass.

    Attributes:
        chunk_index: Index of the chunk being produced when it failed.
    """

    def __init__(self, message: str, chunk_index: int):
        super().__init__(message)
        self.chunk_index = chunk_index


class TruncatedStreamError(ChunkReadError):
    """The source ran out of data before the declared stream size."""
