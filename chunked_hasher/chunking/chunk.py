from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Chunk:
    """Position and digest of one chunk of a stream.

    Attributes:
        index: Zero-based position of the chunk in the stream.
        size: Number of bytes actually read for this chunk.  Only the
            last chunk may be shorter than the chunk size.
        hash: Raw digest of the chunk buffer.
    """

    index: int
    size: int
    hash: bytes

    def __str__(self) -> str:
        return f"{self.index}/{self.size}/{self.hash.hex()}"

    def hexdigest(self) -> str:
        """Return the digest as a lowercase hex string."""
        return self.hash.hex()

    def to_dict(self) -> dict:
        """Return a JSON friendly mapping with the hash hex encoded."""
        return {"index": self.index, "size": self.size, "hash": self.hash.hex()}
