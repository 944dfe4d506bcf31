"""Pluggable digest providers for the chunked hasher.

A provider is any class exposing a static ``hash_bytes`` method that
turns a byte buffer into digest bytes.  The chunking code only ever calls
that method, so swapping algorithms never touches the chunking logic.
"""

import abc


class Hasher(abc.ABC):
    """Base class for digest providers.

    Attributes:
        name: Registry key of the algorithm (e.g. ``sha256``).
        digest_size: Length of the produced digest in bytes.
    """

    name: str = ""
    digest_size: int = 0

    @staticmethod
    @abc.abstractmethod
    def hash_bytes(data: bytes) -> bytes:
        """Return the digest of *data*.

        Implementations build a fresh hashing context on every call and
        must accept empty input.

        Args:
            data: Bytes to digest.

        Returns:
            Raw digest bytes, ``digest_size`` long.
        """
