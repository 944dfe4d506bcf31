import hashlib

from chunked_hasher.hashers.base import Hasher


class Sha256Hasher(Hasher):
    """SHA-256 provider backed by :mod:`hashlib`."""

    name = "sha256"
    digest_size = 32

    @staticmethod
    def hash_bytes(data: bytes) -> bytes:
        return hashlib.sha256(data).digest()


class Sha512Hasher(Hasher):
    """SHA-512 provider backed by :mod:`hashlib`."""

    name = "sha512"
    digest_size = 64

    @staticmethod
    def hash_bytes(data: bytes) -> bytes:
        return hashlib.sha512(data).digest()
