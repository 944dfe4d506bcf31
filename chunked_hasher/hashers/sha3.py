from cryptography.hazmat.primitives import hashes

from chunked_hasher.hashers.base import Hasher


def _digest(algorithm: hashes.HashAlgorithm, data: bytes) -> bytes:
    ctx = hashes.Hash(algorithm)
    ctx.update(bytes(data))
    return ctx.finalize()


class Sha3_256Hasher(Hasher):
    """SHA3-256 provider backed by ``cryptography``."""

    name = "sha3-256"
    digest_size = 32

    @staticmethod
    def hash_bytes(data: bytes) -> bytes:
        return _digest(hashes.SHA3_256(), data)


class Sha3_512Hasher(Hasher):
    """SHA3-512 provider backed by ``cryptography``."""

    name = "sha3-512"
    digest_size = 64

    @staticmethod
    def hash_bytes(data: bytes) -> bytes:
        return _digest(hashes.SHA3_512(), data)
