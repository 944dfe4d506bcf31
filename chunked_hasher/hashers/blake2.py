from nacl.encoding import RawEncoder
from nacl.hash import BLAKE2B_BYTES_MAX, blake2b

from chunked_hasher.hashers.base import Hasher


class Blake2bHasher(Hasher):
    """BLAKE2b-512 provider backed by libsodium (PyNaCl)."""

    name = "blake2b"
    digest_size = BLAKE2B_BYTES_MAX

    @staticmethod
    def hash_bytes(data: bytes) -> bytes:
        return blake2b(bytes(data), digest_size=BLAKE2B_BYTES_MAX, encoder=RawEncoder)
