"""Name based lookup of the bundled digest providers."""

from chunked_hasher.chunking.errors import InvalidArgument
from chunked_hasher.hashers.base import Hasher
from chunked_hasher.hashers.blake2 import Blake2bHasher
from chunked_hasher.hashers.sha2 import Sha256Hasher, Sha512Hasher
from chunked_hasher.hashers.sha3 import Sha3_256Hasher, Sha3_512Hasher


HASHERS: dict[str, type[Hasher]] = {
    h.name: h
    for h in (
        Sha256Hasher,
        Sha512Hasher,
        Blake2bHasher,
        Sha3_256Hasher,
        Sha3_512Hasher,
    )
}


def available_hashers() -> list[str]:
    """Return the sorted names accepted by :func:`get_hasher`."""
    return sorted(HASHERS)


def get_hasher(name: str) -> type[Hasher]:
    """Look up a digest provider by name.

    Args:
        name: Algorithm name, case-insensitive (e.g. ``"SHA512"``).

    Returns:
        The provider class.

    Raises:
        InvalidArgument: If no provider is registered under *name*.
    """
    try:
        return HASHERS[name.lower()]
    except KeyError:
        raise InvalidArgument(
            f"Unknown hasher {name!r}, expected one of {', '.join(available_hashers())}"
        ) from None
