"""Multihash value object: a digest tagged with its hash algorithm."""

from dataclasses import dataclass

from mhcodec.domain.exceptions import InvalidAlgorithm
from mhcodec.domain.value_objects.hash_algorithm import HashAlgorithm, algorithm_name

# multicodec code of the multihash family itself
SIGIL = 0x31
SIGIL_NAME = "multihash"


@dataclass(frozen=True, order=True, repr=False)
class Multihash:
    """Immutable (algorithm code, digest bytes) pair.

    The digest length is not checked against the algorithm's native size, so
    truncated or externally produced digests can be carried as-is.
    """

    code: int = HashAlgorithm.IDENTITY
    digest: bytes = b""

    def __post_init__(self) -> None:
        if isinstance(self.code, bool) or not isinstance(self.code, int):
            raise TypeError(f"Algorithm code must be int, got {type(self.code).__name__}")
        if self.code < 0:
            raise ValueError("Algorithm code must be non-negative")
        object.__setattr__(self, "code", int(self.code))
        if not isinstance(self.digest, bytes):
            # bytearray/memoryview -> bytes
            object.__setattr__(self, "digest", bytes(self.digest))

    @classmethod
    def null(cls) -> "Multihash":
        """Canonical null value: identity algorithm, empty digest."""
        return cls()

    @property
    def is_null(self) -> bool:
        return self == NULL_MULTIHASH

    @property
    def name(self) -> str:
        """Multicodec name of the algorithm."""
        return algorithm_name(self.code)

    def __repr__(self) -> str:
        try:
            label = self.name
        except InvalidAlgorithm:
            label = f"0x{self.code:x}"
        return f"{SIGIL_NAME} - {label} - {self.digest.hex()}"


NULL_MULTIHASH = Multihash()
