"""Registry entry describing one computable hash function."""

from collections.abc import Callable
from dataclasses import dataclass

from mhcodec.application.ports import Hasher


@dataclass(frozen=True)
class HashSpec:
    """Hash function available for computing new digests."""

    name: str
    code: int
    size: int
    factory: Callable[[], Hasher]

    def hash(self, data: bytes) -> bytes:
        """Digest data in a single pass."""
        hasher = self.factory()
        hasher.update(data)
        return hasher.digest()
