"""Builder: produce multihashes by hashing data or wrapping a digest."""

import logging
from dataclasses import dataclass, replace

from mhcodec.domain.exceptions import MissingHash
from mhcodec.domain.value_objects import Multihash, algorithm_code
from mhcodec.infrastructure.codec import EncodedMultihash
from mhcodec.infrastructure.codec.text import check_base
from mhcodec.infrastructure.hashing import resolve

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Builder:
    """Immutable multihash builder.

    Every ``with_*`` call returns a new builder, so one configuration can be
    reused for many inputs::

        sha = Builder.new_from_bytes("sha2-256", b"data")
        mh = sha.try_build()
        text = str(sha.with_base_encoding("base58btc").try_build_encoded())
    """

    code: int | str
    digest: bytes | None = None
    base_encoding: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.code, str):
            object.__setattr__(self, "code", algorithm_code(self.code))
        else:
            object.__setattr__(self, "code", int(self.code))
        if self.digest is not None and not isinstance(self.digest, bytes):
            object.__setattr__(self, "digest", bytes(self.digest))

    @classmethod
    def new_from_bytes(cls, algorithm: int | str, data: bytes) -> "Builder":
        """Hash data with algorithm. Raises UnsupportedAlgorithm before reading data."""
        spec = resolve(algorithm)
        logger.debug("Hashing %d bytes with %s", len(data), spec.name)
        return cls(spec.code, spec.hash(data))

    def with_hash(self, digest: bytes) -> "Builder":
        """Use a precomputed digest."""
        return replace(self, digest=bytes(digest))

    def with_base_encoding(self, base: str) -> "Builder":
        """Set the multibase used by try_build_encoded."""
        return replace(self, base_encoding=check_base(base))

    def try_build(self) -> Multihash:
        """Build the multihash. Raises MissingHash if no digest is set."""
        if self.digest is None:
            raise MissingHash()
        return Multihash(self.code, self.digest)

    def try_build_encoded(self) -> EncodedMultihash:
        """Build a base-encoded multihash (default base when none was set)."""
        mh = self.try_build()
        if self.base_encoding is None:
            return EncodedMultihash(mh)
        return EncodedMultihash(mh, self.base_encoding)


def build(algorithm: int | str, data: bytes) -> Multihash:
    """Hash data with algorithm and wrap the digest."""
    return Builder.new_from_bytes(algorithm, data).try_build()


def build_with_digest(algorithm: int | str, digest: bytes) -> Multihash:
    """Wrap an externally computed digest; the algorithm is not checked against the registry."""
    return Builder(algorithm).with_hash(digest).try_build()
