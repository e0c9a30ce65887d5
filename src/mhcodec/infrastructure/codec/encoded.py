"""Multihash paired with the multibase it is rendered in."""

from dataclasses import dataclass, field

from mhcodec.config import get_settings
from mhcodec.domain.value_objects import Multihash
from mhcodec.infrastructure.codec.text import decode_text, to_text


def _default_base() -> str:
    return get_settings().default_base


@dataclass(frozen=True)
class EncodedMultihash:
    """Base-encoded multihash. Equality ignores the base."""

    multihash: Multihash
    base: str = field(default_factory=_default_base, compare=False)

    @classmethod
    def from_text(cls, text: str) -> "EncodedMultihash":
        """Parse text, keeping the base named by its prefix."""
        base, mh = decode_text(text)
        return cls(mh, base)

    def __str__(self) -> str:
        return to_text(self.multihash, self.base)
