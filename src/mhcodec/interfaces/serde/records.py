"""Record schemas for structured serialization."""

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from mhcodec.domain.value_objects.multihash import SIGIL_NAME


class ReadableRecord(BaseModel):
    """Human-readable record: named fields, textual values."""

    model_config = ConfigDict(
        title=SIGIL_NAME,
        frozen=True,
        strict=True,
        extra="ignore",
    )

    algorithm: str = Field(description="Multicodec name of the hash function")
    digest: str = Field(description="base16 multibase text of the length-prefixed digest")


class CompactRecord(NamedTuple):
    """Compact record: positional, binary values."""

    algorithm: int
    digest: bytes

