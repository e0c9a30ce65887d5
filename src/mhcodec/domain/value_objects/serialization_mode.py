"""Structured serialization mode."""

from enum import StrEnum


class SerializationMode(StrEnum):
    """Shape of the structured record produced for a multihash."""

    READABLE = "readable"
    COMPACT = "compact"

    @classmethod
    def from_flag(cls, is_human_readable: bool) -> "SerializationMode":
        """Map a framework's human-readable flag to a mode."""
        return cls.READABLE if is_human_readable else cls.COMPACT
