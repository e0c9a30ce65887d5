"""Hasher port - a digest primitive."""

from typing import Protocol


class Hasher(Protocol):
    """Incremental digest computation (hashlib / Cryptodome style)."""

    def update(self, data: bytes, /) -> None: ...

    def digest(self) -> bytes: ...
