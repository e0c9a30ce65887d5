"""Pytest fixtures for mhcodec tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from mhcodec import Builder, Multihash
from mhcodec.config import get_settings

ZIG = b"for great justice, move every zig!"

# blake2s-256(ZIG)
ZIG_BLAKE2S_256 = bytes.fromhex(
    "642203125d59e8b93edb676fc78de9c587cf52ccc6f219032da1f377082332b0"
)


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from MHCODEC_* environment and cached settings."""
    monkeypatch.delenv("MHCODEC_DEFAULT_BASE", raising=False)
    monkeypatch.delenv("MHCODEC_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def zig_blake2s() -> Multihash:
    """blake2s-256 multihash of the zig phrase."""
    return Builder.new_from_bytes("blake2s-256", ZIG).try_build()


@pytest.fixture
def zig_sha3_256() -> Multihash:
    """sha3-256 multihash of the zig phrase."""
    return Builder.new_from_bytes(0x16, ZIG).try_build()
