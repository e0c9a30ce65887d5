"""Unit tests for the binary multihash codec."""

import pytest

from mhcodec import (
    HashAlgorithm,
    InvalidAlgorithm,
    InvalidEncoding,
    Multihash,
    TruncatedInput,
    build,
    decode,
    encode,
    from_bytes,
)
from mhcodec.infrastructure.codec.binary import decode_varbytes, encode_varbytes
from mhcodec.infrastructure.hashing import supported_algorithms

from tests.conftest import ZIG, ZIG_BLAKE2S_256


def test_encode_layout(zig_blake2s: Multihash) -> None:
    """Code varint, length varint, then digest bytes."""
    assert encode(zig_blake2s) == bytes([0xE0, 0xE4, 0x02, 0x20]) + ZIG_BLAKE2S_256


def test_encode_null() -> None:
    """Null value encodes to two zero bytes."""
    assert encode(Multihash.null()) == b"\x00\x00"


def test_decode_known_vector(zig_sha3_256: Multihash) -> None:
    """Published sha3-256 vector decodes to the built value."""
    data = bytes.fromhex(
        "16206b761d3b2e7675e088e337a82207b55711d3957efdb877a3d261b0ca2c38e201"
    )
    assert decode(data) == (zig_sha3_256, b"")
    assert from_bytes(data) == zig_sha3_256


@pytest.mark.parametrize("name", supported_algorithms())
def test_roundtrip_every_algorithm(name: str) -> None:
    """decode(encode(build(a, d))) returns the value and no remainder."""
    mh = build(name, ZIG)
    assert decode(encode(mh)) == (mh, b"")


def test_decode_returns_remainder() -> None:
    """Bytes after the digest are handed back untouched."""
    mh = Multihash(HashAlgorithm.SHA1, b"\x01" * 20)
    value, rest = decode(encode(mh) + b"tail")
    assert value == mh
    assert rest == b"tail"
    assert from_bytes(encode(mh) + b"tail") == mh


def test_decode_accepts_bytearray_and_memoryview() -> None:
    """Any bytes-like input decodes the same way."""
    data = encode(Multihash(0x12, b"\x07" * 32))
    assert decode(bytearray(data)) == decode(memoryview(data)) == decode(data)


def test_decode_unknown_code_raises() -> None:
    """Codes absent from the multicodec table are rejected."""
    data = encode(Multihash(0x3FFFFFFFFF, b"\x00"))
    with pytest.raises(InvalidAlgorithm):
        decode(data)


def test_decode_short_digest_raises() -> None:
    """Declared length longer than the input is TruncatedInput."""
    data = bytes([0x12, 0x20]) + b"\x00" * 10
    with pytest.raises(TruncatedInput) as exc_info:
        decode(data)
    assert exc_info.value.expected == 32
    assert exc_info.value.available == 10


@pytest.mark.parametrize("data", [b"", b"\x12", b"\x80", b"\x12\x80"])
def test_decode_cut_varint_raises(data: bytes) -> None:
    """Input ending inside or before a varint is TruncatedInput."""
    with pytest.raises(TruncatedInput):
        decode(data)


def test_decode_overlong_varint_raises() -> None:
    """Varints longer than nine bytes are InvalidEncoding."""
    with pytest.raises(InvalidEncoding):
        decode(b"\xff" * 10)


def test_varbytes_prefix() -> None:
    """encode_varbytes prepends the varint length."""
    assert encode_varbytes(b"") == b"\x00"
    assert encode_varbytes(b"\xaa" * 200) == b"\xc8\x01" + b"\xaa" * 200
    assert decode_varbytes(b"\x02abc") == (b"ab", b"c")
