"""Binary codec: <code:varint><length:varint><digest>."""

import logging

from multiformats import varint

from mhcodec.domain.exceptions import InvalidAlgorithm, InvalidEncoding, TruncatedInput
from mhcodec.domain.value_objects import Multihash, is_known_code

logger = logging.getLogger(__name__)

# longest varint accepted by multiformats (63-bit values)
_MAX_VARINT_LEN = 9


def _read_varint(data: bytes) -> tuple[int, bytes]:
    """Parse one unsigned varint, return (value, remainder)."""
    try:
        value, _, rest = varint.decode_raw(data)
    except ValueError as err:
        head = data[:_MAX_VARINT_LEN]
        if len(head) < _MAX_VARINT_LEN and all(b & 0x80 for b in head):
            raise TruncatedInput(len(head) + 1, len(head)) from err
        raise InvalidEncoding(f"Malformed varint: {err}") from err
    return value, bytes(rest)


def encode_varbytes(data: bytes) -> bytes:
    """Length-prefix data with a varint."""
    return varint.encode(len(data)) + bytes(data)


def decode_varbytes(data: bytes) -> tuple[bytes, bytes]:
    """Read a varint length and that many bytes, return (bytes, remainder)."""
    size, rest = _read_varint(data)
    if size > len(rest):
        raise TruncatedInput(size, len(rest))
    return rest[:size], rest[size:]


def encode(mh: Multihash) -> bytes:
    """Serialize a multihash to its binary form."""
    return varint.encode(mh.code) + encode_varbytes(mh.digest)


def decode(data: bytes) -> tuple[Multihash, bytes]:
    """
    Parse one multihash from the start of data.
    Returns the value and the unconsumed remainder.
    Raises InvalidAlgorithm, TruncatedInput or InvalidEncoding.
    """
    data = bytes(data)
    code, rest = _read_varint(data)
    if not is_known_code(code):
        logger.debug("Unknown multicodec 0x%x in binary multihash", code)
        raise InvalidAlgorithm(code)
    digest, rest = decode_varbytes(rest)
    return Multihash(code, digest), rest


def from_bytes(data: bytes) -> Multihash:
    """Parse a multihash, ignoring any trailing bytes."""
    mh, _ = decode(data)
    return mh
