"""Textual codec: multibase-wrapped binary multihash."""

import logging

from multiformats import multibase

from mhcodec.config import get_settings
from mhcodec.domain.exceptions import InvalidEncoding
from mhcodec.domain.value_objects import Multihash
from mhcodec.infrastructure.codec.binary import decode, encode

logger = logging.getLogger(__name__)


def check_base(base: str) -> str:
    """Return base if it names a multibase, else raise InvalidEncoding."""
    if not multibase.exists(base):
        raise InvalidEncoding(f"Unsupported multibase encoding: {base}")
    return base


def encode_bytes(data: bytes, base: str) -> str:
    """Multibase-encode raw bytes under the named base."""
    check_base(base)
    try:
        return multibase.encode(data, base)
    except (KeyError, ValueError, NotImplementedError) as err:
        raise InvalidEncoding(f"Unsupported multibase encoding: {base}") from err


def decode_bytes(text: str) -> tuple[str, bytes]:
    """Decode multibase text, return (base name, raw bytes)."""
    if not text:
        raise InvalidEncoding("Empty multibase string")
    try:
        base, data = multibase.decode_raw(text)
    except KeyError as err:
        raise InvalidEncoding(f"Unknown multibase prefix: {text[0]!r}") from err
    except (ValueError, NotImplementedError) as err:
        logger.debug("Multibase payload rejected: %s", err)
        raise InvalidEncoding(f"Malformed multibase payload: {err}") from err
    return base.name, bytes(data)


def to_text(mh: Multihash, base: str | None = None) -> str:
    """Textual form of mh; base defaults to the configured default base."""
    return encode_bytes(encode(mh), base or get_settings().default_base)


def decode_text(text: str) -> tuple[str, Multihash]:
    """Parse textual form, return (base name, multihash)."""
    base, data = decode_bytes(text)
    mh, _ = decode(data)
    return base, mh


def from_text(text: str) -> Multihash:
    """Parse the textual form of a multihash."""
    _, mh = decode_text(text)
    return mh
