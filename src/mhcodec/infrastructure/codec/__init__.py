"""Binary and textual codecs."""

from mhcodec.infrastructure.codec.binary import decode, encode, from_bytes
from mhcodec.infrastructure.codec.encoded import EncodedMultihash
from mhcodec.infrastructure.codec.text import from_text, to_text

__all__ = ["EncodedMultihash", "decode", "encode", "from_bytes", "from_text", "to_text"]
