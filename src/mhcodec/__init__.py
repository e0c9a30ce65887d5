"""mhcodec - self-describing hash values (multihash)."""

from mhcodec.application.builder import Builder, build, build_with_digest
from mhcodec.domain.exceptions import (
    DuplicateField,
    InvalidAlgorithm,
    InvalidEncoding,
    MissingField,
    MissingHash,
    MultihashError,
    TruncatedInput,
    UnsupportedAlgorithm,
)
from mhcodec.domain.value_objects import (
    SIGIL,
    HashAlgorithm,
    Multihash,
    SerializationMode,
)
from mhcodec.infrastructure.codec import (
    EncodedMultihash,
    decode,
    encode,
    from_bytes,
    from_text,
    to_text,
)
from mhcodec.interfaces.serde import deserialize, from_json, serialize, to_json

__version__ = "0.1.0"

__all__ = [
    "SIGIL",
    "Builder",
    "DuplicateField",
    "EncodedMultihash",
    "HashAlgorithm",
    "InvalidAlgorithm",
    "InvalidEncoding",
    "MissingField",
    "MissingHash",
    "Multihash",
    "MultihashError",
    "SerializationMode",
    "TruncatedInput",
    "UnsupportedAlgorithm",
    "build",
    "build_with_digest",
    "decode",
    "deserialize",
    "encode",
    "from_bytes",
    "from_json",
    "from_text",
    "serialize",
    "to_json",
    "to_text",
]
