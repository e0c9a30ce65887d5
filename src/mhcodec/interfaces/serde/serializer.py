"""Map multihashes to and from generic structured records."""

import json
import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from mhcodec.domain.exceptions import (
    DuplicateField,
    InvalidAlgorithm,
    InvalidEncoding,
    MissingField,
)
from mhcodec.domain.value_objects import (
    Multihash,
    SerializationMode,
    algorithm_code,
    is_known_code,
)
from mhcodec.infrastructure.codec.binary import decode_varbytes, encode_varbytes
from mhcodec.infrastructure.codec.text import decode_bytes, encode_bytes
from mhcodec.interfaces.serde.records import CompactRecord, ReadableRecord

logger = logging.getLogger(__name__)

# readable digests are always rendered in lowercase hex
READABLE_DIGEST_BASE = "base16"


class _JsonPairs(list):
    """Key/value pairs of one decoded JSON object."""


def _as_mode(mode: SerializationMode | bool) -> SerializationMode:
    if isinstance(mode, bool):
        return SerializationMode.from_flag(mode)
    return SerializationMode(mode)


def serialize(mh: Multihash, mode: SerializationMode | bool) -> dict[str, str] | CompactRecord:
    """
    Structured record for mh.
    READABLE -> {"algorithm": name, "digest": base16 text}; COMPACT -> (code, digest).
    """
    if _as_mode(mode) is SerializationMode.COMPACT:
        return CompactRecord(mh.code, mh.digest)
    record = ReadableRecord(
        algorithm=mh.name,
        digest=encode_bytes(encode_varbytes(mh.digest), READABLE_DIGEST_BASE),
    )
    return record.model_dump()


def deserialize(record: Any, mode: SerializationMode | bool) -> Multihash:
    """Rebuild a multihash from a record produced by serialize in the same mode."""
    if _as_mode(mode) is SerializationMode.COMPACT:
        return _deserialize_compact(record)
    return _deserialize_readable(record)


def _deserialize_compact(record: Any) -> Multihash:
    if isinstance(record, (str, bytes, bytearray)) or not isinstance(record, Sequence):
        raise InvalidEncoding(f"Compact record must be a sequence, got {type(record).__name__}")
    if len(record) != 2:
        raise InvalidEncoding(f"Compact record must have 2 elements, got {len(record)}")
    code, digest = record
    if isinstance(code, bool) or not isinstance(code, int) or code < 0:
        raise InvalidEncoding(f"Compact algorithm must be a non-negative int, got {code!r}")
    if not isinstance(digest, (bytes, bytearray, memoryview)):
        raise InvalidEncoding(f"Compact digest must be bytes, got {type(digest).__name__}")
    if not is_known_code(code):
        raise InvalidAlgorithm(code)
    return Multihash(code, bytes(digest))


def _collect_fields(record: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> dict[str, Any]:
    """Gather key/value pairs, rejecting repeated keys."""
    items = record.items() if isinstance(record, Mapping) else record
    try:
        pairs = [(key, value) for key, value in items]
    except (TypeError, ValueError) as err:
        raise InvalidEncoding("Readable record must be a mapping or key/value pairs") from err
    fields: dict[str, Any] = {}
    for key, value in pairs:
        if key in fields:
            raise DuplicateField(key)
        fields[key] = value
    return fields


def _deserialize_readable(record: Any) -> Multihash:
    fields = _collect_fields(record)
    try:
        parsed = ReadableRecord.model_validate(fields)
    except ValidationError as err:
        missing = [e["loc"][0] for e in err.errors() if e["type"] == "missing"]
        if missing:
            raise MissingField(str(missing[0])) from None
        raise InvalidEncoding(f"Invalid readable record: {err}") from err
    code = algorithm_code(parsed.algorithm)
    _, raw = decode_bytes(parsed.digest)
    digest, rest = decode_varbytes(raw)
    if rest:
        logger.debug("Readable digest has %d trailing bytes", len(rest))
        raise InvalidEncoding("Trailing bytes after digest")
    return Multihash(code, digest)


def to_json(mh: Multihash) -> str:
    """Readable record as compact JSON."""
    return json.dumps(serialize(mh, SerializationMode.READABLE), separators=(",", ":"))


def from_json(text: str | bytes) -> Multihash:
    """Parse JSON produced by to_json. Duplicate keys raise DuplicateField."""
    try:
        data = json.loads(text, object_pairs_hook=_JsonPairs)
    except ValueError as err:
        raise InvalidEncoding(f"Invalid JSON: {err}") from err
    if not isinstance(data, _JsonPairs):
        raise InvalidEncoding("JSON multihash must be an object")
    return deserialize(data, SerializationMode.READABLE)
