"""Structured (de)serialization of multihashes."""

from mhcodec.interfaces.serde.records import CompactRecord, ReadableRecord
from mhcodec.interfaces.serde.serializer import deserialize, from_json, serialize, to_json

__all__ = ["CompactRecord", "ReadableRecord", "deserialize", "from_json", "serialize", "to_json"]
