"""Domain value objects."""

from mhcodec.domain.value_objects.hash_algorithm import (
    HashAlgorithm,
    algorithm_code,
    algorithm_name,
    is_known_code,
)
from mhcodec.domain.value_objects.multihash import NULL_MULTIHASH, SIGIL, Multihash
from mhcodec.domain.value_objects.serialization_mode import SerializationMode

__all__ = [
    "NULL_MULTIHASH",
    "SIGIL",
    "HashAlgorithm",
    "Multihash",
    "SerializationMode",
    "algorithm_code",
    "algorithm_name",
    "is_known_code",
]
