"""Hash algorithm identifiers (multicodec codes)."""

from enum import IntEnum

from multiformats import multicodec

from mhcodec.domain.exceptions import InvalidAlgorithm


class HashAlgorithm(IntEnum):
    """Multicodec codes of the hash functions this library knows by name."""

    IDENTITY = 0x00
    SHA1 = 0x11
    SHA2_256 = 0x12
    SHA2_512 = 0x13
    SHA3_512 = 0x14
    SHA3_384 = 0x15
    SHA3_256 = 0x16
    SHA3_224 = 0x17
    SHA2_384 = 0x20
    MD5 = 0xD5
    SHA2_224 = 0x1013
    SHA2_512_224 = 0x1014
    SHA2_512_256 = 0x1015
    RIPEMD_128 = 0x1052
    RIPEMD_160 = 0x1053
    RIPEMD_256 = 0x1054
    RIPEMD_320 = 0x1055
    BLAKE2B_224 = 0xB21C
    BLAKE2B_256 = 0xB220
    BLAKE2B_384 = 0xB230
    BLAKE2B_512 = 0xB240
    BLAKE2S_224 = 0xB25C
    BLAKE2S_256 = 0xB260


def is_known_code(code: int) -> bool:
    """True if code is listed in the multicodec table."""
    return code >= 0 and multicodec.exists(code=code)


def algorithm_name(code: int) -> str:
    """Multicodec name for code (e.g. 0x12 -> "sha2-256")."""
    try:
        return multicodec.get(code=code).name
    except KeyError:
        raise InvalidAlgorithm(code) from None


def algorithm_code(name: str) -> int:
    """Multicodec code for name (e.g. "sha2-256" -> 0x12)."""
    try:
        return multicodec.get(name).code
    except KeyError:
        raise InvalidAlgorithm(name) from None
