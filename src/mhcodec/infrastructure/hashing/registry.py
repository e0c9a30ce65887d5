"""Registry: map multihash codes to digest constructors."""

import hashlib
import logging
from functools import partial
from types import MappingProxyType

from Cryptodome.Hash import RIPEMD160, SHA512

from mhcodec.domain.exceptions import UnsupportedAlgorithm
from mhcodec.domain.value_objects import HashAlgorithm
from mhcodec.infrastructure.hashing.base import HashSpec

logger = logging.getLogger(__name__)

_SPECS: tuple[HashSpec, ...] = (
    HashSpec("sha1", HashAlgorithm.SHA1, 20, hashlib.sha1),
    HashSpec("sha2-224", HashAlgorithm.SHA2_224, 28, hashlib.sha224),
    HashSpec("sha2-256", HashAlgorithm.SHA2_256, 32, hashlib.sha256),
    HashSpec("sha2-384", HashAlgorithm.SHA2_384, 48, hashlib.sha384),
    HashSpec("sha2-512", HashAlgorithm.SHA2_512, 64, hashlib.sha512),
    HashSpec("sha2-512-224", HashAlgorithm.SHA2_512_224, 28, partial(SHA512.new, truncate="224")),
    HashSpec("sha2-512-256", HashAlgorithm.SHA2_512_256, 32, partial(SHA512.new, truncate="256")),
    HashSpec("sha3-224", HashAlgorithm.SHA3_224, 28, hashlib.sha3_224),
    HashSpec("sha3-256", HashAlgorithm.SHA3_256, 32, hashlib.sha3_256),
    HashSpec("sha3-384", HashAlgorithm.SHA3_384, 48, hashlib.sha3_384),
    HashSpec("sha3-512", HashAlgorithm.SHA3_512, 64, hashlib.sha3_512),
    HashSpec("blake2b-224", HashAlgorithm.BLAKE2B_224, 28, partial(hashlib.blake2b, digest_size=28)),
    HashSpec("blake2b-256", HashAlgorithm.BLAKE2B_256, 32, partial(hashlib.blake2b, digest_size=32)),
    HashSpec("blake2b-384", HashAlgorithm.BLAKE2B_384, 48, partial(hashlib.blake2b, digest_size=48)),
    HashSpec("blake2b-512", HashAlgorithm.BLAKE2B_512, 64, partial(hashlib.blake2b, digest_size=64)),
    HashSpec("blake2s-224", HashAlgorithm.BLAKE2S_224, 28, partial(hashlib.blake2s, digest_size=28)),
    HashSpec("blake2s-256", HashAlgorithm.BLAKE2S_256, 32, partial(hashlib.blake2s, digest_size=32)),
    HashSpec("md5", HashAlgorithm.MD5, 16, hashlib.md5),
    HashSpec("ripemd-160", HashAlgorithm.RIPEMD_160, 20, RIPEMD160.new),
)

# code -> spec
_SPECS_BY_CODE = MappingProxyType({int(spec.code): spec for spec in _SPECS})

# multicodec name -> spec
_SPECS_BY_NAME = MappingProxyType({spec.name: spec for spec in _SPECS})


def get_spec_for_code(code: int) -> HashSpec | None:
    """Return hash spec for a multicodec code or None."""
    return _SPECS_BY_CODE.get(code)


def get_spec_for_name(name: str | None) -> HashSpec | None:
    """Return hash spec for a multicodec name or None."""
    if not name:
        return None
    return _SPECS_BY_NAME.get(name.strip().lower())


def resolve(algorithm: int | str) -> HashSpec:
    """
    Return the hash spec for a code or name.
    Raises UnsupportedAlgorithm if the hash cannot be computed locally.
    """
    if isinstance(algorithm, str):
        spec = get_spec_for_name(algorithm)
    else:
        spec = get_spec_for_code(algorithm)
    if spec is None:
        logger.debug("No hasher registered for %r", algorithm)
        raise UnsupportedAlgorithm(algorithm)
    return spec


def supported_algorithms() -> list[str]:
    """Return sorted names of the locally computable hash functions."""
    return sorted(_SPECS_BY_NAME.keys())
