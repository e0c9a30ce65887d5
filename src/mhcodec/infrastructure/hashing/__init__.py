"""Digest providers for the supported hash functions."""

from mhcodec.infrastructure.hashing.base import HashSpec
from mhcodec.infrastructure.hashing.registry import resolve, supported_algorithms

__all__ = ["HashSpec", "resolve", "supported_algorithms"]
