"""Application ports."""

from mhcodec.application.ports.hasher import Hasher

__all__ = ["Hasher"]
