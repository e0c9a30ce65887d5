"""Application layer: building multihashes."""
