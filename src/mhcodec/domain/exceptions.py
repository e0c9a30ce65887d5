"""Domain exceptions."""


class MultihashError(Exception):
    """Base exception for mhcodec."""

    pass


class UnsupportedAlgorithm(MultihashError):
    """Hash function is not available for computing a new digest."""

    def __init__(self, algorithm: int | str) -> None:
        self.algorithm = algorithm
        label = f"0x{algorithm:x}" if isinstance(algorithm, int) else algorithm
        super().__init__(f"Unsupported hash algorithm: {label}")


class InvalidAlgorithm(MultihashError):
    """Algorithm code or name does not correspond to any known codec."""

    def __init__(self, algorithm: int | str) -> None:
        self.algorithm = algorithm
        label = f"0x{algorithm:x}" if isinstance(algorithm, int) else repr(algorithm)
        super().__init__(f"Invalid hash algorithm: {label}")


class TruncatedInput(MultihashError):
    """Input ended before the declared number of bytes."""

    def __init__(self, expected: int, available: int) -> None:
        self.expected = expected
        self.available = available
        super().__init__(f"Truncated input: expected {expected} bytes, got {available}")


class InvalidEncoding(MultihashError):
    """Textual, varint or record encoding is malformed."""

    pass


class MissingField(MultihashError):
    """Required field is absent from a readable record."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing field: {field}")


class DuplicateField(MultihashError):
    """Field appears more than once in a readable record."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Duplicate field: {field}")


class MissingHash(MultihashError):
    """Builder has no digest to wrap."""

    def __init__(self) -> None:
        super().__init__("Missing hash data")
