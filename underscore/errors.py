class UnderscoreError(Exception):
    """base class for every error raised by underscore itself."""
    pass


class EmptySequenceError(UnderscoreError, ValueError):
    """an operation that needs at least one element got none."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation}() sequence contains no elements")


class UnsupportedContainerError(UnderscoreError, TypeError):
    """a container kind offers no way to insert elements into it."""

    def __init__(self, kind: type, reason: str = "no append, add or mapping capability"):
        self.kind = kind
        name = getattr(kind, '__qualname__', repr(kind))
        super().__init__(f"cannot build a '{name}' container: {reason}")
