"""Exception types for OrderTreeLib.

Rejected input (``None`` or values that cannot be compared with the stored
elements) is not an error: operations report it with ``False`` or ``None``.
The classes here cover the cases that are raised to the caller.
"""


class OrderTreeError(Exception):
    """Base class for all errors raised by OrderTreeLib."""
    pass


class UnsupportedCapabilityError(OrderTreeError, NotImplementedError):
    """Raised by bulk mutators the collections deliberately do not offer."""

    def __init__(self, operation: str, collection: str = "collection"):
        self.operation = operation
        self.collection = collection
        super().__init__(
            f"{collection}.{operation}() is not supported; "
            f"loop over single-element operations instead"
        )


class EmptyTreeError(OrderTreeError, LookupError):
    """Raised when an operation needs at least one element."""
    pass


class ConversionError(OrderTreeError, ValueError):
    """Raised when a number-base conversion receives malformed input."""
    pass


class InvalidConfigError(OrderTreeError, ValueError):
    """Raised when a configuration object fails validation."""
    pass
