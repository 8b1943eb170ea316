"""
Core exception types for genarith.

These are dependency-free and may be imported by all modules. Errors coming
from the underlying numeric representations (ZeroDivisionError, overflow,
decimal signals) are never wrapped in these types.
"""

__all__ = [
    "AlgebraError",
    "MissingInstanceError",
    "DuplicateInstanceError",
    "RegistryFrozenError",
    "RangeError",
    "ParseError",
]


class AlgebraError(Exception):
    """Base class for errors raised by genarith itself."""
    pass


class MissingInstanceError(AlgebraError, LookupError):
    """Raised when no capability instance can be resolved for a type.

    Attributes
    ----------
    key : Any
        The registry key that was looked up.
    capability : type | None
        The capability class requested, if any.
    """

    def __init__(self, key, capability=None):
        cap = getattr(capability, "__name__", None)
        if cap is None:
            msg = f"no algebra instance registered for {key!r}"
        else:
            msg = f"no {cap} instance registered for {key!r}"
        super().__init__(msg)
        self.key = key
        self.capability = capability


class DuplicateInstanceError(AlgebraError):
    """Raised when a second instance is registered for the same key."""

    def __init__(self, key, existing, candidate):
        super().__init__(
            f"algebra for {key!r} already registered as {existing!r}; refusing {candidate!r}"
        )
        self.key = key
        self.existing = existing
        self.candidate = candidate


class RegistryFrozenError(AlgebraError):
    """Raised when registering into a registry that has been frozen."""
    pass


class RangeError(AlgebraError, IndexError):
    """Raised when a sort/select index range or target index is invalid."""
    pass


class ParseError(AlgebraError, ValueError):
    """Raised when text cannot be parsed into a numeric value."""
    pass
