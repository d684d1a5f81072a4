"""Error types for instance resolution."""

from __future__ import annotations

from typing import Any


class InstanceError(LookupError):
    """Error raised when a capability cannot be resolved for a type key.

    Keeps the requested capability and key for debugging purposes.
    """

    def __init__(self, message: str, capability: type, key: tuple[Any, ...]) -> None:
        self.capability = capability
        self.key = key
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({super().__str__()!r}, "
            f"capability={self.capability.__name__}, key={self.key!r})"
        )


class NoInstanceError(InstanceError):
    """No registered instance or derivation rule applies to the key."""


class AmbiguousInstanceError(InstanceError):
    """Two rules of the same precedence both produced an instance."""

    def __init__(
        self,
        message: str,
        capability: type,
        key: tuple[Any, ...],
        candidates: tuple[Any, ...],
    ) -> None:
        self.candidates = candidates
        super().__init__(message, capability, key)
