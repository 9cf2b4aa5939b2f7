"""
Error types for Highest Random Weight ranking.

Digesting and weighting are total over their inputs, so the only
failure a caller can trigger is an out-of-range selection size.
"""

from dataclasses import dataclass, field
from typing import Any


class HRWError(Exception):
    """Base exception for all hrw errors."""
    pass


@dataclass(eq=False)
class InvalidArgument(HRWError, ValueError):
    """
    Raised when a ranking call receives an argument outside its domain,
    e.g. a top-N size that is negative or larger than the node set.

    Carries structured context for logging:

        raise InvalidArgument(
            "n exceeds node count",
            context={"n": 6, "node_count": 5},
        )
    """

    message: str
    context: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        ctx = f" {self.context}" if self.context else ""
        return f"{self.message}{ctx}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"context={self.context})"
        )

    def with_context(self, **kwargs: Any) -> 'InvalidArgument':
        """Add additional context to the error."""
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for structured logging."""
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'context': self.context,
        }
