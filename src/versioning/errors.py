"""Error types raised by the version requirement engine."""

from __future__ import annotations


class ValidationError(ValueError):
    """Base class for all requirement/version validation failures."""

    @classmethod
    def check_condition(cls, condition: bool, message: str) -> None:
        """Raise this error type with ``message`` unless ``condition`` holds."""
        if not condition:
            raise cls(message)


class InvalidVersionFormat(ValidationError):
    """A version string is not a numeric dotted triple (1 to 3 components)."""


class MalformedRequirementExpression(ValidationError):
    """A requirement string or one of its clauses is not recognized."""


class UnsupportedRequirementKind(ValidationError):
    """A requirement kind marker was recognized but has no implementation."""
