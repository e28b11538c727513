"""Data models for semantic versions and Cargo version requirements."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

from .errors import InvalidVersionFormat


class Operator(Enum):
    """Comparison operator carried by a requirement clause."""
    EXACT = "="
    GT = ">"
    GTE = ">="
    LT = "<"
    LTE = "<="
    CARET = "^"
    TILDE = "~"
    WILDCARD = "*"


class Specificity(Enum):
    """How many version components the requirement author actually wrote."""
    MAJOR_ONLY = 1
    MAJOR_MINOR = 2
    FULL = 3


class RequirementKind(Enum):
    """Requirement grammar family selected by the dispatcher."""
    DEFAULT = "default"


@dataclass(frozen=True, order=True)
class SemanticVersion:
    """Immutable ``(major, minor, patch)`` triple ordered component by component."""
    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            # bool is an int subclass but never a valid component
            InvalidVersionFormat.check_condition(
                isinstance(value, int) and not isinstance(value, bool) and value >= 0,
                f"Version component {name}={value!r} must be a non-negative integer.",
            )

    @classmethod
    def create(cls, major: int, minor: int = 0, patch: int = 0) -> "SemanticVersion":
        """Build a version from integer components, validating each one."""
        return cls(major, minor, patch)

    @classmethod
    def from_string(cls, text: str) -> "SemanticVersion":
        """Parse a version string; see :func:`versioning.parser.parse_version`."""
        from .parser import parse_version  # pylint: disable=import-outside-toplevel
        return parse_version(text)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


@dataclass(frozen=True)
class RequirementClause:
    """A single operator + bound constraint.

    ``wildcard_index`` is the position (0=major, 1=minor, 2=patch) of the first
    wildcard component for ``Operator.WILDCARD`` clauses and ``None`` otherwise.
    Wildcarded positions of ``bound`` are stored as zero.
    """
    operator: Operator
    bound: SemanticVersion
    specificity: Specificity
    wildcard_index: Optional[int] = None

    def __str__(self) -> str:
        parts = [str(c) for c in self.bound.as_tuple()[: self.specificity.value]]
        if self.operator is Operator.WILDCARD:
            parts = parts[: self.wildcard_index] + ["*"] * (self.specificity.value - self.wildcard_index)
            return ".".join(parts)
        return f"{self.operator.value}{'.'.join(parts)}"


@dataclass(frozen=True)
class VersionRequirement:
    """AND-combination of requirement clauses parsed from ``raw``."""
    raw: str
    clauses: Tuple[RequirementClause, ...]
    kind: RequirementKind = field(default=RequirementKind.DEFAULT)

    def fulfills(self, version: Union[str, SemanticVersion]) -> bool:
        """Return True if ``version`` satisfies every clause.

        Args:
            version: Candidate version string or an already parsed version.

        Returns:
            bool: Whether the candidate fulfills this requirement.

        Raises:
            InvalidVersionFormat: If ``version`` is a string that fails to parse.
        """
        from .evaluator import fulfills  # pylint: disable=import-outside-toplevel
        from .parser import parse_version  # pylint: disable=import-outside-toplevel

        if not isinstance(version, SemanticVersion):
            version = parse_version(version)
        return fulfills(self, version)

    def __str__(self) -> str:
        return ", ".join(str(c) for c in self.clauses)
