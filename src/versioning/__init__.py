"""Cargo-style version requirement matching."""

from .errors import (
    InvalidVersionFormat,
    MalformedRequirementExpression,
    UnsupportedRequirementKind,
    ValidationError,
)
from .evaluator import clause_bounds, clause_matches, fulfills, next_breaking
from .models import (
    Operator,
    RequirementClause,
    RequirementKind,
    SemanticVersion,
    Specificity,
    VersionRequirement,
)
from .parser import parse_clause, parse_requirement, parse_version
from .requirements import detect_kind, get_requirement

__all__ = [
    "InvalidVersionFormat",
    "MalformedRequirementExpression",
    "UnsupportedRequirementKind",
    "ValidationError",
    "clause_bounds",
    "clause_matches",
    "fulfills",
    "next_breaking",
    "Operator",
    "RequirementClause",
    "RequirementKind",
    "SemanticVersion",
    "Specificity",
    "VersionRequirement",
    "parse_clause",
    "parse_requirement",
    "parse_version",
    "detect_kind",
    "get_requirement",
]
