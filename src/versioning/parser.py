"""Parsing of semantic versions and Cargo-style requirement expressions.

Supported clause shapes:
- bare versions ("1.2.3", "1.2", "1") are caret requirements
- "=", ">", ">=", "<", "<=" comparators against the full triple
- caret "^x.y.z" and tilde "~x.y.z" ranges
- wildcards "*", "1.*", "1.2.*" ("x" and "X" are accepted for "*")

Clauses are separated by commas and all of them must hold.
"""

from __future__ import annotations

import re
from typing import List, Optional

from .errors import InvalidVersionFormat, MalformedRequirementExpression
from .models import (
    Operator,
    RequirementClause,
    RequirementKind,
    SemanticVersion,
    Specificity,
    VersionRequirement,
)

VALID_VERSION_PATTERN = re.compile(r"^[0-9]+(\.[0-9]+)?(\.[0-9]+)?$")

# Longest operators first so ">=" is not read as ">" followed by "=1.0".
_CLAUSE_PATTERN = re.compile(r"^(?P<op>>=|<=|>|<|=|\^|~)?\s*(?P<version>.*)$", re.DOTALL)

_WILDCARD_TOKENS = ("*", "x", "X")


def parse_version(text: str) -> SemanticVersion:
    """Parse ``text`` into a SemanticVersion.

    Missing minor and patch components default to zero.

    Raises:
        InvalidVersionFormat: If ``text`` is not 1 to 3 dot-separated digit runs.
    """
    InvalidVersionFormat.check_condition(
        isinstance(text, str) and VALID_VERSION_PATTERN.fullmatch(text) is not None,
        f"The string {text!r} is not a valid Rust semantic version.",
    )
    parts = [int(p) for p in text.split(".")]
    parts.extend([0] * (3 - len(parts)))
    return SemanticVersion(parts[0], parts[1], parts[2])


def _parse_wildcard(token: str) -> Optional[RequirementClause]:
    """Return a wildcard clause for ``token`` or None if it has no wildcard."""
    components = token.split(".")
    wildcard_at = next(
        (i for i, c in enumerate(components) if c in _WILDCARD_TOKENS), None
    )
    if wildcard_at is None:
        return None
    if len(components) > 3:
        raise MalformedRequirementExpression(
            f"Wildcard requirement {token!r} has more than three components."
        )
    # Everything after the first wildcard must also be a wildcard ("1.*.3" is rejected).
    for component in components[wildcard_at:]:
        MalformedRequirementExpression.check_condition(
            component in _WILDCARD_TOKENS,
            f"Wildcard requirement {token!r} has a concrete component after a wildcard.",
        )
    fixed = components[:wildcard_at]
    for component in fixed:
        MalformedRequirementExpression.check_condition(
            component.isdigit() and component.isascii(),
            f"Wildcard requirement {token!r} has a non-numeric component {component!r}.",
        )
    values = [int(c) for c in fixed] + [0] * (3 - len(fixed))
    return RequirementClause(
        operator=Operator.WILDCARD,
        bound=SemanticVersion(values[0], values[1], values[2]),
        specificity=Specificity(len(components)),
        wildcard_index=wildcard_at,
    )


def parse_clause(token: str) -> RequirementClause:
    """Parse one comparator token into a RequirementClause.

    Raises:
        MalformedRequirementExpression: If the token matches no known clause shape.
    """
    token = token.strip()
    if not token:
        raise MalformedRequirementExpression("Empty requirement clause.")

    match = _CLAUSE_PATTERN.match(token)
    op_text = match.group("op") if match else None
    version_text = match.group("version").strip() if match else ""

    if op_text is None:
        wildcard = _parse_wildcard(token)
        if wildcard is not None:
            return wildcard

    if not version_text:
        raise MalformedRequirementExpression(
            f"Requirement clause {token!r} is missing a version."
        )

    try:
        bound = parse_version(version_text)
    except InvalidVersionFormat as e:
        raise MalformedRequirementExpression(
            f"Requirement clause {token!r} is not a valid version requirement."
        ) from e

    operator = Operator(op_text) if op_text else Operator.CARET
    return RequirementClause(
        operator=operator,
        bound=bound,
        specificity=Specificity(len(version_text.split("."))),
    )


def parse_requirement(text: str) -> VersionRequirement:
    """Parse a comma-separated requirement string.

    Fails on the first malformed clause; no partial requirement is returned.

    Raises:
        MalformedRequirementExpression: If the string is empty or a clause is invalid.
    """
    if not isinstance(text, str) or not text.strip():
        raise MalformedRequirementExpression("Requirement string is empty.")

    clauses: List[RequirementClause] = []
    for piece in text.split(","):
        clauses.append(parse_clause(piece))
    return VersionRequirement(
        raw=text.strip(), clauses=tuple(clauses), kind=RequirementKind.DEFAULT
    )
