"""Range evaluation for parsed version requirements.

Caret and tilde clauses reduce to a half-open interval ``[lower, upper)``;
comparator clauses compare the whole triple; wildcard clauses compare the
components written before the first wildcard.
"""

from __future__ import annotations

from typing import Tuple

from .models import (
    Operator,
    RequirementClause,
    SemanticVersion,
    Specificity,
    VersionRequirement,
)


def _bump(version: SemanticVersion, position: int) -> SemanticVersion:
    """Increment component ``position`` and zero everything to its right."""
    parts = list(version.as_tuple())
    parts[position] += 1
    for i in range(position + 1, 3):
        parts[i] = 0
    return SemanticVersion(parts[0], parts[1], parts[2])


def next_breaking(bound: SemanticVersion, specificity: Specificity = Specificity.FULL) -> SemanticVersion:
    """Return the first version that is no longer caret-compatible with ``bound``.

    Only the components the author wrote are considered: the leftmost nonzero
    one is bumped, or the last written one when all written components are zero
    (``^0`` -> ``<1.0.0``, ``^0.0`` -> ``<0.1.0``, ``^0.0.3`` -> ``<0.0.4``).
    """
    written = bound.as_tuple()[: specificity.value]
    position = next((i for i, c in enumerate(written) if c > 0), len(written) - 1)
    return _bump(bound, position)


def clause_bounds(clause: RequirementClause) -> Tuple[SemanticVersion, SemanticVersion]:
    """Return the ``(lower, upper)`` half-open interval of a caret or tilde clause.

    Raises:
        ValueError: For operators that do not denote a bounded interval.
    """
    if clause.operator is Operator.CARET:
        return clause.bound, next_breaking(clause.bound, clause.specificity)
    if clause.operator is Operator.TILDE:
        if clause.specificity is Specificity.MAJOR_ONLY:
            return clause.bound, next_breaking(clause.bound, clause.specificity)
        return clause.bound, _bump(clause.bound, 1)
    raise ValueError(f"Operator {clause.operator.name} has no interval form")


def _wildcard_matches(clause: RequirementClause, version: SemanticVersion) -> bool:
    fixed = clause.wildcard_index if clause.wildcard_index is not None else 3
    return clause.bound.as_tuple()[:fixed] == version.as_tuple()[:fixed]


def clause_matches(clause: RequirementClause, version: SemanticVersion) -> bool:
    """Evaluate a single clause against ``version``."""
    op = clause.operator
    bound = clause.bound
    if op is Operator.EXACT:
        return version == bound
    if op is Operator.GT:
        return version > bound
    if op is Operator.GTE:
        return version >= bound
    if op is Operator.LT:
        return version < bound
    if op is Operator.LTE:
        return version <= bound
    if op in (Operator.CARET, Operator.TILDE):
        lower, upper = clause_bounds(clause)
        return lower <= version < upper
    if op is Operator.WILDCARD:
        return _wildcard_matches(clause, version)
    raise ValueError(f"Unknown operator: {op!r}")


def fulfills(requirement: VersionRequirement, version: SemanticVersion) -> bool:
    """Return True when every clause of ``requirement`` accepts ``version``."""
    return all(clause_matches(clause, version) for clause in requirement.clauses)
