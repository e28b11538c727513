"""Requirement kind dispatch.

A requirement string may carry an explicit kind marker (``"default:^1.2"``).
Strings without a marker use the default Cargo grammar. New kinds are added
as a ``RequirementKind`` member plus one branch in ``_parse_for_kind``.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from .errors import MalformedRequirementExpression, UnsupportedRequirementKind
from .models import RequirementKind, VersionRequirement
from .parser import parse_requirement

_KIND_MARKER = re.compile(r"^\s*(?P<kind>[A-Za-z][A-Za-z0-9_-]*)\s*:(?P<body>.*)$", re.DOTALL)


def detect_kind(text: str) -> Tuple[RequirementKind, str]:
    """Split ``text`` into its requirement kind and the expression to parse.

    Raises:
        UnsupportedRequirementKind: If a marker is present but names no known kind.
    """
    match = _KIND_MARKER.match(text)
    if not match:
        return RequirementKind.DEFAULT, text
    marker = match.group("kind").lower()
    try:
        kind = RequirementKind(marker)
    except ValueError as e:
        raise UnsupportedRequirementKind(
            f"Requirement kind {marker!r} is not supported: {text!r}"
        ) from e
    return kind, match.group("body")


def _parse_for_kind(kind: RequirementKind, body: str) -> Optional[VersionRequirement]:
    """Parse ``body`` with the grammar registered for ``kind``.

    Returns None for a kind that is declared in ``RequirementKind`` but has no
    grammar yet; ``get_requirement`` reports that as unsupported.
    """
    if kind is RequirementKind.DEFAULT:
        return parse_requirement(body)
    return None


def get_requirement(text: str) -> VersionRequirement:
    """Parse ``text`` with the grammar for its requirement kind.

    Raises:
        MalformedRequirementExpression: If the expression is not valid for its kind.
        UnsupportedRequirementKind: If the kind marker has no implementation.
    """
    if not isinstance(text, str):
        raise MalformedRequirementExpression(f"Requirement must be a string, got {type(text).__name__}")
    kind, body = detect_kind(text)
    requirement = _parse_for_kind(kind, body)
    if requirement is None:
        raise UnsupportedRequirementKind(f"Requirement kind {kind.value!r} is not implemented")
    return requirement
