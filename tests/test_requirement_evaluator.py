"""Tests for requirement range evaluation."""

import pytest
import semantic_version

from versioning import (
    InvalidVersionFormat,
    Operator,
    SemanticVersion,
    Specificity,
    clause_bounds,
    clause_matches,
    fulfills,
    get_requirement,
    next_breaking,
    parse_clause,
    parse_requirement,
    parse_version,
)


def _matches(requirement, candidates):
    req = get_requirement(requirement)
    return [v for v in candidates if req.fulfills(v)]


class TestCaret:
    """Caret requirements allow changes that keep the leftmost nonzero component."""

    def test_caret_full_version(self):
        req = get_requirement("^1.2.3")
        assert req.fulfills("1.2.4")
        assert req.fulfills("1.9.9")
        assert req.fulfills("1.2.3")
        assert not req.fulfills("2.0.0")
        assert not req.fulfills("1.2.2")

    @pytest.mark.parametrize(
        "requirement,candidates,expected",
        [
            ("^0.2.3", ["0.2.2", "0.2.3", "0.2.9", "0.3.0", "1.0.0"], ["0.2.3", "0.2.9"]),
            ("^0.0.3", ["0.0.2", "0.0.3", "0.0.4"], ["0.0.3"]),
            ("^1.2", ["1.1.9", "1.2.0", "1.9.0", "2.0.0"], ["1.2.0", "1.9.0"]),
            ("^1", ["0.9.9", "1.0.0", "1.99.99", "2.0.0"], ["1.0.0", "1.99.99"]),
            ("^0.0", ["0.0.0", "0.0.9", "0.1.0"], ["0.0.0", "0.0.9"]),
            ("^0", ["0.0.0", "0.9.9", "1.0.0"], ["0.0.0", "0.9.9"]),
            ("^0.0.0", ["0.0.0", "0.0.1"], ["0.0.0"]),
        ],
    )
    def test_caret_ranges(self, requirement, candidates, expected):
        assert _matches(requirement, candidates) == expected

    def test_bare_version_is_caret(self):
        req = get_requirement("1.2.3")
        assert req.fulfills("1.2.9")
        assert req.fulfills("1.3.0")
        assert not req.fulfills("1.1.9")
        assert not req.fulfills("2.0.0")

    @pytest.mark.parametrize(
        "bound,specificity,expected",
        [
            ("1.2.3", Specificity.FULL, "2.0.0"),
            ("0.2.3", Specificity.FULL, "0.3.0"),
            ("0.0.3", Specificity.FULL, "0.0.4"),
            ("0.0.0", Specificity.FULL, "0.0.1"),
            ("0.0", Specificity.MAJOR_MINOR, "0.1.0"),
            ("0", Specificity.MAJOR_ONLY, "1.0.0"),
        ],
    )
    def test_next_breaking(self, bound, specificity, expected):
        assert next_breaking(parse_version(bound), specificity) == parse_version(expected)


class TestTilde:
    """Tilde requirements allow patch-level drift."""

    def test_tilde_major_minor(self):
        req = get_requirement("~1.2")
        assert req.fulfills("1.2.0")
        assert req.fulfills("1.2.9")
        assert not req.fulfills("1.3.0")
        assert not req.fulfills("1.1.9")

    @pytest.mark.parametrize(
        "requirement,candidates,expected",
        [
            ("~1.2.3", ["1.2.2", "1.2.3", "1.2.99", "1.3.0"], ["1.2.3", "1.2.99"]),
            ("~1", ["0.9.9", "1.0.0", "1.5.0", "2.0.0"], ["1.0.0", "1.5.0"]),
            ("~0", ["0.0.0", "0.5.0", "1.0.0"], ["0.0.0", "0.5.0"]),
            ("~0.0.3", ["0.0.3", "0.0.9", "0.1.0"], ["0.0.3", "0.0.9"]),
        ],
    )
    def test_tilde_ranges(self, requirement, candidates, expected):
        assert _matches(requirement, candidates) == expected

    def test_tilde_major_only_equals_caret(self):
        tilde = parse_clause("~3")
        caret = parse_clause("^3")
        assert clause_bounds(tilde) == clause_bounds(caret)


class TestComparators:
    """Exact and ordering comparators compare the full triple."""

    def test_exact(self):
        req = get_requirement("=1.2.3")
        assert req.fulfills("1.2.3")
        assert not req.fulfills("1.2.4")
        assert not req.fulfills("1.2.2")

    def test_exact_partial_bound_means_zero_filled(self):
        req = get_requirement("=1.2")
        assert req.fulfills("1.2.0")
        assert not req.fulfills("1.2.1")

    @pytest.mark.parametrize(
        "requirement,version,expected",
        [
            (">1.0.0", "1.0.0", False),
            (">1.0.0", "1.0.1", True),
            (">=1.0.0", "1.0.0", True),
            (">=1.0.0", "0.9.9", False),
            ("<2.0.0", "1.99.99", True),
            ("<2.0.0", "2.0.0", False),
            ("<=2.0.0", "2.0.0", True),
            ("<=2.0.0", "2.0.1", False),
            (">1.2", "1.2.1", True),
            ("<1", "0.99.0", True),
        ],
    )
    def test_ordering(self, requirement, version, expected):
        assert get_requirement(requirement).fulfills(version) is expected

    def test_and_semantics(self):
        req = get_requirement(">=1.0.0, <2.0.0")
        assert req.fulfills("1.5.0")
        assert not req.fulfills("2.0.0")
        assert not req.fulfills("0.9.0")

    def test_clause_order_does_not_matter(self):
        candidates = ["0.9.0", "1.0.0", "1.5.0", "2.0.0"]
        assert _matches(">=1.0.0, <2.0.0", candidates) == _matches("<2.0.0, >=1.0.0", candidates)

    def test_contradictory_clauses_match_nothing(self):
        assert _matches(">2.0.0, <1.0.0", ["0.5.0", "1.5.0", "2.5.0"]) == []


class TestWildcard:
    """Wildcard requirements pin the components written before the wildcard."""

    @pytest.mark.parametrize(
        "requirement,candidates,expected",
        [
            ("*", ["0.0.0", "1.2.3", "99.0.0"], ["0.0.0", "1.2.3", "99.0.0"]),
            ("*.*", ["0.0.1", "5.5.5"], ["0.0.1", "5.5.5"]),
            ("1.*", ["0.9.0", "1.0.0", "1.9.9", "2.0.0"], ["1.0.0", "1.9.9"]),
            ("1.2.*", ["1.1.9", "1.2.0", "1.2.7", "1.3.0"], ["1.2.0", "1.2.7"]),
            ("0.*", ["0.0.0", "0.9.0", "1.0.0"], ["0.0.0", "0.9.0"]),
        ],
    )
    def test_wildcard_ranges(self, requirement, candidates, expected):
        assert _matches(requirement, candidates) == expected

    def test_wildcard_combined_with_comparator(self):
        assert _matches("1.*, >=1.4", ["1.3.0", "1.4.0", "1.8.0", "2.0.0"]) == ["1.4.0", "1.8.0"]

    def test_wildcard_has_no_interval_form(self):
        with pytest.raises(ValueError):
            clause_bounds(parse_clause("1.*"))


class TestFulfills:
    """Tests for the evaluation entry points."""

    def test_invalid_candidate_raises(self):
        req = get_requirement("^1.0.0")
        with pytest.raises(InvalidVersionFormat):
            req.fulfills("1.0.0-beta")
        with pytest.raises(InvalidVersionFormat):
            req.fulfills("abc")

    def test_accepts_parsed_version(self):
        req = get_requirement("^1.0.0")
        assert req.fulfills(SemanticVersion(1, 4, 0))

    def test_module_level_fulfills(self):
        req = parse_requirement("~2.1")
        assert fulfills(req, parse_version("2.1.5"))
        assert not fulfills(req, parse_version("2.2.0"))

    def test_clause_matches(self):
        clause = parse_clause("<3")
        assert clause.operator is Operator.LT
        assert clause_matches(clause, parse_version("2.9.9"))
        assert not clause_matches(clause, parse_version("3.0.0"))

    def test_candidate_with_fewer_components(self):
        assert get_requirement("^1.2.0").fulfills("1.3")
        assert not get_requirement("^1.2.0").fulfills("2")


_ORACLE_REQUIREMENTS = [
    "^1.2.3",
    "^0.2.3",
    "^0.0.3",
    "~1.2.3",
    "~0.2.3",
    ">=1.0.0,<2.0.0",
    ">1.2.3",
    "<=0.5.0",
]

_ORACLE_CANDIDATES = [
    "0.0.2", "0.0.3", "0.0.4", "0.2.2", "0.2.3", "0.2.9", "0.3.0", "0.5.0", "0.5.1",
    "1.0.0", "1.2.2", "1.2.3", "1.2.4", "1.3.0", "1.9.9", "2.0.0", "2.0.1",
]


@pytest.mark.parametrize("requirement", _ORACLE_REQUIREMENTS)
def test_fully_specified_clauses_agree_with_semantic_version(requirement):
    """Fully specified Cargo clauses behave like semantic_version.SimpleSpec."""
    reference = semantic_version.SimpleSpec(requirement)
    req = get_requirement(requirement)
    for candidate in _ORACLE_CANDIDATES:
        expected = reference.match(semantic_version.Version(candidate))
        assert req.fulfills(candidate) is expected, candidate
