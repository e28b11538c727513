"""reqcheck - check candidate versions against Cargo version requirements.

Thin command-line consumer of the ``versioning`` engine. Each candidate is
reported as a match, a non-match or a parse error.

    Returns:
        int: Exit code
"""
import json
import logging
import sys
from typing import Any, Dict, List, Optional, Tuple

from args import parse_args
from cli_config import CheckConfig, ConfigError, resolve_config
from common.logging_utils import Timer, configure_logging, extra_context, is_debug_enabled
from constants import Constants, ExitCodes, OnError
from versioning import (
    Operator,
    ValidationError,
    VersionRequirement,
    clause_bounds,
    get_requirement,
)

logger = logging.getLogger(__name__)


def _result(requirement: str, version: Optional[str], fulfills: Optional[bool],
            error: Optional[str] = None) -> Dict[str, Any]:
    return {
        "requirement": requirement,
        "version": version,
        "fulfills": fulfills,
        "error": error,
    }


def explain_requirement(requirement: VersionRequirement) -> None:
    """Log each clause of ``requirement`` with the interval it accepts."""
    for clause in requirement.clauses:
        if clause.operator in (Operator.CARET, Operator.TILDE):
            lower, upper = clause_bounds(clause)
            logger.info("%s: >=%s, <%s", clause, lower, upper)
        else:
            logger.info("%s", clause)


def run_checks(checks: List[Tuple[str, List[str]]], on_error: str,
               explain: bool = False) -> Tuple[List[Dict[str, Any]], ExitCodes]:
    """Evaluate every (requirement, versions) pair.

    Args:
        checks (list): Pairs of requirement string and candidate version strings.
        on_error (str): "abort" stops at the first parse error, "skip" reports and continues.
        explain (bool, optional): Log clause intervals. Defaults to False.

    Returns:
        tuple: Result records and the exit code for the run.
    """
    results: List[Dict[str, Any]] = []
    exit_code = ExitCodes.SUCCESS
    abort = on_error == OnError.ABORT.value
    log_failure = logger.error if abort else logger.warning

    for raw_requirement, versions in checks:
        try:
            requirement = get_requirement(raw_requirement)
        except ValidationError as e:
            log_failure("Invalid requirement %r: %s", raw_requirement, e)
            results.append(_result(raw_requirement, None, None, str(e)))
            if abort:
                return results, ExitCodes.PARSE_ERROR
            exit_code = ExitCodes.NO_MATCH
            continue

        if explain:
            explain_requirement(requirement)

        # A requirement given without candidates is only validated.
        if not versions:
            results.append(_result(raw_requirement, None, None))
            continue

        for version in versions:
            try:
                ok = requirement.fulfills(version)
            except ValidationError as e:
                log_failure("Invalid version %r: %s", version, e)
                results.append(_result(raw_requirement, version, None, str(e)))
                if abort:
                    return results, ExitCodes.PARSE_ERROR
                exit_code = ExitCodes.NO_MATCH
                continue

            if is_debug_enabled(logger):
                logger.debug(
                    "Checked %s against %s: %s", version, requirement, ok,
                    extra=extra_context(
                        event="requirement_check",
                        component="reqcheck",
                        outcome="match" if ok else "no_match",
                        target=version,
                    ),
                )
            if not ok:
                exit_code = ExitCodes.NO_MATCH
            results.append(_result(raw_requirement, version, ok))

    return results, exit_code


def _label(record: Dict[str, Any]) -> str:
    if record["error"]:
        return f"{Constants.ERROR_LABEL}: {record['error']}"
    if record["version"] is None:
        return Constants.VALID_LABEL
    return Constants.MATCH_LABEL if record["fulfills"] else Constants.NO_MATCH_LABEL


def print_results(results: List[Dict[str, Any]], as_json: bool, multi: bool) -> None:
    """Print results to stdout, one line per candidate or as a JSON list."""
    if as_json:
        print(json.dumps(results, indent=2))
        return
    for record in results:
        subject = record["version"] if record["version"] is not None else record["requirement"]
        if multi and record["version"] is not None:
            subject = f"{record['requirement']} -> {subject}"
        print(f"{subject}: {_label(record)}")


def _collect_checks(args: Any, config: CheckConfig) -> List[Tuple[str, List[str]]]:
    checks: List[Tuple[str, List[str]]] = []
    if args.REQUIREMENT is not None:
        checks.append((args.REQUIREMENT, list(args.VERSIONS)))
    checks.extend(config.checks)
    return checks


def run(argv: Optional[List[str]] = None) -> int:
    """Run reqcheck with ``argv`` and return the process exit code."""
    args = parse_args(argv)

    # Config loading logs too, so set up handlers from the CLI first.
    configure_logging(args.LOG_LEVEL, args.LOG_FILE)
    try:
        config = resolve_config(args)
    except ConfigError as e:
        logger.error("%s", e)
        return ExitCodes.FILE_ERROR.value

    configure_logging(config.loglevel, args.LOG_FILE)

    checks = _collect_checks(args, config)
    if not checks:
        logger.error("No requirement given on the command line or in the config file.")
        return ExitCodes.PARSE_ERROR.value

    with Timer() as t:
        results, exit_code = run_checks(checks, config.on_error, explain=args.EXPLAIN)
    logger.debug("Evaluated %d check(s) in %d ms", len(results), t.duration_ms())

    print_results(results, args.JSON, multi=len(checks) > 1)
    return exit_code.value


def main() -> None:
    """Console script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
