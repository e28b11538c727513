"""Argument parsing functionality for reqcheck."""

import argparse
from constants import Constants

def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="reqcheck",
        description=(
            "reqcheck - check candidate versions against a Cargo version requirement"
        ),
        add_help=True,
    )

    parser.add_argument("REQUIREMENT",
                        help="Version requirement, i.e: '^1.2.3' or '>=1.0.0, <2.0.0'",
                        nargs="?",
                        type=str)
    parser.add_argument("VERSIONS",
                        help="Candidate versions to check against the requirement",
                        nargs="*",
                        type=str)

    parser.add_argument("--json",
                        dest="JSON",
                        help="Print results as a JSON list instead of text lines.",
                        action="store_true")
    parser.add_argument("--explain",
                        dest="EXPLAIN",
                        help="Log the parsed clauses and their version intervals.",
                        action="store_true")
    parser.add_argument("--on-error",
                        dest="ON_ERROR",
                        help="Abort at the first parse error or skip the offending entry (default: abort)",
                        action="store",
                        type=str.lower,
                        choices=Constants.ON_ERROR_CHOICES)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=Constants.LOG_LEVELS)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML, YML, or JSON)",
                        action="store",
                        type=str)

    return parser.parse_args(argv)
