"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    PARSE_ERROR = 1
    FILE_ERROR = 2
    NO_MATCH = 3


class OnError(Enum):
    """What the checker does with a requirement or version that fails to parse.

    Args:
        Enum (string): Error policy names accepted in config and on the CLI.
    """

    ABORT = "abort"
    SKIP = "skip"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
    LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    ENV_LOG_LEVEL = "REQCHECK_LOG_LEVEL"
    ENV_CONFIG = "REQCHECK_CONFIG"
    DEFAULT_LOG_LEVEL = "INFO"
    DEFAULT_ON_ERROR = OnError.ABORT.value
    ON_ERROR_CHOICES = [OnError.ABORT.value, OnError.SKIP.value]
    MATCH_LABEL = "match"
    NO_MATCH_LABEL = "no match"
    ERROR_LABEL = "error"
    VALID_LABEL = "valid"
