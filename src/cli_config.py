"""Configuration loading for the reqcheck CLI.

Settings come from an optional YAML/JSON file (``--config`` or the
``REQCHECK_CONFIG`` environment variable) and are overridden by CLI flags.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import yaml

from constants import Constants

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration file has an invalid shape."""


@dataclass
class CheckConfig:
    """Effective settings for one reqcheck run."""
    loglevel: str = Constants.DEFAULT_LOG_LEVEL
    on_error: str = Constants.DEFAULT_ON_ERROR
    checks: List[Tuple[str, List[str]]] = field(default_factory=list)


def load_config_file(config_path: Optional[str]) -> Dict[str, Any]:
    """Load a configuration mapping from a YAML or JSON file.

    A missing file is reported and treated as empty configuration.

    Raises:
        ConfigError: If the file cannot be parsed or is not a mapping.
    """
    if not config_path:
        return {}

    if not os.path.isfile(config_path):
        logger.warning("Config file not found: %s", config_path)
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            if config_path.lower().endswith(".json"):
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to parse config {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {config_path} must contain a mapping at the top level")
    return data


def _parse_checks(raw_checks: Any) -> List[Tuple[str, List[str]]]:
    if raw_checks is None:
        return []
    if not isinstance(raw_checks, list):
        raise ConfigError("'checks' must be a list of {requirement, versions} entries")

    checks: List[Tuple[str, List[str]]] = []
    for index, entry in enumerate(raw_checks):
        if not isinstance(entry, dict) or "requirement" not in entry:
            raise ConfigError(f"checks[{index}] must be a mapping with a 'requirement' key")
        versions = entry.get("versions") or []
        if isinstance(versions, str):
            versions = [versions]
        if not isinstance(versions, list):
            raise ConfigError(f"checks[{index}].versions must be a list of strings")
        # YAML reads unquoted 1.10 as the float 1.1, so only strings are accepted.
        requirement = entry["requirement"]
        if not isinstance(requirement, str):
            raise ConfigError(
                f"checks[{index}].requirement must be a string; quote it, e.g. '{requirement}'"
            )
        for version in versions:
            if not isinstance(version, str):
                raise ConfigError(
                    f"checks[{index}].versions entries must be strings; quote {version!r}"
                )
        checks.append((requirement, list(versions)))
    return checks


def resolve_config(args: Any) -> CheckConfig:
    """Merge file configuration, environment and CLI arguments; CLI values win.

    Raises:
        ConfigError: If the configuration file or one of its values is invalid.
    """
    config_path = getattr(args, "CONFIG", None) or os.environ.get(Constants.ENV_CONFIG)
    data = load_config_file(config_path)

    config = CheckConfig()
    if data.get("loglevel"):
        config.loglevel = str(data["loglevel"]).upper()
    if data.get("on_error"):
        config.on_error = str(data["on_error"]).lower()
    config.checks = _parse_checks(data.get("checks"))

    # CLI flag, then environment, then file, then default.
    env_level = os.environ.get(Constants.ENV_LOG_LEVEL)
    if getattr(args, "LOG_LEVEL", None):
        config.loglevel = str(args.LOG_LEVEL).upper()
    elif env_level:
        config.loglevel = env_level.strip().upper()
    if getattr(args, "ON_ERROR", None):
        config.on_error = str(args.ON_ERROR).lower()

    if config.loglevel not in Constants.LOG_LEVELS:
        raise ConfigError(f"Unknown log level: {config.loglevel}")
    if config.on_error not in Constants.ON_ERROR_CHOICES:
        raise ConfigError(
            f"on_error must be one of {', '.join(Constants.ON_ERROR_CHOICES)}, got {config.on_error!r}"
        )
    return config
