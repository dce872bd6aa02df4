"""Configuration validation for podlint.

Checks value types and warns on unknown keys. Validation never raises;
callers decide what to do with the returned issues.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Tuple

import yaml

from podlint.core.logging import get_logger

LOGGER = get_logger(__name__)


class ValidationSeverity(Enum):
    """Severity level for validation issues."""

    ERROR = "error"  # Config will fail at runtime
    WARNING = "warning"  # Likely mistake but config usable


@dataclass
class ConfigValidationIssue:
    """A validation issue for configuration with severity."""

    message: str
    source: str
    severity: ValidationSeverity
    key: Optional[str] = None
    suggestion: Optional[str] = None


VALID_TOP_LEVEL_KEYS: Set[str] = {
    "plugins",
    "exclude",
    "ignore",
    "shard",
    "podspecs",
}

VALID_PODSPECS_KEYS: Set[str] = {
    "skip",
    "no_analyze",
    "timeout",
}

VALID_SHARD_KEYS: Set[str] = {
    "index",
    "count",
}

# Keys holding plugin or podspec names: a single string or a list of strings.
NAME_LIST_KEYS = ("plugins", "exclude")


class _IssueCollector:
    """Accumulates issues for one config source."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.issues: List[ConfigValidationIssue] = []

    def error(self, message: str, key: Optional[str] = None) -> None:
        self.issues.append(ConfigValidationIssue(
            message=message,
            source=self.source,
            severity=ValidationSeverity.ERROR,
            key=key,
        ))

    def unknown_key(self, key: str, path: str, valid_keys: Set[str]) -> None:
        issue = ConfigValidationIssue(
            message=f"Unknown key '{path}'" if "." in path else f"Unknown top-level key '{path}'",
            source=self.source,
            severity=ValidationSeverity.WARNING,
            key=path,
            suggestion=_suggest_key(key, valid_keys),
        )
        self.issues.append(issue)
        _log_warning(issue)

    def check_keys(self, section: Dict[str, Any], valid_keys: Set[str], prefix: str = "") -> None:
        for key in section.keys():
            if key not in valid_keys:
                self.unknown_key(str(key), f"{prefix}{key}", valid_keys)

    def check_name_list(self, value: Any, key: str) -> None:
        if value is None or isinstance(value, str):
            return
        if not isinstance(value, list):
            self.error(f"'{key}' must be a list, got {type(value).__name__}", key=key)
            return
        for i, item in enumerate(value):
            if not isinstance(item, str):
                self.error(f"'{key}[{i}]' must be a string", key=f"{key}[{i}]")

    def check_mapping(self, value: Any, key: str) -> bool:
        if value is None:
            return False
        if not isinstance(value, dict):
            self.error(f"'{key}' must be a mapping, got {type(value).__name__}", key=key)
            return False
        return True


def validate_config(
    data: Dict[str, Any],
    source: str,
) -> List[ConfigValidationIssue]:
    """Validate configuration dictionary.

    Args:
        data: Config dictionary to validate.
        source: Source file path for messages.

    Returns:
        List of validation issues.
    """
    collector = _IssueCollector(source)

    if not isinstance(data, dict):
        collector.error(f"Config must be a mapping, got {type(data).__name__}")
        return collector.issues

    collector.check_keys(data, VALID_TOP_LEVEL_KEYS)

    for key in NAME_LIST_KEYS:
        collector.check_name_list(data.get(key), key)

    ignore = data.get("ignore")
    if ignore is not None and not isinstance(ignore, list):
        collector.error(f"'ignore' must be a list, got {type(ignore).__name__}", key="ignore")

    shard = data.get("shard")
    if collector.check_mapping(shard, "shard"):
        collector.check_keys(shard, VALID_SHARD_KEYS, prefix="shard.")
        for key in VALID_SHARD_KEYS:
            value = shard.get(key)
            if value is not None and _as_number(value, int) is None:
                collector.error(f"'shard.{key}' must be an integer", key=f"shard.{key}")

    podspecs = data.get("podspecs")
    if collector.check_mapping(podspecs, "podspecs"):
        collector.check_keys(podspecs, VALID_PODSPECS_KEYS, prefix="podspecs.")
        collector.check_name_list(podspecs.get("skip"), "podspecs.skip")
        collector.check_name_list(podspecs.get("no_analyze"), "podspecs.no_analyze")

        timeout = podspecs.get("timeout")
        if timeout is not None:
            seconds = _as_number(timeout, float)
            if seconds is None:
                collector.error("'podspecs.timeout' must be a number", key="podspecs.timeout")
            elif seconds <= 0:
                collector.error("'podspecs.timeout' must be positive", key="podspecs.timeout")

    return collector.issues


def _as_number(value: Any, kind: type) -> Optional[float]:
    """Read a number that may arrive as a string after ${VAR} expansion.

    Returns None for booleans and for anything ``kind`` cannot parse.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            return kind(value.strip())
        except ValueError:
            return None
    if kind is int:
        return value if isinstance(value, int) else None
    return value if isinstance(value, (int, float)) else None


def _suggest_key(invalid_key: str, valid_keys: Set[str]) -> Optional[str]:
    """Suggest a valid key for a potential typo.

    Returns:
        Closest matching valid key, or None if no good match.
    """
    matches = get_close_matches(invalid_key, list(valid_keys), n=1, cutoff=0.6)
    return matches[0] if matches else None


def _log_warning(issue: ConfigValidationIssue) -> None:
    msg = f"{issue.message} in {issue.source}"
    if issue.suggestion:
        msg += f" (did you mean '{issue.suggestion}'?)"
    LOGGER.warning(msg)


def validate_config_file(config_path: Path) -> Tuple[bool, List[ConfigValidationIssue]]:
    """Validate a configuration file from disk.

    Checks file existence, YAML syntax, and configuration semantics.

    Returns:
        Tuple of (is_valid, issues) where is_valid is False if any errors exist.
    """
    issues: List[ConfigValidationIssue] = []
    source = str(config_path)

    if not config_path.exists():
        issues.append(ConfigValidationIssue(
            message=f"Configuration file not found: {config_path}",
            source=source,
            severity=ValidationSeverity.ERROR,
        ))
        return False, issues

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        issues.append(ConfigValidationIssue(
            message=f"Invalid YAML syntax: {e}",
            source=source,
            severity=ValidationSeverity.ERROR,
        ))
        return False, issues

    if data is None:
        issues.append(ConfigValidationIssue(
            message="Configuration file is empty",
            source=source,
            severity=ValidationSeverity.WARNING,
        ))
        return True, issues

    # Imported here: the loader depends on this module.
    from podlint.config.loader import expand_env_vars

    issues.extend(validate_config(expand_env_vars(data), source))

    has_errors = any(issue.severity == ValidationSeverity.ERROR for issue in issues)
    return not has_errors, issues
