## Copyright 2018-present Network Optix, Inc. Licensed under MPL 2.0: www.mozilla.org/MPL/2.0/

from argparse import Namespace
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Mapping

from tablint.constants import CONFIG_FILE_NAME, DEFAULT_INDENTATION_WIDTH


class ConfigurationError(ValueError):
    pass


class Severity(Enum):
    WARNING = "warning"
    ERROR = "error"

    @property
    def title(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: Any) -> "Severity":
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        allowed = ", ".join(s.value for s in cls)
        raise ConfigurationError(f"Unknown severity {value!r}; expected one of: {allowed}.")


@dataclass(frozen=True)
class RuleConfiguration:
    severity: Severity = Severity.WARNING

    # The number of spaces that replace every tab character when a file is fixed.
    indentation_width: int = DEFAULT_INDENTATION_WIDTH

    @classmethod
    def from_dict(cls, rule_id: str, settings: Mapping[str, Any]) -> "RuleConfiguration":
        if not isinstance(settings, Mapping):
            raise ConfigurationError(f"Settings of rule {rule_id!r} must be an object.")
        unknown = set(settings) - {"severity", "indentation_width"}
        if unknown:
            raise ConfigurationError(
                f"Unknown settings for rule {rule_id!r}: {', '.join(sorted(unknown))}.")

        severity = Severity.parse(settings.get("severity", Severity.WARNING.value))
        indentation_width = settings.get("indentation_width", DEFAULT_INDENTATION_WIDTH)
        # bool is a subclass of int, but "indentation_width": true is certainly a mistake.
        if (not isinstance(indentation_width, int)
                or isinstance(indentation_width, bool)
                or indentation_width < 1):
            raise ConfigurationError(
                f"indentation_width of rule {rule_id!r} must be a positive integer, got "
                f"{indentation_width!r}.")
        return cls(severity=severity, indentation_width=indentation_width)


def process_pattern(pattern: str) -> str:
    """
    Implicitly add **/ in front of the pattern, unless the pattern starts with "**" or '/'
    This makes the behavior of glob patterns more intuitive (closer to how .gitignore works).
    """
    if pattern.startswith("**/"):
        return pattern
    elif pattern.startswith("/"):
        return pattern[1:]
    return f"**/{pattern}"


def _string_list(config: Mapping[str, Any], key: str, default: list[str]) -> list[str]:
    value = config.get(key, default)
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigurationError(f"{key!r} must be a list of strings, got {value!r}.")
    return value


def _patterns_by_rule(config: Mapping[str, Any], key: str) -> dict[str, list[str]]:
    value = config.get(key, {})
    if not isinstance(value, dict):
        raise ConfigurationError(f"{key!r} must be an object, got {value!r}.")
    return {
        rule: [process_pattern(p) for p in _string_list(value, rule, [])]
        for rule in value
    }


@dataclass
class Config:
    # A list of filename patterns that are included in the linting process. If this list is
    # non-empty, only files that match at least one of the patterns will be linted.
    # The list of include patterns is considered before the list of exclude patterns.
    include: list[str]

    # A list of patterns that are excluded from the linting process.
    exclude: list[str]

    # A list of explicitly enabled rules. If this list is empty, all rules will be enabled.
    enabled_rules: list[str]

    # Rule name -> file patterns that the rule is additionally applied to.
    rule_inclusions: dict[str, list[str]]

    # Rule name -> file patterns that are excluded from that rule. Rule exclusions are considered
    # after everything else.
    rule_exclusions: dict[str, list[str]]

    # Rule name -> severity and other settings of the rule.
    rule_settings: dict[str, RuleConfiguration] = field(default_factory=dict)

    @classmethod
    def default(cls) -> "Config":
        return cls(
            include=["**"],
            exclude=[],
            enabled_rules=[],
            rule_inclusions={},
            rule_exclusions={})

    @classmethod
    def load(cls, repo_root: Path, args: Namespace, file_name: str = CONFIG_FILE_NAME) -> "Config":
        import json
        import logging

        cli_enabled_rules = getattr(args, "enabled_rules", None) or []
        try:
            with (repo_root / file_name).open("r") as fp:
                config = json.load(fp)
        except FileNotFoundError:
            logging.debug(f"{file_name} not found in {repo_root}, using the default config.")
            default = cls.default()
            default.enabled_rules = cli_enabled_rules
            return default
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"{repo_root / file_name} is not valid JSON: {e}") from e

        if not isinstance(config, dict):
            raise ConfigurationError(f"{repo_root / file_name} must contain a JSON object.")

        include = [process_pattern(p) for p in _string_list(config, "include", ["**"])]
        exclude = [process_pattern(p) for p in _string_list(config, "exclude", [])]
        enabled_rules = cli_enabled_rules or _string_list(config, "enabled_rules", [])
        rule_inclusions = _patterns_by_rule(config, "rule_inclusions")
        rule_exclusions = _patterns_by_rule(config, "rule_exclusions")
        rules = config.get("rules", {})
        if not isinstance(rules, dict):
            raise ConfigurationError(f"'rules' must be an object, got {rules!r}.")
        rule_settings = {
            rule: RuleConfiguration.from_dict(rule, settings) for rule, settings in rules.items()
        }

        return cls(
            include=include,
            exclude=exclude,
            enabled_rules=enabled_rules,
            rule_inclusions=rule_inclusions,
            rule_exclusions=rule_exclusions,
            rule_settings=rule_settings)

    def rule_enabled(self, rule_name: str) -> bool:
        if not self.enabled_rules:
            return True
        return rule_name in self.enabled_rules

    def configuration_for(self, rule_name: str) -> RuleConfiguration:
        return self.rule_settings.get(rule_name, RuleConfiguration())
