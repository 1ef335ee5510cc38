## Copyright 2018-present Network Optix, Inc. Licensed under MPL 2.0: www.mozilla.org/MPL/2.0/

""" Inline directives that switch rules off for parts of a file.

    tablint:disable <rule>...           the rule is off starting from the next line
    tablint:enable <rule>...            the rule is on again starting from the next line
    tablint:disable:this <rule>...      only this line (also :next and :previous; same for enable)
    tablint: off / tablint: on          all rules, starting from the next line

    "all" can be used instead of the rule names.
"""

import re
from typing import Iterator, Protocol, Set, Tuple

from tablint.location import Location
from tablint.utils import split_lines

ALL_RULES = "all"

_directive_re = re.compile(
    r"tablint:(?P<action>disable|enable)(?::(?P<scope>next|this|previous))?"
    r"(?P<rules>(?:[ \t]+[\w-]+(?:[ \t]*,[ \t]*[\w-]+)*)+)")
_switch_re = re.compile(r"tablint:[ \t]*(?P<switch>off|on)\b")


def _directives(line: str, rule_id: str) -> Iterator[Tuple[bool, str]]:
    """ Yields (disable, scope) for every directive in the line that concerns the rule. Scope is
        "region" for the directives without a modifier.
    """
    for match in _switch_re.finditer(line):
        yield match.group("switch") == "off", "region"
    for match in _directive_re.finditer(line):
        rules = re.split(r"[\s,]+", match.group("rules").strip())
        if rule_id in rules or ALL_RULES in rules:
            yield match.group("action") == "disable", match.group("scope") or "region"


class EnablementFilter(Protocol):
    def is_enabled(self, location: Location) -> bool:
        ...


class SuppressionFilter:
    """ Tells whether a rule is enabled at a location of the text it was created for. """

    def __init__(self, text: str, rule_id: str):
        self.rule_id = rule_id
        self._disabled_lines: Set[int] = set()

        line_overrides = {}
        disabled = False
        for line_number, line in enumerate(split_lines(text), start=1):
            if disabled:
                self._disabled_lines.add(line_number)
            for disable, scope in _directives(line, rule_id):
                if scope == "region":
                    disabled = disable
                elif scope == "this":
                    line_overrides[line_number] = disable
                elif scope == "next":
                    line_overrides[line_number + 1] = disable
                elif scope == "previous":
                    line_overrides[line_number - 1] = disable

        # Single-line directives take precedence over regions.
        for line_number, disable in line_overrides.items():
            if disable:
                self._disabled_lines.add(line_number)
            else:
                self._disabled_lines.discard(line_number)

    def is_enabled(self, location: Location) -> bool:
        return location.line not in self._disabled_lines
