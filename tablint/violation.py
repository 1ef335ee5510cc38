## Copyright 2018-present Network Optix, Inc. Licensed under MPL 2.0: www.mozilla.org/MPL/2.0/

from pathlib import Path
from dataclasses import dataclass
from typing import Optional

from tablint.config import Severity
from tablint.description import RuleDescription
from tablint.location import Location
from tablint.utils import display_path


@dataclass(frozen=True)
class Violation:
    rule_description: RuleDescription
    severity: Severity
    location: Location

    @property
    def lint_id(self) -> str:
        return self.rule_description.identifier

    @property
    def message(self) -> str:
        return self.rule_description.description

    @property
    def file_path(self) -> Optional[Path]:
        return self.location.file_path

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column

    @property
    def offset(self) -> int:
        return self.location.offset

    def to_str(self, relative: bool) -> str:
        file_path = display_path(self.file_path, relative)
        return f"{self.severity.title}: [{self.lint_id}] {file_path}:{self.line}:{self.column}: " \
               f"{self.message}"


@dataclass(frozen=True)
class Correction:
    """ A fix applied by a rule. The location refers to the text before the fix. """
    rule_description: RuleDescription
    location: Location

    @property
    def lint_id(self) -> str:
        return self.rule_description.identifier

    @property
    def file_path(self) -> Optional[Path]:
        return self.location.file_path

    @property
    def offset(self) -> int:
        return self.location.offset

    def to_str(self, relative: bool) -> str:
        file_path = display_path(self.file_path, relative)
        return f"Corrected: [{self.lint_id}] {file_path}:{self.location.line}:" \
               f"{self.location.column}: {self.rule_description.name}"
