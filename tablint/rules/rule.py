## Copyright 2018-present Network Optix, Inc. Licensed under MPL 2.0: www.mozilla.org/MPL/2.0/

from typing import Protocol, List, Tuple

from tablint.config import RuleConfiguration
from tablint.description import RuleDescription
from tablint.file_cache import SourceFile
from tablint.violation import Correction, Violation


class Rule(Protocol):
    # A unique identifier for this rule.
    identifier: str

    # File patterns the rule never applies to, in addition to the configured rule exclusions.
    default_exclusions: Tuple[str, ...]

    description: RuleDescription

    configuration: RuleConfiguration

    def validate(self, file: SourceFile) -> List[Violation]:
        """ Reports violations without modifying the file. """
        ...

    def correct(self, file: SourceFile) -> List[Correction]:
        """ Fixes the violations that are not suppressed and writes the file at most once. """
        ...
