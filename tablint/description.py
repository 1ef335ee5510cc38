## Copyright 2018-present Network Optix, Inc. Licensed under MPL 2.0: www.mozilla.org/MPL/2.0/

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class RuleDescription:
    identifier: str
    name: str
    description: str

    # Texts that must not produce any violation.
    non_triggering_examples: Tuple[str, ...] = ()

    # Texts that must produce violations exactly at the positions marked with VIOLATION_MARKER.
    triggering_examples: Tuple[str, ...] = ()

    # Pairs of (text, the same text after the rule corrected it).
    corrections: Tuple[Tuple[str, str], ...] = ()
