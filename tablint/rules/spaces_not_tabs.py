## Copyright 2018-present Network Optix, Inc. Licensed under MPL 2.0: www.mozilla.org/MPL/2.0/

from typing import Iterator, List

from tablint.config import RuleConfiguration
from tablint.description import RuleDescription
from tablint.file_cache import SourceFile
from tablint.matching import MatchRange, leading_tab_ranges
from tablint.rewriter import rewrite_ranges
from tablint.violation import Correction, Violation

DESCRIPTION = RuleDescription(
    identifier="spaces_not_tabs",
    name="Spaces vs Tabs",
    description="Indentation should use spaces not tabs.",
    non_triggering_examples=(
        "func foo() {}",
        "  func foo() {}",
        "    func foo() {}",
        "func\tfoo() {}",
        "    \tfunc foo() {}",
        "/*\n\tcomment\n*/",
        "let s = \"\"\"\n\tindented text\n\t\"\"\"",
    ),
    triggering_examples=(
        "↓\tfunc foo() {}",
        "↓\t\tfunc foo() {}",
        "func foo() {\n↓\tbar()\n}",
        "↓\tfoo() // \tcomment",
    ),
    corrections=(
        ("\tfunc foo() {}", "    func foo() {}"),
        ("\tfunc foo() {}\n\tfunc bar() {}", "    func foo() {}\n    func bar() {}"),
        ("\t\tfunc foo() {}", "        func foo() {}"),
        ("\t\tfoo()\n\t/*\n\tbar()\n\t*/", "        foo()\n    /*\n\tbar()\n\t*/"),
    ),
)


class SpacesNotTabsRule:
    """ Indentation should use spaces not tabs. Tab characters at the start of a line (outside
        comments and string literals) are reported, and the fix replaces each of them with
        indentation_width spaces.
    """
    identifier = DESCRIPTION.identifier
    # Formats where leading tabs carry meaning: make recipes and tab-separated values.
    default_exclusions = ("**/Makefile", "**/makefile", "**/GNUmakefile", "**/*.mk", "**/*.tsv")

    def __init__(
            self,
            configuration: RuleConfiguration = RuleConfiguration(),
            description: RuleDescription = DESCRIPTION):
        self.configuration = configuration
        self.description = description

    def _violating_ranges(self, file: SourceFile) -> Iterator[MatchRange]:
        return leading_tab_ranges(file.contents, file.excluded_spans)

    def validate(self, file: SourceFile) -> List[Violation]:
        return [
            Violation(
                rule_description=self.description,
                severity=self.configuration.severity,
                location=file.location(match.offset))
            for match in self._violating_ranges(file)]

    def correct(self, file: SourceFile) -> List[Correction]:
        # Locations of the corrections are resolved against the text before the fix.
        original_index = file.line_index
        enablement = file.enablement_filter(self.identifier)
        violating_ranges = [
            match for match in self._violating_ranges(file)
            if enablement.is_enabled(original_index.resolve(match.offset))]
        if not violating_ranges:
            return []

        corrected, original_offsets = rewrite_ranges(
            file.contents, violating_ranges, self.configuration.indentation_width)
        if not original_offsets:
            return []

        file.write(corrected)
        return [
            Correction(rule_description=self.description, location=original_index.resolve(offset))
            for offset in original_offsets]
