## Copyright 2018-present Network Optix, Inc. Licensed under MPL 2.0: www.mozilla.org/MPL/2.0/

import re
from bisect import bisect_left
from dataclasses import dataclass
from typing import Iterable, Iterator

from tablint.spans import ExcludedSpan, merge_spans

# In MULTILINE mode "^" matches at the start of the text and right after every LF. The run is
# greedy, so a run of any length is a single match.
_leading_tabs_re = re.compile(r"^\t+", re.MULTILINE)


@dataclass(frozen=True, order=True)
class MatchRange:
    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length


class _SpanIndex:
    def __init__(self, spans: Iterable[ExcludedSpan]):
        merged = merge_spans(spans)
        self._starts = [span.start for span in merged]
        self._ends = [span.end for span in merged]

    def overlaps(self, start: int, end: int) -> bool:
        # Merged spans are disjoint and sorted, so the last span starting before `end` is the only
        # one that can reach past `start`.
        candidate = bisect_left(self._starts, end) - 1
        return candidate >= 0 and self._ends[candidate] > start


def leading_tab_ranges(
        text: str, excluded_spans: Iterable[ExcludedSpan]) -> Iterator[MatchRange]:
    """ Yields runs of tab characters that start a line, in ascending offset order. A run that
        overlaps an excluded span even partially is skipped as a whole.
    """
    span_index = _SpanIndex(excluded_spans)
    for match in _leading_tabs_re.finditer(text):
        if span_index.overlaps(match.start(), match.end()):
            continue
        yield MatchRange(offset=match.start(), length=match.end() - match.start())
