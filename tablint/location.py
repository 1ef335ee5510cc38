## Copyright 2018-present Network Optix, Inc. Licensed under MPL 2.0: www.mozilla.org/MPL/2.0/

import re
from bisect import bisect_right
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

_newline_re = re.compile("\n")


@dataclass(frozen=True)
class Location:
    file_path: Optional[Path]
    # 1-based line number.
    line: int
    # 1-based character column.
    column: int
    # 0-based character offset in the text the location was resolved against.
    offset: int


class LineIndex:
    """ Converts character offsets of a text into line/column locations. A line starts at the
        beginning of the text and right after every LF.
    """
    def __init__(self, text: str, file_path: Optional[Path] = None):
        self.file_path = file_path
        self._length = len(text)
        self._line_starts = [0] + [m.end() for m in _newline_re.finditer(text)]

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line_start(self, line: int) -> int:
        return self._line_starts[line - 1]

    def resolve(self, offset: int) -> Location:
        clamped = min(max(offset, 0), self._length)
        line = bisect_right(self._line_starts, clamped)
        column = clamped - self._line_starts[line - 1] + 1
        return Location(file_path=self.file_path, line=line, column=column, offset=offset)
