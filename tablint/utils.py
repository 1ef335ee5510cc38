## Copyright 2018-present Network Optix, Inc. Licensed under MPL 2.0: www.mozilla.org/MPL/2.0/

import os
from pathlib import Path
from functools import lru_cache
from typing import Iterable, Optional

from tablint.constants import LF

_known_binary_file_types = (
    ".jpg", ".jpeg", ".png", ".gif", ".ico", ".tif", ".tiff", ".bmp", ".dib", ".cr2", ".pdf",
    ".exe", ".dll", ".obj", ".pyc", ".pyo", ".so", ".pyd", ".avi", ".mp4", ".mp3", ".wav", ".dump",
    ".jar", ".woff", ".ttf", ".bin", ".eot", ".sqlite", ".mkv", ".snk", ".zip",
)


@lru_cache(maxsize=None)
def is_text_file(file: Path) -> bool:
    """ Determines if a file is binary by checking a list of known binary extensions.
    """
    return file.suffix not in _known_binary_file_types


def split_lines(text: str) -> Iterable[str]:
    """ Generator that splits the given text into lines, preserving line endings. Only LF ends a
        line, so CR+LF endings stay attached to their line, the same way offsets are mapped to
        lines by LineIndex.
    """
    line_start = 0
    while (line_end := text.find(LF, line_start)) != -1:
        yield text[line_start:line_end + 1]
        line_start = line_end + 1
    if line_start < len(text):
        # When this is true, it means that the last line does not end with a LF.
        yield text[line_start:]


def display_path(file_path: Optional[Path], relative: bool) -> str:
    if file_path is None:
        return "<text>"
    if not relative:
        return str(file_path.absolute())
    try:
        return str(file_path.absolute().relative_to(Path.cwd()))
    except ValueError:
        # Not under the current directory.
        return os.path.relpath(file_path.absolute(), Path.cwd())
