## Copyright 2018-present Network Optix, Inc. Licensed under MPL 2.0: www.mozilla.org/MPL/2.0/

""" Classification of the parts of source text that are comments or string literals. Such parts
    are excluded from the checks that only apply to code.
"""

import io
import logging
import tokenize
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Protocol

from tablint.constants import LF
from tablint.location import LineIndex


@dataclass(frozen=True, order=True)
class ExcludedSpan:
    # Half-open range [start, end) of character offsets.
    start: int
    end: int


class SpanClassifier(Protocol):
    def classify(self, text: str) -> List[ExcludedSpan]:
        ...


def merge_spans(spans: Iterable[ExcludedSpan]) -> List[ExcludedSpan]:
    """ Sorts the spans and merges the ones that overlap or touch. Empty spans are dropped. """
    merged: List[ExcludedSpan] = []
    for span in sorted(s for s in spans if s.end > s.start):
        if merged and span.start <= merged[-1].end:
            merged[-1] = ExcludedSpan(merged[-1].start, max(merged[-1].end, span.end))
        else:
            merged.append(span)
    return merged


class NullSpanClassifier:
    """ Nothing is excluded; used for plain text files. """

    def classify(self, text: str) -> List[ExcludedSpan]:
        return []


def _line_comment_end(text: str, start: int) -> int:
    end = text.find(LF, start)
    return len(text) if end == -1 else end


def _block_comment_end(text: str, start: int) -> int:
    # Block comments may be nested (Swift, Rust, Kotlin, Scala).
    depth = 0
    i = start
    while i < len(text):
        if text.startswith("/*", i):
            depth += 1
            i += 2
        elif text.startswith("*/", i):
            depth -= 1
            i += 2
            if depth == 0:
                return i
        else:
            i += 1
    return len(text)


def _multiline_string_end(text: str, start: int) -> int:
    end = text.find('"""', start + 3)
    return len(text) if end == -1 else end + 3


def _backtick_end(text: str, start: int, escapes: bool) -> int:
    # Go raw strings and JS/TS template literals may span lines. Only template literals know
    # escapes.
    escape = False
    i = start + 1
    while i < len(text):
        c = text[i]
        if escape:
            escape = False
        elif c == "\\" and escapes:
            escape = True
        elif c == "`":
            return i + 1
        i += 1
    return len(text)


def _quoted_end(text: str, start: int, quote: str) -> int:
    # Single-line literals end at the closing quote or, if unterminated, at the end of the line.
    escape = False
    i = start + 1
    while i < len(text):
        c = text[i]
        if escape:
            escape = False
        elif c == "\\":
            escape = True
        elif c == quote:
            return i + 1
        elif c == LF:
            return i
        i += 1
    return len(text)


class CFamilySpanClassifier:
    """ Finds comments and string literals in sources with C-like lexical structure: Swift, C,
        C++, Objective-C, Java, Kotlin, JavaScript, Go and similar. Backtick literals are only
        recognized when backtick_strings is set, since in Swift and Kotlin backticks quote
        identifiers.
    """
    def __init__(self, backtick_strings: bool = False, backtick_escapes: bool = True):
        self.backtick_strings = backtick_strings
        self.backtick_escapes = backtick_escapes

    def classify(self, text: str) -> List[ExcludedSpan]:
        spans = []
        i = 0
        while i < len(text):
            c = text[i]
            if text.startswith("//", i):
                end = _line_comment_end(text, i)
            elif text.startswith("/*", i):
                end = _block_comment_end(text, i)
            elif text.startswith('"""', i):
                end = _multiline_string_end(text, i)
            elif c == "`" and self.backtick_strings:
                end = _backtick_end(text, i, self.backtick_escapes)
            elif c in ('"', "'"):
                end = _quoted_end(text, i, c)
            else:
                i += 1
                continue
            spans.append(ExcludedSpan(i, end))
            i = end
        return spans


_string_start_token_types = {
    getattr(tokenize, name)
    for name in ("FSTRING_START", "TSTRING_START")
    if hasattr(tokenize, name)
}
_string_end_token_types = {
    getattr(tokenize, name)
    for name in ("FSTRING_END", "TSTRING_END")
    if hasattr(tokenize, name)
}


class PythonSpanClassifier:
    """ Uses the tokenize module to find comments and string literals in Python sources. """

    def classify(self, text: str) -> List[ExcludedSpan]:
        index = LineIndex(text)

        def offset_of(position) -> int:
            row, column = position
            return index.line_start(row) + column

        spans = []
        # Since Python 3.12 f-strings are split into several tokens, and they can be nested.
        open_strings = []
        try:
            for token in tokenize.generate_tokens(io.StringIO(text).readline):
                if token.type in (tokenize.COMMENT, tokenize.STRING):
                    spans.append(ExcludedSpan(offset_of(token.start), offset_of(token.end)))
                elif token.type in _string_start_token_types:
                    open_strings.append(offset_of(token.start))
                elif token.type in _string_end_token_types and open_strings:
                    spans.append(ExcludedSpan(open_strings.pop(), offset_of(token.end)))
        except (tokenize.TokenError, SyntaxError) as e:
            logging.debug(f"Python tokenizer stopped: {e}")
        return spans


_python_suffixes = (".py", ".pyi", ".pyw")
_c_family_suffixes = (
    ".swift", ".c", ".h", ".cc", ".cpp", ".cxx", ".hh", ".hpp", ".hxx", ".ipp", ".inl", ".m",
    ".mm", ".java", ".kt", ".kts", ".scala", ".cs", ".rs", ".dart", ".qml", ".groovy", ".gradle",
    ".proto",
)
# Template literals, with escapes.
_template_literal_suffixes = (".js", ".mjs", ".cjs", ".jsx", ".ts", ".mts", ".cts", ".tsx")
# Raw strings, without escapes.
_raw_backtick_suffixes = (".go",)


def classifier_for(file_path: Optional[Path]) -> SpanClassifier:
    """ Chooses the classifier by the file suffix. In-memory text with no file is treated as
        C-family source.
    """
    if file_path is None:
        return CFamilySpanClassifier()
    suffix = file_path.suffix.lower()
    if suffix in _python_suffixes:
        return PythonSpanClassifier()
    if suffix in _c_family_suffixes:
        return CFamilySpanClassifier()
    if suffix in _template_literal_suffixes:
        return CFamilySpanClassifier(backtick_strings=True)
    if suffix in _raw_backtick_suffixes:
        return CFamilySpanClassifier(backtick_strings=True, backtick_escapes=False)
    return NullSpanClassifier()
