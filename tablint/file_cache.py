## Copyright 2018-present Network Optix, Inc. Licensed under MPL 2.0: www.mozilla.org/MPL/2.0/

import logging
from pathlib import Path
from typing import Dict, List, Optional

from tablint.location import LineIndex, Location
from tablint.spans import ExcludedSpan, SpanClassifier, classifier_for
from tablint.suppression import EnablementFilter, SuppressionFilter
from tablint.utils import is_text_file

# surrogateescape lets undecodable bytes survive a read-fix-write cycle unchanged.
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class SourceFile:
    """ Contents of a file as seen by the rules. Derived data (line index, excluded spans) is
        computed lazily and dropped when the contents are rewritten.
    """
    def __init__(
            self,
            contents: str,
            path: Optional[Path] = None,
            classifier: Optional[SpanClassifier] = None):
        self.path = path
        self.contents = contents
        self._classifier = classifier or classifier_for(path)
        self._line_index: Optional[LineIndex] = None
        self._excluded_spans: Optional[List[ExcludedSpan]] = None

    @classmethod
    def read(cls, path: Path, classifier: Optional[SpanClassifier] = None) -> "SourceFile":
        return cls(path.read_bytes().decode(_ENCODING, _ERRORS), path=path, classifier=classifier)

    @property
    def line_index(self) -> LineIndex:
        if self._line_index is None:
            self._line_index = LineIndex(self.contents, self.path)
        return self._line_index

    @property
    def excluded_spans(self) -> List[ExcludedSpan]:
        if self._excluded_spans is None:
            self._excluded_spans = self._classifier.classify(self.contents)
        return self._excluded_spans

    def location(self, offset: int) -> Location:
        return self.line_index.resolve(offset)

    def enablement_filter(self, rule_id: str) -> EnablementFilter:
        return SuppressionFilter(self.contents, rule_id)

    def write(self, contents: str) -> None:
        if self.path is not None:
            logging.debug(f"Writing {self.path}")
            self.path.write_bytes(contents.encode(_ENCODING, _ERRORS))
        self.contents = contents
        self._line_index = None
        self._excluded_spans = None


class FileCache:
    def __init__(self):
        self.cache: Dict[str, SourceFile] = {}

    def source_of(self, file_path: Path) -> Optional[SourceFile]:
        """ Returns the cached source of the given file, or None for binary files. A fix updates
            the cached source through SourceFile.write, so it never goes stale.
        """
        if not is_text_file(file_path):
            return None
        key = str(file_path.absolute())
        if key not in self.cache:
            logging.debug(f"{file_path} not in cache, reading...")
            self.cache.setdefault(key, SourceFile.read(file_path))
        return self.cache[key]
