## Copyright 2018-present Network Optix, Inc. Licensed under MPL 2.0: www.mozilla.org/MPL/2.0/

from tablint.file_cache import SourceFile


class FakeSourceFile(SourceFile):
    """ In-memory source that records every write instead of touching the disk. """
    def __init__(self, contents, path=None, classifier=None):
        super().__init__(contents, path=None, classifier=classifier)
        # Only used for reporting; nothing is ever read from or written to it.
        self.path = path
        self.writes = []

    def write(self, contents):
        self.writes.append(contents)
        self.contents = contents
        self._line_index = None
        self._excluded_spans = None
