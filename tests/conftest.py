## Copyright 2018-present Network Optix, Inc. Licensed under MPL 2.0: www.mozilla.org/MPL/2.0/

import pytest
from .fake_source_file import FakeSourceFile


@pytest.fixture
def source_file():
    def _create(contents, classifier=None):
        from tablint.spans import CFamilySpanClassifier

        return FakeSourceFile(contents, classifier=classifier or CFamilySpanClassifier())

    return _create


@pytest.fixture
def rule():
    from tablint.rules.spaces_not_tabs import SpacesNotTabsRule

    return SpacesNotTabsRule()
