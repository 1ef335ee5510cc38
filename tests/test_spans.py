## Copyright 2018-present Network Optix, Inc. Licensed under MPL 2.0: www.mozilla.org/MPL/2.0/

from pathlib import Path

import pytest


def _spans(classifier, text):
    return [(s.start, s.end) for s in classifier.classify(text)]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("foo()", []),
        ("foo // c\nbar", [(4, 8)]),
        ("// c", [(0, 4)]),
        ("/* a /* b */ c */x", [(0, 17)]),
        ("/* x", [(0, 4)]),
        ('x = "a\\"b" + y', [(4, 10)]),
        ('"""\n\tx\n"""', [(0, 10)]),
        ('"unterminated\n\tx', [(0, 13)]),
        ('"// not a comment"', [(0, 18)]),
        ("c = 'a' // x", [(4, 7), (8, 12)]),
        ("a /* b */ c /* d */", [(2, 9), (12, 19)]),
    ],
)
def test_c_family_classifier(text, expected):
    from tablint.spans import CFamilySpanClassifier

    assert _spans(CFamilySpanClassifier(), text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("x = 1\n", []),
        ("x = 1  # c\n", [(7, 10)]),
        ('s = """\n\tdoc\n"""\n', [(4, 16)]),
        ("if x:\n\ty = 1  # c\n", [(14, 17)]),
        ('x = f"{y}"\n', [(4, 10)]),
        ("x = 'a' + \"b\"\n", [(4, 7), (10, 13)]),
    ],
)
def test_python_classifier(text, expected):
    from tablint.spans import PythonSpanClassifier

    assert _spans(PythonSpanClassifier(), text) == expected


@pytest.mark.parametrize(
    "backtick_escapes, text, expected",
    [
        (False, "var s = `first\n\tindented\n`", [(8, 26)]),
        (False, "x := `a\\` + \"b\"", [(5, 9), (12, 15)]),
        (True, "const s = `\n\t${x}\n`;", [(10, 19)]),
        (True, "x := `a\\` + \"b\"", [(5, 15)]),
        (True, "`a // b`", [(0, 8)]),
    ],
)
def test_backtick_literals(backtick_escapes, text, expected):
    from tablint.spans import CFamilySpanClassifier

    classifier = CFamilySpanClassifier(backtick_strings=True, backtick_escapes=backtick_escapes)
    assert _spans(classifier, text) == expected


def test_backticks_quote_identifiers_by_default():
    from tablint.spans import CFamilySpanClassifier

    assert _spans(CFamilySpanClassifier(), "let `default` = 1\n\tfoo()") == []


def test_python_classifier_survives_tokenizer_errors():
    from tablint.spans import PythonSpanClassifier

    assert isinstance(PythonSpanClassifier().classify("y = 1  # c\nx = (\n"), list)


@pytest.mark.parametrize(
    "file_path, classifier_name",
    [
        (None, "CFamilySpanClassifier"),
        (Path("a.swift"), "CFamilySpanClassifier"),
        (Path("dir/a.CPP"), "CFamilySpanClassifier"),
        (Path("a.go"), "CFamilySpanClassifier"),
        (Path("a.mjs"), "CFamilySpanClassifier"),
        (Path("a.py"), "PythonSpanClassifier"),
        (Path("a.txt"), "NullSpanClassifier"),
        (Path("Makefile"), "NullSpanClassifier"),
    ],
)
def test_classifier_is_chosen_by_suffix(file_path, classifier_name):
    from tablint.spans import classifier_for

    assert type(classifier_for(file_path)).__name__ == classifier_name


@pytest.mark.parametrize(
    "file_path, backtick_strings, backtick_escapes",
    [
        (Path("a.swift"), False, True),
        (Path("a.go"), True, False),
        (Path("a.js"), True, True),
        (Path("web/a.tsx"), True, True),
    ],
)
def test_backtick_literals_are_chosen_by_suffix(file_path, backtick_strings, backtick_escapes):
    from tablint.spans import classifier_for

    classifier = classifier_for(file_path)
    assert classifier.backtick_strings == backtick_strings
    assert classifier.backtick_escapes == backtick_escapes


def test_merge_spans():
    from tablint.spans import ExcludedSpan, merge_spans

    spans = [ExcludedSpan(*s) for s in [(5, 8), (0, 3), (2, 4), (8, 9), (10, 10)]]
    assert merge_spans(spans) == [ExcludedSpan(0, 4), ExcludedSpan(5, 9)]
