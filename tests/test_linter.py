## Copyright 2018-present Network Optix, Inc. Licensed under MPL 2.0: www.mozilla.org/MPL/2.0/

import csv
import json
from argparse import Namespace
from pathlib import Path

import pytest


@pytest.mark.parametrize(
    "exclusion, excluded, included",
    [
        ({"spaces_not_tabs": ["foo1.swift"]}, ["foo1.swift"], ["bar1.swift"]),
        (
            {"spaces_not_tabs": ["foo2.swift", "bar2.swift"]},
            ["foo2.swift", "bar2.swift"],
            [],
        ),
        ({"spaces_not_tabs": ["foo5.swift"]}, [], ["quaz/foo5.swift"]),
        ({"spaces_not_tabs": ["**/foo5.swift"]}, ["quaz/foo5.swift"], []),
        ({"other_rule": ["foo7.swift"]}, [], ["foo7.swift"]),
    ],
)
def test_rule_exclusion(exclusion, excluded, included):
    from tablint.config import Config
    from tablint.linter import Linter

    config = Config([], [], ["spaces_not_tabs"], {}, exclusion)
    linter = Linter(config)

    for file_path in excluded:
        assert "spaces_not_tabs" not in (
            r.identifier for r in linter._rules_for_file(Path(file_path)))
    for file_path in included:
        assert "spaces_not_tabs" in (
            r.identifier for r in linter._rules_for_file(Path(file_path)))


@pytest.mark.parametrize(
    "file_path", ["Makefile", "src/makefile", "GNUmakefile", "build/rules.mk", "data/table.tsv"])
def test_tab_formats_are_excluded_by_default(file_path):
    from tablint.config import Config
    from tablint.linter import Linter

    linter = Linter(Config.default())
    assert linter._rules_for_file(Path(file_path)) == []
    assert [r.identifier for r in linter._rules_for_file(Path("src/main.swift"))] == [
        "spaces_not_tabs"]


def test_rule_inclusion():
    from tablint.config import Config
    from tablint.linter import Linter

    config = Config([], [], ["other_rule"], {"spaces_not_tabs": ["**/*.swift"]}, {})
    linter = Linter(config)

    assert [r.identifier for r in linter._rules_for_file(Path("src/a.swift"))] == [
        "spaces_not_tabs"]
    assert linter._rules_for_file(Path("src/a.txt")) == []


def test_rule_settings_are_passed_to_rules():
    from tablint.config import Config, RuleConfiguration, Severity
    from tablint.linter import Linter

    config = Config.default()
    config.rule_settings = {"spaces_not_tabs": RuleConfiguration(Severity.ERROR, 3)}
    linter = Linter(config)

    assert linter.all_rules["spaces_not_tabs"].configuration == RuleConfiguration(
        Severity.ERROR, 3)


def test_suppressed_violations_are_not_reported(tmp_path):
    from tablint.config import Config
    from tablint.linter import Linter

    path = tmp_path / "a.swift"
    path.write_text("\tfoo() // tablint:disable:this spaces_not_tabs\n\tbar()\n")
    linter = Linter(Config.default())

    assert [v.line for v in linter.lint(path)] == [2]


def test_correct_updates_the_cache(tmp_path):
    from tablint.config import Config
    from tablint.linter import Linter

    path = tmp_path / "a.swift"
    path.write_text("\tfoo()\n\t\tbar()\n")
    linter = Linter(Config.default())

    assert len(linter.lint(path)) == 2
    assert [c.offset for c in linter.correct(path, ["ALL"])] == [0, 7]
    assert path.read_text() == "    foo()\n        bar()\n"
    assert linter.lint(path) == []
    assert linter.fixed_files == {path}


def test_correct_only_requested_rules(tmp_path):
    from tablint.config import Config
    from tablint.linter import Linter

    path = tmp_path / "a.swift"
    path.write_text("\tfoo()\n")
    linter = Linter(Config.default())

    assert linter.correct(path, ["other_rule"]) == []
    assert path.read_text() == "\tfoo()\n"
    assert linter.fixed_files == set()


def _args(repo_dir, **overrides):
    args = dict(
        repo_dir=str(repo_dir),
        file=None,
        check_dir=None,
        check_file_list=None,
        output_format="simple",
        display_absolute_paths=False,
        enabled_rules=[],
        fix_rules=[],
        csv_file=None,
    )
    args.update(overrides)
    return Namespace(**args)


@pytest.fixture
def repo(tmp_path):
    (tmp_path / "tablint.json").write_text(json.dumps({
        "exclude": ["third_party/**"],
        "rules": {"spaces_not_tabs": {"severity": "error", "indentation_width": 2}},
    }))
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "a.swift").write_text("\tfoo()\n// \tcomment\n")
    (tmp_path / "src" / "b.txt").write_text("no tabs\n")
    (tmp_path / "third_party").mkdir()
    (tmp_path / "third_party" / "c.swift").write_text("\tx\n")
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "d.swift").write_text("\tx\n")
    (tmp_path / "image.png").write_bytes(b"\x89PNG\n\t")
    return tmp_path


def test_lint_files(repo, capsys):
    from tablint.config import Severity
    from tablint.linter import lint_files

    violations = lint_files(_args(repo))

    assert [(v.file_path.name, v.line, v.severity) for v in violations] == [
        ("a.swift", 1, Severity.ERROR)]
    output = capsys.readouterr().out
    assert "Error: [spaces_not_tabs]" in output
    assert "spaces_not_tabs (error): 1" in output


def test_lint_files_fixes(repo, capsys):
    from tablint.linter import lint_files

    violations = lint_files(_args(repo, fix_rules=["spaces_not_tabs"]))

    assert violations == []
    assert (repo / "src" / "a.swift").read_text() == "  foo()\n// \tcomment\n"
    assert (repo / "third_party" / "c.swift").read_text() == "\tx\n"
    output = capsys.readouterr().out
    assert "Corrected: [spaces_not_tabs]" in output
    assert "Fixed files:" in output


def test_lint_files_with_file_list(repo):
    from tablint.linter import lint_files

    file_list = repo / "files.txt"
    file_list.write_text("src/a.swift\n\nsrc/b.txt\n")

    violations = lint_files(_args(repo, check_file_list=file_list))
    assert [v.file_path.name for v in violations] == ["a.swift"]


def test_lint_files_writes_csv(repo, tmp_path_factory):
    from tablint.linter import lint_files

    csv_file = tmp_path_factory.mktemp("out") / "results.csv"
    lint_files(_args(repo, csv_file=csv_file))

    with csv_file.open(newline="") as file:
        rows = list(csv.reader(file))
    assert rows[0] == [
        "file_path", "extension", "line", "column", "offset", "severity", "lint_id", "message"]
    assert rows[1][1:] == [
        ".swift", "1", "1", "0", "error", "spaces_not_tabs",
        "Indentation should use spaces not tabs."]


def test_missing_repo_dir(tmp_path):
    from tablint.linter import lint_files

    assert lint_files(_args(tmp_path / "missing")) is None


@pytest.mark.parametrize(
    "severities, strict, result",
    [
        ([], False, False),
        ([], True, False),
        (["WARNING"], False, False),
        (["WARNING"], True, True),
        (["WARNING", "ERROR"], False, True),
    ],
)
def test_has_failures(severities, strict, result):
    from tablint.config import Severity
    from tablint.linter import has_failures
    from tablint.location import Location
    from tablint.rules.spaces_not_tabs import DESCRIPTION
    from tablint.violation import Violation

    violations = [
        Violation(DESCRIPTION, Severity[severity], Location(None, 1, 1, 0))
        for severity in severities]
    assert has_failures(violations, strict) == result
