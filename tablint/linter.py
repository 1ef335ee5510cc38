## Copyright 2018-present Network Optix, Inc. Licensed under MPL 2.0: www.mozilla.org/MPL/2.0/

import logging
from pathlib import Path
from typing import Iterable, Optional

from tablint.config import Config, Severity
from tablint.violation import Correction, Violation
from tablint.rules import Rule


class Linter:
    def __init__(self, config: Config):
        from tablint.rules import RULES
        from tablint.file_cache import FileCache

        self.rule_classes = RULES
        self.all_rules = {
            rule.identifier: rule(config.configuration_for(rule.identifier))
            for rule in self.rule_classes
        }
        for rule_id in config.rule_settings:
            if rule_id not in self.all_rules:
                logging.warning(f"Settings for unknown rule {rule_id!r} are ignored.")

        # Rules that apply to all files.
        global_rules: dict[str, Rule] = {
            rule.identifier: rule
            for rule in self.all_rules.values()
            if config.rule_enabled(rule.identifier)
        }
        self.pattern_enabled_rules = {"**/*": list(global_rules.keys())}
        for rule_id, patterns in config.rule_inclusions.items():
            for pattern in patterns:
                if pattern not in self.pattern_enabled_rules:
                    self.pattern_enabled_rules[pattern] = []
                self.pattern_enabled_rules[pattern].append(rule_id)

        self.pattern_disabled_rules = {}
        for rule in self.all_rules.values():
            for pattern in rule.default_exclusions:
                if pattern not in self.pattern_disabled_rules:
                    self.pattern_disabled_rules[pattern] = []
                self.pattern_disabled_rules[pattern].append(rule.identifier)
        for rule_id, patterns in config.rule_exclusions.items():
            for pattern in patterns:
                if pattern not in self.pattern_disabled_rules:
                    self.pattern_disabled_rules[pattern] = []
                self.pattern_disabled_rules[pattern].append(rule_id)

        self.config = config
        self.cache = FileCache()
        self.fixed_files = set()

    def _rules_for_file(self, file_path: Path) -> list[Rule]:
        from globmatch import glob_match

        rules = set()
        # First, consider all the enabled rules (global and per-pattern enabled rules are already
        # collected in self.pattern_enabled_rules):
        for pattern, rule_ids in self.pattern_enabled_rules.items():
            if glob_match(file_path, [pattern]):
                rules.update(rule_ids)
        # Then, remove all the per-pattern disabled rules:
        for pattern, rule_ids in self.pattern_disabled_rules.items():
            if glob_match(file_path, [pattern]):
                rules.difference_update(rule_ids)

        return [self.all_rules[rule_id] for rule_id in sorted(rules) if rule_id in self.all_rules]

    def lint(self, file_path: Path) -> list[Violation]:
        """ Violations of all the rules that apply to the file, except the ones suppressed by
            inline directives.
        """
        source = self.cache.source_of(file_path)
        if source is None:
            return []

        results = []
        for rule in self._rules_for_file(file_path):
            enablement = source.enablement_filter(rule.identifier)
            results.extend(v for v in rule.validate(source) if enablement.is_enabled(v.location))
        return results

    def correct(self, file_path: Path, rule_ids: Iterable[str]) -> list[Correction]:
        source = self.cache.source_of(file_path)
        if source is None:
            return []

        rule_ids = set(rule_ids)
        corrections = []
        for rule in self._rules_for_file(file_path):
            if rule.identifier in rule_ids or "ALL" in rule_ids:
                corrections.extend(rule.correct(source))
        if corrections:
            self.fixed_files.add(file_path)
        return corrections

    def print_stats(self, results: list[list[Violation]]) -> None:
        from collections import Counter
        from itertools import chain

        lint_id_counts = Counter(
            (result.lint_id, result.severity) for result in chain.from_iterable(results))
        if lint_id_counts:
            print("\nRule violations:")
            for (lint_id, severity), count in sorted(
                    lint_id_counts.items(), key=lambda item: (item[0][0], item[0][1].value)):
                print(f"  {lint_id} ({severity.value}): {count}")
        else:
            print("No violations found.")

        if self.fixed_files:
            print("\nFixed files:")
            for file_path in sorted(self.fixed_files):
                print(f"  {file_path}")


def _is_hidden(relative_path: Path) -> bool:
    return any(part.startswith(".") for part in relative_path.parts[:-1])


def lint_files(args) -> Optional[list[Violation]]:
    """ Lints the given files or the entire repo if no files are given. Returns the violations that
        remain after the requested fixes, or None if the files could not be collected.
    """
    from itertools import chain
    from concurrent.futures import ThreadPoolExecutor

    from globmatch import glob_match

    from tablint.result_printer import ResultPrinter

    repo_directory = (Path(args.repo_dir) if args.repo_dir else Path.cwd()).resolve()
    if not repo_directory.is_dir():
        logging.error(f"Repo directory {str(repo_directory)} does not exist.")
        return None

    if args.file:
        files = [args.file]
    elif args.check_dir:
        files = (repo_directory / args.check_dir).rglob("*")
    elif args.check_file_list:
        with open(args.check_file_list) as file_list:
            files = [repo_directory / Path(f.rstrip()) for f in file_list.readlines() if f.strip()]
    else:
        files = repo_directory.rglob("*")

    files = sorted(set(files))
    printer = ResultPrinter(args.output_format, args.display_absolute_paths)
    config = Config.load(repo_directory, args)
    linter = Linter(config)

    def should_check_file(file_path: Path) -> bool:
        if file_path == args.file:
            return True
        absolute_path = file_path if file_path.is_absolute() else repo_directory / file_path
        try:
            rel_file_path = absolute_path.relative_to(repo_directory)
        except ValueError:
            rel_file_path = file_path
        if _is_hidden(rel_file_path):
            return False
        return glob_match(rel_file_path, config.include) and not glob_match(
            rel_file_path, config.exclude)

    def check_one_file(file_path: Path) -> list[Violation]:
        if not file_path.is_file() or not should_check_file(file_path):
            return []
        try:
            results = linter.lint(file_path)
            if results and args.fix_rules:
                corrections = linter.correct(file_path, args.fix_rules)
                for correction in corrections:
                    printer.print_correction(correction)
                if corrections:
                    results = linter.lint(file_path)
        except OSError as e:
            logging.error(f"Failed to check {file_path}: {e}")
            return []
        for result in results:
            printer.print(result)
        return results

    # Every file is checked by exactly one task, so sources are never modified concurrently.
    with ThreadPoolExecutor() as executor:
        results = list(executor.map(check_one_file, files))

    linter.print_stats(results)

    if args.csv_file:
        printer.write_csv(args.csv_file, results)

    return list(chain.from_iterable(results))


def has_failures(violations: list[Violation], strict: bool) -> bool:
    """ Errors always fail the run, warnings only in strict mode. """
    return any(strict or v.severity == Severity.ERROR for v in violations)
