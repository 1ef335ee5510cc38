## Copyright 2018-present Network Optix, Inc. Licensed under MPL 2.0: www.mozilla.org/MPL/2.0/

import sys
import logging

from pathlib import Path

from tablint.argument_parser import TabLintArgumentParser


def _parser() -> TabLintArgumentParser:
    parser = TabLintArgumentParser(
        prog="tablint",
        description="Checks that indentation uses spaces instead of tabs and fixes it on request.")
    parser.add_argument(
        "--output-format",
        choices=["log", "simple"],
        default="simple",
        help="Output format for lint results.")
    parser.add_argument(
        "-r",
        "--repo-dir",
        type=str,
        default=".",
        help="The repository directory. If not specified, the current directory is used.")
    check_target_group = parser.add_mutually_exclusive_group()
    check_target_group.add_argument(
        "--check-dir",
        type=str,
        required=False,
        default=None,
        help=(
            'A directory to check. If neither this parameter nor "check-file-list" parameter is '
            "specified, the entire repository will be checked."))
    check_target_group.add_argument(
        "--check-file-list",
        type=Path,
        required=False,
        default=None,
        help=(
            "A file with the list of files to check. File paths can be relative to the repo "
            "directory."))
    parser.add_argument(
        "--log-level",
        choices=logging._nameToLevel.keys(),
        default="INFO",
        help="The level of the log messages. Default value: INFO.")
    parser.add_argument(
        "--display-absolute-paths",
        default=False,
        action="store_true",
        help="Display absolute file paths instead of relative to the current directory.")
    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        help="Single file to lint. Overrides --check-dir and --check-file-list.")
    parser.add_argument(
        "--always-succeed",
        action="store_true",
        default=False,
        help="Always return 0, even if linting fails. Useful for integration with editors.")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=False,
        help="Fail on warnings as well. By default only violations with the error severity make "
             "the exit code non-zero.")
    parser.add_argument(
        "-e",
        "--enable-rule",
        dest="enabled_rules",
        action="append",
        default=[],
        help="Enable a specific rule. Can be specified multiple times. If no rules are specified, "
             "all rules are enabled. This overrides the enabled_rules setting in tablint.json.")
    parser.add_argument(
        "--write-csv",
        dest="csv_file",
        type=Path,
        default=None,
        help="Write lint results to a CSV file.")
    parser.add_argument(
        "--fix",
        dest="fix_rules",
        action="append",
        default=[],
        help="Fix the violations of a specific rule. Can be specified multiple times. If no rule "
             "names are specified, nothing is fixed. Pass ALL to fix all the rules.")
    return parser


def main(argv=None):
    args = _parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level, format="%(asctime)s %(levelname)s\t%(message)s"
    )

    from tablint.config import ConfigurationError
    from tablint.linter import has_failures, lint_files

    try:
        violations = lint_files(args)
    except ConfigurationError as e:
        logging.error(f"Invalid configuration: {e}")
        sys.exit(2)

    if violations is None:
        sys.exit(2)
    if not has_failures(violations, args.strict) or args.always_succeed:
        sys.exit(0)
    else:
        sys.exit(1)


if __name__ == "__main__":
    main()
