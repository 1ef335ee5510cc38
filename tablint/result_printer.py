## Copyright 2018-present Network Optix, Inc. Licensed under MPL 2.0: www.mozilla.org/MPL/2.0/

from enum import Enum
from pathlib import Path

from tablint.utils import display_path
from tablint.violation import Correction, Violation


class OutputFormat(Enum):
    LOG = "log"
    SIMPLE = "simple"


class ResultPrinter:
    def __init__(self, output_format: str, absolute_paths: bool):
        self.output_format = OutputFormat(output_format)
        self.relative_paths = not absolute_paths

    def _emit(self, text: str):
        if self.output_format == OutputFormat.LOG:
            import logging

            logging.info(text)
        elif self.output_format == OutputFormat.SIMPLE:
            print(text)
        else:
            raise NotImplementedError(
                f"Output format {self.output_format} not implemented.")

    def print(self, result: Violation):
        self._emit(result.to_str(self.relative_paths))

    def print_correction(self, correction: Correction):
        self._emit(correction.to_str(self.relative_paths))

    def write_csv(self, csv_file: Path, results: list[list[Violation]]):
        import csv
        from itertools import chain

        with csv_file.open("w", newline="") as file:
            writer = csv.writer(file)
            writer.writerow([
                    "file_path",
                    "extension",
                    "line",
                    "column",
                    "offset",
                    "severity",
                    "lint_id",
                    "message",
                ])
            for result in chain.from_iterable(results):
                writer.writerow([
                        display_path(result.file_path, self.relative_paths),
                        result.file_path.suffix if result.file_path else "",
                        result.line,
                        result.column,
                        result.offset,
                        result.severity.value,
                        result.lint_id,
                        result.message])
