## Copyright 2018-present Network Optix, Inc. Licensed under MPL 2.0: www.mozilla.org/MPL/2.0/

from argparse import ArgumentParser
from textwrap import TextWrapper

from tablint.rules import RULES


class TabLintArgumentParser(ArgumentParser):
    """ Argument parser that appends the registered rules to the help message. Each rule is listed
        with its name, its description and the default configuration it is created with.
    """
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._rules = [rule_class() for rule_class in RULES]

    def print_help(self, file=None):
        super().print_help(file=file)
        print("\nAvailable rules:\n", file=file)

        wrapper = TextWrapper(initial_indent=8 * " ", subsequent_indent=8 * " ", width=80)
        for rule in self._rules:
            description = rule.description
            print(f"    {description.identifier} ({description.name}):", file=file)
            configuration = rule.configuration
            text = (
                f"{description.description} Default severity: {configuration.severity.value}, "
                f"indentation width: {configuration.indentation_width}.")
            for line in wrapper.wrap(text):
                print(line, file=file)
            print(file=file)
