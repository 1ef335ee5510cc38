## Copyright 2018-present Network Optix, Inc. Licensed under MPL 2.0: www.mozilla.org/MPL/2.0/

""" Named constants for characters, markers and defaults. """
LF = "\n"
SPACE = " "

# Marks the position of an expected violation in rule description examples.
VIOLATION_MARKER = "↓"

DEFAULT_INDENTATION_WIDTH = 4
CONFIG_FILE_NAME = "tablint.json"
