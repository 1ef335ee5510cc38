## Copyright 2018-present Network Optix, Inc. Licensed under MPL 2.0: www.mozilla.org/MPL/2.0/

from .spaces_not_tabs import SpacesNotTabsRule
from .rule import Rule

RULES = (
    SpacesNotTabsRule,
)
