## Copyright 2018-present Network Optix, Inc. Licensed under MPL 2.0: www.mozilla.org/MPL/2.0/

import logging
from typing import Iterable, List, Optional, Tuple

from tablint.constants import DEFAULT_INDENTATION_WIDTH, SPACE
from tablint.matching import MatchRange


def spaces_for_length(length: int, indentation_width: int) -> str:
    """ Every tab becomes the same number of spaces, whatever column it starts at. """
    return SPACE * (length * indentation_width)


def _to_index_range(match: MatchRange, unprocessed_length: int) -> Optional[Tuple[int, int]]:
    if match.length <= 0 or match.offset < 0 or match.end > unprocessed_length:
        return None
    return match.offset, match.end


def rewrite_ranges(
        text: str,
        ranges: Iterable[MatchRange],
        indentation_width: int = DEFAULT_INDENTATION_WIDTH) -> Tuple[str, List[int]]:
    """ Replaces every range with spaces and returns the corrected text together with the original
        offsets of the ranges that were replaced, in ascending order.

        Ranges are applied from the last one to the first one. A replacement changes the length of
        the text only after its own range, so the offsets of the ranges that are still to be
        applied stay valid without any adjustment. Applying them in ascending order would shift
        every following range as soon as one replacement is longer than the tabs it replaces.

        The text before the last applied range is never touched, so it is kept as the unprocessed
        prefix of the original text and the replaced tail is collected in pieces. A range that
        does not fit into the unprocessed prefix (an invalid offset, or a range overlapping one
        that was already applied) is skipped and produces no offset.
    """
    unprocessed_length = len(text)
    tail_pieces = []
    applied_offsets = []

    ordered = sorted(ranges)
    for match in reversed(ordered):
        index_range = _to_index_range(match, unprocessed_length)
        if index_range is None:
            logging.debug(
                f"Skipping range at offset {match.offset} with length {match.length}: it is "
                f"outside of the first {unprocessed_length} characters.")
            continue
        start, end = index_range
        tail_pieces.append(text[end:unprocessed_length])
        tail_pieces.append(spaces_for_length(match.length, indentation_width))
        unprocessed_length = start
        applied_offsets.insert(0, match.offset)

    tail_pieces.append(text[:unprocessed_length])
    return "".join(reversed(tail_pieces)), applied_offsets
