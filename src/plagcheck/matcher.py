# plagcheck - Winnowing-based source code similarity detection
# Copyright (C) 2025  Jonathan Louis
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
Token-level match detection: renamed variables and shared segments.
"""

from typing import List, Sequence

from .models import MatchSegment, Token


# Fraction of aligned identifier pairs that must differ to flag renaming
RENAMING_MISMATCH_RATIO = 0.3

# Shortest run of equal tokens reported as a matching segment
MIN_SEGMENT_TOKENS = 3

# Token-index to line proxy: roughly this many tokens per line
TOKENS_PER_LINE = 10


def detect_variable_renaming(tokens1: Sequence[Token], tokens2: Sequence[Token]) -> bool:
    """
    Guess whether one sample is the other with identifiers renamed.

    Compares the raw names at positions where both samples have a user
    identifier. True if any such pair exists and more than 30% of the
    pairs use different names.
    """
    pairs = 0
    mismatches = 0

    for t1, t2 in zip(tokens1, tokens2):
        if t1.is_identifier and t2.is_identifier:
            pairs += 1
            if t1.raw != t2.raw:
                mismatches += 1

    return pairs > 0 and mismatches / pairs > RENAMING_MISMATCH_RATIO


def _line_range(start: int, end: int) -> str:
    return f"{start // TOKENS_PER_LINE + 1}-{end // TOKENS_PER_LINE + 1}"


def find_matching_segments(
    tokens1: Sequence[Token],
    tokens2: Sequence[Token],
    min_length: int = MIN_SEGMENT_TOKENS,
) -> List[MatchSegment]:
    """
    Find runs of equal tokens while walking both samples in lockstep.

    Both cursors always advance together, so a run is only found when the
    samples are aligned at the same token offset. An insertion in one
    sample shifts everything after it out of reach.

    Args:
        tokens1: Tokens of the first sample
        tokens2: Tokens of the second sample
        min_length: Shortest run to report

    Returns:
        Segments in scan order, with ids starting at 1
    """
    matches: List[MatchSegment] = []
    i = j = 0

    while i < len(tokens1) and j < len(tokens2):
        if tokens1[i].text != tokens2[j].text:
            i += 1
            j += 1
            continue

        start_i, start_j = i, j
        while i < len(tokens1) and j < len(tokens2) and tokens1[i].text == tokens2[j].text:
            i += 1
            j += 1

        if i - start_i >= min_length:
            matches.append(MatchSegment(
                id=len(matches) + 1,
                code1_lines=_line_range(start_i, i),
                code2_lines=_line_range(start_j, j),
                code1_content=" ".join(t.text for t in tokens1[start_i:i]),
                code2_content=" ".join(t.text for t in tokens2[start_j:j]),
            ))

    return matches
