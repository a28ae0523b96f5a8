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
Similarity scoring.

Overall similarity is Jaccard overlap of fingerprint sets. The structural,
control-flow and logic-pattern sub-scores compare filtered token
subsequences by longest common subsequence.
"""

from typing import Dict, FrozenSet, List, Sequence, Set
import math

import numpy as np

from .models import Token


# Language-independent filter tables
STRUCTURAL_TOKENS: FrozenSet[str] = frozenset({
    "function", "class", "if", "else", "for", "while", "switch", "case",
    "try", "catch", "finally", "return", "{", "}", "(", ")", ";",
})

CONTROL_FLOW_TOKENS: FrozenSet[str] = frozenset({
    "if", "else", "for", "while", "switch", "case", "break", "continue", "return",
})

LOGIC_OPERATOR_TOKENS: FrozenSet[str] = frozenset({
    "&&", "||", "!", "==", "!=", "<", ">", "<=", ">=", "+", "-", "*", "/", "%",
})


def set_similarity(fp1: Set[int], fp2: Set[int]) -> float:
    """Jaccard similarity |A & B| / |A | B|; 0.0 when both sets are empty."""
    union = fp1 | fp2
    if not union:
        return 0.0
    return len(fp1 & fp2) / len(union)


def longest_common_subsequence(seq1: Sequence[str], seq2: Sequence[str]) -> int:
    """
    Length of the longest common subsequence of two string sequences.

    Dynamic programming one row at a time. Within a row,
    cur[j] = max(cur[j-1], prev[j-1] + 1 if match else prev[j]), which is a
    running maximum over a vectorized candidate row.
    """
    if not seq1 or not seq2:
        return 0

    vocab: Dict[str, int] = {}
    a = np.array([vocab.setdefault(t, len(vocab)) for t in seq1], dtype=np.int64)
    b = np.array([vocab.setdefault(t, len(vocab)) for t in seq2], dtype=np.int64)

    prev = np.zeros(len(b) + 1, dtype=np.int64)
    for symbol in a:
        candidate = np.where(b == symbol, prev[:-1] + 1, prev[1:])
        cur = np.empty_like(prev)
        cur[0] = 0
        np.maximum.accumulate(candidate, out=cur[1:])
        prev = cur

    return int(prev[-1])


def sequence_similarity(seq1: Sequence[str], seq2: Sequence[str]) -> float:
    """
    LCS length divided by the longer sequence's length.

    Two empty sequences are identical (1.0); one empty gives 0.0.
    """
    if not seq1 and not seq2:
        return 1.0
    if not seq1 or not seq2:
        return 0.0
    return longest_common_subsequence(seq1, seq2) / max(len(seq1), len(seq2))


def filter_tokens(tokens: Sequence[Token], allowed: FrozenSet[str]) -> List[str]:
    """Token texts that belong to the allowed set, in order."""
    return [t.text for t in tokens if t.text in allowed]


def structural_similarity(tokens1: Sequence[Token], tokens2: Sequence[Token]) -> float:
    return sequence_similarity(
        filter_tokens(tokens1, STRUCTURAL_TOKENS),
        filter_tokens(tokens2, STRUCTURAL_TOKENS),
    )


def control_flow_similarity(tokens1: Sequence[Token], tokens2: Sequence[Token]) -> float:
    return sequence_similarity(
        filter_tokens(tokens1, CONTROL_FLOW_TOKENS),
        filter_tokens(tokens2, CONTROL_FLOW_TOKENS),
    )


def logic_pattern_similarity(tokens1: Sequence[Token], tokens2: Sequence[Token]) -> float:
    return sequence_similarity(
        filter_tokens(tokens1, LOGIC_OPERATOR_TOKENS),
        filter_tokens(tokens2, LOGIC_OPERATOR_TOKENS),
    )


def to_percentage(score: float) -> int:
    """Scale a 0-1 score to an integer percentage, rounding halves up."""
    return int(math.floor(score * 100 + 0.5))
