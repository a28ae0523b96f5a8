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
Winnowing fingerprints (Schleimer, Wilkerson and Aiken, 2003).

Tokens are grouped into overlapping k-grams, each k-gram is hashed, and
the minimum hash of every window of consecutive hashes is kept. Any shared
run of at least k + w - 1 tokens yields at least one common fingerprint.
"""

from typing import List, Sequence, Set, Union

from .models import Token, WinnowingOptions


_MASK_32 = 0xFFFFFFFF
_SIGN_32 = 0x80000000


def kgrams(tokens: Sequence[Union[Token, str]], length: int) -> List[str]:
    """
    Overlapping k-grams of a token sequence.

    Returns max(0, len(tokens) - length + 1) strings, each the tokens of
    one window joined by a single space.
    """
    texts = [str(t) for t in tokens]
    return [
        " ".join(texts[i:i + length])
        for i in range(len(texts) - length + 1)
    ]


def string_hash(text: str) -> int:
    """
    Deterministic 32-bit string hash (h = h * 31 + c, signed overflow).

    Returns the absolute value of the signed 32-bit result.
    """
    h = 0
    for char in text:
        h = (h * 31 + ord(char)) & _MASK_32
    if h & _SIGN_32:
        h -= 1 << 32
    return abs(h)


def winnow(hashes: Sequence[int], window_size: int) -> Set[int]:
    """
    Minimum hash of each window of window_size consecutive hashes.

    Empty if there are fewer hashes than one window.
    """
    return {
        min(hashes[i:i + window_size])
        for i in range(len(hashes) - window_size + 1)
    }


def fingerprint(tokens: Sequence[Union[Token, str]], options: WinnowingOptions) -> Set[int]:
    """Winnowed fingerprint set of a token sequence."""
    hashes = [string_hash(gram) for gram in kgrams(tokens, options.k_gram_length)]
    return winnow(hashes, options.window_size)
