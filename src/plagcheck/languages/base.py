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
Base language profile.
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Tuple


class CommentStyle(Enum):
    """How comments are written in a language."""

    C_FAMILY = "c_family"    # // line and /* block */
    HASH = "hash"            # # line, plus triple-quoted docstrings
    NONE = "none"


@dataclass(frozen=True)
class LanguageProfile:
    """
    Lexical description of a language, used by the tokenizer.

    Identifiers in `keywords` are kept verbatim; any other identifier is
    collapsed to the generic identifier marker.
    """

    name: str                          # Language id, e.g. "python"
    display_name: str                  # Human-readable name
    keywords: FrozenSet[str]
    operators: Tuple[str, ...]
    comment_style: CommentStyle = CommentStyle.NONE
    extensions: Tuple[str, ...] = ()

    def is_keyword(self, word: str) -> bool:
        """True if word is a reserved word of this language."""
        return word in self.keywords

    @property
    def operators_longest_first(self) -> Tuple[str, ...]:
        """Operators ordered so that longer ones win over their prefixes."""
        return tuple(sorted(set(self.operators), key=lambda op: (-len(op), op)))
