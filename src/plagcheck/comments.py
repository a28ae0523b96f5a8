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
Comment stripping ahead of tokenization.

Removal is regex based, not a string-literal aware parser: a `//` inside a
string literal is still treated as a comment start.
"""

import re

from .languages import CommentStyle, get_profile


_LINE_COMMENT_C = re.compile(r"//.*$", re.MULTILINE)
_BLOCK_COMMENT_C = re.compile(r"/\*[\s\S]*?\*/")
_LINE_COMMENT_HASH = re.compile(r"#.*$", re.MULTILINE)
_TRIPLE_DOUBLE = re.compile(r'"""[\s\S]*?"""')
_TRIPLE_SINGLE = re.compile(r"'''[\s\S]*?'''")


def strip_comments(code: str, language: str) -> str:
    """
    Remove comments from code according to the language's comment style.

    Unknown languages are returned unchanged.

    Args:
        code: Source text
        language: Language id (e.g. "javascript", "python")

    Returns:
        Source text with comments removed
    """
    style = get_profile(language).comment_style

    if style == CommentStyle.C_FAMILY:
        code = _LINE_COMMENT_C.sub("", code)
        code = _BLOCK_COMMENT_C.sub("", code)
    elif style == CommentStyle.HASH:
        code = _LINE_COMMENT_HASH.sub("", code)
        # Docstrings go too, even when they contain code-like text
        code = _TRIPLE_DOUBLE.sub("", code)
        code = _TRIPLE_SINGLE.sub("", code)

    return code
