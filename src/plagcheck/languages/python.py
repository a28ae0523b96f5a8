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
Python language profile.

Comments and triple-quoted strings are dropped before tokenizing, so
docstrings never contribute tokens.
"""

from .base import CommentStyle, LanguageProfile


PYTHON = LanguageProfile(
    name="python",
    display_name="Python",
    keywords=frozenset({
        "def", "class", "if", "elif", "else", "for", "while", "break", "continue",
        "return", "try", "except", "finally", "raise", "with", "as", "import",
        "from", "in", "is", "and", "or", "not", "lambda", "yield", "global",
        "nonlocal", "assert", "del", "pass", "None", "True", "False",
    }),
    operators=(
        "+=", "-=", "*=", "/=", "//=", "%=", "**=", "&=", "|=", "^=",
        ">>=", "<<=", "==", "!=", "<=", ">=", "//", "**", "+", "-", "*",
        "/", "%", "=", "<", ">", "&", "|", "^", "~", "<<", ">>",
    ),
    comment_style=CommentStyle.HASH,
    extensions=(".py", ".pyw"),
)
