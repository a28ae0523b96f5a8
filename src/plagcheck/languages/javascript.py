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
JavaScript language profile.
"""

from .base import CommentStyle, LanguageProfile


JAVASCRIPT = LanguageProfile(
    name="javascript",
    display_name="JavaScript",
    keywords=frozenset({
        "function", "var", "let", "const", "if", "else", "for", "while", "do",
        "switch", "case", "default", "break", "continue", "return", "try", "catch",
        "finally", "throw", "class", "extends", "constructor", "super", "this",
        "new", "typeof", "instanceof", "in", "of", "import", "export", "from",
        "async", "await", "promise", "null", "undefined", "true", "false",
    }),
    operators=(
        "++", "--", "+=", "-=", "*=", "/=", "%=", "==", "===", "!=", "!==",
        "<=", ">=", "&&", "||", "=>", "?", ":", "+", "-", "*", "/", "%",
        "=", "<", ">", "!", "&", "|", "^", "~", "<<", ">>",
    ),
    comment_style=CommentStyle.C_FAMILY,
    extensions=(".js", ".mjs", ".cjs", ".jsx"),
)
