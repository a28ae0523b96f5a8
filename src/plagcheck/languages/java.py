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
Java language profile.
"""

from .base import CommentStyle, LanguageProfile


JAVA = LanguageProfile(
    name="java",
    display_name="Java",
    keywords=frozenset({
        "public", "private", "protected", "static", "final", "abstract", "class",
        "interface", "extends", "implements", "package", "import", "void", "int",
        "double", "float", "char", "boolean", "String", "if", "else", "for",
        "while", "do", "switch", "case", "default", "break", "continue", "return",
        "try", "catch", "finally", "throw", "throws", "new", "this", "super",
        "null", "true", "false",
    }),
    operators=(
        "++", "--", "+=", "-=", "*=", "/=", "%=", "==", "!=", "<=", ">=",
        "&&", "||", "!", "+", "-", "*", "/", "%", "=", "<", ">", "&", "|",
        "^", "~", "<<", ">>", ">>>",
    ),
    comment_style=CommentStyle.C_FAMILY,
    extensions=(".java",),
)
