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
C# language profile.
"""

from .base import CommentStyle, LanguageProfile


CSHARP = LanguageProfile(
    name="csharp",
    display_name="C#",
    keywords=frozenset({
        "public", "private", "protected", "internal", "static", "readonly",
        "const", "volatile", "class", "struct", "interface", "enum", "namespace",
        "using", "void", "int", "double", "float", "decimal", "char", "bool",
        "string", "object", "var", "if", "else", "for", "foreach", "while",
        "do", "switch", "case", "default", "break", "continue", "return",
        "try", "catch", "finally", "throw", "new", "this", "base", "null",
        "true", "false", "is", "as", "typeof", "sizeof", "checked", "unchecked",
    }),
    operators=(
        "++", "--", "+=", "-=", "*=", "/=", "%=", "&=", "|=", "^=", "<<=",
        ">>=", "==", "!=", "<=", ">=", "&&", "||", "!", "+", "-", "*", "/",
        "%", "=", "<", ">", "&", "|", "^", "~", "<<", ">>", "??", "?.", "=>",
    ),
    comment_style=CommentStyle.C_FAMILY,
    extensions=(".cs",),
)
