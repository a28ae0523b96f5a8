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
C++ language profile.

Common standard-library names (std, cout, vector, ...) are treated as
keywords so they survive normalization.
"""

from .base import CommentStyle, LanguageProfile


CPP = LanguageProfile(
    name="cpp",
    display_name="C++",
    keywords=frozenset({
        "int", "double", "float", "char", "bool", "void", "string", "vector",
        "class", "struct", "public", "private", "protected", "virtual", "static",
        "const", "volatile", "mutable", "if", "else", "for", "while", "do",
        "switch", "case", "default", "break", "continue", "return", "try",
        "catch", "throw", "new", "delete", "this", "true", "false", "nullptr",
        "include", "using", "namespace", "std", "cout", "cin", "endl",
    }),
    operators=(
        "++", "--", "+=", "-=", "*=", "/=", "%=", "==", "!=", "<=", ">=",
        "&&", "||", "!", "+", "-", "*", "/", "%", "=", "<", ">", "&", "|",
        "^", "~", "<<", ">>", "->", "::", ".*", "->*",
    ),
    comment_style=CommentStyle.C_FAMILY,
    extensions=(".cpp", ".cc", ".cxx", ".hpp", ".hxx", ".h"),
)
