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
Generic fallback profile.

Used when the language id is not registered. No keywords, so every
identifier is normalized, and comments are left in place.
"""

from .base import CommentStyle, LanguageProfile


GENERIC = LanguageProfile(
    name="generic",
    display_name="Generic",
    keywords=frozenset(),
    operators=(
        "==", "!=", "<=", ">=", "&&", "||",
        "+", "-", "*", "/", "%", "=", "<", ">", "!", "&", "|", "^", "~",
    ),
    comment_style=CommentStyle.NONE,
)
