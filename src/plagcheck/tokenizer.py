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
Lexical tokenizer.

Turns source text into a normalized token sequence: keywords, operators
and punctuation are kept verbatim, user identifiers become IDENTIFIER and
numeric literals become NUMBER. Two programs that differ only in naming
therefore tokenize to the same text sequence.
"""

from functools import lru_cache
from typing import List, Optional
import logging
import re

from .comments import strip_comments
from .languages import LanguageProfile, get_profile, is_supported
from .models import IDENTIFIER, NUMBER, Token


logger = logging.getLogger(__name__)

IDENTIFIER_PATTERN = r"[A-Za-z_][A-Za-z0-9_]*"
NUMBER_PATTERN = r"[0-9]+(?:\.[0-9]+)?"
PUNCTUATION_PATTERN = r"[{}();,\[\].]"


@lru_cache(maxsize=None)
def _token_pattern(profile: LanguageProfile) -> "re.Pattern[str]":
    """Build the combined scanning pattern for a profile."""
    alternatives = []
    operators = profile.operators_longest_first
    if operators:
        alternatives.append(
            "(?P<op>" + "|".join(re.escape(op) for op in operators) + ")"
        )
    alternatives.append(f"(?P<ident>{IDENTIFIER_PATTERN})")
    alternatives.append(f"(?P<num>{NUMBER_PATTERN})")
    alternatives.append(f"(?P<punct>{PUNCTUATION_PATTERN})")
    alternatives.append(r"(?P<ws>\s+)")
    return re.compile("|".join(alternatives))


def tokenize(code: str, language: Optional[str]) -> List[Token]:
    """
    Tokenize code for the given language.

    Unknown languages use the generic profile. Characters no rule matches
    (string quotes, '@', ...) are skipped.

    Args:
        code: Source text
        language: Language id

    Returns:
        Tokens in source order
    """
    if not is_supported(language):
        logger.debug(f"No profile for language {language!r}, using generic tokenizer")

    profile = get_profile(language)
    cleaned = strip_comments(code, profile.name)
    pattern = _token_pattern(profile)

    tokens: List[Token] = []
    for match in pattern.finditer(cleaned):
        kind = match.lastgroup
        text = match.group()

        if kind == "ws":
            continue
        if kind == "ident":
            normalized = text if profile.is_keyword(text) else IDENTIFIER
            tokens.append(Token(normalized, text))
        elif kind == "num":
            tokens.append(Token(NUMBER, text))
        else:
            tokens.append(Token(text, text))

    return tokens


def token_texts(tokens: List[Token]) -> List[str]:
    """Normalized text of each token."""
    return [t.text for t in tokens]
