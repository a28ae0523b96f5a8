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
Winnowing analyzer - compares two code samples.

Combines tokenization, fingerprinting, LCS sub-scores, the renaming
heuristic and segment matching into one AnalysisResult. Pure and
stateless: an analyzer can be shared between threads.
"""

from typing import Optional, Union
import logging

from .fingerprint import fingerprint
from .matcher import detect_variable_renaming, find_matching_segments
from .models import AnalysisResult, Sensitivity, WinnowingOptions
from .similarity import (
    control_flow_similarity,
    logic_pattern_similarity,
    set_similarity,
    structural_similarity,
    to_percentage,
)
from .tokenizer import tokenize


logger = logging.getLogger(__name__)

DEFAULT_SENSITIVITY = Sensitivity.MEDIUM


class WinnowingAnalyzer:
    """MOSS-style similarity analyzer with fixed winnowing options."""

    def __init__(self, options: WinnowingOptions):
        self.options = options

    def analyze(self, code1: str, code2: str, language: Optional[str]) -> AnalysisResult:
        """
        Compare two code samples.

        Never raises for string input: empty or unknown-language samples
        score through the definitional fallbacks (0% overlap, 100% for two
        empty filtered sequences).

        Args:
            code1: First sample
            code2: Second sample
            language: Language id; unknown ids use generic tokenization

        Returns:
            AnalysisResult with percentages, renaming flag and segments
        """
        tokens1 = tokenize(code1, language)
        tokens2 = tokenize(code2, language)

        fingerprints1 = fingerprint(tokens1, self.options)
        fingerprints2 = fingerprint(tokens2, self.options)

        logger.debug(
            f"Tokens: {len(tokens1)}/{len(tokens2)}, "
            f"fingerprints: {len(fingerprints1)}/{len(fingerprints2)} "
            f"(k={self.options.k_gram_length}, w={self.options.window_size})"
        )

        matches = find_matching_segments(tokens1, tokens2)

        return AnalysisResult(
            similarity_percentage=to_percentage(set_similarity(fingerprints1, fingerprints2)),
            structural_similarity=to_percentage(structural_similarity(tokens1, tokens2)),
            control_flow=to_percentage(control_flow_similarity(tokens1, tokens2)),
            logic_patterns=to_percentage(logic_pattern_similarity(tokens1, tokens2)),
            variable_renaming=detect_variable_renaming(tokens1, tokens2),
            tokens_analyzed=len(tokens1) + len(tokens2),
            matching_segments=len(matches),
            matches=tuple(matches),
        )


def create_analyzer(
    sensitivity: Union[str, Sensitivity] = DEFAULT_SENSITIVITY,
) -> WinnowingAnalyzer:
    """
    Create an analyzer for a sensitivity preset.

    Raises:
        ValueError: If sensitivity is not low, medium or high
    """
    return WinnowingAnalyzer(WinnowingOptions.from_sensitivity(sensitivity))


def analyze(
    code1: str,
    code2: str,
    language: Optional[str],
    sensitivity: Union[str, Sensitivity] = DEFAULT_SENSITIVITY,
) -> AnalysisResult:
    """Compare two code samples with a sensitivity preset."""
    return create_analyzer(sensitivity).analyze(code1, code2, language)
