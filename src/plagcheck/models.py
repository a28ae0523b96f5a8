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
Data models for plagcheck.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Tuple, Union


# Markers that replace user identifiers and numeric literals
IDENTIFIER = "IDENTIFIER"
NUMBER = "NUMBER"


@dataclass(frozen=True)
class Token:
    """A normalized token plus the source text it was scanned from."""

    text: str    # Keyword, operator, punctuation, IDENTIFIER or NUMBER
    raw: str     # Literal source text

    @property
    def is_identifier(self) -> bool:
        """True for user identifiers (not keywords)."""
        return self.text == IDENTIFIER

    def __str__(self) -> str:
        return self.text


class Sensitivity(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# sensitivity -> (k-gram length, window size)
SENSITIVITY_PRESETS: Dict[Sensitivity, Tuple[int, int]] = {
    Sensitivity.LOW: (5, 6),
    Sensitivity.MEDIUM: (4, 5),
    Sensitivity.HIGH: (3, 4),
}


@dataclass(frozen=True)
class WinnowingOptions:
    """K-gram and window sizes for one analysis."""

    k_gram_length: int
    window_size: int
    sensitivity: Sensitivity = Sensitivity.MEDIUM

    def __post_init__(self):
        if self.k_gram_length < 1:
            raise ValueError(f"k_gram_length must be >= 1, got {self.k_gram_length}")
        if self.window_size < 1:
            raise ValueError(f"window_size must be >= 1, got {self.window_size}")

    @classmethod
    def from_sensitivity(cls, sensitivity: Union[str, Sensitivity]) -> "WinnowingOptions":
        """
        Build options from a sensitivity preset.

        Higher sensitivity means shorter k-grams and windows, so shorter
        shared runs produce common fingerprints.

        Raises:
            ValueError: If sensitivity is not low, medium or high
        """
        if not isinstance(sensitivity, Sensitivity):
            try:
                sensitivity = Sensitivity(str(sensitivity).lower())
            except ValueError:
                valid = ", ".join(s.value for s in Sensitivity)
                raise ValueError(
                    f"Unknown sensitivity '{sensitivity}'. Valid: {valid}"
                ) from None

        k_gram_length, window_size = SENSITIVITY_PRESETS[sensitivity]
        return cls(k_gram_length, window_size, sensitivity)

    @property
    def guarantee_length(self) -> int:
        """Shared runs at least this many tokens long always share a fingerprint."""
        return self.k_gram_length + self.window_size - 1


@dataclass(frozen=True)
class MatchSegment:
    """A contiguous run of equal tokens found in both samples."""

    id: int                  # 1-based ordinal
    code1_lines: str         # Approximate line range, e.g. "1-2"
    code2_lines: str
    code1_content: str       # Matched tokens joined by spaces
    code2_content: str
    variable_changes: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "code1Lines": self.code1_lines,
            "code2Lines": self.code2_lines,
            "code1Content": self.code1_content,
            "code2Content": self.code2_content,
            "variableChanges": list(self.variable_changes),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MatchSegment":
        return cls(
            id=int(data["id"]),
            code1_lines=str(data["code1Lines"]),
            code2_lines=str(data["code2Lines"]),
            code1_content=str(data["code1Content"]),
            code2_content=str(data["code2Content"]),
            variable_changes=tuple(data.get("variableChanges", ())),
        )


# Similarity percentage thresholds for the verdict, highest first
SEVERITY_LEVELS: List[Tuple[int, str]] = [
    (80, "high"),
    (60, "moderate"),
    (40, "low"),
]


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of comparing two code samples."""

    similarity_percentage: int     # 0-100, from winnowed fingerprints
    structural_similarity: int     # 0-100
    control_flow: int              # 0-100
    logic_patterns: int            # 0-100
    variable_renaming: bool
    tokens_analyzed: int           # Token count of both samples combined
    matching_segments: int         # len(matches)
    matches: Tuple[MatchSegment, ...] = field(default_factory=tuple)

    @property
    def level(self) -> str:
        """Severity verdict: high, moderate, low or minimal."""
        for threshold, name in SEVERITY_LEVELS:
            if self.similarity_percentage >= threshold:
                return name
        return "minimal"

    def to_dict(self) -> Dict[str, Any]:
        """Record form, keyed the way the result is stored and served."""
        return {
            "similarityPercentage": self.similarity_percentage,
            "structuralSimilarity": self.structural_similarity,
            "controlFlow": self.control_flow,
            "logicPatterns": self.logic_patterns,
            "variableRenaming": self.variable_renaming,
            "tokensAnalyzed": self.tokens_analyzed,
            "matchingSegments": self.matching_segments,
            "matches": [m.to_dict() for m in self.matches],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AnalysisResult":
        """Rebuild a result from the output of to_dict()."""
        matches = tuple(MatchSegment.from_dict(m) for m in data.get("matches", []))
        return cls(
            similarity_percentage=int(data["similarityPercentage"]),
            structural_similarity=int(data["structuralSimilarity"]),
            control_flow=int(data["controlFlow"]),
            logic_patterns=int(data["logicPatterns"]),
            variable_renaming=bool(data["variableRenaming"]),
            tokens_analyzed=int(data["tokensAnalyzed"]),
            matching_segments=int(data.get("matchingSegments", len(matches))),
            matches=matches,
        )
