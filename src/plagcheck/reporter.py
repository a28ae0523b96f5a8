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
Report generator - formats an analysis result for output.

Supports text, markdown, and json output formats.
"""

from typing import Optional
from enum import Enum
import json

from .languages import get_profile
from .models import AnalysisResult


class OutputFormat(Enum):
    TEXT = "text"
    MARKDOWN = "markdown"
    JSON = "json"


# Verdict headline per severity level
LEVEL_TITLES = {
    "high": "High Plagiarism Detected",
    "moderate": "Moderate Plagiarism Detected",
    "low": "Low Plagiarism Detected",
    "minimal": "Minimal Similarity",
}

LEVEL_ICONS = {
    "high": "🔴",
    "moderate": "🟠",
    "low": "🟡",
    "minimal": "🟢",
}


def report_result(
    result: AnalysisResult,
    file1: str,
    file2: str,
    language: Optional[str],
    sensitivity: str,
    output_format: OutputFormat = OutputFormat.TEXT,
) -> str:
    """
    Render an analysis result.

    Args:
        result: Result to render
        file1: Label of the first sample (usually its path)
        file2: Label of the second sample
        language: Language id used for tokenizing
        sensitivity: Sensitivity preset used
        output_format: Desired output format

    Returns:
        Formatted report string
    """
    if output_format == OutputFormat.TEXT:
        return _format_text(result, file1, file2, language, sensitivity)
    elif output_format == OutputFormat.MARKDOWN:
        return _format_markdown(result, file1, file2, language, sensitivity)
    elif output_format == OutputFormat.JSON:
        return _format_json(result, file1, file2, language, sensitivity)
    else:
        raise ValueError(f"Unknown format: {output_format}")


def _language_label(language: Optional[str]) -> str:
    return get_profile(language).display_name


def _format_text(
    result: AnalysisResult,
    file1: str,
    file2: str,
    language: Optional[str],
    sensitivity: str,
) -> str:
    """Plain text format with unicode decorations."""
    lines = []

    icon = LEVEL_ICONS[result.level]
    lines.append(f"{icon} {LEVEL_TITLES[result.level]}: {result.similarity_percentage}% similar")
    lines.append(f"   {file1} ↔ {file2}")
    lines.append(f"   Language: {_language_label(language)} | Sensitivity: {sensitivity}")
    lines.append("")

    lines.append("━" * 70)
    lines.append(f"Structural similarity: {result.structural_similarity}%")
    lines.append(f"Control flow:          {result.control_flow}%")
    lines.append(f"Logic patterns:        {result.logic_patterns}%")
    lines.append(f"Variable renaming:     {'yes' if result.variable_renaming else 'no'}")
    lines.append(f"Tokens analyzed:       {result.tokens_analyzed}")
    lines.append(f"Matching segments:     {result.matching_segments}")
    lines.append("━" * 70)

    if result.matches:
        lines.append("")
        lines.append("📍 Matching Segments:")
        for match in result.matches:
            lines.append(
                f"   #{match.id}  lines {match.code1_lines} ↔ lines {match.code2_lines}"
            )
            lines.append(f"     └─ {_truncate(match.code1_content, 60)}")

    return "\n".join(lines) + "\n"


def _format_markdown(
    result: AnalysisResult,
    file1: str,
    file2: str,
    language: Optional[str],
    sensitivity: str,
) -> str:
    """Markdown format for documentation."""
    lines = []

    lines.append("# Code Similarity Report")
    lines.append("")
    lines.append(f"**Files:** `{file1}` vs `{file2}`  ")
    lines.append(f"**Language:** {_language_label(language)}  ")
    lines.append(f"**Sensitivity:** {sensitivity}  ")
    lines.append(f"**Verdict:** {LEVEL_TITLES[result.level]}")
    lines.append("")

    lines.append("## Scores")
    lines.append("")
    lines.append("| Metric | Value |")
    lines.append("|--------|-------|")
    lines.append(f"| Similarity | {result.similarity_percentage}% |")
    lines.append(f"| Structural similarity | {result.structural_similarity}% |")
    lines.append(f"| Control flow | {result.control_flow}% |")
    lines.append(f"| Logic patterns | {result.logic_patterns}% |")
    lines.append(f"| Variable renaming | {'yes' if result.variable_renaming else 'no'} |")
    lines.append(f"| Tokens analyzed | {result.tokens_analyzed} |")
    lines.append(f"| Matching segments | {result.matching_segments} |")
    lines.append("")

    if result.matches:
        lines.append("## Matching Segments")
        lines.append("")
        lines.append("| # | Lines (1) | Lines (2) | Tokens |")
        lines.append("|---|-----------|-----------|--------|")
        for match in result.matches:
            content = _truncate(match.code1_content, 80).replace("|", "\\|")
            lines.append(
                f"| {match.id} | {match.code1_lines} | {match.code2_lines} | `{content}` |"
            )
        lines.append("")

    return "\n".join(lines)


def _format_json(
    result: AnalysisResult,
    file1: str,
    file2: str,
    language: Optional[str],
    sensitivity: str,
) -> str:
    """JSON format for programmatic use."""
    data = {
        "meta": {
            "file1": file1,
            "file2": file2,
            "language": get_profile(language).name,
            "sensitivity": sensitivity,
            "level": result.level,
        },
        "result": result.to_dict(),
    }
    return json.dumps(data, indent=2)


def _truncate(text: str, max_chars: int) -> str:
    if len(text) > max_chars:
        return text[:max_chars - 3] + "..."
    return text
