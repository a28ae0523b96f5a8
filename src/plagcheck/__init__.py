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
plagcheck - Detect copied code with MOSS-style winnowing fingerprints.

Tokenizes two code samples, normalizes identifiers and numbers so renamed
copies still line up, and scores their overlap. Purely lexical, no
network access, no state between calls.
"""

__version__ = "0.1.0"

from .analyzer import WinnowingAnalyzer, analyze, create_analyzer
from .config import load_config, find_config_file
from .models import AnalysisResult, MatchSegment, Sensitivity, Token, WinnowingOptions
from .reporter import OutputFormat, report_result
from .tokenizer import tokenize

__all__ = [
    "__version__",
    "WinnowingAnalyzer",
    "analyze",
    "create_analyzer",
    "tokenize",
    "AnalysisResult",
    "MatchSegment",
    "Sensitivity",
    "Token",
    "WinnowingOptions",
    "OutputFormat",
    "report_result",
    "load_config",
    "find_config_file",
]
