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
Language profiles for tokenization.

Each supported language is one LanguageProfile entry in the registry.
Adding a language means adding a module with a profile and registering it
here; nothing else branches on the language id.
"""

from pathlib import Path
from typing import Dict, List, Optional

from .base import CommentStyle, LanguageProfile
from .cpp import CPP
from .csharp import CSHARP
from .generic import GENERIC
from .java import JAVA
from .javascript import JAVASCRIPT
from .python import PYTHON


# Language registry - maps language id to profile
_PROFILE_REGISTRY: Dict[str, LanguageProfile] = {}

# Extension to language mapping, filled from registered profiles
EXTENSION_MAP: Dict[str, str] = {}


def register_profile(profile: LanguageProfile) -> None:
    """Register a language profile and its file extensions."""
    _PROFILE_REGISTRY[profile.name.lower()] = profile
    for ext in profile.extensions:
        EXTENSION_MAP[ext.lower()] = profile.name.lower()


for _profile in (JAVASCRIPT, PYTHON, JAVA, CPP, CSHARP):
    register_profile(_profile)


def get_profile(language: Optional[str]) -> LanguageProfile:
    """
    Get the profile for a language id.

    Falls back to the generic profile if the id is not registered.
    """
    if not language:
        return GENERIC
    return _PROFILE_REGISTRY.get(language.lower(), GENERIC)


def is_supported(language: Optional[str]) -> bool:
    """True if the language id has a dedicated profile."""
    return bool(language) and language.lower() in _PROFILE_REGISTRY


def supported_languages() -> List[LanguageProfile]:
    """Registered profiles, in registration order."""
    return list(_PROFILE_REGISTRY.values())


def detect_language(file_path: Path) -> Optional[str]:
    """Detect language from file extension."""
    ext = file_path.suffix.lower()
    return EXTENSION_MAP.get(ext)


__all__ = [
    "CommentStyle",
    "LanguageProfile",
    "GENERIC",
    "EXTENSION_MAP",
    "register_profile",
    "get_profile",
    "is_supported",
    "supported_languages",
    "detect_language",
]
