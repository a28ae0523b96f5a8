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
Configuration file support for plagcheck.

Looks for .plagcheckrc or .plagcheck.toml in the current directory or a
parent directory.
"""

from pathlib import Path
from typing import Optional, Dict, Any

try:
    import tomllib  # Python 3.11+
except ImportError:
    try:
        import tomli as tomllib  # type: ignore
    except ImportError:
        tomllib = None  # type: ignore

from .models import Sensitivity
from .reporter import OutputFormat


CONFIG_NAMES = [".plagcheckrc", ".plagcheck.toml"]
CONFIG_SECTION = "plagcheck"


class ConfigError(ValueError):
    """A [plagcheck] value has the wrong type or is out of range."""


def find_config_file(start_path: Path) -> Optional[Path]:
    """
    Search for a config file in start_path and its parent directories.

    The nearest directory wins; within one directory .plagcheckrc is
    preferred over .plagcheck.toml.

    Args:
        start_path: Directory to start searching from

    Returns:
        Path to config file if found, None otherwise
    """
    start = start_path.resolve()

    for directory in (start, *start.parents):
        candidates = [directory / name for name in CONFIG_NAMES]
        found = next((c for c in candidates if c.is_file()), None)
        if found is not None:
            return found

    return None


def load_config(path: Path) -> Dict[str, Any]:
    """
    Load plagcheck configuration.

    Returns an empty dict if no config file is found, the file cannot be
    read, or it is not valid TOML. Values are returned as written; use
    validate_config() before acting on them.

    Args:
        path: Directory to start searching from

    Returns:
        Dictionary of values from the [plagcheck] table

    Example config file (.plagcheckrc or .plagcheck.toml):
        [plagcheck]
        sensitivity = "high"
        lang = "java"
        format = "markdown"
        threshold = 80
        verbose = true
    """
    if tomllib is None:
        return {}

    config_path = find_config_file(path)

    if config_path is None:
        return {}

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return {}

    section = data.get(CONFIG_SECTION, {})
    return section if isinstance(section, dict) else {}


def _choice(key: str, value: Any, choices) -> str:
    if not isinstance(value, str) or value.lower() not in choices:
        raise ConfigError(f"{key} must be one of {', '.join(choices)}, got {value!r}")
    return value.lower()


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check and normalize known [plagcheck] keys.

    Unknown keys are passed through untouched. A threshold written as a
    numeric string ("80") is accepted and converted to int.

    Raises:
        ConfigError: If a known key has the wrong type or range
    """
    checked = dict(config)

    if "sensitivity" in config:
        checked["sensitivity"] = _choice(
            "sensitivity", config["sensitivity"], [s.value for s in Sensitivity]
        )

    if "format" in config:
        checked["format"] = _choice(
            "format", config["format"], [f.value for f in OutputFormat]
        )

    if "lang" in config:
        lang = config["lang"]
        if not isinstance(lang, str) or not lang.strip():
            raise ConfigError(f"lang must be a language name, got {lang!r}")
        checked["lang"] = lang.strip().lower()

    if "threshold" in config:
        threshold = config["threshold"]
        if isinstance(threshold, bool):
            raise ConfigError(f"threshold must be an integer 0-100, got {threshold!r}")
        try:
            threshold = int(threshold)
        except (TypeError, ValueError):
            raise ConfigError(
                f"threshold must be an integer 0-100, got {config['threshold']!r}"
            ) from None
        if not 0 <= threshold <= 100:
            raise ConfigError(f"threshold must be between 0 and 100, got {threshold}")
        checked["threshold"] = threshold

    if "verbose" in config and not isinstance(config["verbose"], bool):
        raise ConfigError(f"verbose must be true or false, got {config['verbose']!r}")

    return checked
