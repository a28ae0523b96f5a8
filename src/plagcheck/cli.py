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
CLI entry point for plagcheck.

Usage:
    plagcheck <file1> <file2> [options]
    plagcheck --list-languages
    plagcheck --help
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .analyzer import create_analyzer
from .config import ConfigError, load_config, validate_config
from .languages import detect_language, get_profile, supported_languages
from .reporter import OutputFormat, report_result


# Extension to output format mapping for -o FILE.EXT
EXTENSION_FORMAT_MAP = {
    '.md': 'markdown',
    '.json': 'json',
    '.txt': 'text',
}

# Exit status when --threshold is reached
EXIT_THRESHOLD_REACHED = 2


def merge_config_with_cli(
    config: dict,
    cli_value,
    config_key: str,
    default_value,
):
    """
    Merge config file value with CLI value.

    If CLI value differs from default, use CLI (user explicitly set it).
    Otherwise, use config value if present, else use default.
    """
    if cli_value != default_value:
        return cli_value
    return config.get(config_key, default_value)


def read_source(path: Path) -> str:
    """Read a source file, exiting with status 1 if it cannot be read."""
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        click.echo(f"❌ Cannot read {path}: {e}", err=True)
        sys.exit(1)


def resolve_language(lang: Optional[str], file1: Path, file2: Path) -> Optional[str]:
    """Explicit language, else detected from the first file's extension."""
    if lang:
        return lang.lower()

    detected1 = detect_language(file1)
    detected2 = detect_language(file2)
    if detected1 and detected2 and detected1 != detected2:
        click.echo(
            f"⚠️  {file1.name} looks like {detected1} but {file2.name} looks like "
            f"{detected2}; using {detected1}",
            err=True,
        )
    return detected1 or detected2


def print_languages() -> None:
    """Print the supported languages and their file extensions."""
    click.echo("Supported languages:")
    for profile in supported_languages():
        exts = ", ".join(profile.extensions)
        click.echo(f"   {profile.name:<12} {profile.display_name:<12} {exts}")
    click.echo("Other languages are compared with the generic tokenizer.")


@click.command()
@click.argument("file1", type=click.Path(exists=True, dir_okay=False), required=False)
@click.argument("file2", type=click.Path(exists=True, dir_okay=False), required=False)
@click.option(
    "-l", "--lang",
    type=str,
    default=None,
    help="Force language (javascript, python, java, cpp, csharp)"
)
@click.option(
    "-s", "--sensitivity",
    type=click.Choice(["low", "medium", "high"]),
    default="medium",
    help="Match granularity: low, medium, high (default: medium)"
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(["text", "markdown", "json"]),
    default="text",
    help="Format printed to stdout (default: text); ignored with -o, which uses the file extension"
)
@click.option(
    "-o", "--output",
    type=str,
    default=None,
    help="Output file path (e.g., report.md, result.json, report.txt)"
)
@click.option(
    "-t", "--threshold",
    type=click.IntRange(0, 100),
    default=None,
    help="Exit with status 2 if similarity reaches this percentage"
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Show analysis details"
)
@click.option(
    "--list-languages",
    is_flag=True,
    help="Show supported languages and exit"
)
@click.version_option(version=__version__)
def main(
    file1: Optional[str],
    file2: Optional[str],
    lang: Optional[str],
    sensitivity: str,
    output_format: str,
    output: Optional[str],
    threshold: Optional[int],
    verbose: bool,
    list_languages: bool,
):
    """
    Detect similarity between two source files with MOSS-style winnowing.

    FILE1 and FILE2 are the code samples to compare.

    Examples:

      # Compare two submissions
      plagcheck alice.py bob.py

      # Catch shorter shared runs, write a markdown report
      plagcheck a.java b.java --sensitivity high -o report.md

      # Fail a CI step when samples are 80% similar or more
      plagcheck old.js new.js --threshold 80
    """
    if list_languages:
        print_languages()
        sys.exit(0)

    if file1 is None or file2 is None:
        click.echo("❌ Error: FILE1 and FILE2 are required.", err=True)
        click.echo("   Use --help for usage information.", err=True)
        sys.exit(1)

    # Config values override defaults, but explicit CLI args override config
    try:
        config = validate_config(load_config(Path.cwd()))
    except ConfigError as e:
        click.echo(f"❌ Invalid config value: {e}", err=True)
        sys.exit(1)

    sensitivity = merge_config_with_cli(config, sensitivity, "sensitivity", "medium")
    output_format = merge_config_with_cli(config, output_format, "format", "text")
    threshold = merge_config_with_cli(config, threshold, "threshold", None)
    verbose = merge_config_with_cli(config, verbose, "verbose", False)
    if lang is None and "lang" in config:
        lang = config["lang"]

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    path1 = Path(file1)
    path2 = Path(file2)
    language = resolve_language(lang, path1, path2)

    if verbose:
        if config:
            click.echo("📝 Loaded config from .plagcheckrc/.plagcheck.toml")
        click.echo(f"🔍 Comparing: {path1} ↔ {path2}")
        click.echo(f"   Language: {get_profile(language).display_name}")
        click.echo(f"   Sensitivity: {sensitivity}")

    try:
        analyzer = create_analyzer(sensitivity)
    except ValueError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    result = analyzer.analyze(read_source(path1), read_source(path2), language)

    if output:
        output_path = Path(output)
        ext = output_path.suffix.lower()

        if ext not in EXTENSION_FORMAT_MAP:
            valid_exts = ', '.join(EXTENSION_FORMAT_MAP.keys())
            click.echo(f"❌ Invalid output extension '{ext}'. Valid: {valid_exts}", err=True)
            sys.exit(1)

        report = report_result(
            result=result,
            file1=str(path1),
            file2=str(path2),
            language=language,
            sensitivity=sensitivity,
            output_format=OutputFormat(EXTENSION_FORMAT_MAP[ext]),
        )
        output_path.write_text(report, encoding="utf-8")
        click.echo(f"✅ Report written to: {output_path} ({result.similarity_percentage}% similar)")
    else:
        click.echo(report_result(
            result=result,
            file1=str(path1),
            file2=str(path2),
            language=language,
            sensitivity=sensitivity,
            output_format=OutputFormat(output_format),
        ))

    if threshold is not None and result.similarity_percentage >= threshold:
        sys.exit(EXIT_THRESHOLD_REACHED)


# Entry point alias for pyproject.toml
cli = main


if __name__ == "__main__":
    main()
