"""Command-line interface for the storefront theme rescaler.

WHY: The storefront build runs as a shell pipeline. The CLI wires the
full pipeline — load the default config dump, rescale, merge with the
storefront tokens, format, save — behind a single command.

HOW: Uses argparse to accept the default config JSON path, base font size,
parsing mode, output format selection and output location. Status
messages go to stderr; output files are saved to --output-dir (default:
current directory) as {stem}{suffix}.

RULES:
- Positional argument: JSON dump of Tailwind's default configuration
- --formats: comma-separated formatter keys (default: all registered)
- --theme-only writes {"theme": {"extend": <rescaled groups>}} only
- --strict/--no-strict (alias --lenient) overrides THEME_STRICT_REM;
  non-strict keeps the legacy "NaNrem" output for malformed rem literals
- Output naming: {stem}{suffix}, numeric counter on conflict
  (tailwind.config-2.json) unless --overwrite
- Status output goes to stderr (not stdout); errors exit with status 1
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema

from theme_rescaler.config import (
    DEFAULT_OUTPUT_STEM,
    DEFAULT_STRICT_REM,
    load_base_font_size,
)
from theme_rescaler.core.loader import load_default_config
from theme_rescaler.core.rem import RemScale
from theme_rescaler.core.rescaler import rescale_theme
from theme_rescaler.core.theme import build_config
from theme_rescaler.formatters import FORMATTERS
from theme_rescaler.formatters.base import FormatterOutput


def _status(msg: str) -> None:
    """Print a status message to stderr.

    RULES:
    - All status messages go to stderr
    - Always flush after writing
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
    overwrite: bool = False,
) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    WHY: Re-running the build next to a hand-maintained config must not
    silently replace it unless asked to.

    HOW: Check if {stem}{suffix} exists. If so, increment a counter
    and insert it before the file extension until a free name is found.

    RULES:
    - First attempt: {stem}{suffix} (e.g. tailwind.config.json)
    - overwrite=True always returns the first attempt
    - Conflict: split suffix at last dot, insert counter before extension
      (e.g. tailwind.config-2.json)
    - Counter starts at 2 and increments
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if overwrite or not base_path.exists():
        return base_path

    # e.g. ".config.json" → (".config", ".json")
    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(
    output: FormatterOutput,
    stem: str,
    output_dir: Path,
    overwrite: bool = False,
) -> Path:
    """Write one formatter output as UTF-8 text and return its path."""
    path = _resolve_output_path(stem, output.suffix, output_dir, overwrite=overwrite)
    path.write_text(output.content, encoding="utf-8")
    return path


def _select_formats(formats: Optional[str]) -> List[str]:
    if not formats:
        return list(FORMATTERS.keys())
    format_keys = [f.strip() for f in formats.split(",") if f.strip()]
    for key in format_keys:
        if key not in FORMATTERS:
            available = ", ".join(sorted(FORMATTERS.keys()))
            _fail("Unknown format '{}'. Available formats: {}".format(key, available))
    return format_keys


def _build(args: argparse.Namespace, default_config: Dict[str, Any], base_font_size: float) -> Dict[str, Any]:
    strict = args.strict
    if args.theme_only:
        scale = RemScale(base_font_size=base_font_size)
        return {"theme": {"extend": rescale_theme(default_config, scale, strict=strict)}}
    return build_config(default_config, base_font_size=base_font_size, strict=strict)


def run(args: argparse.Namespace) -> List[Path]:
    """Execute the full build pipeline.

    RULES:
    - Validate formats and output directory before reading any input
    - Any load, validation or rescaling error exits with status 1
    - Returns the list of saved paths
    """
    format_keys = _select_formats(args.formats)

    output_dir = Path(args.output_dir).resolve() if args.output_dir else Path.cwd()
    if not output_dir.is_dir():
        _fail("Output directory does not exist: {}".format(output_dir))

    try:
        if args.base_font_size is not None:
            base_font_size = args.base_font_size
        else:
            base_font_size = load_base_font_size()

        _status("Loading {}...".format(args.default_config))
        default_config = load_default_config(args.default_config)

        _status("Rescaling rem values for a {}px root...".format(base_font_size))
        config = _build(args, default_config, base_font_size)

        saved_files: List[Path] = []
        for key in format_keys:
            formatter = FORMATTERS[key]()
            _status("  Running {} formatter...".format(formatter.name))
            for output in formatter.format(config):
                saved_path = _save_output(output, args.stem, output_dir, overwrite=args.overwrite)
                saved_files.append(saved_path)
                _status("  Saved: {}".format(saved_path.name))
    except FileNotFoundError as e:
        _fail("File not found: {}".format(e.filename))
    except json.JSONDecodeError as e:
        _fail("Invalid JSON in {}: {}".format(args.default_config, e))
    except jsonschema.ValidationError as e:
        _fail("Configuration does not match the expected shape: {}".format(e.message))
    except ValueError as e:
        # Bad font size, malformed rem literal, etc.
        _fail(str(e))

    _status("")
    _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))
    return saved_files


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable — tests can inspect the parser without running the pipeline.
    """
    parser = argparse.ArgumentParser(
        prog="theme_rescaler",
        description="Rescale Tailwind's default rem values for a storefront root "
                    "font size and write the storefront Tailwind configuration.",
    )

    parser.add_argument(
        "default_config",
        help="Path to a JSON dump of Tailwind's default configuration.",
    )

    parser.add_argument(
        "--base-font-size",
        type=float,
        default=None,
        help="Storefront root font size in px "
             "(default: THEME_BASE_FONT_SIZE or 10).",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: all.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: current directory).",
    )

    parser.add_argument(
        "--stem",
        default=DEFAULT_OUTPUT_STEM,
        help="Output file name stem (default: %(default)s).",
    )

    parser.add_argument(
        "--theme-only",
        action="store_true",
        help="Write only the rescaled default theme groups.",
    )

    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=DEFAULT_STRICT_REM,
        help="Fail on malformed rem literals (default: %(default)s). "
             "--no-strict renders them as 'NaNrem'.",
    )

    parser.add_argument(
        "--lenient",
        dest="strict",
        action="store_false",
        default=DEFAULT_STRICT_REM,
        help="Same as --no-strict.",
    )

    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Replace existing output files instead of numbering new ones.",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every dropped theme group.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    run(args)


if __name__ == "__main__":
    main()
