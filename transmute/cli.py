"""Command-line entry point: prose in, highlighted pseudo-code out."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Optional

from rich.console import Console

from .api import generate_code
from .highlighter import highlight, tokenize
from .languages import SUPPORTED_LANGUAGES, get_language
from .render import render_rich
from .synth_types import SynthesisMode
from .themes import DEFAULT_REGISTRY, ThemeRegistry, default_theme
from . import constants

logger = logging.getLogger(__name__)

FORMAT_HTML = "html"
FORMAT_PLAIN = "plain"
FORMAT_TERMINAL = "terminal"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="transmute", description="Turn prose into syntax-highlighted pseudo-code"
    )
    parser.add_argument("file", nargs="?", help="Text file to transmute (default: stdin)")
    parser.add_argument(
        "--language",
        "-l",
        default=constants.DEFAULT_LANGUAGE,
        help=f"Target language, one of {', '.join(SUPPORTED_LANGUAGES)} "
        f"(default: {constants.DEFAULT_LANGUAGE})",
    )
    parser.add_argument(
        "--theme",
        "-t",
        default=constants.DEFAULT_THEME,
        help=f"Colour theme (default: {constants.DEFAULT_THEME})",
    )
    parser.add_argument(
        "--mode",
        "-m",
        default=constants.MODE_SEEDED,
        choices=[m.value for m in SynthesisMode],
        help="Line synthesis mode (default: seeded)",
    )
    parser.add_argument(
        "--seed", "-s", type=int, default=None, help="Seed for random mode and document literals"
    )
    parser.add_argument(
        "--format",
        "-f",
        default=FORMAT_HTML,
        choices=[FORMAT_HTML, FORMAT_PLAIN, FORMAT_TERMINAL],
        help="Output format (default: html)",
    )
    parser.add_argument(
        "--document",
        action="store_true",
        help="Read headings, lists and links and scaffold them as code",
    )
    parser.add_argument("--themes-file", default=None, help="JSON file of extra themes")
    parser.add_argument(
        "--list-languages", action="store_true", help="List target languages and exit"
    )
    parser.add_argument("--list-themes", action="store_true", help="List themes and exit")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable info logging")
    return parser


def _read_input(path: Optional[str]) -> str:
    if path is None:
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def _print_languages() -> None:
    for language_id in SUPPORTED_LANGUAGES:
        language = get_language(language_id)
        print(f"{language_id:<12} {language.DISPLAY_NAME:<12} {language.EXTENSION}")


def _print_themes(registry: ThemeRegistry) -> None:
    for theme_id in registry.ids():
        print(f"{theme_id:<18} {registry.get(theme_id).display_name}")


def main(argv: Optional[list[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    registry = DEFAULT_REGISTRY
    if args.themes_file:
        try:
            registry = ThemeRegistry.from_json(args.themes_file)
        except OSError as exc:
            print(f"transmute: cannot read {args.themes_file}: {exc.strerror}", file=sys.stderr)
            return 1
        except ValueError as exc:
            print(f"transmute: invalid themes file {args.themes_file}: {exc}", file=sys.stderr)
            return 1

    if args.list_languages:
        _print_languages()
        return 0
    if args.list_themes:
        _print_themes(registry)
        return 0

    try:
        text = _read_input(args.file)
    except OSError as exc:
        print(f"transmute: cannot read {args.file}: {exc.strerror}", file=sys.stderr)
        return 1

    theme = registry.get(args.theme)
    if theme is None:
        logger.info("Unknown theme %r", args.theme)

    rng = random.Random(args.seed) if args.seed is not None else None
    code = generate_code(text, args.language, args.mode, rng=rng, document=args.document)

    if args.format == FORMAT_PLAIN:
        print(code)
    elif args.format == FORMAT_TERMINAL:
        Console().print(render_rich(tokenize(code, args.language), theme or default_theme()))
    else:
        print(highlight(code, args.language, theme))
    return 0


if __name__ == "__main__":
    sys.exit(main())
