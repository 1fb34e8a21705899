#!/usr/bin/env python3
"""
casecraft CLI

Command-line interface for the text transformation engine.

Usage:
    python -m casecraft <transform> [text ...] [options]
    python -m casecraft uppercase hello world
    python -m casecraft boldText --file notes.txt -o bold.txt
    echo "the the cat" | python -m casecraft adjacentDuplicateWords
    python -m casecraft zalgoText "spooky" --intensity 15 --seed 7
    python -m casecraft --list --category "Social Media"
    python -m casecraft --analyze --file essay.txt

Options:
    --list               List available transforms
    --analyze            Print text statistics instead of transforming
    --json               With --analyze, print the statistics as JSON
    -o, --output FILE    Write the result to a file
    --favorite ID        Toggle a favorite transform
    --history            Show recently applied transforms
    --clear-prefs        Forget favorites and history
"""

import argparse
import json
import logging
import sys

from . import __version__
from .analysis import analyze_text
from .core import (
    FAVORITES_CATEGORY,
    TextTransformer,
    UnknownTransformError,
    categories,
    filter_transforms,
    find,
    list_transforms,
)
from .storage import PreferenceError, PreferenceStore

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="casecraft",
        description=(
            "Text Transformation Engine\n\n"
            "Applies named transforms to text: case conversion, Unicode\n"
            "font styles, text effects, cleanup and simple encodings."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m casecraft uppercase hello world\n"
            "  python -m casecraft pigLatin --file story.txt\n"
            "  cat list.txt | python -m casecraft sortLines      # read stdin\n"
            "  python -m casecraft wideText hi -o wide.txt         # save to file\n"
            "  python -m casecraft --list --search bold            # find transforms\n"
            "  python -m casecraft --analyze --file essay.txt      # statistics\n"
        ),
    )

    parser.add_argument(
        "transform",
        nargs="?",
        help="Transform id to apply (see --list)",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to transform (default: --file or stdin)",
    )
    parser.add_argument(
        "-f", "--file",
        default=None,
        help="Read input text from a UTF-8 file",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Write the result to a UTF-8 file instead of stdout",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available transforms and exit",
    )
    parser.add_argument(
        "--category",
        default=None,
        help=f"Restrict --list to one category: {', '.join(categories())}",
    )
    parser.add_argument(
        "--search",
        default="",
        help="Restrict --list to transforms whose name or description matches",
    )
    parser.add_argument(
        "--favorites",
        action="store_true",
        help="Restrict --list to favorite transforms",
    )
    parser.add_argument(
        "--analyze",
        action="store_true",
        help="Print statistics for the input text and exit",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="With --analyze, print the statistics as JSON",
    )
    parser.add_argument(
        "--intensity",
        type=float,
        default=TextTransformer.DEFAULT_INTENSITY,
        help=f"Zalgo intensity (default: {TextTransformer.DEFAULT_INTENSITY})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the random effects for reproducible output",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unknown transform ids instead of echoing the input",
    )
    parser.add_argument(
        "--favorite",
        metavar="ID",
        default=None,
        help="Toggle a transform as favorite and exit",
    )
    parser.add_argument(
        "--history",
        action="store_true",
        help="Show recently applied transforms and exit",
    )
    parser.add_argument(
        "--clear-prefs",
        action="store_true",
        help="Forget all favorites and history and exit",
    )
    parser.add_argument(
        "--prefs",
        default=None,
        help="Preference file (default: $CASECRAFT_HOME/preferences.json)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args(argv)

    if not args.list and (args.category or args.search or args.favorites):
        parser.error("--category, --search and --favorites only apply with --list")
    if args.json and not args.analyze:
        parser.error("--json only applies with --analyze")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    prefs = PreferenceStore(args.prefs)

    try:
        if args.clear_prefs:
            prefs.clear()
            print(f"[CLEARED] {prefs.path}")
            return 0
        if args.favorite:
            return _toggle_favorite(prefs, args.favorite)
        if args.history:
            return _show_history(prefs)
        if args.list:
            return _show_transforms(args.category, args.search, prefs.load_favorites(), args.favorites)

        if args.analyze:
            # With --analyze a lone positional argument is text, not a transform id
            words = ([args.transform] if args.transform else []) + args.text
            _show_analysis(_read_input(words, args.file), args.json)
            return 0

        if not args.transform:
            parser.print_help()
            print("\nError: No transform given. Use --list to see available transforms.")
            return 1

        engine = TextTransformer(seed=args.seed, intensity=args.intensity, strict=args.strict)
        text = _read_input(args.text, args.file)
        result = engine.apply(args.transform, text)

        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(result)
            print(f"[SAVED] {args.output}")
        else:
            print(result)

        descriptor = find(args.transform)
        if descriptor is not None:
            try:
                prefs.add_to_history(descriptor.id)
            except PreferenceError as e:
                logger.warning("History not saved: %s", e)
        return 0

    except UnknownTransformError as e:
        print(f"[ERROR] Unknown transform: {e.args[0]}", file=sys.stderr)
        return 1
    except (OSError, ValueError, PreferenceError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1


def _read_input(words, file_path):
    """Input text from arguments, a file, or stdin, in that order.

    Text read from a file or stdin loses one trailing line break, which
    editors and shell pipes append and which would otherwise count as an
    extra empty line.
    """
    if words:
        return " ".join(words)
    if file_path:
        with open(file_path, "r", encoding="utf-8") as f:
            return _strip_final_newline(f.read())
    if sys.stdin is not None and not sys.stdin.isatty():
        return _strip_final_newline(sys.stdin.read())
    return ""


def _strip_final_newline(text):
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


def _show_transforms(category, query, favorites, only_favorites=False):
    """Display transforms grouped by category.

    Favorites are marked with "*" and transforms that draw on the random
    source with "(random)".
    """
    transforms = filter_transforms(list_transforms(), query=query, category=category)
    if only_favorites:
        transforms = filter_transforms(transforms, category=FAVORITES_CATEGORY, favorites=favorites)
    if not transforms:
        print("No transforms match.")
        return 0

    print("\nAvailable Transforms:")
    print("-" * 40)
    current = None
    for t in transforms:
        if t.category is not current:
            current = t.category
            print(f"\n  {current.value}:")
        marker = " *" if t.id in favorites else ""
        random_marker = " (random)" if t.randomized else ""
        print(f"    {t.id:<24} {t.name}{random_marker}{marker}")
    print()
    return 0


def _show_analysis(text, as_json=False):
    stats = analyze_text(text)
    if as_json:
        print(json.dumps(stats.to_dict(), indent=2, ensure_ascii=False))
        return
    print("\nText Analysis:")
    print("-" * 40)
    for title, value in stats.as_rows():
        print(f"  {title + ':':<26} {value}")
    print()


def _toggle_favorite(prefs, transform_id):
    descriptor = find(transform_id)
    if descriptor is None:
        print(f"[ERROR] Unknown transform: {transform_id}", file=sys.stderr)
        return 1
    added = prefs.toggle_favorite(descriptor.id)
    print(f"[{'ADDED' if added else 'REMOVED'}] {descriptor.id}")
    return 0


def _show_history(prefs):
    history = prefs.load_history()
    if not history:
        print("No transforms applied yet.")
        return 0
    print("\nRecent Transforms:")
    print("-" * 40)
    for i, transform_id in enumerate(history, start=1):
        descriptor = find(transform_id)
        name = descriptor.name if descriptor else "(no longer available)"
        marker = " *" if prefs.is_favorite(transform_id) else ""
        print(f"  {i:>2}. {transform_id:<24} {name}{marker}")
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
