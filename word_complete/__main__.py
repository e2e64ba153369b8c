"""Command line entry point for word suggestions."""

from __future__ import annotations

import argparse
import logging
import os

from . import logging as wc_logging
from .completer import Completer
from .settings import SETTINGS_FILE, load_settings, save_settings
from .vocabulary import build_trie, load_words, read_word_file


def main(argv: list[str] | None = None) -> None:
    """Print suggestions for a prefix and optionally edit the custom dictionary."""
    parser = argparse.ArgumentParser(
        prog="word_complete",
        description="Suggest completions for a partially typed word",
    )
    parser.add_argument(
        "prefix",
        nargs="?",
        help="Text typed so far; the last word is completed",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of suggestions (default: from settings)",
    )
    parser.add_argument(
        "--settings",
        default=SETTINGS_FILE,
        help="Path to settings JSON",
    )
    parser.add_argument(
        "--words-file",
        default=os.getenv("WORD_COMPLETE_WORDS"),
        help="Plain word list to use instead of wordfreq",
    )
    parser.add_argument(
        "--add",
        action="append",
        default=[],
        metavar="WORD",
        help="Add a word to the custom dictionary",
    )
    parser.add_argument(
        "--remove",
        action="append",
        default=[],
        metavar="WORD",
        help="Remove a word from the custom dictionary",
    )
    parser.add_argument(
        "--clear-custom",
        action="store_true",
        help="Remove every word from the custom dictionary",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logs")
    args = parser.parse_args(argv)

    wc_logging.setup(logging.DEBUG if args.verbose else logging.WARNING)

    settings = load_settings(args.settings)
    if args.limit is not None:
        if args.limit < 1:
            parser.error("--limit must be at least 1")
        settings.max_suggestions = args.limit

    try:
        if args.words_file:
            words = read_word_file(args.words_file)
        else:
            words = load_words(settings.language)
    except FileNotFoundError:
        parser.error(f"Word file '{args.words_file}' not found")
    except ValueError as exc:
        parser.error(str(exc))

    completer = Completer(build_trie(words), settings)

    edited = False
    if args.clear_custom:
        completer.clear_custom_dict()
        edited = True
    for word in args.add:
        edited |= completer.add_word(word)
    for word in args.remove:
        edited |= completer.remove_word(word)
    if edited:
        # --limit is a one-off override, keep the stored value
        stored = load_settings(args.settings)
        stored.custom_dict = settings.custom_dict
        save_settings(stored, args.settings)

    if args.prefix is not None:
        for suggestion in completer.suggest(args.prefix):
            print(suggestion)


if __name__ == "__main__":  # pragma: no cover - manual entry point
    main()
