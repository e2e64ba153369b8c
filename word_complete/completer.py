"""Glue between edited text and the suggestion trie.

The trie only answers prefix queries.  Everything about *text* lives here:
finding the word being typed, skipping fenced code blocks, dropping the
suggestion that equals what was already typed, and splicing the chosen
suggestion back into the line.
"""

from __future__ import annotations

import logging
import re

from .settings import CompletionSettings
from .trie import PrefixTrie

log = logging.getLogger("word_complete.completer")

# word (letters, digits, underscore, apostrophe) ending right at the cursor
_CURRENT_WORD = re.compile(r"(\b[\w']+)$")
# cursor sits inside a word or right before punctuation
_MID_WORD = re.compile(r"""[\w.,;:!?'"()\[\]{}\-+=<>@#$%^&*]""")
_FENCE = "```"


def current_word(before_cursor: str) -> str | None:
    """Return the partially typed word at the end of ``before_cursor``."""
    match = _CURRENT_WORD.search(before_cursor)
    return match.group(1) if match else None


def in_code_block(text: str, line: int) -> bool:
    """True if ``line`` (0-based) of ``text`` falls inside a fenced code block."""
    inside = False
    for i, row in enumerate(text.split("\n")):
        if i > line:
            break
        if row.strip().startswith(_FENCE):
            inside = not inside
    return inside


def apply_suggestion(line: str, cursor: int, suggestion: str) -> tuple[str, int]:
    """Replace the word ending at ``cursor`` with ``suggestion``.

    Returns the new line and the cursor position just after the inserted
    word.  If no word ends at ``cursor`` the line is returned untouched.
    """
    word = current_word(line[:cursor])
    if word is None:
        return line, cursor
    start = cursor - len(word)
    return line[:start] + suggestion + line[cursor:], start + len(suggestion)


class Completer:
    """Suggest completions from a base vocabulary plus a custom dictionary."""

    def __init__(self, trie: PrefixTrie, settings: CompletionSettings | None = None) -> None:
        self.trie = trie
        self.settings = settings or CompletionSettings()
        self.trie.update(self.settings.custom_dict)

    def suggest(
        self,
        before_cursor: str,
        *,
        after_cursor: str = "",
        text: str | None = None,
        line: int | None = None,
    ) -> list[str]:
        """Return suggestions for the word ending ``before_cursor``.

        ``after_cursor`` is the rest of the line; nothing is suggested while
        it starts with a word character or punctuation.  Pass the whole
        document as ``text`` and the cursor's ``line`` to suppress
        suggestions inside fenced code blocks.
        """
        if not self.settings.enabled:
            return []
        if text is not None and line is not None and in_code_block(text, line):
            return []
        if _MID_WORD.match(after_cursor):
            return []

        word = current_word(before_cursor)
        if word is None:
            return []

        # the trie may hand back the typed word itself; callers never want it
        found = self.trie.find_words_with_prefix(word, self.settings.max_suggestions)
        return [w for w in found if w != word]

    # ───────── custom dictionary ──────────────────────────────────────────

    def add_word(self, word: str) -> bool:
        """Add ``word`` to the custom dictionary; return False if empty or known."""
        w = word.strip().lower()
        if not w or w in self.settings.custom_dict:
            return False
        self.settings.custom_dict.append(w)
        self.trie.insert(w)
        log.info("Added %r to custom dictionary", w)
        return True

    def remove_word(self, word: str) -> bool:
        """Drop ``word`` from the custom dictionary; return False if it was not there."""
        w = word.strip().lower()
        if w not in self.settings.custom_dict:
            return False
        self.settings.custom_dict.remove(w)
        self.trie.remove(w)
        log.info("Removed %r from custom dictionary", w)
        return True

    def clear_custom_dict(self) -> None:
        for w in self.settings.custom_dict:
            self.trie.remove(w)
        log.info("Cleared %d custom words", len(self.settings.custom_dict))
        self.settings.custom_dict = []
