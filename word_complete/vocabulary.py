"""Base word lists for the suggestion trie."""

from __future__ import annotations

import logging
import re
from typing import Iterable

from wordfreq import top_n_list

from .trie import PrefixTrie

log = logging.getLogger("word_complete.vocabulary")

# Language names as shown in settings -> wordfreq language codes
LANGUAGES = {
    "English": "en",
}

# 80k keeps startup reasonable while providing decent coverage.
DEFAULT_SIZE = 80_000

_WORD_RE = re.compile(r"[\w']+")


def language_code(name: str) -> str:
    """Map a settings language name (or a bare code) to a wordfreq code."""
    if name in LANGUAGES:
        return LANGUAGES[name]
    if name in LANGUAGES.values():
        return name
    supported = ", ".join(sorted(LANGUAGES))
    raise ValueError(f"Unsupported language {name!r} (supported: {supported})")


def _clean(words: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for word in words:
        w = word.strip().lower()
        if not w or w in seen or not _WORD_RE.fullmatch(w):
            continue
        seen.add(w)
        out.append(w)
    return out


def load_words(language: str = "en", n: int = DEFAULT_SIZE) -> list[str]:
    """Return up to ``n`` common words for ``language``, most frequent first."""
    code = language_code(language)
    words = _clean(top_n_list(code, n))
    log.info("Loaded %s %s words from wordfreq", f"{len(words):,}", code)
    return words


def read_word_file(path: str) -> list[str]:
    """Read one word per line from ``path``; blank lines and ``#`` comments are skipped."""
    with open(path, "r", encoding="utf-8") as f:
        lines = [line for line in f if not line.lstrip().startswith("#")]
    words = _clean(lines)
    log.info("Loaded %s words from %s", f"{len(words):,}", path)
    return words


def build_trie(words: Iterable[str]) -> PrefixTrie:
    """Return a new trie holding ``words``."""
    trie = PrefixTrie(words)
    log.debug("Built trie: %d words, %d nodes", len(trie), trie.node_count)
    return trie
