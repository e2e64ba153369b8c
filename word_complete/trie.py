"""Prefix trie backing word suggestions.

Nodes are stored in an arena (a flat list) and refer to each other by index.
Removed words are pruned eagerly and their slots are recycled by later
inserts, so :attr:`PrefixTrie.node_count` always reflects the words that are
actually stored.
"""

from __future__ import annotations

from typing import Iterable

ROOT = 0


class _Node:
    """Single character position shared by every word passing through it."""

    __slots__ = ("children", "is_terminal", "parent")

    def __init__(self, parent: int | None = None) -> None:
        # dict keeps first-insertion order, which fixes enumeration order
        self.children: dict[str, int] = {}
        self.is_terminal: bool = False
        self.parent = parent


class PrefixTrie:
    """Word store answering bounded "starts with" queries.

    Storage is case-sensitive; normalising case is up to the caller.  None of
    the operations raise for missing words or prefixes: they are no-ops or
    return an empty list.
    """

    def __init__(self, words: Iterable[str] | None = None) -> None:
        self._nodes: list[_Node | None] = [_Node()]
        self._free: list[int] = []
        self._size = 0
        if words is not None:
            self.update(words)

    # ───────── arena bookkeeping ──────────────────────────────────────────

    def _alloc(self, parent: int) -> int:
        if self._free:
            idx = self._free.pop()
            self._nodes[idx] = _Node(parent)
        else:
            idx = len(self._nodes)
            self._nodes.append(_Node(parent))
        return idx

    def _release(self, idx: int) -> None:
        self._nodes[idx] = None
        self._free.append(idx)

    def _node(self, idx: int) -> _Node:
        node = self._nodes[idx]
        assert node is not None, f"dangling node index {idx}"
        return node

    def _walk(self, s: str) -> int | None:
        idx = ROOT
        for ch in s:
            child = self._node(idx).children.get(ch)
            if child is None:
                return None
            idx = child
        return idx

    # ───────── mutation ───────────────────────────────────────────────────

    def insert(self, word: str) -> None:
        """Store ``word``.  Inserting twice, or inserting ``""``, changes nothing."""
        if not word:
            return
        idx = ROOT
        for ch in word:
            node = self._node(idx)
            child = node.children.get(ch)
            if child is None:
                child = self._alloc(idx)
                node.children[ch] = child
            idx = child
        node = self._node(idx)
        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1

    def update(self, words: Iterable[str]) -> None:
        """Insert every word of ``words`` in order."""
        for word in words:
            self.insert(word)

    def remove(self, word: str) -> None:
        """Forget ``word`` and prune any branch left without words."""
        if not word:
            return

        # (parent index, character) for every edge on the word's path
        path: list[tuple[int, str]] = []
        idx = ROOT
        for ch in word:
            child = self._node(idx).children.get(ch)
            if child is None:
                return
            path.append((idx, ch))
            idx = child

        node = self._node(idx)
        if not node.is_terminal:
            return
        node.is_terminal = False
        self._size -= 1

        # unwind toward the root while the node below is a dead end
        dead = not node.children
        while dead and path:
            parent_idx, ch = path.pop()
            parent = self._node(parent_idx)
            self._release(parent.children.pop(ch))
            dead = parent_idx != ROOT and not parent.is_terminal and not parent.children

    # ───────── lookup ─────────────────────────────────────────────────────

    def find_words_with_prefix(self, prefix: str, limit: int | None = None) -> list[str]:
        """Return up to ``limit`` stored words starting with ``prefix``.

        Words come out depth first, siblings in the order their characters
        were first inserted.  ``limit=None`` means no bound.  A stored word
        equal to ``prefix`` is included.
        """
        if limit is not None and limit <= 0:
            return []
        start = self._walk(prefix)
        if start is None:
            return []
        results: list[str] = []
        stack = [(start, prefix)]
        while stack:
            if limit is not None and len(results) >= limit:
                break
            idx, path = stack.pop()
            node = self._node(idx)
            if node.is_terminal and path:
                results.append(path)
            # reversed so the first-inserted child is popped first
            stack.extend(
                (child, path + ch) for ch, child in reversed(node.children.items())
            )
        return results

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or not word:
            return False
        idx = self._walk(word)
        return idx is not None and self._node(idx).is_terminal

    def __len__(self) -> int:
        return self._size

    @property
    def node_count(self) -> int:
        """Live nodes in the arena, root included."""
        return len(self._nodes) - len(self._free)
