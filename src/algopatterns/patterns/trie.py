"""
Trie (Prefix Tree)
==================
A tree storing a set of strings where each edge is one character and the
path from the root spells the key. All descendants of a node share the
prefix of that node; the root stands for the empty string.

Applications:
    - Autocomplete and predictive text
    - Spell checking
    - Longest-prefix matching (IP routing)
    - Word games

Complexity:
    Insert, search, delete: O(m) for a key of length m.
    Prefix listing: O(p + n), p the prefix length and n the size of the
    matching subtree.
    Space: O(total characters stored).
"""
from __future__ import annotations

from typing import Iterable, Optional

from algopatterns.registry import register


class TrieNode:
    def __init__(self) -> None:
        self.children: dict[str, TrieNode] = {}
        self.is_end_of_word = False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(children={list(self.children)}, end={self.is_end_of_word})"


@register(time="O(m)", space="O(total characters)")
class Trie:
    """Set of strings with prefix queries."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self.root = TrieNode()
        self._size = 0
        for word in words:
            self.insert(word)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def _walk(self, prefix: str) -> Optional[TrieNode]:
        current = self.root
        for char in prefix:
            current = current.children.get(char)
            if current is None:
                return None
        return current

    def insert(self, word: str) -> None:
        current = self.root
        for char in word:
            current = current.children.setdefault(char, TrieNode())
        if not current.is_end_of_word:
            current.is_end_of_word = True
            self._size += 1

    def search(self, word: str) -> bool:
        """True if `word` was inserted (not merely a prefix)."""
        node = self._walk(word)
        return node is not None and node.is_end_of_word

    def starts_with(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def delete(self, word: str) -> bool:
        """
        Remove `word`, pruning nodes no other word needs.

        Returns:
            True if the word was present.
        """
        removed = False

        def prune(node: TrieNode, index: int) -> bool:
            # returns True when `node` can be dropped by its parent
            nonlocal removed
            if index == len(word):
                if node.is_end_of_word:
                    node.is_end_of_word = False
                    removed = True
                return removed and not node.children

            child = node.children.get(word[index])
            if child is None:
                return False
            if prune(child, index + 1):
                del node.children[word[index]]
                return not node.children and not node.is_end_of_word
            return False

        prune(self.root, 0)
        if removed:
            self._size -= 1
        return removed

    def words_with_prefix(self, prefix: str) -> list[str]:
        """All stored words starting with `prefix`, depth first in insertion order of branches."""
        node = self._walk(prefix)
        if node is None:
            return []

        result: list[str] = []

        def collect(current: TrieNode, path: str) -> None:
            if current.is_end_of_word:
                result.append(path)
            for char, child in current.children.items():
                collect(child, path + char)

        collect(node, prefix)
        return result


@register(time="O(p + n)", space="O(n)")
def autocomplete(trie: Trie, prefix: str) -> list[str]:
    return trie.words_with_prefix(prefix)


@register(time="O(m)", space="O(1)")
def is_spelled_correctly(trie: Trie, word: str) -> bool:
    return trie.search(word)


@register(time="O(total characters)", space="O(total characters)")
def longest_common_prefix(words: Iterable[str]) -> str:
    """Longest prefix shared by all words, read off the single-child chain of a trie."""
    trie = Trie(words)
    if not len(trie):
        return ""

    prefix: list[str] = []
    current = trie.root
    # stop at a branch point or where a word ends
    while len(current.children) == 1 and not current.is_end_of_word:
        char, current = next(iter(current.children.items()))
        prefix.append(char)

    return "".join(prefix)
