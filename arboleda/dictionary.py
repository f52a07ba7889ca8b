"""A word dictionary stored in a binary search tree keyed by the word."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import NamedTuple

MAX_WORD_LENGTH = 28
MAX_DEFINITION_LENGTH = 68
MAX_SYNONYM_LENGTH = 28


class Category(IntEnum):
    """Grammatical category of a word, numbered as in the menu."""

    NOUN = 1
    ADJECTIVE = 2
    VERB = 3
    ADVERB = 4
    DETERMINER = 5
    PRONOUN = 6
    PREPOSITION = 7
    CONJUNCTION = 8
    INTERJECTION = 9

    def label(self) -> str:
        """Return the display name of the category."""
        return _LABELS[self]


_LABELS = {
    Category.NOUN: "Sustantivo",
    Category.ADJECTIVE: "Adjetivo",
    Category.VERB: "Verbo",
    Category.ADVERB: "Adverbio",
    Category.DETERMINER: "Determinante",
    Category.PRONOUN: "Pronombre",
    Category.PREPOSITION: "Preposicion",
    Category.CONJUNCTION: "Conjuncion",
    Category.INTERJECTION: "Interjeccion",
}


class DuplicateWordError(ValueError):
    """Raised when a word is already in the dictionary."""


class WordNotFoundError(KeyError):
    """Raised when a word is not in the dictionary."""


def _check_length(kind: str, text: str, limit: int) -> None:
    if len(text) > limit:
        raise ValueError(f"{kind} is longer than {limit} characters: {text!r}")


@dataclass
class Entry:
    """A dictionary word with its definition, category and synonyms."""

    word: str
    definition: str = ""
    category: Category = Category.NOUN
    synonyms: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.word:
            raise ValueError("a word cannot be empty")
        _check_length("word", self.word, MAX_WORD_LENGTH)
        _check_length("definition", self.definition, MAX_DEFINITION_LENGTH)
        self.category = Category(self.category)
        self.synonyms = list(self.synonyms)
        for synonym in self.synonyms:
            _check_length("synonym", synonym, MAX_SYNONYM_LENGTH)

    def replace_synonym(self, old: str, new: str) -> int:
        """Replace every synonym equal to ``old`` by ``new``; return how many."""
        _check_length("synonym", new, MAX_SYNONYM_LENGTH)
        replaced = 0
        for position, synonym in enumerate(self.synonyms):
            if synonym == old:
                self.synonyms[position] = new
                replaced += 1
        return replaced

    def describe(self) -> str:
        """Return a multi-line description of the entry."""
        lines = [
            f"Palabra: {self.word}",
            f"Definicion: {self.definition}",
            f"Categoria gramatical: {self.category.label()}",
            "Lista de sinonimos:",
        ]
        if self.synonyms:
            lines.extend(f"Sinonimo: {synonym}" for synonym in self.synonyms)
        else:
            lines.append("No se encontraron elementos!")
        return "\n".join(lines)


class Placement(NamedTuple):
    """Where a word is drawn when the tree is printed."""

    x: int
    y: int
    word: str


@dataclass
class _Node:
    entry: Entry
    left: _Node | None = None
    right: _Node | None = None


def _subtree_height(node: _Node | None) -> int:
    height = 0
    level = [node] if node is not None else []
    while level:
        height += 1
        level = [
            child
            for current in level
            for child in (current.left, current.right)
            if child is not None
        ]
    return height


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    return pivot


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    return pivot


def _balance(node: _Node) -> _Node:
    factor = _subtree_height(node.left) - _subtree_height(node.right)
    if factor > 1:
        assert node.left is not None
        if _subtree_height(node.left.left) < _subtree_height(node.left.right):
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if factor < -1:
        assert node.right is not None
        if _subtree_height(node.right.right) < _subtree_height(node.right.left):
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class Dictionary:
    """Entries kept in a binary search tree ordered by word."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, entry: Entry) -> None:
        """Add ``entry`` as a new leaf; duplicates raise DuplicateWordError."""
        new = _Node(entry)
        if self._root is None:
            self._root = new
            self._size = 1
            return
        node = self._root
        while True:
            current = node.entry.word
            if entry.word == current:
                raise DuplicateWordError(f"the word {entry.word!r} already exists")
            if entry.word > current:
                if node.right is None:
                    node.right = new
                    break
                node = node.right
            else:
                if node.left is None:
                    node.left = new
                    break
                node = node.left
        self._size += 1

    def insert_balanced(self, entry: Entry) -> None:
        """Add ``entry`` and then rebalance the tree at its root."""
        self.insert(entry)
        assert self._root is not None
        self._root = _balance(self._root)

    def _find_node(self, word: str) -> _Node:
        node = self._root
        while node is not None:
            current = node.entry.word
            if word == current:
                return node
            node = node.right if word > current else node.left
        raise WordNotFoundError(word)

    def find(self, word: str) -> Entry:
        """Return the entry for ``word``."""
        return self._find_node(word).entry

    def remove(self, word: str) -> Entry:
        """Remove ``word`` and return its entry."""
        parent: _Node | None = None
        node = self._root
        while node is not None and node.entry.word != word:
            parent = node
            node = node.right if word > node.entry.word else node.left
        if node is None:
            raise WordNotFoundError(word)
        removed = node.entry

        if node.left is None and node.right is None:
            if parent is None:
                self._root = None
            elif parent.left is node:
                parent.left = None
            else:
                parent.right = None
        elif node.right is None:
            # Replace with the largest word of the left branch.
            holder, candidate = node, node.left
            assert candidate is not None
            while candidate.right is not None:
                holder, candidate = candidate, candidate.right
            node.entry = candidate.entry
            if holder is node:
                holder.left = candidate.left
            else:
                holder.right = candidate.left
        else:
            # Replace with the smallest word of the right branch.
            holder, candidate = node, node.right
            while candidate.left is not None:
                holder, candidate = candidate, candidate.left
            node.entry = candidate.entry
            if holder is node:
                holder.right = candidate.right
            else:
                holder.left = candidate.right

        self._size -= 1
        return removed

    def height(self) -> int:
        """Return the number of levels in the tree."""
        return _subtree_height(self._root)

    def entries(self) -> Iterator[Entry]:
        """Yield the entries in alphabetical order."""
        pending: list[_Node] = []
        node = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.entry
            node = node.right

    def words(self) -> list[str]:
        """Return the words in alphabetical order."""
        return [entry.word for entry in self.entries()]

    def by_category(self, category: Category | int) -> list[Entry]:
        """Return the entries of ``category`` in alphabetical order."""
        wanted = Category(category)
        return [entry for entry in self.entries() if entry.category == wanted]

    def by_letter(self, letter: str) -> list[Entry]:
        """Return the entries whose word starts with ``letter``."""
        if len(letter) != 1:
            raise ValueError("expected a single letter")
        return [entry for entry in self.entries() if entry.word[0] == letter]

    def layout(self, x: int = 100, y: int = 1, level: int = 0) -> list[Placement]:
        """Return where each word is drawn, root first, then left, then right."""
        placements: list[Placement] = []
        pending: list[tuple[_Node, int, int, int]] = []
        if self._root is not None:
            pending.append((self._root, x, y, level))
        while pending:
            node, px, py, depth = pending.pop()
            word = node.entry.word
            placements.append(Placement(px, py, word))
            shift = len(word) + 2
            if node.right is not None:
                pending.append((node.right, px + shift, py + depth, depth + 1))
            if node.left is not None:
                pending.append((node.left, px - shift, py + depth, depth + 1))
        return placements

    def render(self, x: int = 100, y: int = 1, level: int = 0) -> str:
        """Draw the tree as text, later words overwriting earlier ones."""
        placements = self.layout(x, y, level)
        if not placements:
            return ""
        rows: dict[int, list[str]] = {}
        for placement in placements:
            if placement.y < 0:
                continue
            row = rows.setdefault(placement.y, [])
            for offset, char in enumerate(placement.word):
                column = placement.x + offset
                if column < 0:
                    continue
                if len(row) <= column:
                    row.extend(" " * (column + 1 - len(row)))
                row[column] = char
        if not rows:
            return ""
        return "\n".join(
            "".join(rows.get(number, [])).rstrip()
            for number in range(max(rows) + 1)
        )

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        try:
            self._find_node(word)
        except WordNotFoundError:
            return False
        return True

    def __iter__(self) -> Iterator[Entry]:
        return self.entries()

    def __bool__(self) -> bool:
        return self._root is not None