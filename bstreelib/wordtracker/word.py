"""WordEntry - a tracked word and where it occurs.

Entries are ordered by their word alone, so a bare WordEntry("fox") can be
used as a probe to search the tree for the stored entry of the same word.
"""

import re
from functools import total_ordering
from typing import Dict, Iterator, List, Set

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


def normalize_word(token: str) -> str:
    """Strip everything but ASCII letters and digits, then lower-case."""
    return _NON_ALNUM.sub("", token).lower()


def tokenize_line(line: str) -> Iterator[str]:
    """Yield the normalized, non-empty words of one line of text."""
    for token in line.split():
        word = normalize_word(token)
        if word:
            yield word


@total_ordering
class WordEntry:
    """A word plus the line numbers it appears on, per file."""

    __slots__ = ('word', '_lines')

    def __init__(self, word: str):
        self.word = word.lower()
        self._lines: Dict[str, Set[int]] = {}

    def add_occurrence(self, filename: str, line: int) -> None:
        """Record that the word appears on a line; repeats are ignored."""
        self._lines.setdefault(filename, set()).add(line)

    @property
    def count(self) -> int:
        """Number of distinct (file, line) pairs the word appears on."""
        return sum(len(lines) for lines in self._lines.values())

    @property
    def files(self) -> List[str]:
        """Files the word appears in, sorted."""
        return sorted(self._lines)

    def lines_in(self, filename: str) -> List[int]:
        """Sorted line numbers for one file (empty if absent)."""
        return sorted(self._lines.get(filename, ()))

    def occurrences(self) -> Dict[str, List[int]]:
        """Plain-dict copy of all occurrences, for serialization."""
        return {filename: self.lines_in(filename) for filename in self.files}

    # Report lines

    def format_with_files(self) -> str:
        return f"{self.word}: {', '.join(self.files)}"

    def format_with_lines(self) -> str:
        return f"{self.word}: {self._format_locations()}"

    def format_with_occurrences(self) -> str:
        return f"{self.word} ({self.count} occurrences): {self._format_locations()}"

    def _format_locations(self) -> str:
        parts = []
        for filename in self.files:
            lines = ", ".join(str(line) for line in self.lines_in(filename))
            parts.append(f"{filename} (lines {lines})")
        return ", ".join(parts)

    # Ordering uses the word only

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordEntry):
            return NotImplemented
        return self.word == other.word

    def __lt__(self, other: 'WordEntry') -> bool:
        if not isinstance(other, WordEntry):
            return NotImplemented
        return self.word < other.word

    def __hash__(self) -> int:
        return hash(self.word)

    def __repr__(self) -> str:
        return f"WordEntry({self.word!r}, count={self.count})"
