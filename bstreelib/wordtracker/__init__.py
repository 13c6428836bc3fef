"""Word-occurrence tracking built on BSTreeLib.

Indexes the words of text files in a BSTree, keeps the index in a JSON
repository between runs, and renders alphabetical reports.
"""

from .word import WordEntry, normalize_word, tokenize_line
from .repository import (
    dump_tree,
    restore_tree,
    save_repository,
    load_repository,
)
from .tracker import WordTracker, REPORT_TITLES, REPORT_UNDERLINES

__all__ = [
    'WordEntry',
    'normalize_word',
    'tokenize_line',
    'dump_tree',
    'restore_tree',
    'save_repository',
    'load_repository',
    'WordTracker',
    'REPORT_TITLES',
    'REPORT_UNDERLINES',
]
