"""Persistence of the word index.

The repository stores the logical content of the tree, never its node
structure: a JSON document listing every WordEntry in preorder. Loading
replays those entries through BSTree.add, which rebuilds the exact same
shape because a preorder sequence re-inserted into an empty tree places
every node where it was.

Document layout:
    {
      "version": 1,
      "words": [
        {"word": "fox", "occurrences": {"a.txt": [1, 4]}},
        ...
      ]
    }
"""

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..config import TreeConfig
from ..core.tree import BSTree
from ..errors import RepositoryError
from .word import WordEntry

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


def dump_tree(tree: BSTree[WordEntry]) -> Dict[str, Any]:
    """Convert a word tree to its JSON-ready document."""
    return {
        'version': FORMAT_VERSION,
        'words': [
            {'word': entry.word, 'occurrences': entry.occurrences()}
            for entry in tree.preorder_iterator()
        ],
    }


def restore_tree(document: Any, config: Optional[TreeConfig] = None) -> BSTree[WordEntry]:
    """Rebuild a word tree from a document produced by dump_tree.

    Raises:
        RepositoryError: If the document is malformed
    """
    if not isinstance(document, dict):
        raise RepositoryError("Repository root must be a JSON object")

    version = document.get('version')
    if version != FORMAT_VERSION:
        raise RepositoryError(f"Unsupported repository version: {version!r}")

    words = document.get('words')
    if not isinstance(words, list):
        raise RepositoryError("Repository 'words' must be a list")

    tree: BSTree[WordEntry] = BSTree(config=config)
    for index, record in enumerate(words):
        entry = _restore_entry(record, index)
        if not tree.add(entry):
            raise RepositoryError(f"Duplicate word in repository: {entry.word!r}")
    return tree


def _restore_entry(record: Any, index: int) -> WordEntry:
    try:
        word = record['word']
        occurrences = record['occurrences']
    except (TypeError, KeyError) as e:
        raise RepositoryError(f"Malformed word record at index {index}") from e

    if not isinstance(word, str) or not word:
        raise RepositoryError(f"Word at index {index} must be a non-empty string")
    if not isinstance(occurrences, dict):
        raise RepositoryError(f"Occurrences of {word!r} must be an object")

    entry = WordEntry(word)
    for filename, lines in occurrences.items():
        if not isinstance(lines, list) or not all(_is_line_number(n) for n in lines):
            raise RepositoryError(f"Line numbers of {word!r} in {filename!r} must be integers")
        for line in lines:
            entry.add_occurrence(filename, line)
    return entry


def _is_line_number(value: Any) -> bool:
    # JSON true/false load as bool, which is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


def _file_mode(path: Path) -> int:
    """Permission bits for a saved repository.

    An existing file keeps its mode; a new one gets the usual 0o666 minus
    the process umask, as open() would have given it.
    """
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def save_repository(tree: BSTree[WordEntry],
                    path: Union[str, Path],
                    encoding: str = "utf-8") -> None:
    """Write the tree to path, replacing any existing file atomically."""
    path = Path(path)
    document = dump_tree(tree)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, 'w', encoding=encoding) as f:
            json.dump(document, f, indent=2)
        # mkstemp creates the file 0o600
        os.chmod(tmp_name, _file_mode(path))
        os.replace(tmp_name, path)
    except BaseException:
        os.unlink(tmp_name)
        raise

    logger.info("Repository saved to %s (%d words)", path, tree.size())


def load_repository(path: Union[str, Path],
                    config: Optional[TreeConfig] = None,
                    encoding: str = "utf-8") -> BSTree[WordEntry]:
    """Read a repository file back into a word tree.

    Raises:
        FileNotFoundError: If path does not exist
        RepositoryError: If the file cannot be read or is not a valid
            repository
    """
    path = Path(path)
    try:
        f = open(path, 'r', encoding=encoding)
    except FileNotFoundError:
        raise
    except OSError as e:
        raise RepositoryError(f"Cannot read repository {path}: {e}") from e

    with f:
        try:
            document = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise RepositoryError(f"Cannot parse repository {path}: {e}") from e

    tree = restore_tree(document, config)
    logger.info("Repository loaded from %s (%d words)", path, tree.size())
    return tree
