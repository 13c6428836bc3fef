"""WordTracker - indexes the words of text files in a BSTree.

The tracker is a consumer of the tree's public contract only: it probes
with search(), inserts with add(), and reports through the inorder
iterator so words come out alphabetically. Updating a word that is already
indexed is done on the node returned by search(), since add() never
touches an existing element.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..config import ReportFormat, TrackerConfig
from ..core.tree import BSTree
from ..error_policies import ErrorPolicy, FailFastPolicy
from ..errors import ConfigurationError, RepositoryError
from .repository import load_repository, save_repository
from .word import WordEntry, tokenize_line

logger = logging.getLogger(__name__)

REPORT_TITLES = {
    ReportFormat.FILES: "Word Tracker Report (Files Only)",
    ReportFormat.LINES: "Word Tracker Report (Files and Lines)",
    ReportFormat.OCCURRENCES: "Word Tracker Report (Files, Lines, and Occurrences)",
}

# Underline widths are fixed and shorter than their titles
REPORT_UNDERLINES = {
    ReportFormat.FILES: "=" * 30,
    ReportFormat.LINES: "=" * 35,
    ReportFormat.OCCURRENCES: "=" * 49,
}


class WordTracker:
    """Word-occurrence index over one or more text files.

    Example:
        >>> tracker = WordTracker(TrackerConfig.in_memory())
        >>> tracker.process_file("story.txt")
        >>> print(tracker.make_report(ReportFormat.LINES))
    """

    def __init__(self,
                 config: Optional[TrackerConfig] = None,
                 policy: Optional[ErrorPolicy] = None):
        """Create a tracker, loading the repository if one exists.

        Args:
            config: TrackerConfig (defaults to TrackerConfig())
            policy: ErrorPolicy for unreadable files and a corrupt
                repository (defaults to FailFastPolicy)

        Raises:
            ConfigurationError: If config fails validation
            RepositoryError: If the repository is corrupt and the policy
                re-raises
        """
        self.config = config or TrackerConfig()
        problems = self.config.validate()
        if problems:
            raise ConfigurationError(problems, context="tracker configuration")

        self.policy = policy or FailFastPolicy()
        self.tree: BSTree[WordEntry] = BSTree(config=self.config.tree)

        if self.config.persist:
            self._load()

    @property
    def repository_path(self) -> Optional[Path]:
        if self.config.repository_path is None:
            return None
        return Path(self.config.repository_path)

    def _load(self) -> None:
        path = self.repository_path
        if not path.exists():
            logger.debug("No repository at %s, starting empty", path)
            return

        try:
            self.tree = load_repository(path, self.config.tree, self.config.encoding)
        except RepositoryError as e:
            # A policy that returns means: carry on with an empty index
            self.policy.handle(e, "load_repository", path)
            self.tree = BSTree(config=self.config.tree)

    def save(self) -> None:
        """Write the index to the configured repository.

        Raises:
            RepositoryError: If the repository cannot be written
        """
        path = self.repository_path
        try:
            save_repository(self.tree, path, self.config.encoding)
        except OSError as e:
            raise RepositoryError(f"Cannot save repository {path}: {e}") from e

    # Indexing

    def process_file(self, path: Union[str, Path]) -> int:
        """Index every word of a text file, then save the repository.

        Args:
            path: File to read; its string form is recorded as the filename

        Returns:
            Number of words read from the file

        Raises:
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be read
            RepositoryError: If saving fails and the policy re-raises
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")

        filename = str(path)
        words = 0
        with open(path, 'r', encoding=self.config.encoding) as f:
            for line_number, line in enumerate(f, start=1):
                for word in tokenize_line(line):
                    self.record(word, filename, line_number)
                    words += 1

        logger.info("Indexed %d words from %s", words, filename)

        if self.config.persist:
            try:
                self.save()
            except RepositoryError as e:
                # The words stay indexed in memory
                self.policy.handle(e, "save_repository", self.repository_path)
        return words

    def process_files(self, paths: Iterable[Union[str, Path]]) -> List[Path]:
        """Index several files, routing per-file I/O errors to the policy.

        Returns:
            Paths that were indexed successfully
        """
        processed = []
        for path in paths:
            try:
                self.process_file(path)
            except (OSError, UnicodeDecodeError) as e:
                self.policy.handle(e, "process_file", Path(path))
                continue
            processed.append(Path(path))
        return processed

    def record(self, word: str, filename: str, line: int) -> WordEntry:
        """Record one occurrence of an already-normalized word."""
        probe = WordEntry(word)
        node = self.tree.search(probe)
        if node is None:
            probe.add_occurrence(filename, line)
            self.tree.add(probe)
            return probe

        node.element.add_occurrence(filename, line)
        return node.element

    def lookup(self, word: str) -> Optional[WordEntry]:
        """Return the entry for a word, or None if it was never seen."""
        node = self.tree.search(WordEntry(word))
        return node.element if node is not None else None

    # Reports

    def make_report(self, fmt: Union[ReportFormat, str]) -> str:
        """Build a report listing every word alphabetically.

        Args:
            fmt: ReportFormat or its flag value ("pf", "pl", "po")

        Raises:
            ValueError: If fmt is not a known report format
        """
        fmt = ReportFormat(fmt)
        title = REPORT_TITLES[fmt]
        formatter = {
            ReportFormat.FILES: WordEntry.format_with_files,
            ReportFormat.LINES: WordEntry.format_with_lines,
            ReportFormat.OCCURRENCES: WordEntry.format_with_occurrences,
        }[fmt]

        lines = [title, REPORT_UNDERLINES[fmt], ""]
        iterator = self.tree.inorder_iterator()
        while iterator.has_next():
            lines.append(formatter(iterator.next()))
        return "\n".join(lines) + "\n"

    def write_report(self, report: str, path: Union[str, Path]) -> Path:
        """Write a report to a file and return its path."""
        path = Path(path)
        path.write_text(report, encoding=self.config.encoding)
        logger.info("Report written to %s", path)
        return path

    def __len__(self) -> int:
        return self.tree.size()
