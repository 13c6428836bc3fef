"""Configuration system for BSTreeLib.

This module defines how users tune a tree (which traversal order plain
iteration uses, how height is computed) and how the word tracker stores
its index. Every config exposes validate(), which returns a list of
problems instead of raising, so callers can report all of them at once.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union


class TraversalOrder(Enum):
    """Depth-first orders a tree can be walked in."""
    INORDER = "inorder"       # Left, node, right (ascending)
    PREORDER = "preorder"     # Node before its subtrees
    POSTORDER = "postorder"   # Subtrees before their node

    @classmethod
    def parse(cls, order: Union["TraversalOrder", str]) -> "TraversalOrder":
        """Parse an order from an enum member or its string name.

        Args:
            order: TraversalOrder or one of "inorder", "preorder",
                "postorder" (case-insensitive; "in", "pre", "post" accepted)

        Returns:
            TraversalOrder member

        Raises:
            ValueError: If the name is not recognized
        """
        if isinstance(order, cls):
            return order

        aliases = {
            'in': cls.INORDER,
            'inorder': cls.INORDER,
            'in_order': cls.INORDER,
            'pre': cls.PREORDER,
            'preorder': cls.PREORDER,
            'pre_order': cls.PREORDER,
            'post': cls.POSTORDER,
            'postorder': cls.POSTORDER,
            'post_order': cls.POSTORDER,
        }

        key = order.lower() if isinstance(order, str) else str(order)
        if key not in aliases:
            raise ValueError(
                f"Unknown traversal order: {order}. "
                f"Choose from: {', '.join(sorted(aliases))}"
            )
        return aliases[key]


class HeightStrategy(Enum):
    """How get_height() walks the tree."""
    RECURSIVE = "recursive"   # Plain recursion, bounded by the interpreter stack
    ITERATIVE = "iterative"   # Explicit stack, safe for degenerate chains


class ReportFormat(Enum):
    """Word tracker report layouts, keyed by their command-line flag."""
    FILES = "pf"          # Word and the files it appears in
    LINES = "pl"          # ...plus line numbers
    OCCURRENCES = "po"    # ...plus the total occurrence count


@dataclass
class TreeConfig:
    """Configuration for a single BSTree instance."""

    default_order: TraversalOrder = TraversalOrder.INORDER
    height_strategy: HeightStrategy = HeightStrategy.ITERATIVE

    @classmethod
    def recursive(cls) -> 'TreeConfig':
        """Create config that computes height by plain recursion."""
        return cls(height_strategy=HeightStrategy.RECURSIVE)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.default_order, TraversalOrder):
            errors.append(
                f"default_order must be a TraversalOrder, got {self.default_order!r}"
            )

        if not isinstance(self.height_strategy, HeightStrategy):
            errors.append(
                f"height_strategy must be a HeightStrategy, got {self.height_strategy!r}"
            )

        return errors


@dataclass
class TrackerConfig:
    """Configuration for the word tracker and its repository."""

    repository_path: Optional[Union[str, Path]] = "repository.json"
    persist: bool = True              # Load on start, save after each file
    encoding: str = "utf-8"           # Encoding for input files and repository
    tree: TreeConfig = field(default_factory=TreeConfig)

    @classmethod
    def in_memory(cls) -> 'TrackerConfig':
        """Create config that never touches a repository file."""
        return cls(repository_path=None, persist=False)

    @classmethod
    def with_repository(cls, path: Union[str, Path]) -> 'TrackerConfig':
        """Create config persisting to the given repository path."""
        return cls(repository_path=path, persist=True)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.persist and not self.repository_path:
            errors.append("repository_path required when persist is enabled")

        if not self.encoding:
            errors.append("encoding cannot be empty")

        errors.extend(f"tree: {problem}" for problem in self.tree.validate())

        return errors
