"""Exception taxonomy for BSTreeLib.

Every failure the library raises derives from BSTreeError, so callers can
catch library errors as a group. Each concrete error also derives from the
built-in exception closest in meaning, so code written against plain
ValueError/LookupError keeps working.
"""

from typing import List, Optional


class BSTreeError(Exception):
    """Base class for all BSTreeLib errors."""
    pass


class InvalidEntryError(BSTreeError, ValueError):
    """Raised when None is passed where a tree element is required."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation}: the entry cannot be None")


class EmptyTreeError(BSTreeError, LookupError):
    """Raised when an operation needs a root but the tree is empty."""
    pass


class IteratorExhaustedError(BSTreeError, LookupError):
    """Raised when next() is called on an iterator with no elements left."""
    pass


class ConfigurationError(BSTreeError, ValueError):
    """Raised when a configuration object fails validation.

    Attributes:
        problems: The individual validation messages
    """

    def __init__(self, problems: List[str], context: Optional[str] = None):
        self.problems = list(problems)
        prefix = f"Invalid {context}" if context else "Invalid configuration"
        super().__init__(f"{prefix}: {'; '.join(self.problems)}")


class RepositoryError(BSTreeError):
    """Raised when a word repository cannot be read or is malformed."""
    pass
