"""
Error handling policies for BSTreeLib.

This module provides a flexible error handling system through the Policy pattern,
allowing callers to decide how failures outside the tree itself (unreadable
input files, a corrupt repository) are handled by the word tracker.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List

logger = logging.getLogger(__name__)


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    Subclasses implement different strategies for handling errors
    raised while the word tracker reads files or its repository.
    """

    @abstractmethod
    def handle(self, error: Exception, operation: str, subject: Any) -> Any:
        """
        Handle an error raised by an operation.

        Args:
            error: The exception that was raised
            operation: Name of the failing operation (e.g., 'process_file')
            subject: What was being processed (usually a path)

        Returns:
            A default value that allows processing to continue,
            or re-raises the exception to stop processing.
        """
        pass


class FailFastPolicy(ErrorPolicy):
    """
    Policy that immediately re-raises any error, stopping processing.

    This is the default behavior - any error will halt the entire operation.
    """

    def handle(self, error: Exception, operation: str, subject: Any) -> Any:
        """Re-raise the error immediately."""
        raise error


class CollectErrorsPolicy(ErrorPolicy):
    """
    Policy that collects all errors without logging, for batch processing.

    Errors are recorded for later inspection, and None is returned so
    processing can continue with the next subject.
    """

    def __init__(self):
        self.errors: List[Dict[str, Any]] = []
        self.skipped: List[Any] = []

    def handle(self, error: Exception, operation: str, subject: Any) -> Any:
        """Silently record the error and return None."""
        self._record(error, operation, subject)
        return None

    def _record(self, error: Exception, operation: str, subject: Any) -> None:
        self.errors.append({
            'subject': subject,
            'operation': operation,
            'error': error,
            'error_type': type(error).__name__,
            'error_message': str(error),
        })

        # I/O failures mean the subject was skipped entirely
        if isinstance(error, OSError) and subject is not None:
            self.skipped.append(subject)

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        return {
            'total_errors': len(self.errors),
            'os_errors': sum(1 for e in self.errors if isinstance(e['error'], OSError)),
            'skipped': len(self.skipped),
            'errors': self.errors,
        }


class ContinueOnErrorsPolicy(CollectErrorsPolicy):
    """
    Policy that logs errors and continues processing.

    Same bookkeeping as CollectErrorsPolicy, plus a warning for every
    error when verbose is set.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, log a warning when an error occurs
        """
        super().__init__()
        self.verbose = verbose

    def handle(self, error: Exception, operation: str, subject: Any) -> Any:
        """Record the error, warn if verbose, and return None."""
        self._record(error, operation, subject)

        if self.verbose:
            if isinstance(error, OSError):
                logger.warning("Skipping unreadable '%s': %s", subject, error)
            else:
                logger.warning("Error in %s for '%s': %s", operation, subject, error)

        return None


class ThresholdPolicy(ErrorPolicy):
    """
    Policy that tolerates errors up to a threshold, then fails fast.

    Useful when some errors are expected but too many indicate
    a systemic problem that should halt processing.
    """

    def __init__(self, max_errors: int = 10, verbose: bool = True):
        """
        Initialize threshold policy.

        Args:
            max_errors: Maximum errors to tolerate before failing
            verbose: If True, log a warning for each tolerated error
        """
        self.max_errors = max_errors
        self.verbose = verbose
        self.error_count = 0
        self.errors: List[Exception] = []

    def handle(self, error: Exception, operation: str, subject: Any) -> Any:
        """Handle error if under threshold, otherwise raise RuntimeError."""
        self.error_count += 1
        self.errors.append(error)

        if self.error_count > self.max_errors:
            raise RuntimeError(f"Error threshold exceeded ({self.max_errors} errors)") from error

        if self.verbose:
            logger.warning("[%d/%d] Error in %s for '%s': %s",
                           self.error_count, self.max_errors, operation, subject, error)
        return None
