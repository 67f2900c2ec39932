"""
Rootline Core - Exception Hierarchy
===================================

Structured exception types for the access rootline element format.

Exception Categories:
    - RootlineError: Base for all rootline errors
    - RootlineElementFormatError: A token does not follow the element grammar

Author: Rootline Core Development Team
Version: 1.0.0
"""

from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from .rootline_element import ElementKind


class RootlineError(Exception):
    """
    Base exception for all rootline errors.

    Attributes:
        message: Human-readable error description
        code: Stable numeric error code for programmatic handling
        details: Optional dict with additional context
        recoverable: Whether error can potentially be retried
    """

    recoverable: bool = True

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        if self.code is not None:
            return f"[{self.code}] {self.message}"
        return self.message


# =============================================================================
# FORMAT ERRORS
# =============================================================================


class RootlineElementFormatError(RootlineError):
    """Token does not follow the access rootline element grammar."""

    recoverable: bool = False  # Malformed static input never heals on retry

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        element_kind: Optional["ElementKind"] = None,
        token: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, code=code, **kwargs)
        self.element_kind = element_kind
        self.token = token


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def is_recoverable(error: Exception) -> bool:
    """
    Determine if an error is potentially recoverable.

    Recoverable errors can be retried after a delay.
    Non-recoverable errors require the input to be fixed.
    """
    if hasattr(error, "recoverable"):
        return error.recoverable

    return not isinstance(error, (SystemExit, KeyboardInterrupt, MemoryError))


# =============================================================================
# EXPORTS
# =============================================================================

__all__ = [
    "RootlineError",
    "RootlineElementFormatError",
    "is_recoverable",
]
