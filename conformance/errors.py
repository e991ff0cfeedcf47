"""
Error kinds raised by the Conformance Engine.

Two failures are kept strictly apart:

    ConformanceError                 — an object does not satisfy an interface
    InvalidInterfaceDefinitionError  — the interface definition itself is malformed

Conformance failures are only ever raised by the asserting operations
(assert_conforms, apply, implements). A malformed definition fails fast
from every operation, including the pure queries.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from .diagnosis import Diagnostic


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

# Joins individual diagnostic messages into one error message
MESSAGE_SEPARATOR = " | "


# =============================================================================
# ERRORS
# =============================================================================

class InvalidInterfaceDefinitionError(ValueError):
    """Raised when an interface definition is not a name -> parameter-list mapping."""

    def __init__(self, reason: str, function_name: Optional[str] = None):
        self.reason = reason
        self.function_name = function_name
        if function_name is None:
            message = f"Invalid interface definition: {reason}"
        else:
            message = f"Invalid interface definition for function '{function_name}': {reason}"
        super().__init__(message)


class ConformanceError(Exception):
    """
    Raised when an object does not conform to an interface definition.

    The message is every diagnostic message joined with MESSAGE_SEPARATOR,
    in the order the interface declares its functions.

    Attributes:
        diagnostics: tuple of Diagnostic, one per failing function
        reasons: tuple of the individual diagnostic messages
    """

    def __init__(self, diagnostics: Sequence["Diagnostic"]):
        self.diagnostics = tuple(diagnostics)
        self.reasons = tuple(d.message for d in self.diagnostics)
        super().__init__(MESSAGE_SEPARATOR.join(self.reasons))
