"""
Diagnose — the primitive every other operation is built on.

For each function an interface declares, in declaration order, one of
three problems may be reported:

    MISSING_FUNCTION           — no member of that name (or the member is None)
    NOT_A_FUNCTION             — the member exists but is not callable
    INCORRECT_PARAMETER_COUNT  — declared arity differs from the interface

Arity is compared for exact equality. A function that would accept the
expected arguments but declares more or fewer parameters still fails.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .definition import DefinitionLike, FunctionSignature, coerce_definition
from .introspection import declared_arity, resolve_member

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

# Shown in place of the declared arity when a callable has no signature
UNKNOWN_ARITY = "?"


# =============================================================================
# DIAGNOSTICS
# =============================================================================

class DiagnosticKind(Enum):
    """The ways a single interface function can fail to be implemented."""
    MISSING_FUNCTION = "missing_function"
    NOT_A_FUNCTION = "not_a_function"
    INCORRECT_PARAMETER_COUNT = "incorrect_parameter_count"


@dataclass(frozen=True)
class Diagnostic:
    """One reason an object fails to implement one interface function."""
    kind: DiagnosticKind
    function: FunctionSignature
    declared_arity: Optional[int] = None

    @property
    def message(self) -> str:
        if self.kind is DiagnosticKind.MISSING_FUNCTION:
            return f"Missing Function: {self.function.render()}"
        if self.kind is DiagnosticKind.NOT_A_FUNCTION:
            return f"Not a function: {self.function.name}"

        arity = UNKNOWN_ARITY if self.declared_arity is None else self.declared_arity
        return (
            f"Incorrect number of parameters ({arity}) "
            f"in implementation for function: {self.function.render()}"
        )

    def __str__(self) -> str:
        return self.message


# =============================================================================
# DIAGNOSE
# =============================================================================

def _diagnose_function(obj: Any, function: FunctionSignature) -> Optional[Diagnostic]:
    member = resolve_member(obj, function.name)

    if member.is_missing:
        return Diagnostic(DiagnosticKind.MISSING_FUNCTION, function)

    if not callable(member.value):
        return Diagnostic(DiagnosticKind.NOT_A_FUNCTION, function)

    arity = declared_arity(member)
    if arity != function.arity:
        return Diagnostic(DiagnosticKind.INCORRECT_PARAMETER_COUNT, function, arity)

    return None


def collect_diagnostics(obj: Any, definition: DefinitionLike) -> list[Diagnostic]:
    """
    Check `obj` against `definition` and return every problem found.

    Diagnostics are ordered as the definition declares its functions. An
    empty list means `obj` conforms. Neither argument is modified.

    Raises:
        InvalidInterfaceDefinitionError: If `definition` is malformed
    """
    interface = coerce_definition(definition)

    diagnostics = []
    for function in interface:
        diagnostic = _diagnose_function(obj, function)
        if diagnostic is not None:
            diagnostics.append(diagnostic)

    logger.debug(
        "Diagnosed %s against %d function(s): %d problem(s)",
        type(obj).__name__, len(interface), len(diagnostics),
    )
    return diagnostics


def diagnose(obj: Any, definition: DefinitionLike) -> list[str]:
    """Return the diagnostic messages for `obj`; empty if it conforms."""
    return [d.message for d in collect_diagnostics(obj, definition)]
