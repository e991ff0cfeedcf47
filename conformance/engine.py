"""
Conformance Engine operations.

All operations are layered on collect_diagnostics:

    conforms         — boolean query, never raises for nonconformance
    describe         — joined diagnostic message, or None when conforming
    assert_conforms  — raises ConformanceError when diagnostics exist
    apply            — asserts a candidate, then copies its functions onto a target
    implements       — class decorator that asserts at class definition time
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import MutableMapping
from typing import Any, Callable, Optional, TypeVar

from .definition import DefinitionLike, coerce_definition
from .diagnosis import collect_diagnostics
from .errors import MESSAGE_SEPARATOR, ConformanceError
from .introspection import ResolvedMember, resolve_member

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=type)


# =============================================================================
# QUERY & ASSERT
# =============================================================================

def conforms(obj: Any, definition: DefinitionLike) -> bool:
    """True iff `obj` implements every function in `definition`."""
    return not collect_diagnostics(obj, definition)


def describe(obj: Any, definition: DefinitionLike) -> Optional[str]:
    """
    Explain why `obj` does not conform.

    Returns:
        The diagnostic messages joined with " | ", or None if `obj` conforms
    """
    diagnostics = collect_diagnostics(obj, definition)
    if not diagnostics:
        return None
    return MESSAGE_SEPARATOR.join(d.message for d in diagnostics)


def assert_conforms(obj: Any, definition: DefinitionLike) -> None:
    """
    Fail fast if `obj` does not conform to `definition`.

    Raises:
        ConformanceError: Carrying every diagnostic, in definition order
        InvalidInterfaceDefinitionError: If `definition` is malformed
    """
    diagnostics = collect_diagnostics(obj, definition)
    if diagnostics:
        error = ConformanceError(diagnostics)
        logger.warning("%s does not conform: %s", type(obj).__name__, error)
        raise error


# =============================================================================
# APPLY
# =============================================================================

def _value_for_target(member: ResolvedMember, target: Any) -> Any:
    if isinstance(target, type):
        # Keep class-level binding behaviour for the target's instances
        if member.descriptor is not None:
            return member.descriptor
        if inspect.isfunction(member.value):
            return staticmethod(member.value)
    return member.value


def _check_receivers(members: list[ResolvedMember], target: Any) -> None:
    if isinstance(target, type):
        return
    unbound = [m.name for m in members if m.receiver_bound]
    if unbound:
        raise TypeError(
            f"cannot copy methods {', '.join(unbound)} from a class onto a "
            f"{type(target).__name__}: they need an instance to bind to"
        )


def apply(target: Any, definition: DefinitionLike, candidate: Any) -> None:
    """
    Copy `candidate`'s implementation of `definition` onto `target`.

    The candidate is asserted first; if it does not conform, the error
    propagates and `target` is left untouched. Otherwise each declared
    function is written onto `target` under the same name, overwriting
    any existing member. Mutable mappings receive items, everything else
    receives attributes. The references are a snapshot taken at call time.

    When `target` is a class, instances of it see the copied functions
    with the same arity the candidate exposed. Methods of a class
    candidate can only be copied onto another class.

    The untouched-target guarantee covers the checks above. A target that
    refuses a write (a missing `__slots__` entry, a read-only attribute)
    raises from that write, and names written before it stay written.

    Raises:
        ConformanceError: If `candidate` does not conform
        InvalidInterfaceDefinitionError: If `definition` is malformed
        TypeError: If a class candidate's methods are copied onto a non-class
    """
    interface = coerce_definition(definition)
    assert_conforms(candidate, interface)

    # Resolve everything before the first write
    members = [resolve_member(candidate, name) for name in interface.function_names]
    _check_receivers(members, target)
    values = [(m.name, _value_for_target(m, target)) for m in members]

    for name, value in values:
        if isinstance(target, MutableMapping):
            target[name] = value
        else:
            setattr(target, name, value)

    logger.info(
        "Applied %d function(s) from %s onto %s",
        len(values), type(candidate).__name__, type(target).__name__,
    )


# =============================================================================
# DECORATOR
# =============================================================================

def implements(definition: DefinitionLike) -> Callable[[T], T]:
    """
    Class decorator asserting that the class implements `definition`.

    The check runs when the class statement executes, so a class that
    drifts from its interface fails at import time:

        @implements(CALCULATOR)
        class Calculator:
            def add(self, num_one, num_two): ...
            def subtract(self, num_one, num_two): ...

    Methods are checked as instances see them, without `self`.
    """
    interface = coerce_definition(definition)

    def decorate(cls: T) -> T:
        if not isinstance(cls, type):
            raise TypeError(f"@implements can only decorate classes, got {type(cls).__name__}")
        assert_conforms(cls, interface)
        return cls

    return decorate
