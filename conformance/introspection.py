"""
Member resolution and declared-arity introspection.

Members are resolved the way a caller would reach them:

    Mapping     — by key
    class       — as its instances will see the member (instance view)
    anything else (instances, modules, namespaces) — by attribute lookup,
                  which walks the instance dict, the MRO and __getattr__

A resolved value of None counts as absent.
"""

from __future__ import annotations

import inspect
import types
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional


_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)

# Class attributes that bind their first parameter to the instance on lookup
_RECEIVER_BINDING_TYPES = (
    types.FunctionType,
    types.MethodDescriptorType,
    types.WrapperDescriptorType,
)


@dataclass(frozen=True)
class ResolvedMember:
    """
    A member looked up on a candidate object.

    `receiver_bound` is set for plain functions found on a class: instances
    will bind their first parameter, so it does not count toward arity.
    `descriptor` holds the raw class attribute when the owner is a class.
    """
    name: str
    value: Any
    receiver_bound: bool = False
    descriptor: Any = None

    @property
    def is_missing(self) -> bool:
        return self.value is None


def resolve_member(obj: Any, name: str) -> ResolvedMember:
    """Resolve `name` on `obj`, walking whatever lookup chain `obj` has."""
    if isinstance(obj, Mapping):
        return ResolvedMember(name=name, value=obj.get(name))

    if isinstance(obj, type):
        return _resolve_class_member(obj, name)

    return ResolvedMember(name=name, value=getattr(obj, name, None))


def _lookup_in_mro(cls: type, name: str) -> Any:
    # Instances never see metaclass members, so only the class MRO is searched
    for klass in cls.__mro__:
        namespace = vars(klass)
        if name in namespace:
            return namespace[name]
    return None


def _resolve_class_member(cls: type, name: str) -> ResolvedMember:
    raw = _lookup_in_mro(cls, name)
    if raw is None:
        return ResolvedMember(name=name, value=None)

    if isinstance(raw, staticmethod):
        return ResolvedMember(name=name, value=raw.__func__, descriptor=raw)
    if isinstance(raw, (classmethod, types.ClassMethodDescriptorType)):
        return ResolvedMember(name=name, value=raw.__get__(None, cls), descriptor=raw)
    if isinstance(raw, _RECEIVER_BINDING_TYPES):
        return ResolvedMember(name=name, value=raw, receiver_bound=True, descriptor=raw)

    # properties and other non-callable descriptors are reported as they are
    return ResolvedMember(name=name, value=raw, descriptor=raw)


def declared_arity(member: ResolvedMember) -> Optional[int]:
    """
    Count the positional parameters `member` declares.

    Parameters with defaults count; *args, keyword-only parameters and
    **kwargs do not. Returns None when the callable has no introspectable
    signature.
    """
    try:
        signature = inspect.signature(member.value)
    except (TypeError, ValueError):
        return None

    parameters = list(signature.parameters.values())
    if member.receiver_bound and parameters and parameters[0].kind in _POSITIONAL_KINDS:
        parameters = parameters[1:]

    return sum(1 for p in parameters if p.kind in _POSITIONAL_KINDS)
