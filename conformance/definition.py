"""
Interface Definition model.

An interface definition maps function names to the ordered parameter
names each function is expected to declare. Parameter names are labels
used in diagnostics; only their count is checked.

    CALCULATOR = {
        "add": ["num_one", "num_two"],
        "subtract": ["num_one", "num_two"],
    }

Raw mappings are validated and frozen into an InterfaceDefinition before
any object is checked against them. The caller's mapping is never mutated.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from .errors import InvalidInterfaceDefinitionError


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

# Joins parameter names when rendering "name(p1, p2)"
PARAMETER_SEPARATOR = ", "


# =============================================================================
# FUNCTION SIGNATURE
# =============================================================================

@dataclass(frozen=True)
class FunctionSignature:
    """A single function declared by an interface."""
    name: str
    parameters: tuple[str, ...]

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise InvalidInterfaceDefinitionError(
                f"function name must be a non-empty string, got {self.name!r}",
            )
        for parameter in self.parameters:
            if not isinstance(parameter, str) or not parameter:
                raise InvalidInterfaceDefinitionError(
                    f"parameter names must be non-empty strings, got {parameter!r}",
                    self.name,
                )

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def render(self) -> str:
        """Render as it appears in diagnostics, e.g. 'add(num_one, num_two)'."""
        return f"{self.name}({PARAMETER_SEPARATOR.join(self.parameters)})"


# =============================================================================
# INTERFACE DEFINITION
# =============================================================================

@dataclass(frozen=True)
class InterfaceDefinition:
    """
    An ordered, immutable set of function signatures.

    Function order is the order diagnostics are reported in. Names are
    unique within one definition.
    """
    functions: tuple[FunctionSignature, ...]

    def __post_init__(self):
        seen = set()
        for function in self.functions:
            if not isinstance(function, FunctionSignature):
                raise InvalidInterfaceDefinitionError(
                    f"expected FunctionSignature entries, got {type(function).__name__}",
                )
            if function.name in seen:
                raise InvalidInterfaceDefinitionError(
                    "function is declared more than once",
                    function.name,
                )
            seen.add(function.name)

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> InterfaceDefinition:
        """
        Build a definition from a name -> parameter-names mapping.

        Raises:
            InvalidInterfaceDefinitionError: If the mapping is malformed
        """
        if not isinstance(mapping, Mapping):
            raise InvalidInterfaceDefinitionError(
                f"expected a mapping of function names to parameter names, "
                f"got {type(mapping).__name__}",
            )

        functions = []
        for name, parameters in mapping.items():
            # A bare string is a Sequence of characters, never a parameter list
            if isinstance(parameters, (str, bytes)) or not isinstance(parameters, Sequence):
                raise InvalidInterfaceDefinitionError(
                    f"parameter names must be a list of strings, "
                    f"got {type(parameters).__name__}",
                    name if isinstance(name, str) else None,
                )
            functions.append(FunctionSignature(name=name, parameters=tuple(parameters)))

        return cls(functions=tuple(functions))

    @property
    def function_names(self) -> tuple[str, ...]:
        return tuple(function.name for function in self.functions)

    def get(self, name: str) -> Optional[FunctionSignature]:
        for function in self.functions:
            if function.name == name:
                return function
        return None

    def __iter__(self) -> Iterator[FunctionSignature]:
        return iter(self.functions)

    def __len__(self) -> int:
        return len(self.functions)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None


DefinitionLike = Union[InterfaceDefinition, Mapping]


def coerce_definition(definition: DefinitionLike) -> InterfaceDefinition:
    """Return `definition` as an InterfaceDefinition, validating raw mappings."""
    if isinstance(definition, InterfaceDefinition):
        return definition
    return InterfaceDefinition.from_mapping(definition)
