# Conformance Engine
# Runtime interface checks for duck-typed objects

"""
Core invariant: an object implements an interface only if every declared
function is present, callable, and declares exactly the expected number
of parameters.

    from conformance import apply, assert_conforms, conforms, diagnose

    CALCULATOR = {"add": ["num_one", "num_two"], "subtract": ["num_one", "num_two"]}

    conforms(calculator, CALCULATOR)         # -> bool
    diagnose(calculator, CALCULATOR)         # -> list of messages
    assert_conforms(calculator, CALCULATOR)  # raises ConformanceError
    apply(target, CALCULATOR, calculator)    # copies the implementation
"""

import logging

from .definition import FunctionSignature, InterfaceDefinition
from .diagnosis import Diagnostic, DiagnosticKind, collect_diagnostics, diagnose
from .engine import apply, assert_conforms, conforms, describe, implements
from .errors import ConformanceError, InvalidInterfaceDefinitionError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "apply",
    "assert_conforms",
    "collect_diagnostics",
    "conforms",
    "describe",
    "diagnose",
    "implements",
    "ConformanceError",
    "Diagnostic",
    "DiagnosticKind",
    "FunctionSignature",
    "InterfaceDefinition",
    "InvalidInterfaceDefinitionError",
]
