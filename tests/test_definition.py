"""
Tests for interface definition parsing and validation.

These tests verify that:
1. Raw mappings are frozen into ordered, immutable definitions
2. Malformed definitions fail fast with InvalidInterfaceDefinitionError
3. Definition errors are kept distinct from conformance failures
"""

import pytest

from conformance import (
    ConformanceError,
    FunctionSignature,
    InterfaceDefinition,
    InvalidInterfaceDefinitionError,
    conforms,
    diagnose,
)
from conformance.definition import coerce_definition


CALCULATOR = {
    "add": ["num_one", "num_two"],
    "subtract": ["num_one", "num_two"],
}


# =============================================================================
# FUNCTION SIGNATURE TESTS
# =============================================================================

class TestFunctionSignature:
    """Test single-function signatures."""

    def test_arity_is_parameter_count(self):
        assert FunctionSignature("add", ("a", "b")).arity == 2

    def test_zero_arity_allowed(self):
        signature = FunctionSignature("reset", ())
        assert signature.arity == 0
        assert signature.render() == "reset()"

    def test_render_joins_parameter_names(self):
        signature = FunctionSignature("add", ("num_one", "num_two"))
        assert signature.render() == "add(num_one, num_two)"

    def test_empty_name_rejected(self):
        with pytest.raises(InvalidInterfaceDefinitionError, match="non-empty string"):
            FunctionSignature("", ("a",))

    def test_any_string_name_accepted(self):
        """Names are mapping keys, not necessarily Python identifiers."""
        signature = FunctionSignature("add-one", ("x",))
        assert signature.render() == "add-one(x)"

    def test_non_identifier_name_diagnosed_by_key(self):
        assert diagnose({"add-one": lambda x: x + 1}, {"add-one": ["x"]}) == []
        assert diagnose({}, {"add one": ["x"]}) == ["Missing Function: add one(x)"]

    def test_non_string_parameter_rejected(self):
        with pytest.raises(InvalidInterfaceDefinitionError) as exc_info:
            FunctionSignature("add", ("a", 2))
        assert exc_info.value.function_name == "add"


# =============================================================================
# INTERFACE DEFINITION TESTS
# =============================================================================

class TestInterfaceDefinition:
    """Test building definitions from mappings."""

    def test_from_mapping_preserves_order(self):
        definition = InterfaceDefinition.from_mapping(
            {"subtract": ["a", "b"], "add": ["a", "b"], "negate": ["a"]}
        )
        assert definition.function_names == ("subtract", "add", "negate")

    def test_from_mapping_accepts_tuples(self):
        definition = InterfaceDefinition.from_mapping({"add": ("a", "b")})
        assert definition.get("add").parameters == ("a", "b")

    def test_from_mapping_does_not_mutate_input(self):
        raw = {"add": ["a", "b"]}
        InterfaceDefinition.from_mapping(raw)
        assert raw == {"add": ["a", "b"]}

    def test_empty_mapping_is_valid(self):
        definition = InterfaceDefinition.from_mapping({})
        assert len(definition) == 0

    def test_membership_and_lookup(self):
        definition = InterfaceDefinition.from_mapping(CALCULATOR)
        assert "add" in definition
        assert "multiply" not in definition
        assert 42 not in definition
        assert definition.get("multiply") is None

    def test_iterates_signatures(self):
        definition = InterfaceDefinition.from_mapping(CALCULATOR)
        assert [f.render() for f in definition] == [
            "add(num_one, num_two)",
            "subtract(num_one, num_two)",
        ]

    def test_duplicate_names_rejected(self):
        with pytest.raises(InvalidInterfaceDefinitionError, match="more than once"):
            InterfaceDefinition((
                FunctionSignature("add", ("a", "b")),
                FunctionSignature("add", ("x",)),
            ))

    def test_coerce_passes_definitions_through(self):
        definition = InterfaceDefinition.from_mapping(CALCULATOR)
        assert coerce_definition(definition) is definition


# =============================================================================
# MALFORMED DEFINITION TESTS
# =============================================================================

class TestMalformedDefinitions:
    """Malformed definitions must fail fast and never look like nonconformance."""

    def test_non_mapping_rejected(self):
        with pytest.raises(InvalidInterfaceDefinitionError, match="expected a mapping"):
            InterfaceDefinition.from_mapping(["add", "subtract"])

    def test_string_parameter_list_rejected(self):
        """A bare string must not be read as a list of one-letter parameters."""
        with pytest.raises(InvalidInterfaceDefinitionError, match="list of strings"):
            InterfaceDefinition.from_mapping({"add": "ab"})

    def test_non_sequence_parameter_list_rejected(self):
        with pytest.raises(InvalidInterfaceDefinitionError):
            InterfaceDefinition.from_mapping({"add": 2})

    def test_non_string_function_name_rejected(self):
        with pytest.raises(InvalidInterfaceDefinitionError):
            InterfaceDefinition.from_mapping({1: ["a"]})

    def test_diagnose_raises_on_malformed_definition(self):
        with pytest.raises(InvalidInterfaceDefinitionError):
            diagnose({}, None)

    def test_conforms_raises_on_malformed_definition(self):
        with pytest.raises(InvalidInterfaceDefinitionError):
            conforms({}, {"add": "ab"})

    def test_error_kind_is_distinct_from_conformance_error(self):
        with pytest.raises(InvalidInterfaceDefinitionError) as exc_info:
            diagnose({}, "add")
        assert not isinstance(exc_info.value, ConformanceError)
        assert isinstance(exc_info.value, ValueError)
