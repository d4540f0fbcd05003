"""Tests for overload-safe method identifiers."""

import pytest

from doxapi.errors import IdentifierError
from doxapi.models import Method, Parameter, Reference
from doxapi.overload_identifier import overload_identifier, safe_type_name


@pytest.mark.parametrize(
    ("type_name", "expected"),
    [
        ("int", "int"),
        ("int[]", "int_"),
        ("List&lt; int &gt;", "List_int"),
        ("Dictionary&lt; string, int &gt;", "Dictionary_string_int"),
        ("out float", "float"),
        ('<a href="class_widget">Widget</a>', "Widget"),
        ("Outer.Inner", "Inner"),
    ],
)
def test_safe_type_name(type_name: str, expected: str) -> None:
    """Verify type signatures are reduced to a single word."""
    assert safe_type_name(type_name) == expected


def test_single_method_uses_relative_name() -> None:
    """Verify a method without overloads is named relative to its namespace."""
    method = Method(
        id="m1",
        qualified_name="Game.Widget.Resize",
        name="Resize",
        namespace="Game",
        type="void",
        params=[Parameter(name="w", type="int")],
    )
    assert overload_identifier(method) == "Widget.Resize"


def test_overloaded_method_includes_signature() -> None:
    """Verify overloads append parameter types and non-void return types."""
    method = Method(
        id="m2",
        qualified_name="Game.Widget.Resize",
        name="Resize",
        namespace="Game",
        type="bool",
        params=[
            Parameter(name="w", type="int"),
            Parameter(name="sizes", type="List&lt; float &gt;"),
        ],
        overloads=[Reference(id="m1", name="Resize")],
    )
    assert overload_identifier(method) == "Widget.Resize-int-List_float--bool"


def test_void_overload_has_no_return_suffix() -> None:
    """Verify void return types are left out."""
    method = Method(
        id="m3",
        qualified_name="Game.Widget.Reset",
        namespace="Game",
        type="void",
        overloads=[Reference(id="m4", name="Reset")],
    )
    assert overload_identifier(method) == "Widget.Reset"


def test_whitespace_in_identifier_raises() -> None:
    """Verify an overload identifier containing whitespace is rejected."""
    method = Method(
        id="m5",
        qualified_name="Game.Widget.Odd Name",
        namespace="Game",
        type="void",
        overloads=[Reference(id="m6", name="Odd Name")],
    )
    with pytest.raises(IdentifierError, match="m5"):
        overload_identifier(method)
