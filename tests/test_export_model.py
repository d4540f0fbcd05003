"""Tests for exporting the API model as JSON."""

import json
from pathlib import Path

import pytest

from doxapi.errors import IdentifierError
from doxapi.export_model import definition_to_dict, model_to_dict, write_model_json
from doxapi.models import (
    ApiModel,
    Definition,
    Enum,
    EnumValue,
    Method,
    Namespace,
    Parameter,
    Reference,
    TypeDefinition,
)


def make_model() -> ApiModel:
    """Build a small model with a class, an enum and a delegate."""
    method = Method(
        id="m1",
        qualified_name="Game.Widget.Draw",
        name="Draw",
        type="void",
        params=[Parameter(name="alpha", type="float", default_value="1.0f")],
        owner=Reference(id="class_widget", qualified_name="Game.Widget", name="Widget"),
    )
    widget = TypeDefinition(
        id="class_widget",
        qualified_name="Game.Widget",
        name="Widget",
        definition_type="struct",
        members=[method],
    )
    mode = Enum(id="enum_mode", name="Mode", values=[EnumValue(id="v1", name="On")])
    callback = Method(id="d1", name="Callback", delegate=True)
    game = Namespace(
        qualified_name="Game", name="Game", members=[callback, mode, widget]
    )
    definitions: dict[str, Definition] = {
        "m1": method,
        "class_widget": widget,
        "enum_mode": mode,
        "v1": mode.values[0],
        "d1": callback,
    }
    return ApiModel(namespaces=[game], definitions=definitions)


def test_records_are_tagged_with_their_kind() -> None:
    """Verify every record carries its definition type."""
    data = definition_to_dict(make_model().namespaces[0])

    assert data["definition_type"] == "namespace"
    callback, mode, widget = data["members"]
    assert callback["definition_type"] == "delegate"
    assert mode["definition_type"] == "enum"
    assert mode["values"][0]["definition_type"] == "enum value"
    assert widget["definition_type"] == "struct"

    draw = widget["members"][0]
    assert draw["definition_type"] == "method"
    assert draw["identifier"] == "Game.Widget.Draw"
    assert draw["params"][0] == {
        "definition_type": "parameter",
        "name": "alpha",
        "type": "float",
        "default_value": "1.0f",
        "description": None,
    }
    # References are plain data without a kind.
    assert draw["owner"] == {
        "id": "class_widget",
        "qualified_name": "Game.Widget",
        "name": "Widget",
    }


def test_model_maps_ids_to_definitions() -> None:
    """Verify the exported model maps every indexed id to its definition."""
    data = model_to_dict(make_model())
    definitions = data["definitions"]
    assert list(definitions) == ["class_widget", "d1", "enum_mode", "m1", "v1"]
    assert definitions["class_widget"] == {
        "definition_type": "struct",
        "qualified_name": "Game.Widget",
        "name": "Widget",
        "namespace": None,
    }
    assert definitions["v1"]["definition_type"] == "enum value"
    assert definitions["v1"]["qualified_name"] == ""
    assert definitions["d1"]["definition_type"] == "delegate"
    assert [ns["name"] for ns in data["namespaces"]] == ["Game"]


def test_write_model_json(tmp_path: Path) -> None:
    """Verify the model is written as readable JSON."""
    out = tmp_path / "model.json"
    write_model_json(make_model(), out)

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data == model_to_dict(make_model())


def test_overloads_are_exported_with_distinct_identifiers() -> None:
    """Verify overloaded methods are exported with signature identifiers."""
    first = Method(
        id="r1",
        qualified_name="Game.Widget.Resize",
        name="Resize",
        namespace="Game",
        type="void",
        params=[Parameter(name="w", type="int")],
        overloads=[Reference(id="r2", name="Resize")],
    )
    second = Method(
        id="r2",
        qualified_name="Game.Widget.Resize",
        name="Resize",
        namespace="Game",
        type="void",
        params=[Parameter(name="scale", type="float")],
        overloads=[Reference(id="r1", name="Resize")],
    )
    data = definition_to_dict([first, second])
    assert [m["identifier"] for m in data] == [
        "Widget.Resize-int",
        "Widget.Resize-float",
    ]


def test_unusable_identifier_fails_the_export(tmp_path: Path) -> None:
    """Verify an overload identifier with whitespace aborts writing the model."""
    odd = Method(
        id="o1",
        qualified_name="Game.Odd Name",
        name="Odd Name",
        namespace="Game",
        overloads=[Reference(id="o2", name="Odd Name")],
    )
    model = ApiModel(
        namespaces=[Namespace(qualified_name="Game", name="Game", members=[odd])],
        definitions={"o1": odd},
    )
    out = tmp_path / "model.json"
    with pytest.raises(IdentifierError, match="o1"):
        write_model_json(model, out)
    assert not out.exists()
