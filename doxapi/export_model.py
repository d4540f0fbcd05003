"""Serialize the API model for an external renderer."""

import dataclasses
import json
from pathlib import Path
from typing import Any

from doxapi.models import ApiModel, Definition, Method
from doxapi.overload_identifier import overload_identifier


def definition_to_dict(definition: Any) -> Any:
    """Convert a definition tree to plain data, tagging records with their kind.

    Methods also carry the ``identifier`` that tells overloads apart.
    """
    if isinstance(definition, list):
        return [definition_to_dict(x) for x in definition]
    if not dataclasses.is_dataclass(definition):
        return definition
    data: dict[str, Any] = {}
    kind = getattr(definition, "definition_type", None)
    if kind is not None:
        data["definition_type"] = kind
    for f in dataclasses.fields(definition):
        data[f.name] = definition_to_dict(getattr(definition, f.name))
    if isinstance(definition, Method):
        data["identifier"] = overload_identifier(definition)
    return data


def index_entry(definition: Definition) -> dict[str, Any]:
    """Summarize an indexed definition; the full record lives in the tree."""
    return {
        "definition_type": definition.definition_type,
        "qualified_name": getattr(definition, "qualified_name", ""),
        "name": definition.name,
        "namespace": getattr(definition, "namespace", None),
    }


def model_to_dict(model: ApiModel) -> dict[str, Any]:
    """Return the namespace trees plus the id to definition map."""
    return {
        "namespaces": definition_to_dict(model.namespaces),
        "definitions": {
            def_id: index_entry(model.definitions[def_id])
            for def_id in sorted(model.definitions)
        },
    }


def write_model_json(model: ApiModel, path: Path) -> None:
    """Write the model as JSON to ``path``.

    Raises :class:`IdentifierError` if an overloaded method's identifier is
    unusable.
    """
    data = model_to_dict(model)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
