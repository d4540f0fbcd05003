"""Identifier index and base/interface reference resolution."""

import logging
from collections.abc import Iterable, Iterator

from doxapi.models import (
    Definition,
    Enum,
    Namespace,
    Reference,
    TypeDefinition,
)

logger = logging.getLogger(__name__)


def iter_definitions(members: Iterable[Definition]) -> Iterator[Definition]:
    """Yield every definition below ``members``, at any depth."""
    for member in members:
        yield member
        if isinstance(member, (Namespace, TypeDefinition)):
            yield from iter_definitions(member.members)
        elif isinstance(member, Enum):
            yield from member.values


def build_definition_index(namespaces: Iterable[Namespace]) -> dict[str, Definition]:
    """Map the id of every definition in the namespace trees to the definition."""
    definitions: dict[str, Definition] = {}
    for definition in iter_definitions(namespaces):
        def_id = getattr(definition, "id", None)
        if not def_id:
            continue
        if def_id in definitions and definitions[def_id] is not definition:
            logger.warning("Duplicate definition id %s, keeping the first.", def_id)
            continue
        definitions[def_id] = definition
    return definitions


def reference_display_name(reference: Reference, target: Definition) -> str:
    """Return the reference's qualified name from the target's own name onward.

    A reference to ``A.B.Widget`` resolving to ``Widget`` displays as
    ``Widget``; the match is against the last occurrence of the target name.
    """
    start = reference.qualified_name.rfind(target.name)
    if start == -1:
        return reference.name
    return reference.qualified_name[start:]


def repair_reference_names(
    type_definition: TypeDefinition, definitions: dict[str, Definition]
) -> None:
    """Rewrite display names of resolvable base and interface references."""
    for reference in [*type_definition.inherits, *type_definition.implements]:
        target = definitions.get(reference.id) if reference.id else None
        if target is not None:
            reference.name = reference_display_name(reference, target)
