"""Nest types and namespaces into a namespace tree."""

import logging

from doxapi.models import (
    ApiModel,
    Enum,
    Member,
    Method,
    Namespace,
    TypeDefinition,
    reference_to,
    sort_members,
)
from doxapi.resolve_references import build_definition_index, repair_reference_names

logger = logging.getLogger(__name__)


def _sorted_namespaces(namespaces: list[Namespace]) -> list[Namespace]:
    return sorted(namespaces, key=lambda ns: ns.qualified_name.lower())


def attach_types(
    namespaces: list[Namespace], types: list[TypeDefinition]
) -> list[TypeDefinition]:
    """Move each type into the most specific namespace prefixing its name.

    A claimed type is renamed to its qualified name relative to the
    namespace, so a nested type becomes ``Outer.Inner``. Returns the types no
    namespace claimed.
    """
    pending = list(types)
    by_length = sorted(namespaces, key=lambda ns: len(ns.qualified_name), reverse=True)
    for namespace in by_length:
        prefix = namespace.qualified_name + "."
        remaining = []
        for type_definition in pending:
            if type_definition.qualified_name.startswith(prefix):
                type_definition.name = type_definition.qualified_name[len(prefix) :]
                _stamp(type_definition, namespace.qualified_name)
                namespace.members.append(type_definition)
            else:
                remaining.append(type_definition)
        pending = remaining
        sort_members(namespace.members)
    return pending


def link_nested_types(types: list[TypeDefinition]) -> None:
    """Point each nested type's ``owner`` at its enclosing type."""
    by_name = {t.qualified_name: t for t in types}
    for type_definition in types:
        if "." not in type_definition.name:
            continue
        outer_name = type_definition.qualified_name.rsplit(".", 1)[0]
        outer = by_name.get(outer_name)
        if outer is not None:
            type_definition.owner = reference_to(outer)


def _stamp(definition: TypeDefinition | Enum | Member, namespace: str) -> None:
    definition.namespace = namespace
    definition.assembly = namespace


def _has_members(namespace: Namespace, namespaces: list[Namespace]) -> bool:
    if namespace.members:
        return True
    prefix = namespace.qualified_name + "."
    return any(
        other.members for other in namespaces if other.qualified_name.startswith(prefix)
    )


def prune_namespaces(namespaces: list[Namespace]) -> list[Namespace]:
    """Drop namespaces with no descendant members and restamp ownership.

    A namespace without members survives only as a container for descendant
    namespaces that have some. Members of surviving namespaces, and the
    members of their types, get the namespace as ``namespace``/``assembly``.
    """
    kept = []
    for namespace in namespaces:
        if not _has_members(namespace, namespaces):
            logger.debug("Pruning empty namespace %s.", namespace.qualified_name)
            continue
        for member in namespace.members:
            if isinstance(member, (TypeDefinition, Enum, Method)):
                _stamp(member, namespace.qualified_name)
            if isinstance(member, TypeDefinition):
                for sub_member in member.members:
                    _stamp(sub_member, namespace.qualified_name)
        kept.append(namespace)
    return kept


def nest_namespaces(namespaces: list[Namespace]) -> list[Namespace]:
    """Nest namespaces under their parents and return the root namespaces.

    Doxygen skips namespaces without directly documented members, so any
    missing segment between a namespace and its nearest existing ancestor is
    created as an empty namespace.
    """
    roots: list[Namespace] = []
    by_name: dict[str, Namespace] = {}
    for namespace in _sorted_namespaces(namespaces):
        parts = namespace.qualified_name.split(".")
        parent = None
        depth = 0
        for i in range(len(parts) - 1, 0, -1):
            parent = by_name.get(".".join(parts[:i]))
            if parent is not None:
                depth = i
                break

        if parent is None:
            roots.append(namespace)
        else:
            for segment in parts[depth:-1]:
                intermediate = Namespace(
                    qualified_name=f"{parent.qualified_name}.{segment}", name=segment
                )
                logger.debug("Creating namespace %s.", intermediate.qualified_name)
                parent.members.append(intermediate)
                sort_members(parent.members)
                by_name[intermediate.qualified_name] = intermediate
                parent = intermediate
            parent.members.append(namespace)
            sort_members(parent.members)

        by_name[namespace.qualified_name] = namespace
    return roots


def build_namespace_tree(
    namespaces: list[Namespace], types: list[TypeDefinition]
) -> ApiModel:
    """Assemble extracted namespaces and types into the final API model."""
    namespaces = _sorted_namespaces(namespaces)

    for type_definition in attach_types(namespaces, types):
        logger.warning(
            "Type %s is not in any documented namespace, skipping.",
            type_definition.qualified_name,
        )
    link_nested_types(types)

    namespaces = prune_namespaces(namespaces)
    definitions = build_definition_index(namespaces)
    for definition in definitions.values():
        if isinstance(definition, TypeDefinition):
            repair_reference_names(definition, definitions)

    return ApiModel(namespaces=nest_namespaces(namespaces), definitions=definitions)
