"""Build typed API definitions from parsed Doxygen compound documents."""

import logging
from collections.abc import Callable
from typing import Any

from doxapi.extract_description import extract_description
from doxapi.extract_parameter_descriptions import (
    extract_parameter_descriptions,
    extract_returns_description,
)
from doxapi.group_overloads import group_overloads
from doxapi.interface_classifier import InterfaceClassifier
from doxapi.load_config import DEFAULT_CONFIG
from doxapi.models import (
    Enum,
    EnumValue,
    Event,
    Field,
    Method,
    Namespace,
    Parameter,
    Property,
    Reference,
    TemplateType,
    TypeDefinition,
    reference_to,
    sort_members,
)
from doxapi.node_text import as_list, node_attributes, node_text
from doxapi.sanitize_identifier import sanitize_identifier
from doxapi.type_to_html import type_to_html

logger = logging.getLogger(__name__)

SCOPE_SEPARATOR = "::"
TYPE_KINDS = {"class", "struct", "interface"}


def last_segment(qualified_name: str) -> str:
    """Return the final dot-separated segment of a qualified name."""
    return qualified_name.rsplit(".", 1)[-1]


def _descriptions(node: dict[str, Any]) -> tuple[str, str]:
    """Return (short description, full description) of a compound or member."""
    short = extract_description(node.get("briefdescription"))
    return short, short + extract_description(node.get("detaileddescription"))


class DefinitionExtractor:
    """Collects namespaces and types from Doxygen's index and compound files.

    Feed the parsed index to :meth:`compound_refids` to learn which compound
    files to load, then pass each parsed compound to
    :meth:`process_definition`. Results accumulate in :attr:`namespaces` and
    :attr:`types`; types are attached to namespaces later.
    """

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        is_interface: Callable[[Reference], bool] | None = None,
    ) -> None:
        """Initialize the extractor from configuration."""
        config = config or DEFAULT_CONFIG
        ingest = config["ingest"]
        self.skipped_compound_kinds = set(ingest["skipped_compound_kinds"])
        self.hidden_protections = set(ingest["hidden_protections"])
        if is_interface is None:
            interfaces = config["interfaces"]
            is_interface = InterfaceClassifier(
                interfaces["id_prefix"], interfaces["name_pattern"]
            )
        self.is_interface = is_interface

        self.namespaces: list[Namespace] = []
        self.types: list[TypeDefinition] = []

    def compound_refids(self, index: dict[str, Any]) -> list[str]:
        """Return refids of the compounds listed in a parsed ``index.xml``."""
        root = index.get("doxygenindex")
        if not isinstance(root, dict):
            return []
        refids = []
        for compound in as_list(root.get("compound")):
            attrs = node_attributes(compound)
            if attrs.get("kind") in self.skipped_compound_kinds:
                continue
            refids.append(attrs["refid"])
        return refids

    def process_definition(self, document: dict[str, Any]) -> None:
        """Extract the definition described by a parsed compound document."""
        compounddef = document["doxygen"]["compounddef"]
        if self._is_hidden(compounddef):
            return

        kind = node_attributes(compounddef).get("kind")
        if kind == "namespace":
            self.namespaces.append(self._process_namespace(compounddef))
        elif kind in TYPE_KINDS:
            self.types.append(self._process_type(compounddef))
        else:
            logger.warning(
                "Unhandled compound kind %r (%s).",
                kind,
                node_text(compounddef.get("compoundname")),
            )

    def _is_hidden(self, node: dict[str, Any]) -> bool:
        return node_attributes(node).get("prot") in self.hidden_protections

    def _memberdefs(self, compounddef: dict[str, Any]) -> list[dict[str, Any]]:
        members = []
        for sectiondef in as_list(compounddef.get("sectiondef")):
            for memberdef in as_list(sectiondef.get("memberdef")):
                if not self._is_hidden(memberdef):
                    members.append(memberdef)
        return members

    def _process_namespace(self, compounddef: dict[str, Any]) -> Namespace:
        qualified_name = node_text(compounddef.get("compoundname")).replace(
            SCOPE_SEPARATOR, "."
        )
        namespace = Namespace(
            qualified_name=qualified_name, name=last_segment(qualified_name)
        )

        methods: dict[str, list[Reference]] = {}
        for memberdef in self._memberdefs(compounddef):
            kind = node_attributes(memberdef).get("kind")
            if kind == "enum":
                namespace.members.append(self._process_enum(memberdef, qualified_name))
            elif kind == "function":
                # Free functions can't exist in C#, so these are delegates.
                method = self._process_method(memberdef, None, qualified_name)
                methods.setdefault(method.name, []).append(reference_to(method))
                namespace.members.append(method)
            else:
                logger.warning(
                    "Unhandled namespace member kind %r in %s.", kind, qualified_name
                )

        group_overloads(namespace.members, methods)
        return namespace

    def _process_enum(self, memberdef: dict[str, Any], namespace: str) -> Enum:
        short, description = _descriptions(memberdef)
        enum = Enum(
            id=node_attributes(memberdef).get("id"),
            qualified_name=node_text(memberdef.get("qualifiedname")),
            name=node_text(memberdef.get("name")),
            access=node_attributes(memberdef).get("prot"),
            namespace=namespace,
            assembly=namespace,
            short_description=short,
            description=description,
        )
        for enumvalue in as_list(memberdef.get("enumvalue")):
            enum.values.append(
                EnumValue(
                    id=node_attributes(enumvalue).get("id"),
                    name=node_text(enumvalue.get("name")),
                    description=_descriptions(enumvalue)[1],
                )
            )
        return enum

    def _process_type(self, compounddef: dict[str, Any]) -> TypeDefinition:
        attrs = node_attributes(compounddef)
        qualified_name = sanitize_identifier(
            node_text(compounddef.get("compoundname")).replace(SCOPE_SEPARATOR, ".")
        )
        # Wrong for nested types; attaching to namespaces fixes it up.
        namespace = qualified_name.rsplit(".", 1)[0] if "." in qualified_name else None
        short, description = _descriptions(compounddef)

        type_definition = TypeDefinition(
            id=attrs.get("id"),
            qualified_name=qualified_name,
            name=last_segment(qualified_name),
            definition_type=attrs.get("kind", "class"),
            access=attrs.get("prot"),
            namespace=namespace,
            assembly=namespace,
            short_description=short,
            description=description,
        )
        owner = reference_to(type_definition)

        templateparamlist = compounddef.get("templateparamlist")
        if isinstance(templateparamlist, dict):
            descriptions = extract_parameter_descriptions(
                compounddef.get("detaileddescription")
            )
            for param in as_list(templateparamlist.get("param")):
                identifier = node_text(param.get("declname")) or node_text(
                    param.get("type")
                )
                type_definition.types.append(
                    TemplateType(
                        identifier=identifier,
                        description=descriptions.template_parameters.get(identifier),
                    )
                )

        for baseref in as_list(compounddef.get("basecompoundref")):
            qualified_base = sanitize_identifier(node_text(baseref))
            reference = Reference(
                id=node_attributes(baseref).get("refid"),
                qualified_name=qualified_base,
                name=last_segment(qualified_base),
            )
            if self.is_interface(reference):
                type_definition.implements.append(reference)
            else:
                type_definition.inherits.append(reference)

        methods: dict[str, list[Reference]] = {}
        for memberdef in self._memberdefs(compounddef):
            kind = node_attributes(memberdef).get("kind")
            if kind == "variable":
                type_definition.members.append(self._process_field(memberdef, owner))
            elif kind == "property":
                type_definition.members.append(
                    self._process_property(memberdef, owner)
                )
            elif kind == "function":
                method = self._process_method(memberdef, owner, None)
                methods.setdefault(method.name, []).append(reference_to(method))
                type_definition.members.append(method)
            elif kind == "event":
                type_definition.members.append(self._process_event(memberdef, owner))
            else:
                logger.warning(
                    "Unhandled type member kind %r in %s.", kind, qualified_name
                )

        group_overloads(type_definition.members, methods)
        sort_members(type_definition.members)
        return type_definition

    def _member_fields(self, memberdef: dict[str, Any]) -> dict[str, Any]:
        """Fields shared by every member kind."""
        attrs = node_attributes(memberdef)
        short, description = _descriptions(memberdef)
        return {
            "id": attrs.get("id"),
            "qualified_name": sanitize_identifier(
                node_text(memberdef.get("qualifiedname"))
            ),
            "name": sanitize_identifier(node_text(memberdef.get("name"))),
            "type": type_to_html(node_text(memberdef.get("type"))),
            "static": attrs.get("static") == "yes",
            "short_description": short,
            "description": description,
        }

    def _process_field(self, memberdef: dict[str, Any], owner: Reference) -> Field:
        return Field(
            access=node_attributes(memberdef).get("prot"),
            owner=owner,
            **self._member_fields(memberdef),
        )

    def _process_property(
        self, memberdef: dict[str, Any], owner: Reference
    ) -> Property:
        attrs = node_attributes(memberdef)
        get_access = _accessor_access(attrs, "gettable")
        return Property(
            access=get_access,
            get_access=get_access,
            set_access=_accessor_access(attrs, "settable"),
            owner=owner,
            **self._member_fields(memberdef),
        )

    def _process_method(
        self,
        memberdef: dict[str, Any],
        owner: Reference | None,
        namespace: str | None,
    ) -> Method:
        method = Method(
            access=node_attributes(memberdef).get("prot"),
            delegate=owner is None,
            namespace=namespace,
            assembly=namespace,
            owner=owner,
            **self._member_fields(memberdef),
        )

        for param in as_list(memberdef.get("param")):
            defval = node_text(param.get("defval"))
            method.params.append(
                Parameter(
                    name=node_text(param.get("declname")),
                    type=type_to_html(node_text(param.get("type"))),
                    default_value=type_to_html(defval) if defval else None,
                )
            )

        detailed = memberdef.get("detaileddescription")
        descriptions = extract_parameter_descriptions(detailed)
        for identifier, text in descriptions.template_parameters.items():
            method.types.append(TemplateType(identifier=identifier, description=text))
        for param in method.params:
            if descriptions.parameters.get(param.name):
                param.description = descriptions.parameters[param.name]
        method.returns_description = extract_returns_description(detailed)
        return method

    def _process_event(self, memberdef: dict[str, Any], owner: Reference) -> Event:
        return Event(
            access=node_attributes(memberdef).get("prot"),
            owner=owner,
            **self._member_fields(memberdef),
        )


def _accessor_access(attrs: dict[str, str], accessor: str) -> str | None:
    """Access of a property getter/setter (``accessor`` is gettable/settable)."""
    if attrs.get(accessor) == "yes":
        return attrs.get("prot")
    if attrs.get(f"protected{accessor}") == "yes":
        return "protected"
    return None
