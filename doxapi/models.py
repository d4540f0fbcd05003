"""Data models for representing API definitions loaded from Doxygen XML."""

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass
class Reference:
    """Lightweight pointer to another definition, without ownership."""

    id: str | None = None
    qualified_name: str = ""
    name: str = ""


@dataclass
class TemplateType:
    """A template (generic) type parameter of a type or method."""

    identifier: str = ""
    constraints: list[str] = field(default_factory=list)  # not emitted by Doxygen
    description: str | None = None


@dataclass
class Parameter:
    """A parameter of a method or delegate."""

    definition_type: ClassVar[str] = "parameter"

    name: str = ""
    type: str = ""
    default_value: str | None = None
    description: str | None = None


@dataclass
class EnumValue:
    """A single value of an enum."""

    definition_type: ClassVar[str] = "enum value"

    id: str | None = None
    name: str = ""
    description: str = ""


@dataclass
class Enum:
    """An enum declared in a namespace."""

    definition_type: ClassVar[str] = "enum"

    id: str | None = None
    qualified_name: str = ""
    name: str = ""
    access: str | None = None
    namespace: str | None = None
    assembly: str | None = None
    short_description: str = ""
    description: str = ""
    values: list[EnumValue] = field(default_factory=list)
    owner: Reference | None = None


@dataclass
class Field:
    """A field of a class or struct."""

    definition_type: ClassVar[str] = "field"

    id: str | None = None
    qualified_name: str = ""
    name: str = ""
    type: str = ""
    access: str | None = None
    static: bool = False
    namespace: str | None = None
    assembly: str | None = None
    short_description: str = ""
    description: str = ""
    owner: Reference | None = None


@dataclass
class Property:
    """A property of a class, struct or interface.

    ``access`` mirrors the getter's access modifier.
    """

    definition_type: ClassVar[str] = "property"

    id: str | None = None
    qualified_name: str = ""
    name: str = ""
    type: str = ""
    access: str | None = None
    get_access: str | None = None
    set_access: str | None = None
    static: bool = False
    namespace: str | None = None
    assembly: str | None = None
    short_description: str = ""
    description: str = ""
    owner: Reference | None = None


@dataclass
class Method:
    """A method of a type, or a delegate when declared directly in a namespace."""

    id: str | None = None
    qualified_name: str = ""
    name: str = ""
    type: str = ""  # return type or "void"
    types: list[TemplateType] = field(default_factory=list)
    params: list[Parameter] = field(default_factory=list)
    access: str | None = None
    static: bool = False
    delegate: bool = False
    namespace: str | None = None
    assembly: str | None = None
    short_description: str = ""
    description: str = ""
    returns_description: str = ""
    overloads: list[Reference] = field(default_factory=list)
    owner: Reference | None = None

    @property
    def definition_type(self) -> str:
        """Return ``"delegate"`` for ownerless functions, ``"method"`` otherwise."""
        return "delegate" if self.delegate else "method"


@dataclass
class Event:
    """An event of a class or interface."""

    definition_type: ClassVar[str] = "event"

    id: str | None = None
    qualified_name: str = ""
    name: str = ""
    type: str = ""
    access: str | None = None
    static: bool = False
    namespace: str | None = None
    assembly: str | None = None
    short_description: str = ""
    description: str = ""
    owner: Reference | None = None


Member = Field | Property | Method | Event


@dataclass
class TypeDefinition:
    """A class, struct or interface."""

    id: str | None = None
    qualified_name: str = ""
    name: str = ""
    definition_type: str = "class"  # class/struct/interface
    access: str | None = None
    namespace: str | None = None
    assembly: str | None = None
    owner: Reference | None = None  # enclosing type of a nested type
    types: list[TemplateType] = field(default_factory=list)
    inherits: list[Reference] = field(default_factory=list)
    implements: list[Reference] = field(default_factory=list)
    members: list[Member] = field(default_factory=list)
    short_description: str = ""
    description: str = ""


@dataclass
class Namespace:
    """A namespace and its (possibly nested) members."""

    definition_type: ClassVar[str] = "namespace"

    qualified_name: str = ""
    name: str = ""
    members: list["NamespaceMember"] = field(default_factory=list)


NamespaceMember = Namespace | TypeDefinition | Enum | Method
Definition = (
    Namespace | TypeDefinition | Enum | EnumValue | Field | Property | Method | Event
)


def sort_members(members: list) -> None:
    """Sort definitions alphabetically by name, in place."""
    members.sort(key=lambda m: (m.name.lower(), m.name))


def reference_to(definition: TypeDefinition | Method) -> Reference:
    """Build a reference pointing at a definition."""
    return Reference(
        id=definition.id,
        qualified_name=definition.qualified_name,
        name=definition.name,
    )


@dataclass
class ApiModel:
    """Result of a build: root namespaces plus the identifier index."""

    namespaces: list[Namespace] = field(default_factory=list)
    definitions: dict[str, Definition] = field(default_factory=dict)
