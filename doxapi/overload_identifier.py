"""Identifiers that tell overloaded methods apart."""

import re

from doxapi.errors import IdentifierError
from doxapi.models import Method

TAG_RE = re.compile(r"</?[^>]*>")
LAST_WORD_RE = re.compile(r"\w+$")
WHITESPACE_RE = re.compile(r"\s")


def safe_type_name(type_name: str) -> str:
    """Reduce a type signature to a word usable inside an identifier.

    ``List&lt; int &gt;`` becomes ``List_int``, ``int[]`` becomes ``int_``
    and keywords such as ``out``/``ref`` or parent types are dropped.
    """
    type_name = TAG_RE.sub("", type_name.strip())
    type_name = re.sub(r"\s*&lt;\s*", "_", type_name)
    type_name = re.sub(r"\s*&gt;\s*", "", type_name)
    type_name = re.sub(r"\s*,\s*", "_", type_name)
    type_name = re.sub(r"\s*\[\]", "_", type_name)
    match = LAST_WORD_RE.search(type_name)
    return match.group(0) if match else type_name


def overload_identifier(method: Method) -> str:
    """Return the method's name relative to its namespace, unique among overloads.

    Overloaded methods get their parameter types appended with ``-`` and a
    non-void return type with ``--``, e.g. ``Widget.Resize-int-int--bool``.
    Raises :class:`IdentifierError` if the result contains whitespace.
    """
    identifier = method.qualified_name
    if method.namespace and identifier.startswith(method.namespace + "."):
        identifier = identifier[len(method.namespace) + 1 :]

    if method.overloads:
        for param in method.params:
            identifier += "-" + safe_type_name(param.type)
        if method.type and method.type != "void":
            identifier += "--" + safe_type_name(method.type)

        if WHITESPACE_RE.search(identifier):
            msg = f'Identifier "{identifier}" of {method.id} contains whitespace.'
            raise IdentifierError(msg)
    return identifier
