"""Convert normalized XML text into nested dict/list records."""

import xml.etree.ElementTree as ET
from typing import Any

from doxapi.errors import IngestError
from doxapi.parse_schema import ParseSchema

ATTRIBUTES_KEY = "attributes"
TEXT_KEY = "textcontent"


def parse_tree(xml: str, schema: ParseSchema) -> dict[str, Any]:
    """Parse XML into a record tree keyed by the root element's tag.

    Attributes are grouped under ``attributes`` and text under
    ``textcontent``. Elements without attributes or children collapse to
    their text. Paths listed in ``schema.always_list`` are lists even when a
    single element is present; paths in ``schema.raw`` keep their inner markup
    as a string.
    """
    try:
        root = ET.fromstring(xml)
    except ET.ParseError as e:
        msg = f"Malformed XML: {e}"
        raise IngestError(msg) from e
    return {root.tag: _convert(root, root.tag, schema)}


def _convert(element: ET.Element, path: str, schema: ParseSchema) -> Any:
    if schema.is_raw(path):
        return inner_markup(element)

    node: dict[str, Any] = {}
    if element.attrib:
        node[ATTRIBUTES_KEY] = dict(element.attrib)

    pieces = [element.text or ""]
    for child in element:
        child_path = f"{path}.{child.tag}"
        value = _convert(child, child_path, schema)
        if child.tag in node:
            existing = node[child.tag]
            if isinstance(existing, list):
                existing.append(value)
            else:
                node[child.tag] = [existing, value]
        elif schema.is_list(child_path):
            node[child.tag] = [value]
        else:
            node[child.tag] = value
        pieces.append(child.tail or "")

    text = "".join(pieces).strip()
    if not node:
        return text
    if text:
        node[TEXT_KEY] = text
    return node


def inner_markup(element: ET.Element) -> str:
    """Serialize the content of an element, excluding its own tags."""
    parts = [_escape(element.text or "")]
    parts.extend(ET.tostring(child, encoding="unicode") for child in element)
    return "".join(parts).strip()


def _escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
