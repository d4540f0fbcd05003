"""Utility for reading text out of parsed XML records."""

from typing import Any

from doxapi.parse_tree import ATTRIBUTES_KEY, TEXT_KEY


def node_text(node: Any) -> str:
    """Return the text of a parsed node, whatever shape it collapsed to."""
    if node is None:
        return ""
    if isinstance(node, str):
        return node.strip()
    if isinstance(node, dict):
        if node.get(TEXT_KEY):
            return str(node[TEXT_KEY]).strip()
        return "".join(
            node_text(value) for key, value in node.items() if key != ATTRIBUTES_KEY
        )
    if isinstance(node, list):
        return "".join(node_text(x) for x in node)
    return str(node).strip()


def node_attributes(node: Any) -> dict[str, str]:
    """Return the attribute dict of a parsed node, or an empty dict."""
    if isinstance(node, dict):
        return node.get(ATTRIBUTES_KEY) or {}
    return {}


def as_list(value: Any) -> list[Any]:
    """Wrap a parsed value in a list unless it already is one."""
    if value is None or value == "":
        return []
    if isinstance(value, list):
        return value
    return [value]
