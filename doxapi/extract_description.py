"""Assemble HTML descriptions from Doxygen description records."""

from typing import Any

from doxapi.node_text import as_list, node_attributes, node_text
from doxapi.normalize_xml import BLOCK_CODE_MARKER, INLINE_CODE_MARKER
from doxapi.parse_tree import TEXT_KEY
from doxapi.type_to_html import type_to_html


def extract_description(node: Any) -> str:
    """Build an HTML description from a ``briefdescription``-like node.

    Each paragraph is wrapped in ``<p>``; a paragraph split by a block code
    marker continues as ``<p class="code">``. Inline and block code markers
    are then replaced, in order, with the para's ``computeroutput`` and
    ``programlisting`` content.
    """
    if not isinstance(node, dict) or not node.get("para"):
        return ""

    description = ""
    for para in as_list(node["para"]):
        if isinstance(para, str):
            if para:
                description += _paragraph(para)
            continue
        if not isinstance(para, dict):
            continue

        if para.get(TEXT_KEY):
            description += _paragraph(para[TEXT_KEY])

        for code in as_list(para.get("computeroutput")):
            inline = f"<code>{type_to_html(node_text(code))}</code>"
            description = description.replace(INLINE_CODE_MARKER, inline, 1)

        for listing in as_list(para.get("programlisting")):
            description = description.replace(
                BLOCK_CODE_MARKER, _program_listing(listing), 1
            )

    return description


def _paragraph(text: str) -> str:
    text = text.replace(BLOCK_CODE_MARKER, '</p><p class="code">' + BLOCK_CODE_MARKER)
    return f"<p>{text}</p>"


def _program_listing(listing: Any) -> str:
    lines = []
    codelines = listing.get("codeline") if isinstance(listing, dict) else None
    for codeline in as_list(codelines):
        line = ""
        highlights = codeline.get("highlight") if isinstance(codeline, dict) else None
        for highlight in as_list(highlights):
            text = node_text(highlight)
            # Ignore empty spans.
            if text:
                css_class = node_attributes(highlight).get("class", "")
                line += f'<span class="{css_class}">{text}</span>'
        lines.append(line)
    return "<br/>".join(lines)
