"""Extract parameter and return value descriptions from detailed descriptions."""

import logging
from dataclasses import dataclass, field
from typing import Any

from doxapi.extract_description import extract_description
from doxapi.node_text import as_list, node_attributes, node_text

logger = logging.getLogger(__name__)


@dataclass
class ParameterDescriptions:
    """Descriptions keyed by parameter name."""

    template_parameters: dict[str, str] = field(default_factory=dict)
    parameters: dict[str, str] = field(default_factory=dict)


def _paras(node: Any) -> list[Any]:
    if not isinstance(node, dict):
        return []
    return [p for p in as_list(node.get("para")) if isinstance(p, dict)]


def extract_parameter_descriptions(node: Any) -> ParameterDescriptions:
    """Collect ``param`` and ``templateparam`` descriptions.

    Stale parameter lists can linger when a documented method is commented out
    without its doc comment, so only the last list of each kind is used.
    """
    descriptions = ParameterDescriptions()

    for para in _paras(node):
        for parameterlist in as_list(para.get("parameterlist")):
            kind = node_attributes(parameterlist).get("kind")
            entries: dict[str, str] = {}
            for item in as_list(parameterlist.get("parameteritem")):
                text = extract_description(item.get("parameterdescription"))
                for namelist in as_list(item.get("parameternamelist")):
                    for name in as_list(namelist.get("parametername")):
                        entries[node_text(name)] = text

            if kind == "templateparam":
                descriptions.template_parameters = entries
            elif kind == "param":
                descriptions.parameters = entries
            else:
                logger.warning("Unhandled parameter list kind %r.", kind)

    return descriptions


def extract_returns_description(node: Any) -> str:
    """Return the description of the last ``return`` simplesect, or ``""``."""
    description = ""
    for para in _paras(node):
        for simplesect in as_list(para.get("simplesect")):
            kind = node_attributes(simplesect).get("kind")
            if kind != "return":
                logger.debug("Skipping simplesect of kind %r.", kind)
                continue
            description = extract_description(simplesect)
    return description
