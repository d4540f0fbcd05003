"""Load a complete API model from a directory of Doxygen XML."""

import logging
from pathlib import Path
from typing import Any

from doxapi.definition_extractor import DefinitionExtractor
from doxapi.errors import IngestError
from doxapi.load_config import DEFAULT_CONFIG
from doxapi.models import ApiModel
from doxapi.namespace_tree import build_namespace_tree
from doxapi.normalize_xml import normalize_xml
from doxapi.parse_schema import COMPOUND_SCHEMA, INDEX_SCHEMA, ParseSchema
from doxapi.parse_tree import parse_tree

logger = logging.getLogger(__name__)


def load_xml_document(path: Path, schema: ParseSchema) -> dict[str, Any]:
    """Read, normalize and parse one Doxygen XML file."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        msg = f"Cannot read {path}: {e}"
        raise IngestError(msg) from e
    try:
        return parse_tree(normalize_xml(raw), schema)
    except IngestError as e:
        msg = f"{path}: {e}"
        raise IngestError(msg) from e


def load_api_model(
    xml_dir: Path | str,
    index_file: str | None = None,
    config: dict[str, Any] | None = None,
) -> ApiModel:
    """Build the API model from ``index_file`` and the compounds it lists.

    Every compound is read before any resolution happens; a missing or
    malformed file aborts the build with :class:`IngestError`.
    """
    config = config or DEFAULT_CONFIG
    xml_dir = Path(xml_dir)
    index_path = xml_dir / (index_file or config["ingest"]["index_file"])

    extractor = DefinitionExtractor(config)
    index = load_xml_document(index_path, INDEX_SCHEMA)
    refids = extractor.compound_refids(index)
    logger.info("Loading %d compounds from %s", len(refids), xml_dir)

    for refid in refids:
        document = load_xml_document(xml_dir / f"{refid}.xml", COMPOUND_SCHEMA)
        extractor.process_definition(document)

    model = build_namespace_tree(extractor.namespaces, extractor.types)
    logger.info(
        "Loaded %d root namespaces, %d definitions",
        len(model.namespaces),
        len(model.definitions),
    )
    return model
