"""Command line entry point for building the API model from Doxygen XML."""

import argparse
import logging
from pathlib import Path

from doxapi.errors import ApiModelError
from doxapi.export_model import write_model_json
from doxapi.load_api_model import load_api_model
from doxapi.load_config import load_config

logger = logging.getLogger(__name__)


def run_build(args: argparse.Namespace) -> int:
    """Load the API model and optionally write it out as JSON."""
    config = load_config(args.config)
    try:
        model = load_api_model(args.xml_dir, args.index_file, config)
        if args.output:
            write_model_json(model, args.output)
            print(f"Wrote API model to: {args.output}")
    except ApiModelError:
        logger.exception("Build failed")
        return 1

    print(
        f"Loaded {len(model.namespaces)} root namespaces and "
        f"{len(model.definitions)} definitions from: {args.xml_dir}"
    )
    return 0


def main() -> int:
    """Parse arguments and run the build."""
    ap = argparse.ArgumentParser(
        description="Build a cross-referenced API model from Doxygen XML output.",
    )
    ap.add_argument(
        "xml_dir",
        type=Path,
        help="Directory containing Doxygen's index.xml and compound files",
    )
    ap.add_argument(
        "--index-file",
        default=None,
        help="Index file name inside xml_dir (default: from config, index.xml)",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--output",
        type=Path,
        help="Write the model as JSON to this file",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_build(args)


if __name__ == "__main__":
    raise SystemExit(main())
