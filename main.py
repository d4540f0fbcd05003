"""Main orchestration script for generating Doxygen XML and the API model."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the full API model pipeline."""
    parser = argparse.ArgumentParser(
        description="Generate Doxygen XML and build the API model from it."
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before building",
    )
    parser.add_argument(
        "--doxyfile",
        help="Run doxygen with this Doxyfile before building the model",
    )
    parser.add_argument(
        "--xml-dir",
        default="xml",
        help="Directory holding Doxygen's XML output (default: xml)",
    )
    parser.add_argument(
        "--output",
        default="api_model.json",
        help="Where to write the API model JSON (default: api_model.json)",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent

    if args.dev:
        print("--- Running Development Checks ---")
        run_command([sys.executable, str(root_dir / "dev.py"), "--ci"])
        print("\nDevelopment checks passed. Proceeding with the build.\n")

    # 1. Generate XML using doxygen
    if args.doxyfile:
        print("--- Step 1: Generating Doxygen XML ---")
        run_command(["doxygen", args.doxyfile])

    # 2. Build the API model
    print("\n--- Step 2: Building API model ---")
    cmd = [
        sys.executable,
        "-m",
        "doxapi.run_build",
        args.xml_dir,
        "--output",
        args.output,
    ]
    if args.config:
        cmd.extend(["--config", args.config])

    run_command(cmd)

    print(f"\nSUCCESS: API model written to {args.output}")


if __name__ == "__main__":
    main()
