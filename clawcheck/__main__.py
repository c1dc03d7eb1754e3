"""Entry point: python -m clawcheck [--json] [--list-rules] [-v] [config]"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .core.engine import run_analysis
from .loader import load_document
from .report import format_report, render_json
from .rules import CATALOG


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="clawcheck",
        description="Read-only security analysis of a Clawdbot configuration",
    )
    parser.add_argument("config", nargs="?", help="Path to Clawdbot config file")
    parser.add_argument("--json", action="store_true", dest="json_output", help="Also print the result as JSON")
    parser.add_argument("--list-rules", action="store_true", help="List the checks performed and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log which config was loaded and each check's outcome")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    if args.list_rules:
        for rule in CATALOG:
            print(f"{rule.id:<24} {rule.severity.value:<9} {rule.name}")
        return 0

    document = load_document(Path(args.config) if args.config else None)
    result = run_analysis(document, CATALOG)

    print(format_report(result))

    if args.json_output:
        print("\n--- JSON OUTPUT ---")
        print(render_json(result))

    # Advisory only: findings never change the exit code
    return 0


if __name__ == "__main__":
    sys.exit(main())
