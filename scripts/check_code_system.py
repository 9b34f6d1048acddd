"""
Check that a code system JSON file loads, and optionally show lookups.

Loads the file given with --file (default: paths.codesystem_file from config),
prints the number of entries and the display value for each --key. Exits 1
when the file is missing or malformed.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from tukutil.logging_config import setup_logging
from tukutil.lookup import CodeSystem, CodeSystemError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--file",
        default=None,
        help="Code system JSON file. Uses config paths.codesystem_file if omitted.",
    )
    parser.add_argument(
        "--key",
        action="append",
        default=[],
        help="Code to look up (repeatable)",
    )
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON log lines")
    args = parser.parse_args(argv)

    setup_logging(json_format=args.json_logs or None)

    code_system = CodeSystem()
    try:
        count = code_system.load(args.file) if args.file else code_system.load_default()
    except CodeSystemError as e:
        print(f"FAIL: {e}")
        return 1

    print(f"Loaded {count} code system entries.")
    for key in args.key:
        print(f"{key} -> {code_system.lookup(key)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
