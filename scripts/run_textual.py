from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from manor.ui.app import MansionApp


def main() -> None:
    parser = argparse.ArgumentParser(description="Textual front end for the mansion case.")
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Write clue lookup and teardown logs to this file.",
    )
    args = parser.parse_args()
    if args.log_file:
        logging.basicConfig(filename=args.log_file, level=logging.INFO)
    try:
        MansionApp().run()
    except MemoryError:
        print("Fatal: out of memory", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
