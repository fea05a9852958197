"""Command line entry point: show vehicle files as a table and optionally save them."""

import argparse
import sys
from typing import List, Optional

from carledger.table import CarTable


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="carledger", description="Load vehicle records and print them as a table."
    )
    parser.add_argument("files", nargs="*", help="text files with vehicle records")
    parser.add_argument("-o", "--output", help="save the combined records to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command; return the exit status."""
    args = _build_parser().parse_args(argv)
    table = CarTable()
    try:
        for filename in args.files:
            table.load_file(filename)
        if args.output:
            table.save_file(args.output)
    except OSError as exc:
        print(f"Ошибка: {exc}", file=sys.stderr)
        return 1

    print(" | ".join(CarTable.HEADERS))
    for row in table.rows:
        print(" | ".join(row))
    return 0


if __name__ == "__main__":
    sys.exit(main())