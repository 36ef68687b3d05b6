"""Command that prints the result of a simple calculation."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from primer.calculator import add


def _format_number(value: float) -> str:
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sum of 2 and 2."""
    parser = argparse.ArgumentParser(
        prog="calculator", description="Print the sum of 2 and 2."
    )
    parser.parse_args(sys.argv[1:] if argv is None else list(argv))
    print(_format_number(add(2, 2)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())