"""Tables of common growth-rate functions, for plotting."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence
from pathlib import Path

HEADER = (
    "n", "n^3", "lg n", "n*2^n", "ln n", "2^(lg n)",
    "n", "2^n", "n lg n", "sqrt(lg n)", "n!",
)
UNDEFINED = "undef"
OVERFLOW = "ovrflw"
FACTORIAL_LIMIT = 20
DEFAULT_STOP = 100
DEFAULT_OUTPUT = "function_values.csv"


def _fixed(value: float) -> str:
    return f"{value:.2f}"


def growth_row(n: int) -> tuple[str, ...]:
    """Return the formatted cells of one table row for ``n``."""
    positive = n > 0
    if n > 1:
        sqrt_lg = _fixed(math.sqrt(math.log2(n)))
    elif n == 1:
        sqrt_lg = "0.00"
    else:
        sqrt_lg = UNDEFINED
    if n <= FACTORIAL_LIMIT:
        factorial = 1.0
        for k in range(1, n + 1):
            factorial *= k
        fact_cell = _fixed(factorial)
    else:
        fact_cell = OVERFLOW
    return (
        str(n),
        _fixed(math.pow(n, 3)),
        _fixed(math.log2(n)) if positive else UNDEFINED,
        _fixed(n * math.pow(2, n)),
        _fixed(math.log(n)) if positive else UNDEFINED,
        _fixed(math.pow(2, math.log2(n))) if positive else UNDEFINED,
        _fixed(float(n)),
        _fixed(math.pow(2, n)),
        _fixed(n * math.log2(n)) if positive else UNDEFINED,
        sqrt_lg,
        fact_cell,
    )


def format_row(row: Sequence[str], separator: str = ",") -> str:
    """Join the cells of a row with ``separator``."""
    return separator.join(row)


def write_growth_csv(path: str | Path, stop: int = DEFAULT_STOP) -> None:
    """Write the table for ``n`` from 0 to ``stop`` inclusive as CSV."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(format_row(HEADER) + "\n")
        for n in range(stop + 1):
            handle.write(format_row(growth_row(n)) + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Print the growth table and save it as CSV."""
    parser = argparse.ArgumentParser(description="Tabulate growth-rate functions.")
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT)
    parser.add_argument("--stop", type=int, default=DEFAULT_STOP)
    args = parser.parse_args(argv)

    try:
        write_growth_csv(args.output, args.stop)
    except OSError:
        print("Error opening file!")
        return 1

    print(format_row(HEADER, ", "))
    for n in range(args.stop + 1):
        print(format_row(growth_row(n), ", "))
    print(f"\nResults saved to {args.output}")
    print("Use this file to create 2D plots in Excel/LibreOffice.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())