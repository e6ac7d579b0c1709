"""Text patterns built from nested loops: star pyramids, number triangles,
palindromic pyramids, Floyd's triangle and Pascal's triangle."""

import argparse
import math
import sys
from collections.abc import Callable, Iterable


def _cells(values: Iterable[int]) -> str:
    return "".join(f"{value}\t" for value in values)


def _star_row(i: int, n: int) -> str:
    return " " * (n - i) + "* " * i


def _palindrome_row(i: int, tabs: int) -> str:
    return "\t" * tabs + _cells(range(1, i + 1)) + _cells(range(i - 1, 0, -1))


def _floyd_row(start: int, length: int) -> str:
    return _cells(range(start, start + length))


def _floyd_start(i: int) -> int:
    return i * (i - 1) // 2 + 1


def _pascal_line(i: int, indent: int) -> str:
    return "  " * indent + "".join(f"{c}   " for c in pascal_row(i))


def render(rows: Iterable[str]) -> str:
    """Join pattern lines, ending each with a newline."""
    return "".join(f"{row}\n" for row in rows)


def star_pyramid(n: int) -> list[str]:
    """A centred pyramid of ``n`` rows of stars."""
    return [_star_row(i, n) for i in range(1, n + 1)]


def star_diamond(n: int) -> list[str]:
    """A star pyramid followed by its mirror image without the widest row."""
    return star_pyramid(n) + [_star_row(i, n) for i in range(n - 1, 0, -1)]


def number_triangle(n: int) -> list[str]:
    """Rows counting 1..i for i from 1 to ``n``."""
    return [_cells(range(1, i + 1)) for i in range(1, n + 1)]


def inverted_number_triangle(n: int) -> list[str]:
    """Rows counting 1..i for i from ``n`` down to 1."""
    return [_cells(range(1, i + 1)) for i in range(n, 0, -1)]


def number_arrow(n: int) -> list[str]:
    """A number triangle growing to ``n`` and shrinking back to 1."""
    return number_triangle(n) + inverted_number_triangle(n - 1)


def right_aligned_triangle(n: int) -> list[str]:
    """Rows counting 1..i, pushed right by tabs so their ends line up."""
    return ["\t" * (n - i) + _cells(range(1, i + 1)) for i in range(1, n + 1)]


def descending_triangle(n: int) -> list[str]:
    """Rows counting down from i to 1 for i from 1 to ``n``."""
    return [_cells(range(i, 0, -1)) for i in range(1, n + 1)]


def inverted_right_aligned_triangle(n: int) -> list[str]:
    """Right-aligned rows counting 1..i for i from ``n`` down to 1."""
    return ["\t" * (n - i) + _cells(range(1, i + 1)) for i in range(n, 0, -1)]


def inverted_descending_triangle(n: int) -> list[str]:
    """Rows counting down from i to 1 for i from ``n`` down to 1."""
    return [_cells(range(i, 0, -1)) for i in range(n, 0, -1)]


def palindrome_pyramid(n: int, margin: int = 0) -> list[str]:
    """Centred rows 1..i..1, each indented by ``margin`` extra tabs."""
    if margin < 0:
        raise ValueError("margin must not be negative")
    return [_palindrome_row(i, n - i + margin) for i in range(1, n + 1)]


def palindrome_diamond(n: int) -> list[str]:
    """A palindrome pyramid followed by its mirror image."""
    return palindrome_pyramid(n) + [
        _palindrome_row(i, n - i) for i in range(n - 1, 0, -1)
    ]


def inverted_palindrome_pyramid(n: int) -> list[str]:
    """Palindromic rows shrinking from the widest, ``n``, down to 1."""
    return [_palindrome_row(i, n - i) for i in range(n, 0, -1)]


def floyd_triangle(n: int) -> list[str]:
    """Floyd's triangle: consecutive numbers, one more in each row."""
    return [_floyd_row(_floyd_start(i), i) for i in range(1, n + 1)]


def inverted_floyd_triangle(n: int) -> list[str]:
    """Floyd's triangle with its rows in reverse order."""
    return [_floyd_row(_floyd_start(i), i) for i in range(n, 0, -1)]


def floyd_diamond(n: int) -> list[str]:
    """Floyd's triangle followed by its rows above the last, reversed."""
    return floyd_triangle(n) + inverted_floyd_triangle(n - 1)


def pascal_row(i: int) -> list[int]:
    """The ``i``-th row of Pascal's triangle, counting the single 1 as row 1."""
    if i < 1:
        raise ValueError("Pascal rows are numbered from 1")
    return [math.comb(i - 1, k) for k in range(i)]


def pascal_triangle(n: int) -> list[str]:
    """Pascal's triangle of ``n`` rows, centred with two-space steps."""
    return [_pascal_line(i, n - i + 1) for i in range(1, n + 1)]


def inverted_pascal_triangle(n: int) -> list[str]:
    """Pascal's triangle upside down, the widest row flush left."""
    return [_pascal_line(i, n - i) for i in range(n, 0, -1)]


def pascal_diamond(n: int) -> list[str]:
    """Pascal's triangle followed by its mirror image."""
    return pascal_triangle(n) + [
        _pascal_line(i, n - i + 1) for i in range(n - 1, 0, -1)
    ]


PATTERNS: dict[str, Callable[[int], list[str]]] = {
    "pyramid": star_pyramid,
    "diamond": star_diamond,
    "numbers": number_triangle,
    "inverted-numbers": inverted_number_triangle,
    "arrow": number_arrow,
    "right-aligned": right_aligned_triangle,
    "descending": descending_triangle,
    "inverted-right-aligned": inverted_right_aligned_triangle,
    "inverted-descending": inverted_descending_triangle,
    "palindrome": palindrome_pyramid,
    "palindrome-diamond": palindrome_diamond,
    "inverted-palindrome": inverted_palindrome_pyramid,
    "floyd": floyd_triangle,
    "inverted-floyd": inverted_floyd_triangle,
    "floyd-diamond": floyd_diamond,
    "pascal": pascal_triangle,
    "inverted-pascal": inverted_pascal_triangle,
    "pascal-diamond": pascal_diamond,
}


def main(argv: list[str] | None = None) -> int:
    """Print a pattern; ask for the number of rows when none is given."""
    parser = argparse.ArgumentParser(
        prog="loopgrid-patterns", description="Print a text pattern."
    )
    parser.add_argument("rows", nargs="?", type=int, help="number of rows")
    parser.add_argument(
        "--pattern", choices=sorted(PATTERNS), default="pyramid",
        help="pattern to print (default: pyramid)",
    )
    args = parser.parse_args(argv)

    rows = args.rows
    if rows is None:
        try:
            rows = int(input("Enter the number of rows:"))
        except ValueError:
            print("error: the number of rows must be an integer", file=sys.stderr)
            return 2
    if rows < 0:
        print("error: the number of rows must not be negative", file=sys.stderr)
        return 2

    sys.stdout.write(render(PATTERNS[args.pattern](rows)))
    return 0