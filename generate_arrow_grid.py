#!/usr/bin/env python3
"""
Synthetic grid generator for arrow cycle finder benchmarks.

Writes a random WIDTH x HEIGHT grid of arrows in the finder's input format.
With --ring-row, one row is filled with ">" so a cycle covering the whole
row is guaranteed to exist.
"""

import argparse
import random
import sys

GLYPHS = "^v<>"


def generate_rows(
    width: int,
    height: int,
    ring_row: int | None,
    rng: random.Random,
) -> list[str]:
    """
    Generate the glyph rows of a random grid.

    Args:
        width: Number of columns.
        height: Number of rows.
        ring_row: Row to fill with ">" (None for a fully random grid).
        rng: Random number generator.

    Returns:
        List of `height` strings, each `width` glyphs long.
    """
    rows = []
    for y in range(height):
        if y == ring_row:
            rows.append(">" * width)
        else:
            rows.append("".join(rng.choice(GLYPHS) for _ in range(width)))
    return rows


def write_grid(output_path: str, rows: list[str], width: int) -> int:
    """Write the dimensions line and rows, returning the number of lines written."""
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(f"{width} {len(rows)}\n")
        for row in rows:
            f.write(row + "\n")
    return len(rows) + 1


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate a random arrow grid for benchmarking",
    )
    parser.add_argument(
        "--out",
        required=True,
        help="Output file path",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=80,
        help="Number of columns (default: 80)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=40,
        help="Number of rows (default: 40)",
    )
    parser.add_argument(
        "--ring-row",
        type=int,
        default=None,
        help="Fill this row with '>' to plant a full-width cycle",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=1,
        help="Random seed for reproducibility (default: 1)",
    )

    args = parser.parse_args()

    if args.width < 1 or args.height < 1:
        parser.error("--width and --height must be at least 1")
    if args.ring_row is not None and not 0 <= args.ring_row < args.height:
        parser.error(f"--ring-row must be in [0, {args.height})")

    print(f"Output: {args.out}", file=sys.stderr)
    print(f"Size: {args.width}x{args.height} ({args.width * args.height:,} cells)", file=sys.stderr)
    print(f"Seed: {args.seed}", file=sys.stderr)

    rng = random.Random(args.seed)
    rows = generate_rows(args.width, args.height, args.ring_row, rng)
    total_lines = write_grid(args.out, rows, args.width)

    print(f"Done! Wrote {total_lines:,} lines to {args.out}", file=sys.stderr)


if __name__ == "__main__":
    main()
