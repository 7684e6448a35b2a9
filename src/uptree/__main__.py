"""Command line entry point for the uptree library."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .pipeline import ForestConfig
from .runner import MODES, run_file


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Label connected components or spanning forests of an edge table.")
    parser.add_argument("input", type=Path, help="Path to the input CSV or Excel edge table")
    parser.add_argument("output", type=Path, help="Path where the results will be written")
    parser.add_argument("--mode", choices=MODES, default="components", help="What to compute (default: components)")
    parser.add_argument(
        "--source-column",
        default=os.getenv("UPTREE_SOURCE_COLUMN", "source"),
        help="Column holding the first endpoint of each edge (default: source)",
    )
    parser.add_argument(
        "--target-column",
        default=os.getenv("UPTREE_TARGET_COLUMN", "target"),
        help="Column holding the second endpoint of each edge (default: target)",
    )
    parser.add_argument(
        "--weight-column",
        default=os.getenv("UPTREE_WEIGHT_COLUMN"),
        help="Column holding edge weights, required for --mode spanning",
    )
    parser.add_argument(
        "--normalize-keys",
        action="store_true",
        help="Fold case, accents and broken encodings before matching endpoints",
    )
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars even if tqdm is installed",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print errors")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv or sys.argv[1:])

    config = ForestConfig(
        source_column=args.source_column,
        target_column=args.target_column,
        weight_column=args.weight_column,
        normalize_keys=args.normalize_keys,
        use_tqdm=not args.disable_tqdm,
        verbose=not args.quiet,
    )

    result = run_file(args.input, args.output, config, mode=args.mode)
    return 0 if result is not None else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
