"""Command-line entry point: count inversions in an integer data file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from invengine.core.config import EngineConfig
from invengine.core.inversions import count_and_sort, count_inversions_bruteforce
from invengine.core.primitives import OpStats
from invengine.io.exporters import export_json, export_pdf
from invengine.io.importers import load_config, load_integers


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Count inversions in a file of integers")
    parser.add_argument("data", type=Path, help="Text file of whitespace-separated integers")
    parser.add_argument("--config", type=Path, help="Engine configuration JSON")
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Cross-check against the O(n^2) pairwise count (slow for large inputs)",
    )
    parser.add_argument("--dump", action="store_true", help="Print the sorted values")
    parser.add_argument(
        "--output",
        type=Path,
        help="Directory to write summary.json (and report.pdf with --report)",
    )
    parser.add_argument("--report", action="store_true", help="Also render a PDF report")
    args = parser.parse_args(argv)
    if args.report and args.output is None:
        parser.error("--report requires --output")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, run the counter and report the result."""

    args = parse_args(argv)
    try:
        config = load_config(args.config) if args.config else EngineConfig()
        values = load_integers(args.data)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(f"Read {len(values)} ints from input file {args.data}")
    original = list(values) if args.verify else None
    stats = OpStats() if config.collect_stats or args.report else None

    inversions = count_and_sort(values, check_invariants=config.check_invariants, stats=stats)
    print(f"# of inversions found: {inversions}")

    if args.dump:
        for idx, value in enumerate(values):
            print(f"[{idx}]: {value}")

    if original is not None:
        expected = count_inversions_bruteforce(original)
        if expected != inversions:
            print(f"Verification FAILED: pairwise count is {expected}", file=sys.stderr)
            return 1
        print("Verification passed.")

    if args.output:
        output_dir = args.output
        output_dir.mkdir(parents=True, exist_ok=True)
        summary = {"items": len(values), "inversions": inversions}
        if stats is not None:
            summary.update(
                comparisons=stats.comparisons,
                swaps=stats.swaps,
                block_exchanges=stats.block_exchanges,
                merges=stats.merges,
            )
        export_json(output_dir / "summary.json", summary)
        if args.report:
            export_pdf(output_dir / "report.pdf", summary, stats=stats)
        print(f"Results saved to {output_dir}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
