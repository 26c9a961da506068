"""Command-line entry point: maximum-sum window of length k."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from invengine.core.config import EngineConfig
from invengine.core.sliding_window import (
    max_window_sum,
    max_window_sum_bruteforce,
    window_averages,
    window_sums,
)
from invengine.io.exporters import export_csv, export_json, export_pdf
from invengine.io.importers import load_config, load_integers


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find the maximum-sum run of k consecutive integers")
    parser.add_argument("data", type=Path, help="Text file of whitespace-separated integers")
    parser.add_argument("-k", "--window", type=int, help="Window length (overrides the config)")
    parser.add_argument("--config", type=Path, help="Engine configuration JSON")
    parser.add_argument("--verify", action="store_true", help="Cross-check against the brute-force scan")
    parser.add_argument("--averages", action="store_true", help="Print the running average of every window")
    parser.add_argument(
        "--output",
        type=Path,
        help="Directory to write window_sums.csv and summary.json (and report.pdf with --report)",
    )
    parser.add_argument("--report", action="store_true", help="Also render a PDF report")
    args = parser.parse_args(argv)
    if args.report and args.output is None:
        parser.error("--report requires --output")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, run the window search and report the result."""

    args = parse_args(argv)
    try:
        config = load_config(args.config) if args.config else EngineConfig()
        values = load_integers(args.data)
        k = args.window if args.window is not None else config.window_size
        result = max_window_sum(values, k)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(f"k={k}: max SUM()={result.max_sum} starting at index {result.start_index}")

    if args.verify:
        expected = max_window_sum_bruteforce(values, k)
        if expected != result:
            print(f"Verification FAILED: brute force gives {tuple(expected)}", file=sys.stderr)
            return 1
        print("Verification passed.")

    if args.averages:
        for idx, avg in enumerate(window_averages(values, k)):
            print(f"{idx}: avg={avg:g}")

    if args.output:
        output_dir = args.output
        output_dir.mkdir(parents=True, exist_ok=True)
        export_csv(
            output_dir / "window_sums.csv",
            [{"start_index": idx, "sum": total} for idx, total in enumerate(window_sums(values, k))],
        )
        summary = {
            "items": len(values),
            "k": k,
            "max_sum": result.max_sum,
            "start_index": result.start_index,
        }
        export_json(output_dir / "summary.json", summary)
        if args.report:
            export_pdf(output_dir / "report.pdf", summary, values=values, k=k)
        print(f"Results saved to {output_dir}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
