#!/usr/bin/env python3
"""
Format a coefficient table as APA-style estimates.
"""

from __future__ import annotations

# Pipeline overview:
# 1) Load a CSV with one row per model term (term, estimate, conf.low, conf.high).
# 2) Format each estimate with its confidence interval for in-text reporting.
# 3) Build a display table with prettified term names, main effects first.
# 4) Print both and optionally save the display table as CSV.

import argparse
import logging
import os
import sys
import time

import pandas as pd

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from apatext import (
    NUMBER_FORMAT_DEFAULTS,
    ReportColumns,
    ValidationError,
    build_estimate_report,
    localize,
    package_available,
)


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser."""
    parser = argparse.ArgumentParser(
        description="Format estimates and confidence intervals in APA style."
    )
    parser.add_argument("input", help="Path to the coefficient CSV file.")
    parser.add_argument(
        "--output", default=None, help="Optional path for the formatted table (CSV)."
    )
    parser.add_argument(
        "--stat-name", default="b", help="Raw name of the estimated statistic."
    )
    parser.add_argument(
        "--conf-level",
        type=float,
        default=None,
        help="Confidence level of the intervals, e.g. 0.95 or 95.",
    )
    parser.add_argument(
        "--digits",
        type=int,
        nargs="+",
        default=[NUMBER_FORMAT_DEFAULTS["digits"]],
        help="Decimal places; several values are recycled across terms.",
    )
    parser.add_argument("--term-col", default=ReportColumns.term)
    parser.add_argument("--estimate-col", default=ReportColumns.estimate)
    parser.add_argument("--lower-col", default=ReportColumns.lower)
    parser.add_argument("--upper-col", default=ReportColumns.upper)
    parser.add_argument("--latex", action="store_true", help="Emit LaTeX markup.")
    parser.add_argument(
        "--markdown",
        action="store_true",
        help="Print the table as Markdown (requires tabulate).",
    )
    parser.add_argument(
        "--language", default="english", help="Language of table headings."
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the formatting pipeline and return an exit code."""
    args = _build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    start_time = time.time()
    columns = ReportColumns(
        term=args.term_col,
        estimate=args.estimate_col,
        lower=args.lower_col,
        upper=args.upper_col,
    )

    try:
        table = pd.read_csv(args.input)
        logging.info("Loaded %d terms from %s", len(table), args.input)
        results = build_estimate_report(
            table,
            stat_name=args.stat_name,
            conf_level=args.conf_level,
            digits=args.digits,
            columns=columns,
            latex=args.latex,
        )
    except FileNotFoundError:
        logging.error("Input file not found: %s", args.input)
        return 1
    except (KeyError, ValidationError) as exc:
        logging.error("Cannot format %s: %s", args.input, exc)
        return 1

    estimates = results.estimate
    if isinstance(estimates, str):
        estimates = {"estimate": estimates}
    for term, text in estimates.items():
        print(f"{term}: {text}")

    phrases = localize(args.language)
    print(f"\n{phrases['table']}")
    if args.markdown and package_available("tabulate"):
        print(results.table.to_markdown(index=False))
    else:
        if args.markdown:
            logging.warning("tabulate is not installed; printing plain table")
        print(results.table.to_string(index=False))

    if args.output:
        os.makedirs(os.path.dirname(os.path.abspath(args.output)), exist_ok=True)
        results.table.to_csv(args.output, index=False)
        logging.info("Saved formatted table to %s", args.output)

    logging.info("Total execution time: %.2f seconds", time.time() - start_time)
    return 0


if __name__ == "__main__":
    sys.exit(main())
