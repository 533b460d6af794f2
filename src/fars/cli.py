"""
FARS Command-Line Interface

Exposes two subcommands:

    fars summarize YEAR [YEAR ...] [--data-dir DIR] [--output CSV]
    fars map STATE YEAR [--data-dir DIR] [--output HTML] [--show]

The package must be installed (``pip install -e .``) for the ``fars`` entry
point to be available.

Package Location: src/fars/cli.py
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .reports.generators import fars_map_state, fars_summarize_years
from .utils.logging import configure_logging

logger = logging.getLogger(__name__)


def _die(message: str) -> None:
    """Print an error message and exit with status 1.

    Args:
        message: Human-readable error text.
    """
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


# ===========================================================================
# Subcommand handlers
# ===========================================================================

def handle_summarize(args: argparse.Namespace) -> None:
    """Print (or save) the month-by-year accident counts.

    Args:
        args: Parsed CLI arguments.  Uses ``years``, ``data_dir`` and
            ``output``.
    """
    summary = fars_summarize_years(args.years, data_dir=args.data_dir)

    if args.output is None:
        if summary.empty:
            print("No data loaded for the requested years.")
        else:
            print(summary.to_string(index=False))
        return

    out_path = Path(args.output)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    summary.to_csv(out_path, index=False)
    logger.info("Summary saved → %s", out_path, extra={"path": str(out_path)})


def handle_map(args: argparse.Namespace) -> None:
    """Build the state accident map.

    Args:
        args: Parsed CLI arguments.  Uses ``state``, ``year``,
            ``data_dir``, ``output`` and ``show``.
    """
    try:
        fig = fars_map_state(
            args.state,
            args.year,
            data_dir=args.data_dir,
            output_path=args.output,
            show=args.show,
        )
    except (FileNotFoundError, ValueError) as exc:
        _die(str(exc))

    if fig is not None and args.output is None and not args.show:
        logger.warning("Map built but neither --output nor --show was given.")


# ===========================================================================
# Parser
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fars",
        description="Summarise and map FARS traffic-accident extracts.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Log at DEBUG level.",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=False,
        help="Emit log records as single-line JSON objects.",
    )

    subs = parser.add_subparsers(dest="command", required=True)

    # ------------------------------------------------------------------
    # summarize
    # ------------------------------------------------------------------
    p_sum = subs.add_parser(
        "summarize",
        help="Count accidents by month for one or more years.",
    )
    p_sum.add_argument(
        "years",
        nargs="+",
        metavar="YEAR",
        help="Years to summarise, e.g. 2013 2014 2015.",
    )
    p_sum.add_argument(
        "--data-dir",
        default=None,
        metavar="DIR",
        help="Directory holding accident_<year>.csv.bz2 (default: cwd).",
    )
    p_sum.add_argument(
        "--output",
        default=None,
        metavar="CSV",
        help="Write the summary to this CSV file instead of printing it.",
    )
    p_sum.set_defaults(func=handle_summarize)

    # ------------------------------------------------------------------
    # map
    # ------------------------------------------------------------------
    p_map = subs.add_parser(
        "map",
        help="Plot one state's accident locations for a year.",
    )
    p_map.add_argument("state", metavar="STATE", help="FARS state code.")
    p_map.add_argument("year", metavar="YEAR", help="Data year.")
    p_map.add_argument(
        "--data-dir",
        default=None,
        metavar="DIR",
        help="Directory holding accident_<year>.csv.bz2 (default: cwd).",
    )
    p_map.add_argument(
        "--output",
        default=None,
        metavar="HTML",
        help="Write the map to this HTML file.",
    )
    p_map.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Open the map in a browser.",
    )
    p_map.set_defaults(func=handle_map)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate handler.

    This function is registered as the ``fars`` console script entry point
    in ``pyproject.toml``.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, json_logs=args.json_logs)
    args.func(args)


if __name__ == "__main__":
    main()
