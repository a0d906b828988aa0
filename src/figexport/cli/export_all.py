#!/usr/bin/env python3
# FigExport
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""
FigExport command-line tool

Export every figure left open by a plotting script to print-readable PDFs.

Usage:
    figexport [script.py] [options]
    python -m figexport.cli.export_all [script.py] [options]

Examples:
    # Run a plotting script headless and export its figures to ./Figures
    figexport make_plots.py

    # Choose the output directory and keep a log file
    figexport make_plots.py --output-dir paper/figs --log-file export.log
"""

from __future__ import annotations

import argparse
import logging
import runpy
import sys
from pathlib import Path

import matplotlib

from figexport.core.batch import export_all_figures
from figexport.core.errors import OutputDirectoryError
from figexport.core.logging_config import setup_logging

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FIGURE_FAILED = 1
EXIT_FATAL = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="figexport",
        description="Export all open matplotlib figures to vector PDF files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Export the figures created by a script
  %(prog)s make_plots.py

  # Custom output directory
  %(prog)s make_plots.py --output-dir paper/figs
        """,
    )
    parser.add_argument(
        "script",
        nargs="?",
        help="Python plotting script to run before exporting (uses the Agg backend)",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        type=str,
        default=None,
        metavar="DIR",
        help="Output directory (default: ./Figures)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        metavar="PATH",
        help="Also write a rotating DEBUG log to PATH",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug output on the console",
    )
    return parser


def _run_script(script: Path) -> None:
    """Run ``script`` as __main__ with a non-interactive backend."""

    matplotlib.use("Agg", force=True)
    saved_argv = sys.argv
    sys.argv = [str(script)]
    try:
        runpy.run_path(str(script), run_name="__main__")
    finally:
        sys.argv = saved_argv


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(
        console_level=logging.DEBUG if args.verbose else logging.INFO,
        log_file=args.log_file,
    )

    if args.script:
        script = Path(args.script)
        if not script.is_file():
            print(f"Error: Script not found: {script}", file=sys.stderr)
            return EXIT_FATAL
        log.info(f"Running {script}")
        try:
            _run_script(script)
        except SystemExit as exc:
            if exc.code not in (None, 0):
                log.error(f"Script {script} exited with status {exc.code}")
                return EXIT_FIGURE_FAILED
            log.debug(f"Script {script} called sys.exit({exc.code})")
        except Exception as exc:
            log.error(f"Script {script} failed: {exc}", exc_info=True)
            return EXIT_FIGURE_FAILED

    try:
        results = export_all_figures(args.output_dir)
    except OutputDirectoryError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FATAL

    if any(not result.ok for result in results):
        return EXIT_FIGURE_FAILED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
