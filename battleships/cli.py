"""
Command-line entry point.

Usage:
    python -m battleships <ai.exe> [--settings settings.txt] [--name MyAI] [--debug]

Prints the score table to stdout and appends the table row to the
results file (results.txt by default), one line per run.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from battleships.config import TesterSettings, load_settings
from battleships.evaluation.tester import AiTester

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = "settings.txt"
DEFAULT_RESULTS = "results.txt"


def setup_logging(debug: bool = False, results_path: str = DEFAULT_RESULTS):
    """
    Configure logging for the process.

    Diagnostics go to stderr. The "results" logger writes bare table rows
    to results_path in append mode so successive runs accumulate.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    results_log = logging.getLogger("results")
    results_log.setLevel(logging.INFO)
    results_log.propagate = False
    for old_handler in list(results_log.handlers):
        results_log.removeHandler(old_handler)
        old_handler.close()

    handler = logging.FileHandler(results_path, mode="a", delay=True)
    handler.setFormatter(logging.Formatter("%(message)s"))
    results_log.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="battleships",
        description="Test a battleships AI on randomly generated maps",
    )
    parser.add_argument(
        "ai_path",
        nargs="?",
        help="Path to the AI executable",
    )
    parser.add_argument(
        "--settings", "-s",
        type=str,
        default=DEFAULT_SETTINGS,
        help=f"Settings file (default: {DEFAULT_SETTINGS})",
    )
    parser.add_argument(
        "--name", "-n",
        type=str,
        default=None,
        help="AI name for the score table (default: executable name)",
    )
    parser.add_argument(
        "--results",
        type=str,
        default=DEFAULT_RESULTS,
        help=f"File the results row is appended to (default: {DEFAULT_RESULTS})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def read_settings(path: str) -> TesterSettings:
    settings_path = Path(path)
    if not settings_path.exists():
        logger.warning(f"Settings file {settings_path} not found, using defaults")
        return TesterSettings()
    return load_settings(settings_path)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.ai_path is None:
        parser.print_usage()
        return 0

    setup_logging(args.debug, args.results)
    settings = read_settings(args.settings)

    if not Path(args.ai_path).exists():
        print(f"No AI exe-file {args.ai_path}")
        return 0

    tester = AiTester(settings, progress=not settings.interactive)
    try:
        tester.run(args.ai_path, ai_name=args.name)
    except KeyboardInterrupt:
        print("\n\nTesting interrupted by user")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
