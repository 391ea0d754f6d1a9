#!/usr/bin/env python3
"""
Compare several battleships AIs.

Every AI plays the same maps (the generator is re-seeded for each one)
under the same settings; the summary table has one row per AI.

Usage:
    python tools/compare_ais.py ai1.exe ai2.exe tools/sample_ai.py [--settings settings.txt] [--games 200]
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from battleships.cli import read_settings
from battleships.evaluation.report import statistics_table
from battleships.evaluation.tester import AiTester


def compare(ai_paths, settings):
    """
    Evaluate every AI and collect (name, statistics) rows.

    Args:
        ai_paths: AI executables
        settings: Shared settings

    Returns:
        List of (name, Statistics), best score first
    """
    logger = logging.getLogger(__name__)
    rows = []

    for path in ai_paths:
        tester = AiTester(settings, progress=True)
        results = tester.play(path)
        statistics = tester.evaluate(results)
        logger.info(f"{path}: score {statistics.score:.2f} over {statistics.games_played} games")
        rows.append((Path(path).stem, statistics))

    rows.sort(key=lambda row: row[1].score, reverse=True)
    return rows


def main():
    parser = argparse.ArgumentParser(
        description="Compare battleships AIs on identical maps"
    )
    parser.add_argument("ai_paths", nargs="+", help="AI executables to compare")
    parser.add_argument(
        "--settings",
        type=str,
        default="settings.txt",
        help="Settings file (default: settings.txt)"
    )
    parser.add_argument(
        "--games",
        type=int,
        default=None,
        help="Override GamesCount from the settings file"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log progress per AI"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    missing = [path for path in args.ai_paths if not Path(path).exists()]
    if missing:
        print(f"Error: AI not found: {', '.join(missing)}")
        sys.exit(1)

    settings = read_settings(args.settings)
    settings = replace(settings, interactive=False, verbose=False)
    if args.games is not None:
        settings = replace(settings, games_count=args.games)

    try:
        rows = compare(args.ai_paths, settings)
    except KeyboardInterrupt:
        print("\n\nComparison interrupted by user")
        sys.exit(1)

    print("=" * 70)
    print(f"COMPARISON ({settings.games_count} games, {settings.width}x{settings.height})")
    print("=" * 70)
    print(statistics_table(rows))


if __name__ == "__main__":
    main()
