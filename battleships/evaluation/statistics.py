"""
Score Statistics

Reduces a list of match results to the numbers shown in the score table.

Definitions (turns = shots per match):
    mean          average turns
    sigma         population standard deviation of turns
    median        see below
    crashes       matches in which the AI crashed
    bad_fraction  100 * total bad shots / total turns
    score         efficiency - crash_penalty - bad_fraction
                  efficiency    = 100 * (cells - mean) / cells
                  crash_penalty = 100 * crashes / crash_limit

Median:
    Kept exactly as the score table has always computed it: for an odd
    count the middle element, for an even count the integer mean of the
    elements at n // 2 and (n + 1) // 2. For even n both indices are the
    same, so this is the upper middle element rather than the textbook
    median. Scores stay comparable with older runs.

Empty Input:
    With no results, turns is replaced by a single 1,000,000 so nothing
    divides by zero and the score comes out hugely negative.
"""

import math
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from battleships.evaluation.results import MatchResult

NO_GAMES_TURNS = 1000 * 1000


def legacy_median(turns: Sequence[int]) -> int:
    ordered = sorted(turns)
    n = len(ordered)
    if n % 2 == 1:
        return ordered[n // 2]
    return (ordered[n // 2] + ordered[(n + 1) // 2]) // 2


@dataclass(frozen=True)
class Statistics:
    """Aggregated results of one evaluation run."""

    games_played: int
    crashes: int
    median: int
    mean: float
    sigma: float
    bad_fraction: float
    score: float

    @classmethod
    def from_results(
        cls,
        results: List[MatchResult],
        width: int,
        height: int,
        crash_limit: int,
    ) -> "Statistics":
        """
        Compute statistics.

        Args:
            results: Results of finished matches
            width: Board width
            height: Board height
            crash_limit: Crash limit of the run (scales the crash penalty)

        Returns:
            Statistics
        """
        crashes = sum(1 for result in results if result.crashed)
        turns = [result.turns for result in results] or [NO_GAMES_TURNS]

        values = np.asarray(turns, dtype=np.float64)
        mean = float(values.mean())
        sigma = float(values.std())

        total_turns = sum(turns)
        bad_shots = sum(result.bad_shots for result in results)
        bad_fraction = 100.0 * bad_shots / total_turns if total_turns else 0.0

        cells = width * height
        efficiency = 100.0 * (cells - mean) / cells
        score = efficiency - crash_penalty(crashes, crash_limit) - bad_fraction

        return cls(
            games_played=len(results),
            crashes=crashes,
            median=legacy_median(turns),
            mean=mean,
            sigma=sigma,
            bad_fraction=bad_fraction,
            score=score,
        )


def crash_penalty(crashes: int, crash_limit: int) -> float:
    """100 * crashes / crash_limit; a zero limit makes any crash infinitely bad."""
    if crash_limit == 0:
        return math.inf if crashes else 0.0
    return 100.0 * crashes / crash_limit
