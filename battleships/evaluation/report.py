"""
Report formatting.

Tables are fixed width: the first column (AI name) is 15 characters, every
other column 7. Values are converted with str(), padded with spaces on the
right and cut at the column width, so long numbers lose their tail digits
instead of breaking the layout.
"""

from typing import Iterable, List, Sequence, Tuple

from battleships.evaluation.results import MatchResult
from battleships.evaluation.statistics import Statistics

NAME_WIDTH = 15
VALUE_WIDTH = 7

HEADERS = ["AiName", "Mean", "Sigma", "Median", "Crashes", "Bad%", "Games", "Score"]


def format_value(value: object, width: int) -> str:
    return str(value).replace("\t", " ").ljust(width)[:width]


def format_table_row(values: Sequence[object]) -> str:
    return format_value(values[0], NAME_WIDTH) + " ".join(
        format_value(value, VALUE_WIDTH) for value in values[1:]
    )


def statistics_row(ai_name: str, statistics: Statistics) -> List[object]:
    return [
        ai_name,
        statistics.mean,
        statistics.sigma,
        statistics.median,
        statistics.crashes,
        statistics.bad_fraction,
        statistics.games_played,
        statistics.score,
    ]


def statistics_table(rows: Iterable[Tuple[str, Statistics]]) -> str:
    """
    Render a header row and one data row per evaluated AI.

    Args:
        rows: (ai_name, statistics) pairs

    Returns:
        Table text, one line per row
    """
    lines = [format_table_row(HEADERS)]
    lines.extend(format_table_row(statistics_row(name, stats)) for name, stats in rows)
    return "\n".join(lines)


def statistics_message(ai_name: str, statistics: Statistics) -> str:
    """Score table for a single AI, with title, as printed at the end of a run."""
    return (
        "\n"
        "Score statistics\n"
        "================\n"
        f"{statistics_table([(ai_name, statistics)])}\n"
    )


def verbose_line(game_number: int, result: MatchResult) -> str:
    """One trace line per match, e.g. 'Game #   3: Turns   41, BadShots 2, Crashed'."""
    crashed = ", Crashed" if result.crashed else ""
    return f"Game #{game_number:4}: Turns {result.turns:4}, BadShots {result.bad_shots}{crashed}"


def verbose_results(results: Iterable[MatchResult]) -> List[str]:
    """Trace lines for all matches, numbered from 1."""
    return [verbose_line(number, result) for number, result in enumerate(results, start=1)]
