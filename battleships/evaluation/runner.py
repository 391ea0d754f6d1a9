"""
Match runner and crash-bounded result collection.

play_match() drives one match to its end. In interactive mode every step
is rendered and the runner waits for the user before the next shot; the
result is the same either way.

collect_results() turns a match stream into a result stream and stops
pulling matches once the number of crashes exceeds the crash limit. The
match that crosses the limit is still reported.
"""

import logging
import sys
from typing import Callable, Iterable, Iterator, Optional, TextIO

from battleships.evaluation.results import MatchResult
from battleships.game.match import Match, MatchSnapshot
from battleships.visualization.console import ConsoleVisualizer

logger = logging.getLogger(__name__)


def wait_for_enter() -> None:
    input()


def iterate_steps(match: Match) -> Iterator[MatchSnapshot]:
    """Advance the match until it is finished, yielding every step."""
    while not match.is_finished():
        yield match.advance()


def play_match(
    match: Match,
    visualizer: Optional[ConsoleVisualizer] = None,
    acknowledge: Optional[Callable[[], None]] = None,
    output: Optional[TextIO] = None,
) -> MatchResult:
    """
    Play a match to the end.

    Args:
        match: Match to play
        visualizer: If given, render every step (interactive mode)
        acknowledge: Blocks until the user allows the next step
            (default: wait for Enter)
        output: Stream for fault messages in interactive mode

    Returns:
        MatchResult taken from the final state
    """
    last_step = match.snapshot()

    if visualizer is not None:
        acknowledge = acknowledge or wait_for_enter
        output = output or sys.stdout
        for step in iterate_steps(match):
            last_step = step
            visualizer.render(step)
            if step.agent_faulted:
                print(step.error_message, file=output)
            acknowledge()
    else:
        for last_step in iterate_steps(match):
            pass

    return MatchResult.from_snapshot(last_step)


def collect_results(
    matches: Iterable[Match],
    crash_limit: int,
    interactive: bool = False,
    visualizer: Optional[ConsoleVisualizer] = None,
    acknowledge: Optional[Callable[[], None]] = None,
    output: Optional[TextIO] = None,
) -> Iterator[MatchResult]:
    """
    Play matches and yield their results until too many crashes.

    Args:
        matches: Match stream (capped by the caller)
        crash_limit: Stop after the crash count exceeds this value
        interactive: Render steps and wait between them
        visualizer: Renderer for interactive mode (default: ConsoleVisualizer)
        acknowledge: Step confirmation for interactive mode
        output: Stream for interactive output

    Yields:
        MatchResult per played match
    """
    if interactive and visualizer is None:
        visualizer = ConsoleVisualizer(output)
    if not interactive:
        visualizer = None

    crashes = 0
    for match in matches:
        result = play_match(match, visualizer, acknowledge, output)
        yield result

        if result.crashed:
            crashes += 1
        if crashes > crash_limit:
            logger.warning(f"Crash limit exceeded ({crashes} > {crash_limit}), stopping")
            break
