"""
AI tester: wires the evaluation pipeline together.

    MapGenerator → generate_maps → generate_matches → islice(games_count)
        → collect_results → Statistics → report

Collaborators (agent factory, map generator, visualizer, step
acknowledgment, output stream) are injected so tests can replace the
external process and the console.
"""

import logging
import sys
from contextlib import closing
from itertools import islice
from pathlib import Path
from typing import Callable, List, Optional, TextIO, Tuple, Union

from tqdm import tqdm

from battleships.agent.base import Agent
from battleships.agent.process import AgentProcess
from battleships.config import TesterSettings
from battleships.evaluation.report import statistics_message, statistics_row, format_table_row, verbose_results
from battleships.evaluation.results import MatchResult
from battleships.evaluation.runner import collect_results
from battleships.evaluation.statistics import Statistics
from battleships.evaluation.streams import generate_maps, generate_matches
from battleships.game.generator import MapGenerator
from battleships.visualization.console import ConsoleVisualizer

logger = logging.getLogger(__name__)
results_log = logging.getLogger("results")


class AiTester:
    """
    Evaluate AI executables under fixed settings.

    Attributes:
        settings: Run configuration
        agent_factory: Builds an agent from an executable path
        output: Stream for verbose lines, the score table and interactive output
    """

    def __init__(
        self,
        settings: TesterSettings,
        agent_factory: Callable[[str], Agent] = AgentProcess,
        generator_factory: Callable[[TesterSettings], MapGenerator] = MapGenerator,
        visualizer: Optional[ConsoleVisualizer] = None,
        acknowledge: Optional[Callable[[], None]] = None,
        output: Optional[TextIO] = None,
        progress: bool = False,
    ):
        """
        Initialize tester.

        Args:
            settings: Run configuration
            agent_factory: Creates an agent for an executable path
                (default: AgentProcess)
            generator_factory: Creates the map generator for a run; called
                once per run so every AI sees the same maps
            visualizer: Renderer for interactive mode
            acknowledge: Step confirmation for interactive mode
            output: Output stream (default: stdout)
            progress: Show a tqdm progress bar in non-interactive runs
        """
        self.settings = settings
        self.agent_factory = agent_factory
        self.generator_factory = generator_factory
        self.visualizer = visualizer
        self.acknowledge = acknowledge
        self.output = output or sys.stdout
        self.progress = progress

    def play(self, exe_path: Union[str, Path]) -> List[MatchResult]:
        """
        Play matches against one AI.

        Args:
            exe_path: AI executable

        Returns:
            Results of all played matches, in order
        """
        settings = self.settings
        maps = generate_maps(self.generator_factory(settings))
        spawn = lambda: self.agent_factory(str(exe_path))

        with closing(generate_matches(spawn, maps)) as matches:
            results = collect_results(
                islice(matches, settings.games_count),
                settings.crash_limit,
                interactive=settings.interactive,
                visualizer=self.visualizer,
                acknowledge=self.acknowledge,
                output=self.output,
            )
            if self.progress and not settings.interactive:
                results = tqdm(
                    results,
                    total=settings.games_count,
                    desc=f"Testing {Path(exe_path).stem}",
                    leave=False,
                )
            played = list(results)

        logger.info(f"Played {len(played)} games against {exe_path}")
        return played

    def evaluate(self, results: List[MatchResult]) -> Statistics:
        settings = self.settings
        return Statistics.from_results(
            results, settings.width, settings.height, settings.crash_limit
        )

    def run(
        self, exe_path: Union[str, Path], ai_name: Optional[str] = None
    ) -> Tuple[List[MatchResult], Statistics]:
        """
        Test one AI and print the report.

        Args:
            exe_path: AI executable
            ai_name: Name in the score table (default: executable stem)

        Returns:
            (results, statistics)
        """
        ai_name = ai_name or Path(exe_path).stem
        results = self.play(exe_path)

        if self.settings.verbose:
            for line in verbose_results(results):
                print(line, file=self.output)

        statistics = self.evaluate(results)
        results_log.info(format_table_row(statistics_row(ai_name, statistics)))
        self.output.write(statistics_message(ai_name, statistics))
        return results, statistics


def test_single_file(
    settings: TesterSettings, exe_path: Union[str, Path], **kwargs
) -> Tuple[List[MatchResult], Statistics]:
    """Run a full evaluation of one AI executable."""
    return AiTester(settings, **kwargs).run(exe_path)


# Not a pytest test
test_single_file.__test__ = False
