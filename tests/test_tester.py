"""
Integration Tests for AiTester

Tests focusing on:
    - Report and verbose output
    - Results file row through the "results" logger
    - games_count and crash limit applied to a full run
    - End-to-end run against the reference AI process
"""

import io
import logging

import pytest

from battleships.config import TesterSettings
from battleships.evaluation.results import MatchResult
from battleships.evaluation.tester import AiTester, test_single_file as run_single_file

from tests.helpers import (
    SAMPLE_AI,
    AgentFactory,
    FixedGenerator,
    ScriptedAgent,
    single_ship_map,
    tiny_settings,
)


def fixed_maps(settings):
    return FixedGenerator(single_ship_map())


@pytest.fixture
def results_records():
    """Capture rows written to the results logger."""
    records = []

    class ListHandler(logging.Handler):
        def emit(self, record):
            records.append(record.getMessage())

    results_log = logging.getLogger("results")
    handler = ListHandler()
    previous_level = results_log.level
    results_log.addHandler(handler)
    results_log.setLevel(logging.INFO)
    yield records
    results_log.removeHandler(handler)
    results_log.setLevel(previous_level)


def make_tester(settings, agents, output):
    return AiTester(
        settings,
        agent_factory=AgentFactory(agents),
        generator_factory=fixed_maps,
        output=output,
    )


class TestAiTester:
    def test_play_respects_games_count(self):
        output = io.StringIO()
        tester = make_tester(tiny_settings(games_count=4), [ScriptedAgent([(1, 1)])], output)

        results = tester.play("scripted")

        assert results == [MatchResult(False, 0, 1)] * 4

    def test_play_stops_on_crash_limit(self):
        output = io.StringIO()
        agents = [ScriptedAgent([], crash_at=0) for _ in range(5)]
        tester = make_tester(tiny_settings(crash_limit=1, games_count=10), agents, output)

        results = tester.play("scripted")

        assert len(results) == 2
        assert all(result.crashed for result in results)
        assert all(agent.disposed == 1 for agent in agents[:2])

    def test_run_prints_table(self, results_records):
        output = io.StringIO()
        tester = make_tester(tiny_settings(games_count=2), [ScriptedAgent([(0, 0), (1, 1)])], output)

        results, stats = tester.run("path/to/MyAi.exe")

        text = output.getvalue()
        assert "Score statistics\n================\n" in text
        assert "AiName" in text
        assert "MyAi" in text
        assert stats.games_played == 2
        assert stats.mean == 2.0
        assert len(results) == 2

    def test_run_logs_results_row(self, results_records):
        tester = make_tester(tiny_settings(games_count=1), [ScriptedAgent([(1, 1)])], io.StringIO())

        tester.run("ai.exe", ai_name="Champion")

        assert len(results_records) == 1
        assert results_records[0].startswith("Champion       ")
        assert "AiName" not in results_records[0]

    def test_verbose_lines(self, results_records):
        output = io.StringIO()
        agents = [ScriptedAgent([], crash_at=0), ScriptedAgent([(0, 0), (0, 0), (1, 1)])]
        tester = make_tester(tiny_settings(games_count=2, verbose=True), agents, output)

        tester.run("ai")

        text = output.getvalue()
        assert "Game #   1: Turns    0, BadShots 0, Crashed\n" in text
        assert "Game #   2: Turns    3, BadShots 1\n" in text

    def test_quiet_without_verbose(self, results_records):
        output = io.StringIO()
        tester = make_tester(tiny_settings(games_count=1), [ScriptedAgent([(1, 1)])], output)

        tester.run("ai")

        assert "Game #" not in output.getvalue()

    def test_interactive_run(self, results_records):
        output = io.StringIO()
        steps = []
        tester = AiTester(
            tiny_settings(games_count=1, interactive=True),
            agent_factory=AgentFactory([ScriptedAgent([(0, 0), (1, 1)])]),
            generator_factory=fixed_maps,
            acknowledge=lambda: steps.append(1),
            output=output,
        )

        results, _ = tester.run("ai")

        assert len(steps) == 2
        assert results == [MatchResult(False, 0, 2)]
        assert "Turn 2" in output.getvalue()

    def test_single_file_helper(self, results_records):
        output = io.StringIO()

        results, stats = run_single_file(
            tiny_settings(games_count=3),
            "ai",
            agent_factory=AgentFactory([ScriptedAgent([(1, 1)])]),
            generator_factory=fixed_maps,
            output=output,
        )

        assert len(results) == 3
        assert stats.crashes == 0


class TestSampleAi:
    def test_full_run_against_process(self, results_records):
        settings = TesterSettings(games_count=5, random_seed=42)
        output = io.StringIO()

        results, stats = AiTester(settings, output=output).run(SAMPLE_AI)

        assert len(results) == 5
        assert stats.crashes == 0
        assert stats.bad_fraction == 0.0
        assert all(result.bad_shots == 0 for result in results)
        assert all(sum(settings.ships) <= result.turns <= settings.cells for result in results)
        assert "sample_ai" in output.getvalue()

    def test_same_maps_for_every_ai(self, results_records):
        settings = TesterSettings(games_count=3, random_seed=9)

        first, _ = AiTester(settings, output=io.StringIO()).run(SAMPLE_AI)
        second, _ = AiTester(settings, output=io.StringIO()).run(SAMPLE_AI)

        assert first == second
