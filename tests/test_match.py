"""
Unit Tests for the Match Engine

Tests focusing on:
    - Protocol sequence seen by the agent
    - Turn and bad shot counting
    - Agent faults recorded as data
    - Snapshots are immutable and independent
"""

import pytest

from battleships.exceptions import MatchFinishedError
from battleships.game.map import CellState, Map, Ship, ShotEffect
from battleships.game.match import Match

from tests.helpers import ScriptedAgent, single_ship_map


def play_out(match):
    snapshots = []
    while not match.is_finished():
        snapshots.append(match.advance())
    return snapshots


class TestMatchFlow:
    def test_init_then_reports(self):
        agent = ScriptedAgent([(0, 0), (1, 1)])
        match = Match(single_ship_map(), agent)

        play_out(match)

        assert agent.messages == [
            ("Init", 3, 3, (1,)),
            ("Miss", (0, 0)),
        ]

    def test_finishes_when_fleet_sunk(self):
        match = Match(single_ship_map(), ScriptedAgent([(0, 0), (1, 1)]))

        snapshots = play_out(match)

        assert len(snapshots) == 2
        assert match.is_finished()
        assert match.turns == 2
        assert match.bad_shots == 0
        assert not match.agent_faulted
        assert snapshots[-1].finished
        assert snapshots[-1].last_effect == ShotEffect.KILL

    def test_source_map_untouched(self):
        board = single_ship_map()
        match = Match(board, ScriptedAgent([(1, 1)]))

        play_out(match)

        assert board[1, 1] == CellState.SHIP
        assert board.has_alive_ships()

    def test_advance_after_finish_raises(self):
        match = Match(single_ship_map(), ScriptedAgent([(1, 1)]))
        play_out(match)

        with pytest.raises(MatchFinishedError):
            match.advance()


class TestBadShots:
    @pytest.fixture
    def board(self):
        board = Map(5, 5)
        board.place_ship(Ship((0, 0), 2))
        board.place_ship(Ship((4, 4), 1))
        return board

    def test_outside_board(self, board):
        match = Match(board, ScriptedAgent([(9, 9), (0, 0), (1, 0), (4, 4)]))
        play_out(match)

        assert match.bad_shots == 1
        assert match.turns == 4

    def test_repeated_cell(self, board):
        match = Match(board, ScriptedAgent([(2, 2), (2, 2), (0, 0), (1, 0), (4, 4)]))
        play_out(match)

        assert match.bad_shots == 1

    def test_near_sunk_ship(self, board):
        # (2, 0) touches the sunk two-cell ship
        match = Match(board, ScriptedAgent([(0, 0), (1, 0), (2, 0), (4, 4)]))
        play_out(match)

        assert match.bad_shots == 1

    def test_diagonal_of_hit(self, board):
        # (1, 1) is diagonal to the wounded cell (0, 0)
        match = Match(board, ScriptedAgent([(0, 0), (1, 1), (1, 0), (4, 4)]))
        play_out(match)

        assert match.bad_shots == 1

    def test_clean_hunt(self, board):
        match = Match(board, ScriptedAgent([(0, 0), (1, 0), (2, 2), (4, 4)]))
        play_out(match)

        assert match.bad_shots == 0


class TestAgentFaults:
    def test_crash_recorded_not_raised(self):
        agent = ScriptedAgent([(0, 0), (2, 2)], crash_at=1)
        match = Match(single_ship_map(), agent)

        snapshots = play_out(match)

        assert match.agent_faulted
        assert match.is_finished()
        assert match.turns == 1
        assert snapshots[-1].agent_faulted
        assert "crashed on shot 1" in snapshots[-1].error_message

    def test_crash_on_init(self):
        match = Match(single_ship_map(), ScriptedAgent([], crash_at=0))

        play_out(match)

        assert match.agent_faulted
        assert match.turns == 0


class TestSnapshots:
    def test_snapshots_do_not_alias(self):
        match = Match(single_ship_map(), ScriptedAgent([(0, 0), (2, 2), (1, 1)]))

        first = match.advance()
        match.advance()
        match.advance()

        assert first.turns == 1
        assert first.grid[0, 0] == CellState.MISS
        assert first.grid[1, 1] == CellState.SHIP
        assert not first.finished

    def test_snapshot_grid_read_only(self):
        match = Match(single_ship_map(), ScriptedAgent([(0, 0), (1, 1)]))

        snapshot = match.advance()

        with pytest.raises(ValueError):
            snapshot.grid[0, 0] = CellState.EMPTY

    def test_snapshot_frozen(self):
        snapshot = Match(single_ship_map(), ScriptedAgent([])).snapshot()

        with pytest.raises(AttributeError):
            snapshot.turns = 5
