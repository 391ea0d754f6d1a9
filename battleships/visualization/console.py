"""
Console rendering of a match.

Example output (10x10 board, after a few shots):

      0 1 2 3 4 5 6 7 8 9
    0 . . . . . . . . . .
    1 . O O O . . * . . .
    2 . . . . . . . . . .
    3 X X . . . . . O . .
    ...
    Turn 7, bad shots 0, last shot (6, 1): Miss

Legend:
    .  water that has not been shot
    O  intact ship cell
    X  hit ship cell
    *  missed shot
"""

import sys
from typing import Optional, TextIO

from battleships.game.map import CellState
from battleships.game.match import MatchSnapshot

SYMBOLS = {
    CellState.EMPTY: ".",
    CellState.SHIP: "O",
    CellState.DEAD_OR_WOUNDED_SHIP: "X",
    CellState.MISS: "*",
}


class ConsoleVisualizer:
    """Render match snapshots as text."""

    def __init__(self, output: Optional[TextIO] = None):
        self.output = output or sys.stdout

    def format(self, snapshot: MatchSnapshot) -> str:
        width = len(str(snapshot.width - 1))
        row_label = len(str(snapshot.height - 1))

        header = " " * (row_label + 1) + " ".join(
            str(x).rjust(width) for x in range(snapshot.width)
        )
        lines = [header]
        for y in range(snapshot.height):
            cells = " ".join(
                SYMBOLS[CellState(int(value))].rjust(width) for value in snapshot.grid[y]
            )
            lines.append(f"{str(y).rjust(row_label)} {cells}")

        status = f"Turn {snapshot.turns}, bad shots {snapshot.bad_shots}"
        if snapshot.last_target is not None:
            status += f", last shot {snapshot.last_target}: {snapshot.last_effect.value}"
        if snapshot.agent_faulted:
            status += ", CRASHED"
        lines.append(status)
        return "\n".join(lines)

    def render(self, snapshot: MatchSnapshot) -> None:
        print(self.format(snapshot), file=self.output)
        self.output.flush()
