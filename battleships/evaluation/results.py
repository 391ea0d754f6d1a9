"""Per-match result."""

from dataclasses import dataclass

from battleships.game.match import MatchSnapshot


@dataclass(frozen=True)
class MatchResult:
    """
    Outcome of one finished match.

    Attributes:
        crashed: Whether the AI faulted during the match
        bad_shots: Number of bad shots
        turns: Number of shots made
    """
    crashed: bool
    bad_shots: int
    turns: int

    @classmethod
    def from_snapshot(cls, snapshot: MatchSnapshot) -> "MatchResult":
        return cls(
            crashed=snapshot.agent_faulted,
            bad_shots=snapshot.bad_shots,
            turns=snapshot.turns,
        )
