"""
Exception hierarchy for the battleships tester.

Only AgentError is part of normal operation: it is raised by the agent
process wrapper and turned into a crashed match by the match engine.
Everything else signals a broken setup and propagates to the caller.
"""


class BattleshipsError(Exception):
    """Base class for all tester errors."""


class AgentError(BattleshipsError):
    """The external AI misbehaved: bad output, early exit or broken pipe."""


class SettingsError(BattleshipsError):
    """Invalid tester settings or settings file."""


class MatchFinishedError(BattleshipsError):
    """A step was requested on a match that is already over."""
