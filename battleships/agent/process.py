"""
External AI process wrapper.

The AI under test is a separate executable that talks over stdin/stdout,
one line per message.

Protocol Flow:
    Tester → "Init 10 10 4 3 3 2 2 2 1 1 1 1"
    AI     → "3 4"
    Tester → "Miss 3 4"
    AI     → "5 5"
    Tester → "Wound 5 5"
    AI     → "5 6"
    Tester → "Kill 5 6"
    ...

Every AI reply is two integers "x y". The same process plays consecutive
matches (a new "Init" starts the next one) until it crashes; the caller
then disposes it and spawns a new one.

Failures (spawn error, early exit, broken pipe, malformed reply) raise
AgentError from init()/next_shot() so the match can record them.
"""

import logging
import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Union

from battleships.agent.base import Agent, Point
from battleships.exceptions import AgentError
from battleships.game.map import ShotEffect

logger = logging.getLogger(__name__)

DISPOSE_TIMEOUT = 1.0


def build_command(path: Union[str, Path]) -> List[str]:
    """
    Build the argv for an AI executable.

    Python scripts are run with the current interpreter so they work
    without an executable bit or shebang.

    Args:
        path: Path to the AI executable or .py script

    Returns:
        Command line as a list
    """
    path = str(path)
    if path.endswith(".py"):
        return [sys.executable, path]
    return [path]


class AgentProcess(Agent):
    """
    AI running as a child process.

    Attributes:
        command: argv used to start the process
        name: Display name (executable stem)
        process: Popen handle, None if the spawn failed
    """

    def __init__(self, path: Union[str, Path, Sequence[str]]):
        """
        Start the AI process.

        Args:
            path: Executable path, or a full argv list
        """
        if isinstance(path, (str, Path)):
            self.command = build_command(path)
            self.name = Path(path).stem
        else:
            self.command = list(path)
            self.name = Path(self.command[-1]).stem

        self.process: Optional[subprocess.Popen] = None
        self._spawn_error: Optional[OSError] = None
        self._disposed = False

        try:
            self.process = subprocess.Popen(
                self.command,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
                bufsize=1,
            )
        except OSError as e:
            logger.error(f"Failed to start {self.command}: {e}")
            self._spawn_error = e
        else:
            logger.debug(f"Started {self.name} (pid {self.process.pid})")

    def is_alive(self) -> bool:
        return self.process is not None and self.process.poll() is None

    def init(self, width: int, height: int, ship_sizes: Sequence[int]) -> Point:
        sizes = " ".join(str(size) for size in ship_sizes)
        return self._exchange(f"Init {width} {height} {sizes}")

    def next_shot(self, last_target: Point, last_effect: ShotEffect) -> Point:
        x, y = last_target
        return self._exchange(f"{last_effect.value} {x} {y}")

    def _exchange(self, message: str) -> Point:
        self._send(message)
        return self._receive()

    def _send(self, message: str):
        if self._spawn_error is not None:
            raise AgentError(f"{self.name} could not be started: {self._spawn_error}")
        if self._disposed:
            raise AgentError(f"{self.name} has been disposed")
        if not self.is_alive():
            raise AgentError(f"{self.name} is not running (exit code {self.process.returncode})")

        logger.debug(f">>> {message}")
        try:
            self.process.stdin.write(message + "\n")
            self.process.stdin.flush()
        except (BrokenPipeError, OSError) as e:
            raise AgentError(f"{self.name} stdin broken: {e}") from e

    def _receive(self) -> Point:
        try:
            line = self.process.stdout.readline()
        except (OSError, ValueError) as e:
            raise AgentError(f"{self.name} stdout broken: {e}") from e

        if line == "":
            code = self.process.poll()
            raise AgentError(f"{self.name} exited while waiting for a shot (exit code {code})")

        logger.debug(f"<<< {line.rstrip()}")
        return parse_shot(line, self.name)

    def dispose(self) -> None:
        """Close the pipes and stop the process. Safe to call more than once."""
        if self._disposed:
            return
        self._disposed = True

        if self.process is None:
            return

        try:
            self.process.stdin.close()
        except (BrokenPipeError, OSError) as e:
            logger.debug(f"Closing stdin of {self.name}: {e}")

        if self.process.poll() is None:
            self.process.terminate()
            try:
                self.process.wait(timeout=DISPOSE_TIMEOUT)
            except subprocess.TimeoutExpired:
                logger.warning(f"{self.name} did not terminate, killing")
                self.process.kill()
                self.process.wait()

        self.process.stdout.close()
        logger.debug(f"Stopped {self.name} (exit code {self.process.returncode})")


def parse_shot(line: str, name: str = "agent") -> Point:
    """
    Parse an AI reply.

    Args:
        line: Raw line, e.g. "3 4\\n"
        name: AI name for error messages

    Returns:
        (x, y)

    Raises:
        AgentError: If the line is not two integers
    """
    parts = line.split()
    if len(parts) != 2:
        raise AgentError(f"{name} sent a bad answer: {line.strip()!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as e:
        raise AgentError(f"{name} sent a bad answer: {line.strip()!r}") from e
