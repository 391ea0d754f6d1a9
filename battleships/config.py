"""
Tester settings and settings-file loading.

Settings files use one ``Key=Value`` pair per line, the same format as the
classic ``settings.txt`` shipped with the tester:

    Width=10
    Height=10
    Ships=1,1,1,1,2,2,2,3,3,4
    CrashLimit=1
    GamesCount=1000
    RandomSeed=0
    TimeLimitSeconds=1
    MemoryLimit=104857600
    Interactive=false
    Verbose=false

Blank lines and lines starting with ``#`` are ignored.
"""

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict, List, Union

from battleships.exceptions import SettingsError

logger = logging.getLogger(__name__)

DEFAULT_SHIPS = [1, 1, 1, 1, 2, 2, 2, 3, 3, 4]


@dataclass
class TesterSettings:
    """Configuration for one evaluation run.

    Everything the pipeline needs is read from here; nothing in the
    pipeline writes back into it.
    """

    # Board
    width: int = 10
    """Board width in cells"""

    height: int = 10
    """Board height in cells"""

    ships: List[int] = field(default_factory=lambda: list(DEFAULT_SHIPS))
    """Sizes of the ships placed on every generated map"""

    # Run control
    crash_limit: int = 1
    """Run stops once the number of crashes exceeds this value"""

    games_count: int = 1000
    """Maximum number of matches played"""

    random_seed: int = 0
    """Seed for map generation"""

    # Resource limits (not enforced, kept for settings-file compatibility)
    time_limit_seconds: float = 1.0
    """Wall-clock budget per match"""

    memory_limit: int = 100 * 1024 * 1024
    """Memory budget for the AI process in bytes"""

    # Output
    interactive: bool = False
    """Render every step and wait for Enter before the next one"""

    verbose: bool = False
    """Print one line per match after the run"""

    def __post_init__(self):
        """Validate settings after initialization."""
        self.ships = [int(size) for size in self.ships]

        if self.width <= 0 or self.height <= 0:
            raise SettingsError(
                f"Board dimensions must be positive, got {self.width}x{self.height}"
            )

        if not self.ships:
            raise SettingsError("At least one ship is required")

        if any(size <= 0 for size in self.ships):
            raise SettingsError(f"Ship sizes must be positive, got {self.ships}")

        if max(self.ships) > max(self.width, self.height):
            raise SettingsError(
                f"Ship of size {max(self.ships)} does not fit a "
                f"{self.width}x{self.height} board"
            )

        if self.crash_limit < 0:
            raise SettingsError(f"crash_limit must be non-negative, got {self.crash_limit}")

        if self.games_count < 0:
            raise SettingsError(f"games_count must be non-negative, got {self.games_count}")

    @property
    def cells(self) -> int:
        """Total number of board cells."""
        return self.width * self.height


# Settings-file key -> dataclass field
_KEYS = {
    "Width": "width",
    "Height": "height",
    "Ships": "ships",
    "CrashLimit": "crash_limit",
    "GamesCount": "games_count",
    "RandomSeed": "random_seed",
    "TimeLimitSeconds": "time_limit_seconds",
    "MemoryLimit": "memory_limit",
    "Interactive": "interactive",
    "Verbose": "verbose",
}

_TRUE = {"true", "yes", "1", "on"}
_FALSE = {"false", "no", "0", "off"}


def _parse_bool(text: str) -> bool:
    lowered = text.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"not a boolean: {text!r}")


def _parse_ships(text: str) -> List[int]:
    return [int(part) for part in text.replace(",", " ").split()]


def _convert(field_name: str, text: str):
    """Convert a raw settings value to the type of the target field."""
    if field_name == "ships":
        return _parse_ships(text)

    field_type = {f.name: f.type for f in fields(TesterSettings)}[field_name]
    if field_type is bool:
        return _parse_bool(text)
    if field_type is float:
        return float(text)
    return int(text)


def parse_settings(text: str) -> TesterSettings:
    """
    Parse settings from the text of a settings file.

    Args:
        text: File contents

    Returns:
        TesterSettings with defaults for keys not present

    Raises:
        SettingsError: On unknown keys, malformed lines or bad values
    """
    values: Dict[str, object] = {}

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            raise SettingsError(f"Line {line_number}: expected Key=Value, got {line!r}")

        key, value = (part.strip() for part in line.split("=", 1))
        if key not in _KEYS:
            raise SettingsError(f"Line {line_number}: unknown setting {key!r}")

        field_name = _KEYS[key]
        try:
            values[field_name] = _convert(field_name, value)
        except ValueError as e:
            raise SettingsError(f"Line {line_number}: bad value for {key}: {e}") from e

    return TesterSettings(**values)


def load_settings(path: Union[str, Path]) -> TesterSettings:
    """
    Load settings from a file.

    Args:
        path: Path to the settings file

    Returns:
        Parsed TesterSettings

    Raises:
        FileNotFoundError: If the file does not exist
        SettingsError: If the file is malformed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")

    settings = parse_settings(path.read_text())
    logger.debug(f"Loaded settings from {path}: {settings}")
    return settings
