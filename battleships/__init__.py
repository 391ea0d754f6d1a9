"""
Battleships AI Tester

Evaluates an external battleships-playing program ("AI") by simulating
many randomized matches against it and reducing the outcome to a single
comparable score.

## Architecture

The tester is organized into several key modules:

1. **game**: Board and match simulation
   - Map: ship placement and shot resolution on a numpy grid
   - MapGenerator: seeded random fleets
   - Match: one AI playing one map, advanced step by step

2. **agent**: External AI process
   - Line-based protocol over stdin/stdout
   - Process spawn, restart and disposal

3. **evaluation**: Orchestration and scoring
   - Lazy map and match streams
   - Crash-bounded result collection
   - Statistics (mean, sigma, median, bad shot fraction, score)
   - Fixed-width report tables

4. **visualization**: Text rendering for interactive runs

## Quick Start

```bash
python -m battleships path/to/ai.exe --settings settings.txt
```

```python
from battleships import TesterSettings, test_single_file

results, statistics = test_single_file(TesterSettings(games_count=100), "ai.exe")
print(statistics.score)
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from battleships.config import TesterSettings, load_settings
from battleships.evaluation import (
    AiTester,
    MatchResult,
    Statistics,
    test_single_file,
)

__all__ = [
    'TesterSettings',
    'load_settings',
    'AiTester',
    'MatchResult',
    'Statistics',
    'test_single_file',
]
