"""
Lazy map and match streams.

Both streams are plain generators: nothing is generated until the
consumer asks for the next item, and neither can be rewound.

generate_matches() owns the AI process. It is the only place that spawns
or stops one: a single process plays consecutive matches and is replaced
only after it crashes. Closing the generator early (e.g. when the crash
limit is hit) stops the current process as well.
"""

import logging
from typing import Callable, Iterable, Iterator

from battleships.agent.base import Agent
from battleships.game.generator import MapGenerator
from battleships.game.map import Map
from battleships.game.match import Match

logger = logging.getLogger(__name__)


def generate_maps(generator: MapGenerator) -> Iterator[Map]:
    """Yield maps from the generator forever."""
    while True:
        yield generator.generate_map()


def generate_matches(
    agent_factory: Callable[[], Agent],
    maps: Iterable[Map],
) -> Iterator[Match]:
    """
    Pair each map with the current AI process.

    The yielded match is expected to be played to completion before the
    next one is requested; its final state decides whether the process
    is reused.

    Args:
        agent_factory: Creates a fresh agent (spawns the AI process)
        maps: Map stream

    Yields:
        Match for each map
    """
    agent = agent_factory()
    logger.info(f"Started {agent.name}")
    try:
        for board in maps:
            match = Match(board, agent)
            yield match
            if match.agent_faulted:
                logger.info(f"Restarting {agent.name} after crash: {match.error_message}")
                agent.dispose()
                agent = agent_factory()
    finally:
        agent.dispose()
        logger.debug(f"Disposed {agent.name}")
