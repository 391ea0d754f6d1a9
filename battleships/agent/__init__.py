"""
Agent Module

The player side of a match.

Key Components:
    - Agent (ABC): init/next_shot/dispose interface
    - AgentProcess: external AI executable over a line protocol
"""

from battleships.agent.base import Agent
from battleships.agent.process import AgentProcess, build_command, parse_shot

__all__ = ['Agent', 'AgentProcess', 'build_command', 'parse_shot']
