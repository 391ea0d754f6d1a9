"""Text rendering for interactive runs."""

from battleships.visualization.console import ConsoleVisualizer

__all__ = ['ConsoleVisualizer']
