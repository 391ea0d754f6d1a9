"""
Evaluation Module

Everything between "here is an AI executable" and "here is its score".

Data Flow:
    MapGenerator → generate_maps → generate_matches (owns the AI process)
        → play_match / collect_results (stops on too many crashes)
        → Statistics → report tables

Key Components:
    - AiTester: composition root, runs the pipeline for one AI
    - MatchResult: per-match outcome (crashed, bad_shots, turns)
    - Statistics: mean, sigma, median, crashes, bad%, score
"""

from battleships.evaluation.results import MatchResult
from battleships.evaluation.statistics import Statistics
from battleships.evaluation.streams import generate_maps, generate_matches
from battleships.evaluation.runner import collect_results, play_match
from battleships.evaluation.tester import AiTester, test_single_file

__all__ = [
    'MatchResult',
    'Statistics',
    'generate_maps',
    'generate_matches',
    'collect_results',
    'play_match',
    'AiTester',
    'test_single_file',
]
