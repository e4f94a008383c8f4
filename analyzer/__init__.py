"""
Analysis package

Collects per-tick samples of the car and summarizes finished runs.
"""

from .statistics import SimulationStatistics, StatisticsSummary

__all__ = [
    'SimulationStatistics',
    'StatisticsSummary',
]
