"""Models package for shared data structures."""

from .ranking import RankingEntry, RankingResult
from .trajectory import TrajectoryPoint

__all__ = ['RankingEntry', 'RankingResult', 'TrajectoryPoint']
