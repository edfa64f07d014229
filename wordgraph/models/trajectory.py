"""Training trajectory data structure."""

from dataclasses import dataclass

@dataclass(frozen=True)
class TrajectoryPoint:
    """Cost recorded at one training iteration."""
    iteration: int
    cost: float
