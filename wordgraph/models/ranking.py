"""Similarity ranking data structures."""

from dataclasses import dataclass, field
from typing import List, Optional

@dataclass(frozen=True)
class RankingEntry:
    """A vocabulary entry scored against a query."""
    token: str
    index: int
    similarity: float

@dataclass
class RankingResult:
    """Full ranking for one query, ascending by similarity."""
    query: str
    query_index: int
    entries: List[RankingEntry] = field(default_factory=list)
    best_match: Optional[RankingEntry] = None
