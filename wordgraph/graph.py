"""Co-occurrence graph built from a sliding window over the token stream."""

import logging
import sys
from typing import List, Sequence

import numpy as np
import scipy.sparse as sp
from tqdm import tqdm

from wordgraph.preprocessing import normalize
from wordgraph.vocabulary import Vocabulary

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class CooccurrenceGraph:
    """Symmetric weighted adjacency structure over vocabulary indices.

    Weights are raw neighbour counts stored in a dictionary-of-keys sparse
    matrix, so a single cell can be read, incremented and written back in
    amortized constant time.
    """

    def __init__(self, size: int):
        """Initialize an empty graph.

        Args:
            size: Number of vocabulary entries (rows and columns)
        """
        self.size = size
        self._adjacency = sp.dok_matrix((size, size), dtype=np.float64)

    @classmethod
    def build(cls, tokens: Sequence[str], vocabulary: Vocabulary) -> 'CooccurrenceGraph':
        """Build the graph from a raw token stream.

        Every interior token is linked to its left and right neighbour.
        The first and last token are never the centre of a window.

        Args:
            tokens: Raw (unnormalized) tokens, already truncated
            vocabulary: Vocabulary built from the same tokens

        Returns:
            The populated graph
        """
        logger.info("Building co-occurrence graph...")
        graph = cls(len(vocabulary))
        indices: List[int] = [vocabulary.index_of(normalize(token)) for token in tokens]

        quiet = len(indices) < 3 or not sys.stderr.isatty()
        for i in tqdm(range(1, len(indices) - 1), desc="Building graph", disable=quiet):
            left, center, right = indices[i - 1], indices[i], indices[i + 1]
            graph.increment(left, center)
            graph.increment(right, center)

        logger.info(f"Graph built: {graph.nnz} non-zero cells")
        return graph

    def increment(self, i: int, j: int, amount: float = 1.0) -> None:
        """Add ``amount`` to the edge between i and j in both directions.

        Self pairs are skipped so the diagonal stays zero.
        """
        if i == j:
            return
        weight = self._adjacency[i, j] + amount
        self._adjacency[i, j] = weight
        self._adjacency[j, i] = weight

    def weight(self, i: int, j: int) -> float:
        return float(self._adjacency[i, j])

    def degrees(self) -> np.ndarray:
        """Return the weighted degree (row sum) of every node."""
        return np.asarray(self._adjacency.sum(axis=1)).ravel()

    @property
    def nnz(self) -> int:
        return self._adjacency.nnz

    @property
    def shape(self):
        return self._adjacency.shape

    def to_dense(self) -> np.ndarray:
        """Return the adjacency as a dense ``size x size`` array."""
        return self._adjacency.toarray()

    def to_csr(self) -> sp.csr_matrix:
        """Return the adjacency in compressed sparse row form."""
        return self._adjacency.tocsr()

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"CooccurrenceGraph(size={self.size}, nnz={self.nnz})"
