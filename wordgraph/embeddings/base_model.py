"""Base class for embedding strategies.

This module provides the base class for the embedding strategies, defining the
common interface shared by the gradient and spectral implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional
import logging

import numpy as np

from wordgraph.config import EmbeddingConfig
from wordgraph.graph import CooccurrenceGraph

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

class BaseEmbedder(ABC):
    """Base class for embedding strategies.

    A strategy turns a co-occurrence graph into one dense vector per
    vocabulary index. Row ``i`` of the returned matrix is the embedding of the
    word with index ``i``.
    """

    name = "base"

    def __init__(self, config: Optional[EmbeddingConfig] = None):
        """Initialize the strategy.

        Args:
            config: Run configuration; defaults are used when omitted
        """
        self.config = config or EmbeddingConfig()

    def compute_embeddings(self, graph: CooccurrenceGraph) -> np.ndarray:
        """Compute the embedding matrix for a graph.

        Args:
            graph: Co-occurrence graph over the vocabulary

        Returns:
            Array of shape (len(graph), dimension)
        """
        logger.info(f"Computing {self.name} embeddings for {len(graph)} words")
        if len(graph) == 0:
            return np.zeros((0, 0))
        return self._compute(graph)

    @abstractmethod
    def _compute(self, graph: CooccurrenceGraph) -> np.ndarray:
        """Compute embeddings for a non-empty graph.

        This method must be implemented by subclasses.
        """
        pass
