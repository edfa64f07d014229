"""Embeddings from the eigendecomposition of the co-occurrence adjacency.

Each word is represented by the magnitudes of its row across all right
eigenvectors of the adjacency matrix. A general (non-symmetric) solver is used,
so eigenpairs may come back complex even though the adjacency is real and
symmetric; taking magnitudes yields a real embedding. Dimension order is the
order the solver returns eigenpairs in.
"""

import logging

import numpy as np
import scipy.linalg

from .base_model import BaseEmbedder
from wordgraph.exceptions import DecompositionError
from wordgraph.graph import CooccurrenceGraph

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

class SpectralEmbedder(BaseEmbedder):
    """Spectral embedding strategy."""

    name = "spectral"

    def __init__(self, config=None):
        super().__init__(config)
        self.eigenvalues = None
        self.eigenvectors = None

    def _compute(self, graph: CooccurrenceGraph) -> np.ndarray:
        """Factorize the adjacency and take eigenvector magnitudes.

        Args:
            graph: Co-occurrence graph

        Returns:
            Array where entry (i, j) is |eigenvector_j[i]|

        Raises:
            DecompositionError: If the factorization fails or is not finite
        """
        adjacency = graph.to_dense()
        try:
            eigenvalues, eigenvectors = scipy.linalg.eig(adjacency, right=True)
        except (np.linalg.LinAlgError, ValueError) as e:
            raise DecompositionError(f"Eigendecomposition failed: {e}") from e

        logger.info("Eigenvectors computed")
        for i, value in enumerate(np.abs(eigenvalues)):
            logger.debug(f"  eigenvalue {i}: |{value:.6f}|")

        embeddings = np.abs(eigenvectors)
        if not np.all(np.isfinite(embeddings)):
            raise DecompositionError("Eigendecomposition produced non-finite eigenvectors")

        self.eigenvalues = eigenvalues
        self.eigenvectors = eigenvectors
        return embeddings
