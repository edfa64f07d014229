"""Embedding strategies package.

This package turns a co-occurrence graph into per-word vectors. The main
components are:

1. BaseEmbedder: Abstract base class defining ``compute_embeddings(graph)``
2. GradientEmbedder: Momentum gradient descent on a quadratic factorization loss
3. SpectralEmbedder: Eigendecomposition of the adjacency matrix
4. get_embedder: Selects a strategy by mode name

Example usage:
    from wordgraph.embeddings import get_embedder

    embedder = get_embedder("spectral")
    vectors = embedder.compute_embeddings(graph)
"""

from .base_model import BaseEmbedder
from .gradient import GradientEmbedder, clip_by_global_norm
from .spectral import SpectralEmbedder
from .factory import get_embedder

__all__ = ['BaseEmbedder', 'GradientEmbedder', 'SpectralEmbedder', 'clip_by_global_norm', 'get_embedder']
