"""
Co-occurrence word embeddings package.
"""

from .config import EmbeddingConfig
from .vocabulary import Vocabulary
from .graph import CooccurrenceGraph
from .embeddings import BaseEmbedder, GradientEmbedder, SpectralEmbedder, get_embedder
from .similarity import SimilarityRanker
from .core import PipelineResult, run_pipeline

__all__ = [
    'EmbeddingConfig',
    'Vocabulary',
    'CooccurrenceGraph',
    'BaseEmbedder',
    'GradientEmbedder',
    'SpectralEmbedder',
    'get_embedder',
    'SimilarityRanker',
    'PipelineResult',
    'run_pipeline',
]

__version__ = "0.1.0"
