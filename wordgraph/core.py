"""Core pipeline: corpus -> vocabulary -> graph -> embeddings -> ranking."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

from wordgraph.config import EmbeddingConfig
from wordgraph.embeddings import BaseEmbedder, GradientEmbedder, get_embedder
from wordgraph.graph import CooccurrenceGraph
from wordgraph.models import RankingResult, TrajectoryPoint
from wordgraph.plotting import plot_cost_curve
from wordgraph.preprocessing import TextPreprocessor
from wordgraph.similarity import SimilarityRanker
from wordgraph.vocabulary import Vocabulary

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Everything produced by one run."""
    vocabulary: Vocabulary
    graph: CooccurrenceGraph
    embeddings: np.ndarray
    trajectory: List[TrajectoryPoint] = field(default_factory=list)
    ranking: Optional[RankingResult] = None


def load_tokens(config: EmbeddingConfig, text: Optional[str] = None) -> List[str]:
    """Get the truncated raw token stream from text or the configured corpus file.

    Raises:
        CorpusError: If the corpus file cannot be read
    """
    preprocessor = TextPreprocessor(max_tokens=config.max_tokens)
    if text is None:
        return preprocessor.process_corpus(config.corpus_path)
    return preprocessor.process_text(text)


def build_graph(tokens: Sequence[str]) -> Tuple[Vocabulary, CooccurrenceGraph]:
    """Build the vocabulary and co-occurrence graph for a token stream."""
    vocabulary = Vocabulary.build(tokens)
    graph = CooccurrenceGraph.build(tokens, vocabulary)
    return vocabulary, graph


def compute_embeddings(graph: CooccurrenceGraph, config: EmbeddingConfig) -> Tuple[np.ndarray, BaseEmbedder]:
    """Run the configured strategy and write the cost plot for gradient runs.

    Raises:
        UnknownModeError: If config.mode is not recognized
        DecompositionError: If the spectral factorization fails
        TrainingDivergedError: If gradient training produces a non-finite cost
        PlotError: If the cost plot cannot be written
    """
    embedder = get_embedder(config=config)
    embeddings = embedder.compute_embeddings(graph)

    if isinstance(embedder, GradientEmbedder) and config.write_plot:
        plot_cost_curve(embedder.trajectory, config.plot_path)

    return embeddings, embedder


def rank_query(result: PipelineResult, query: str) -> RankingResult:
    """Rank a finished run's vocabulary against a query and store the ranking.

    Raises:
        UnknownQueryTokenError: If query is not in the vocabulary
    """
    result.ranking = SimilarityRanker(result.vocabulary, result.embeddings).rank(query)
    return result.ranking


def run_pipeline(
    config: Optional[EmbeddingConfig] = None,
    text: Optional[str] = None,
    rank: bool = True
) -> PipelineResult:
    """Run every stage and rank the vocabulary against config.query.

    Args:
        config: Run configuration
        text: Corpus text; read from config.corpus_path when omitted
        rank: Whether to rank against config.query; see rank_query

    Returns:
        PipelineResult for the run

    Raises:
        UnknownQueryTokenError: If config.query is not in the vocabulary
    """
    config = config or EmbeddingConfig()
    # Fail on a bad mode before doing any work
    get_embedder(config=config)

    tokens = load_tokens(config, text)
    vocabulary, graph = build_graph(tokens)
    embeddings, embedder = compute_embeddings(graph, config)

    result = PipelineResult(
        vocabulary=vocabulary,
        graph=graph,
        embeddings=embeddings,
        trajectory=list(getattr(embedder, "trajectory", [])),
    )
    if rank:
        rank_query(result, config.query)
    return result
