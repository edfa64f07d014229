"""Cosine similarity ranking of vocabulary vectors against a query word."""

import logging
from typing import List, Optional

import numpy as np

from wordgraph.models import RankingEntry, RankingResult
from wordgraph.preprocessing import normalize
from wordgraph.vocabulary import Vocabulary

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def cosine_similarities(query_vector: np.ndarray, vectors: np.ndarray) -> np.ndarray:
    """Cosine similarity between a query vector and every row of a matrix.

    Rows (or a query) with zero norm get a similarity of 0.0.

    Args:
        query_vector: Vector of shape (dimension,)
        vectors: Matrix of shape (count, dimension)

    Returns:
        Array of shape (count,)
    """
    norms = np.linalg.norm(vectors, axis=1) * np.linalg.norm(query_vector)
    dots = vectors @ query_vector
    similarities = np.zeros(len(vectors))
    nonzero = norms > 0
    similarities[nonzero] = dots[nonzero] / norms[nonzero]
    return similarities


class SimilarityRanker:
    """Ranks every vocabulary entry by cosine similarity to a query word."""

    def __init__(self, vocabulary: Vocabulary, embeddings: np.ndarray):
        """Initialize the ranker.

        Args:
            vocabulary: Vocabulary whose indices address rows of embeddings
            embeddings: Matrix with one row per vocabulary entry
        """
        if len(embeddings) != len(vocabulary):
            raise ValueError(
                f"Embedding rows ({len(embeddings)}) do not match vocabulary size ({len(vocabulary)})"
            )
        self.vocabulary = vocabulary
        self.embeddings = embeddings

    def rank(self, query: str) -> RankingResult:
        """Score all words against a query.

        Entries are visited in index order, so the best match is the
        lowest-index word among those tied for the highest similarity.

        Args:
            query: Query word; normalized like corpus tokens

        Returns:
            RankingResult with entries sorted ascending by similarity

        Raises:
            UnknownQueryTokenError: If the query is not in the vocabulary
        """
        word = normalize(query)
        query_index = self.vocabulary.index_of(word)
        query_vector = self.embeddings[query_index]

        if np.linalg.norm(query_vector) == 0 or np.any(np.linalg.norm(self.embeddings, axis=1) == 0):
            logger.warning("Zero-norm vectors present; their similarity is reported as 0.0")

        similarities = cosine_similarities(query_vector, self.embeddings)

        entries: List[RankingEntry] = []
        best_match: Optional[RankingEntry] = None
        for token, idx in self.vocabulary.items():
            entry = RankingEntry(token=token, index=idx, similarity=float(similarities[idx]))
            entries.append(entry)
            if idx != query_index and (best_match is None or entry.similarity > best_match.similarity):
                best_match = entry

        entries.sort(key=lambda e: e.similarity)

        if best_match is not None:
            logger.info(f"Best match for '{word}': {best_match.token} ({best_match.similarity:.4f})")
        return RankingResult(
            query=word,
            query_index=query_index,
            entries=entries,
            best_match=best_match,
        )

    def most_similar(self, query: str, top_n: int = 10) -> List[RankingEntry]:
        """Get the most similar words to a query, excluding the query itself.

        Args:
            query: Query word
            top_n: Number of entries to return

        Returns:
            Entries in descending order of similarity
        """
        result = self.rank(query)
        others = [e for e in reversed(result.entries) if e.index != result.query_index]
        return others[:top_n]
