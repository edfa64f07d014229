"""Vocabulary construction over a normalized token stream."""

import logging
from typing import Dict, Iterable, Iterator, List, Tuple

from wordgraph.exceptions import UnknownQueryTokenError
from wordgraph.preprocessing import normalize

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class Vocabulary:
    """Dense index space over unique normalized tokens.

    Indices are assigned in first-occurrence order, so they are contiguous
    in ``[0, len(vocabulary))`` and identical across rebuilds of the same
    token stream.
    """

    def __init__(self):
        self.word_to_idx: Dict[str, int] = {}
        self.idx_to_word: Dict[int, str] = {}

    @classmethod
    def build(cls, tokens: Iterable[str]) -> 'Vocabulary':
        """Build a vocabulary from raw tokens.

        Args:
            tokens: Raw tokens in corpus order

        Returns:
            Vocabulary with one index per unique normalized token
        """
        logger.info("Building vocabulary...")
        vocabulary = cls()
        for token in tokens:
            vocabulary.add(normalize(token))
        logger.info(f"Vocabulary size: {len(vocabulary)} words")
        return vocabulary

    def add(self, word: str) -> int:
        """Add an already-normalized word, returning its index."""
        idx = self.word_to_idx.get(word)
        if idx is None:
            idx = len(self.word_to_idx)
            self.word_to_idx[word] = idx
            self.idx_to_word[idx] = word
        return idx

    def index_of(self, word: str) -> int:
        """Get the index of a normalized word.

        Raises:
            UnknownQueryTokenError: If word is not in the vocabulary
        """
        try:
            return self.word_to_idx[word]
        except KeyError:
            raise UnknownQueryTokenError(word) from None

    def word_at(self, idx: int) -> str:
        return self.idx_to_word[idx]

    def items(self) -> List[Tuple[str, int]]:
        """Return (word, index) pairs ordered by index."""
        return [(self.idx_to_word[idx], idx) for idx in range(len(self))]

    def __contains__(self, word: object) -> bool:
        return word in self.word_to_idx

    def __iter__(self) -> Iterator[str]:
        for idx in range(len(self)):
            yield self.idx_to_word[idx]

    def __len__(self) -> int:
        return len(self.word_to_idx)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vocabulary):
            return NotImplemented
        return self.word_to_idx == other.word_to_idx

    def __repr__(self) -> str:
        return f"Vocabulary(size={len(self)})"
