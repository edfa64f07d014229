"""Text preprocessing module for corpus loading and tokenization."""

import re
import logging
from pathlib import Path
from typing import List, Union

from wordgraph.config import BOUNDARY_CHARACTERS, DEFAULT_MAX_TOKENS
from wordgraph.exceptions import CorpusError

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def normalize(token: str) -> str:
    """Lowercase a token and trim boundary punctuation and whitespace."""
    return token.strip(BOUNDARY_CHARACTERS).lower()


class TextPreprocessor:
    """Handles corpus loading and splitting text into raw tokens."""

    def __init__(self, max_tokens: int = DEFAULT_MAX_TOKENS):
        """Initialize the text preprocessor.

        Args:
            max_tokens: Number of raw tokens kept from the start of the corpus
        """
        self.max_tokens = max_tokens

    def load_corpus(self, file_path: Union[str, Path]) -> str:
        """Load a UTF-8 corpus file into memory.

        Args:
            file_path: Path to the corpus file

        Returns:
            The full text of the file

        Raises:
            CorpusError: If the file is missing or cannot be read
        """
        file_path = Path(file_path)
        logger.info(f"Loading corpus from {file_path}")
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise CorpusError(f"Could not read corpus {file_path}: {e}") from e

    def split_tokens(self, text: str) -> List[str]:
        """Split text on runs of whitespace.

        Leading or trailing whitespace yields an empty token at that end,
        and empty text yields a single empty token.

        Args:
            text: Input text

        Returns:
            List of raw tokens
        """
        return _WHITESPACE.split(text)

    def truncate(self, tokens: List[str]) -> List[str]:
        """Keep only the first ``max_tokens`` raw tokens."""
        if len(tokens) > self.max_tokens:
            logger.info(f"Truncating corpus from {len(tokens)} to {self.max_tokens} tokens")
        return tokens[:self.max_tokens]

    def process_text(self, text: str) -> List[str]:
        """Split and truncate text into the token stream used by the pipeline.

        Args:
            text: Input text

        Returns:
            List of raw (unnormalized) tokens
        """
        return self.truncate(self.split_tokens(text))

    def process_corpus(self, file_path: Union[str, Path]) -> List[str]:
        """Load a corpus file and return its truncated token stream."""
        return self.process_text(self.load_corpus(file_path))
