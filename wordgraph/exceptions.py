"""Custom exceptions for the embedding pipeline."""

class WordGraphError(Exception):
    """Base exception for pipeline errors."""
    pass

class CorpusError(WordGraphError):
    """Exception for a missing or unreadable corpus file."""
    pass

class UnknownModeError(WordGraphError):
    """Exception for an unrecognized embedding strategy name."""
    pass

class DecompositionError(WordGraphError):
    """Exception for a failed eigendecomposition."""
    pass

class TrainingDivergedError(WordGraphError):
    """Exception for a non-finite cost during gradient training."""
    pass

class PlotError(WordGraphError):
    """Exception for a cost plot that could not be written."""
    pass

class UnknownQueryTokenError(WordGraphError, KeyError):
    """Exception for a token that is not in the vocabulary."""

    def __init__(self, token: str):
        super().__init__(token)
        self.token = token

    def __str__(self) -> str:
        return f"Unknown query token '{self.token}': not in vocabulary"
