"""Configuration settings for the embedding pipeline."""

from dataclasses import dataclass
from typing import Tuple

# Input / output paths
DEFAULT_CORPUS_PATH = "84-0.txt"
DEFAULT_PLOT_PATH = "cost.png"

# Corpus settings
DEFAULT_MAX_TOKENS = 4096  # Only the first 4096 raw tokens are used
BOUNDARY_CHARACTERS = " \t\n\r.?!,;"
DEFAULT_QUERY = "good"

# Strategy settings
GRADIENT_MODE = "gradient"
SPECTRAL_MODES: Tuple[str, ...] = ("gonum", "spectral")
DEFAULT_MODE = GRADIENT_MODE

# Gradient strategy settings
DEFAULT_ITERATIONS = 1024
DEFAULT_LEARNING_RATE = 0.3
DEFAULT_MOMENTUM = 0.3
DEFAULT_CLIP_THRESHOLD = 1.0
DEFAULT_SEED = 1

# Plot settings
PLOT_SIZE_INCHES = 8
PLOT_TITLE = "epochs vs cost"


@dataclass(frozen=True)
class EmbeddingConfig:
    """Settings for a single run, passed explicitly through every stage."""
    mode: str = DEFAULT_MODE
    corpus_path: str = DEFAULT_CORPUS_PATH
    query: str = DEFAULT_QUERY
    max_tokens: int = DEFAULT_MAX_TOKENS
    iterations: int = DEFAULT_ITERATIONS
    learning_rate: float = DEFAULT_LEARNING_RATE
    momentum: float = DEFAULT_MOMENTUM
    clip_threshold: float = DEFAULT_CLIP_THRESHOLD
    seed: int = DEFAULT_SEED
    train_embeddings: bool = False  # Also update X during training
    plot_path: str = DEFAULT_PLOT_PATH
    write_plot: bool = True

    @property
    def is_spectral(self) -> bool:
        return self.mode in SPECTRAL_MODES
