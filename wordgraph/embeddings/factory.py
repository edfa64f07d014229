"""Selection of an embedding strategy by name."""

from typing import Optional

from .base_model import BaseEmbedder
from .gradient import GradientEmbedder
from .spectral import SpectralEmbedder
from wordgraph.config import EmbeddingConfig, GRADIENT_MODE, SPECTRAL_MODES
from wordgraph.exceptions import UnknownModeError

def get_embedder(mode: Optional[str] = None, config: Optional[EmbeddingConfig] = None) -> BaseEmbedder:
    """Create the strategy for a mode name.

    Args:
        mode: "gradient", "gonum" or "spectral"; defaults to config.mode
        config: Run configuration

    Returns:
        An embedding strategy

    Raises:
        UnknownModeError: If the mode is not recognized
    """
    config = config or EmbeddingConfig()
    mode = mode or config.mode
    if mode == GRADIENT_MODE:
        return GradientEmbedder(config)
    if mode in SPECTRAL_MODES:
        return SpectralEmbedder(config)
    raise UnknownModeError(
        f"Unknown mode '{mode}'; expected one of: {', '.join((GRADIENT_MODE,) + SPECTRAL_MODES)}"
    )
