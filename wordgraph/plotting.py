"""Plot of the gradient strategy's cost trajectory."""

import logging
from pathlib import Path
from typing import Sequence, Union

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from wordgraph.config import PLOT_SIZE_INCHES, PLOT_TITLE
from wordgraph.exceptions import PlotError
from wordgraph.models import TrajectoryPoint

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def plot_cost_curve(trajectory: Sequence[TrajectoryPoint], path: Union[str, Path]) -> Path:
    """Save an iteration-vs-cost scatter plot.

    Args:
        trajectory: Recorded training points
        path: Output image path

    Returns:
        The path written

    Raises:
        PlotError: If the image cannot be written
    """
    path = Path(path)
    fig, ax = plt.subplots(figsize=(PLOT_SIZE_INCHES, PLOT_SIZE_INCHES))
    try:
        ax.scatter(
            [p.iteration for p in trajectory],
            [p.cost for p in trajectory],
            s=4,
            marker="o",
        )
        ax.set_title(PLOT_TITLE)
        ax.set_xlabel("epochs")
        ax.set_ylabel("cost")
        fig.savefig(path)
    except (OSError, ValueError) as e:
        raise PlotError(f"Could not write plot to {path}: {e}") from e
    finally:
        plt.close(fig)

    logger.info(f"Saved cost plot to {path}")
    return path
