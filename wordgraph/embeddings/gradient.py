"""Embeddings from momentum gradient descent on a quadratic factorization loss.

The model holds three square matrices over the vocabulary:

- A: an adjacency transform, He-initialized
- X: the embedding table, read back (transposed) as the output
- L: a gate whose only non-zero entries are on its diagonal

and minimizes ``mean((A.X - L.X) ** 2)`` with full-batch gradient descent,
momentum and clipping by global gradient norm.

By default only A and the diagonal of L are trained. X starts at zero and is
never updated, so the objective sits at its minimum from the first iteration
and the resulting embeddings are all zero. Setting ``train_embeddings`` on the
config initializes X like A and adds it to the trained set, which gives
non-trivial vectors.
"""

from typing import Dict, List, Tuple
import logging
import sys

import numpy as np
from tqdm import tqdm

from .base_model import BaseEmbedder
from wordgraph.exceptions import TrainingDivergedError
from wordgraph.graph import CooccurrenceGraph
from wordgraph.models import TrajectoryPoint

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def clip_by_global_norm(
    gradients: Dict[str, np.ndarray],
    threshold: float = 1.0
) -> Tuple[Dict[str, np.ndarray], float]:
    """Scale all gradients uniformly so their combined L2 norm is at most threshold.

    Args:
        gradients: Gradient arrays keyed by parameter name
        threshold: Maximum allowed global norm

    Returns:
        Tuple of (scaled gradients, scaling factor applied)
    """
    norm = float(np.sqrt(sum(np.sum(g * g) for g in gradients.values())))
    scale = 1.0
    if norm > threshold:
        scale = threshold / norm
    return {name: g * scale for name, g in gradients.items()}, scale


class GradientEmbedder(BaseEmbedder):
    """Gradient embedding strategy.

    The co-occurrence graph only determines the problem size; the loss itself
    does not read edge weights.
    """

    name = "gradient"

    def __init__(self, config=None):
        super().__init__(config)
        self.weights: Dict[str, np.ndarray] = {}
        self.velocities: Dict[str, np.ndarray] = {}
        self.trajectory: List[TrajectoryPoint] = []

    @property
    def trainable(self) -> Tuple[str, ...]:
        """Names of the parameters updated by the optimizer."""
        if self.config.train_embeddings:
            return ("A", "X", "L")
        return ("A", "L")

    def _initialize_weights(self, size: int):
        """Initialize A, X and L.

        A is drawn from a Gaussian scaled by sqrt(2 / size). X is zero unless
        embeddings are trained, in which case it is drawn like A. L gets the
        same scaling on its diagonal and zero everywhere else.
        """
        rng = np.random.default_rng(self.config.seed)
        factor = np.sqrt(2.0 / size)

        a = rng.standard_normal((size, size)) * factor
        if self.config.train_embeddings:
            x = rng.standard_normal((size, size)) * factor
        else:
            x = np.zeros((size, size))
        gate = np.diag(rng.standard_normal(size) * factor)

        self.weights = {"A": a, "X": x, "L": gate}
        # L's velocity covers the diagonal only
        self.velocities = {
            "A": np.zeros_like(a),
            "X": np.zeros_like(x),
            "L": np.zeros(size),
        }
        self.trajectory = []

    def _cost_and_gradients(self) -> Tuple[float, Dict[str, np.ndarray]]:
        """Evaluate the loss and its gradients for the trainable parameters.

        Returns:
            Tuple of (cost, gradients). The gradient for L is the vector of
            its diagonal entries.
        """
        a, x, gate = self.weights["A"], self.weights["X"], self.weights["L"]
        residual = a @ x - gate @ x
        cost = float(np.mean(residual ** 2))

        d_residual = 2.0 * residual / residual.size
        d_a = d_residual @ x.T
        gradients = {"A": d_a, "L": -np.diag(d_a).copy()}
        if self.config.train_embeddings:
            gradients["X"] = (a - gate).T @ d_residual
        return cost, gradients

    def _update_weights(self, gradients: Dict[str, np.ndarray]):
        """Apply one momentum step with the (already clipped) gradients."""
        momentum, learning_rate = self.config.momentum, self.config.learning_rate

        for name in self.trainable:
            velocity = momentum * self.velocities[name] - learning_rate * gradients[name]
            self.velocities[name] = velocity
            if name == "L":
                diagonal = np.diag_indices_from(self.weights["L"])
                self.weights["L"][diagonal] += velocity
            else:
                self.weights[name] += velocity

    def train_step(self, iteration: int) -> float:
        """Run a single optimization iteration and record its cost.

        Raises:
            TrainingDivergedError: If the cost is not finite
        """
        cost, gradients = self._cost_and_gradients()
        if not np.isfinite(cost):
            raise TrainingDivergedError(f"Cost became {cost} at iteration {iteration}")

        clipped, _ = clip_by_global_norm(gradients, self.config.clip_threshold)
        self._update_weights(clipped)

        self.trajectory.append(TrajectoryPoint(iteration=iteration, cost=cost))
        logger.debug(f"{iteration} {cost}")
        return cost

    def _compute(self, graph: CooccurrenceGraph) -> np.ndarray:
        size = len(graph)
        self._initialize_weights(size)

        logger.info(f"Training for {self.config.iterations} iterations "
                    f"(trainable: {', '.join(self.trainable)})")
        progress = tqdm(range(self.config.iterations), desc="Training", disable=not sys.stderr.isatty())
        for iteration in progress:
            cost = self.train_step(iteration)
            if iteration % 64 == 0:
                progress.set_postfix(cost=f"{cost:.6f}")

        if self.trajectory:
            logger.info(f"Training completed! Final cost: {self.trajectory[-1].cost:.6f}")
        if not self.config.train_embeddings:
            logger.warning("X is not trained; gradient embeddings are all zero")

        # Column i of X is the embedding of word i
        return self.weights["X"].T.copy()
