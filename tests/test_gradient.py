import numpy as np
import pytest

from wordgraph.config import EmbeddingConfig
from wordgraph.embeddings import GradientEmbedder, clip_by_global_norm
from wordgraph.exceptions import TrainingDivergedError


def _global_norm(gradients):
    return np.sqrt(sum(np.sum(g * g) for g in gradients.values()))


def _moving_average(values, window=10):
    return np.convolve(values, np.ones(window) / window, mode="valid")


def test_clip_scales_large_gradients_to_threshold():
    gradients = {"A": np.full((3, 3), 2.0), "L": np.array([5.0, -4.0, 1.0])}

    clipped, scale = clip_by_global_norm(gradients, threshold=1.0)

    assert _global_norm(gradients) > 1.0
    assert _global_norm(clipped) <= 1.0 + 1e-9
    assert scale == pytest.approx(1.0 / _global_norm(gradients))
    # direction is preserved
    assert np.allclose(clipped["A"] / scale, gradients["A"])


def test_clip_leaves_small_gradients_unchanged():
    gradients = {"A": np.full((2, 2), 0.1), "L": np.array([0.2, 0.1])}

    clipped, scale = clip_by_global_norm(gradients, threshold=1.0)

    assert scale == 1.0
    for name in gradients:
        assert np.array_equal(clipped[name], gradients[name])


def test_default_mode_leaves_x_untouched_and_embeddings_zero(toy_graph):
    embedder = GradientEmbedder(EmbeddingConfig(iterations=50))

    embeddings = embedder.compute_embeddings(toy_graph)

    assert embedder.trainable == ("A", "L")
    assert embeddings.shape == (6, 6)
    assert np.all(embeddings == 0)
    assert all(point.cost == 0 for point in embedder.trajectory)


@pytest.mark.parametrize("train_embeddings", [False, True])
def test_l_stays_diagonal(toy_graph, train_embeddings):
    embedder = GradientEmbedder(EmbeddingConfig(iterations=200, train_embeddings=train_embeddings))
    embedder.compute_embeddings(toy_graph)

    gate = embedder.weights["L"]
    off_diagonal = gate[~np.eye(len(gate), dtype=bool)]
    assert np.all(off_diagonal == 0.0)
    assert np.any(np.diag(gate) != 0.0)


def test_initialization_scaling_and_seed(toy_graph):
    first = GradientEmbedder(EmbeddingConfig(iterations=0))
    second = GradientEmbedder(EmbeddingConfig(iterations=0))
    first.compute_embeddings(toy_graph)
    second.compute_embeddings(toy_graph)

    assert np.array_equal(first.weights["A"], second.weights["A"])
    assert np.array_equal(first.weights["L"], second.weights["L"])
    assert np.all(first.weights["X"] == 0)


def test_full_schedule_cost_trend_is_non_increasing(toy_graph):
    embedder = GradientEmbedder(EmbeddingConfig())
    embedder.compute_embeddings(toy_graph)

    costs = np.array([p.cost for p in embedder.trajectory])
    assert len(costs) == 1024
    assert [p.iteration for p in embedder.trajectory] == list(range(1024))
    assert np.all(np.diff(_moving_average(costs[-100:])) <= 1e-12)


def test_trained_embeddings_reduce_cost(toy_graph):
    embedder = GradientEmbedder(EmbeddingConfig(train_embeddings=True))
    embeddings = embedder.compute_embeddings(toy_graph)

    costs = np.array([p.cost for p in embedder.trajectory])
    assert embedder.trainable == ("A", "X", "L")
    assert costs[0] > 0
    assert costs[-1] < costs[0]
    assert np.all(np.diff(_moving_average(costs[-100:])) <= 1e-12)
    assert np.all(np.isfinite(embeddings))
    assert np.array_equal(embeddings, embedder.weights["X"].T)


def test_analytic_gradient_matches_finite_difference(toy_graph):
    embedder = GradientEmbedder(EmbeddingConfig(iterations=0, train_embeddings=True))
    embedder.compute_embeddings(toy_graph)
    _, gradients = embedder._cost_and_gradients()

    eps = 1e-6
    for name, (i, j) in [("A", (0, 3)), ("X", (2, 1)), ("L", (4, 4))]:
        weight = embedder.weights[name]
        original = weight[i, j]
        weight[i, j] = original + eps
        plus, _ = embedder._cost_and_gradients()
        weight[i, j] = original - eps
        minus, _ = embedder._cost_and_gradients()
        weight[i, j] = original

        analytic = gradients[name][i] if name == "L" else gradients[name][i, j]
        assert analytic == pytest.approx((plus - minus) / (2 * eps), rel=1e-4, abs=1e-10)


def test_non_finite_cost_raises(toy_graph):
    embedder = GradientEmbedder(EmbeddingConfig(iterations=0, train_embeddings=True))
    embedder.compute_embeddings(toy_graph)
    embedder.weights["A"][0, 0] = np.inf

    with pytest.raises(TrainingDivergedError):
        embedder.train_step(0)


def _expected_step(gradients, threshold, learning_rate, momentum, velocities):
    norm = _global_norm(gradients)
    scale = threshold / norm if norm > threshold else 1.0
    return {
        name: momentum * velocities[name] - learning_rate * g * scale
        for name, g in gradients.items()
    }


def test_train_step_applies_clipped_momentum_updates(toy_graph):
    config = EmbeddingConfig(iterations=0, train_embeddings=True, clip_threshold=1e-3)
    embedder = GradientEmbedder(config)
    embedder.compute_embeddings(toy_graph)
    diagonal = np.diag_indices(6)

    previous = {name: np.zeros_like(v) for name, v in embedder.velocities.items()}
    for iteration in range(2):
        before = {name: w.copy() for name, w in embedder.weights.items()}
        _, gradients = embedder._cost_and_gradients()
        assert _global_norm(gradients) > config.clip_threshold

        expected = _expected_step(gradients, config.clip_threshold, 0.3, 0.3, previous)
        embedder.train_step(iteration)

        assert np.allclose(embedder.weights["A"] - before["A"], expected["A"], rtol=1e-9, atol=1e-13)
        assert np.allclose(embedder.weights["X"] - before["X"], expected["X"], rtol=1e-9, atol=1e-13)
        assert np.allclose(
            embedder.weights["L"][diagonal] - before["L"][diagonal], expected["L"], rtol=1e-9, atol=1e-13
        )
        off_diagonal = ~np.eye(6, dtype=bool)
        assert np.all(embedder.weights["L"][off_diagonal] == 0.0)
        assert np.allclose(embedder.velocities["A"], expected["A"], rtol=1e-9, atol=1e-13)

        if iteration == 1:
            # the second step carries 0.3 of the first step's velocity
            without_momentum = _expected_step(gradients, config.clip_threshold, 0.3, 0.0, previous)
            assert not np.allclose(embedder.weights["A"] - before["A"], without_momentum["A"])
        previous = expected


def test_train_step_leaves_small_gradients_unscaled(toy_graph):
    embedder = GradientEmbedder(EmbeddingConfig(iterations=0, train_embeddings=True, clip_threshold=1e6))
    embedder.compute_embeddings(toy_graph)
    before = embedder.weights["A"].copy()
    _, gradients = embedder._cost_and_gradients()

    embedder.train_step(0)

    assert np.allclose(embedder.weights["A"] - before, -0.3 * gradients["A"], rtol=1e-9, atol=1e-13)
