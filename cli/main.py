import logging
import sys
from pathlib import Path
import typer
from wordgraph.config import (
    DEFAULT_CORPUS_PATH,
    DEFAULT_ITERATIONS,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODE,
    DEFAULT_PLOT_PATH,
    DEFAULT_QUERY,
    DEFAULT_SEED,
    GRADIENT_MODE,
    SPECTRAL_MODES,
    EmbeddingConfig,
)
from wordgraph.core import rank_query, run_pipeline
from wordgraph.exceptions import UnknownQueryTokenError, WordGraphError

app = typer.Typer()

@app.command()
def main(
    ctx: typer.Context,
    mode: str = typer.Option(DEFAULT_MODE, help="Embedding strategy: gradient, gonum or spectral"),
    corpus: Path = typer.Option(DEFAULT_CORPUS_PATH, help="UTF-8 text file to embed"),
    query: str = typer.Option(DEFAULT_QUERY, help="Word to rank the vocabulary against"),
    iterations: int = typer.Option(DEFAULT_ITERATIONS, min=0, help="Training iterations for the gradient strategy"),
    seed: int = typer.Option(DEFAULT_SEED, help="Random seed for weight initialization"),
    max_tokens: int = typer.Option(DEFAULT_MAX_TOKENS, min=0, help="Number of raw tokens read from the corpus"),
    plot_path: Path = typer.Option(DEFAULT_PLOT_PATH, help="Where to save the cost plot"),
    train_embeddings: bool = typer.Option(False, help="Also train X in the gradient strategy"),
    verbose: bool = typer.Option(False, help="Enable debug logging"),
):
    """Compute co-occurrence word embeddings and rank words by similarity."""
    if mode != GRADIENT_MODE and mode not in SPECTRAL_MODES:
        typer.echo(f"Unknown mode: {mode}\n")
        typer.echo(ctx.get_help())
        raise typer.Exit(code=2)

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = EmbeddingConfig(
        mode=mode,
        corpus_path=str(corpus),
        query=query,
        max_tokens=max_tokens,
        iterations=iterations,
        seed=seed,
        train_embeddings=train_embeddings,
        plot_path=str(plot_path),
    )

    try:
        result = run_pipeline(config, rank=False)
        print(len(result.vocabulary))
        print("graph built")
        if config.is_spectral:
            print("eigenvectors computed")
        else:
            for point in result.trajectory:
                print(point.iteration, point.cost)

        ranking = rank_query(result, config.query)
        if ranking.best_match is not None:
            print(ranking.best_match.token, ranking.best_match.index)

        for entry in ranking.entries:
            print(entry.token, entry.similarity)

    except UnknownQueryTokenError as e:
        print(f"\nError: {e}")
        sys.exit(1)
    except WordGraphError as e:
        print(f"\nFatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    app()
