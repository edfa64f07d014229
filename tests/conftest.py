from __future__ import annotations

import pytest

from wordgraph.config import EmbeddingConfig
from wordgraph.core import build_graph
from wordgraph.graph import CooccurrenceGraph
from wordgraph.preprocessing import TextPreprocessor
from wordgraph.vocabulary import Vocabulary

TOY_TEXT = "the cat sat on the mat the cat ran"


@pytest.fixture()
def toy_tokens() -> list[str]:
    return TextPreprocessor().process_text(TOY_TEXT)


@pytest.fixture()
def toy_vocabulary(toy_tokens) -> Vocabulary:
    return Vocabulary.build(toy_tokens)


@pytest.fixture()
def toy_graph(toy_tokens) -> CooccurrenceGraph:
    _, graph = build_graph(toy_tokens)
    return graph


@pytest.fixture()
def corpus_file(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text(
        "It was a good day. The cat sat on the mat, and the dog sat on the rug!\n"
        "A good dog is a good friend; a good cat is a good friend too.\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture()
def fast_config(tmp_path) -> EmbeddingConfig:
    return EmbeddingConfig(iterations=16, plot_path=str(tmp_path / "cost.png"))
