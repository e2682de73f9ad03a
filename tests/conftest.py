"""
Shared fixtures: a scriptable stub model and small corpora.

StubModel answers queries from dictionaries keyed by the context tuple,
so tests can state exactly what the model "predicts" at each point.
"""

from typing import Dict, List, Optional, Sequence, Tuple

import pytest

from aksara_eval.data.schema import WordRecord
from aksara_eval.errors import DeserializationError
from aksara_eval.models.base import PredictiveModel


class StubModel(PredictiveModel):
    """PredictiveModel whose answers are looked up by exact context."""

    def __init__(
        self,
        probabilities: Optional[Dict[Tuple[str, ...], Dict[str, float]]] = None,
        singles: Optional[Dict[Tuple[str, ...], List[Tuple[str, ...]]]] = None,
        chunks: Optional[Dict[Tuple[str, ...], List[Tuple[str, ...]]]] = None,
        default_probabilities: Optional[Dict[str, float]] = None,
    ):
        self.probabilities = probabilities or {}
        self.singles = singles or {}
        self.chunks = chunks or {}
        self.default_probabilities = default_probabilities
        self.queried_contexts: List[Tuple[str, ...]] = []

    def probabilities_at(self, context):
        key = tuple(context)
        self.queried_contexts.append(key)
        if key in self.probabilities:
            return dict(self.probabilities[key])
        return dict(self.default_probabilities or {})

    def top_single_aksara_predictions(self, context, n):
        key = tuple(context)
        self.queried_contexts.append(key)
        return list(self.singles.get(key, []))[:n]

    def top_chunk_predictions(self, context, n):
        key = tuple(context)
        self.queried_contexts.append(key)
        return list(self.chunks.get(key, []))[:n]

    @classmethod
    def build(cls, training_words: Sequence[WordRecord], config=None):
        return cls(default_probabilities={cls.UNSEEN_AKSARA: 0.5})

    def serialize(self, destination):
        with open(destination, "wb") as f:
            f.write(b"stub")

    @classmethod
    def deserialize(cls, data: bytes):
        if data != b"stub":
            raise DeserializationError("not a stub model")
        return cls(default_probabilities={cls.UNSEEN_AKSARA: 0.5})


@pytest.fixture
def kata_word():
    """The single word ^ ka ta with frequency 3."""
    return WordRecord(aksaras=["^", "ka", "ta"], frequency=3)


@pytest.fixture
def small_corpus():
    """A 47-word corpus built from a handful of repeated words."""
    patterns = [
        (["^", "ka", "ta"], 5),
        (["^", "ka", "ma", "la"], 2),
        (["^", "na", "ma"], 4),
        (["^", "ta", "na", "ka"], 1),
        (["^", "ma", "ta"], 3),
    ]
    return [
        WordRecord(aksaras=patterns[i % len(patterns)][0], frequency=patterns[i % len(patterns)][1])
        for i in range(47)
    ]


def make_numbered_corpus(n: int) -> List[WordRecord]:
    """n distinct words whose frequency equals their position."""
    return [WordRecord(aksaras=["^", f"w{i}"], frequency=i) for i in range(n)]
