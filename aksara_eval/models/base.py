"""
Predictive Model Contract
=========================

The evaluators never look inside a model. They only need the handful of
queries a predictive keyboard makes: a next-aksara probability
distribution, a ranked list of single-aksara keys, and a ranked list of
multi-aksara chunks. Anything that answers these (a trie, a hash table,
an automaton, a neural network) can be evaluated.

Example:
    class MyModel(PredictiveModel):
        def probabilities_at(self, context): ...
        def top_single_aksara_predictions(self, context, n): ...
        def top_chunk_predictions(self, context, n): ...
        @classmethod
        def build(cls, training_words, config=None): ...
        def serialize(self, destination): ...
        @classmethod
        def deserialize(cls, data): ...
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Dict, List, Optional, Sequence, Union

from aksara_eval.config import EvaluationConfig
from aksara_eval.data.schema import Prediction, WordRecord


# Destination accepted by serialize(): a file path or an open binary file
Destination = Union[str, Path, BinaryIO]


class PredictiveModel(ABC):
    """
    Abstract base class for every model the harness can evaluate.

    A model is immutable for the duration of an evaluation run: none of
    the query methods may change what later queries return.
    """

    # Reserved key of the probability map used for aksaras the model has
    # no direct entry for.
    UNSEEN_AKSARA = "<unseen>"

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @abstractmethod
    def probabilities_at(self, context: Sequence[str]) -> Dict[str, float]:
        """
        Next-aksara probabilities given the context.

        Returns:
            Mapping from aksara to probability in (0, 1], always including
            UNSEEN_AKSARA as the fallback entry
        """

    @abstractmethod
    def top_single_aksara_predictions(self, context: Sequence[str], n: int) -> List[Prediction]:
        """Up to n single-aksara predictions, most likely first."""

    @abstractmethod
    def top_chunk_predictions(self, context: Sequence[str], n: int) -> List[Prediction]:
        """Up to n predictions of one or more aksaras each, most likely first."""

    # -------------------------------------------------------------------------
    # Construction / persistence
    # -------------------------------------------------------------------------

    @classmethod
    @abstractmethod
    def build(
        cls,
        training_words: Sequence[WordRecord],
        config: Optional[EvaluationConfig] = None
    ) -> "PredictiveModel":
        """Construct a model from training words."""

    @abstractmethod
    def serialize(self, destination: Destination) -> None:
        """
        Write the model to a file path or binary file object.

        Raises:
            OSError: If the destination cannot be written
        """

    @classmethod
    @abstractmethod
    def deserialize(cls, data: bytes) -> "PredictiveModel":
        """
        Reconstruct a model from bytes written by serialize().

        Raises:
            DeserializationError: If the bytes are not a valid model
        """
