"""
Aksara N-gram Model
===================

A small, frequency-weighted aksara n-gram model that implements the
PredictiveModel contract, so the harness can build, save, load and
evaluate a model without any external tooling.

For every position of every training word it counts (weighted by the
word's corpus frequency):
    - the aksara that follows each context suffix of length 0..order-1
    - the chunks of 1..max_chunk_length aksaras that follow those suffixes

Probabilities use Witten-Bell interpolation from the longest context
suffix seen in training down to the unigram level, bottoming out in a
uniform distribution over the vocabulary plus one "unseen" class. The
unseen class is what PredictiveModel.UNSEEN_AKSARA maps to.

Example:
    model = AksaraNgramModel.build(training_words)
    model.probabilities_at(["^", "ka"])
    model.top_chunk_predictions(["^", "ka"], n=10)   # [('ta',), ('ta', 'na'), ...]

    model.serialize("work/aksara_model.pkl")
    same = AksaraNgramModel.deserialize(Path("work/aksara_model.pkl").read_bytes())

Model files are pickles: only load files you created yourself.
"""

import pickle
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from aksara_eval.config import EvaluationConfig
from aksara_eval.data.schema import START_SYMBOL, Prediction, WordRecord
from aksara_eval.errors import DeserializationError
from aksara_eval.models.base import Destination, PredictiveModel


NGRAM_CONFIG = {
    "order": 4,             # contexts of up to 3 previous aksaras
    "max_chunk_length": 3,  # longest chunk offered as one prediction
}

FORMAT_VERSION = 1

ContextKey = Tuple[str, ...]


class AksaraNgramModel(PredictiveModel):
    """
    Frequency-weighted aksara n-gram model with chunk predictions.

    Attributes:
        order: N-gram order (contexts hold up to order - 1 aksaras)
        max_chunk_length: Longest chunk returned by top_chunk_predictions
        counts: context -> {next aksara: weighted count}
        chunk_counts: context -> {chunk: weighted count}
    """

    def __init__(
        self,
        order: int = NGRAM_CONFIG["order"],
        max_chunk_length: int = NGRAM_CONFIG["max_chunk_length"]
    ):
        if order < 1:
            raise ValueError(f"order must be >= 1. Got: {order}")
        if max_chunk_length < 1:
            raise ValueError(f"max_chunk_length must be >= 1. Got: {max_chunk_length}")
        self.order = order
        self.max_chunk_length = max_chunk_length
        self.counts: Dict[ContextKey, Dict[str, int]] = {}
        self.chunk_counts: Dict[ContextKey, Dict[Prediction, int]] = {}
        self._totals: Dict[ContextKey, int] = {}

    # -------------------------------------------------------------------------
    # Training
    # -------------------------------------------------------------------------

    @classmethod
    def build(
        cls,
        training_words: Sequence[WordRecord],
        config: Optional[EvaluationConfig] = None
    ) -> "AksaraNgramModel":
        if config is None:
            model = cls()
        else:
            model = cls(order=config.ngram_order, max_chunk_length=config.max_chunk_length)
        model.train(training_words)
        return model

    def train(self, words: Sequence[WordRecord]) -> None:
        """Add the (frequency-weighted) n-gram and chunk counts of the words."""
        for word in words:
            weight = word.frequency
            if weight == 0:
                continue
            aksaras = word.aksaras
            for i, aksara in enumerate(aksaras):
                contexts = self._training_contexts(aksaras, i)
                for ctx in contexts:
                    ctx_dict = self.counts.setdefault(ctx, {})
                    ctx_dict[aksara] = ctx_dict.get(aksara, 0) + weight

                # The start symbol is never typed, so no chunk begins with it
                if i == 0:
                    continue
                for length in range(1, self.max_chunk_length + 1):
                    if i + length > len(aksaras):
                        break
                    chunk = tuple(aksaras[i:i + length])
                    for ctx in contexts:
                        chunk_dict = self.chunk_counts.setdefault(ctx, {})
                        chunk_dict[chunk] = chunk_dict.get(chunk, 0) + weight

        self._totals = {ctx: sum(dist.values()) for ctx, dist in self.counts.items()}

    def _training_contexts(self, aksaras: Sequence[str], i: int) -> List[ContextKey]:
        max_len = min(self.order - 1, i)
        return [tuple(aksaras[i - k:i]) for k in range(max_len + 1)]

    @property
    def vocabulary(self) -> List[str]:
        return sorted(self.counts.get((), {}))

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def _matching_contexts(self, context: Sequence[str], table: Dict[ContextKey, Any]) -> List[ContextKey]:
        """Context suffixes present in the table, shortest (the empty context) first."""
        chain = []
        for k in range(min(self.order - 1, len(context)) + 1):
            ctx = tuple(context[len(context) - k:])
            if ctx not in table:
                break
            chain.append(ctx)
        return chain

    def probabilities_at(self, context: Sequence[str]) -> Dict[str, float]:
        vocabulary = self.counts.get((), {})
        uniform = 1.0 / (len(vocabulary) + 1)
        probs = {aksara: uniform for aksara in vocabulary}
        unseen = uniform

        # Witten-Bell: P_k(a) = (c_k(a) + T_k * P_{k-1}(a)) / (N_k + T_k)
        for ctx in self._matching_contexts(context, self.counts):
            dist = self.counts[ctx]
            num_types = len(dist)
            denom = self._totals[ctx] + num_types
            for aksara in probs:
                probs[aksara] = (dist.get(aksara, 0) + num_types * probs[aksara]) / denom
            unseen = num_types * unseen / denom

        probs[self.UNSEEN_AKSARA] = unseen
        return probs

    def top_single_aksara_predictions(self, context: Sequence[str], n: int) -> List[Prediction]:
        if n <= 0:
            return []
        probs = self.probabilities_at(context)
        candidates = [a for a in probs if a not in (self.UNSEEN_AKSARA, START_SYMBOL)]
        candidates.sort(key=lambda a: (-probs[a], a))
        return [(aksara,) for aksara in candidates[:n]]

    def top_chunk_predictions(self, context: Sequence[str], n: int) -> List[Prediction]:
        if n <= 0:
            return []
        predictions = []
        seen = set()
        # Longest matching context first, then back off for more chunks
        for ctx in reversed(self._matching_contexts(context, self.chunk_counts)):
            ranked = sorted(self.chunk_counts[ctx].items(), key=lambda x: (-x[1], x[0]))
            for chunk, _ in ranked:
                if chunk in seen:
                    continue
                seen.add(chunk)
                predictions.append(chunk)
                if len(predictions) >= n:
                    return predictions
        return predictions

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def to_bytes(self) -> bytes:
        data = {
            "format_version": FORMAT_VERSION,
            "order": self.order,
            "max_chunk_length": self.max_chunk_length,
            "counts": self.counts,
            "chunk_counts": self.chunk_counts,
        }
        return pickle.dumps(data, protocol=pickle.HIGHEST_PROTOCOL)

    def serialize(self, destination: Destination) -> None:
        payload = self.to_bytes()
        if hasattr(destination, "write"):
            destination.write(payload)
            return
        path = Path(destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            f.write(payload)

    @classmethod
    def deserialize(cls, data: bytes) -> "AksaraNgramModel":
        try:
            payload = pickle.loads(data)
        except Exception as e:
            raise DeserializationError(f"Model bytes could not be unpickled: {e}") from e

        if not isinstance(payload, dict):
            raise DeserializationError(
                f"Model payload must be a dict, got {type(payload).__name__}"
            )
        missing = [k for k in ("format_version", "order", "max_chunk_length", "counts", "chunk_counts")
                   if k not in payload]
        if missing:
            raise DeserializationError(f"Model payload is missing fields {missing}")
        if payload["format_version"] != FORMAT_VERSION:
            raise DeserializationError(
                f"Unsupported model format version {payload['format_version']} "
                f"(expected {FORMAT_VERSION})"
            )

        try:
            model = cls(order=payload["order"], max_chunk_length=payload["max_chunk_length"])
        except (TypeError, ValueError) as e:
            raise DeserializationError(f"Invalid model parameters: {e}") from e
        for key in ("counts", "chunk_counts"):
            table = payload[key]
            if not isinstance(table, dict) or not all(isinstance(d, dict) for d in table.values()):
                raise DeserializationError(f"Model field '{key}' must map contexts to count dicts")

        model.counts = payload["counts"]
        model.chunk_counts = payload["chunk_counts"]
        try:
            model._totals = {ctx: sum(dist.values()) for ctx, dist in model.counts.items()}
        except TypeError as e:
            raise DeserializationError(f"Model counts are not numeric: {e}") from e
        return model
