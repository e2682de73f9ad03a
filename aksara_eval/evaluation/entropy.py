"""
Entropy and perplexity of a model on held-out words.

Entropy is the average number of bits the model needs per aksara of the
test words, so lower is better. Perplexity is 2 ** entropy: the number of
equally likely choices the model is, on average, "confused" between.
"""

from typing import Sequence

import numpy as np
from tqdm import tqdm

from aksara_eval.data.schema import ENTROPY_SEED, Context, WordRecord
from aksara_eval.errors import InsufficientDataError, ModelContractViolation
from aksara_eval.models.base import PredictiveModel


def aksara_probability(model: PredictiveModel, context: Sequence[str], aksara: str) -> float:
    """
    Probability the model assigns to the aksara after the context.

    Falls back to the model's unseen probability when the aksara has no
    entry of its own.

    Raises:
        ModelContractViolation: If neither entry exists or the value is
            outside (0, 1]
    """
    probs = model.probabilities_at(context)
    p = probs.get(aksara)
    if p is None:
        p = probs.get(model.UNSEEN_AKSARA)
    if p is None:
        raise ModelContractViolation(
            f"Model has no probability for '{aksara}' and no "
            f"'{model.UNSEEN_AKSARA}' fallback at context {list(context)}"
        )
    if not 0.0 < p <= 1.0:
        raise ModelContractViolation(
            f"Probability of '{aksara}' at context {list(context)} must be in (0, 1]. Got: {p}"
        )
    return p


def calculate_entropy(
    model: PredictiveModel,
    words: Sequence[WordRecord],
    verbose: bool = False
) -> float:
    """
    Cross-entropy (bits per aksara) of the model on the words.

    Every aksara of every word is scored, start symbol included. The
    context starts as a single empty-string token and grows by each
    scored aksara until the end of the word.

    Raises:
        ModelContractViolation: If a probability lookup fails
        InsufficientDataError: If the words contain no aksaras at all
    """
    log2_prob = 0.0
    num_aksaras_tested = 0
    for word in tqdm(words, desc="Entropy", unit="word", disable=not verbose):
        context = Context([ENTROPY_SEED])
        word_probs = []
        for aksara in word.aksaras:
            word_probs.append(aksara_probability(model, context, aksara))
            context.add(aksara)
        log2_prob += float(np.sum(np.log2(word_probs)))
        num_aksaras_tested += len(word.aksaras)

    if num_aksaras_tested == 0:
        raise InsufficientDataError("Cannot compute entropy: the test set contains no aksaras")
    return -log2_prob / num_aksaras_tested


def calculate_perplexity(entropy: float) -> float:
    """Perplexity of the model, which is 2 ** entropy."""
    return float(np.power(2.0, entropy))
