"""
Keyboard coverage of single-aksara predictions.

Coverage answers: how likely is it that the aksara the user wants to type
next is one of the keys the keyboard is showing? Each test aksara counts
with the frequency of its word, so common words weigh more.
"""

from typing import Sequence

from tqdm import tqdm

from aksara_eval.config import DEFAULT_NUM_PREDICTIONS, COVERAGE_PREDICTION_OFFSET
from aksara_eval.data.schema import BOUNDARY_TOKEN, START_SYMBOL, Context, WordRecord
from aksara_eval.errors import InsufficientDataError
from aksara_eval.models.base import PredictiveModel


def calculate_keyboard_accuracy(
    model: PredictiveModel,
    words: Sequence[WordRecord],
    num_predictions: int = DEFAULT_NUM_PREDICTIONS - COVERAGE_PREDICTION_OFFSET,
    verbose: bool = False
) -> float:
    """
    Frequency-weighted share of test aksaras found in the model's top predictions.

    The context of each word starts as the boundary token. Start symbols
    are skipped entirely: they are neither scored nor added to the context.

    Args:
        model: Model to query
        words: Test words
        num_predictions: How many single-aksara predictions the keyboard shows
        verbose: Show a progress bar

    Returns:
        Coverage in [0, 1]

    Raises:
        InsufficientDataError: If no aksara can be scored (the total
            weight of scorable aksaras is zero)
    """
    model_score = 0
    max_score = 0
    for word in tqdm(words, desc="Coverage", unit="word", disable=not verbose):
        context = Context([BOUNDARY_TOKEN])
        for aksara in word.aksaras:
            if aksara == START_SYMBOL:
                continue
            max_score += word.frequency
            predictions = model.top_single_aksara_predictions(context, num_predictions)
            if any("".join(prediction) == aksara for prediction in predictions):
                model_score += word.frequency
            context.add(aksara)

    if max_score == 0:
        raise InsufficientDataError(
            "Cannot compute keyboard coverage: the test set has no scorable aksaras "
            "(or all of them have frequency 0)"
        )
    return model_score / max_score
