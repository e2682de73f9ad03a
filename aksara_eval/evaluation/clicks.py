"""
Click-cost simulation.

Estimates how many taps a user needs to type the test words with the
model's chunk predictions. At each step the longest predicted chunk that
matches the upcoming aksaras is taken for one click; when nothing
matches, the next aksara is typed character by character plus one click
to confirm it.
"""

from dataclasses import dataclass, asdict
from typing import Dict, List, Sequence

from tqdm import tqdm

from aksara_eval.config import DEFAULT_NUM_PREDICTIONS
from aksara_eval.data.schema import BOUNDARY_TOKEN, Context, Prediction, WordRecord
from aksara_eval.errors import InsufficientDataError
from aksara_eval.models.base import PredictiveModel


@dataclass
class ClickCostResult:
    """Raw totals of a click-cost run and the ratios derived from them."""

    total_clicks: int = 0
    total_aksaras: int = 0
    total_characters: int = 0

    @property
    def clicks_per_character(self) -> float:
        if self.total_characters == 0:
            raise InsufficientDataError("Cannot compute clicks per character: no characters counted")
        return self.total_clicks / self.total_characters

    @property
    def clicks_per_aksara(self) -> float:
        if self.total_aksaras == 0:
            raise InsufficientDataError("Cannot compute clicks per aksara: no aksaras counted")
        return self.total_clicks / self.total_aksaras

    def to_dict(self) -> Dict:
        return asdict(self)


def sort_by_length(predictions: List[Prediction]) -> List[Prediction]:
    """Longest chunks first; equal lengths keep the model's ranking."""
    return sorted(predictions, key=len, reverse=True)


def count_word_clicks(
    model: PredictiveModel,
    aksaras: Sequence[str],
    num_predictions: int = DEFAULT_NUM_PREDICTIONS
) -> int:
    """
    Clicks needed to type one word (its aksaras after the start symbol).

    Args:
        model: Model to query
        aksaras: The word's aksaras, the first being the start symbol
        num_predictions: Width of the chunk prediction list

    Returns:
        Number of clicks
    """
    clicks = 0
    context = Context([BOUNDARY_TOKEN])
    i = 1
    while i < len(aksaras):
        found_match = False
        predictions = sort_by_length(model.top_chunk_predictions(context, num_predictions))
        for prediction in predictions:
            # An empty chunk would never advance the cursor
            if not prediction:
                continue
            end = i + len(prediction)
            if end <= len(aksaras) and tuple(aksaras[i:end]) == tuple(prediction):
                context.extend(aksaras[i:end])
                i = end
                clicks += 1
                found_match = True
                break

        # Type the aksara literally: one click per character plus one to confirm
        if not found_match:
            current_aksara = str(aksaras[i])
            context.add(current_aksara)
            i += 1
            clicks += 1 + len(current_aksara)
    return clicks


def calculate_clicks_per_aksara(
    model: PredictiveModel,
    words: Sequence[WordRecord],
    num_predictions: int = DEFAULT_NUM_PREDICTIONS,
    verbose: bool = False
) -> ClickCostResult:
    """
    Total clicks, aksaras and characters needed to type the words.

    Aksara and character totals both discount one unit per word for the
    start symbol, whatever its length in characters.

    Returns:
        ClickCostResult; its clicks_per_character / clicks_per_aksara
        properties give the averages
    """
    result = ClickCostResult()
    for word in tqdm(words, desc="Clicks", unit="word", disable=not verbose):
        result.total_aksaras += len(word.aksaras) - 1
        result.total_characters += len(word.text) - 1
        result.total_clicks += count_word_clicks(model, word.aksaras, num_predictions)

    if verbose:
        print(f"  {result.total_clicks:,} clicks for {result.total_aksaras:,} aksaras "
              f"({result.total_characters:,} characters)")
    return result
