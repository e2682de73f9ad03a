"""
Schema definitions for aksara word corpora.

This module defines the Pydantic model that validates one corpus entry
(a word split into aksaras plus its occurrence count) and the small
append-only buffer used as prediction context while a word is evaluated.
"""

from collections.abc import Sequence
from typing import Iterable, Iterator, List, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# RESERVED TOKENS
# =============================================================================

# First aksara of every word. It is never typed by the user.
START_SYMBOL = "^"

# Context seed used by the coverage and click-cost evaluators.
BOUNDARY_TOKEN = "@"

# Context seed used by the entropy evaluator.
ENTROPY_SEED = ""

# A single prediction: one or more aksaras the user can enter with one tap.
Prediction = Tuple[str, ...]


# =============================================================================
# WORD RECORD
# =============================================================================

class WordRecord(BaseModel):
    """
    One word of the corpus.

    Attributes:
        aksaras: The word as a sequence of aksaras, starting with START_SYMBOL
        frequency: How often the word occurs in the source corpus

    Example:
        >>> word = WordRecord(aksaras=["^", "ka", "ta"], frequency=3)
        >>> word.text
        '^kata'
    """

    model_config = ConfigDict(frozen=True)

    aksaras: Tuple[str, ...] = Field(
        ...,
        min_length=1,
        description="Aksaras of the word, the first one being the start symbol",
        examples=[["^", "ka", "ta"]]
    )

    frequency: int = Field(
        ...,
        ge=0,
        description="Occurrence weight of the word in the corpus",
        examples=[1, 42]
    )

    @field_validator('aksaras')
    @classmethod
    def validate_start_symbol(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Ensure the word begins with the reserved start symbol"""
        if v[0] != START_SYMBOL:
            raise ValueError(
                f"Word must start with the start symbol '{START_SYMBOL}'. Got: {list(v)}"
            )
        return v

    @property
    def text(self) -> str:
        """The aksaras joined into a single string (start symbol included)."""
        return "".join(self.aksaras)

    @property
    def num_aksaras(self) -> int:
        return len(self.aksaras)


def create_word(aksaras: Iterable[str], frequency: int = 1) -> WordRecord:
    """
    Create a WordRecord, prepending the start symbol if it is missing.

    Corpus files usually store bare words, so loaders go through here.

    Raises:
        ValidationError: If the frequency is negative
    """
    aksaras = list(aksaras)
    if not aksaras or aksaras[0] != START_SYMBOL:
        aksaras.insert(0, START_SYMBOL)
    return WordRecord(aksaras=tuple(aksaras), frequency=frequency)


# =============================================================================
# CONTEXT
# =============================================================================

class Context(Sequence):
    """
    Append-only aksara history used to query a model.

    A new Context is created for every word an evaluator looks at, so
    nothing leaks between words or between evaluators.

    Example:
        >>> context = Context([BOUNDARY_TOKEN])
        >>> context.add("ka")
        >>> context[-2:]
        ('@', 'ka')
    """

    def __init__(self, seed: Iterable[str] = ()):
        self._tokens: List[str] = list(seed)

    def add(self, aksara: str) -> None:
        self._tokens.append(aksara)

    def extend(self, aksaras: Iterable[str]) -> None:
        self._tokens.extend(aksaras)

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return tuple(self._tokens[index])
        return self._tokens[index]

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __repr__(self) -> str:
        return f"Context({self._tokens!r})"

    @property
    def tokens(self) -> Tuple[str, ...]:
        return tuple(self._tokens)
