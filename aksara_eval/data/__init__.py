"""
Data Subpackage

This package handles everything related to the word corpus:
    - schema.py: WordRecord (Pydantic) and the Context buffer
    - corpus.py: Loading .jsonl / tab-separated corpus files
    - split.py: Deterministic train/test split

A WordRecord is a word split into aksaras, always starting with the
start symbol "^", plus its corpus frequency:
    WordRecord(aksaras=["^", "ka", "ta"], frequency=3)
"""

from aksara_eval.data.schema import (
    START_SYMBOL,
    BOUNDARY_TOKEN,
    ENTROPY_SEED,
    Context,
    Prediction,
    WordRecord,
    create_word,
)
from aksara_eval.data.corpus import load_corpus
from aksara_eval.data.split import split_train_test, get_test_size
