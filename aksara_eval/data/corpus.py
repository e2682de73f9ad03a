"""
Corpus loading.

Two on-disk formats are understood:

    words.jsonl   {"aksaras": ["ka", "ta"], "frequency": 3}   (one object per line)
    words.tsv     3<TAB>ka ta                                  (any other suffix)

Records are returned in file order; the train/test split relies on it.
"""

import json
from pathlib import Path
from typing import List, Tuple, Union

from pydantic import ValidationError

from aksara_eval.data.schema import WordRecord, create_word
from aksara_eval.errors import CorpusFormatError


def load_corpus(path: Union[str, Path], verbose: bool = False) -> List[WordRecord]:
    """
    Load a word corpus from disk.

    Args:
        path: Path to a .jsonl or tab-separated corpus file
        verbose: Print a one-line summary after loading

    Returns:
        List of WordRecord instances, in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        CorpusFormatError: If any line cannot be parsed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Corpus file not found: {path}")

    parse_line = _parse_jsonl_line if path.suffix == ".jsonl" else _parse_tsv_line

    words = []
    with open(path, "r", encoding="utf-8") as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            if not line:  # Skip empty lines
                continue
            if parse_line is _parse_tsv_line and line.startswith("#"):
                continue
            try:
                aksaras, frequency = parse_line(line)
                words.append(create_word(aksaras, frequency))
            except (ValueError, ValidationError) as e:
                raise CorpusFormatError(f"{path}, line {line_num}: {e}") from e

    if verbose:
        print(f"Loaded {len(words):,} words from {path.name}")
    return words


def _parse_jsonl_line(line: str) -> Tuple[List[str], int]:
    data = json.loads(line)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    missing = [k for k in ("aksaras", "frequency") if k not in data]
    if missing:
        raise ValueError(f"missing fields {missing}")
    aksaras = data["aksaras"]
    if not isinstance(aksaras, list) or not all(isinstance(a, str) for a in aksaras):
        raise ValueError("'aksaras' must be a list of strings")
    return aksaras, data["frequency"]


def _parse_tsv_line(line: str) -> Tuple[List[str], int]:
    parts = line.split("\t", 1)
    if len(parts) != 2:
        raise ValueError("expected '<frequency>\\t<aksara> <aksara> ...'")
    frequency = int(parts[0])
    aksaras = parts[1].split()
    if not aksaras:
        raise ValueError("word has no aksaras")
    return aksaras, frequency
