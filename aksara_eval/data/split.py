"""
Train/test split for keyboard model evaluation.

The split is systematic rather than random: every tenth word of the
corpus prefix goes to the test set. The same corpus therefore always
produces the same split, which keeps results comparable with models that
were built earlier and saved to disk.
"""

from typing import List, Sequence, Tuple

from aksara_eval.config import DEFAULT_TEST_SIZE
from aksara_eval.data.schema import WordRecord


def get_test_size(num_words: int, max_test_size: int = DEFAULT_TEST_SIZE) -> int:
    """
    Number of test words: the cap, or a tenth of the corpus if that is smaller.

    Raises:
        ValueError: If max_test_size is negative
    """
    if max_test_size < 0:
        raise ValueError(f"max_test_size must be >= 0. Got: {max_test_size}")
    return min(max_test_size, num_words // 10)


def split_train_test(
    source_words: Sequence[WordRecord],
    max_test_size: int = DEFAULT_TEST_SIZE
) -> Tuple[List[WordRecord], List[WordRecord]]:
    """
    Split the corpus into test and training words.

    Within the first test_size * 10 words, words at positions divisible
    by 10 go to the test set and all others to training. Words beyond
    that prefix are appended to training. Relative order is preserved in
    both subsets.

    Example:
        47 words, cap 5000 -> 4 test words (positions 0, 10, 20, 30),
        43 training words.

    Args:
        source_words: The full corpus, in order
        max_test_size: Upper bound on the number of test words

    Returns:
        (test_words, training_words)
    """
    test_size = get_test_size(len(source_words), max_test_size)
    prefix = test_size * 10

    test_words = []
    training_words = []
    for i in range(prefix):
        if i % 10 == 0:
            test_words.append(source_words[i])
        else:
            training_words.append(source_words[i])

    training_words.extend(source_words[prefix:])
    return test_words, training_words
