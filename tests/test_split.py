"""
Tests for aksara_eval/data/split.py

Run with: pytest tests/test_split.py -v
"""

import pytest

from aksara_eval.data.split import get_test_size, split_train_test
from tests.conftest import make_numbered_corpus


class TestTestSize:
    """Size of the test set."""

    def test_tenth_of_small_corpus(self):
        assert get_test_size(47) == 4

    def test_capped_by_bound(self):
        assert get_test_size(100000, 5000) == 5000
        assert get_test_size(100, 3) == 3

    def test_tiny_corpus_has_no_test_words(self):
        assert get_test_size(9) == 0


class TestSplitTrainTest:
    """The every-tenth-word split."""

    def test_47_words(self):
        corpus = make_numbered_corpus(47)
        test, train = split_train_test(corpus)
        assert len(test) == 4
        assert len(train) == 43
        assert [w.frequency for w in test] == [0, 10, 20, 30]

    def test_no_loss_no_overlap(self):
        corpus = make_numbered_corpus(123)
        test, train = split_train_test(corpus, max_test_size=7)
        assert len(test) + len(train) == len(corpus)
        assert sorted(w.frequency for w in test + train) == list(range(123))

    def test_order_preserved_and_tail_in_training(self):
        corpus = make_numbered_corpus(123)
        test, train = split_train_test(corpus, max_test_size=7)
        assert [w.frequency for w in test] == [0, 10, 20, 30, 40, 50, 60]
        expected_train = [i for i in range(70) if i % 10 != 0] + list(range(70, 123))
        assert [w.frequency for w in train] == expected_train

    @pytest.mark.parametrize("n", [0, 5, 10, 99])
    def test_sizes_add_up(self, n):
        test, train = split_train_test(make_numbered_corpus(n))
        assert len(test) == n // 10
        assert len(test) + len(train) == n

    def test_zero_bound_puts_everything_in_training(self):
        corpus = make_numbered_corpus(30)
        test, train = split_train_test(corpus, max_test_size=0)
        assert test == []
        assert train == corpus

    def test_negative_bound_is_rejected(self):
        with pytest.raises(ValueError):
            split_train_test(make_numbered_corpus(30), max_test_size=-1)
