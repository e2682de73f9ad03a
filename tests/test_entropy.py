"""
Tests for aksara_eval/evaluation/entropy.py

Run with: pytest tests/test_entropy.py -v
"""

import math

import pytest

from aksara_eval.data.schema import WordRecord
from aksara_eval.errors import InsufficientDataError, ModelContractViolation
from aksara_eval.evaluation.entropy import (
    aksara_probability,
    calculate_entropy,
    calculate_perplexity,
)
from aksara_eval.models.ngram_model import AksaraNgramModel
from tests.conftest import StubModel

UNSEEN = StubModel.UNSEEN_AKSARA


@pytest.fixture
def ka_word():
    return WordRecord(aksaras=["^", "ka"], frequency=1)


class TestAksaraProbability:
    """Direct lookup and unseen fallback."""

    def test_direct_entry(self):
        model = StubModel(default_probabilities={"ka": 0.25, UNSEEN: 0.1})
        assert aksara_probability(model, [""], "ka") == 0.25

    def test_unseen_fallback(self):
        model = StubModel(default_probabilities={UNSEEN: 0.1})
        assert aksara_probability(model, [""], "ka") == 0.1

    def test_missing_both_entries_is_fatal(self):
        model = StubModel(default_probabilities={"ta": 0.5})
        with pytest.raises(ModelContractViolation):
            aksara_probability(model, [""], "ka")

    @pytest.mark.parametrize("p", [0.0, -0.5, 1.5])
    def test_out_of_range_probability_is_fatal(self, p):
        model = StubModel(default_probabilities={"ka": p, UNSEEN: 0.1})
        with pytest.raises(ModelContractViolation):
            aksara_probability(model, [""], "ka")


class TestCalculateEntropy:
    """Bits per aksara over the test words."""

    def test_known_value(self, ka_word):
        model = StubModel(probabilities={
            ("",): {"^": 1.0, UNSEEN: 0.1},
            ("", "^"): {"ka": 0.25, UNSEEN: 0.1},
        })
        # log2(1) + log2(0.25) = -2 over 2 aksaras
        assert calculate_entropy(model, [ka_word]) == pytest.approx(1.0)

    def test_uses_unseen_fallback(self, ka_word):
        model = StubModel(probabilities={
            ("",): {"^": 1.0, UNSEEN: 0.1},
            ("", "^"): {UNSEEN: 0.125},
        })
        assert calculate_entropy(model, [ka_word]) == pytest.approx(1.5)

    def test_context_starts_with_empty_token_and_grows(self, kata_word):
        model = StubModel(default_probabilities={UNSEEN: 0.5})
        calculate_entropy(model, [kata_word, kata_word])
        assert model.queried_contexts == [
            ("",), ("", "^"), ("", "^", "ka"),
            ("",), ("", "^"), ("", "^", "ka"),
        ]

    def test_frequency_does_not_weight_entropy(self):
        model = StubModel(default_probabilities={UNSEEN: 0.5})
        words = [WordRecord(aksaras=["^", "ka"], frequency=100)]
        assert calculate_entropy(model, words) == pytest.approx(1.0)

    def test_contract_violation_aborts(self, ka_word):
        model = StubModel(default_probabilities={})
        with pytest.raises(ModelContractViolation):
            calculate_entropy(model, [ka_word])

    def test_empty_test_set(self):
        model = StubModel(default_probabilities={UNSEEN: 0.5})
        with pytest.raises(InsufficientDataError):
            calculate_entropy(model, [])

    def test_entropy_is_non_negative_for_trained_model(self, small_corpus):
        model = AksaraNgramModel.build(small_corpus[10:])
        assert calculate_entropy(model, small_corpus[:10]) >= 0.0


class TestCalculatePerplexity:
    """perplexity = 2 ** entropy"""

    def test_zero_entropy(self):
        assert calculate_perplexity(0.0) == 1.0

    @pytest.mark.parametrize("entropy", [0.5, 1.0, 3.25])
    def test_power_of_two(self, entropy):
        assert calculate_perplexity(entropy) == pytest.approx(math.pow(2, entropy))
