"""
Tests for aksara_eval/evaluation/coverage.py

Run with: pytest tests/test_coverage.py -v
"""

import pytest

from aksara_eval.data.schema import WordRecord
from aksara_eval.errors import InsufficientDataError
from aksara_eval.evaluation.coverage import calculate_keyboard_accuracy
from aksara_eval.models.ngram_model import AksaraNgramModel
from tests.conftest import StubModel


class TestKeyboardAccuracy:
    """Frequency-weighted coverage of single-aksara predictions."""

    def test_single_word_scenario(self, kata_word):
        """^ ka ta (freq 3): 'ka' predicted, 'ta' not -> 3 / 6."""
        model = StubModel(singles={
            ("@",): [("ka",)],
            ("@", "ka"): [],
        })
        assert calculate_keyboard_accuracy(model, [kata_word]) == pytest.approx(0.5)

    def test_start_symbol_is_skipped(self, kata_word):
        model = StubModel()
        calculate_keyboard_accuracy(model, [kata_word])
        # '^' is neither scored nor added to the context
        assert model.queried_contexts == [("@",), ("@", "ka")]

    def test_weighted_by_frequency(self):
        words = [
            WordRecord(aksaras=["^", "ka"], frequency=3),
            WordRecord(aksaras=["^", "ta"], frequency=1),
        ]
        model = StubModel(singles={("@",): [("ka",)]})
        assert calculate_keyboard_accuracy(model, words) == pytest.approx(0.75)

    def test_prediction_width_is_respected(self, kata_word):
        model = StubModel(singles={("@",): [("na",), ("ka",)]})
        assert calculate_keyboard_accuracy(model, [kata_word], num_predictions=1) == 0.0
        assert calculate_keyboard_accuracy(model, [kata_word], num_predictions=2) == pytest.approx(0.5)

    def test_prediction_compared_by_joined_text(self, kata_word):
        model = StubModel(singles={("@",): [("k", "a")]})
        assert calculate_keyboard_accuracy(model, [kata_word]) == pytest.approx(0.5)

    def test_no_scorable_aksaras(self):
        model = StubModel()
        with pytest.raises(InsufficientDataError):
            calculate_keyboard_accuracy(model, [])
        with pytest.raises(InsufficientDataError):
            calculate_keyboard_accuracy(model, [WordRecord(aksaras=["^"], frequency=5)])

    def test_zero_frequency_words_cannot_be_scored(self):
        model = StubModel()
        with pytest.raises(InsufficientDataError):
            calculate_keyboard_accuracy(model, [WordRecord(aksaras=["^", "ka"], frequency=0)])

    def test_trained_model_in_unit_interval(self, small_corpus):
        model = AksaraNgramModel.build(small_corpus[10:])
        coverage = calculate_keyboard_accuracy(model, small_corpus[:10])
        assert 0.0 <= coverage <= 1.0
        # every test aksara also occurs in training, and the vocabulary is tiny
        assert coverage == pytest.approx(1.0)
