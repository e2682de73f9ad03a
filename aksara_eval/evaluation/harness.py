"""
Evaluation Harness
==================

Runs the whole measurement pipeline on a word corpus:

    corpus -> split -> {test, train}
                          train -> model (loaded from disk, or built + saved)
           model + test -> coverage, entropy, perplexity [, clicks]

The pipeline is strictly linear with one optional step (the click-cost
simulation). Any error aborts the run.

Example:
    from aksara_eval.config import EvaluationConfig
    from aksara_eval.data.corpus import load_corpus
    from aksara_eval.evaluation.harness import EvaluationHarness

    harness = EvaluationHarness(EvaluationConfig(test_clicks=True, verbose=True))
    report = harness.run(load_corpus("data/words.jsonl"))
    print(report.to_dict())
"""

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Type

from aksara_eval.config import EvaluationConfig, DEFAULT_CONFIG
from aksara_eval.data.schema import WordRecord
from aksara_eval.data.split import split_train_test
from aksara_eval.errors import ModelIOError
from aksara_eval.evaluation.clicks import calculate_clicks_per_aksara
from aksara_eval.evaluation.coverage import calculate_keyboard_accuracy
from aksara_eval.evaluation.entropy import calculate_entropy, calculate_perplexity
from aksara_eval.models.base import PredictiveModel
from aksara_eval.models.ngram_model import AksaraNgramModel


@dataclass
class EvaluationReport:
    """Metrics of one evaluation run."""

    coverage: float
    entropy: float
    perplexity: float
    clicks_per_character: Optional[float] = None
    clicks_per_aksara: Optional[float] = None
    num_train_words: int = 0
    num_test_words: int = 0
    model_source: str = "built"

    def to_dict(self) -> Dict:
        return asdict(self)


class EvaluationHarness:
    """
    Obtains a model and runs the evaluators against the test split.

    Args:
        config: Run settings (prediction width, test-set cap, paths, ...)
        model_cls: PredictiveModel subclass used to build or load the model
    """

    def __init__(
        self,
        config: EvaluationConfig = DEFAULT_CONFIG,
        model_cls: Type[PredictiveModel] = AksaraNgramModel
    ):
        self.config = config
        self.model_cls = model_cls
        self.model_source: Optional[str] = None

    def split(self, source_words: Sequence[WordRecord]) -> Tuple[List[WordRecord], List[WordRecord]]:
        """(test_words, training_words) for the configured test-set cap."""
        return split_train_test(source_words, self.config.test_size)

    def get_model(self, training_words: Sequence[WordRecord]) -> PredictiveModel:
        """
        Load the model from config.model_file, or build it and save it to config.output_path.

        Raises:
            ModelIOError: If the model file cannot be read or written
            DeserializationError: If the model file is not a valid model
        """
        if self.config.model_file is not None:
            path = Path(self.config.model_file)
            if self.config.verbose:
                print(f"Loading model from: {path}")
            try:
                data = path.read_bytes()
            except OSError as e:
                raise ModelIOError(f"Cannot read model file {path}: {e}") from e
            model = self.model_cls.deserialize(data)
            self.model_source = "loaded"
            return model

        if self.config.verbose:
            print(f"Building model from {len(training_words):,} training words")
        model = self.model_cls.build(training_words, self.config)
        output = Path(self.config.output_path)
        try:
            model.serialize(output)
        except OSError as e:
            raise ModelIOError(f"Cannot write model file {output}: {e}") from e
        if self.config.verbose:
            print(f"  Saved model to {output}")
        self.model_source = "built"
        return model

    def evaluate(
        self,
        model: PredictiveModel,
        test_words: Sequence[WordRecord],
        num_train_words: int = 0,
        model_source: str = "given"
    ) -> EvaluationReport:
        """
        Run the evaluators on an already obtained model.

        Args:
            model: The model under test
            test_words: Held-out words to measure on
            num_train_words: Training set size, copied into the report
            model_source: How the model was obtained ("built", "loaded", "given")
        """
        verbose = self.config.verbose

        coverage = calculate_keyboard_accuracy(
            model, test_words, self.config.coverage_predictions, verbose=verbose
        )
        if verbose:
            print(f"Probabilistic model keyboard coverage: {coverage}")

        entropy = calculate_entropy(model, test_words, verbose=verbose)
        perplexity = calculate_perplexity(entropy)
        if verbose:
            print(f"Entropy on test data: {entropy}")
            print(f"Perplexity on test data: {perplexity}")

        report = EvaluationReport(
            coverage=coverage,
            entropy=entropy,
            perplexity=perplexity,
            num_train_words=num_train_words,
            num_test_words=len(test_words),
            model_source=model_source,
        )

        if self.config.test_clicks:
            clicks = calculate_clicks_per_aksara(
                model, test_words, self.config.num_predictions, verbose=verbose
            )
            report.clicks_per_character = clicks.clicks_per_character
            report.clicks_per_aksara = clicks.clicks_per_aksara
            if verbose:
                print(f"{report.clicks_per_character} clicks per character")
                print(f"{report.clicks_per_aksara} clicks per aksara")

        return report

    def run(self, source_words: Sequence[WordRecord]) -> EvaluationReport:
        """Split the corpus, obtain the model and evaluate it."""
        if self.config.verbose:
            print("=" * 60)
            print("KEYBOARD MODEL PERFORMANCE TEST")
            print("=" * 60)

        test_words, training_words = self.split(source_words)
        if self.config.verbose:
            print(f"Test words: {len(test_words):,} | Training words: {len(training_words):,}")

        model = self.get_model(training_words)
        report = self.evaluate(
            model,
            test_words,
            num_train_words=len(training_words),
            model_source=self.model_source,
        )

        if self.config.verbose:
            print("=" * 60)
        return report


def run_performance_test(
    source_words: Sequence[WordRecord],
    config: EvaluationConfig = DEFAULT_CONFIG,
    model_cls: Type[PredictiveModel] = AksaraNgramModel
) -> EvaluationReport:
    """Convenience wrapper: EvaluationHarness(config, model_cls).run(source_words)."""
    return EvaluationHarness(config, model_cls).run(source_words)
