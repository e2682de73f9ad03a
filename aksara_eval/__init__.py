"""
Aksara Keyboard Model Evaluator - Source Package

Offline evaluation of the language models that drive aksara-based
predictive keyboards: held-out entropy and perplexity, frequency-weighted
keyboard coverage, and the average number of clicks needed to type a
corpus with the model's chunk predictions.

Subpackages:
    - aksara_eval.data: Word records, context buffers, corpus loading, train/test split
    - aksara_eval.models: The model contract and a reference n-gram model
    - aksara_eval.evaluation: Entropy, coverage and click-cost evaluators + harness
    - aksara_eval.app: Command-line interface

Example usage:
    from aksara_eval.config import EvaluationConfig
    from aksara_eval.data.corpus import load_corpus
    from aksara_eval.evaluation.harness import EvaluationHarness

    words = load_corpus("data/words.jsonl")
    report = EvaluationHarness(EvaluationConfig(test_clicks=True)).run(words)
    print(report.coverage, report.perplexity)
"""

__version__ = "0.1.0"
