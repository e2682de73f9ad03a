"""
Evaluation Subpackage

This package measures how well a model drives a predictive keyboard:
    - entropy.py: Cross-entropy (bits per aksara) and perplexity
    - coverage.py: Frequency-weighted keyboard coverage of single-aksara keys
    - clicks.py: Greedy longest-match click-cost simulation
    - harness.py: Split -> model -> metrics pipeline

Every evaluator is a pure function of (model, test words).
"""

from aksara_eval.evaluation.entropy import calculate_entropy, calculate_perplexity
from aksara_eval.evaluation.coverage import calculate_keyboard_accuracy
from aksara_eval.evaluation.clicks import ClickCostResult, calculate_clicks_per_aksara
from aksara_eval.evaluation.harness import EvaluationHarness, EvaluationReport, run_performance_test
