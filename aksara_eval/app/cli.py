"""
Command Line Interface for the Aksara Keyboard Model Evaluator
==============================================================

Usage Examples:
    # Build a model from the training split, save it, and evaluate it
    python -m aksara_eval.app.cli data/words.jsonl --output work/aksara_model.pkl

    # Evaluate a saved model, including the click-cost simulation
    python -m aksara_eval.app.cli data/words.jsonl --model-file work/aksara_model.pkl --test-clicks

    # Settings from a YAML file, JSON output for scripting
    python -m aksara_eval.app.cli data/words.tsv --config eval.yaml --json

    # Show help
    python -m aksara_eval.app.cli --help
"""

import argparse
import json
import sys
from typing import List, Optional

from aksara_eval.config import EvaluationConfig, DEFAULT_CONFIG
from aksara_eval.data.corpus import load_corpus
from aksara_eval.errors import AksaraEvalError
from aksara_eval.evaluation.harness import EvaluationHarness, EvaluationReport


# =============================================================================
# ARGUMENT PARSER SETUP
# =============================================================================

def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the command-line argument parser.

    Options left unset fall back to the --config file, then to the defaults.

    Returns:
        Configured ArgumentParser object
    """
    parser = argparse.ArgumentParser(
        prog="aksara-eval",
        description="""
Measure how well a language model drives an aksara predictive keyboard:
keyboard coverage, entropy, perplexity and (optionally) clicks per aksara.

The corpus is split deterministically: every tenth word goes to the test
set (at most --test-size words), everything else is used for training.
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "corpus",
        type=str,
        help="Word corpus (.jsonl, or '<frequency>\\t<aksaras>' lines)"
    )

    # ─────────────────────────────────────────────────────────────────────────
    # Model source
    # ─────────────────────────────────────────────────────────────────────────
    parser.add_argument(
        "--model-file",
        type=str,
        default=None,
        help="Precomputed model to evaluate (default: build one from the training words)"
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help=f"Where to save a newly built model (default: {DEFAULT_CONFIG.output_path})"
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML file with evaluation settings"
    )

    # ─────────────────────────────────────────────────────────────────────────
    # Evaluation options
    # ─────────────────────────────────────────────────────────────────────────
    parser.add_argument(
        "--test-clicks",
        action="store_true",
        default=None,
        help="Also measure clicks per character / per aksara"
    )

    parser.add_argument(
        "--num-predictions",
        type=int,
        default=None,
        help=f"Prediction list width (default: {DEFAULT_CONFIG.num_predictions})"
    )

    parser.add_argument(
        "--test-size",
        type=int,
        default=None,
        help=f"Maximum number of test words (default: {DEFAULT_CONFIG.test_size})"
    )

    # ─────────────────────────────────────────────────────────────────────────
    # Output options
    # ─────────────────────────────────────────────────────────────────────────
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output the report as JSON"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=None,
        help="Show progress information"
    )

    return parser


def build_config(args: argparse.Namespace) -> EvaluationConfig:
    """Merge defaults, the optional YAML file and command-line flags."""
    config = EvaluationConfig.from_yaml(args.config) if args.config else DEFAULT_CONFIG
    return config.with_overrides(
        model_file=args.model_file,
        output_path=args.output,
        test_clicks=args.test_clicks,
        num_predictions=args.num_predictions,
        test_size=args.test_size,
        verbose=args.verbose,
    )


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

def format_report_pretty(report: EvaluationReport) -> str:
    """Format the report as labeled lines, one metric per line."""
    lines = [
        "=" * 60,
        "KEYBOARD MODEL EVALUATION",
        "=" * 60,
        f"Model: {report.model_source} | Training words: {report.num_train_words:,} "
        f"| Test words: {report.num_test_words:,}",
        "",
        f"Probabilistic model keyboard coverage: {report.coverage}",
        f"Entropy on test data: {report.entropy}",
        f"Perplexity on test data: {report.perplexity}",
    ]
    if report.clicks_per_character is not None:
        lines.append(f"{report.clicks_per_character} clicks per character")
    if report.clicks_per_aksara is not None:
        lines.append(f"{report.clicks_per_aksara} clicks per aksara")
    lines.append("=" * 60)
    return "\n".join(lines)


def format_report_json(report: EvaluationReport) -> str:
    return json.dumps(report.to_dict(), indent=2)


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        Exit status (0 on success); also used as the process exit code
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        config = build_config(args)
        words = load_corpus(args.corpus, verbose=config.verbose)
        report = EvaluationHarness(config).run(words)
    except (AksaraEvalError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(format_report_json(report))
    else:
        print(format_report_pretty(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
