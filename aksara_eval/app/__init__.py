"""
App Subpackage

This package contains the user-facing command-line interface:
    - cli.py: argument parsing, config merging and report formatting

Usage:
    aksara-eval data/words.jsonl --test-clicks
    python -m aksara_eval.app.cli data/words.jsonl --json
"""
