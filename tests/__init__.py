"""
Test Package

Contains unit tests for all modules.
Run with: pytest tests/ -v

Test files follow the pattern:
    test_<module_name>.py

Example:
    tests/test_split.py      - Tests for aksara_eval/data/split.py
    tests/test_clicks.py     - Tests for aksara_eval/evaluation/clicks.py
    tests/conftest.py        - StubModel and shared corpora
"""
