"""
Error types raised by the evaluation pipeline.

Every failure is fatal for a run: nothing here is retried, and the CLI
turns any of these into a one-line message and a non-zero exit status.
"""


class AksaraEvalError(Exception):
    """Base class for all evaluation errors."""


class ModelContractViolation(AksaraEvalError):
    """The model returned a probability map the evaluators cannot use."""


class DeserializationError(AksaraEvalError):
    """Persisted model bytes could not be turned back into a model."""


class InsufficientDataError(AksaraEvalError):
    """A metric's denominator is zero (e.g. no scorable aksaras in the test set)."""


class ModelIOError(AksaraEvalError, OSError):
    """A model file could not be read or written."""


class CorpusFormatError(AksaraEvalError, ValueError):
    """A line of a corpus file could not be parsed into a WordRecord."""
