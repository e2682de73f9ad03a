"""
Models Subpackage

This package contains the model side of the evaluation:
    - base.py: PredictiveModel, the contract every evaluated model implements
    - ngram_model.py: AksaraNgramModel, a frequency-weighted aksara n-gram
      model used when no other model is supplied

The evaluators only call the three query methods; the harness also uses
build / serialize / deserialize.
"""

from aksara_eval.models.base import PredictiveModel
from aksara_eval.models.ngram_model import AksaraNgramModel
