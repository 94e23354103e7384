from txdoctor.classification.catalog import DEFAULT_CATALOG, PatternCatalog
from txdoctor.classification.classifier import Classifier, classify
from txdoctor.classification.models import (
    UNKNOWN_RESULT,
    ClassificationResult,
    ErrorPattern,
)

__all__ = [
    "DEFAULT_CATALOG",
    "UNKNOWN_RESULT",
    "ClassificationResult",
    "Classifier",
    "ErrorPattern",
    "PatternCatalog",
    "classify",
]
