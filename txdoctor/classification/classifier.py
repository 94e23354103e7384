"""Substring classifier for failed transaction error texts."""

from txdoctor.classification.catalog import DEFAULT_CATALOG, PatternCatalog
from txdoctor.classification.models import UNKNOWN_RESULT, ClassificationResult
from txdoctor.normalization.record import TransactionFailureRecord, build_record


class Classifier:
    """Maps a failure record to the first matching catalog category."""

    def __init__(self, catalog: PatternCatalog = DEFAULT_CATALOG) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> PatternCatalog:
        return self._catalog

    def classify(self, record: object) -> ClassificationResult:
        """Classify a raw record, mapping or TransactionFailureRecord.

        Never raises: anything that is not a string in the error fields is
        searched as an empty string.
        """
        search_text = self.search_text(record)
        for entry in self._catalog:
            if any(pattern in search_text for pattern in entry.patterns):
                return ClassificationResult.from_pattern(entry)
        return UNKNOWN_RESULT

    @staticmethod
    def search_text(record: object) -> str:
        """Join error, revert reason and error message into one lowercase string."""
        if not isinstance(record, TransactionFailureRecord):
            record = build_record(record)
        parts = (record.error, record.revert_reason, record.error_message)
        return " ".join(p if isinstance(p, str) else "" for p in parts).lower()


_default_classifier = Classifier()


def classify(record: object) -> ClassificationResult:
    """Classify with the default pattern catalog."""
    return _default_classifier.classify(record)
