from abc import ABC, abstractmethod

from txdoctor.diagnosis.models import DiagnosisResult


class BaseDiagnoser(ABC):
    """Contract for transaction failure diagnosers."""

    @abstractmethod
    def diagnose(self, record: object) -> DiagnosisResult:
        """Explain why a transaction failed and how to fix it.

        Args:
            record: Raw failure record (request body, demo dict, or
                TransactionFailureRecord).

        Raises:
            DiagnosisError: on any failure.
        """
