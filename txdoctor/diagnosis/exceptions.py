class DiagnosisError(Exception):
    """Raised when a transaction diagnosis cannot be produced."""


class DiagnosisNetworkError(DiagnosisError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
