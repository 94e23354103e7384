from dataclasses import dataclass, field
from typing import Any

from txdoctor.classification.models import ClassificationResult
from txdoctor.normalization.models import NormalizedContext

CONVERSATION_TURNS = 3


@dataclass(frozen=True)
class DiagnosisResult:
    """Narrative diagnosis of one failed transaction."""

    transaction_context: NormalizedContext
    diagnosis: str
    code_fix: str
    risk_assessment: str
    conversation_turns: int = CONVERSATION_TURNS

    @property
    def error_category(self) -> ClassificationResult:
        return self.transaction_context.error_category


@dataclass(frozen=True)
class BatchItem:
    """Outcome for one record of a batch: a diagnosis or an error."""

    record: Any
    result: DiagnosisResult | None = None
    error: str = ""

    @property
    def success(self) -> bool:
        return self.result is not None


@dataclass(frozen=True)
class BatchSummary:
    total: int
    analyzed: int
    failed: int
    category_summary: dict[str, int] = field(default_factory=dict)

    def as_payload(self) -> dict[str, object]:
        return {
            "total": self.total,
            "analyzed": self.analyzed,
            "failed": self.failed,
            "categorySummary": dict(self.category_summary),
        }


@dataclass(frozen=True)
class BatchResult:
    items: list[BatchItem]
    summary: BatchSummary
