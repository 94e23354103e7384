from collections.abc import Iterable

from txdoctor.diagnosis.base import BaseDiagnoser
from txdoctor.diagnosis.models import BatchItem, BatchResult, BatchSummary
from txdoctor.logging.logger import Log


class BatchAnalyzer:
    """Diagnoses records one after another; a failing record never stops the batch."""

    def __init__(self, diagnoser: BaseDiagnoser) -> None:
        self._diagnoser = diagnoser

    def analyze(self, records: Iterable[object]) -> BatchResult:
        records = list(records)
        Log.info(f"Batch analyzing {len(records)} transactions")
        items: list[BatchItem] = []
        for index, record in enumerate(records, start=1):
            Log.info(f"[{index}/{len(records)}] Processing: {_hash_of(record)}")
            try:
                result = self._diagnoser.diagnose(record)
            except Exception as exc:
                Log.error(f"Failed to analyze transaction {_hash_of(record)}: {exc}")
                items.append(BatchItem(record=record, error=str(exc)))
                continue
            items.append(BatchItem(record=record, result=result))
        return BatchResult(items=items, summary=summarize(items))


def summarize(items: list[BatchItem]) -> BatchSummary:
    """Count outcomes and the categories of successful diagnoses, in first-seen order."""
    categories: dict[str, int] = {}
    analyzed = 0
    for item in items:
        if item.result is None:
            continue
        analyzed += 1
        category = item.result.error_category.category
        categories[category] = categories.get(category, 0) + 1
    return BatchSummary(
        total=len(items),
        analyzed=analyzed,
        failed=len(items) - analyzed,
        category_summary=categories,
    )


def _hash_of(record: object) -> str:
    if isinstance(record, dict) and isinstance(record.get("hash"), str) and record["hash"]:
        return record["hash"]
    return "Unknown"
