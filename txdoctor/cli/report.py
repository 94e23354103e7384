"""Plain-text rendering of diagnoses for the terminal."""

from txdoctor.classification.models import ClassificationResult
from txdoctor.diagnosis.models import BatchSummary, DiagnosisResult

_WIDTH = 70
_HEAVY = "=" * _WIDTH
_LIGHT = "-" * _WIDTH


def render_diagnosis(result: DiagnosisResult) -> str:
    context = result.transaction_context
    lines = [
        _HEAVY,
        "  DeFi Transaction Failure Diagnosis Report",
        _HEAVY,
        "",
        f"Transaction: {context.hash}",
        f"Network: {context.network}",
        f"Error Category: {result.error_category.category}",
    ]
    for title, body in (
        ("DIAGNOSIS", result.diagnosis),
        ("CODE FIX & CHECKLIST", result.code_fix),
        ("RISK ASSESSMENT", result.risk_assessment),
    ):
        lines.extend(["", _LIGHT, title, _LIGHT, body])
    lines.extend([
        "",
        _HEAVY,
        f"Analysis complete. ({result.conversation_turns} AI conversation turns)",
        _HEAVY,
    ])
    return "\n".join(lines)


def render_classification(name: str, result: ClassificationResult) -> str:
    return f"{name}: {result.category} ({result.key})"


def render_batch_summary(summary: BatchSummary) -> str:
    lines = [
        "Batch Analysis Summary:",
        f"  Total: {summary.total}",
        f"  Analyzed: {summary.analyzed}",
        f"  Failed: {summary.failed}",
        "  Category Breakdown:",
    ]
    lines.extend(f"    - {category}: {count}" for category, count in summary.category_summary.items())
    return "\n".join(lines)
