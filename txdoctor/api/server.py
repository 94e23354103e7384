"""HTTP API: health, quick classification, AI diagnosis and batch diagnosis."""

from typing import Any

import uvicorn
from fastapi import Body, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from txdoctor.classification.classifier import classify
from txdoctor.config.settings import Settings
from txdoctor.diagnosis.base import BaseDiagnoser
from txdoctor.diagnosis.batch import BatchAnalyzer
from txdoctor.diagnosis.exceptions import DiagnosisError
from txdoctor.diagnosis.factory import DiagnoserFactory
from txdoctor.diagnosis.models import BatchItem, DiagnosisResult
from txdoctor.logging.logger import Log
from txdoctor.normalization.normalizer import format_timestamp, system_clock

SERVICE_NAME = "DeFi Transaction Diagnoser"

DIAGNOSE_EXAMPLE_BODY: dict[str, str] = {
    "hash": "0x...",
    "error": "execution reverted",
    "revertReason": "ERC20: insufficient allowance",
    "gasUsed": "45000",
    "gasLimit": "300000",
}


def create_app(
    settings: Settings | None = None,
    diagnoser: BaseDiagnoser | None = None,
) -> FastAPI:
    settings = settings or Settings()
    diagnoser = diagnoser or DiagnoserFactory.create(settings)
    batch_analyzer = BatchAnalyzer(diagnoser)

    app = FastAPI(title=SERVICE_NAME, version=settings.app_version)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.get("/health")
    def health() -> dict:
        return {
            "status": "ok",
            "service": SERVICE_NAME,
            "version": settings.app_version,
            "timestamp": format_timestamp(system_clock()),
        }

    @app.post("/classify")
    def classify_transaction(payload: Any = Body(default=None)) -> dict:
        return {"category": classify(payload).as_payload(), "txData": payload}

    @app.post("/diagnose")
    def diagnose_transaction(payload: Any = Body(default=None)) -> Any:
        if not isinstance(payload, dict):
            return JSONResponse(
                status_code=400,
                content={
                    "error": "Request body must be a transaction data object",
                    "example": DIAGNOSE_EXAMPLE_BODY,
                },
            )
        Log.info("Diagnose request", tx_hash=payload.get("hash") or "unknown")
        try:
            result = diagnoser.diagnose(payload)
        except DiagnosisError as exc:
            Log.error(f"Diagnosis error: {exc}")
            return JSONResponse(status_code=500, content={"success": False, "error": str(exc)})
        except Exception as exc:
            Log.exception("Unexpected diagnosis failure", tx_hash=payload.get("hash") or "unknown")
            return JSONResponse(status_code=500, content={"success": False, "error": str(exc)})
        return {
            "success": True,
            "hash": payload.get("hash"),
            **diagnosis_payload(result),
            "analysisTimestamp": format_timestamp(system_clock()),
        }

    @app.post("/batch")
    def diagnose_batch(payload: Any = Body(default=None)) -> Any:
        transactions = payload.get("transactions") if isinstance(payload, dict) else None
        if not isinstance(transactions, list) or not transactions:
            return JSONResponse(
                status_code=400,
                content={"error": "Request body must have a 'transactions' array"},
            )
        if len(transactions) > settings.batch_max_size:
            return JSONResponse(
                status_code=400,
                content={"error": f"Max {settings.batch_max_size} transactions per batch"},
            )
        Log.info(f"Batch request with {len(transactions)} transactions")
        batch = batch_analyzer.analyze(transactions)
        return {
            "success": True,
            "summary": batch.summary.as_payload(),
            "results": [batch_item_payload(item) for item in batch.items],
        }

    return app


def diagnosis_payload(result: DiagnosisResult) -> dict[str, object]:
    return {
        "errorCategory": result.error_category.as_payload(),
        "diagnosis": result.diagnosis,
        "codeFix": result.code_fix,
        "riskAssessment": result.risk_assessment,
    }


def batch_item_payload(item: BatchItem) -> dict[str, object]:
    if item.result is None:
        return {"error": item.error, "tx": item.record}
    return {"hash": item.result.transaction_context.hash, **diagnosis_payload(item.result)}


def serve(settings: Settings) -> None:
    """Run the API with uvicorn until interrupted."""
    app = create_app(settings)
    Log.info(f"Serving {SERVICE_NAME} on http://{settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
