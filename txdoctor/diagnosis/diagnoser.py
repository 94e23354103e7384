"""Three-turn AI diagnosis of failed transactions."""

import json
from pathlib import Path

from txdoctor.diagnosis.base import BaseDiagnoser
from txdoctor.diagnosis.client_base import BaseDiagnosisClient
from txdoctor.diagnosis.exceptions import DiagnosisError
from txdoctor.diagnosis.models import DiagnosisResult
from txdoctor.diagnosis.prompt_loader import (
    CODE_FIX_PROMPT,
    DIAGNOSIS_PROMPT,
    RISK_ASSESSMENT_PROMPT,
    SYSTEM_PROMPT,
    load_prompt,
)
from txdoctor.logging.logger import Log
from txdoctor.normalization.models import NormalizedContext
from txdoctor.normalization.normalizer import Normalizer


class Diagnoser(BaseDiagnoser):
    """Diagnoses a failed transaction through a fixed three-turn conversation.

    Turn 1 asks for the diagnosis, turn 2 for a concrete fix and retry
    checklist, turn 3 for a risk assessment. Every turn sees the full
    history of the previous ones.
    """

    def __init__(
        self,
        *,
        client: BaseDiagnosisClient,
        model: str,
        temperature: float = 0.2,
        max_tokens: int = 4096,
        normalizer: Normalizer | None = None,
        prompt_dir: Path | None = None,
    ) -> None:
        if max_tokens <= 0:
            raise ValueError(f"max_tokens must be positive, got {max_tokens}")
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._max_tokens = max_tokens
        self._normalizer = normalizer or Normalizer()
        self._system_prompt = load_prompt(SYSTEM_PROMPT, _override(prompt_dir, SYSTEM_PROMPT))
        self._diagnosis_template = load_prompt(
            DIAGNOSIS_PROMPT, _override(prompt_dir, DIAGNOSIS_PROMPT)
        )
        self._code_fix_prompt = load_prompt(CODE_FIX_PROMPT, _override(prompt_dir, CODE_FIX_PROMPT))
        self._risk_prompt = load_prompt(
            RISK_ASSESSMENT_PROMPT, _override(prompt_dir, RISK_ASSESSMENT_PROMPT)
        )

    def diagnose(self, record: object) -> DiagnosisResult:
        context = self._normalizer.normalize(record)
        Log.info(
            "Diagnosing transaction",
            tx_hash=context.hash,
            category=context.error_category.key,
        )

        history: list[dict[str, str]] = []
        prompt = self.build_prompt(context)
        Log.debug(f"Diagnosis prompt:\n{prompt}")

        diagnosis = self._ask(history, prompt, turn="diagnosis")
        code_fix = self._ask(history, self._code_fix_prompt, turn="code_fix")
        risk_assessment = self._ask(history, self._risk_prompt, turn="risk_assessment")

        Log.info("Diagnosis complete", tx_hash=context.hash, turns=len(history) // 2)
        return DiagnosisResult(
            transaction_context=context,
            diagnosis=diagnosis,
            code_fix=code_fix,
            risk_assessment=risk_assessment,
        )

    def build_prompt(self, context: NormalizedContext) -> str:
        """Render the first-turn user prompt from a normalized context."""
        try:
            return self._diagnosis_template.format(
                hash=context.hash,
                network=context.network,
                timestamp=context.timestamp,
                from_address=context.from_address,
                to_address=context.to_address,
                contract_name=context.contract_name,
                contract_address=context.contract_address,
                function_name=context.function_name,
                value=context.value,
                gas_used=context.gas_used,
                gas_limit=context.gas_limit,
                gas_price=context.gas_price,
                error_category=context.error_category.category,
                error=context.error,
                revert_reason=context.revert_reason,
                input_data=context.input_data,
                additional_context=json.dumps(
                    context.additional_context, indent=2, default=str, ensure_ascii=False
                ),
            )
        except (KeyError, IndexError, ValueError) as exc:
            raise DiagnosisError(f"Invalid diagnosis prompt template: {exc}") from exc

    def _ask(self, history: list[dict[str, str]], prompt: str, *, turn: str) -> str:
        history.append({"role": "user", "content": prompt})
        Log.info("Requesting AI reply", turn=turn, model=self._model)
        reply = self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
            system_prompt=self._system_prompt,
            messages=list(history),
        )
        Log.debug(f"AI raw reply ({turn}):\n{reply}")
        history.append({"role": "assistant", "content": reply})
        return reply


def _override(prompt_dir: Path | None, name: str) -> Path | None:
    return prompt_dir / name if prompt_dir is not None else None
