import httpx
import openai

from txdoctor.diagnosis.client_base import BaseDiagnosisClient
from txdoctor.diagnosis.exceptions import DiagnosisError, DiagnosisNetworkError


class OpenAIClientAdapter(BaseDiagnosisClient):
    """Diagnosis client built on the OpenAI-compatible chat completions API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        messages: list[dict[str, str]],
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
                messages=[{"role": "system", "content": system_prompt}, *messages],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise DiagnosisNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise DiagnosisNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise DiagnosisError("AI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise DiagnosisError("AI returned empty response")
        return content
