from typing import ClassVar

from txdoctor.config.settings import Settings
from txdoctor.diagnosis.base import BaseDiagnoser
from txdoctor.diagnosis.diagnoser import Diagnoser
from txdoctor.diagnosis.example_client_adapter import ExampleClientAdapter
from txdoctor.diagnosis.openai_client_adapter import OpenAIClientAdapter


class DiagnoserFactory:
    """Creates the configured diagnoser."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseDiagnoser:
        """Create a configured diagnoser from application settings."""
        provider = settings.diagnosis_provider.lower()
        if provider == "example":
            return Diagnoser(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
                max_tokens=settings.diagnosis_max_tokens,
            )
        client = OpenAIClientAdapter(
            api_key=settings.diagnosis_api_key,
            timeout_seconds=settings.diagnosis_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )
        return Diagnoser(
            client=client,
            model=settings.diagnosis_model_name,
            temperature=settings.diagnosis_temperature,
            max_tokens=settings.diagnosis_max_tokens,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        custom_url = (settings.diagnosis_base_url or "").strip()
        if provider == "openai":
            return custom_url or None
        if provider == "openai_compatible":
            if not custom_url:
                raise ValueError(
                    "diagnosis_base_url is required for diagnosis_provider=openai_compatible"
                )
            return custom_url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return custom_url or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown diagnosis provider '{provider}'. Choose from: {supported}"
        )
