from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3000
    batch_max_size: int = 10

    diagnosis_provider: str = "openai"
    diagnosis_api_key: str = ""
    diagnosis_model_name: str = "gpt-4o"
    diagnosis_base_url: str | None = None
    diagnosis_timeout_seconds: int = 60
    diagnosis_temperature: float = 0.2
    diagnosis_max_tokens: int = 4096
