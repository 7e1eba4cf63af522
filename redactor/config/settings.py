from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    prizmdoc_server_url: str = ""
    prizmdoc_timeout_seconds: int = 60

    job_poll_interval_seconds: float = 1.0

    ocr_language: str = "english"

    workfile_path: str = "PCCIS/V1/WorkFile"
    markup_burner_path: str = "PCCIS/V1/MarkupBurner"
