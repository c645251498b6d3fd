"""Environment-based configuration for the Extract Edge client."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Extract Edge settings, loaded from environment variables."""

    # Remote extraction service (serves POST /upload)
    EXTRACT_API_BASE: str = "http://localhost:5000"

    # Transport timeouts; the client itself never retries
    UPLOAD_TIMEOUT_SECONDS: int = 300  # page rendering + OCR on large PDFs
    UPLOAD_CONNECT_TIMEOUT: int = 10

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = {"env_prefix": "", "case_sensitive": True}


settings = Settings()
