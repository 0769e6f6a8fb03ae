"""Configuration management for the admin client."""

from pydantic import ValidationError
from pydantic_settings import BaseSettings


REQUIRED_VARS = [
    "ADMIN_API_URL",
]


class Config(BaseSettings):
    """Application configuration from environment variables."""

    # Required
    admin_api_url: str

    # Optional
    connect_timeout: float = 30.0
    read_timeout: float = 60.0
    fetch_retry_attempts: int = 1
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "case_sensitive": False}


def validate_config() -> Config:
    """Load and validate configuration from environment.

    Raises ValueError with descriptive message listing ALL missing
    required variables (not just the first one).
    """
    try:
        return Config()  # type: ignore[call-arg]
    except ValidationError as exc:
        absent = {
            str(err["loc"][0]).lower()
            for err in exc.errors()
            if err["type"] == "missing" and err["loc"]
        }
        missing = [var for var in REQUIRED_VARS if var.lower() in absent]
        if missing:
            names = ", ".join(missing)
            raise ValueError(
                f"Missing required environment variable(s): {names}. "
                "Please set them in your .env file or environment."
            ) from exc
        raise


def load_config() -> Config:
    """Load configuration from environment (startup entry point)."""
    return validate_config()
