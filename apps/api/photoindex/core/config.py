"""
Application settings loaded from the environment.
"""
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

from photoindex.core.errors import ConfigurationError

load_dotenv()


class Settings(BaseSettings):
    """Settings for both pipelines. Every field maps to its upper-cased env var."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # OpenSearch
    opensearch_endpoint: Optional[str] = None
    opensearch_index: str = "photos"
    opensearch_username: Optional[str] = None
    opensearch_password: Optional[str] = None
    opensearch_timeout: int = 10

    # Lex V2
    lex_bot_id: Optional[str] = None
    lex_bot_alias_id: Optional[str] = None
    lex_locale_id: str = "en_US"
    lex_session_id: str = "photos-session"
    search_intent_name: str = "SearchIntent"

    # Rekognition
    rekognition_max_labels: int = 10
    rekognition_min_confidence: float = 80

    aws_region: Optional[str] = None

    public_url_template: str = "https://{bucket}.s3.amazonaws.com/{key}"
    cors_allow_origins: List[str] = ["*"]

    # Logging
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    def require(self, *fields: str) -> None:
        """Raise ConfigurationError naming every field in `fields` that is unset or blank."""
        missing = [f for f in fields if not (getattr(self, f, None) or "").strip()]
        if missing:
            raise ConfigurationError(f.upper() for f in missing)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
