"""
Application Configuration
"""
from functools import lru_cache
from typing import List, Literal

from pydantic_settings import BaseSettings
from pydantic import model_validator


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "ClaimGenie"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # JSON data files
    POLICIES_FILE: str = "./data/policies.json"
    CLAIMS_FILE: str = "./data/claims.json"

    # Sessions
    SESSION_BACKEND: Literal["memory", "redis"] = "memory"
    REDIS_URL: str = "redis://localhost:6379/0"

    # LLM Provider
    LLM_PROVIDER: Literal["ollama", "bedrock", "openai"] = "ollama"
    LLM_TEMPERATURE: float = 0.1
    LLM_TIMEOUT_SECONDS: int = 30

    # Ollama
    OLLAMA_BASE_URL: str = "http://localhost:11434"
    OLLAMA_MODEL: str = "llama3"

    # AWS Bedrock
    AWS_REGION: str = "us-east-1"
    AWS_ACCESS_KEY_ID: str = ""
    AWS_SECRET_ACCESS_KEY: str = ""
    BEDROCK_MODEL_ID: str = "anthropic.claude-3-sonnet-20240229-v1:0"

    # OpenAI
    OPENAI_API_KEY: str = ""
    OPENAI_MODEL: str = "gpt-4.1-mini"

    # Validation
    STRICT_DATE_MODE: bool = False

    @model_validator(mode="after")
    def validate_provider_settings(self) -> "Settings":
        """Validate credentials for the selected LLM provider."""
        if self.LLM_PROVIDER == "bedrock":
            if not self.AWS_ACCESS_KEY_ID or not self.AWS_SECRET_ACCESS_KEY:
                raise ValueError(
                    "AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY are required when LLM_PROVIDER is 'bedrock'. "
                    "Set these in your .env file or environment variables."
                )

        if self.LLM_PROVIDER == "openai" and not self.OPENAI_API_KEY:
            raise ValueError(
                "OPENAI_API_KEY is required when LLM_PROVIDER is 'openai'. "
                "Set it in your .env file or environment variables."
            )

        if self.APP_ENV != "development" and self.DEBUG:
            import warnings
            warnings.warn(
                "DEBUG mode is enabled in a non-development environment. "
                "This is not recommended for production.",
                UserWarning,
            )

        return self

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()


settings = get_settings()
