"""
Application configuration settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=[".env", "../.env"], case_sensitive=False, extra="ignore"
    )

    # Application
    app_name: str = Field("EduMorph API", alias="APP_NAME")

    # Environment
    environment: str = Field("development", alias="ENVIRONMENT")
    debug: bool = Field(False, alias="DEBUG")
    disable_auth: bool = Field(False, alias="DISABLE_AUTH")

    # Server
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(8000, alias="PORT")

    # LLM backend
    llm_provider: str = Field("google", alias="LLM_PROVIDER")
    google_api_key: str = Field("", alias="GOOGLE_API_KEY")
    gemini_model: str = Field("gemini-2.0-flash", alias="GEMINI_MODEL")
    openai_api_key: str = Field("", alias="OPENAI_API_KEY")
    openai_model: str = Field("gpt-4o-mini", alias="OPENAI_MODEL")
    llm_temperature: float = Field(0.7, alias="LLM_TEMPERATURE")
    llm_max_tokens: int = Field(4000, alias="LLM_MAX_TOKENS")

    # Doubt resolver
    doubt_context_messages: int = Field(3, alias="DOUBT_CONTEXT_MESSAGES")

    # CORS
    cors_origins: str = Field("*", alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(True, alias="CORS_ALLOW_CREDENTIALS")

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_format: str = Field("json", alias="LOG_FORMAT")

    def get_cors_origins(self) -> list[str]:
        """Parse CORS origins from string."""
        if self.cors_origins == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",")]

    def get_llm_api_key(self) -> str:
        """Credential for the configured provider."""
        if self.llm_provider.lower() == "openai":
            return self.openai_api_key
        return self.google_api_key


_settings = None


def get_settings() -> Settings:
    """Get settings instance (useful for dependency injection)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
