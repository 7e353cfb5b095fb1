from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from the environment and .env"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # API
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000)
    api_reload: bool = Field(default=False)
    debug: bool = Field(default=False)

    # Logging
    log_level: str = Field(default="info")

    # CORS
    cors_origins: list[str] = Field(default=["*"])
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: list[str] = Field(default=["*"])
    cors_allow_headers: list[str] = Field(default=["*"])

    # Advisory service (local rule-based advisor when no URL is set)
    advisory_url: Optional[str] = Field(default=None)
    advisory_api_key: Optional[str] = Field(default=None)
    advisory_timeout_seconds: float = Field(default=10.0, gt=0)

    # Performance reporter
    performance_seed: Optional[int] = Field(default=None)

    # Docs
    enable_docs: bool = Field(default=True)
    enable_redoc: bool = Field(default=True)

    def get_cors_config(self) -> dict:
        """Return the CORS middleware configuration"""
        return {
            "allow_origins": self.cors_origins,
            "allow_credentials": self.cors_allow_credentials,
            "allow_methods": self.cors_allow_methods,
            "allow_headers": self.cors_allow_headers,
        }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Dependency to get settings"""
    return settings
