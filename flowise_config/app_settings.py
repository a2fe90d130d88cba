from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

"""Automatically loads environment variables from a .env file"""
class Settings(BaseSettings):

    # Flowise connection
    flowise_api_key: str = ""
    flowise_base_url: str = ""

    # Optional YAML file with FlowiseConfig overrides for the default manager
    flowise_config_file: Optional[str] = None

    # Key guarding the config admin API
    admin_api_key: str = ""

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


def get_settings() -> Settings:
    """Read settings fresh from the current environment."""
    return Settings()


# Global settings instance
settings = Settings()
