"""
Application configuration management.

This module handles configuration from environment variables using Pydantic Settings.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Tool configuration from environment variables.

    All settings can be overridden via environment variables with the same name.
    """

    # Upstream data sources
    gtld_json_url: str = "https://www.icann.org/resources/registries/gtlds/v2/gtlds.json"
    tlds_txt_url: str = "https://data.iana.org/TLD/tlds-alpha-by-domain.txt"

    # HTTP
    http_timeout_seconds: float = 30.0

    # Managed dat file
    psl_dat_file: str = "public_suffix_list.dat"

    # Logging (always written to stderr, stdout carries the dat file)
    log_level: str = "WARNING"
    log_json: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


# Global settings instance
settings = Settings()
