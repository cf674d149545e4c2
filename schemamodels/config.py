"""
Configuration for schemamodels.
Uses pydantic-settings for environment-based configuration.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class ModelSettings(BaseSettings):
    """Conversion settings loaded from ``SCHEMAMODELS_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SCHEMAMODELS_",
        case_sensitive=False,
        extra="ignore",
    )

    # Prefix of identifiers synthesized from an object's content hash
    identifier_prefix: str = "urn:shaclmate:object:"

    # Preferred literal languages when reading strings from RDF ("" = untagged).
    # Parsed from JSON, e.g. SCHEMAMODELS_LANGUAGE_IN='["en", ""]'
    language_in: list[str] = []


@lru_cache
def get_settings() -> ModelSettings:
    """
    Get cached settings.
    Call ``get_settings.cache_clear()`` after changing the environment.
    """
    return ModelSettings()
