"""
FastAPI dependency injection.

An endpoint declares `config: Settings = Depends(get_settings)` and FastAPI
hands it the settings object. Tests swap in their own Settings through
app.dependency_overrides, without touching environment variables.
"""

from config.settings import Settings, settings


def get_settings() -> Settings:
    return settings
