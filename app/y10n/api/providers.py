"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for localization.
"""

from functools import lru_cache

from y10n.configuration import Settings
from y10n.l10n.factory import create_localization_service
from y10n.l10n.service import LocalizationService


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_localization_service() -> LocalizationService:
    """
    Get application-scoped localization service singleton.

    Translations are loaded once on first use; later calls share the same
    service and its store.

    Returns:
        LocalizationService: Cached service configured from settings.l10n.
    """
    settings = get_settings()
    return create_localization_service(settings.l10n)
