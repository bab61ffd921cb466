"""Configuration module - public API.

Centralized configuration for y10n using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    LocalizationSettings: Localization settings class

Example:
    ```python
    from y10n.configuration import settings

    pattern = settings.l10n.TRANSLATIONS_GLOB
    ```
"""

from y10n.configuration.localization import LocalizationSettings
from y10n.configuration.settings import Settings, settings

__all__ = ["Settings", "LocalizationSettings", "settings"]
