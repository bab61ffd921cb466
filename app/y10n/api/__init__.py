"""FastAPI integration for y10n.

Exports dependency type aliases that give request handlers the merged
translation tree for the request's Accept-Language header.
"""

from y10n.api.dependencies import (
    AcceptLanguageDep,
    LocalizationServiceDep,
    LocalizedTreeDep,
    SettingsDep,
)
from y10n.api.providers import get_localization_service, get_settings

__all__ = [
    "AcceptLanguageDep",
    "LocalizationServiceDep",
    "LocalizedTreeDep",
    "SettingsDep",
    "get_localization_service",
    "get_settings",
]
