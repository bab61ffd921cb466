"""
Type aliases and dependencies for FastAPI dependency injection.

Usage:
    from y10n.api import LocalizedTreeDep

    @router.get("/page")
    def render_page(strings: LocalizedTreeDep):
        return templates.render("page.html", t=strings)
"""

from typing import Annotated, Any, Optional

from fastapi import Depends, Header

from y10n.api.providers import get_localization_service, get_settings
from y10n.configuration import Settings
from y10n.l10n.service import LocalizationService

SettingsDep = Annotated[Settings, Depends(get_settings)]

LocalizationServiceDep = Annotated[
    LocalizationService, Depends(get_localization_service)
]


def get_accept_language(
    accept_language: Annotated[Optional[str], Header()] = None,
) -> Optional[str]:
    """Return the raw Accept-Language header of the current request."""
    return accept_language


AcceptLanguageDep = Annotated[Optional[str], Depends(get_accept_language)]


def get_localized_tree(
    accept_language: AcceptLanguageDep,
    service: LocalizationServiceDep,
) -> Any:
    """Resolve the merged translation tree for the current request.

    A missing or unusable header never fails the request; the service falls
    back to its default language.
    """
    return service.localize(accept_language)


LocalizedTreeDep = Annotated[Any, Depends(get_localized_tree)]

__all__ = [
    "SettingsDep",
    "LocalizationServiceDep",
    "AcceptLanguageDep",
    "LocalizedTreeDep",
    "get_accept_language",
    "get_localized_tree",
]
