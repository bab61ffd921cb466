"""Factory functions for creating localization components.

Builds a configured LocalizationService from LocalizationSettings.
"""

from typing import Optional

from y10n.configuration import LocalizationSettings
from y10n.l10n.merger import SequencePolicy, TreeMerger
from y10n.l10n.resolver import LocalizationResolver
from y10n.l10n.service import LocalizationService
from y10n.l10n.store import DocumentStore
from y10n.l10n.tags import LanguageTag
from y10n.logging import get_module_logger

logger = get_module_logger()


def create_localization_service(
    l10n_settings: Optional[LocalizationSettings] = None,
) -> LocalizationService:
    """Create and configure a LocalizationService.

    Args:
        l10n_settings: Localization settings (default: read from environment).

    Returns:
        LocalizationService: Configured service. With PRELOAD off, files are
            read on the first localize() or lookup() instead.

    Raises:
        InvalidLanguageTagError: If DEFAULT_LANGUAGE is not a valid tag.
        DocumentLoadError: If preloading hits an unreadable file.

    Usage:
        service = create_localization_service()
        tree = service.localize("de-DE,de;q=0.9,en;q=0.5")
    """
    l10n_settings = l10n_settings or LocalizationSettings()

    default_language = LanguageTag.parse(l10n_settings.DEFAULT_LANGUAGE)
    if default_language.is_wildcard:
        raise ValueError("DEFAULT_LANGUAGE cannot be the wildcard")

    merger = TreeMerger(sequence_policy=SequencePolicy(l10n_settings.SEQUENCE_POLICY))
    resolver = LocalizationResolver(
        merger=merger, wildcard_language=default_language
    )
    service = LocalizationService(
        store=DocumentStore(),
        resolver=resolver,
        default_language=default_language,
        translations_glob=l10n_settings.TRANSLATIONS_GLOB,
    )

    if l10n_settings.PRELOAD:
        service.reload()
        logger.info(
            "localization_service_created_with_preload",
            translations_glob=l10n_settings.TRANSLATIONS_GLOB,
            languages=[str(tag) for tag in service.languages()],
        )
    else:
        logger.info(
            "localization_service_created_lazy",
            translations_glob=l10n_settings.TRANSLATIONS_GLOB,
        )

    return service
