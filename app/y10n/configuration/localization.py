"""Localization settings."""

from typing import Literal

from pydantic import Field

from y10n.configuration.base import ComponentSettings


class LocalizationSettings(ComponentSettings):
    """Translation loading and resolution configuration.

    Environment Variables:
        L10N_TRANSLATIONS_GLOB: Glob pattern of translation files
            (default: locales/*.yml)
        L10N_DEFAULT_LANGUAGE: Language used when a request matches nothing
            (default: en)
        L10N_SEQUENCE_POLICY: How sequences merge, "replace" or "append"
            (default: replace)
        L10N_PRELOAD: Load translations when the service is created
            (default: true)

    Example:
        ```python
        from y10n.configuration import settings

        pattern = settings.l10n.TRANSLATIONS_GLOB
        policy = settings.l10n.SEQUENCE_POLICY
        ```
    """

    TRANSLATIONS_GLOB: str = Field(
        default="locales/*.yml", alias="L10N_TRANSLATIONS_GLOB"
    )
    DEFAULT_LANGUAGE: str = Field(default="en", alias="L10N_DEFAULT_LANGUAGE")
    SEQUENCE_POLICY: Literal["replace", "append"] = Field(
        default="replace", alias="L10N_SEQUENCE_POLICY"
    )
    PRELOAD: bool = Field(default=True, alias="L10N_PRELOAD")
