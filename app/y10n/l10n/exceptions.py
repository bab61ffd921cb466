"""Custom exceptions for the localization system.

Merging and resolution never raise for data shape reasons; the only hard
errors are malformed language tags and translation files that cannot be
read or parsed.
"""


class LocalizationError(Exception):
    """Base exception for all localization errors.

    Example:
        try:
            store = DocumentStore.from_glob("locales/*.yml")
        except LocalizationError as e:
            logger.error("localization_error", error=str(e))
    """

    pass


class InvalidLanguageTagError(LocalizationError, ValueError):
    """Raised when a string cannot be parsed as a language tag.

    Example:
        >>> LanguageTag.parse("en--US")
        Traceback (most recent call last):
        ...
        InvalidLanguageTagError: Invalid language tag: 'en--US'
    """

    pass


class DocumentLoadError(LocalizationError):
    """Raised when a translation file cannot be read or parsed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load {path}: {reason}")
