"""Localization service facade.

Wraps the parser, store and resolver behind one object that request
handlers and templates can use: resolve a merged tree for an
Accept-Language value, or look up and interpolate a single message.
"""

import re
import threading
from typing import Any, Dict, Optional

from y10n.l10n.loader import DocumentLoader, YAMLDocumentLoader
from y10n.l10n.preferences import PreferenceParser, WeightedPreference
from y10n.l10n.resolver import LocalizationResolver
from y10n.l10n.store import DocumentStore
from y10n.l10n.tags import LanguageTag
from y10n.l10n.tree import lookup_path
from y10n.logging import get_module_logger

logger = get_module_logger()

_PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*(\w+)\s*\}\}")


class LocalizationService:
    """Class-based localization service.

    Usage:
        service = create_localization_service()
        tree = service.localize(request.headers.get("Accept-Language"))
        greeting = service.lookup("greeting", "de,en;q=0.5", {"who": "Ada"})

    Attributes:
        store: DocumentStore holding the loaded translations.
        resolver: LocalizationResolver used for every request.
        parser: PreferenceParser for raw Accept-Language values.
        default_language: Language used when a request matches nothing.
        translations_glob: Glob pattern `reload()` reads from. An empty
            store is loaded from it on first use.
    """

    def __init__(
        self,
        store: DocumentStore,
        resolver: Optional[LocalizationResolver] = None,
        parser: Optional[PreferenceParser] = None,
        default_language: Optional[LanguageTag] = None,
        translations_glob: Optional[str] = None,
        loader: Optional[DocumentLoader] = None,
    ):
        self.store = store
        self.resolver = resolver or LocalizationResolver(
            wildcard_language=default_language
        )
        self.parser = parser or PreferenceParser()
        self.default_language = default_language
        self.translations_glob = translations_glob
        self.loader = loader or YAMLDocumentLoader()
        self._load_lock = threading.Lock()
        self._loaded = len(store) > 0

    def localize(self, accept_language: Optional[str]) -> Any:
        """Resolve the merged translation tree for an Accept-Language value.

        Falls back to the default language when the value is missing,
        unparseable, or matches no loaded document, unless the client
        explicitly rejected the default language with q=0. A matched
        document that happens to be empty still counts as a match.

        Args:
            accept_language: Raw preference string, or None.

        Returns:
            Merged tree; an empty mapping if even the default is unavailable.
        """
        self._ensure_loaded()
        preferences = self.parser.parse(accept_language)
        documents = self.resolver.select_documents(preferences, self.store)

        if not documents and self.default_language is not None:
            rejected = {p.tag for p in preferences if not p.is_acceptable}
            if self.default_language not in rejected:
                logger.debug(
                    "used_default_language",
                    accept_language=accept_language,
                    default_language=str(self.default_language),
                )
                documents = self.resolver.select_documents(
                    [WeightedPreference(tag=self.default_language)], self.store
                )

        return self.resolver.merge_documents(documents)

    def lookup(
        self,
        key: str,
        accept_language: Optional[str] = None,
        variables: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Look up one value by dotted key in the merged tree.

        String values have their {{name}} placeholders filled from
        `variables`.

        Args:
            key: Dot-separated path (e.g., "errors.not_found").
            accept_language: Raw preference string, or None for the default.
            variables: Values for placeholder interpolation.

        Returns:
            The (interpolated) value, or None if the key is absent.

        Raises:
            ValueError: If a placeholder has no matching variable.
        """
        value = lookup_path(self.localize(accept_language), key)
        if value is None:
            logger.debug(
                "translation_not_found", key=key, accept_language=accept_language
            )
            return None
        if isinstance(value, str):
            return interpolate(value, variables or {})
        return value

    def reload(self) -> None:
        """Reload all translation files and swap them into the store atomically.

        Raises:
            ValueError: If the service has no translations_glob.
            DocumentLoadError: If a file cannot be read or parsed; the store
                keeps its previous contents.
        """
        if not self.translations_glob:
            raise ValueError("No translations_glob configured for reload")

        documents = self.loader.load_glob(self.translations_glob)
        self.store.replace_all(documents)
        self._loaded = True
        logger.info("reloaded_translations", language_count=len(self.store))

    def languages(self) -> list[LanguageTag]:
        """Get the loaded language tags."""
        self._ensure_loaded()
        return self.store.languages()

    def _ensure_loaded(self) -> None:
        if self._loaded or not self.translations_glob:
            return
        with self._load_lock:
            if not self._loaded:
                logger.info("loading_translations_on_first_use")
                self.reload()


def interpolate(message: str, variables: Dict[str, Any]) -> str:
    """Replace {{name}} placeholders with values from `variables`.

    Raises:
        ValueError: If a placeholder has no matching variable.
    """
    missing = [
        name for name in _PLACEHOLDER_PATTERN.findall(message) if name not in variables
    ]
    if missing:
        logger.error(
            "missing_interpolation_variable",
            variable=missing[0],
            available_variables=list(variables.keys()),
        )
        raise ValueError(f"Missing interpolation variable: {missing[0]}")

    return _PLACEHOLDER_PATTERN.sub(lambda m: str(variables[m.group(1)]), message)
