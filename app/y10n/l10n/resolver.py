"""Localization resolution.

Turns a ranked preference list into one merged translation tree: the
best-matching document for each acceptable preference is looked up, and the
matches are merged from least to most preferred so the most preferred
language wins at every key it defines.
"""

from typing import Any, List, Optional, Sequence

from y10n.l10n.merger import TreeMerger
from y10n.l10n.preferences import WeightedPreference
from y10n.l10n.store import DocumentStore, TranslationDocument
from y10n.l10n.tags import LanguageTag
from y10n.logging import get_module_logger

logger = get_module_logger()


class LocalizationResolver:
    """Resolves preference lists against a DocumentStore.

    Holds no per-call state; a single resolver can serve concurrent
    requests.

    Attributes:
        merger: TreeMerger used to fold the matched documents.
        wildcard_language: Document a "*" preference picks first, when it is
            loaded and not already matched.
    """

    def __init__(
        self,
        merger: Optional[TreeMerger] = None,
        wildcard_language: Optional[LanguageTag] = None,
    ):
        self.merger = merger or TreeMerger()
        self.wildcard_language = wildcard_language

    def select_documents(
        self,
        preferences: Sequence[WeightedPreference],
        store: DocumentStore,
    ) -> List[TranslationDocument]:
        """Pick the documents to merge, most preferred first.

        Zero-weight preferences are skipped and their languages are never
        picked by a wildcard either. Preferences with no loaded document are
        skipped. A document matched by several preferences is kept once, at
        its most preferred position.

        Args:
            preferences: Ranked preferences (as returned by PreferenceParser).
            store: Store to resolve against.

        Returns:
            Matched TranslationDocuments in preference order.
        """
        rejected = {
            preference.tag
            for preference in preferences
            if not preference.is_acceptable and not preference.tag.is_wildcard
        }

        selected: List[TranslationDocument] = []
        seen = set()
        for preference in preferences:
            if not preference.is_acceptable:
                continue

            if preference.tag.is_wildcard:
                document = store.resolve_wildcard(
                    exclude=seen | rejected,
                    preferred=self.wildcard_language,
                )
            else:
                document = store.resolve_best(preference.tag)

            if document is None:
                logger.debug("preference_unmatched", tag=str(preference.tag))
                continue
            if document.tag in seen or document.tag in rejected:
                continue

            seen.add(document.tag)
            selected.append(document)

        return selected

    def localize(
        self,
        preferences: Sequence[WeightedPreference],
        store: DocumentStore,
    ) -> Any:
        """Build the merged translation tree for a preference list.

        Args:
            preferences: Ranked preferences, most preferred first.
            store: Store to resolve against.

        Returns:
            Merged tree, or an empty mapping when nothing matches.
        """
        documents = self.select_documents(preferences, store)
        logger.debug(
            "localization_resolved",
            requested=[str(preference) for preference in preferences],
            merged=[str(document.tag) for document in documents],
        )
        return self.merge_documents(documents)

    def merge_documents(self, documents: Sequence[TranslationDocument]) -> Any:
        """Merge selected documents so the first one wins at every key."""
        return self.merger.merge_all(
            document.tree for document in reversed(documents)
        )
