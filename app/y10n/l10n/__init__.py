"""Localization core - language preferences and translation tree merging.

Resolves a client's ranked language preferences against a set of loaded
translation trees and deep-merges the matches so the most preferred
language wins at every key while less preferred languages fill the gaps.

Main components:
- tags: LanguageTag
- preferences: WeightedPreference, PreferenceParser, parse_accept_language
- merger: TreeMerger, SequencePolicy, merge, merge_all
- store: TranslationDocument, DocumentStore
- resolver: LocalizationResolver
- loader: DocumentLoader, YAMLDocumentLoader
- service: LocalizationService
"""

from y10n.l10n.exceptions import (
    DocumentLoadError,
    InvalidLanguageTagError,
    LocalizationError,
)
from y10n.l10n.loader import DocumentLoader, YAMLDocumentLoader
from y10n.l10n.merger import SequencePolicy, TreeMerger, merge, merge_all
from y10n.l10n.preferences import (
    PreferenceParser,
    WeightedPreference,
    parse_accept_language,
)
from y10n.l10n.resolver import LocalizationResolver
from y10n.l10n.service import LocalizationService, interpolate
from y10n.l10n.store import DocumentStore, TranslationDocument
from y10n.l10n.tags import WILDCARD, LanguageTag
from y10n.l10n.tree import TreeKind, kind_of, lookup_path

__all__ = [
    "LanguageTag",
    "WILDCARD",
    "WeightedPreference",
    "PreferenceParser",
    "parse_accept_language",
    "TreeKind",
    "kind_of",
    "lookup_path",
    "TreeMerger",
    "SequencePolicy",
    "merge",
    "merge_all",
    "TranslationDocument",
    "DocumentStore",
    "LocalizationResolver",
    "DocumentLoader",
    "YAMLDocumentLoader",
    "LocalizationService",
    "interpolate",
    "LocalizationError",
    "InvalidLanguageTagError",
    "DocumentLoadError",
]
