"""Translation document store.

Holds one translation tree per language tag. Readers always see a complete,
immutable snapshot: every write builds a new snapshot and swaps it in with a
single reference assignment, so `get`/`resolve_best` never observe a store
in the middle of a replacement.
"""

import threading
from types import MappingProxyType
from typing import Any, Iterable, List, Mapping, NamedTuple, Optional, Union

from y10n.l10n.tags import LanguageTag
from y10n.l10n.tree import copy_tree
from y10n.logging import get_module_logger

logger = get_module_logger()

TagLike = Union[LanguageTag, str]


class TranslationDocument(NamedTuple):
    """A translation tree and the language tag it was loaded for.

    Unpacks as `(tag, tree)`. The tree must be treated as read-only.
    """

    tag: LanguageTag
    tree: Any


def _coerce_tag(tag: TagLike) -> LanguageTag:
    if isinstance(tag, LanguageTag):
        return tag
    return LanguageTag.parse(tag)


class DocumentStore:
    """Lookup table of translation documents keyed by LanguageTag.

    Loading (`put`, `replace_all`) is a write phase; lookups may run
    concurrently from many threads once loading is done, and also while a
    reload swaps in a new snapshot.

    Attributes:
        _documents: Current immutable snapshot (tag -> TranslationDocument).
        _write_lock: Serializes writers; readers never take it.
    """

    def __init__(self, documents: Optional[Iterable[TranslationDocument]] = None):
        self._write_lock = threading.Lock()
        self._documents: Mapping[LanguageTag, TranslationDocument] = MappingProxyType(
            {}
        )
        if documents is not None:
            self.replace_all(documents)

    @classmethod
    def from_glob(cls, pattern: str) -> "DocumentStore":
        """Create a store loaded from the translation files matching a glob.

        Each file's stem names its language (e.g., `l10n/en.yml` -> en).

        Raises:
            DocumentLoadError: If a matching file cannot be read or parsed.
        """
        from y10n.l10n.loader import YAMLDocumentLoader

        return cls(YAMLDocumentLoader().load_glob(pattern))

    def put(self, tag: TagLike, tree: Any) -> TranslationDocument:
        """Insert or replace the document for `tag`.

        Args:
            tag: Language the tree translates into.
            tree: Parsed translation tree; copied, so later changes to the
                caller's object do not leak into the store.

        Returns:
            The stored TranslationDocument.
        """
        document = TranslationDocument(tag=_coerce_tag(tag), tree=copy_tree(tree))
        with self._write_lock:
            replaced = document.tag in self._documents
            documents = dict(self._documents)
            documents[document.tag] = document
            self._documents = MappingProxyType(documents)

        logger.debug("document_stored", tag=str(document.tag), replaced=replaced)
        return document

    def replace_all(self, documents: Iterable[TranslationDocument]) -> None:
        """Atomically replace the whole store contents.

        Later documents for the same tag replace earlier ones.
        """
        snapshot = {}
        for tag, tree in documents:
            tag = _coerce_tag(tag)
            snapshot[tag] = TranslationDocument(tag=tag, tree=copy_tree(tree))

        with self._write_lock:
            self._documents = MappingProxyType(snapshot)

        logger.info(
            "documents_loaded",
            languages=[str(tag) for tag in sorted_tags(snapshot)],
        )

    def get(self, tag: TagLike) -> Optional[Any]:
        """Return the tree stored for exactly `tag`, or None."""
        document = self._documents.get(_coerce_tag(tag))
        return document.tree if document else None

    def resolve_best(self, tag: TagLike) -> Optional[TranslationDocument]:
        """Find the best document for `tag`, falling back by specificity.

        Tries an exact match first, then the primary-only form of a regional
        tag ("de-DE" -> "de").

        Returns:
            The matching TranslationDocument, or None.
        """
        tag = _coerce_tag(tag)
        documents = self._documents

        document = documents.get(tag)
        if document is None and tag.region is not None:
            document = documents.get(tag.without_region())
        return document

    def resolve_wildcard(
        self,
        exclude: Iterable[LanguageTag] = (),
        preferred: Optional[LanguageTag] = None,
    ) -> Optional[TranslationDocument]:
        """Pick the document a "*" preference stands for.

        Chooses among documents not in `exclude`: the `preferred` tag if it is
        loaded, otherwise the least specific tag (ties broken alphabetically).

        Returns:
            A TranslationDocument, or None if no candidate is left.
        """
        excluded = set(exclude)
        candidates = [
            document
            for tag, document in self._documents.items()
            if tag not in excluded
        ]
        if not candidates:
            return None

        if preferred is not None:
            for document in candidates:
                if document.tag == preferred:
                    return document

        return min(candidates, key=lambda d: (d.tag.specificity, str(d.tag)))

    def languages(self) -> List[LanguageTag]:
        """Return the loaded language tags, sorted."""
        return sorted_tags(self._documents)

    def snapshot(self) -> Mapping[LanguageTag, TranslationDocument]:
        """Return the current read-only snapshot."""
        return self._documents

    def __contains__(self, tag: object) -> bool:
        if isinstance(tag, str):
            try:
                tag = LanguageTag.parse(tag)
            except ValueError:
                return False
        return tag in self._documents

    def __len__(self) -> int:
        return len(self._documents)


def sorted_tags(tags: Iterable[LanguageTag]) -> List[LanguageTag]:
    return sorted(tags, key=str)
