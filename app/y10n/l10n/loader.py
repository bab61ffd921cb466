"""Translation file loading.

Discovers translation files by glob pattern and parses them into
(LanguageTag, tree) documents. Each file's language comes from its name:
`en.yml`, `de-DE.yaml`, `pt_BR.json` and `messages.fr.yml` map to en, de-DE,
pt-BR and fr.
"""

import glob
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List, Optional

import yaml

from y10n.l10n.exceptions import DocumentLoadError, InvalidLanguageTagError
from y10n.l10n.store import TranslationDocument
from y10n.l10n.tags import LanguageTag
from y10n.l10n.tree import contains_cycle
from y10n.logging import get_module_logger

logger = get_module_logger()

SUPPORTED_SUFFIXES = (".yml", ".yaml", ".json")


class DocumentLoader(ABC):
    """Abstract base for translation document loaders."""

    @abstractmethod
    def load_file(self, path: Path) -> Any:
        """Parse one translation file into a tree.

        Raises:
            DocumentLoadError: If the file cannot be read or parsed.
        """
        pass

    @abstractmethod
    def load_glob(self, pattern: str) -> List[TranslationDocument]:
        """Load every translation file matching a glob pattern.

        Returns:
            Documents in path order; a later file for the same language
            replaces an earlier one when put into a store.
        """
        pass


def tag_from_path(path: Path) -> Optional[LanguageTag]:
    """Derive the language tag from a translation file name.

    The tag is the last dot-separated part of the stem, so both `en.yml` and
    `messages.en.yml` map to en.

    Returns:
        LanguageTag, or None if the name does not carry a valid tag.
    """
    candidate = path.stem.split(".")[-1]
    try:
        tag = LanguageTag.parse(candidate)
    except InvalidLanguageTagError:
        return None
    return None if tag.is_wildcard else tag


class YAMLDocumentLoader(DocumentLoader):
    """Loader for YAML (and JSON) translation files.

    Parses with `yaml.safe_load`; an empty file loads as an empty mapping.
    Documents whose aliases refer back to an enclosing node are rejected.
    """

    def load_file(self, path: Path) -> Any:
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise DocumentLoadError(str(path), str(e)) from e
        except (OSError, UnicodeDecodeError) as e:
            logger.error("translation_file_unreadable", file=str(path), error=str(e))
            raise DocumentLoadError(str(path), str(e)) from e

        try:
            cyclic = contains_cycle(data)
        except RecursionError as e:
            logger.error("translation_file_too_deep", file=str(path))
            raise DocumentLoadError(str(path), "document is nested too deeply") from e
        if cyclic:
            logger.error("recursive_yaml_alias", file=str(path))
            raise DocumentLoadError(str(path), "document contains a recursive alias")

        return {} if data is None else data

    def load_glob(self, pattern: str) -> List[TranslationDocument]:
        paths = sorted(
            Path(match)
            for match in glob.glob(pattern, recursive=True)
            if Path(match).is_file()
        )

        documents = []
        for path in paths:
            if path.suffix.lower() not in SUPPORTED_SUFFIXES:
                logger.debug("skipped_unsupported_file", file=str(path))
                continue

            tag = tag_from_path(path)
            if tag is None:
                logger.warning("skipped_file_without_language", file=str(path))
                continue

            documents.append(TranslationDocument(tag=tag, tree=self.load_file(path)))

        logger.info(
            "translation_files_loaded",
            pattern=pattern,
            file_count=len(documents),
        )
        return documents
