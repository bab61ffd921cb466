"""Feature-level fixtures for localization tests."""

import json

import pytest
import yaml

from tests.factories.l10n import make_document_store, make_translation_trees


@pytest.fixture
def translation_trees():
    """English and German translation trees."""
    return make_translation_trees()


@pytest.fixture
def document_store(translation_trees):
    """DocumentStore loaded with the English and German trees."""
    return make_document_store(translation_trees)


@pytest.fixture
def temp_translations_dir(tmp_path, translation_trees):
    """Create temporary directory with sample translation files.

    Returns a directory structure like:
    - en.yml
    - de.yml
    - fr-CA.json
    - README.md
    """
    with open(tmp_path / "en.yml", "w", encoding="utf-8") as f:
        yaml.dump(translation_trees["en"], f)

    with open(tmp_path / "de.yml", "w", encoding="utf-8") as f:
        yaml.dump(translation_trees["de"], f)

    with open(tmp_path / "fr-CA.json", "w", encoding="utf-8") as f:
        json.dump({"greeting": "bonjour"}, f)

    (tmp_path / "README.md").write_text("not a translation file")

    return tmp_path


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_en": "en",
        "specific_de": "de-DE",
        "with_quality": "en-US,en;q=0.9,de;q=0.8",
        "wildcard": "fr,*;q=0.1",
        "invalid_quality": "de;q=abc,en",
        "rejected": "de;q=0",
    }
