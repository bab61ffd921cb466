"""Test data factories for deterministic test data generation."""

from tests.factories.l10n import (
    make_document_store,
    make_preference,
    make_translation_trees,
)

__all__ = [
    "make_document_store",
    "make_preference",
    "make_translation_trees",
]
