import sys
from pathlib import Path

import pytest

# Ensure the application package root is on sys.path so `y10n` and
# `tests.factories` import during collection regardless of invocation dir.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from y10n.api.providers import get_localization_service, get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def clear_provider_caches():
    """Reset lru_cached providers so tests never share singletons."""
    get_settings.cache_clear()
    get_localization_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_localization_service.cache_clear()
