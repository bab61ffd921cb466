"""y10n - YAML-backed localization with language fallback merging."""
