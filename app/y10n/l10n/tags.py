"""Language tag model.

A language tag is reduced to the two parts that matter for picking a
translation document: the primary language subtag and an optional region
subtag. Script, variant and extension subtags are accepted on input but
not kept.
"""

import re
from dataclasses import dataclass
from typing import Optional

from y10n.l10n.exceptions import InvalidLanguageTagError

WILDCARD_SUBTAG = "*"

_PRIMARY_PATTERN = re.compile(r"^[A-Za-z]{2,3}$")
_SUBTAG_PATTERN = re.compile(r"^[A-Za-z0-9]{1,8}$")
_REGION_PATTERN = re.compile(r"^(?:[A-Za-z]{2}|[0-9]{3})$")


@dataclass(frozen=True)
class LanguageTag:
    """Case-normalized language identifier (e.g., "en", "de-DE").

    Two tags are equal iff their primary and region subtags match. Frozen so
    tags can be used as dictionary keys and shared freely.

    Attributes:
        primary: Lowercase primary language subtag ("en"), or "*" for the wildcard.
        region: Uppercase region subtag ("DE"), or None.
    """

    primary: str
    region: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "primary", self.primary.lower())
        if self.region is not None:
            object.__setattr__(self, "region", self.region.upper() or None)

    @classmethod
    def parse(cls, value: str) -> "LanguageTag":
        """Parse a language tag string.

        The primary subtag is a two- or three-letter ISO 639 code. Accepts "-"
        or "_" as the subtag separator. The region is the first
        subtag shaped like a region code (two letters or three digits), so
        "zh-Hant-TW" parses as zh-TW.

        Args:
            value: Raw tag string (e.g., "en", "de-de", "pt_BR", "*").

        Returns:
            LanguageTag instance.

        Raises:
            InvalidLanguageTagError: If the string is not a valid tag.
        """
        if not isinstance(value, str):
            raise InvalidLanguageTagError(f"Invalid language tag: {value!r}")

        text = value.strip()
        if text == WILDCARD_SUBTAG:
            return WILDCARD

        subtags = text.replace("_", "-").split("-")
        primary, rest = subtags[0], subtags[1:]
        if not _PRIMARY_PATTERN.match(primary):
            raise InvalidLanguageTagError(f"Invalid language tag: {value!r}")

        region = None
        for subtag in rest:
            if not _SUBTAG_PATTERN.match(subtag):
                raise InvalidLanguageTagError(f"Invalid language tag: {value!r}")
            if region is None and _REGION_PATTERN.match(subtag):
                region = subtag

        return cls(primary=primary, region=region)

    @property
    def is_wildcard(self) -> bool:
        return self.primary == WILDCARD_SUBTAG

    @property
    def specificity(self) -> int:
        """Specificity level: 0 for the wildcard, 1 for primary only, 2 with region."""
        if self.is_wildcard:
            return 0
        return 2 if self.region else 1

    def without_region(self) -> "LanguageTag":
        """Return the primary-only form of this tag."""
        if self.region is None:
            return self
        return LanguageTag(primary=self.primary)

    def is_more_specific_than(self, other: "LanguageTag") -> bool:
        """Check if this tag narrows `other` (e.g., "de-DE" narrows "de")."""
        if other.is_wildcard:
            return not self.is_wildcard
        return self.primary == other.primary and self.specificity > other.specificity

    def __str__(self) -> str:
        if self.region:
            return f"{self.primary}-{self.region}"
        return self.primary


WILDCARD = LanguageTag(primary=WILDCARD_SUBTAG)
