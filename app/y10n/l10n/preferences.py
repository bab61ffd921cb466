"""Language preference parsing.

Parses Accept-Language style preference strings ("de-DE,de;q=0.9,en;q=0.5")
into a ranked list of weighted language tags.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from y10n.l10n.exceptions import InvalidLanguageTagError
from y10n.l10n.tags import LanguageTag
from y10n.logging import get_module_logger

logger = get_module_logger()

DEFAULT_WEIGHT = 1.0

_WEIGHT_PATTERN = re.compile(r"^(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)$")


@dataclass(frozen=True)
class WeightedPreference:
    """A language tag with its quality weight.

    A weight of 0.0 marks the language as explicitly unacceptable; such a
    preference is kept in parse results but never selected.

    Attributes:
        tag: The preferred LanguageTag.
        weight: Quality weight in [0.0, 1.0].
    """

    tag: LanguageTag
    weight: float = DEFAULT_WEIGHT

    @property
    def is_acceptable(self) -> bool:
        return self.weight > 0.0

    def __str__(self) -> str:
        if self.weight == DEFAULT_WEIGHT:
            return str(self.tag)
        return f"{self.tag};q={self.weight:g}"


class PreferenceParser:
    """Parser for comma-separated language preference lists.

    Malformed entries (bad tag, non-numeric weight, weight outside [0, 1])
    are dropped one at a time; the rest of the list is still parsed.

    Output is ranked by weight descending. Equal weights keep their input
    order, except that the wildcard sorts after concrete tags of the same
    weight.
    """

    def parse(self, raw: Optional[str]) -> List[WeightedPreference]:
        """Parse a preference string into ranked WeightedPreferences.

        Args:
            raw: Preference string (e.g., "en-US,en;q=0.9,*;q=0.1"). None or
                blank yields an empty list.

        Returns:
            Ranked list of WeightedPreference, zero-weight entries included.
        """
        if not raw:
            return []

        ranked = []
        for position, entry in enumerate(raw.split(",")):
            preference = self.parse_entry(entry)
            if preference is not None:
                ranked.append((position, preference))

        ranked.sort(
            key=lambda item: (-item[1].weight, item[1].tag.is_wildcard, item[0])
        )
        return [preference for _, preference in ranked]

    def parse_entry(self, entry: str) -> Optional[WeightedPreference]:
        """Parse a single "tag[;q=weight]" entry.

        Args:
            entry: One comma-separated segment of a preference string.

        Returns:
            WeightedPreference, or None if the entry is empty or malformed.
        """
        parts = [part.strip() for part in entry.split(";")]
        tag_text, params = parts[0], parts[1:]
        if not tag_text:
            return None

        try:
            tag = LanguageTag.parse(tag_text)
        except InvalidLanguageTagError:
            logger.debug("preference_entry_dropped", entry=entry, reason="invalid_tag")
            return None

        weight = DEFAULT_WEIGHT
        for param in params:
            name, _, value = param.partition("=")
            if name.strip().lower() != "q":
                continue
            parsed = self._parse_weight(value.strip())
            if parsed is None:
                logger.debug(
                    "preference_entry_dropped", entry=entry, reason="invalid_weight"
                )
                return None
            weight = parsed

        return WeightedPreference(tag=tag, weight=weight)

    @staticmethod
    def _parse_weight(value: str) -> Optional[float]:
        if not _WEIGHT_PATTERN.match(value):
            return None
        weight = float(value)
        if weight < 0.0 or weight > 1.0:
            return None
        return weight


_default_parser = PreferenceParser()


def parse_accept_language(header: Optional[str]) -> List[WeightedPreference]:
    """Parse the value of an Accept-Language header.

    Example:
        >>> [str(p) for p in parse_accept_language("en,de;q=0.5")]
        ['en', 'de;q=0.5']
    """
    return _default_parser.parse(header)
