"""
Unit vocabulary used by the ingredient tokenizer.

The table is built once at import time from ``constants.UNIT_ALIASES`` and
never modified afterwards, so a single instance is shared by every caller.
"""

import re
from typing import Mapping, Optional, Pattern, Tuple

from ..constants import UNIT_ALIASES


class UnitVocabulary:
    """Read-only set of unit spellings, matched longest alias first."""

    def __init__(self, aliases: Mapping[str, Tuple[str, ...]]):
        entries = []
        ids = {}
        for unit_id, spellings in aliases.items():
            for spelling in spellings:
                key = spelling.lower()
                ids[key] = unit_id
                # Whole word only: the alias must be followed by whitespace or the end
                pattern = re.compile(rf"^{re.escape(spelling)}(?=\s|$)", re.IGNORECASE)
                entries.append((spelling, unit_id, pattern))

        # Longest first so "fl oz" is tried before "oz"; ties keep table order
        entries.sort(key=lambda entry: -len(entry[0]))
        self._entries: Tuple[Tuple[str, str, Pattern[str]], ...] = tuple(entries)
        self._ids: Mapping[str, str] = ids

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, spelling: object) -> bool:
        return isinstance(spelling, str) and spelling.lower() in self._ids

    @property
    def aliases(self) -> Tuple[str, ...]:
        """All spellings in matching order."""
        return tuple(spelling for spelling, _, _ in self._entries)

    def match_prefix(self, text: str) -> Optional[str]:
        """
        Return the unit that starts ``text``, as written in ``text``.

        Args:
            text: Remaining ingredient text, already stripped on the left

        Returns:
            The matched slice of ``text`` (original casing) or None
        """
        for spelling, _, pattern in self._entries:
            if pattern.match(text):
                return text[:len(spelling)]
        return None

    def unit_id(self, unit: Optional[str]) -> Optional[str]:
        """Canonical id for a matched unit, case-insensitive."""
        if not unit:
            return None
        return self._ids.get(unit.lower())


UNITS = UnitVocabulary(UNIT_ALIASES)
