"""String comparison modes used by text-matching filters."""

from __future__ import annotations

import enum
import unicodedata


def _simple_upper(value: str) -> str:
    """Uppercase per character; characters like ß whose uppercase is longer stay as-is."""
    chars = []
    for char in value:
        upper = char.upper()
        chars.append(upper if len(upper) == 1 else char)
    return "".join(chars)


class StringComparison(str, enum.Enum):
    """How two strings are compared.

    * ``ORDINAL*`` compare code points as-is.
    * ``*_CULTURE*`` compare NFC-normalised text, so canonically
      equivalent strings (``"é"`` vs ``"e\\u0301"``) are equal.
    * ``ORDINAL_IGNORE_CASE`` uppercases one character at a time, so the
      length never changes (``"ß"`` does not match ``"SS"``).
    * Culture ``*_IGNORE_CASE`` modes additionally casefold both sides.

    No locale tables are loaded: ``CURRENT_CULTURE`` behaves exactly like
    ``INVARIANT_CULTURE``.
    """

    ORDINAL = "ordinal"
    ORDINAL_IGNORE_CASE = "ordinal_ignore_case"
    INVARIANT_CULTURE = "invariant_culture"
    INVARIANT_CULTURE_IGNORE_CASE = "invariant_culture_ignore_case"
    CURRENT_CULTURE = "current_culture"
    CURRENT_CULTURE_IGNORE_CASE = "current_culture_ignore_case"

    @property
    def ignore_case(self) -> bool:
        return self.value.endswith("_ignore_case")

    @property
    def culture_aware(self) -> bool:
        return not self.value.startswith("ordinal")

    def normalize(self, value: str) -> str:
        """Project ``value`` into the form compared under this mode."""
        if self.culture_aware:
            value = unicodedata.normalize("NFC", value)
        if self.ignore_case:
            # Ordinal keeps one code point per code point; culture folds fully.
            value = value.casefold() if self.culture_aware else _simple_upper(value)
        return value

    def equals(self, left: str | None, right: str | None) -> bool:
        if left is None or right is None:
            return False
        return self.normalize(left) == self.normalize(right)

    def starts_with(self, value: str, prefix: str) -> bool:
        return self.normalize(value).startswith(self.normalize(prefix))

    def ends_with(self, value: str, suffix: str) -> bool:
        return self.normalize(value).endswith(self.normalize(suffix))

    def contains(self, value: str, part: str) -> bool:
        return self.normalize(part) in self.normalize(value)


DEFAULT_COMPARISON = StringComparison.INVARIANT_CULTURE
