"""Records of ``key:value;`` pairs and bare keywords packed into one string.

Fields are separated by ``;`` and a key is separated from its value by ``:``.
A literal ``;`` or ``:`` inside a key, value or keyword is written doubled.
"""

from __future__ import annotations

import re

_SEMICOLON = ";"
_DOUBLE_SEMICOLON = ";;"
_COLON = ":"
_DOUBLE_COLON = "::"

# A single colon with a non-colon character on both sides.
_KEY_SPLIT = re.compile(r"[^:]:[^:]")


def _split_fields(text: str) -> list[str]:
    """Split on single semicolons; doubled semicolons stay inside the field."""
    fields: list[str] = []
    start = 0
    search_from = 0
    while True:
        index = text.find(_SEMICOLON, search_from)
        if index == -1:
            fields.append(text[start:])
            return fields
        if index + 1 < len(text) and text[index + 1] == _SEMICOLON:
            search_from = index + 2
            continue
        fields.append(text[start:index])
        start = search_from = index + 1


def _unescape_colons(text: str) -> str:
    return text.replace(_DOUBLE_COLON, _COLON)


def _escape(text: str) -> str:
    return text.replace(_COLON, _DOUBLE_COLON).replace(_SEMICOLON, _DOUBLE_SEMICOLON)


class KeyValueRecord:
    """Key/value pairs plus an ordered list of keywords."""

    def __init__(self, text: str = "") -> None:
        self._values: dict[str, str] = {}
        self._keywords: list[str] = []
        if text:
            for field in _split_fields(text):
                self._parse_field(field)

    def _parse_field(self, field: str) -> None:
        stripped = field.strip()
        item = stripped.replace(_DOUBLE_SEMICOLON, _SEMICOLON)
        if not item:
            return
        match = _KEY_SPLIT.search(item)
        if match is None:
            self._keywords.append(_unescape_colons(item))
            return
        split_index = match.start()
        if split_index == 0:
            # A one-character key is not split off; the rest becomes a keyword.
            rest = stripped[1:]
            if rest:
                self._keywords.append(rest)
            return
        key = _unescape_colons(item[: split_index + 1].strip())
        value = _unescape_colons(item[split_index + 2 :].strip()).replace(
            _DOUBLE_SEMICOLON, _SEMICOLON
        )
        if key and value:
            self._values[key] = value
        elif key:
            self._keywords.append(key)
        elif value:
            self._keywords.append(value)

    def values(self) -> dict[str, str]:
        """Return the key/value pairs ordered by key."""
        return dict(sorted(self._values.items()))

    def keywords(self) -> list[str]:
        """Return the keywords in the order they were added."""
        return list(self._keywords)

    def value(self, key: str, default: str = "") -> str:
        """Return the value stored under ``key`` or ``default``."""
        return self._values.get(key, default)

    def contains(self, key: str) -> bool:
        """Tell whether ``key`` is present as a key or as a keyword."""
        return self.contains_key(key) or self.contains_keyword(key)

    def contains_key(self, key: str) -> bool:
        """Tell whether a value is stored under ``key``."""
        return key in self._values

    def contains_keyword(self, key: str) -> bool:
        """Tell whether ``key`` is one of the keywords."""
        return key in self._keywords

    def is_empty(self) -> bool:
        """Tell whether the record holds neither values nor keywords."""
        return not self._values and not self._keywords

    def set_key_value(self, key: str, value: str | int) -> None:
        """Store ``value`` under ``key``; integers are stored as decimal text."""
        self._values[key] = value if isinstance(value, str) else str(int(value))

    def add_keyword(self, keyword: str) -> None:
        """Append a keyword."""
        self._keywords.append(keyword)

    def create_str(self) -> str:
        """Serialise the record: pairs ordered by key, then keywords."""
        parts = [
            f"{_escape(key)}{_COLON}{_escape(value)}{_SEMICOLON}"
            for key, value in sorted(self._values.items())
        ]
        parts.extend(f"{_escape(keyword)}{_SEMICOLON}" for keyword in self._keywords)
        return "".join(parts)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyValueRecord):
            return NotImplemented
        return self._values == other._values and self._keywords == other._keywords

    def __repr__(self) -> str:
        return f"KeyValueRecord({self.create_str()!r})"