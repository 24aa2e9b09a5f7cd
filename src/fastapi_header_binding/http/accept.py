"""Structured representation of Accept-family header values.

``Accept``, ``Accept-Charset``, ``Accept-Encoding`` and ``Accept-Language``
share one grammar: a comma separated list of items, each with optional
``;``-separated parameters, one of which may be the ``q`` weight.

Example
-------
.. code-block:: python

    header = AcceptHeader.from_string("text/html,application/xml;q=0.9,*/*;q=0.8")
    [item.value for item in header.all()]
    # ['text/html', 'application/xml', '*/*']
    header.get("application/xml").quality
    # 0.9
"""
from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

# A run of characters that are either not the separator or part of a
# double-quoted string (which may itself contain the separator).
_QUOTED_AWARE = r'(?:[^{sep}"]|"(?:\\.|[^"\\])*")+'
_COMMA_SPLIT = re.compile(_QUOTED_AWARE.format(sep=","))
_SEMICOLON_SPLIT = re.compile(_QUOTED_AWARE.format(sep=";"))


def _split(value: str, pattern: re.Pattern[str]) -> list[str]:
    return [part.strip() for part in pattern.findall(value) if part.strip()]


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return re.sub(r"\\(.)", r"\1", value[1:-1])
    return value


_QUALITY = re.compile(r"\d+(?:\.\d*)?")


def _parse_quality(value: str) -> float:
    """Read a ``q`` weight; anything but a plain decimal in 0..1 counts as 0."""
    if not _QUALITY.fullmatch(value):
        return 0.0
    quality = float(value)
    return quality if quality <= 1 else 0.0


class AcceptHeaderItem:
    """A single weighted item of an Accept-family header."""

    def __init__(
        self,
        value: str,
        quality: float = 1.0,
        index: int = 0,
        attributes: dict[str, str] | None = None,
    ) -> None:
        self.value = value
        self.quality = quality
        self.index = index
        self.attributes: dict[str, str] = {}
        for key, attr in (attributes or {}).items():
            self.set_attribute(key, attr)

    @classmethod
    def from_string(cls, item_value: str, index: int = 0) -> AcceptHeaderItem:
        """Build an item from ``value;param=x;q=0.5`` notation."""
        head = _SEMICOLON_SPLIT.match(item_value)
        value = head.group().strip() if head else ""
        params = _split(item_value[head.end() if head else 0 :], _SEMICOLON_SPLIT)
        item = cls(value, index=index)
        for param in params:
            key, _, attr = param.partition("=")
            item.set_attribute(key.strip().lower(), _unquote(attr.strip()))
        return item

    def set_attribute(self, name: str, value: str) -> None:
        if name.lower() == "q":
            self.quality = _parse_quality(value)
        else:
            self.attributes[name] = value

    def get_attribute(self, name: str, default: str | None = None) -> str | None:
        return self.attributes.get(name, default)

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def __str__(self) -> str:
        parts = [self.value]
        parts.extend(f"{key}={attr}" for key, attr in self.attributes.items())
        if self.quality < 1:
            parts.append(f"q={self.quality:g}")
        return ";".join(parts)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r}, index={self.index})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AcceptHeaderItem):
            return NotImplemented
        return (
            self.value == other.value
            and self.quality == other.quality
            and self.attributes == other.attributes
        )

    __hash__ = None  # type: ignore[assignment]


class AcceptHeader:
    """Ordered, weighted list of content-negotiation preferences.

    Items are keyed by value: adding an item whose value is already present
    replaces the earlier one. :meth:`all` returns items by descending quality,
    ties broken by their position in the original header.
    """

    def __init__(self, items: Iterable[AcceptHeaderItem] = ()) -> None:
        self._items: dict[str, AcceptHeaderItem] = {}
        for item in items:
            self.add(item)

    @classmethod
    def from_string(cls, header_value: str | None) -> AcceptHeader:
        """Parse a raw header value.

        Empty segments (``"a,,b"``) and items without a value (``";q=1"``)
        are skipped; indices count the items actually kept.
        """
        items = (
            AcceptHeaderItem.from_string(segment)
            for segment in _split(header_value or "", _COMMA_SPLIT)
        )
        header = cls()
        for index, item in enumerate(item for item in items if item.value):
            item.index = index
            header.add(item)
        return header

    def add(self, item: AcceptHeaderItem) -> AcceptHeader:
        self._items[item.value] = item
        return self

    def has(self, value: str) -> bool:
        return value in self._items

    def get(self, value: str) -> AcceptHeaderItem | None:
        return self._items.get(value)

    def all(self) -> list[AcceptHeaderItem]:
        return sorted(self._items.values(), key=lambda item: (-item.quality, item.index))

    def values(self) -> list[str]:
        """Item values in quality order."""
        return [item.value for item in self.all()]

    def first(self) -> AcceptHeaderItem | None:
        items = self.all()
        return items[0] if items else None

    def filter(self, pattern: str | re.Pattern[str]) -> AcceptHeader:
        """Return a new header holding only the items whose value matches *pattern*."""
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        return AcceptHeader(item for item in self.all() if regex.search(item.value))

    def __iter__(self) -> Iterator[AcceptHeaderItem]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, value: Any) -> bool:
        return value in self._items

    def __str__(self) -> str:
        return ",".join(str(item) for item in self.all())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AcceptHeader):
            return NotImplemented
        return list(self._items.values()) == list(other._items.values())

    __hash__ = None  # type: ignore[assignment]


__all__ = ["AcceptHeader", "AcceptHeaderItem"]
