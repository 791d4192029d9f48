from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

logger = logging.getLogger("config_params.document")
logger.addHandler(logging.NullHandler())

__all__ = ["ConfigItem", "ConfigValue", "ConfigDocument"]


class ConfigItem:
    """
    A single named entry. ``type`` is advisory and ``value`` is always raw text.

    ``name`` is fixed at construction: documents index items by it.
    """

    __slots__ = ("_name", "type", "value")

    def __init__(self, name: str, type: str = "", value: str = "") -> None:
        self._name = name
        self.type = type
        self.value = value

    @property
    def name(self) -> str:
        return self._name

    def as_value(self) -> "ConfigValue":
        return ConfigValue(name=self._name, type=self.type, value=self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigItem):
            return NotImplemented
        return (self._name, self.type, self.value) == (other._name, other.type, other.value)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ConfigItem(name={self._name!r}, type={self.type!r}, value={self.value!r})"


@dataclass(frozen=True)
class ConfigValue:
    """Read-only snapshot of a :class:`ConfigItem` handed out by storages."""

    name: str
    type: str
    value: str


class ConfigDocument:
    """
    Ordered collection of :class:`ConfigItem` with case-insensitive lookup.

    Names are stored as given but compared case-insensitively. A second item
    whose name only differs by case is never created; ``find_or_create`` returns
    the existing one instead.
    """

    def __init__(self, items: Iterable[ConfigItem] = ()) -> None:
        self._items: List[ConfigItem] = []
        self._index: Dict[str, ConfigItem] = {}
        for item in items:
            self._append(item)

    @staticmethod
    def _canon(name: str) -> str:
        return name.casefold()

    def _append(self, item: ConfigItem) -> bool:
        key = self._canon(item.name)
        if key in self._index:
            logger.warning(
                "Dropping duplicate config item %r; %r already present",
                item.name,
                self._index[key].name,
            )
            return False
        self._items.append(item)
        self._index[key] = item
        return True

    def find(self, name: str) -> Optional[ConfigItem]:
        return self._index.get(self._canon(name))

    def find_or_create(self, name: str) -> ConfigItem:
        item = self.find(name)
        if item is None:
            item = ConfigItem(name=name)
            self._append(item)
            logger.debug("Created config item %r", name)
        return item

    def items(self) -> Tuple[ConfigItem, ...]:
        return tuple(self._items)

    def copy(self) -> "ConfigDocument":
        return ConfigDocument(ConfigItem(i.name, i.type, i.value) for i in self._items)

    def triples(self) -> frozenset:
        """Order-insensitive content of the document as ``(name, type, value)`` tuples."""
        return frozenset((i.name, i.type, i.value) for i in self._items)

    def __iter__(self) -> Iterator[ConfigItem]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._canon(name) in self._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigDocument):
            return NotImplemented
        return self.triples() == other.triples()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"<ConfigDocument items={len(self._items)}>"
