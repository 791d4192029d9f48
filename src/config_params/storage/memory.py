from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from config_params.document import ConfigDocument, ConfigValue
from config_params.storage.adaptors import PersistenceBackendProtocol

logger = logging.getLogger("config_params.storage")
logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class MemoryOnly:
    """No persistence: the in-memory document is the only copy."""


@dataclass(frozen=True)
class WithPersistence:
    """Refresh and flush go through ``backend``."""

    backend: PersistenceBackendProtocol


Persistence = Union[MemoryOnly, WithPersistence]


class MemoryStorage:
    """
    In-memory cache of one :class:`ConfigDocument`.

    Reads and writes only ever touch the in-memory document. With a
    :class:`WithPersistence` backend, ``refresh()`` replaces that document with
    the persisted one (dropping unsaved edits) and ``flush()`` writes it back.
    With :class:`MemoryOnly` both are no-ops.

    The storage starts out empty (nothing loaded); the first ``set_value`` or
    ``refresh`` moves it to the loaded state.
    """

    def __init__(
        self,
        persistence: Optional[Persistence] = None,
        *,
        write_through: bool = False,
    ) -> None:
        if persistence is None:
            persistence = MemoryOnly()
        if not isinstance(persistence, (MemoryOnly, WithPersistence)):
            raise TypeError("persistence must be MemoryOnly() or WithPersistence(backend)")
        if isinstance(persistence, WithPersistence) and not isinstance(
            persistence.backend, PersistenceBackendProtocol
        ):
            raise TypeError("backend must provide load() and save(document)")
        self._persistence: Persistence = persistence
        self._write_through = write_through
        self._document: Optional[ConfigDocument] = None
        logger.debug(
            "MemoryStorage init persistence=%r write_through=%s", persistence, write_through
        )

    @property
    def persistence(self) -> Persistence:
        return self._persistence

    @property
    def write_through(self) -> bool:
        return self._write_through

    @property
    def is_loaded(self) -> bool:
        return self._document is not None

    @property
    def is_read_only(self) -> bool:
        return False

    def get(self, name: str) -> Optional[ConfigValue]:
        if self._document is None:
            return None
        item = self._document.find(name)
        return None if item is None else item.as_value()

    def get_many(self, names: Iterable[str]) -> Tuple[Optional[ConfigValue], ...]:
        return tuple(self.get(name) for name in names)

    def set_value(self, name: str, value: str, type: Optional[str] = None) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Config value for {name!r} must be a string, got {_type_name(value)}")
        if self._document is None:
            self._document = ConfigDocument()
        item = self._document.find_or_create(name)
        item.value = value
        if type is not None:
            item.type = type
        logger.debug("MemoryStorage.set_value name=%r type=%r", name, item.type)
        if self._write_through:
            self.flush()

    def refresh(self) -> None:
        if isinstance(self._persistence, MemoryOnly):
            return
        try:
            document = self._persistence.backend.load()
        except Exception as e:
            logger.error("Error loading config from persistence backend: %s", e)
            raise
        if not isinstance(document, ConfigDocument):
            logger.error("Persistence backend load() did not return a ConfigDocument")
            raise TypeError("Persistence backend load() must return a ConfigDocument")
        self._document = document
        logger.debug("MemoryStorage refreshed %d items from %r", len(document), self._persistence.backend)

    def flush(self) -> None:
        if isinstance(self._persistence, MemoryOnly):
            return
        document = self._document if self._document is not None else ConfigDocument()
        try:
            self._persistence.backend.save(document)
        except Exception as e:
            logger.error("Error saving config to persistence backend: %s", e)
            raise
        logger.debug("MemoryStorage flushed %d items to %r", len(document), self._persistence.backend)

    def snapshot(self) -> Optional[ConfigDocument]:
        return None if self._document is None else self._document.copy()

    def __repr__(self) -> str:
        state = "loaded" if self._document is not None else "empty"
        return f"<MemoryStorage {state} persistence={self._persistence!r}>"


def _type_name(value: object) -> str:
    return type(value).__name__
