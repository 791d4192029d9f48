from __future__ import annotations

from config_params.storage.adaptors import ConfigStorageProtocol, PersistenceBackendProtocol
from config_params.storage.environment import EnvironmentStorage
from config_params.storage.memory import MemoryOnly, MemoryStorage, Persistence, WithPersistence
from config_params.storage.xml_file import PathLike, XmlStorage

__all__ = [
    "ConfigStorageProtocol",
    "PersistenceBackendProtocol",
    "MemoryStorage",
    "MemoryOnly",
    "WithPersistence",
    "Persistence",
    "EnvironmentStorage",
    "XmlStorage",
    "xml_storage",
]


def xml_storage(path: PathLike, *, write_through: bool = False) -> MemoryStorage:
    """Memory storage layered over the XML file at ``path``. Nothing is read until ``refresh()``."""
    return MemoryStorage(WithPersistence(XmlStorage(path)), write_through=write_through)
