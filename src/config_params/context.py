from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from config_params.document import ConfigValue
from config_params.storage import ConfigStorageProtocol, MemoryStorage, xml_storage

logger = logging.getLogger("config_params.context")
logger.addHandler(logging.NullHandler())

XML_PATH_ENV = "CONFIG_PARAMS_XML_PATH"
WRITE_THROUGH_ENV = "CONFIG_PARAMS_WRITE_THROUGH"


class ConfigContext:
    """
    Composition root for configuration: owns the active storage.

    Parameters created with ``context=...`` read and write through that
    context; the rest use :func:`default_context`. Tests build their own
    context rather than touching the default one.
    """

    def __init__(self, storage: Optional[ConfigStorageProtocol] = None) -> None:
        if storage is None:
            storage = MemoryStorage()
        if not isinstance(storage, ConfigStorageProtocol):
            raise TypeError("storage must provide get/set_value/refresh/flush")
        self._storage: ConfigStorageProtocol = storage
        logger.debug("ConfigContext init storage=%r", storage)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ConfigContext":
        """
        Build a context from ``CONFIG_PARAMS_XML_PATH`` and
        ``CONFIG_PARAMS_WRITE_THROUGH``. Without a path the context is memory
        only; with one, the file is loaded straight away.
        """
        if environ is None:
            environ = os.environ
        path = environ.get(XML_PATH_ENV, "")
        if not path:
            logger.debug("%s not set; using memory-only storage", XML_PATH_ENV)
            return cls()
        write_through = environ.get(WRITE_THROUGH_ENV, "") == "1"
        context = cls(xml_storage(path, write_through=write_through))
        context.refresh()
        logger.info("Config loaded from %s (write_through=%s)", path, write_through)
        return context

    @property
    def storage(self) -> ConfigStorageProtocol:
        return self._storage

    def replace_storage(self, storage: ConfigStorageProtocol) -> None:
        if not isinstance(storage, ConfigStorageProtocol):
            raise TypeError("storage must provide get/set_value/refresh/flush")
        logger.info("ConfigContext storage replaced: %r -> %r", self._storage, storage)
        self._storage = storage

    def get(self, name: str) -> Optional[ConfigValue]:
        return self._storage.get(name)

    def set(self, name: str, value: str, type: Optional[str] = None) -> None:
        self._storage.set_value(name, value, type)

    def refresh(self) -> None:
        self._storage.refresh()

    def flush(self) -> None:
        self._storage.flush()

    def __repr__(self) -> str:
        return f"<ConfigContext storage={self._storage!r}>"


_default = ConfigContext()


def default_context() -> ConfigContext:
    """The context used by parameters created without one."""
    return _default
