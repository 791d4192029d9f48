from __future__ import annotations

import logging
import os
from typing import Iterable, Mapping, Optional, Tuple

from config_params.document import ConfigValue
from config_params.exceptions import ReadOnlyConfigError

logger = logging.getLogger("config_params.storage")
logger.addHandler(logging.NullHandler())


class EnvironmentStorage:
    """
    Read-only storage backed by environment variables.

    ``get("Int32")`` looks up ``prefix + "Int32"``, falling back to a
    case-insensitive match so that ``APP_INT32`` is found as well.
    """

    def __init__(self, prefix: str = "", environ: Optional[Mapping[str, str]] = None) -> None:
        self._prefix = prefix
        self._environ = os.environ if environ is None else environ

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def is_read_only(self) -> bool:
        return True

    def get(self, name: str) -> Optional[ConfigValue]:
        key = self._prefix + name
        value = self._environ.get(key)
        if value is None:
            wanted = key.casefold()
            for env_key, env_value in self._environ.items():
                if env_key.casefold() == wanted:
                    value = env_value
                    break
        if value is None:
            return None
        return ConfigValue(name=name, type="", value=value)

    def get_many(self, names: Iterable[str]) -> Tuple[Optional[ConfigValue], ...]:
        return tuple(self.get(name) for name in names)

    def set_value(self, name: str, value: str, type: Optional[str] = None) -> None:
        logger.error("Attempted to set %r on read-only environment storage", name)
        raise ReadOnlyConfigError(f"Environment storage is read only; cannot set {name!r}")

    def refresh(self) -> None:
        pass

    def flush(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"<EnvironmentStorage prefix={self._prefix!r}>"
