from __future__ import annotations

import logging
from types import ModuleType
from typing import Dict, Iterable, Iterator, Optional, Tuple

from config_params.exceptions import ConfigDuplicateError

from .base import ConfigParameter

logger = logging.getLogger("config_params.params")
logger.addHandler(logging.NullHandler())


class ParameterCollection:
    """Set of parameters keyed case-insensitively by name."""

    def __init__(self, parameters: Iterable[ConfigParameter] = ()) -> None:
        self._params: Dict[str, ConfigParameter] = {}
        self.add_range(parameters)

    @staticmethod
    def _canon(name: str) -> str:
        return name.casefold()

    def add(self, parameter: ConfigParameter) -> None:
        if not isinstance(parameter, ConfigParameter):
            raise TypeError(f"Expected a ConfigParameter, got {type(parameter).__name__}")
        key = self._canon(parameter.name)
        existing = self._params.get(key)
        if existing is not None and existing != parameter:
            logger.error(
                "Add failed: %r already collected as %r", parameter.name, existing
            )
            raise ConfigDuplicateError(f"Parameter {parameter.name!r} already collected as {existing!r}")
        self._params[key] = parameter
        logger.debug("Collected parameter %r", parameter)

    def add_range(self, parameters: Iterable[ConfigParameter]) -> None:
        for parameter in parameters:
            self.add(parameter)

    def add_from_module(self, module: ModuleType) -> Tuple[ConfigParameter, ...]:
        """Collect every module-level :class:`ConfigParameter` attribute of ``module``."""
        found = tuple(
            value
            for attr, value in sorted(vars(module).items())
            if not attr.startswith("_") and isinstance(value, ConfigParameter)
        )
        self.add_range(found)
        logger.debug("Collected %d parameters from %s", len(found), module.__name__)
        return found

    def get(self, name: str) -> Optional[ConfigParameter]:
        return self._params.get(self._canon(name))

    def remove(self, parameter: ConfigParameter) -> bool:
        key = self._canon(parameter.name)
        if self._params.get(key) == parameter:
            del self._params[key]
            return True
        return False

    def clear(self) -> None:
        logger.debug("Clearing parameter collection: params=%d", len(self._params))
        self._params.clear()

    def names(self) -> Tuple[str, ...]:
        return tuple(sorted((p.name for p in self._params.values()), key=str.casefold))

    def __contains__(self, item: object) -> bool:
        if isinstance(item, ConfigParameter):
            return self._params.get(self._canon(item.name)) == item
        if isinstance(item, str):
            return self._canon(item) in self._params
        return False

    def __iter__(self) -> Iterator[ConfigParameter]:
        return iter(tuple(self._params.values()))

    def __len__(self) -> int:
        return len(self._params)
