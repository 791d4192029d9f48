from typing import Iterable, Optional, Protocol, Tuple

from typing_extensions import runtime_checkable

from config_params.document import ConfigDocument, ConfigValue


@runtime_checkable
class PersistenceBackendProtocol(Protocol):
    def save(self, document: ConfigDocument) -> None: ...

    def load(self) -> ConfigDocument: ...


@runtime_checkable
class ConfigStorageProtocol(Protocol):
    @property
    def is_read_only(self) -> bool: ...

    def get(self, name: str) -> Optional[ConfigValue]: ...

    def get_many(self, names: Iterable[str]) -> Tuple[Optional[ConfigValue], ...]: ...

    def set_value(self, name: str, value: str, type: Optional[str] = None) -> None: ...

    def refresh(self) -> None: ...

    def flush(self) -> None: ...
