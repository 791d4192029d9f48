from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Generic, Optional, TypeVar

from config_params.exceptions import ConfigValidationError, ReadOnlyConfigError

if TYPE_CHECKING:
    from config_params.context import ConfigContext
    from config_params.storage import ConfigStorageProtocol

logger = logging.getLogger("config_params.params")
logger.addHandler(logging.NullHandler())

T = TypeVar("T")

Validator = Callable[[Any], Optional[str]]

_MISSING: Any = object()


class ConfigParameter(ABC, Generic[T]):
    """
    A named configuration value of a known type.

    The value lives in the storage of a :class:`ConfigContext` as text; this
    class converts it to and from ``T``. When nothing is stored the default is
    used: ``default`` if given, else the result of ``default_factory`` (computed
    once), else the type's zero value.

    A ``derived`` callable makes the parameter read only and bypasses storage
    altogether. ``validator`` returns an error message for an unacceptable
    value, or ``None``. It is consulted by :meth:`validate`, not by
    :meth:`set_value`.

    Without an explicit ``context`` the module-level default context is used.
    """

    parameter_type: ClassVar[str] = ""
    zero_value: ClassVar[Any] = None

    def __init__(
        self,
        name: str,
        *,
        description: str = "",
        default: Any = _MISSING,
        default_factory: Optional[Callable[[], T]] = None,
        derived: Optional[Callable[[], T]] = None,
        validator: Optional[Validator] = None,
        context: Optional["ConfigContext"] = None,
    ) -> None:
        if name is None:
            raise ValueError("name must not be None")
        if default is not _MISSING and default_factory is not None:
            raise ValueError("Cannot specify both default and default_factory")
        self._name = name
        self._description = (description or "").strip()
        self._default = default
        self._default_factory = default_factory
        self._derived = derived
        self._validator = validator
        self._context = context

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def summary(self) -> str:
        """First line of the description."""
        if "\n" in self._description:
            return self._description.splitlines()[0].strip()
        return self._description

    @property
    def context(self) -> "ConfigContext":
        if self._context is not None:
            return self._context
        from config_params.context import default_context

        return default_context()

    @property
    def storage(self) -> "ConfigStorageProtocol":
        return self.context.storage

    @property
    def is_derived(self) -> bool:
        return self._derived is not None

    @property
    def is_read_only(self) -> bool:
        return self.is_derived or self.storage.is_read_only

    @property
    def default_value(self) -> T:
        if self._default is _MISSING:
            if self._default_factory is None:
                return self.zero_value
            self._default = self._default_factory()
        return self._default

    @property
    def value(self) -> T:
        if self._derived is not None:
            return self._derived()
        stored = self.context.get(self._name)
        if stored is None:
            return self.default_value
        try:
            return self.convert_from_string(stored.value)
        except (ValueError, TypeError) as e:
            logger.error(
                "Stored value %r for %r is not a valid %s value", stored.value, self._name, self.parameter_type
            )
            raise ConfigValidationError(
                {self._name: f"Not a valid {self.parameter_type} value."},
                key=self._name,
                value=stored.value,
            ) from e

    def validate(self, value: T) -> Optional[str]:
        if self._validator is None:
            return None
        return self._validator(value)

    def validate_text(self, proposed: str) -> Optional[str]:
        try:
            value = self.convert_from_string(proposed)
        except (ValueError, TypeError):
            return f"Not a valid {self.parameter_type} value."
        return self.validate(value)

    def set_value(self, value: T) -> None:
        if self.is_read_only:
            logger.error("Attempted to write to read only config parameter %r", self._name)
            raise ReadOnlyConfigError("Attempt to write to read only config parameter", parameter=self)
        text = self.convert_to_string(value)
        if text is None:
            text = ""
        current = self.context.get(self._name)
        if current is not None and current.value == text:
            return
        self.context.set(self._name, text, self.parameter_type)
        logger.debug("Config parameter %r set", self._name)

    def set_value_text(self, text: str) -> None:
        self.set_value(self.convert_from_string(text))

    def get_value_text(self) -> Optional[str]:
        return self.convert_to_string(self.value)

    def get_default_value_text(self) -> Optional[str]:
        return self.convert_to_string(self.default_value)

    def get_display_text(self) -> Optional[str]:
        return self.convert_to_display_string(self.value)

    @abstractmethod
    def convert_from_string(self, text: str) -> T:
        """Convert stored text to ``T``. Raises ``ValueError`` for text of the wrong format."""

    @abstractmethod
    def convert_to_string(self, value: T) -> Optional[str]: ...

    def convert_to_display_string(self, value: T) -> Optional[str]:
        return self.convert_to_string(value)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ConfigParameter):
            return NotImplemented
        return self._name == other._name and self.parameter_type == other.parameter_type

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self._name!r} type={self.parameter_type!r}>"


def valid_range(lower: int, upper: int) -> Validator:
    """Validator accepting numbers in ``[lower, upper]``."""

    def check(value: Any) -> Optional[str]:
        if lower <= value <= upper:
            return None
        return f"Value should be in the range {lower} to {upper} inclusive"

    return check
