from __future__ import annotations

import datetime
from typing import ClassVar, Optional
from urllib.parse import urlsplit

from .base import ConfigParameter
from .timespan import format_timespan, parse_timespan

__all__ = [
    "ParameterType",
    "StringParameter",
    "DirectoryParameter",
    "FilePathParameter",
    "PasswordParameter",
    "Int32Parameter",
    "BooleanParameter",
    "UrlParameter",
    "DateParameter",
    "TimeSpanParameter",
]

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_TRUE_WORDS = ("y", "yes", "t", "true", "1")


class ParameterType:
    """Type tags written alongside each stored value."""

    STRING = "String"
    INT32 = "Int32"
    BOOLEAN = "Boolean"
    URL = "URL"
    PASSWORD = "Password"
    DIRECTORY = "Directory"
    FILE_PATH = "FilePath"
    DATE = "Date"
    TIMESPAN = "TimeSpan"


class StringParameter(ConfigParameter[Optional[str]]):
    parameter_type: ClassVar[str] = ParameterType.STRING

    def convert_from_string(self, text: str) -> Optional[str]:
        return text

    def convert_to_string(self, value: Optional[str]) -> Optional[str]:
        return None if value is None else str(value)


class DirectoryParameter(StringParameter):
    parameter_type: ClassVar[str] = ParameterType.DIRECTORY


class FilePathParameter(StringParameter):
    parameter_type: ClassVar[str] = ParameterType.FILE_PATH


class PasswordParameter(StringParameter):
    parameter_type: ClassVar[str] = ParameterType.PASSWORD

    def convert_to_display_string(self, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        return "********"


class Int32Parameter(ConfigParameter[int]):
    parameter_type: ClassVar[str] = ParameterType.INT32
    zero_value: ClassVar[int] = 0

    def convert_from_string(self, text: str) -> int:
        value = int(text.strip())
        if not INT32_MIN <= value <= INT32_MAX:
            raise ValueError(f"{value} is outside the 32-bit integer range")
        return value

    def convert_to_string(self, value: int) -> str:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{self.name} expects an int, got {type(value).__name__}")
        return str(value)


class BooleanParameter(ConfigParameter[bool]):
    parameter_type: ClassVar[str] = ParameterType.BOOLEAN
    zero_value: ClassVar[bool] = False

    def convert_from_string(self, text: str) -> bool:
        # Anything unrecognised, blank included, reads as False.
        word = (text or "").strip().lower()
        if word in _TRUE_WORDS:
            return True
        return False

    def convert_to_string(self, value: bool) -> str:
        return "1" if value else "0"


class UrlParameter(ConfigParameter[Optional[str]]):
    """Absolute URL, kept as a string."""

    parameter_type: ClassVar[str] = ParameterType.URL

    def convert_from_string(self, text: str) -> str:
        text = text.strip()
        parts = urlsplit(text)
        if not parts.scheme or not (parts.netloc or parts.path):
            raise ValueError(f"{text!r} is not an absolute URL")
        return text

    def convert_to_string(self, value: Optional[str]) -> Optional[str]:
        return None if value is None else str(value)


class DateParameter(ConfigParameter[Optional[datetime.date]]):
    """A date without a time component, stored as ``YYYY-MM-DD``."""

    parameter_type: ClassVar[str] = ParameterType.DATE

    def convert_from_string(self, text: str) -> datetime.date:
        text = text.strip()
        try:
            return datetime.date.fromisoformat(text)
        except ValueError:
            return datetime.datetime.fromisoformat(text).date()

    def convert_to_string(self, value: Optional[datetime.date]) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, datetime.datetime):
            value = value.date()
        return value.strftime("%Y-%m-%d")


class TimeSpanParameter(ConfigParameter[datetime.timedelta]):
    """A period of time, stored in readable form such as ``30s`` or ``2h``."""

    parameter_type: ClassVar[str] = ParameterType.TIMESPAN
    zero_value: ClassVar[datetime.timedelta] = datetime.timedelta(0)

    def convert_from_string(self, text: str) -> datetime.timedelta:
        value = parse_timespan(text)
        if value is None:
            raise ValueError("Invalid timespan value")
        return value

    def convert_to_string(self, value: datetime.timedelta) -> str:
        return format_timespan(value)
