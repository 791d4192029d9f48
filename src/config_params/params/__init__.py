from __future__ import annotations

from .base import ConfigParameter, Validator, valid_range
from .collection import ParameterCollection
from .timespan import format_timespan, parse_timespan
from .types import (
    BooleanParameter,
    DateParameter,
    DirectoryParameter,
    FilePathParameter,
    Int32Parameter,
    ParameterType,
    PasswordParameter,
    StringParameter,
    TimeSpanParameter,
    UrlParameter,
)

__all__ = [
    "ConfigParameter",
    "ParameterCollection",
    "ParameterType",
    "Validator",
    "valid_range",
    "format_timespan",
    "parse_timespan",
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
