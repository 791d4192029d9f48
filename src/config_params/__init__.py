"""
config_params: named, typed configuration parameters over a pluggable storage.

- Values are stored as text in a case-insensitive name -> (type, value) document.
- MemoryStorage keeps the document in memory, optionally over an XML file.
- Typed parameters convert between stored text and Python values.
- A ConfigContext ties a storage to the parameters that use it.
"""

from __future__ import annotations

from config_params.context import ConfigContext, default_context
from config_params.document import ConfigDocument, ConfigItem, ConfigValue
from config_params.exceptions import (
    ConfigDuplicateError,
    ConfigError,
    ConfigFormatError,
    ConfigIOError,
    ConfigValidationError,
    ReadOnlyConfigError,
)
from config_params.params import (
    BooleanParameter,
    ConfigParameter,
    DateParameter,
    DirectoryParameter,
    FilePathParameter,
    Int32Parameter,
    ParameterCollection,
    ParameterType,
    PasswordParameter,
    StringParameter,
    TimeSpanParameter,
    UrlParameter,
    valid_range,
)
from config_params.registry_path import ApplicationInfo, default_base_path, sub_key_path
from config_params.storage import (
    ConfigStorageProtocol,
    EnvironmentStorage,
    MemoryOnly,
    MemoryStorage,
    PersistenceBackendProtocol,
    WithPersistence,
    XmlStorage,
    xml_storage,
)

# Default context for module-level access; applications configure it at start-up
Config = default_context()

__all__ = [
    "Config",
    "ConfigContext",
    "default_context",
    "ConfigDocument",
    "ConfigItem",
    "ConfigValue",
    "ConfigError",
    "ConfigFormatError",
    "ConfigIOError",
    "ConfigValidationError",
    "ConfigDuplicateError",
    "ReadOnlyConfigError",
    "ConfigParameter",
    "ParameterCollection",
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
    "valid_range",
    "ConfigStorageProtocol",
    "PersistenceBackendProtocol",
    "MemoryStorage",
    "MemoryOnly",
    "WithPersistence",
    "EnvironmentStorage",
    "XmlStorage",
    "xml_storage",
    "ApplicationInfo",
    "default_base_path",
    "sub_key_path",
]
