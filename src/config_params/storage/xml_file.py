"""
XML file persistence for a :class:`~config_params.document.ConfigDocument`.

The file format is deliberately plain::

    <?xml version='1.0' encoding='utf-8'?>
    <config>
      <item name="NAME" type="TYPE">VALUE</item>
    </config>

``type`` is optional and the element text is the raw value. A missing file is
treated as an empty document so the first run of an application needs no
setup; anything that exists but does not parse is a :class:`ConfigFormatError`.
"""

from __future__ import annotations

import logging
import os
import re
import tempfile
import xml.etree.ElementTree as ET
from typing import Union

from config_params.document import ConfigDocument, ConfigItem
from config_params.exceptions import ConfigFormatError, ConfigIOError

logger = logging.getLogger("config_params.storage")
logger.addHandler(logging.NullHandler())

__all__ = ["load", "save", "XmlStorage"]

PathLike = Union[str, "os.PathLike[str]"]

ROOT_TAG = "config"
ITEM_TAG = "item"
INDENT = "  "


# Characters allowed by XML 1.0; anything else cannot be written or read back.
_INVALID_XML_CHARS = re.compile(r"[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def _check_path(path: PathLike) -> str:
    if path is None:
        raise ValueError("path must not be None")
    path = os.fspath(path)
    if not path:
        raise ValueError("path must not be empty")
    return path


def load(path: PathLike) -> ConfigDocument:
    path = _check_path(path)
    try:
        with open(path, "rb") as stream:
            tree = ET.parse(stream)
    except FileNotFoundError:
        logger.debug("Config file %s does not exist; starting with an empty document", path)
        return ConfigDocument()
    except ET.ParseError as e:
        logger.error("Config file %s is not well-formed XML: %s", path, e)
        raise ConfigFormatError(f"Malformed XML: {e}", path) from e
    except OSError as e:
        logger.error("Cannot read config file %s: %s", path, e)
        raise ConfigIOError(f"Cannot read config file: {e}", path) from e

    document = _from_element(tree.getroot(), path)
    logger.debug("Loaded %d config items from %s", len(document), path)
    return document


def _from_element(root: ET.Element, path: str) -> ConfigDocument:
    if root.tag != ROOT_TAG:
        logger.error("Config file %s has root element %r, expected %r", path, root.tag, ROOT_TAG)
        raise ConfigFormatError(f"Expected root element <{ROOT_TAG}>, found <{root.tag}>", path)

    document = ConfigDocument()
    for child in root:
        if child.tag != ITEM_TAG:
            logger.debug("Ignoring unexpected element <%s> in %s", child.tag, path)
            continue
        name = child.get("name")
        if name is None:
            logger.error("Config file %s has an <item> without a name attribute", path)
            raise ConfigFormatError("<item> element is missing the 'name' attribute", path)
        if len(child):
            logger.error("Config item %r in %s contains child elements", name, path)
            raise ConfigFormatError(f"<item name={name!r}> must contain text only", path)
        if name in document:
            logger.warning("Ignoring duplicate config item %r in %s", name, path)
            continue
        item = document.find_or_create(name)
        item.type = child.get("type") or ""
        item.value = child.text or ""
    return document


def _check_text(item: ConfigItem, field: str, text: str, path: str) -> None:
    bad = _INVALID_XML_CHARS.search(text)
    if bad is not None:
        logger.error(
            "Config item %r has character %r in its %s that XML cannot hold", item.name, bad.group(), field
        )
        raise ConfigFormatError(
            f"Config item {item.name!r}: {field} contains {bad.group()!r}, which XML cannot represent",
            path,
        )


def _serialize(document: ConfigDocument, path: str) -> bytes:
    root = ET.Element(ROOT_TAG)
    for item in sorted(document, key=lambda i: i.name.casefold()):
        _check_text(item, "name", item.name, path)
        _check_text(item, "type", item.type, path)
        _check_text(item, "value", item.value, path)
        element = ET.SubElement(root, ITEM_TAG, {"name": item.name})
        if item.type:
            element.set("type", item.type)
        if item.value:
            element.text = item.value
    ET.indent(root, space=INDENT)
    data = ET.tostring(root, encoding="utf-8", xml_declaration=True)
    # Parsers turn a literal CR into LF, and a literal tab in an attribute into a space;
    # character references survive both.
    return data.replace(b"\r", b"&#13;").replace(b"\t", b"&#9;") + b"\n"


def save(path: PathLike, document: ConfigDocument) -> None:
    path = _check_path(path)
    directory = os.path.dirname(os.path.abspath(path))
    data = _serialize(document, path)
    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb", dir=directory, prefix=".config-", suffix=".tmp", delete=False
        ) as stream:
            tmp_path = stream.name
            stream.write(data)
        os.replace(tmp_path, path)
    except OSError as e:
        logger.error("Cannot write config file %s: %s", path, e)
        if tmp_path is not None and os.path.exists(tmp_path):
            try:
                os.remove(tmp_path)
            except OSError:
                logger.debug("Could not remove temporary file %s", tmp_path)
        raise ConfigIOError(f"Cannot write config file: {e}", path) from e
    logger.debug("Saved %d config items to %s", len(document), path)


class XmlStorage:
    """Persistence backend binding :func:`load`/:func:`save` to one file path."""

    def __init__(self, path: PathLike) -> None:
        self._path = _check_path(path)

    @property
    def path(self) -> str:
        return self._path

    def load(self) -> ConfigDocument:
        return load(self._path)

    def save(self, document: ConfigDocument) -> None:
        save(self._path, document)

    def __repr__(self) -> str:
        return f"<XmlStorage path={self._path!r}>"
