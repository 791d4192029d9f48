import pytest

from config_params.document import ConfigDocument, ConfigItem, ConfigValue
from config_params.storage import (
    ConfigStorageProtocol,
    MemoryOnly,
    MemoryStorage,
    WithPersistence,
    XmlStorage,
    xml_storage,
)
from config_params.storage import xml_file


class InMemoryBackend:
    def __init__(self, document=None):
        self.document = document if document is not None else ConfigDocument()
        self.loads = 0
        self.saves = 0

    def save(self, document):
        self.saves += 1
        self.document = document.copy()

    def load(self):
        self.loads += 1
        return self.document.copy()


def test_memory_only_storage_starts_empty():
    storage = MemoryStorage()
    assert isinstance(storage, ConfigStorageProtocol)
    assert isinstance(storage.persistence, MemoryOnly)
    assert storage.is_loaded is False
    assert storage.is_read_only is False
    assert storage.get("anything") is None
    assert storage.snapshot() is None


def test_set_value_is_visible_immediately_and_case_insensitive():
    storage = MemoryStorage()
    storage.set_value("Int32", "42", "Int32")
    assert storage.is_loaded is True
    assert storage.get("int32") == ConfigValue("Int32", "Int32", "42")

    storage.set_value("INT32", "43")
    assert storage.get("Int32") == ConfigValue("Int32", "Int32", "43")  # type kept
    assert len(storage.snapshot()) == 1


def test_set_value_requires_text():
    storage = MemoryStorage()
    with pytest.raises(TypeError):
        storage.set_value("n", 42)


def test_get_returns_snapshot_not_live_item():
    storage = MemoryStorage()
    storage.set_value("a", "1")
    value = storage.get("a")
    storage.set_value("a", "2")
    assert value.value == "1"


def test_get_many_preserves_order_and_misses():
    storage = MemoryStorage()
    storage.set_value("a", "1")
    storage.set_value("b", "2")
    values = storage.get_many(["b", "missing", "A"])
    assert [v.value if v else None for v in values] == ["2", None, "1"]


def test_refresh_and_flush_without_persistence_are_noops():
    storage = MemoryStorage(MemoryOnly())
    storage.refresh()
    assert storage.is_loaded is False
    storage.set_value("a", "1")
    storage.refresh()
    storage.flush()
    assert storage.get("a").value == "1"


def test_get_never_loads_implicitly():
    backend = InMemoryBackend(ConfigDocument([ConfigItem("a", "", "persisted")]))
    storage = MemoryStorage(WithPersistence(backend))
    assert storage.get("a") is None
    assert backend.loads == 0

    storage.refresh()
    assert backend.loads == 1
    assert storage.get("a").value == "persisted"


def test_refresh_discards_unsaved_edits():
    backend = InMemoryBackend(ConfigDocument([ConfigItem("a", "", "v0")]))
    storage = MemoryStorage(WithPersistence(backend))
    storage.refresh()

    storage.set_value("a", "v1")
    storage.set_value("new", "x")
    assert storage.get("a").value == "v1"

    storage.refresh()
    assert storage.get("a").value == "v0"
    assert storage.get("new") is None


def test_flush_then_refresh_keeps_value():
    backend = InMemoryBackend(ConfigDocument([ConfigItem("a", "", "v0")]))
    storage = MemoryStorage(WithPersistence(backend))
    storage.refresh()

    storage.set_value("a", "v1")
    storage.flush()
    storage.refresh()
    assert storage.get("a").value == "v1"
    assert backend.document.find("a").value == "v1"


def test_flush_while_empty_saves_empty_document():
    backend = InMemoryBackend(ConfigDocument([ConfigItem("a", "", "v0")]))
    storage = MemoryStorage(WithPersistence(backend))
    storage.flush()
    assert backend.saves == 1
    assert len(backend.document) == 0


def test_write_through_flushes_every_set():
    backend = InMemoryBackend()
    storage = MemoryStorage(WithPersistence(backend), write_through=True)
    assert storage.write_through is True
    storage.set_value("a", "1")
    storage.set_value("b", "2")
    assert backend.saves == 2
    storage.refresh()
    assert storage.get("b").value == "2"


def test_invalid_persistence_arguments():
    with pytest.raises(TypeError):
        MemoryStorage(InMemoryBackend())  # must be wrapped in WithPersistence

    class NotABackend:
        def load(self):
            return ConfigDocument()

    with pytest.raises(TypeError):
        MemoryStorage(WithPersistence(NotABackend()))


def test_backend_load_returning_wrong_type_raises():
    class BadBackend:
        def save(self, document):
            pass

        def load(self):
            return {"a": "1"}

    storage = MemoryStorage(WithPersistence(BadBackend()))
    with pytest.raises(TypeError):
        storage.refresh()
    assert storage.is_loaded is False


def test_backend_failures_propagate():
    class FailingBackend:
        def save(self, document):
            raise RuntimeError("Save failed")

        def load(self):
            raise RuntimeError("Load failed")

    storage = MemoryStorage(WithPersistence(FailingBackend()))
    with pytest.raises(RuntimeError, match="Load failed"):
        storage.refresh()
    with pytest.raises(RuntimeError, match="Save failed"):
        storage.flush()


def test_snapshot_is_a_copy():
    storage = MemoryStorage()
    storage.set_value("a", "1")
    snap = storage.snapshot()
    snap.find("a").value = "changed"
    assert storage.get("a").value == "1"


def test_xml_storage_factory_composes_memory_over_file(config_path):
    storage = xml_storage(config_path)
    assert isinstance(storage.persistence, WithPersistence)
    assert isinstance(storage.persistence.backend, XmlStorage)
    assert not config_path.exists()

    storage.refresh()  # first run: no file yet
    assert storage.is_loaded is True
    assert storage.get("a") is None

    storage.set_value("a", "<&>", "String")
    assert not config_path.exists()
    storage.flush()
    assert xml_file.load(config_path).find("a").value == "<&>"

    storage.set_value("a", "unsaved")
    storage.refresh()
    assert storage.get("a").value == "<&>"
