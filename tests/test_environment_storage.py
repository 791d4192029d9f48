import pytest

from config_params.document import ConfigValue
from config_params.exceptions import ReadOnlyConfigError
from config_params.storage import ConfigStorageProtocol, EnvironmentStorage


def test_reads_prefixed_variables():
    storage = EnvironmentStorage(prefix="APP_", environ={"APP_Host": "example.org", "APP_PORT": "80"})
    assert isinstance(storage, ConfigStorageProtocol)
    assert storage.is_read_only is True
    assert storage.get("Host") == ConfigValue("Host", "", "example.org")
    assert storage.get("port").value == "80"
    assert storage.get("missing") is None
    assert [v.value if v else None for v in storage.get_many(["Host", "nope"])] == ["example.org", None]


def test_defaults_to_process_environment(monkeypatch):
    monkeypatch.setenv("CONFIG_PARAMS_TEST_VALUE", "x")
    assert EnvironmentStorage().get("CONFIG_PARAMS_TEST_VALUE").value == "x"


def test_is_read_only():
    storage = EnvironmentStorage(environ={})
    with pytest.raises(ReadOnlyConfigError):
        storage.set_value("a", "1")
    storage.refresh()
    storage.flush()
