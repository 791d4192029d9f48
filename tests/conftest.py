# python
import pytest

from config_params import ConfigContext, xml_storage


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "XmlStorage.config"


@pytest.fixture
def context():
    return ConfigContext()


@pytest.fixture
def xml_context(config_path):
    return ConfigContext(xml_storage(config_path))
