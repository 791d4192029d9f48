import types

import pytest

from config_params import Int32Parameter, ParameterCollection, StringParameter
from config_params.exceptions import ConfigDuplicateError


def test_add_get_and_contains_case_insensitive(context):
    params = ParameterCollection()
    p = Int32Parameter("Retries", context=context)
    params.add(p)

    assert params.get("retries") is p
    assert "RETRIES" in params
    assert p in params
    assert len(params) == 1
    assert params.get("missing") is None


def test_adding_equal_parameter_twice_is_allowed(context):
    params = ParameterCollection([Int32Parameter("a", context=context)])
    params.add(Int32Parameter("a", context=context))
    assert len(params) == 1


def test_different_parameter_with_same_name_is_duplicate(context):
    params = ParameterCollection([Int32Parameter("a", context=context)])
    with pytest.raises(ConfigDuplicateError):
        params.add(StringParameter("A", context=context))


def test_add_rejects_non_parameters():
    with pytest.raises(TypeError):
        ParameterCollection().add("not a parameter")


def test_remove_and_clear(context):
    a = Int32Parameter("a", context=context)
    b = StringParameter("b", context=context)
    params = ParameterCollection([a, b])
    assert params.remove(a) is True
    assert params.remove(a) is False
    assert params.names() == ("b",)
    params.clear()
    assert len(params) == 0


def test_add_from_module_collects_public_parameters(context):
    module = types.ModuleType("app_settings")
    module.TIMEOUT = Int32Parameter("Timeout", context=context)
    module.HOST = StringParameter("Host", context=context)
    module._PRIVATE = StringParameter("Private", context=context)
    module.OTHER = "not a parameter"

    params = ParameterCollection()
    found = params.add_from_module(module)
    assert {p.name for p in found} == {"Timeout", "Host"}
    assert params.names() == ("Host", "Timeout")
    assert "Private" not in params
