import sys
import types

import pydantic
import pytest

import multibasekit
from multibasekit.conf import DEFAULTS, MultibaseConfig, Settings, settings
from multibasekit.conf.settings import _filter_by_namespace


def test_filter_by_namespace():
    mapping = {"FOO": 1, "BAR": 2, "NS_X": 3, "NS_Y": 4, "lower": 5}
    assert _filter_by_namespace(mapping, None) == {"FOO": 1, "BAR": 2, "NS_X": 3, "NS_Y": 4}
    assert _filter_by_namespace(mapping, "NS") == {"X": 3, "Y": 4}


def test_defaults_and_overrides():
    local = Settings()
    assert local["UNARY_WARN_THRESHOLD"] == DEFAULTS["UNARY_WARN_THRESHOLD"]
    assert local["TRACING_ENABLED"] is True

    local["TRACING_ENABLED"] = False
    assert local["TRACING_ENABLED"] is False
    del local["TRACING_ENABLED"]
    assert local["TRACING_ENABLED"] is True

    layered = Settings({"UNARY_WARN_THRESHOLD": 10})
    assert layered["UNARY_WARN_THRESHOLD"] == 10
    layered.update_from_mapping({"UNARY_WARN_THRESHOLD": 20, "ignored": 1})
    assert layered["UNARY_WARN_THRESHOLD"] == 20
    assert "ignored" not in layered
    layered.reset()
    assert layered["UNARY_WARN_THRESHOLD"] == 10


def test_update_from_object_and_envvar(monkeypatch):
    module = types.ModuleType("mb_conf")
    module.UNARY_WARN_THRESHOLD = 5
    module.MB_TRACING_ENABLED = False
    monkeypatch.setitem(sys.modules, "mb_conf", module)

    local = Settings()
    local.update_from_object("mb_conf")
    assert local["UNARY_WARN_THRESHOLD"] == 5

    local.update_from_object("mb_conf", namespace="MB")
    assert local["TRACING_ENABLED"] is False

    env_module = types.ModuleType("mb_env_conf")
    env_module.UNARY_WARN_THRESHOLD = 7
    monkeypatch.setitem(sys.modules, "mb_env_conf", env_module)
    monkeypatch.setenv("MULTIBASEKIT_CONFIG_MODULE", "mb_env_conf")

    fresh = Settings()
    fresh.update_from_envvar()
    assert fresh["UNARY_WARN_THRESHOLD"] == 7


def test_update_from_envvar_without_variable_is_a_noop(monkeypatch):
    monkeypatch.delenv("MULTIBASEKIT_CONFIG_MODULE", raising=False)
    local = Settings()
    local.update_from_envvar()
    assert local.as_dict() == DEFAULTS


def test_as_model_validates():
    config = Settings({"UNARY_WARN_THRESHOLD": "128"}).as_model()
    assert isinstance(config, MultibaseConfig)
    assert config.UNARY_WARN_THRESHOLD == 128

    with pytest.raises(pydantic.ValidationError):
        Settings({"UNARY_WARN_THRESHOLD": -1}).as_model()


def test_process_settings_are_resettable():
    settings["UNARY_WARN_THRESHOLD"] = 1
    settings.reset()
    assert settings["UNARY_WARN_THRESHOLD"] == DEFAULTS["UNARY_WARN_THRESHOLD"]


def test_string_values_from_a_config_module_are_coerced(monkeypatch):
    module = types.ModuleType("mb_string_conf")
    module.UNARY_WARN_THRESHOLD = "128"
    module.TRACING_ENABLED = "false"
    monkeypatch.setitem(sys.modules, "mb_string_conf", module)
    monkeypatch.setenv("MULTIBASEKIT_CONFIG_MODULE", "mb_string_conf")

    settings.update_from_envvar()
    assert settings["UNARY_WARN_THRESHOLD"] == 128
    assert settings["TRACING_ENABLED"] is False

    # the live readers see typed values
    assert multibasekit.encode(b"\x01", "base1") == b"111"
    assert multibasekit.decode(b"maGk") == b"hi"


def test_setitem_and_layers_are_coerced():
    local = Settings({"TRACING_ENABLED": "no"})
    assert local["TRACING_ENABLED"] is False

    local["UNARY_WARN_THRESHOLD"] = "42"
    assert local["UNARY_WARN_THRESHOLD"] == 42
    local.update_from_mapping({"TRACING_ENABLED": "1"})
    assert local["TRACING_ENABLED"] is True


@pytest.mark.parametrize(
    "overrides",
    [{"UNARY_WARN_THRESHOLD": "lots"}, {"UNARY_WARN_THRESHOLD": -5}, {"TRACING_ENABLED": "maybe"}],
)
def test_rejected_values_leave_settings_untouched(overrides):
    local = Settings()
    with pytest.raises(pydantic.ValidationError):
        local.update_from_mapping(overrides)
    with pytest.raises(pydantic.ValidationError):
        local.update(overrides)
    assert local.as_dict() == DEFAULTS


def test_unknown_upper_case_keys_are_kept():
    local = Settings()
    local.update_from_mapping({"SOMETHING_ELSE": "kept"})
    assert local["SOMETHING_ELSE"] == "kept"
