import pytest

from authkeep.models import OAuth2Provider
from authkeep.modules import (
    DATA_MODULES,
    ModuleLoader,
    ModuleRegistry,
    register_module,
    registered_modules,
)

TEST_MOD_NAME = "testmodule"


class DummyModule:
    def __init__(self):
        self.host = None

    def init(self, host):
        self.host = host


class FailingModule:
    def init(self, host):
        raise RuntimeError("init failed")


def test_register_default():
    module = DummyModule()
    register_module("defaultregistered", module)
    assert "defaultregistered" in registered_modules()


def test_registered_modules():
    registry = ModuleRegistry()
    registry.register(TEST_MOD_NAME, DummyModule())
    assert registry.registered() == [TEST_MOD_NAME]


def test_get_unknown_module():
    registry = ModuleRegistry()
    with pytest.raises(KeyError, match="could not find module"):
        registry.get("missing")


def test_is_loaded():
    registry = ModuleRegistry()
    registry.register(TEST_MOD_NAME, DummyModule())
    loader = ModuleLoader(registry)
    host = object()

    loader.load(TEST_MOD_NAME, host)

    assert loader.loaded() == [TEST_MOD_NAME]
    assert loader.is_loaded(TEST_MOD_NAME)
    assert not loader.is_loaded("other")


def test_load_copies_module():
    registry = ModuleRegistry()
    original = DummyModule()
    registry.register(TEST_MOD_NAME, original)
    host = object()

    loaded = ModuleLoader(registry).load(TEST_MOD_NAME, host)

    assert loaded is not original
    assert loaded.host is host
    assert original.host is None


def test_load_propagates_init_error():
    registry = ModuleRegistry()
    registry.register("bad", FailingModule())
    with pytest.raises(RuntimeError, match="init failed"):
        ModuleLoader(registry).load("bad", object())


def test_load_unknown_module():
    with pytest.raises(KeyError):
        ModuleLoader(ModuleRegistry()).load("missing", object())


def test_module_loaded_middleware():
    registry = ModuleRegistry()
    for name in ("recover", "auth", "oauth2"):
        registry.register(name, DummyModule())
    loader = ModuleLoader(registry)
    for name in ("recover", "auth", "oauth2"):
        loader.load(name, object())

    providers = {"google": OAuth2Provider()}
    data = loader.annotate(None, providers)
    mods = data[DATA_MODULES]

    assert len(mods) == 4
    assert "auth" in mods
    assert "recover" in mods
    assert "oauth2" in mods
    assert "oauth2.google" in mods


def test_annotate_keeps_existing_data():
    loader = ModuleLoader(ModuleRegistry())
    data = {"title": "x"}
    result = loader.annotate(data, ["github"])
    assert result is data
    assert result == {"title": "x", DATA_MODULES: {"oauth2.github": True}}