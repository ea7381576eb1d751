import logging

import pytest

from theme_locator.module_registry import CallableLookup, ModuleDirectoryLookup, ModuleRegistry


def test_registry_resolves_registered_modules(tmp_path):
    registry = ModuleRegistry.from_mapping({"Shop": tmp_path / "shop", "Blog": str(tmp_path / "blog")})
    assert registry.resolve("Shop") == str(tmp_path / "shop")
    assert registry.resolve("Blog") == str(tmp_path / "blog")
    assert registry.resolve("Missing") is None
    assert registry.names() == ["Blog", "Shop"]
    assert "Shop" in registry
    assert len(registry) == 2


def test_registry_rejects_empty_names():
    with pytest.raises(ValueError):
        ModuleRegistry().register("  ", "/tmp")


def test_registry_replace_and_unregister(tmp_path, caplog):
    registry = ModuleRegistry()
    registry.register("Shop", tmp_path / "a")
    with caplog.at_level(logging.DEBUG, logger="theme_locator.module_registry"):
        registry.register("Shop", tmp_path / "b")
    assert registry.resolve("Shop") == str(tmp_path / "b")
    assert any(r.getMessage() == "module_registry.replaced" for r in caplog.records)

    assert registry.unregister("Shop") is True
    assert registry.unregister("Shop") is False
    assert registry.resolve("Shop") is None


def test_discover_registers_subdirectories(tmp_path):
    (tmp_path / "Shop" / "Resources").mkdir(parents=True)
    (tmp_path / "Blog").mkdir()
    (tmp_path / "README.md").write_text("not a module", encoding="utf-8")

    registry = ModuleRegistry()
    assert registry.discover(tmp_path) == 2
    assert registry.names() == ["Blog", "Shop"]
    assert registry.resolve("Shop") == str(tmp_path / "Shop")
    assert registry.discover(tmp_path / "missing") == 0


def test_lookups_satisfy_protocol():
    lookup = CallableLookup({"Shop": "/srv/shop"}.get)
    assert lookup.resolve("Shop") == "/srv/shop"
    assert lookup.resolve("Blog") is None
    assert isinstance(lookup, ModuleDirectoryLookup)
    assert isinstance(ModuleRegistry(), ModuleDirectoryLookup)
