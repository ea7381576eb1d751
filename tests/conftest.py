from pathlib import Path

import pytest

from theme_locator.active_theme import ActiveTheme
from theme_locator.locator import FileLocator
from theme_locator.module_registry import ModuleRegistry

THEMES = ["foo", "bar", "foobar"]
MODULE = "ThemeModule"

FIXTURE_FILES = [
    "Resources/themes/foo/template",
    "Resources/themes/foobar/template",
    "Resources/views/template",
    "Resources/views/defaultTemplate",
    f"rootdir/Resources/themes/foo/{MODULE}/views/rootTemplate",
    f"rootdir/Resources/{MODULE}/views/override",
]


def touch(base: Path, relative: str) -> Path:
    path = base / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(relative, encoding="utf-8")
    return path


@pytest.fixture
def fixture_dir(tmp_path: Path) -> Path:
    base = tmp_path / "Fixtures"
    for relative in FIXTURE_FILES:
        touch(base, relative)
    return base


@pytest.fixture
def registry(fixture_dir: Path) -> ModuleRegistry:
    return ModuleRegistry.from_mapping({MODULE: fixture_dir})


@pytest.fixture
def make_locator(fixture_dir: Path, registry: ModuleRegistry):
    def _make(theme: str, **kwargs) -> tuple[FileLocator, ActiveTheme]:
        active = ActiveTheme(theme, THEMES)
        locator = FileLocator(registry, active, fixture_dir / "rootdir" / "Resources", **kwargs)
        return locator, active

    return _make
