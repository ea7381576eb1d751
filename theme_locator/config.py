"""
THEME LOCATOR — Settings
Load, save and wire up locator settings stored as JSON.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from .active_theme import ActiveTheme
from .errors import SettingsError
from .locator import FileLocator
from .models import LocatorSettings
from .module_registry import ModuleRegistry

logger = logging.getLogger(__name__)


def load_settings(path: str | os.PathLike[str]) -> LocatorSettings:
    """Read settings from ``path``. A missing file yields the defaults."""
    settings_file = Path(path).expanduser()
    if not settings_file.exists():
        logger.debug(
            "settings.defaults_used",
            extra={"event": "settings.defaults_used", "path": str(settings_file)},
        )
        return LocatorSettings()
    try:
        raw = json.loads(settings_file.read_text(encoding="utf-8"))
        settings = LocatorSettings(**raw)
    except json.JSONDecodeError as exc:
        raise SettingsError(str(settings_file), f"not valid JSON ({exc.msg})") from exc
    except ValidationError as exc:
        raise SettingsError(str(settings_file), f"{exc.error_count()} validation error(s)") from exc
    except TypeError as exc:
        raise SettingsError(str(settings_file), "top-level value must be an object") from exc
    logger.debug(
        "settings.loaded",
        extra={
            "event": "settings.loaded",
            "path": str(settings_file),
            "theme_count": len(settings.themes),
            "module_count": len(settings.modules),
        },
    )
    return settings


def save_settings(settings: LocatorSettings, path: str | os.PathLike[str]) -> None:
    settings_file = Path(path).expanduser()
    settings_file.parent.mkdir(parents=True, exist_ok=True)
    settings_file.write_text(settings.model_dump_json(indent=2), encoding="utf-8")


def build_locator(settings: LocatorSettings, **kwargs) -> FileLocator:
    """Wire an ActiveTheme, a ModuleRegistry and a FileLocator from ``settings``."""
    active_theme = ActiveTheme(settings.active_theme, settings.themes)
    if not active_theme.is_known():
        logger.warning(
            "settings.unknown_active_theme",
            extra={
                "event": "settings.unknown_active_theme",
                "theme": active_theme.name,
                "themes": list(active_theme.all_themes),
            },
        )
    registry = ModuleRegistry.from_mapping(settings.modules)
    return FileLocator.from_settings(settings, lookup=registry, active_theme=active_theme, **kwargs)
