"""
THEME LOCATOR — File Locator
Resolves symbolic resource names to files, honouring the active theme and
the root override directory.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import PureWindowsPath
from typing import TYPE_CHECKING

from .active_theme import ActiveTheme
from .errors import InvalidResourceError, PathTraversalError, ResourceNotFoundError, UnknownModuleError
from .module_registry import ModuleDirectoryLookup, ModuleRegistry

if TYPE_CHECKING:
    from .models import LocatorSettings

MODULE_MARKER = "@"
RESOURCES_PREFIX = "Resources/"
VIEWS_PREFIX = "Resources/views/"


def _has_parent_segment(value: str) -> bool:
    # PureWindowsPath splits on both "/" and "\"
    return ".." in PureWindowsPath(value).parts


def _escapes_tree(value: str) -> bool:
    """True for a path segment that could leave the directory it is joined to."""
    if value.startswith(("/", "\\")) or os.path.isabs(value):
        return True
    pure = PureWindowsPath(value)
    return bool(pure.drive) or ".." in pure.parts


def _strip_prefix(value: str, prefix: str) -> str:
    return value[len(prefix):] if value.startswith(prefix) else value


@dataclass(frozen=True)
class ResourceReference:
    name: str
    path: str
    module: str | None = None

    @property
    def is_module(self) -> bool:
        return self.module is not None

    @property
    def override_path(self) -> str:
        """Path as laid out under an override directory (no ``Resources/``)."""
        return _strip_prefix(self.path, RESOURCES_PREFIX)

    @property
    def theme_path(self) -> str:
        """Path as laid out inside a theme directory (no ``Resources/views/``)."""
        if self.path.startswith(VIEWS_PREFIX):
            return self.path[len(VIEWS_PREFIX):]
        return self.override_path


def _require_relative(ref: ResourceReference) -> ResourceReference:
    # override_path and theme_path are joined onto base directories too
    for part in (ref.path, ref.override_path, ref.theme_path):
        if not part:
            raise InvalidResourceError(ref.name, "resource path is empty")
        if part.startswith(("/", "\\")) or os.path.isabs(part):
            raise InvalidResourceError(ref.name, "resource path must be relative")
    return ref


def parse_resource(name: str) -> ResourceReference:
    """Split ``@Module/path`` or a bare path into a :class:`ResourceReference`.

    Raises PathTraversalError for any ``..`` segment, InvalidResourceError
    for names that cannot be split.
    """
    if not name:
        raise InvalidResourceError(name, "name is empty")

    if not name.startswith(MODULE_MARKER):
        if _has_parent_segment(name):
            raise PathTraversalError(name)
        ref = ResourceReference(name=name, path=name)
        if os.path.isabs(name):
            return ref
        return _require_relative(ref)

    body = name[len(MODULE_MARKER):]
    if _has_parent_segment(body):
        raise PathTraversalError(name)

    module, _, path = body.partition("/")
    if not module:
        raise InvalidResourceError(name, "module name is empty")
    if not path:
        raise InvalidResourceError(name, "no path given after the module name")
    return _require_relative(ResourceReference(name=name, path=path, module=module))


class FileLocator:
    """Theme-aware resource locator.

    Candidates are checked in this order for ``@Module/path``:

    1. ``<root_dir>/themes/<theme>/<Module>/<path minus Resources/>``
    2. ``<root_dir>/<Module>/<path minus Resources/>``
    3. ``<module_dir>/Resources/themes/<theme>/<path minus Resources/views/>``
    4. ``<base_dir>/themes/<theme>/<path minus Resources/views/>``
    5. ``<module_dir>/<path>``
    6. ``<base_dir>/<path>``

    Bare paths skip the module tiers (3 and 5). Absolute paths are taken as is.
    The active theme is re-read at the start of every call and stored on
    ``current_theme``; ``on_theme_snapshot`` is notified each time.
    """

    def __init__(
        self,
        lookup: ModuleDirectoryLookup,
        active_theme: ActiveTheme,
        root_dir: str | os.PathLike[str] | None = None,
        *,
        exists: Callable[[str], bool] = os.path.exists,
        on_theme_snapshot: Callable[[str], None] | None = None,
    ) -> None:
        self.lookup = lookup
        self.active_theme = active_theme
        self.root_dir = os.fspath(root_dir) if root_dir else None
        self.exists = exists
        self.on_theme_snapshot = on_theme_snapshot
        self.current_theme = ""
        self._refresh_theme()

    @classmethod
    def from_settings(
        cls,
        settings: "LocatorSettings",
        lookup: ModuleDirectoryLookup | None = None,
        active_theme: ActiveTheme | None = None,
        **kwargs,
    ) -> "FileLocator":
        if lookup is None:
            lookup = ModuleRegistry.from_mapping(settings.modules)
        if active_theme is None:
            active_theme = ActiveTheme(settings.active_theme, settings.themes)
        return cls(lookup, active_theme, settings.root_dir, **kwargs)

    def _refresh_theme(self) -> str:
        theme = self.active_theme.name
        self.current_theme = theme
        if self.on_theme_snapshot is not None:
            self.on_theme_snapshot(theme)
        return theme

    # ── Candidate planning ───────────────────────────────────

    def _plan(
        self, name: str, default_base_dir: str | os.PathLike[str] | None
    ) -> tuple[ResourceReference, str | None, list[str]]:
        theme = self._refresh_theme()
        ref = parse_resource(name)
        if theme and _escapes_tree(theme):
            raise PathTraversalError(name)

        if not ref.is_module and os.path.isabs(ref.path):
            return ref, None, [ref.path]

        base = os.fspath(default_base_dir) if default_base_dir else None
        root = self.root_dir
        module_dir: str | None = None
        paths: list[str] = []

        if ref.is_module:
            resolved = self.lookup.resolve(ref.module)
            module_dir = os.fspath(resolved) if resolved else None
            if root:
                if theme:
                    paths.append(os.path.join(root, "themes", theme, ref.module, ref.override_path))
                paths.append(os.path.join(root, ref.module, ref.override_path))
            if theme:
                if module_dir:
                    paths.append(os.path.join(module_dir, "Resources", "themes", theme, ref.theme_path))
                if base:
                    paths.append(os.path.join(base, "themes", theme, ref.theme_path))
            if module_dir:
                paths.append(os.path.join(module_dir, ref.path))
            if base:
                paths.append(os.path.join(base, ref.path))
        else:
            if root:
                if theme:
                    paths.append(os.path.join(root, "themes", theme, ref.override_path))
                paths.append(os.path.join(root, ref.override_path))
            if base:
                if theme:
                    paths.append(os.path.join(base, "themes", theme, ref.theme_path))
                paths.append(os.path.join(base, ref.path))

        return ref, module_dir, list(dict.fromkeys(paths))

    def candidates(
        self, name: str, default_base_dir: str | os.PathLike[str] | None = None
    ) -> list[str]:
        """Every candidate path in priority order, whether or not it exists."""
        _, _, paths = self._plan(name, default_base_dir)
        return paths

    # ── Lookup ───────────────────────────────────────────────

    def locate(
        self,
        name: str,
        default_base_dir: str | os.PathLike[str] | None = None,
        first_only: bool = True,
    ) -> str | list[str]:
        """Return the first existing candidate, or all of them when ``first_only`` is false."""
        ref, module_dir, paths = self._plan(name, default_base_dir)

        found: list[str] = []
        for path in paths:
            if self.exists(path):
                if first_only:
                    return path
                found.append(path)

        if found:
            return found
        if ref.is_module and module_dir is None:
            raise UnknownModuleError(name, ref.module)
        raise ResourceNotFoundError(name)
