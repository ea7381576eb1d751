"""
THEME LOCATOR — Module Registry
Maps symbolic module names to their base directories.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class ModuleDirectoryLookup(Protocol):
    """Anything that can turn a module name into a directory."""

    def resolve(self, name: str) -> str | None:
        ...


class CallableLookup:
    """Adapt a plain ``name -> directory | None`` function to the lookup protocol."""

    def __init__(self, func: Callable[[str], str | None]) -> None:
        self._func = func

    def resolve(self, name: str) -> str | None:
        return self._func(name)


class ModuleRegistry:
    """In-memory module registry."""

    def __init__(self) -> None:
        self._modules: dict[str, str] = {}

    @classmethod
    def from_mapping(cls, modules: Mapping[str, str | os.PathLike[str]]) -> "ModuleRegistry":
        registry = cls()
        for name, directory in modules.items():
            registry.register(name, directory)
        return registry

    # ── Registration ─────────────────────────────────────────

    def register(self, name: str, directory: str | os.PathLike[str]) -> None:
        name = name.strip()
        if not name:
            raise ValueError("Module name cannot be empty")
        path = os.fspath(directory)
        previous = self._modules.get(name)
        self._modules[name] = path
        if previous is not None and previous != path:
            logger.debug(
                "module_registry.replaced",
                extra={
                    "event": "module_registry.replaced",
                    "module": name,
                    "previous": previous,
                    "directory": path,
                },
            )
        else:
            logger.debug(
                "module_registry.registered",
                extra={"event": "module_registry.registered", "module": name, "directory": path},
            )

    def unregister(self, name: str) -> bool:
        return self._modules.pop(name, None) is not None

    def discover(self, parent_dir: str | os.PathLike[str]) -> int:
        """Register every immediate subdirectory of ``parent_dir`` under its own name.

        Returns the number of modules registered. A missing directory yields 0.
        """
        parent = Path(parent_dir)
        if not parent.is_dir():
            logger.debug(
                "module_registry.discover_skipped",
                extra={"event": "module_registry.discover_skipped", "directory": str(parent)},
            )
            return 0
        count = 0
        for child in sorted(parent.iterdir()):
            if child.is_dir():
                self.register(child.name, child)
                count += 1
        return count

    # ── Lookup ───────────────────────────────────────────────

    def resolve(self, name: str) -> str | None:
        return self._modules.get(name)

    def names(self) -> list[str]:
        return sorted(self._modules)

    def __contains__(self, name: object) -> bool:
        return name in self._modules

    def __len__(self) -> int:
        return len(self._modules)
