"""
THEME LOCATOR — Active Theme
Holds the selected theme name and the ordered list of known themes.
"""

from __future__ import annotations

from collections.abc import Iterable


class ActiveTheme:
    """Mutable pointer to the current theme.

    ``name`` may be reassigned at any time and is not checked against
    ``all_themes``. Locators read it at the start of every call.
    """

    def __init__(self, name: str, themes: Iterable[str]) -> None:
        self._name = name
        self._themes = tuple(themes)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    @property
    def all_themes(self) -> tuple[str, ...]:
        return self._themes

    def get_name(self) -> str:
        return self._name

    def set_name(self, name: str) -> None:
        self._name = name

    def get_all_themes(self) -> tuple[str, ...]:
        return self._themes

    def is_known(self, name: str | None = None) -> bool:
        """True if ``name`` (default: the active name) is one of the known themes."""
        return (self._name if name is None else name) in self._themes

    def __repr__(self) -> str:
        return f"ActiveTheme(name={self._name!r}, themes={list(self._themes)!r})"
