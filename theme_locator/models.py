"""
THEME LOCATOR — Data Models
Locator configuration, validated with Pydantic.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class LocatorSettings(BaseModel):
    themes: List[str] = Field(default_factory=lambda: ["default"])
    active_theme: Optional[str] = None
    # Global override directory; None disables the root tiers
    root_dir: Optional[str] = None
    # Module name -> module base directory
    modules: Dict[str, str] = Field(default_factory=dict)

    @field_validator("themes")
    @classmethod
    def validate_themes(cls, v: List[str]) -> List[str]:
        clean = [t.strip() for t in v if t and t.strip()]
        if not clean:
            raise ValueError("At least one theme must be configured")
        return clean

    @field_validator("root_dir")
    @classmethod
    def validate_root_dir(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return str(Path(v).expanduser())

    @field_validator("modules")
    @classmethod
    def validate_modules(cls, v: Dict[str, str]) -> Dict[str, str]:
        return {name: str(Path(path).expanduser()) for name, path in v.items()}

    @model_validator(mode="after")
    def default_active_theme(self) -> "LocatorSettings":
        if not self.active_theme:
            self.active_theme = self.themes[0]
        return self
