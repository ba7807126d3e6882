"""Render settings and their loading from plain mappings or JSON files."""

from __future__ import annotations

import copy
import json
import numbers
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union


class SettingsError(ValueError):
    pass


@dataclass(frozen=True)
class RenderSettings:
    background_color: str = "#000000"
    vertex_color: str = "#ffffff"
    edge_color: str = "#ffffff"
    big_radius: float = 145
    vertex_radius: float = 5
    edge_thickness: float = 2
    arrow_size: float = 7
    bendiness: float = 10

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any], *, base: Optional["RenderSettings"] = None
    ) -> "RenderSettings":
        """Merge ``data`` over ``base`` (or the defaults).

        Keys may be snake_case or the camelCase names used by the plugin's
        saved settings (``bigRadius``, ``edgeColor``...).
        """
        known = {f.name: f for f in fields(cls)}
        changes: Dict[str, Any] = {}
        for key, value in data.items():
            attr = _CAMEL_KEYS.get(key, key)
            if attr not in known:
                raise SettingsError(f"unknown render setting {key!r}")
            if attr.endswith("_color"):
                if not isinstance(value, str) or not value.strip():
                    raise SettingsError(f"render setting {key!r} must be a non-empty color string")
                changes[attr] = value.strip()
                continue
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise SettingsError(f"render setting {key!r} must be a number, got {value!r}")
            if value < 0:
                raise SettingsError(f"render setting {key!r} must not be negative")
            if attr == "big_radius" and value == 0:
                raise SettingsError(f"render setting {key!r} must be positive")
            changes[attr] = float(value)
        return replace(base or cls(), **changes)


_CAMEL_KEYS = {
    "backgroundColor": "background_color",
    "vertexColor": "vertex_color",
    "edgeColor": "edge_color",
    "bigRadius": "big_radius",
    "vertexRadius": "vertex_radius",
    "edgeThickness": "edge_thickness",
    "arrowSize": "arrow_size",
}

_DEFAULT_SETTINGS = RenderSettings()


def get_default_settings() -> RenderSettings:
    return copy.deepcopy(_DEFAULT_SETTINGS)


def set_default_settings(settings: RenderSettings) -> None:
    global _DEFAULT_SETTINGS
    _DEFAULT_SETTINGS = copy.deepcopy(settings)


def load_settings(path: Union[str, Path]) -> RenderSettings:
    """Read render settings from a JSON object file, merged over the defaults.

    A ``render`` key holding a nested object is accepted as well, matching
    the layout of the plugin's stored data.
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SettingsError(f"{path}: invalid JSON ({exc})") from exc
    if isinstance(data, dict) and isinstance(data.get("render"), dict):
        data = data["render"]
    if not isinstance(data, dict):
        raise SettingsError(f"{path}: expected a JSON object")
    return RenderSettings.from_mapping(data, base=get_default_settings())
