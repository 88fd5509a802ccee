"""Layout discovery and manifest loading."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from importlib import resources
from importlib.resources.abc import Traversable

from .exceptions import ConfigurationError
from .grid import BayGrid
from .models import LayoutManifest

_LOGGER = logging.getLogger(__name__)

SCHEMA_FILENAME = "layout.schema.json"
_REQUIRED_KEYS = ("id", "name", "lane_size", "pedestrian_exits", "disabled_bays")
_LAYOUT_CACHE: tuple[LayoutManifest, ...] | None = None


def _layout_root() -> Traversable:
    return resources.files("parkinggrid.layouts")


def load_layout_schema() -> dict:
    schema_path = _layout_root() / SCHEMA_FILENAME
    return json.loads(schema_path.read_text(encoding="utf-8"))


def _index_list(data: dict, key: str) -> tuple[int, ...]:
    value = data[key]
    if not isinstance(value, list):
        raise ConfigurationError(f"Layout manifest {key} must be a list.")
    return tuple(value)


def build_layout(data: dict, file_stem: str) -> LayoutManifest:
    if not isinstance(data, dict):
        raise ConfigurationError("Layout manifest must be a JSON object.")
    missing = [key for key in _REQUIRED_KEYS if key not in data]
    if missing:
        raise ConfigurationError(f"Layout manifest missing keys: {', '.join(missing)}.")
    layout_id = data["id"]
    name = data["name"]
    if not isinstance(layout_id, str) or not layout_id:
        raise ConfigurationError("Layout manifest id must be a non-empty string.")
    if layout_id != file_stem:
        raise ConfigurationError("Layout manifest id must match its file name.")
    if not isinstance(name, str) or not name:
        raise ConfigurationError("Layout manifest name must be a non-empty string.")
    pedestrian_exits = _index_list(data, "pedestrian_exits")
    disabled_bays = _index_list(data, "disabled_bays")
    # Range, duplicate and overlap checks are the grid's own.
    BayGrid(data["lane_size"], pedestrian_exits, disabled_bays)
    return LayoutManifest(
        id=layout_id,
        name=name,
        lane_size=data["lane_size"],
        pedestrian_exits=pedestrian_exits,
        disabled_bays=disabled_bays,
    )


def iter_layout_files() -> Iterable[tuple[str, Traversable]]:
    for entry in _layout_root().iterdir():
        if not entry.is_file() or not entry.name.endswith(".json"):
            continue
        if entry.name == SCHEMA_FILENAME:
            continue
        yield entry.name.removesuffix(".json"), entry


def load_layouts() -> list[LayoutManifest]:
    global _LAYOUT_CACHE
    if _LAYOUT_CACHE is not None:
        return list(_LAYOUT_CACHE)
    layouts: list[LayoutManifest] = []
    for file_stem, layout_path in iter_layout_files():
        try:
            data = json.loads(layout_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigurationError("Layout manifest is not valid JSON.") from exc
        layouts.append(build_layout(data, file_stem))
    layouts.sort(key=lambda layout: layout.id)
    _LOGGER.debug("Loaded %s layout manifests", len(layouts))
    _LAYOUT_CACHE = tuple(layouts)
    return list(_LAYOUT_CACHE)


def clear_layout_cache() -> None:
    """Clear cached layout manifests (used in tests)."""
    global _LAYOUT_CACHE
    _LAYOUT_CACHE = None


def list_layouts() -> list[str]:
    return [layout.id for layout in load_layouts()]


def get_layout(layout_id: str) -> LayoutManifest:
    for layout in load_layouts():
        if layout.id == layout_id:
            return layout
    raise ConfigurationError(f"Layout {layout_id!r} not found.")
