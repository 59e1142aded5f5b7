"""Layout decisions for the browser views: grid, filmstrip, develop sliders and menus."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import PurePath
from typing import Any, Iterable, Mapping, TypeVar

T = TypeVar("T")

GRID_THUMB_SIZE = 200.0
GRID_COLUMNS = 5
FILMSTRIP_THUMB_SIZE = 80.0
FILMSTRIP_HEIGHT = 100.0
FILMSTRIP_HIGHLIGHT = (0.3, 0.5, 1.0)
CANVAS_BG = (0.08, 0.08, 0.08)

MAX_NAME_CHARS = 20
TRUNCATED_NAME_CHARS = 17

EMPTY_GRID_TEXT = "No photos. Click 'Import Folder' to add some."
LOADING_TEXT = "Loading..."
NO_SELECTION_TEXT = "Select a photo"

EDIT_TOGGLE_CAPTION = "Edit"
_PANEL_ARROWS = {True: "<", False: ">"}


def display_name(file_path: str) -> str:
    """The file name of a path, shortened with '...' when longer than 20 characters."""
    name = PurePath(file_path).name
    if len(name) > MAX_NAME_CHARS:
        return name[:TRUNCATED_NAME_CHARS] + "..."
    return name


def grid_rows(photos: Iterable[T], columns: int = GRID_COLUMNS) -> list[list[T | None]]:
    """Split photos into rows of `columns` cells, padding the last row with None."""
    if columns < 1:
        raise ValueError("columns must be at least 1")
    items = list(photos)
    rows: list[list[T | None]] = []
    for start in range(0, len(items), columns):
        row: list[T | None] = list(items[start : start + columns])
        row.extend([None] * (columns - len(row)))
        rows.append(row)
    return rows


@dataclass(frozen=True)
class FilmstripCell:
    """One thumbnail slot in the filmstrip."""

    photo_id: Any
    thumbnail: Any
    selected: bool

    @property
    def loaded(self) -> bool:
        """Whether a thumbnail is available, rather than the '...' placeholder."""
        return self.thumbnail is not None


def filmstrip_cells(
    photos: Iterable[Any], thumbnails: Mapping[Any, Any], selected: Any
) -> list[FilmstripCell]:
    """Filmstrip cells in photo order, marking the selected photo."""
    return [
        FilmstripCell(
            photo_id=photo.id,
            thumbnail=thumbnails.get(photo.id),
            selected=selected is not None and photo.id == selected,
        )
        for photo in photos
    ]


@dataclass(frozen=True)
class SliderSpec:
    """A develop slider bound to one edit parameter."""

    field: str
    label: str
    section: str
    minimum: float
    maximum: float
    step: float
    value_format: str

    def label_text(self, value: float) -> str:
        """The value as shown next to the slider's label."""
        return self.value_format.format(value)

    def clamp(self, value: float) -> float:
        """The value limited to the slider's range."""
        return min(max(value, self.minimum), self.maximum)


_LIGHT = "Light"
_COLOR = "Color"


def edit_sliders() -> list[SliderSpec]:
    """The develop panel's sliders in display order."""
    return [
        SliderSpec("exposure", "Exposure", _LIGHT, -5.0, 5.0, 0.01, "{:+.1f} EV"),
        SliderSpec("contrast", "Contrast", _LIGHT, -100.0, 100.0, 1.0, "{:.0f}"),
        SliderSpec("highlights", "Highlights", _LIGHT, -100.0, 100.0, 1.0, "{:.0f}"),
        SliderSpec("shadows", "Shadows", _LIGHT, -100.0, 100.0, 1.0, "{:.0f}"),
        SliderSpec("blacks", "Blacks", _LIGHT, -100.0, 100.0, 1.0, "{:.0f}"),
        SliderSpec("wb_temp", "Temperature", _COLOR, 2000.0, 25000.0, 10.0, "{:.0f} K"),
        SliderSpec("wb_tint", "Tint", _COLOR, -150.0, 150.0, 1.0, "{:+.0f}"),
        SliderSpec("vibrance", "Vibrance", _COLOR, -100.0, 100.0, 1.0, "{:.0f}"),
        SliderSpec("saturation", "Saturation", _COLOR, -100.0, 100.0, 1.0, "{:.0f}"),
    ]


class MenuCommand(enum.Enum):
    """Commands reachable from the application menu."""

    IMPORT = "import"
    EXPORT = "export"


def menu_command(event_id: str) -> MenuCommand | None:
    """The command for a menu event id, or None for events with no action."""
    try:
        return MenuCommand(event_id)
    except ValueError:
        return None


@dataclass(frozen=True)
class MenuItemSpec:
    """An entry of the File menu."""

    command: MenuCommand
    label: str
    enabled: bool
    accelerator: str


def file_menu_items(export_enabled: bool) -> list[MenuItemSpec]:
    """The File menu entries; export is enabled only when an image is loaded."""
    return [
        MenuItemSpec(MenuCommand.IMPORT, "Import...", True, "Meta+I"),
        MenuItemSpec(MenuCommand.EXPORT, "Export...", bool(export_enabled), "Meta+E"),
    ]


def edit_toggle_label(panel_open: bool) -> str:
    """Caption of the button that shows or hides the edit panel.

    The arrow points towards the panel's collapsed side: '<' closes an open
    panel, '>' opens a closed one.
    """
    arrow = _PANEL_ARROWS[bool(panel_open)]
    return f"{EDIT_TOGGLE_CAPTION} {arrow}"


def photo_area_placeholder(has_processed: bool, has_selection: bool) -> str | None:
    """Text shown in place of the photo, or None when the photo can be shown."""
    if has_processed:
        return None
    if has_selection:
        return LOADING_TEXT
    return NO_SELECTION_TEXT