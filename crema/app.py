"""Browser state: selection, view mode, thumbnails, filters and processing generations."""

from __future__ import annotations

import enum
from pathlib import PurePath
from typing import Any

from crema.dates import AllDates, DateFilter, MonthKey, YearKey
from crema.export import default_export_filename

WELCOME_MESSAGE = "Welcome to Crema. Import photos to get started."


class ViewMode(enum.Enum):
    """Which main area the window shows."""

    GRID = "grid"
    PHOTO = "photo"


class AppState:
    """The application state that user actions and background results update.

    Photos are any objects with `id`, `file_path` and `date_taken` attributes.
    """

    def __init__(self) -> None:
        self.view_mode = ViewMode.GRID
        self.selected_photo: Any = None
        self.right_panel_open = False
        self.photos: list[Any] = []
        self.thumbnails: dict[Any, bytes] = {}
        self.image_ready = False
        self.processed = False
        self.status_message = WELCOME_MESSAGE
        self.processing_generation = 0
        self.date_filter: DateFilter = AllDates()
        self.expanded_dates: set[YearKey | MonthKey] = set()

    def _photo(self, photo_id: Any) -> Any:
        return next((p for p in self.photos if p.id == photo_id), None)

    def title(self) -> str:
        """Window title: the selected file's name, or the photo count."""
        if self.selected_photo is not None:
            photo = self._photo(self.selected_photo)
            name = PurePath(photo.file_path).name if photo is not None else ""
            return f"Crema - {name}"
        return f"Crema - {len(self.photos)} photos"

    def photos_listed(self, photos: list[Any]) -> list[Any]:
        """Replace the photo list; returns the photos still needing thumbnails."""
        self.photos = list(photos)
        self.status_message = f"{len(self.photos)} photos in catalog"
        return self.missing_thumbnails()

    def missing_thumbnails(self) -> list[Any]:
        """Photos with no thumbnail loaded yet, in list order."""
        return [p for p in self.photos if p.id not in self.thumbnails]

    def thumbnail_ready(self, photo_id: Any, data: bytes) -> None:
        """Record thumbnail bytes for a photo."""
        self.thumbnails[photo_id] = data

    def select_photo(self, photo_id: Any) -> Any:
        """Select a photo and switch to the photo view.

        Returns the photo whose image must now be loaded, or None when the
        photo was already selected or is not in the list.
        """
        self.view_mode = ViewMode.PHOTO
        if self.selected_photo == photo_id:
            return None
        self.selected_photo = photo_id
        self.image_ready = False
        self.processed = False
        return self._photo(photo_id)

    def set_view_mode(self, mode: ViewMode) -> None:
        """Switch between grid and photo view."""
        self.view_mode = ViewMode(mode)

    def toggle_right_panel(self) -> bool:
        """Show or hide the edit panel; returns whether it is now open."""
        self.right_panel_open = not self.right_panel_open
        return self.right_panel_open

    def set_date_filter(self, date_filter: DateFilter) -> None:
        """Restrict the grid to photos matching the filter."""
        self.date_filter = date_filter

    def toggle_date_expansion(self, key: YearKey | MonthKey) -> bool:
        """Expand or collapse a sidebar row; returns whether it is now expanded."""
        if key in self.expanded_dates:
            self.expanded_dates.discard(key)
            return False
        self.expanded_dates.add(key)
        return True

    def image_loaded(self, photo_id: Any) -> bool:
        """Accept a loaded image if it belongs to the current selection."""
        if self.selected_photo is None or self.selected_photo != photo_id:
            return False
        self.image_ready = True
        return True

    def next_generation(self) -> int:
        """Start a new processing run and return its generation number."""
        self.processing_generation += 1
        return self.processing_generation

    def image_processed(self, generation: int) -> bool:
        """Accept a processing result unless a newer run has started since."""
        if generation != self.processing_generation:
            return False
        self.processed = True
        return True

    def filtered_photos(self) -> list[Any]:
        """Photos passing the current date filter."""
        return [p for p in self.photos if self.date_filter.matches(p)]

    def export_enabled(self) -> bool:
        """Whether a selected photo's full image is loaded and can be exported."""
        return self.selected_photo is not None and self.image_ready

    def export_filename(self) -> str:
        """Suggested file name for exporting the selected photo."""
        photo = self._photo(self.selected_photo) if self.selected_photo is not None else None
        return default_export_filename(photo.file_path if photo is not None else None)

    def import_started(self, count: int) -> bool:
        """Note an import of `count` files; returns False when there is nothing to do."""
        if count <= 0:
            return False
        self.status_message = f"Importing {count} file(s)..."
        return True

    def import_complete(self, imported: int, errors: int) -> None:
        """Report the outcome of an import."""
        self.status_message = f"Imported {imported} photos ({errors} errors)"