from dataclasses import dataclass

import pytest

from crema.app import WELCOME_MESSAGE, AppState, ViewMode
from crema.dates import YearFilter, YearKey


@dataclass
class Photo:
    id: int
    file_path: str
    date_taken: str | None = None


def _photos():
    return [
        Photo(1, "/photos/a.jpg", "2026-02-05 10:00:00"),
        Photo(2, "/photos/b.CR2", "2025-06-01 12:00:00"),
        Photo(3, "/photos/c.png", None),
    ]


@pytest.fixture
def state():
    s = AppState()
    s.photos_listed(_photos())
    return s


def test_initial_state():
    s = AppState()
    assert s.view_mode is ViewMode.GRID
    assert s.status_message == WELCOME_MESSAGE
    assert s.export_enabled() is False


def test_title_counts_and_names(state):
    assert state.title() == f"Crema - {len(_photos())} photos"
    state.select_photo(1)
    assert state.title() == "Crema - a.jpg"


def test_photos_listed_returns_missing(state):
    state.thumbnail_ready(2, b"jpeg")
    missing = [p.id for p in state.missing_thumbnails()]
    assert missing == [1, 3]
    again = state.photos_listed(_photos())
    assert [p.id for p in again] == missing


def test_select_photo_switches_view(state):
    photo = state.select_photo(2)
    assert photo.file_path == "/photos/b.CR2"
    assert state.view_mode is ViewMode.PHOTO
    state.set_view_mode(ViewMode.GRID)
    assert state.select_photo(2) is None
    assert state.view_mode is ViewMode.PHOTO


def test_image_loaded_only_for_selection(state):
    state.select_photo(1)
    assert state.image_loaded(2) is False
    assert state.export_enabled() is False
    assert state.image_loaded(1) is True
    assert state.export_enabled() is True
    state.select_photo(3)
    assert state.export_enabled() is False


def test_stale_generation_ignored(state):
    old = state.next_generation()
    new = state.next_generation()
    assert new > old
    assert state.image_processed(old) is False
    assert state.processed is False
    assert state.image_processed(new) is True


def test_toggles(state):
    assert state.toggle_right_panel() is True
    assert state.toggle_right_panel() is False
    key = YearKey(2026)
    assert state.toggle_date_expansion(key) is True
    assert key in state.expanded_dates
    assert state.toggle_date_expansion(key) is False
    assert key not in state.expanded_dates


def test_filtered_photos(state):
    assert len(state.filtered_photos()) == len(_photos())
    state.set_date_filter(YearFilter(2025))
    assert [p.id for p in state.filtered_photos()] == [2]


def test_export_filename(state):
    assert state.export_filename() == "export.jpg"
    state.select_photo(2)
    assert state.export_filename() == "b.jpg"


def test_import_messages(state):
    before = state.status_message
    assert state.import_started(0) is False
    assert state.status_message == before
    assert state.import_started(4) is True
    assert state.status_message == "Importing 4 file(s)..."
    state.import_complete(3, 1)
    assert state.status_message == "Imported 3 photos (1 errors)"