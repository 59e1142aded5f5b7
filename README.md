# crema

The non-graphical core of a photo browser: reading EXIF metadata,
generating and caching JPEG thumbnails, grouping photos by the date they
were taken, computing RGB histograms, describing the window layout,
tracking browser state and exporting 8-bit RGBA images. Image decoding
and encoding go through Pillow.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `crema.exif`: `ExifData` is a dataclass of width, height, camera make
  and model, lens, focal length, aperture, shutter speed, ISO, date taken
  and orientation. `ExifData.from_file` reads them from an image file
  (raising `ExifError` when the file cannot be opened or holds no EXIF);
  EXIF dates such as `2024:03:15 10:30:00` become `2024-03-15 10:30:00`.
  `summary_lines` returns `(label, value)` pairs for the fields present,
  `to_json` / `from_json` round-trip through JSON, and `metadata_rows`
  turns the pairs into `"Label: value"` rows, or
  `"No EXIF data available"` when there are none.
- `crema.thumbnail_cache`: `ThumbnailCache(cache_dir)` creates the
  directory and stores thumbnails as `<dir>/<first two chars>/<hash>.jpg`
  via `store`, `load` (returns `None` when absent), `has_thumbnail`,
  `thumbnail_path` and `cache_dir`.
- `crema.thumbnails`: `generate_thumbnail` scales a Pillow image to fit
  512×512 (Lanczos) and encodes it as JPEG; `thumbnail_for_file` and
  `fast_thumbnail` do the same for a file, raising `ThumbnailError` on
  failure. `is_raw_extension` recognises camera RAW extensions.
  `thumbnail_cache_key` hashes the path and modification time (BLAKE2b,
  hex), and `load_thumbnail_bytes(path, cache_dir)` serves thumbnails
  from a `ThumbnailCache`, generating and storing them on a miss.
- `crema.dates`: `parse_date` reads a `YYYY-MM-DD` prefix into
  `(year, month, day)` or `None`; `month_name` gives `"Jan"`…`"Dec"`.
  Filters `AllDates`, `YearFilter`, `MonthFilter`, `DayFilter` and
  `UnknownDate` (all `DateFilter`s) test a photo's `date_taken`.
  `build_date_tree` counts photos per year (newest first), month and day;
  `sidebar_entries` lists the sidebar rows for a set of expanded
  `YearKey` / `MonthKey` values, marking the active filter.
- `crema.histogram`: `HistogramData.from_rgba_u8` (also
  `compute_histogram`) counts 256 bins per R, G and B channel, with
  `max_count` at least 1; `outlines(width, height)` gives each channel's
  log-scaled closed polygon and fill colour.
- `crema.layout`: `display_name` (file names over 20 characters are cut
  to 17 plus `...`), `grid_rows` (rows of 5, last row padded with
  `None`), `filmstrip_cells`, the develop `edit_sliders` with their
  ranges, steps and value formats, `menu_command` / `file_menu_items`
  for the Import and Export menu entries, `edit_toggle_label` and
  `photo_area_placeholder`.
- `crema.texture`: `padded_bytes_per_row`, `rgb_to_rgba` and
  `unpack_padded_rows` for row-padded little-endian RGBA float buffers.
- `crema.export`: `export_rgba(width, height, rgba, path)` writes JPEG at
  quality 92 for `.jpg`/`.jpeg` (any case) and otherwise lets the
  extension pick the format; it returns `"Exported to …"` or
  `"Export failed: …"`. `default_export_filename` suggests `<stem>.jpg`,
  or `export.jpg`.
- `crema.app`: `AppState` holds the photo list, loaded thumbnails,
  selection, `ViewMode` (grid or photo), edit-panel state, date filter,
  expanded sidebar rows, processing generation and status message, with
  methods for each user action and background result.

## Example

```python
from crema.exif import ExifData
from crema.dates import parse_date

exif = ExifData.from_file("holiday.jpg")
for key, value in exif.summary_lines():
    print(f"{key}: {value}")

print(parse_date("2026-02-05 14:30:00"))  # (2026, 2, 5)
```

## What this package does not do

- There is no window, command or other user interface; `crema.layout`
  and `AppState` only describe what a front end would show.
- There is no photo catalogue or database: photos are any objects with
  `id`, `file_path` and `date_taken` attributes supplied by the caller,
  and edits are not stored.
- There is no develop pipeline: exposure, contrast, white balance and the
  other slider values are not applied to pixels. `export_rgba` writes
  pixels that are already processed.
- Camera RAW files are not decoded; thumbnails and EXIF can only be read
  from files Pillow can open.