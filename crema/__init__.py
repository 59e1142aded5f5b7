"""Photo browser core: EXIF metadata, thumbnails, date navigation, histograms, layout, state and export."""

__version__ = "0.1.0"