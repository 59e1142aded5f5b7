"""Writing processed images to disk in the format the file name asks for."""

from __future__ import annotations

from pathlib import Path, PurePath

from PIL import Image

JPEG_QUALITY = 92
DEFAULT_EXPORT_NAME = "export.jpg"


def export_rgba(width: int, height: int, rgba: bytes, path: str | Path) -> str:
    """Save 8-bit RGBA pixels to `path`; returns a status message for the user.

    JPEG is written (at quality 92, without alpha) when the extension is jpg or
    jpeg in any case; otherwise the format follows the file extension.
    """
    path = Path(path)
    data = bytes(rgba)
    if width <= 0 or height <= 0 or len(data) != width * height * 4:
        return "Export failed: could not construct image buffer"
    img = Image.frombytes("RGBA", (width, height), data)

    ext = path.suffix.lstrip(".").lower()
    try:
        if ext in ("jpg", "jpeg"):
            img.convert("RGB").save(path, format="JPEG", quality=JPEG_QUALITY)
        else:
            img.save(path)
    except (OSError, ValueError, KeyError) as err:
        return f"Export failed: {err}"
    return f"Exported to {path}"


def default_export_filename(file_path: str | None) -> str:
    """Suggested export name: the source file's stem with a .jpg extension."""
    if file_path:
        stem = PurePath(file_path).stem
        if stem:
            return f"{stem}.jpg"
    return DEFAULT_EXPORT_NAME