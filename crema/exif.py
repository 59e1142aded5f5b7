"""Reading camera metadata from image files and summarising it for display."""

from __future__ import annotations

import json
import re
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from PIL import Image, UnidentifiedImageError

_EXIF_IFD = 0x8769

_IMAGE_WIDTH = 0x0100
_IMAGE_LENGTH = 0x0101
_MAKE = 0x010F
_MODEL = 0x0110
_ORIENTATION = 0x0112
_EXPOSURE_TIME = 0x829A
_F_NUMBER = 0x829D
_ISO = 0x8827
_DATE_TIME_ORIGINAL = 0x9003
_FOCAL_LENGTH = 0x920A
_PIXEL_X_DIMENSION = 0xA002
_PIXEL_Y_DIMENSION = 0xA003
_LENS_MODEL = 0xA434

_EXIF_DATE = re.compile(r"^(\d{4}):(\d{2}):(\d{2})(.*)$", re.DOTALL)

NO_METADATA = "No EXIF data available"


class ExifError(Exception):
    """Raised when metadata cannot be read from a file."""


class _Fields:
    """Tag lookup over the primary image: IFD0 first, then the Exif sub-IFD."""

    def __init__(self, exif: Image.Exif) -> None:
        self._ifd0 = exif
        try:
            self._sub = exif.get_ifd(_EXIF_IFD)
        except (KeyError, ValueError, OSError):
            self._sub = {}

    def get(self, tag: int) -> Any:
        value = self._ifd0.get(tag)
        if value is None:
            value = self._sub.get(tag)
        return value

    def string(self, tag: int) -> str | None:
        value = self.get(tag)
        if value is None:
            return None
        if isinstance(value, bytes):
            value = value.decode("utf-8", errors="replace")
        if _is_rational(value):
            text = _rational_text(value)
        else:
            text = str(value)
        text = text.strip().strip("\x00").strip()
        return text or None

    def u32(self, tag: int) -> int | None:
        value = self.get(tag)
        if isinstance(value, (tuple, list)):
            value = value[0] if value else None
        if value is None:
            return None
        if isinstance(value, int):
            return value
        try:
            return int(str(value).strip())
        except ValueError:
            return None

    def rational(self, tag: int) -> float | None:
        value = self.get(tag)
        if value is None:
            return None
        if isinstance(value, tuple) and len(value) == 2 and all(
            isinstance(part, int) for part in value
        ):
            num, den = value
            return None if den == 0 else num / den
        if _is_rational(value):
            if value.denominator == 0:
                return None
            return value.numerator / value.denominator
        try:
            return float(str(value).strip())
        except ValueError:
            return None


def _is_rational(value: Any) -> bool:
    return hasattr(value, "numerator") and hasattr(value, "denominator") and not isinstance(
        value, int
    )


def _rational_text(value: Any) -> str:
    if value.denominator == 1:
        return str(value.numerator)
    return f"{value.numerator}/{value.denominator}"


def _normalise_date(text: str | None) -> str | None:
    if text is None:
        return None
    match = _EXIF_DATE.match(text)
    if match is None:
        return text
    year, month, day, rest = match.groups()
    return f"{year}-{month}-{day}{rest}"


@dataclass
class ExifData:
    """The camera metadata the application shows and catalogues."""

    width: int | None = None
    height: int | None = None
    camera_make: str | None = None
    camera_model: str | None = None
    lens: str | None = None
    focal_length: float | None = None
    aperture: float | None = None
    shutter_speed: str | None = None
    iso: int | None = None
    date_taken: str | None = None
    orientation: int | None = None

    @classmethod
    def from_file(cls, path: str | Path) -> ExifData:
        """Read metadata from an image file, raising ExifError on failure."""
        path = Path(path)
        try:
            with Image.open(path) as img:
                exif = img.getexif()
        except (OSError, UnidentifiedImageError) as err:
            raise ExifError(f"open {path}: {err}") from err
        if not exif:
            raise ExifError(f"read EXIF from {path}: no EXIF data found")

        tags = _Fields(exif)
        width = tags.u32(_PIXEL_X_DIMENSION)
        if width is None:
            width = tags.u32(_IMAGE_WIDTH)
        height = tags.u32(_PIXEL_Y_DIMENSION)
        if height is None:
            height = tags.u32(_IMAGE_LENGTH)

        return cls(
            width=width,
            height=height,
            camera_make=tags.string(_MAKE),
            camera_model=tags.string(_MODEL),
            lens=tags.string(_LENS_MODEL),
            focal_length=tags.rational(_FOCAL_LENGTH),
            aperture=tags.rational(_F_NUMBER),
            shutter_speed=tags.string(_EXPOSURE_TIME),
            iso=tags.u32(_ISO),
            date_taken=_normalise_date(tags.string(_DATE_TIME_ORIGINAL)),
            orientation=tags.u32(_ORIENTATION),
        )

    def summary_lines(self) -> list[tuple[str, str]]:
        """Label/value pairs for the fields that are present, in display order."""
        lines: list[tuple[str, str]] = []
        if self.camera_make is not None:
            lines.append(("Camera", f"{self.camera_make} {self.camera_model or ''}"))
        if self.lens is not None:
            lines.append(("Lens", self.lens))
        if self.focal_length is not None:
            lines.append(("Focal Length", f"{self.focal_length:.0f}mm"))
        if self.aperture is not None:
            lines.append(("Aperture", f"f/{self.aperture:.1f}"))
        if self.shutter_speed is not None:
            lines.append(("Shutter", self.shutter_speed))
        if self.iso is not None:
            lines.append(("ISO", str(self.iso)))
        if self.width is not None and self.height is not None:
            lines.append(("Resolution", f"{self.width} x {self.height}"))
        if self.date_taken is not None:
            lines.append(("Date", self.date_taken))
        return lines

    def to_json(self) -> str:
        """Serialise to a JSON object string."""
        return json.dumps(asdict(self))

    @classmethod
    def from_json(cls, text: str) -> ExifData:
        """Build from a JSON object; missing fields become None."""
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("EXIF JSON must be an object")
        return cls(**{f.name: data.get(f.name) for f in fields(cls)})


def metadata_rows(exif_lines: list[tuple[str, str]]) -> list[str]:
    """Text rows for the metadata panel."""
    if not exif_lines:
        return [NO_METADATA]
    return [f"{key}: {value}" for key, value in exif_lines]