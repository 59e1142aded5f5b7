from pathlib import Path

from PIL import Image

from crema.export import default_export_filename, export_rgba


def _test_rgba() -> bytes:
    pixels = [(0, 0, 0, 255)] * 8
    pixels[0] = (204, 26, 26, 255)
    pixels[-1] = (26, 26, 204, 255)
    return bytes(v for px in pixels for v in px)


def test_export_jpeg_writes_valid_file(tmp_path):
    path = tmp_path / "out.jpg"
    msg = export_rgba(4, 2, _test_rgba(), path)
    assert msg.startswith("Exported to"), msg
    assert path.exists()
    with Image.open(path) as img:
        assert img.size == (4, 2)
        assert img.format == "JPEG"


def test_export_jpeg_uppercase_extension(tmp_path):
    path = tmp_path / "photo.JPG"
    msg = export_rgba(4, 2, _test_rgba(), path)
    assert msg.startswith("Exported to"), msg
    assert path.read_bytes()[:2] == b"\xff\xd8"


def test_export_png_writes_valid_file(tmp_path):
    path = tmp_path / "out.png"
    msg = export_rgba(4, 2, _test_rgba(), path)
    assert msg.startswith("Exported to"), msg
    with Image.open(path) as img:
        assert img.size == (4, 2)
    assert path.read_bytes()[:4] == b"\x89PNG"


def test_export_png_round_trips_pixels(tmp_path):
    path = tmp_path / "exact.png"
    export_rgba(4, 2, _test_rgba(), path)
    with Image.open(path) as img:
        assert img.convert("RGBA").tobytes() == _test_rgba()


def test_export_tiff_writes_valid_file(tmp_path):
    path = tmp_path / "out.tiff"
    msg = export_rgba(4, 2, _test_rgba(), path)
    assert msg.startswith("Exported to"), msg
    with Image.open(path) as img:
        assert img.size == (4, 2)


def test_export_uniform_image_identical_pixels(tmp_path):
    path = tmp_path / "identity.png"
    export_rgba(2, 2, bytes([128, 128, 128, 255]) * 4, path)
    with Image.open(path) as img:
        pixels = list(img.convert("RGBA").getdata())
    assert all(px == pixels[0] for px in pixels)


def test_export_to_nonexistent_dir_fails_gracefully():
    msg = export_rgba(4, 2, _test_rgba(), Path("/nonexistent/dir/photo.jpg"))
    assert msg.startswith("Export failed:"), msg


def test_export_bad_buffer_fails():
    msg = export_rgba(4, 2, b"\x00" * 5, "/tmp/unused.png")
    assert msg == "Export failed: could not construct image buffer"


def test_export_message_contains_path(tmp_path):
    path = tmp_path / "result.jpg"
    msg = export_rgba(4, 2, _test_rgba(), path)
    assert "result.jpg" in msg


def test_default_export_filename_uses_stem():
    assert default_export_filename("/photos/IMG_0001.CR2") == "IMG_0001.jpg"


def test_default_export_filename_without_photo():
    assert default_export_filename(None) == "export.jpg"
    assert default_export_filename("") == "export.jpg"