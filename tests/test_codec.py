"""Tests for the Pillow codec and Image persistence."""

from pathlib import Path

import numpy as np
import pytest
from PIL import Image as PILImage

from genial import colors
from genial.components.color import ColorFormat
from genial.core.codec import DecodedImage, decode, decode_bytes, encode, encode_bytes
from genial.core.config import ENV_VAR
from genial.core.errors import DecodeError, EncodeError, SizeMismatchError
from genial.core.image import Image
from genial.systems.draw import draw_circle, draw_line


@pytest.fixture(autouse=True)
def isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep user config files out of codec tests."""
    monkeypatch.delenv(ENV_VAR, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def drawing() -> Image:
    """Create an image with a line and a circle."""
    img = Image.new(32, 24)
    draw_line(img, (0, 0), (31, 23), colors.CYAN)
    draw_circle(img, (16, 12), 8, colors.MAGENTA)
    img.set_pixel(0, 23, colors.RED)
    return img


class TestRoundTrip:
    """Tests for lossless encode/decode."""

    @pytest.mark.parametrize("suffix", [".png", ".bmp"])
    def test_file_round_trip(self, tmp_path: Path, drawing: Image, suffix: str) -> None:
        """Test saving and reopening preserves every RGB value."""
        path = tmp_path / f"out{suffix}"
        drawing.save(path)
        loaded = Image.open(path)
        assert loaded.format == ColorFormat.RGB
        assert loaded == drawing

    def test_bytes_round_trip(self, drawing: Image) -> None:
        """Test in-memory encode/decode."""
        blob = encode_bytes(drawing.width, drawing.height, drawing.to_rgb_array().tobytes())
        decoded = decode_bytes(blob)
        assert (decoded.width, decoded.height) == drawing.dimensions
        assert decoded.data == drawing.tobytes()

    def test_orientation(self, tmp_path: Path) -> None:
        """Test y=0 is the bottom row of the written file."""
        img = Image.new(3, 2)
        img.set_pixel(0, 0, colors.RED)
        path = tmp_path / "orient.png"
        img.save(path)
        with PILImage.open(path) as pil:
            assert pil.getpixel((0, 1)) == (255, 0, 0)
            assert pil.getpixel((0, 0)) == (0, 0, 0)

    def test_non_rgb_saved_as_rgb(self, tmp_path: Path) -> None:
        """Test other formats are converted to RGB before encoding."""
        img = Image(2, 1, ColorFormat.BGR)
        img.set_raw(0, 0, b"\x00\x00\xff")
        path = tmp_path / "bgr.png"
        img.save(path)
        loaded = Image.open(path)
        assert loaded.format == ColorFormat.RGB
        assert loaded.get_pixel(0, 0) == colors.RED

    def test_save_returns_image(self, tmp_path: Path, drawing: Image) -> None:
        """Test save can end a chain."""
        assert drawing.save(tmp_path / "x.png") is drawing


class TestDecode:
    """Tests for decoding and mode mapping."""

    @pytest.mark.parametrize(
        "mode,fmt",
        [
            ("L", ColorFormat.Y),
            ("LA", ColorFormat.YA),
            ("RGB", ColorFormat.RGB),
            ("RGBA", ColorFormat.RGBA),
        ],
    )
    def test_mode_mapping(self, tmp_path: Path, mode: str, fmt: ColorFormat) -> None:
        """Test Pillow modes map onto color formats."""
        path = tmp_path / f"{mode}.png"
        PILImage.new(mode, (3, 2)).save(path)
        decoded = decode(path)
        assert decoded.format == fmt
        assert (decoded.width, decoded.height) == (3, 2)
        assert len(decoded.data) == 3 * 2 * fmt.channels

    def test_palette_converted_to_rgb(self, tmp_path: Path) -> None:
        """Test palette images without transparency become RGB."""
        path = tmp_path / "p.png"
        PILImage.new("RGB", (2, 2), (10, 20, 30)).convert(
            "P", palette=PILImage.Palette.ADAPTIVE
        ).save(path)
        img = Image.open(path)
        assert img.format == ColorFormat.RGB
        assert img.get_pixel(1, 1).as_tuple() == (10, 20, 30)

    def test_palette_with_transparency_converted_to_rgba(self, tmp_path: Path) -> None:
        """Test palette images with a transparency key become RGBA."""
        path = tmp_path / "pt.png"
        pil = PILImage.new("P", (2, 2), 0)
        pil.putpalette([0, 0, 0, 255, 255, 255])
        pil.save(path, transparency=0)
        assert decode(path).format == ColorFormat.RGBA

    def test_grayscale_values(self, tmp_path: Path) -> None:
        """Test grayscale bytes are kept top row first."""
        arr = np.array([[1, 2], [3, 4]], dtype=np.uint8)
        path = tmp_path / "gray.png"
        PILImage.fromarray(arr).save(path)
        img = Image.open(path)
        assert img.format == ColorFormat.Y
        assert img.get_raw(0, 1) == b"\x01"
        assert img.get_raw(1, 0) == b"\x04"

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file raises DecodeError."""
        with pytest.raises(DecodeError, match="Failed to decode"):
            decode(tmp_path / "missing.png")

    def test_garbage_file(self, tmp_path: Path) -> None:
        """Test unparseable data raises DecodeError."""
        path = tmp_path / "garbage.png"
        path.write_bytes(b"not an image at all")
        with pytest.raises(DecodeError):
            Image.open(path)

    def test_garbage_bytes(self) -> None:
        """Test unparseable buffers raise DecodeError."""
        with pytest.raises(DecodeError, match="image bytes"):
            decode_bytes(b"\x00\x01\x02")

    def test_decoded_image_validates_size(self) -> None:
        """Test DecodedImage enforces the size invariant."""
        with pytest.raises(SizeMismatchError):
            DecodedImage(width=2, height=2, format=ColorFormat.RGB, data=bytes(11))


class TestEncode:
    """Tests for encoding failures and format selection."""

    def test_size_mismatch(self, tmp_path: Path) -> None:
        """Test the RGB payload must match the dimensions."""
        with pytest.raises(SizeMismatchError, match="RGB bytes"):
            encode(tmp_path / "x.png", 2, 2, bytes(11))

    def test_unknown_format(self, tmp_path: Path) -> None:
        """Test an unknown format name raises EncodeError."""
        with pytest.raises(EncodeError):
            encode(tmp_path / "x.png", 1, 1, bytes(3), image_format="NOPE")

    def test_empty_image(self, tmp_path: Path) -> None:
        """Test empty images cannot be encoded."""
        with pytest.raises(EncodeError, match="empty"):
            Image(0, 0).save(tmp_path / "x.png")

    def test_missing_directory(self, tmp_path: Path) -> None:
        """Test unwritable paths raise EncodeError."""
        with pytest.raises(EncodeError):
            encode(tmp_path / "no" / "such" / "dir.png", 1, 1, bytes(3))

    def test_explicit_format_overrides_extension(self, tmp_path: Path) -> None:
        """Test image_format wins over the suffix."""
        path = tmp_path / "really_bmp.png"
        encode(path, 1, 1, bytes(3), image_format="bmp")
        assert path.read_bytes()[:2] == b"BM"

    def test_default_format_from_config(self, tmp_path: Path) -> None:
        """Test the configured default applies to unknown extensions."""
        config = tmp_path / "genial.toml"
        config.write_text('[codec]\ndefault_format = "BMP"\n', encoding="utf-8")
        path = tmp_path / "out.unknownext"
        encode(path, 1, 1, bytes(3), config_path=str(config))
        assert path.read_bytes()[:2] == b"BM"

    def test_builtin_default_is_png(self, tmp_path: Path) -> None:
        """Test PNG is used when nothing else decides."""
        path = tmp_path / "noext"
        encode(path, 1, 1, bytes(3))
        assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
