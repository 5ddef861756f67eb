"""Tests for the image store and the load/generate/save commands."""

from __future__ import annotations

import pytest
from PIL import Image

from halftone.errors import EmptyImageError, StoreLockError
from halftone.processor import HalftoneProcessor
from halftone.preview import scale_to_width, to_picture
from halftone.store import ImageStore
from models import HalftoneConfig, RenderStyle


@pytest.fixture
def image_file(tmp_path, black_white):
    path = tmp_path / "source.png"
    black_white.save(path)
    return path


@pytest.fixture
def processor() -> HalftoneProcessor:
    return HalftoneProcessor(HalftoneConfig(cell_size=10, seed=3, preview_width=40))


# ---------------------------------------------------------------------------
# Image store
# ---------------------------------------------------------------------------


class TestImageStore:
    def test_starts_empty(self) -> None:
        assert ImageStore().size == (0, 0)

    def test_replace(self, black_white) -> None:
        store = ImageStore()
        store.replace(black_white)
        assert store.size == (2, 1)

    def test_failed_write_keeps_previous(self, black_white) -> None:
        store = ImageStore(black_white)
        with pytest.raises(RuntimeError, match="boom"):
            with store.write() as slot:
                slot.image = Image.new("RGBA", (9, 9))
                raise RuntimeError("boom")
        assert store.size == (2, 1)

    def test_lock_released_after_error(self, black_white) -> None:
        store = ImageStore(black_white, lock_timeout_ms=50)
        with pytest.raises(KeyError):
            with store.read():
                raise KeyError("x")
        store.replace(Image.new("RGBA", (3, 3)))
        assert store.size == (3, 3)

    def test_concurrent_readers(self, black_white) -> None:
        store = ImageStore(black_white, lock_timeout_ms=50)
        with store.read() as first:
            with store.read() as second:
                assert first is second

    def test_writer_blocked_by_reader_times_out(self, black_white) -> None:
        store = ImageStore(black_white, lock_timeout_ms=20)
        with store.read():
            with pytest.raises(StoreLockError):
                store.replace(Image.new("RGBA", (3, 3)))
        assert store.size == (2, 1)

    def test_snapshot_is_a_copy(self, black_white) -> None:
        store = ImageStore(black_white)
        copy = store.snapshot()
        copy.putpixel((0, 0), (255, 0, 0, 255))
        assert black_white.getpixel((0, 0)) == (0, 0, 0, 255)


# ---------------------------------------------------------------------------
# Preview scaling
# ---------------------------------------------------------------------------


class TestPreview:
    def test_scale_keeps_aspect(self) -> None:
        scaled = scale_to_width(Image.new("RGB", (200, 100)), 50)
        assert scaled.size == (50, 25)
        assert scaled.mode == "RGBA"

    def test_picture_bytes(self) -> None:
        picture = to_picture(Image.new("RGBA", (3, 2), (1, 2, 3, 4)))
        assert (picture.width, picture.height) == (3, 2)
        assert picture.data == bytes([1, 2, 3, 4]) * 6


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


class TestCommands:
    def test_open_image_returns_preview(self, processor, image_file) -> None:
        picture, error = processor.open_image(image_file)
        assert error is None
        assert (picture.width, picture.height) == (40, 20)
        assert len(picture.data) == 40 * 20 * 4
        assert processor.store.size == (2, 1)

    def test_open_missing_file_keeps_previous(self, processor, image_file, tmp_path) -> None:
        processor.open_image(image_file)
        picture, error = processor.open_image(tmp_path / "missing.png")
        assert picture is None
        assert "could not be opened" in error
        assert processor.store.size == (2, 1)

    def test_open_garbage_file(self, processor, tmp_path) -> None:
        path = tmp_path / "broken.png"
        path.write_bytes(b"not an image")
        picture, error = processor.open_image(path)
        assert picture is None
        assert str(path) in error

    def test_generate_full_size(self, processor, image_file) -> None:
        processor.open_image(image_file)
        result = processor.generate(cell_size=4, style=RenderStyle.GRID)
        assert result.size == (8, 4)

    def test_generate_without_image_raises(self, processor) -> None:
        with pytest.raises(EmptyImageError):
            processor.generate()

    def test_gen_image_reports_empty_store(self, processor) -> None:
        picture, error = processor.gen_image()
        assert picture is None
        assert "empty image" in error

    def test_gen_image_preview(self, processor, image_file) -> None:
        processor.open_image(image_file)
        picture, error = processor.gen_image(style=RenderStyle.CROSS)
        assert error is None
        assert (picture.width, picture.height) == (40, 20)

    def test_seeded_generation_is_repeatable(self, processor, image_file) -> None:
        processor.open_image(image_file)
        a = processor.generate(style=RenderStyle.STIPPLE)
        b = processor.generate(style=RenderStyle.STIPPLE)
        assert a.tobytes() == b.tobytes()

    def test_save_image(self, processor, image_file, tmp_path) -> None:
        processor.open_image(image_file)
        out = tmp_path / "out.png"
        ok, error = processor.save_image(out)
        assert ok and error is None
        with Image.open(out) as saved:
            assert saved.size == (20, 10)

    def test_save_jpeg_drops_alpha(self, processor, image_file, tmp_path) -> None:
        processor.open_image(image_file)
        out = tmp_path / "out.jpg"
        ok, _ = processor.save_image(out, cell_size=3)
        assert ok
        with Image.open(out) as saved:
            assert saved.mode == "RGB"

    def test_save_without_image_writes_nothing(self, processor, tmp_path) -> None:
        out = tmp_path / "out.png"
        ok, error = processor.save_image(out)
        assert not ok
        assert error
        assert not out.exists()

    def test_save_bad_cell_size(self, processor, image_file, tmp_path) -> None:
        processor.open_image(image_file)
        ok, error = processor.save_image(tmp_path / "out.png", cell_size=0)
        assert not ok
        assert "at least 1" in error

    def test_lock_fault_propagates(self, processor, image_file) -> None:
        processor.open_image(image_file)
        processor.store.lock_timeout_ms = 10
        with processor.store.write():
            with pytest.raises(StoreLockError):
                processor.gen_image()

    def test_gen_image_reports_bad_seed(self, image_file) -> None:
        processor = HalftoneProcessor(HalftoneConfig(seed="abc", preview_width=40))
        processor.open_image(image_file)
        picture, error = processor.gen_image()
        assert picture is None
        assert "Invalid seed" in error

    def test_save_image_reports_negative_seed(self, image_file, tmp_path) -> None:
        processor = HalftoneProcessor(HalftoneConfig(seed=-3))
        processor.open_image(image_file)
        out = tmp_path / "out.png"
        ok, error = processor.save_image(out)
        assert not ok
        assert "Invalid seed" in error
        assert not out.exists()


# ---------------------------------------------------------------------------
# Failed writes
# ---------------------------------------------------------------------------


def _truncating_save(self, fp, *args, **kwargs):
    with open(fp, "wb") as f:
        f.write(b"\x89PNG")
    raise OSError("disk full")


class TestFailedWrite:
    def test_existing_file_kept(self, processor, image_file, tmp_path, monkeypatch) -> None:
        processor.open_image(image_file)
        out = tmp_path / "out.png"
        out.write_bytes(b"previous")
        monkeypatch.setattr(Image.Image, "save", _truncating_save)
        ok, error = processor.save_image(out)
        assert not ok
        assert "disk full" in error
        assert out.read_bytes() == b"previous"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["out.png", "source.png"]

    def test_no_partial_file_left(self, processor, image_file, tmp_path, monkeypatch) -> None:
        processor.open_image(image_file)
        out = tmp_path / "out.png"
        monkeypatch.setattr(Image.Image, "save", _truncating_save)
        ok, _ = processor.save_image(out)
        assert not ok
        assert sorted(p.name for p in tmp_path.iterdir()) == ["source.png"]

    def test_unknown_extension(self, processor, image_file, tmp_path) -> None:
        processor.open_image(image_file)
        out = tmp_path / "out.xyz"
        ok, error = processor.save_image(out)
        assert not ok
        assert error
        assert sorted(p.name for p in tmp_path.iterdir()) == ["source.png"]
