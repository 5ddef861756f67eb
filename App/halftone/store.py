"""Shared holder for the most recently loaded source image.

AIDEV-NOTE: Access goes through read()/write() context managers so the
lock is always released, including when the body raises. Any number of
readers may hold the image at once; a writer waits for them and then
has it exclusively, so a generation pass never sees a half-swapped image.
"""

from contextlib import contextmanager
from typing import Iterator

from PIL import Image
from PyQt6.QtCore import QReadWriteLock

from .errors import StoreLockError

DEFAULT_LOCK_TIMEOUT_MS = 5000


class ImageSlot:
    """Writable view of the store, valid only inside write()."""

    def __init__(self, image: Image.Image):
        self.image = image


class ImageStore:
    """Holds one RGBA source image behind a read/write lock."""

    def __init__(
        self,
        image: "Image.Image | None" = None,
        lock_timeout_ms: int = DEFAULT_LOCK_TIMEOUT_MS,
    ):
        self._image = image if image is not None else Image.new("RGBA", (0, 0))
        self._lock = QReadWriteLock(QReadWriteLock.RecursionMode.Recursive)
        self.lock_timeout_ms = lock_timeout_ms

    @contextmanager
    def read(self) -> Iterator[Image.Image]:
        """Borrow the held image for reading."""
        if not self._lock.tryLockForRead(self.lock_timeout_ms):
            raise StoreLockError(
                f"Could not lock image store for reading within {self.lock_timeout_ms} ms"
            )
        try:
            yield self._image
        finally:
            self._lock.unlock()

    @contextmanager
    def write(self) -> Iterator[ImageSlot]:
        """Borrow the store exclusively; assign slot.image to replace it."""
        if not self._lock.tryLockForWrite(self.lock_timeout_ms):
            raise StoreLockError(
                f"Could not lock image store for writing within {self.lock_timeout_ms} ms"
            )
        try:
            slot = ImageSlot(self._image)
            yield slot
            self._image = slot.image
        finally:
            self._lock.unlock()

    def replace(self, image: Image.Image) -> None:
        """Swap in a new source image."""
        with self.write() as slot:
            slot.image = image

    def snapshot(self) -> Image.Image:
        """Copy of the held image, taken under the read lock."""
        with self.read() as image:
            return image.copy()

    @property
    def size(self) -> "tuple[int, int]":
        with self.read() as image:
            return image.size
