"""Sector-level access to a disk image file."""

from __future__ import annotations

import os

SECTOR_SIZE = 512


class DiskImageError(OSError):
    """Raised when a disk image cannot be opened, read or written."""


class DiskImage:
    """A disk image file read and written one sector at a time."""

    def __init__(self, path, read_only=True):
        self.path = os.fspath(path)
        self.read_only = read_only
        mode = "rb" if read_only else "r+b"
        try:
            self._file = open(self.path, mode)
        except OSError as exc:
            raise DiskImageError(
                f"cannot open disk image {self.path}: {exc.strerror or exc}"
            ) from exc

    def _ensure_open(self) -> None:
        if self._file.closed:
            raise DiskImageError(f"disk image {self.path} is closed")

    def read_sector(self, sector: int) -> bytes:
        """Return the bytes of a sector; shorter than a sector at the end of the image."""
        self._ensure_open()
        if sector < 0:
            raise DiskImageError(f"invalid sector number {sector}")
        try:
            self._file.seek(sector * SECTOR_SIZE)
            return self._file.read(SECTOR_SIZE)
        except OSError as exc:
            raise DiskImageError(f"cannot read sector {sector}: {exc}") from exc

    def write_sector(self, sector: int, data) -> int:
        """Write one whole sector and return the number of bytes written."""
        self._ensure_open()
        payload = bytes(data)
        if len(payload) != SECTOR_SIZE:
            raise ValueError(
                f"sector data must be {SECTOR_SIZE} bytes, got {len(payload)}"
            )
        if self.read_only:
            raise DiskImageError(f"disk image {self.path} is opened read-only")
        if sector < 0:
            raise DiskImageError(f"invalid sector number {sector}")
        try:
            self._file.seek(sector * SECTOR_SIZE)
            written = self._file.write(payload)
            self._file.flush()
        except OSError as exc:
            raise DiskImageError(f"cannot write sector {sector}: {exc}") from exc
        return written

    def size(self) -> int:
        """Return the size of the image in bytes."""
        self._ensure_open()
        try:
            return self._file.seek(0, os.SEEK_END)
        except OSError as exc:
            raise DiskImageError(f"cannot get size of {self.path}: {exc}") from exc

    def close(self) -> None:
        """Close the underlying file."""
        if not self._file.closed:
            self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
        return False