"""Read access to a Unix Version 6 file system stored in a disk image."""

from __future__ import annotations

import struct
from itertools import count

from syslab.diskimg import SECTOR_SIZE
from syslab.layout import (
    BOOTBLOCK_MAGIC_NUM,
    BOOTBLOCK_SECTOR,
    DIRENT_SIZE,
    INODE_SIZE,
    INODE_START_SECTOR,
    INODES_PER_SECTOR,
    NAME_LENGTH,
    ROOT_INUMBER,
    SUPERBLOCK_SECTOR,
    DirEntry,
    Inode,
    Superblock,
)

PTRS_PER_BLOCK = SECTOR_SIZE // 2
SMALL_FILE_BLOCKS = 8
INDIRECT_BLOCKS = 7 * PTRS_PER_BLOCK
_MAX_PATH = 1024
_POINTERS = struct.Struct(f"<{PTRS_PER_BLOCK}H")


class FilesystemError(Exception):
    """Raised when the file system cannot satisfy a request."""


def _name_bytes(raw: bytes) -> bytes:
    return raw[:NAME_LENGTH].split(b"\0", 1)[0]


class UnixFilesystem:
    """A V6 file system on top of a sector-addressed disk image."""

    def __init__(self, disk):
        self.disk = disk
        boot = self._read(BOOTBLOCK_SECTOR)
        if len(boot) != SECTOR_SIZE:
            raise FilesystemError("Error reading bootblock")
        magic = struct.unpack_from("<H", boot)[0]
        if magic != BOOTBLOCK_MAGIC_NUM:
            raise FilesystemError(f"Bad magic number on disk(0x{magic:x})")
        raw = self._read(SUPERBLOCK_SECTOR)
        if len(raw) != SECTOR_SIZE:
            raise FilesystemError("Error reading superblock")
        self.superblock = Superblock.from_bytes(raw)

    def _read(self, sector: int) -> bytes:
        try:
            return self.disk.read_sector(sector)
        except OSError as exc:
            raise FilesystemError(f"cannot read sector {sector}: {exc}") from exc

    def _pointers(self, sector: int) -> tuple:
        data = self._read(sector)
        if len(data) < SECTOR_SIZE:
            raise FilesystemError(f"short read of block map sector {sector}")
        return _POINTERS.unpack(data)

    def iget(self, inumber: int) -> Inode:
        """Fetch inode number ``inumber`` (numbered from 1)."""
        if inumber < 1:
            raise FilesystemError(f"invalid inode number {inumber}")
        index = inumber - 1
        sector = INODE_START_SECTOR + index // INODES_PER_SECTOR
        data = self._read(sector)
        offset = (index % INODES_PER_SECTOR) * INODE_SIZE
        if len(data) < offset + INODE_SIZE:
            raise FilesystemError(f"cannot read inode {inumber}")
        return Inode.from_bytes(data[offset:offset + INODE_SIZE])

    def index_lookup(self, inode: Inode, block_num: int) -> int:
        """Map a file block index to a disk block number."""
        if block_num < 0:
            raise FilesystemError(f"invalid block index {block_num}")

        if not inode.is_large():
            if block_num >= SMALL_FILE_BLOCKS:
                raise FilesystemError(f"block index {block_num} beyond small file")
            return inode.addr[block_num]

        if block_num < INDIRECT_BLOCKS:
            indirect = inode.addr[block_num // PTRS_PER_BLOCK]
            if indirect == 0:
                raise FilesystemError(f"no indirect block for index {block_num}")
            return self._pointers(indirect)[block_num % PTRS_PER_BLOCK]

        offset = block_num - INDIRECT_BLOCKS
        outer, inner = divmod(offset, PTRS_PER_BLOCK)
        if outer >= PTRS_PER_BLOCK:
            raise FilesystemError(f"block index {block_num} beyond largest file")
        double_indirect = inode.addr[7]
        if double_indirect == 0:
            raise FilesystemError(f"no double indirect block for index {block_num}")
        inner_block = self._pointers(double_indirect)[outer]
        if inner_block == 0:
            raise FilesystemError(f"no indirect block for index {block_num}")
        return self._pointers(inner_block)[inner]

    def get_block(self, inumber: int, block_num: int) -> bytes:
        """Return the valid bytes of block ``block_num`` of a file."""
        inode = self.iget(inumber)
        disk_block = self.index_lookup(inode, block_num)
        data = self._read(disk_block)
        start = block_num * SECTOR_SIZE
        size = inode.size()
        if start >= size:
            return b""
        return data[:min(size - start, SECTOR_SIZE)]

    def find_name(self, name: str, dir_inumber: int) -> DirEntry:
        """Find ``name`` in the directory ``dir_inumber``."""
        self.iget(dir_inumber)
        wanted = _name_bytes(name.encode("utf-8", errors="surrogateescape"))
        for block_num in count():
            try:
                data = self.get_block(dir_inumber, block_num)
            except FilesystemError:
                break
            if not data:
                break
            for offset in range(0, len(data) - DIRENT_SIZE + 1, DIRENT_SIZE):
                chunk = data[offset:offset + DIRENT_SIZE]
                if _name_bytes(chunk[2:]) == wanted:
                    return DirEntry.from_bytes(chunk)
        raise FilesystemError(f"{name!r} not found in directory {dir_inumber}")

    def lookup(self, pathname: str) -> int:
        """Return the inode number of an absolute pathname."""
        if not pathname or not pathname.startswith("/"):
            raise FilesystemError(f"not an absolute path: {pathname!r}")
        inumber = ROOT_INUMBER
        for part in pathname[:_MAX_PATH - 1].split("/"):
            if part:
                inumber = self.find_name(part, inumber).inumber
        return inumber