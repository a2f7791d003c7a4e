"""On-disk structures of the Unix Version 6 file system."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntFlag

BOOTBLOCK_SECTOR = 0
SUPERBLOCK_SECTOR = 1
INODE_START_SECTOR = 2
ROOT_INUMBER = 1
BOOTBLOCK_MAGIC_NUM = 0o407

INODE_SIZE = 32
DIRENT_SIZE = 16
NAME_LENGTH = 14
INODES_PER_SECTOR = 512 // INODE_SIZE

_SUPERBLOCK = struct.Struct("<3H100HH100H4B2H48H")
_INODE = struct.Struct("<HBBBBH8H2H2H")
_DIRENT = struct.Struct("<H14s")


class FileMode(IntFlag):
    """Bits of an inode's mode word."""

    ALLOC = 0o100000
    FMT = 0o60000
    DIR = 0o40000
    CHR = 0o20000
    BLK = 0o60000
    LARGE = 0o10000
    SUID = 0o4000
    SGID = 0o2000
    SVTX = 0o1000
    READ = 0o400
    WRITE = 0o200
    EXEC = 0o100


def _require(data, size: int, what: str) -> bytes:
    data = bytes(data)
    if len(data) < size:
        raise ValueError(f"{what} needs {size} bytes, got {len(data)}")
    return data


@dataclass(frozen=True)
class Superblock:
    """The superblock stored in sector 1."""

    isize: int
    fsize: int
    nfree: int
    free: tuple
    ninode: int
    inode: tuple
    flock: int
    ilock: int
    fmod: int
    ronly: int
    time: tuple

    @classmethod
    def from_bytes(cls, data) -> "Superblock":
        fields = _SUPERBLOCK.unpack_from(_require(data, _SUPERBLOCK.size, "superblock"))
        return cls(
            isize=fields[0],
            fsize=fields[1],
            nfree=fields[2],
            free=tuple(fields[3:103]),
            ninode=fields[103],
            inode=tuple(fields[104:204]),
            flock=fields[204],
            ilock=fields[205],
            fmod=fields[206],
            ronly=fields[207],
            time=tuple(fields[208:210]),
        )


@dataclass(frozen=True)
class Inode:
    """An on-disk inode."""

    mode: int
    nlink: int
    uid: int
    gid: int
    size0: int
    size1: int
    addr: tuple
    atime: tuple
    mtime: tuple

    @classmethod
    def from_bytes(cls, data) -> "Inode":
        fields = _INODE.unpack_from(_require(data, INODE_SIZE, "inode"))
        return cls(
            mode=fields[0],
            nlink=fields[1],
            uid=fields[2],
            gid=fields[3],
            size0=fields[4],
            size1=fields[5],
            addr=tuple(fields[6:14]),
            atime=tuple(fields[14:16]),
            mtime=tuple(fields[16:18]),
        )

    def size(self) -> int:
        """File size in bytes, stored as a three-byte number."""
        return (self.size0 << 16) | self.size1

    def is_allocated(self) -> bool:
        return bool(self.mode & FileMode.ALLOC)

    def is_directory(self) -> bool:
        return (self.mode & FileMode.FMT) == FileMode.DIR

    def is_large(self) -> bool:
        return bool(self.mode & FileMode.LARGE)


@dataclass(frozen=True)
class DirEntry:
    """A directory entry: an inode number and a name of up to 14 bytes."""

    inumber: int
    name: str

    @classmethod
    def from_bytes(cls, data) -> "DirEntry":
        inumber, raw = _DIRENT.unpack_from(_require(data, DIRENT_SIZE, "directory entry"))
        name = raw.split(b"\0", 1)[0].decode("utf-8", errors="surrogateescape")
        return cls(inumber=inumber, name=name)