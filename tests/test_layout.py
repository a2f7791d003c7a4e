import struct

import pytest

from syslab.layout import (
    INODES_PER_SECTOR,
    DirEntry,
    FileMode,
    Inode,
    Superblock,
)

INODE_FMT = "<HBBBBH8H2H2H"


def _inode_bytes(mode, size0, size1, addr=(), atime=(0, 0), mtime=(0, 0)):
    addr = list(addr) + [0] * (8 - len(addr))
    return struct.pack(INODE_FMT, mode, 2, 3, 4, size0, size1, *addr, *atime, *mtime)


def test_mode_bits_match_on_disk_values():
    assert Inode.from_bytes(_inode_bytes(0o100000, 0, 0)).is_allocated()
    assert Inode.from_bytes(_inode_bytes(0o140000, 0, 0)).is_directory()
    assert Inode.from_bytes(_inode_bytes(0o110000, 0, 0)).is_large()
    assert not Inode.from_bytes(_inode_bytes(0o160000, 0, 0)).is_directory()


def test_sector_holds_inodes_per_sector_records():
    sector = b"".join(
        _inode_bytes(FileMode.ALLOC, 0, index) for index in range(INODES_PER_SECTOR)
    )
    assert len(sector) == 512
    sizes = [
        Inode.from_bytes(sector[index * 32:(index + 1) * 32]).size()
        for index in range(INODES_PER_SECTOR)
    ]
    assert sizes == list(range(16))


def test_superblock_from_bytes():
    free = [7, 8, 9] + [0] * 97
    inodes = [11, 12] + [0] * 98
    raw = struct.pack(
        "<3H100HH100H4B2H48H", 10, 400, 3, *free, 2, *inodes, 1, 0, 1, 0, 5, 6, *[0] * 48
    )
    assert len(raw) == 512
    sb = Superblock.from_bytes(raw)
    assert sb.isize == 10
    assert sb.fsize == 400
    assert sb.nfree == 3
    assert sb.free[:3] == (7, 8, 9)
    assert sb.ninode == 2
    assert sb.inode[:2] == (11, 12)
    assert (sb.flock, sb.ilock, sb.fmod, sb.ronly) == (1, 0, 1, 0)
    assert sb.time == (5, 6)


def test_superblock_short_data_raises():
    with pytest.raises(ValueError):
        Superblock.from_bytes(bytes(100))


def test_inode_fields():
    raw = _inode_bytes(FileMode.ALLOC | FileMode.DIR, 0, 48, addr=(4, 5), atime=(1, 2), mtime=(3, 9))
    inode = Inode.from_bytes(raw)
    assert inode.nlink == 2
    assert (inode.uid, inode.gid) == (3, 4)
    assert inode.addr == (4, 5, 0, 0, 0, 0, 0, 0)
    assert inode.atime == (1, 2)
    assert inode.mtime == (3, 9)
    assert inode.size() == 48
    assert inode.is_allocated()
    assert inode.is_directory()
    assert not inode.is_large()


def test_inode_size_uses_high_byte():
    inode = Inode.from_bytes(_inode_bytes(FileMode.ALLOC, 1, 2))
    assert inode.size() == 65538


def test_inode_flags_regular_large_file():
    inode = Inode.from_bytes(_inode_bytes(FileMode.ALLOC | FileMode.LARGE, 0, 10))
    assert inode.is_large()
    assert not inode.is_directory()


def test_inode_unallocated():
    inode = Inode.from_bytes(_inode_bytes(0, 0, 0))
    assert not inode.is_allocated()


def test_block_special_is_not_directory():
    inode = Inode.from_bytes(_inode_bytes(FileMode.ALLOC | FileMode.BLK, 0, 0))
    assert not inode.is_directory()


def test_inode_short_data_raises():
    with pytest.raises(ValueError):
        Inode.from_bytes(bytes(10))


def test_direntry_from_bytes():
    entry = DirEntry.from_bytes(struct.pack("<H14s", 5, b"hello"))
    assert entry.inumber == 5
    assert entry.name == "hello"


def test_direntry_full_length_name():
    entry = DirEntry.from_bytes(struct.pack("<H14s", 7, b"abcdefghijklmn"))
    assert entry.name == "abcdefghijklmn"
    assert entry.inumber == 7


def test_direntry_short_data_raises():
    with pytest.raises(ValueError):
        DirEntry.from_bytes(b"\x01\x00ab")