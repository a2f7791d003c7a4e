"""SHA-1 checksums of files stored in a V6 file system."""

from __future__ import annotations

import hashlib

from syslab.diskimg import SECTOR_SIZE
from syslab.unixfs import FilesystemError

CHKSUM_SIZE = 20
CHKSUM_STRING_SIZE = 2 * CHKSUM_SIZE


def checksum_by_inumber(fs, inumber: int) -> bytes:
    """Return the SHA-1 digest of the contents of inode ``inumber``."""
    inode = fs.iget(inumber)
    if not inode.is_allocated():
        raise FilesystemError(f"inode {inumber} is not allocated")
    digest = hashlib.sha1()
    num_blocks = (inode.size() + SECTOR_SIZE - 1) // SECTOR_SIZE
    for block_num in range(num_blocks):
        digest.update(fs.get_block(inumber, block_num))
    return digest.digest()


def checksum_by_pathname(fs, pathname: str) -> bytes:
    """Return the SHA-1 digest of the file at an absolute ``pathname``."""
    return checksum_by_inumber(fs, fs.lookup(pathname))


def to_hex(chksum: bytes) -> str:
    """Render a checksum as lower-case hexadecimal."""
    data = bytes(chksum)
    if len(data) != CHKSUM_SIZE:
        raise ValueError(f"checksum must be {CHKSUM_SIZE} bytes, got {len(data)}")
    return data.hex()