"""Inspect a V6 disk image: superblock facts, inode and pathname checksums."""

from __future__ import annotations

import getopt
import sys

from syslab.chksum import checksum_by_inumber, checksum_by_pathname, to_hex
from syslab.diskimg import SECTOR_SIZE, DiskImage, DiskImageError
from syslab.layout import DIRENT_SIZE, ROOT_INUMBER, DirEntry
from syslab.unixfs import FilesystemError, UnixFilesystem

MAX_ENTRIES = 10000
_MAX_PATH = 1024
_PROG = "diskimageaccess"


def get_dir_entries(fs, inumber: int, max_entries: int = MAX_ENTRIES) -> list:
    """Return up to ``max_entries`` entries of directory ``inumber``."""
    inode = fs.iget(inumber)
    if not inode.is_allocated() or not inode.is_directory():
        raise FilesystemError(f"inode {inumber} is not an allocated directory")
    if max_entries < 1:
        raise FilesystemError("max_entries must be at least 1")
    size = inode.size()
    if size % DIRENT_SIZE:
        raise FilesystemError(f"directory {inumber} has a malformed size {size}")

    entries = []
    num_blocks = (size + SECTOR_SIZE - 1) // SECTOR_SIZE
    for block_num in range(num_blocks):
        data = fs.get_block(inumber, block_num)
        for offset in range(0, len(data) - DIRENT_SIZE + 1, DIRENT_SIZE):
            entries.append(DirEntry.from_bytes(data[offset:offset + DIRENT_SIZE]))
            if len(entries) >= max_entries:
                return entries
    return entries


def print_directory(fs, pathname: str, out=None) -> None:
    """Print every entry of the directory at ``pathname``."""
    out = out if out is not None else sys.stdout
    try:
        inumber = fs.lookup(pathname)
    except FilesystemError:
        print(f"Can't find {pathname}", file=sys.stderr)
        return
    try:
        entries = get_dir_entries(fs, inumber)
    except FilesystemError:
        print(f"Can't read entries from {pathname}", file=sys.stderr)
        return
    for entry in entries:
        print(f"Direntry {pathname} Name {entry.name} Inumber {entry.inumber}", file=out)


def dump_inode_checksums(fs, out=None) -> None:
    """Write the checksum of every allocated inode."""
    out = out if out is not None else sys.stdout
    for inumber in range(1, fs.superblock.isize * 16):
        try:
            inode = fs.iget(inumber)
        except FilesystemError:
            print(f"Can't read inode {inumber} ", file=sys.stderr)
            return
        if not inode.is_allocated():
            continue
        try:
            chksum = checksum_by_inumber(fs, inumber)
        except FilesystemError:
            print(f"Inode {inumber} can't compute chksum", file=sys.stderr)
            continue
        print(
            f"Inode {inumber} mode 0x{inode.mode:x} size {inode.size()} "
            f"checksum {to_hex(chksum)}",
            file=out,
        )


def _dump_path_and_children(fs, pathname: str, inumber: int, out) -> None:
    try:
        inode = fs.iget(inumber)
    except FilesystemError:
        print(f"Can't read inode {inumber} ", file=sys.stderr)
        return
    if not inode.is_allocated():
        raise FilesystemError(f"inode {inumber} of {pathname} is not allocated")

    try:
        by_inumber = checksum_by_inumber(fs, inumber)
        by_path = checksum_by_pathname(fs, pathname)
    except FilesystemError:
        print(f"Can't checksum inode {inumber} path {pathname}", file=sys.stderr)
        return
    if by_inumber != by_path:
        print(f"Pathname checksum of {pathname} differs from inode {inumber}",
              file=sys.stderr)
        return

    print(
        f"Path {pathname} {inumber} mode 0x{inode.mode:x} size {inode.size()} "
        f"checksum {to_hex(by_path)}",
        file=out,
    )

    prefix = "" if pathname == "/" else pathname
    if not inode.is_directory():
        return
    if len(prefix) > _MAX_PATH - 16:
        print(f"Too deep of directories {prefix}", file=sys.stderr)
    try:
        entries = get_dir_entries(fs, inumber)
    except FilesystemError:
        return
    for entry in entries:
        if entry.name in (".", ".."):
            continue
        _dump_path_and_children(fs, f"{prefix}/{entry.name}", entry.inumber, out)


def dump_pathname_checksums(fs, out=None) -> None:
    """Write checksums of every file reachable from the root directory."""
    out = out if out is not None else sys.stdout
    _dump_path_and_children(fs, "/", ROOT_INUMBER, out)


def _usage() -> int:
    print(f"Usage: {_PROG} <options> diskimagePath", file=sys.stderr)
    print("where <options> can be:", file=sys.stderr)
    print("-q     don't print extra info", file=sys.stderr)
    print("-i     print all inode checksums", file=sys.stderr)
    print("-p     print all pathname checksums", file=sys.stderr)
    return 1


def main(argv=None) -> int:
    """Command-line entry point; returns the exit status."""
    argv = sys.argv[1:] if argv is None else list(argv)
    try:
        opts, args = getopt.gnu_getopt(argv, "iqp")
    except getopt.GetoptError:
        return _usage()
    if len(args) != 1:
        return _usage()
    flags = {opt for opt, _ in opts}
    quiet = "-q" in flags
    diskpath = args[0]

    try:
        disk = DiskImage(diskpath, True)
    except DiskImageError:
        print(f"Can't open diskimagePath {diskpath}", file=sys.stderr)
        return 1

    with disk:
        try:
            fs = UnixFilesystem(disk)
        except FilesystemError as exc:
            print(exc, file=sys.stderr)
            print("Failed to initialize unix filesystem", file=sys.stderr)
            return 1

        if not quiet:
            try:
                disksize = disk.size()
            except DiskImageError:
                print(f"Error getting the size of {diskpath}", file=sys.stderr)
                return 1
            print(f"Disk {diskpath} is {disksize} bytes ({disksize // 1024} KB)")
            print(f"Superblock s_isize {fs.superblock.isize}")
            print(f"Superblock s_fsize {fs.superblock.fsize}")
            print(f"Superblock s_nfree {fs.superblock.nfree}")
            print(f"Superblock s_ninode {fs.superblock.ninode}")

        try:
            if "-i" in flags:
                dump_inode_checksums(fs, sys.stdout)
            if "-p" in flags:
                dump_pathname_checksums(fs, sys.stdout)
        except FilesystemError as exc:
            print(exc, file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())