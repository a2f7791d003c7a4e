# syslab

A small collection of systems-programming tools written in plain Python:

- a reader for Unix Version 6 disk images (superblock, inodes, small and
  large files, directories, absolute path lookup, SHA-1 checksums);
- an ordered list of typed strings whose entries can be concatenated by type;
- a ring of processes that pass a counter along through pipes;
- a minimal interactive shell that runs pipelines of commands.

The package has no runtime dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Reading a Unix V6 disk image

```python
from syslab.diskimg import DiskImage
from syslab.unixfs import UnixFilesystem
from syslab.chksum import checksum_by_pathname, to_hex

with DiskImage("basic.img", read_only=True) as disk:
    fs = UnixFilesystem(disk)
    inumber = fs.lookup("/bigfile")
    inode = fs.iget(inumber)
    print(inumber, inode.size(), inode.is_directory())
    print(to_hex(checksum_by_pathname(fs, "/bigfile")))
```

`UnixFilesystem` checks the boot block magic number and reads the superblock
when it is created. It offers `iget`, `index_lookup`, `get_block`,
`find_name` and `lookup`. Errors are reported by raising `FilesystemError`
(or `DiskImageError` for problems with the image file itself).

The `diskimageaccess` command prints information about an image:

```
diskimageaccess [-q] [-i] [-p] path/to/image.img
```

- `-q` leaves out the disk size and superblock summary;
- `-i` prints the mode, size and checksum of every allocated inode;
- `-p` walks the directory tree from `/` and prints the checksum of every path.

The same work is available from Python through
`syslab.diskimageaccess.get_dir_entries`, `print_directory`,
`dump_inode_checksums` and `dump_pathname_checksums`.

## The string list

```python
from syslab.stringlist import StringProcList

items = StringProcList()
items.add_node(0, "hola")
items.add_node(1, "a")
items.add_node(0, "todos!")
print(items.concat(0, "hash"))   # "hashholatodos!"
print(len(items))                # 3
```

Node types must lie in 0..255. `print_to(file)` writes the list length and
every node.

```
syslab-stringdemo [output-file]
```

fills lists with a fixed sample workload, using types drawn from a generator
seeded with 0, and writes the printed lists and the per-type concatenations to
`output-file` (by default `salida.caso.propio.ej1.txt`).

## Process ring

```
syslab-ring <n> <value> <start>
```

Starts `n` processes (at least 3) connected in a ring by pipes. The parent
sends `value` to process `start`; each process adds one and passes it on,
and the parent prints the final value once it has gone all the way round.
From Python, `syslab.ring.run_ring(n, value, start)` returns that final value
and raises `RingError` for invalid parameters.

## Shell

```
syslab-shell
```

Reads lines at a `Shell> ` prompt, splits each line on `|` into commands,
splits every command into arguments (double quotes group words into one
argument) and runs the commands as a pipeline. Typing `exit` or sending
end-of-file leaves the shell.

## What the package does not do

- It does not modify V6 file systems: files and directories can be read and
  checksummed, but not created, written or removed. `DiskImage` can write raw
  sectors, and nothing more.
- It has no thread pool or task scheduler.
- The shell has no built-in commands besides `exit`, no redirection to files
  and no background jobs.