# minixmkfs

`minixmkfs` writes an empty Minix V1 filesystem (30-character file names,
magic `0x138F`) into an existing partition or image file. The layout is
fixed:

| Blocks        | Contents                      |
|---------------|-------------------------------|
| 0             | boot block (first 512 bytes zeroed) |
| 1             | superblock                    |
| 2–3           | inode bitmap                  |
| 4–11          | zone bitmap                   |
| 12–523        | inode table                   |
| 524–65534     | data zones                    |

Blocks are 1024 bytes, and each zone holds one block. The superblock
records 16383 inodes and 65535 zones. The root directory is inode 1. Its
data block is the first data zone (524) and holds the entries `.` and `..`.
The directory has mode `drwxr-xr-x`, the current user and group, and the
current time.

## Installation

```
pip install .
```

## Command line

The target file must already exist and must be writable. It is opened for
reading and writing and is never created or truncated:

```
truncate -s 64M disk.img
mkfs-minix disk.img
```

`python -m minixmkfs.cli disk.img` does the same thing.

The command takes exactly one argument. If it gets a different number, it
prints `Usage: mkfs.minix <device>` and exits with status 1. If the file
cannot be opened, it prints `Could not open <file>` and exits with status 1.
If a write fails partway, it prints the error and
`Error occured in creating MINIX fs on <file>`, and still exits with status 0.

## Library use

```python
from minixmkfs.cli import create_filesystem

with open("disk.img", "r+b") as f:
    create_filesystem(f)
```

`create_filesystem(f)` takes any seekable binary file opened for reading
and writing, such as `io.BytesIO`. It uses `os.getuid()` and `os.getgid()`
for the root directory's owner, so it needs a POSIX system.

You can also build or write each part on its own:

- `minixmkfs.superblock`: `default_superblock()` returns the `SuperBlock`.
  `write_superblock(f)` writes it, padded to a full block, into block 1.
- `minixmkfs.inodes`: `inode_map()` returns the empty inode bitmap.
  `zone_map()` returns the zone bitmap, with the bits past the last usable
  zone set. `write_maps(f)` writes both bitmaps and a zeroed inode table.
- `minixmkfs.root`: `root_inode(uid, gid, mtime)` returns the root
  directory's `Inode`. `root_directory_block()` returns its data block.
  `write_root(f, uid, gid, mtime)` writes both and marks them as used in
  the inode and zone bitmaps.

`minixmkfs.layout` holds the layout constants and the on-disk structures
`SuperBlock` and `Inode`. Each structure has a `pack()` method that returns
its little-endian bytes. `Inode.pack()` cuts each field down to its on-disk
width. Write and read failures raise `minixmkfs.layout.MkfsError`.

## What it does not do

- The geometry is fixed. The size of the target file is not checked, and
  there are no options for the block size, the inode count or the zone count.
- It has no bad-block scan, no volume label, and no support for other Minix
  versions or name lengths.
- It does not check or read an existing filesystem. Everything it writes
  replaces what was there.

## Running the tests

```
pip install .[test]
pytest
```