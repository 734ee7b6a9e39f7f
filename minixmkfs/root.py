"""Creation of the root directory in inode 1 and the first data zone."""

from __future__ import annotations

from typing import BinaryIO

from .layout import (
    BLOCK_SIZE,
    DIR_ENTRY_SIZE,
    FIRST_ZONE,
    NAME_LEN,
    S_IFDIR,
    START_INODE_MAP,
    START_INODE_TABLE,
    START_ZONE_MAP,
    ZONES_PER_INODE,
    Inode,
    MkfsError,
    _write_at,
)

ROOT_INODE_NUMBER = 1


def root_inode(uid: int, gid: int, mtime: int) -> Inode:
    """Return the inode of the root directory."""
    return Inode(
        mode=S_IFDIR | 0o755,
        uid=uid,
        size=2 * DIR_ENTRY_SIZE,
        mtime=mtime,
        gid=gid,
        nlinks=2,
        zones=(FIRST_ZONE,) + (0,) * (ZONES_PER_INODE - 1),
    )


def _dir_entry(inode: int, name: str) -> bytes:
    return inode.to_bytes(2, "little") + name.encode("ascii").ljust(NAME_LEN, b"\0")


def root_directory_block() -> bytes:
    """Return the root directory's data block holding "." and ".."."""
    entries = _dir_entry(ROOT_INODE_NUMBER, ".") + _dir_entry(ROOT_INODE_NUMBER, "..")
    return entries.ljust(BLOCK_SIZE, b"\0")


def write_root(f: BinaryIO, uid: int, gid: int, mtime: int) -> None:
    """Write the root inode and directory, and mark both as used in the bitmaps."""
    _write_at(f, START_INODE_TABLE, root_inode(uid, gid, mtime).pack(), "root inode")
    _write_at(f, START_INODE_MAP, b"\x03", "inode map")
    _write_at(f, FIRST_ZONE * BLOCK_SIZE, root_directory_block(), "root directory")

    byte_offset, bit = divmod(FIRST_ZONE - 1, 8)
    position = START_ZONE_MAP + byte_offset
    try:
        f.seek(position)
        current = f.read(1)
    except OSError as exc:
        raise MkfsError(f"could not read zone map: {exc}") from exc
    if len(current) != 1:
        raise MkfsError("could not read zone map")
    _write_at(f, position, bytes([current[0] | (1 << bit)]), "zone map")