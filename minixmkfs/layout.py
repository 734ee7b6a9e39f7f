"""On-disk layout of the Minix V1 filesystem created by this package.

Disk layout: boot 0, superblock 1, inode map 2-3, zone map 4-11,
inode table 12-523, data zones 524-65535.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO

BOOT_SIZE = 512
BLOCK_SIZE = 1024
BLOCK_SIZE_BITS = BLOCK_SIZE * 8
NAME_LEN = 30
DIR_ENTRY_SIZE = NAME_LEN + 2

_INODE_STRUCT = struct.Struct("<HHIIBB9H")
_SUPER_STRUCT = struct.Struct("<6HIHHI")

INODE_SIZE = _INODE_STRUCT.size
SUPER_BLOCK_SIZE = _SUPER_STRUCT.size
ZONES_PER_INODE = 9

NUM_IMAP_BLOCKS = 2
NUM_ZMAP_BLOCKS = 8
NUM_ITABLE_BLOCKS = NUM_IMAP_BLOCKS * BLOCK_SIZE_BITS * INODE_SIZE // BLOCK_SIZE

NUM_INODES = BLOCK_SIZE_BITS * NUM_IMAP_BLOCKS - 1
TOTAL_BLOCKS = 64 * 1024 - 1
FIRST_ZONE = 1 + 1 + NUM_IMAP_BLOCKS + NUM_ZMAP_BLOCKS + NUM_ITABLE_BLOCKS
ZONE_LOG_SIZE = 0
MAX_FILE_SIZE = (7 + 512 + 512 * 512) * 1024
MAGIC = 0x138F  # V1, 30 characters per file name
STATE = 0x01
NUM_ZONES = TOTAL_BLOCKS - FIRST_ZONE

START_SUPER_BLOCK = BLOCK_SIZE
START_INODE_MAP = 2 * BLOCK_SIZE
START_ZONE_MAP = START_INODE_MAP + NUM_IMAP_BLOCKS * BLOCK_SIZE
START_INODE_TABLE = START_ZONE_MAP + NUM_ZMAP_BLOCKS * BLOCK_SIZE

S_IFDIR = 0o040000


class MkfsError(Exception):
    """Raised when the filesystem cannot be written."""


@dataclass(frozen=True)
class SuperBlock:
    """A Minix V1 superblock."""

    ninodes: int
    nzones: int
    imap_blocks: int
    zmap_blocks: int
    first_data_zone: int
    log_zone_size: int
    max_size: int
    magic: int
    state: int
    zones: int = 0

    def pack(self) -> bytes:
        """Return the superblock in its on-disk little-endian form."""
        return _SUPER_STRUCT.pack(
            self.ninodes,
            self.nzones,
            self.imap_blocks,
            self.zmap_blocks,
            self.first_data_zone,
            self.log_zone_size,
            self.max_size,
            self.magic,
            self.state,
            self.zones,
        )


@dataclass(frozen=True)
class Inode:
    """A Minix V1 inode."""

    mode: int
    uid: int
    size: int
    mtime: int
    gid: int
    nlinks: int
    zones: tuple[int, ...] = (0,) * ZONES_PER_INODE

    def __post_init__(self) -> None:
        if len(self.zones) != ZONES_PER_INODE:
            raise ValueError(
                f"an inode has {ZONES_PER_INODE} zone pointers, got {len(self.zones)}"
            )

    def pack(self) -> bytes:
        """Return the inode in its on-disk form, truncating fields to their widths."""
        return _INODE_STRUCT.pack(
            self.mode & 0xFFFF,
            self.uid & 0xFFFF,
            self.size & 0xFFFFFFFF,
            self.mtime & 0xFFFFFFFF,
            self.gid & 0xFF,
            self.nlinks & 0xFF,
            *(zone & 0xFFFF for zone in self.zones),
        )


def _write_at(f: BinaryIO, offset: int | None, data: bytes, what: str) -> None:
    """Write data at offset (or the current position), raising MkfsError on failure."""
    try:
        if offset is not None:
            f.seek(offset)
        written = f.write(data)
    except OSError as exc:
        raise MkfsError(f"could not write {what}: {exc}") from exc
    if written is not None and written != len(data):
        raise MkfsError(f"only wrote {written} bytes of {what}")