"""Creation of the inode map, zone map and empty inode table."""

from __future__ import annotations

from typing import BinaryIO

from .layout import (
    BLOCK_SIZE,
    NUM_IMAP_BLOCKS,
    NUM_ITABLE_BLOCKS,
    NUM_ZMAP_BLOCKS,
    NUM_ZONES,
    START_INODE_MAP,
    TOTAL_BLOCKS,
    _write_at,
)


def inode_map() -> bytes:
    """Return an all-clear inode bitmap."""
    return bytes(NUM_IMAP_BLOCKS * BLOCK_SIZE)


def zone_map() -> bytes:
    """Return the zone bitmap with the bits past the last usable zone set."""
    bitmap = bytearray(NUM_ZMAP_BLOCKS * BLOCK_SIZE)
    for bit in range(NUM_ZONES, TOTAL_BLOCKS + 1):
        bitmap[bit >> 3] |= 1 << (bit & 0x7)
    return bytes(bitmap)


def write_maps(f: BinaryIO) -> None:
    """Write both bitmaps from block 2 on, followed by a zeroed inode table."""
    _write_at(f, START_INODE_MAP, inode_map(), "inode map")
    _write_at(f, None, zone_map(), "zone map")
    empty_block = bytes(BLOCK_SIZE)
    for _ in range(NUM_ITABLE_BLOCKS):
        _write_at(f, None, empty_block, "inode table")