"""Creation of the filesystem superblock."""

from __future__ import annotations

from typing import BinaryIO

from .layout import (
    BLOCK_SIZE,
    FIRST_ZONE,
    MAGIC,
    MAX_FILE_SIZE,
    NUM_IMAP_BLOCKS,
    NUM_INODES,
    NUM_ZMAP_BLOCKS,
    START_SUPER_BLOCK,
    STATE,
    TOTAL_BLOCKS,
    ZONE_LOG_SIZE,
    SuperBlock,
    _write_at,
)


def default_superblock() -> SuperBlock:
    """Return the superblock describing this package's fixed layout."""
    return SuperBlock(
        ninodes=NUM_INODES,
        nzones=TOTAL_BLOCKS,
        imap_blocks=NUM_IMAP_BLOCKS,
        zmap_blocks=NUM_ZMAP_BLOCKS,
        first_data_zone=FIRST_ZONE,
        log_zone_size=ZONE_LOG_SIZE,
        max_size=MAX_FILE_SIZE,
        magic=MAGIC,
        state=STATE,
    )


def write_superblock(f: BinaryIO) -> None:
    """Write the superblock, zero-padded to a full block, into block 1."""
    block = default_superblock().pack().ljust(BLOCK_SIZE, b"\0")
    _write_at(f, START_SUPER_BLOCK, block, "superblock")