"""Command line entry point: create a Minix filesystem in an existing file."""

from __future__ import annotations

import os
import sys
import time
from typing import BinaryIO, Sequence

from .inodes import write_maps
from .layout import BOOT_SIZE, MkfsError, _write_at
from .root import write_root
from .superblock import write_superblock


def create_filesystem(f: BinaryIO) -> None:
    """Write a complete empty Minix filesystem to the open binary file."""
    _write_at(f, 0, bytes(BOOT_SIZE), "boot block")
    write_superblock(f)
    write_maps(f)
    write_root(f, os.getuid(), os.getgid(), int(time.time()))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: mkfs.minix <device>")
        return 1

    device = args[0]
    try:
        f = open(device, "r+b")
    except OSError:
        print(f"Could not open {device}")
        return 1

    with f:
        try:
            create_filesystem(f)
        except MkfsError as exc:
            print(exc)
            print(f"Error occured in creating MINIX fs on {device}")
    return 0


if __name__ == "__main__":
    sys.exit(main())