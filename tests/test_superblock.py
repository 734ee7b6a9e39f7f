import io
import struct

import pytest

from minixmkfs import layout
from minixmkfs.layout import MkfsError
from minixmkfs.superblock import default_superblock, write_superblock


def test_default_superblock_fields():
    sb = default_superblock()
    assert sb.ninodes == layout.NUM_INODES
    assert sb.nzones == layout.TOTAL_BLOCKS
    assert sb.imap_blocks == layout.NUM_IMAP_BLOCKS
    assert sb.zmap_blocks == layout.NUM_ZMAP_BLOCKS
    assert sb.first_data_zone == layout.FIRST_ZONE
    assert sb.log_zone_size == 0
    assert sb.max_size == layout.MAX_FILE_SIZE
    assert sb.magic == layout.MAGIC
    assert sb.state == layout.STATE
    assert sb.zones == 0


def test_write_superblock_places_block_one():
    buf = io.BytesIO(b"\xaa" * (3 * layout.BLOCK_SIZE))
    write_superblock(buf)
    data = buf.getvalue()
    assert data[: layout.BLOCK_SIZE] == b"\xaa" * layout.BLOCK_SIZE
    block = data[layout.BLOCK_SIZE : 2 * layout.BLOCK_SIZE]
    packed = default_superblock().pack()
    assert block[: len(packed)] == packed
    assert set(block[len(packed) :]) == {0}
    assert data[2 * layout.BLOCK_SIZE :] == b"\xaa" * layout.BLOCK_SIZE


def test_written_magic_is_little_endian_v1():
    buf = io.BytesIO()
    write_superblock(buf)
    data = buf.getvalue()
    assert data[layout.BLOCK_SIZE + 16 : layout.BLOCK_SIZE + 18] == b"\x8f\x13"


def test_written_superblock_decodes():
    buf = io.BytesIO()
    write_superblock(buf)
    fields = struct.unpack_from("<6HIHHI", buf.getvalue(), layout.BLOCK_SIZE)
    assert fields[0] == layout.NUM_INODES
    assert fields[4] == layout.FIRST_ZONE
    assert fields[7] == layout.MAGIC


def test_write_superblock_to_readonly_file_raises(tmp_path):
    path = tmp_path / "disk.img"
    path.write_bytes(b"\0" * 4096)
    with path.open("rb") as f, pytest.raises(MkfsError):
        write_superblock(f)