"""Shared test fixtures."""

import struct

import pytest

from ddsdecoder.enums import DDPF, DDSCAPS, DDSD


def build_header(
    *,
    width: int = 4,
    height: int = 4,
    mip_count: int = 1,
    fourcc: bytes = b"DXT1",
    pf_flags: int = DDPF.FOURCC,
    flags: int = DDSD.CAPS | DDSD.HEIGHT | DDSD.WIDTH | DDSD.PIXELFORMAT,
    pitch: int = 0,
    depth: int = 0,
    caps: int = DDSCAPS.TEXTURE,
    caps2: int = 0,
    masks: tuple = (0, 0, 0, 0),
    rgb_bit_count: int = 0,
    reserved1: tuple = (0,) * 11,
) -> bytes:
    """Build the 124-byte DDS_HEADER (without the magic number)."""
    header = bytearray()
    header += struct.pack("<2I", 124, flags)
    header += struct.pack("<5I", height, width, pitch, depth, mip_count)
    header += struct.pack("<11I", *reserved1)
    header += struct.pack("<II4s5I", 32, pf_flags, fourcc, rgb_bit_count, *masks)
    header += struct.pack("<5I", caps, caps2, 0, 0, 0)
    assert len(header) == 124
    return bytes(header)


def build_dxt10(
    dxgi_format: int,
    dimension: int = 3,
    misc_flag: int = 0,
    array_size: int = 1,
    misc_flags2: int = 0,
) -> bytes:
    """Build the 20-byte DDS_HEADER_DXT10."""
    return struct.pack("<5I", dxgi_format, dimension, misc_flag, array_size, misc_flags2)


def build_dds(payload: bytes = b"", dxgi_format: int = None, dxt10: dict = None, **header_kwargs) -> bytes:
    """Build a complete DDS file: magic, header, optional DX10 header, payload."""
    if dxgi_format is not None:
        header_kwargs.setdefault("fourcc", b"DX10")
    data = b"DDS " + build_header(**header_kwargs)
    if dxgi_format is not None:
        data += build_dxt10(dxgi_format, **(dxt10 or {}))
    return data + payload


@pytest.fixture
def make_dds():
    return build_dds


@pytest.fixture
def make_header():
    return build_header


@pytest.fixture
def make_dxt10():
    return build_dxt10
