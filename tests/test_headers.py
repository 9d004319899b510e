"""Tests for DDS header parsing."""

import struct

import pytest

from ddsdecoder.enums import (
    DDPF, DDSCAPS, DDSCAPS2, DDSD, DDS_ALPHA_MODE, DDS_RESOURCE_MISC, D3D10_RESOURCE_DIMENSION, DXGI_FORMAT,
    FourCC, flags_from_int,
)
from ddsdecoder.errors import InvalidHeader, TruncatedError, UnrecognizedFourCC, UnsupportedFormat
from ddsdecoder.headers import DDS_HEADER, DDS_HEADER_DXT10, DDS_PIXELFORMAT
from ddsdecoder.stream import TypedStream


class TestFlags:
    def test_known_bits_are_kept(self):
        flags = flags_from_int(DDSD, 0x1 | 0x2 | 0x4 | 0x1000 | 0x20000)
        assert DDSD.CAPS in flags
        assert DDSD.MIPMAPCOUNT in flags
        assert DDSD.PITCH not in flags

    def test_unknown_bits_are_dropped(self):
        flags = flags_from_int(DDSCAPS, 0x1000 | 0x80000000)
        assert flags == DDSCAPS.TEXTURE

    def test_zero(self):
        assert flags_from_int(DDPF, 0) == DDPF(0)

    def test_fourcc_value_matches_file_bytes(self):
        assert FourCC.DXT5.code == b"DXT5"
        assert FourCC(struct.unpack("<I", b"DX10")[0]) is FourCC.DX10


class TestHeader:
    def test_fields(self, make_header):
        data = make_header(
            width=256, height=128, mip_count=9, fourcc=b"DXT5", pitch=32768, depth=0,
            flags=DDSD.CAPS | DDSD.HEIGHT | DDSD.WIDTH | DDSD.PIXELFORMAT | DDSD.MIPMAPCOUNT | DDSD.LINEARSIZE,
            caps=DDSCAPS.TEXTURE | DDSCAPS.MIPMAP | DDSCAPS.COMPLEX,
            reserved1=tuple(range(11)),
        )
        header = DDS_HEADER.from_bytes(data)
        assert header.dwSize == 124
        assert header.dwWidth == 256
        assert header.dwHeight == 128
        assert header.dwMipMapCount == 9
        assert header.mip_count == 9
        assert header.dwPitchOrLinearSize == 32768
        assert header.dwReserved1 == tuple(range(11))
        assert header.ddspf.dwFourCC is FourCC.DXT5
        assert header.ddspf.has_flag(DDPF.FOURCC)
        assert header.has_flag(DDSD.LINEARSIZE)
        assert not header.has_flag(DDSD.PITCH)
        assert header.has_mips()
        assert not header.is_cubemap()
        assert not header.is_volume()

    def test_consumes_exactly_124_bytes(self, make_header):
        stream = TypedStream(make_header() + b"tail")
        DDS_HEADER.read(stream)
        assert stream.tell() == 124
        assert stream.read(4) == b"tail"

    def test_zero_mip_count_means_one_level(self, make_header):
        header = DDS_HEADER.from_bytes(make_header(mip_count=0))
        assert header.mip_count == 1
        assert not header.has_mips()

    def test_mip_count_without_mipmap_cap(self, make_header):
        header = DDS_HEADER.from_bytes(make_header(mip_count=3))
        assert not header.has_mips()

    def test_cubemap_caps2(self, make_header):
        header = DDS_HEADER.from_bytes(make_header(caps2=DDSCAPS2.CUBEMAP | DDSCAPS2.CUBEMAP_POSITIVEX))
        assert header.is_cubemap()
        assert header.has_caps2(DDSCAPS2.CUBEMAP_POSITIVEX)
        assert not header.has_caps2(DDSCAPS2.CUBEMAP_NEGATIVEZ)

    def test_pixel_format_masks(self, make_header):
        masks = (0x00FF0000, 0x0000FF00, 0x000000FF, 0xFF000000)
        header = DDS_HEADER.from_bytes(
            make_header(fourcc=b"DXT3", pf_flags=DDPF.FOURCC | DDPF.ALPHAPIXELS, masks=masks, rgb_bit_count=32)
        )
        assert header.ddspf.dwRGBBitCount == 32
        assert header.ddspf.is_bitmask(*masks)
        assert not header.ddspf.is_bitmask()
        assert header.ddspf.has_flag(DDPF.ALPHAPIXELS)

    @pytest.mark.parametrize("code", [b"\x00\x00\x00\x00", b"DXT6", b"dxt1", b"ABCD"])
    def test_unrecognized_fourcc(self, make_header, code):
        with pytest.raises(UnrecognizedFourCC) as excinfo:
            DDS_HEADER.from_bytes(make_header(fourcc=code))
        assert excinfo.value.code == code

    def test_truncated_header(self, make_header):
        with pytest.raises(TruncatedError):
            DDS_HEADER.from_bytes(make_header()[:100])

    def test_headers_are_immutable(self, make_header):
        header = DDS_HEADER.from_bytes(make_header())
        with pytest.raises(AttributeError):
            header.dwWidth = 8

    def test_pixelformat_defaults(self):
        assert DDS_PIXELFORMAT().dwSize == DDS_PIXELFORMAT.SIZE == 32


class TestHeaderDXT10:
    def test_fields(self, make_dxt10):
        header10 = DDS_HEADER_DXT10.from_bytes(
            make_dxt10(DXGI_FORMAT.BC7_UNORM_SRGB, dimension=3, misc_flag=0x4, array_size=2, misc_flags2=2)
        )
        assert header10.dxgiFormat is DXGI_FORMAT.BC7_UNORM_SRGB
        assert header10.resourceDimension is D3D10_RESOURCE_DIMENSION.TEXTURE2D
        assert header10.miscFlag == DDS_RESOURCE_MISC.TEXTURECUBE
        assert header10.is_cubemap()
        assert header10.arraySize == 2
        assert header10.alphaMode is DDS_ALPHA_MODE.PREMULTIPLIED

    def test_alpha_mode_ignores_upper_bits(self, make_dxt10):
        header10 = DDS_HEADER_DXT10.from_bytes(make_dxt10(DXGI_FORMAT.BC1_UNORM, misc_flags2=0xFFFFFFF8 | 3))
        assert header10.alphaMode is DDS_ALPHA_MODE.OPAQUE

    def test_volume(self, make_dxt10):
        header10 = DDS_HEADER_DXT10.from_bytes(make_dxt10(DXGI_FORMAT.R8G8B8A8_UNORM, dimension=4))
        assert header10.is_volume()
        assert not header10.is_cubemap()

    def test_unknown_dxgi_format(self, make_dxt10):
        with pytest.raises(UnsupportedFormat) as excinfo:
            DDS_HEADER_DXT10.from_bytes(make_dxt10(1000))
        assert excinfo.value.code == 1000

    def test_invalid_resource_dimension(self, make_dxt10):
        with pytest.raises(InvalidHeader):
            DDS_HEADER_DXT10.from_bytes(make_dxt10(DXGI_FORMAT.BC1_UNORM, dimension=9))

    def test_invalid_alpha_mode(self, make_dxt10):
        with pytest.raises(InvalidHeader):
            DDS_HEADER_DXT10.from_bytes(make_dxt10(DXGI_FORMAT.BC1_UNORM, misc_flags2=7))

    def test_truncated(self, make_dxt10):
        with pytest.raises(TruncatedError):
            DDS_HEADER_DXT10.from_bytes(make_dxt10(DXGI_FORMAT.BC1_UNORM)[:12])
