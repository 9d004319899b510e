"""DDS header structures"""
from dataclasses import dataclass, field
from typing import Tuple

from .enums import (
    DDPF, DDSD, DDSCAPS, DDSCAPS2, DXGI_FORMAT, D3D10_RESOURCE_DIMENSION, DDS_RESOURCE_MISC, DDS_ALPHA_MODE,
    FourCC, flags_from_int,
)
from .errors import InvalidHeader, UnrecognizedFourCC, UnsupportedFormat
from .stream import BytesLike, TypedStream


@dataclass(frozen=True)
class DDS_PIXELFORMAT:
    """DDS Pixel Format structure (32 bytes)"""
    dwSize: int = 32  # Size of structure (always 32)
    dwFlags: DDPF = DDPF(0)  # Flags to indicate which members are valid
    dwFourCC: FourCC = FourCC.DXT1  # Four-character code
    dwRGBBitCount: int = 0  # Number of bits per pixel
    dwRBitMask: int = 0  # Red bit mask
    dwGBitMask: int = 0  # Green bit mask
    dwBBitMask: int = 0  # Blue bit mask
    dwABitMask: int = 0  # Alpha bit mask

    SIZE = 32

    @classmethod
    def read(cls, stream: TypedStream) -> 'DDS_PIXELFORMAT':
        """Read DDS_PIXELFORMAT from the stream"""
        size = stream.uint32('DDS_PIXELFORMAT.dwSize')
        flags = flags_from_int(DDPF, stream.uint32('DDS_PIXELFORMAT.dwFlags'))

        code = stream.read(4, 'DDS_PIXELFORMAT.dwFourCC')
        try:
            fourcc = FourCC(int.from_bytes(code, 'little'))
        except ValueError:
            raise UnrecognizedFourCC(code) from None

        bit_count, r_mask, g_mask, b_mask, a_mask = stream.array(5, 'I', 'DDS_PIXELFORMAT masks')
        return cls(
            dwSize=size,
            dwFlags=flags,
            dwFourCC=fourcc,
            dwRGBBitCount=bit_count,
            dwRBitMask=r_mask,
            dwGBitMask=g_mask,
            dwBBitMask=b_mask,
            dwABitMask=a_mask,
        )

    def has_flag(self, flag: DDPF) -> bool:
        return flag in self.dwFlags

    def is_bitmask(self, r: int = 0, g: int = 0, b: int = 0, a: int = 0) -> bool:
        """Check whether the channel masks equal the given masks"""
        return (self.dwRBitMask, self.dwGBitMask, self.dwBBitMask, self.dwABitMask) == (r, g, b, a)


@dataclass(frozen=True)
class DDS_HEADER:
    """DDS Header structure (124 bytes)"""
    dwSize: int = 124  # Size of structure (always 124)
    dwFlags: DDSD = DDSD.CAPS | DDSD.HEIGHT | DDSD.WIDTH | DDSD.PIXELFORMAT
    dwHeight: int = 0  # Height of surface in pixels
    dwWidth: int = 0  # Width of surface in pixels
    dwPitchOrLinearSize: int = 0  # Pitch or linear size of data
    dwDepth: int = 0  # Depth of volume texture
    dwMipMapCount: int = 0  # Number of mipmap levels
    dwReserved1: Tuple[int, ...] = (0,) * 11  # Reserved (11 DWORDs)
    ddspf: DDS_PIXELFORMAT = field(default_factory=DDS_PIXELFORMAT)  # Pixel format
    dwCaps: DDSCAPS = DDSCAPS.TEXTURE  # Surface complexity flags
    dwCaps2: DDSCAPS2 = DDSCAPS2(0)  # Additional surface flags
    dwReserved2: Tuple[int, ...] = (0,) * 3  # dwCaps3, dwCaps4, dwReserved2

    SIZE = 124

    @classmethod
    def read(cls, stream: TypedStream) -> 'DDS_HEADER':
        """
        Read DDS_HEADER from the stream.

        The stream must be positioned just past the "DDS " magic number.
        Exactly 124 bytes are consumed.

        Raises:
            TruncatedError: If the stream ends inside the header
            UnrecognizedFourCC: If the pixel format tag is not a known FourCC
        """
        size = stream.uint32('DDS_HEADER.dwSize')
        flags = flags_from_int(DDSD, stream.uint32('DDS_HEADER.dwFlags'))
        height, width, pitch, depth, mip_count = stream.array(5, 'I', 'DDS_HEADER')
        reserved1 = tuple(stream.array(11, 'I', 'DDS_HEADER.dwReserved1'))
        pixelformat = DDS_PIXELFORMAT.read(stream)
        caps = flags_from_int(DDSCAPS, stream.uint32('DDS_HEADER.dwCaps'))
        caps2 = flags_from_int(DDSCAPS2, stream.uint32('DDS_HEADER.dwCaps2'))
        reserved2 = tuple(stream.array(3, 'I', 'DDS_HEADER.dwReserved2'))

        return cls(
            dwSize=size,
            dwFlags=flags,
            dwHeight=height,
            dwWidth=width,
            dwPitchOrLinearSize=pitch,
            dwDepth=depth,
            dwMipMapCount=mip_count,
            dwReserved1=reserved1,
            ddspf=pixelformat,
            dwCaps=caps,
            dwCaps2=caps2,
            dwReserved2=reserved2,
        )

    @classmethod
    def from_bytes(cls, data: BytesLike) -> 'DDS_HEADER':
        """Read DDS_HEADER from 124 bytes of data"""
        return cls.read(TypedStream(data))

    @property
    def mip_count(self) -> int:
        """Number of stored mipmap levels (a count of 0 means a single level)"""
        return self.dwMipMapCount if self.dwMipMapCount > 0 else 1

    def has_flag(self, flag: DDSD) -> bool:
        return flag in self.dwFlags

    def has_caps(self, cap: DDSCAPS) -> bool:
        return cap in self.dwCaps

    def has_caps2(self, cap: DDSCAPS2) -> bool:
        return cap in self.dwCaps2

    def has_mips(self) -> bool:
        return self.dwMipMapCount > 0 and self.has_caps(DDSCAPS.MIPMAP)

    def is_cubemap(self) -> bool:
        return self.has_caps2(DDSCAPS2.CUBEMAP)

    def is_volume(self) -> bool:
        return self.has_caps2(DDSCAPS2.VOLUME)


@dataclass(frozen=True)
class DDS_HEADER_DXT10:
    """DDS DX10 Extended Header structure (20 bytes)"""
    dxgiFormat: DXGI_FORMAT = DXGI_FORMAT.UNKNOWN  # DXGI format
    resourceDimension: D3D10_RESOURCE_DIMENSION = D3D10_RESOURCE_DIMENSION.UNKNOWN  # Resource dimension
    miscFlag: DDS_RESOURCE_MISC = DDS_RESOURCE_MISC(0)  # Miscellaneous flags
    arraySize: int = 0  # Array size
    alphaMode: DDS_ALPHA_MODE = DDS_ALPHA_MODE.UNKNOWN  # Lower 3 bits of miscFlags2

    SIZE = 20

    @classmethod
    def read(cls, stream: TypedStream) -> 'DDS_HEADER_DXT10':
        """
        Read DDS_HEADER_DXT10 from the stream (20 bytes).

        Raises:
            TruncatedError: If fewer than 20 bytes remain
            UnsupportedFormat: If dxgiFormat is not a DXGI_FORMAT value
            InvalidHeader: If resourceDimension or the alpha mode is out of range
        """
        values = stream.array(5, 'I', 'DDS_HEADER_DXT10')

        try:
            dxgi_format = DXGI_FORMAT(values[0])
        except ValueError:
            raise UnsupportedFormat(values[0], "unknown DXGI format") from None
        try:
            dimension = D3D10_RESOURCE_DIMENSION(values[1])
        except ValueError:
            raise InvalidHeader(f"Invalid resource dimension {values[1]}") from None
        try:
            alpha_mode = DDS_ALPHA_MODE(values[4] & 0x7)
        except ValueError:
            raise InvalidHeader(f"Invalid alpha mode {values[4] & 0x7}") from None

        return cls(
            dxgiFormat=dxgi_format,
            resourceDimension=dimension,
            miscFlag=flags_from_int(DDS_RESOURCE_MISC, values[2]),
            arraySize=values[3],
            alphaMode=alpha_mode,
        )

    @classmethod
    def from_bytes(cls, data: BytesLike) -> 'DDS_HEADER_DXT10':
        """Read DDS_HEADER_DXT10 from 20 bytes of data"""
        return cls.read(TypedStream(data))

    def is_cubemap(self) -> bool:
        return DDS_RESOURCE_MISC.TEXTURECUBE in self.miscFlag

    def is_volume(self) -> bool:
        return self.resourceDimension == D3D10_RESOURCE_DIMENSION.TEXTURE3D
