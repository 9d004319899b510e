"""Normalized pixel formats, compression schemes and the lookup tables that select them"""
from enum import Enum
from typing import Dict

from .enums import DXGI_FORMAT, FourCC


class Compression(Enum):
    """Block compression scheme of the stored level data"""
    NONE = 'none'
    BC1 = 'BC1'
    BC2 = 'BC2'
    BC3 = 'BC3'
    BC4 = 'BC4'
    BC5 = 'BC5'
    BC6 = 'BC6'
    BC7 = 'BC7'

    @property
    def bytes_per_block(self) -> int:
        """Bytes per 4x4 block, or 0 for uncompressed data"""
        return _BYTES_PER_BLOCK[self]

    @property
    def is_block_compressed(self) -> bool:
        return self is not Compression.NONE


_BYTES_PER_BLOCK = {
    Compression.NONE: 0,
    Compression.BC1: 8,
    Compression.BC2: 16,
    Compression.BC3: 16,
    Compression.BC4: 8,
    Compression.BC5: 16,
    Compression.BC6: 16,
    Compression.BC7: 16,
}


class PixelFormat(Enum):
    """Channel layout of a decoded pixel, 8 bits per channel"""
    R8G8B8 = 'RGB'
    R8G8B8A8 = 'RGBA'
    B8G8R8A8 = 'BGRA'
    R8 = 'R'
    R8G8 = 'RG'

    @property
    def channels(self) -> str:
        """Channel order, e.g. 'BGRA'"""
        return self.value

    @property
    def bytes_per_pixel(self) -> int:
        return len(self.value)


# Legacy FourCC -> compression
FOURCC_COMPRESSION: Dict[FourCC, Compression] = {
    FourCC.DXT1: Compression.BC1,
    FourCC.DXT2: Compression.BC2,
    FourCC.DXT3: Compression.BC2,
    FourCC.DXT4: Compression.BC3,
    FourCC.DXT5: Compression.BC3,
    FourCC.ATI1: Compression.BC4,
    FourCC.BC4U: Compression.BC4,
    FourCC.BC4S: Compression.BC4,
    FourCC.ATI2: Compression.BC5,
    FourCC.BC5U: Compression.BC5,
    FourCC.BC5S: Compression.BC5,
}

# Legacy FourCC -> pixel format
FOURCC_PIXEL_FORMAT: Dict[FourCC, PixelFormat] = {
    FourCC.DXT1: PixelFormat.R8G8B8,
    FourCC.DXT2: PixelFormat.R8G8B8A8,
    FourCC.DXT3: PixelFormat.R8G8B8A8,
    FourCC.DXT4: PixelFormat.R8G8B8A8,
    FourCC.DXT5: PixelFormat.R8G8B8A8,
    FourCC.ATI1: PixelFormat.R8,
    FourCC.BC4U: PixelFormat.R8,
    FourCC.BC4S: PixelFormat.R8,
    FourCC.ATI2: PixelFormat.R8G8,
    FourCC.BC5U: PixelFormat.R8G8,
    FourCC.BC5S: PixelFormat.R8G8,
}

# DX10 DXGI format -> compression; anything absent is uncompressed
DXGI_COMPRESSION: Dict[DXGI_FORMAT, Compression] = {
    DXGI_FORMAT.BC1_TYPELESS: Compression.BC1,
    DXGI_FORMAT.BC1_UNORM: Compression.BC1,
    DXGI_FORMAT.BC1_UNORM_SRGB: Compression.BC1,
    DXGI_FORMAT.BC2_TYPELESS: Compression.BC2,
    DXGI_FORMAT.BC2_UNORM: Compression.BC2,
    DXGI_FORMAT.BC2_UNORM_SRGB: Compression.BC2,
    DXGI_FORMAT.BC3_TYPELESS: Compression.BC3,
    DXGI_FORMAT.BC3_UNORM: Compression.BC3,
    DXGI_FORMAT.BC3_UNORM_SRGB: Compression.BC3,
    DXGI_FORMAT.BC4_TYPELESS: Compression.BC4,
    DXGI_FORMAT.BC4_UNORM: Compression.BC4,
    DXGI_FORMAT.BC4_SNORM: Compression.BC4,
    DXGI_FORMAT.BC5_TYPELESS: Compression.BC5,
    DXGI_FORMAT.BC5_UNORM: Compression.BC5,
    DXGI_FORMAT.BC5_SNORM: Compression.BC5,
    DXGI_FORMAT.BC6H_TYPELESS: Compression.BC6,
    DXGI_FORMAT.BC6H_UF16: Compression.BC6,
    DXGI_FORMAT.BC6H_SF16: Compression.BC6,
    DXGI_FORMAT.BC7_TYPELESS: Compression.BC7,
    DXGI_FORMAT.BC7_UNORM: Compression.BC7,
    DXGI_FORMAT.BC7_UNORM_SRGB: Compression.BC7,
}

# DX10 DXGI format -> pixel format
DXGI_PIXEL_FORMAT: Dict[DXGI_FORMAT, PixelFormat] = {
    DXGI_FORMAT.B8G8R8A8_TYPELESS: PixelFormat.B8G8R8A8,
    DXGI_FORMAT.B8G8R8A8_UNORM: PixelFormat.B8G8R8A8,
    DXGI_FORMAT.B8G8R8A8_UNORM_SRGB: PixelFormat.B8G8R8A8,

    DXGI_FORMAT.R8G8B8A8_TYPELESS: PixelFormat.R8G8B8A8,
    DXGI_FORMAT.R8G8B8A8_UNORM: PixelFormat.R8G8B8A8,
    DXGI_FORMAT.R8G8B8A8_UNORM_SRGB: PixelFormat.R8G8B8A8,
    DXGI_FORMAT.R8G8B8A8_UINT: PixelFormat.R8G8B8A8,
    DXGI_FORMAT.R8G8B8A8_SNORM: PixelFormat.R8G8B8A8,
    DXGI_FORMAT.R8G8B8A8_SINT: PixelFormat.R8G8B8A8,

    # Compressed RGBA
    DXGI_FORMAT.BC2_TYPELESS: PixelFormat.R8G8B8A8,
    DXGI_FORMAT.BC2_UNORM: PixelFormat.R8G8B8A8,
    DXGI_FORMAT.BC2_UNORM_SRGB: PixelFormat.R8G8B8A8,
    DXGI_FORMAT.BC3_TYPELESS: PixelFormat.R8G8B8A8,
    DXGI_FORMAT.BC3_UNORM: PixelFormat.R8G8B8A8,
    DXGI_FORMAT.BC3_UNORM_SRGB: PixelFormat.R8G8B8A8,
    DXGI_FORMAT.BC7_TYPELESS: PixelFormat.R8G8B8A8,
    DXGI_FORMAT.BC7_UNORM: PixelFormat.R8G8B8A8,
    DXGI_FORMAT.BC7_UNORM_SRGB: PixelFormat.R8G8B8A8,

    # Compressed RGB
    DXGI_FORMAT.BC1_TYPELESS: PixelFormat.R8G8B8,
    DXGI_FORMAT.BC1_UNORM: PixelFormat.R8G8B8,
    DXGI_FORMAT.BC1_UNORM_SRGB: PixelFormat.R8G8B8,
    DXGI_FORMAT.BC6H_TYPELESS: PixelFormat.R8G8B8,
    DXGI_FORMAT.BC6H_UF16: PixelFormat.R8G8B8,
    DXGI_FORMAT.BC6H_SF16: PixelFormat.R8G8B8,

    # Compressed single and dual channel
    DXGI_FORMAT.BC4_TYPELESS: PixelFormat.R8,
    DXGI_FORMAT.BC4_UNORM: PixelFormat.R8,
    DXGI_FORMAT.BC4_SNORM: PixelFormat.R8,
    DXGI_FORMAT.BC5_TYPELESS: PixelFormat.R8G8,
    DXGI_FORMAT.BC5_UNORM: PixelFormat.R8G8,
    DXGI_FORMAT.BC5_SNORM: PixelFormat.R8G8,
}

# Legacy FourCC -> equivalent DXGI format
FOURCC_TO_DXGI: Dict[FourCC, DXGI_FORMAT] = {
    FourCC.DXT1: DXGI_FORMAT.BC1_UNORM,
    FourCC.DXT2: DXGI_FORMAT.BC2_UNORM,  # Premultiplied alpha
    FourCC.DXT3: DXGI_FORMAT.BC2_UNORM,
    FourCC.DXT4: DXGI_FORMAT.BC3_UNORM,  # Premultiplied alpha
    FourCC.DXT5: DXGI_FORMAT.BC3_UNORM,
    FourCC.BC4U: DXGI_FORMAT.BC4_UNORM,
    FourCC.BC4S: DXGI_FORMAT.BC4_SNORM,
    FourCC.BC5U: DXGI_FORMAT.BC5_UNORM,
    FourCC.BC5S: DXGI_FORMAT.BC5_SNORM,
    FourCC.ATI1: DXGI_FORMAT.BC4_UNORM,
    FourCC.ATI2: DXGI_FORMAT.BC5_UNORM,
    FourCC.RGBG: DXGI_FORMAT.R8G8_B8G8_UNORM,
    FourCC.GRGB: DXGI_FORMAT.G8R8_G8B8_UNORM,
    FourCC.YUY2: DXGI_FORMAT.YUY2,
}
