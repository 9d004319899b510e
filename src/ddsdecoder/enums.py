"""DDS enumerations and flags"""
from enum import IntEnum, IntFlag
from typing import Type, TypeVar

F = TypeVar('F', bound=IntFlag)


def flags_from_int(flag_enum: Type[F], value: int) -> F:
    """
    Rebuild a flag set from a raw DWORD by testing each known bit.

    Bits that do not belong to any member of ``flag_enum`` are dropped.

    Args:
        flag_enum: The IntFlag enum class to decode into
        value: The raw 32-bit flag word

    Returns:
        Flag set containing every member whose bits are all present in value
    """
    result = flag_enum(0)
    for flag in flag_enum:
        if flag.value and (value & flag.value) == flag.value:
            result |= flag
    return result


class DDSD(IntFlag):
    """DDS_HEADER.dwFlags"""
    CAPS = 0x00000001
    HEIGHT = 0x00000002
    WIDTH = 0x00000004
    PITCH = 0x00000008
    PIXELFORMAT = 0x00001000
    MIPMAPCOUNT = 0x00020000
    LINEARSIZE = 0x00080000
    DEPTH = 0x00800000


class DDPF(IntFlag):
    """DDS_PIXELFORMAT.dwFlags"""
    ALPHAPIXELS = 0x00000001
    ALPHA = 0x00000002
    FOURCC = 0x00000004
    RGB = 0x00000040
    YUV = 0x00000200
    LUMINANCE = 0x00020000


class DDSCAPS(IntFlag):
    """DDS_HEADER.dwCaps"""
    COMPLEX = 0x00000008
    TEXTURE = 0x00001000
    MIPMAP = 0x00400000


class DDSCAPS2(IntFlag):
    """DDS_HEADER.dwCaps2"""
    CUBEMAP = 0x00000200
    CUBEMAP_POSITIVEX = 0x00000400
    CUBEMAP_NEGATIVEX = 0x00000800
    CUBEMAP_POSITIVEY = 0x00001000
    CUBEMAP_NEGATIVEY = 0x00002000
    CUBEMAP_POSITIVEZ = 0x00004000
    CUBEMAP_NEGATIVEZ = 0x00008000
    VOLUME = 0x00200000


def _fourcc(code: bytes) -> int:
    return int.from_bytes(code, 'little')


class FourCC(IntEnum):
    """
    Four-character codes recognised in DDS_PIXELFORMAT.dwFourCC.

    Values are the little-endian DWORD of the ASCII tag, so ``FourCC.DXT1``
    compares equal to the integer read from a file containing ``b'DXT1'``.
    """
    DXT1 = _fourcc(b'DXT1')
    DXT2 = _fourcc(b'DXT2')
    DXT3 = _fourcc(b'DXT3')
    DXT4 = _fourcc(b'DXT4')
    DXT5 = _fourcc(b'DXT5')
    DX10 = _fourcc(b'DX10')
    ATI1 = _fourcc(b'ATI1')
    ATI2 = _fourcc(b'ATI2')
    BC4U = _fourcc(b'BC4U')
    BC4S = _fourcc(b'BC4S')
    BC5U = _fourcc(b'BC5U')
    BC5S = _fourcc(b'BC5S')
    RGBG = _fourcc(b'RGBG')
    GRGB = _fourcc(b'GRGB')
    YUY2 = _fourcc(b'YUY2')

    @property
    def code(self) -> bytes:
        """The four ASCII bytes as stored in the file"""
        return self.value.to_bytes(4, 'little')


class DXGI_FORMAT(IntEnum):
    """DXGI_FORMAT values used by DDS_HEADER_DXT10.dxgiFormat"""
    UNKNOWN = 0
    R32G32B32A32_TYPELESS = 1
    R32G32B32A32_FLOAT = 2
    R32G32B32A32_UINT = 3
    R32G32B32A32_SINT = 4
    R32G32B32_TYPELESS = 5
    R32G32B32_FLOAT = 6
    R32G32B32_UINT = 7
    R32G32B32_SINT = 8
    R16G16B16A16_TYPELESS = 9
    R16G16B16A16_FLOAT = 10
    R16G16B16A16_UNORM = 11
    R16G16B16A16_UINT = 12
    R16G16B16A16_SNORM = 13
    R16G16B16A16_SINT = 14
    R32G32_TYPELESS = 15
    R32G32_FLOAT = 16
    R32G32_UINT = 17
    R32G32_SINT = 18
    R32G8X24_TYPELESS = 19
    D32_FLOAT_S8X24_UINT = 20
    R32_FLOAT_X8X24_TYPELESS = 21
    X32_TYPELESS_G8X24_UINT = 22
    R10G10B10A2_TYPELESS = 23
    R10G10B10A2_UNORM = 24
    R10G10B10A2_UINT = 25
    R11G11B10_FLOAT = 26
    R8G8B8A8_TYPELESS = 27
    R8G8B8A8_UNORM = 28
    R8G8B8A8_UNORM_SRGB = 29
    R8G8B8A8_UINT = 30
    R8G8B8A8_SNORM = 31
    R8G8B8A8_SINT = 32
    R16G16_TYPELESS = 33
    R16G16_FLOAT = 34
    R16G16_UNORM = 35
    R16G16_UINT = 36
    R16G16_SNORM = 37
    R16G16_SINT = 38
    R32_TYPELESS = 39
    D32_FLOAT = 40
    R32_FLOAT = 41
    R32_UINT = 42
    R32_SINT = 43
    R24G8_TYPELESS = 44
    D24_UNORM_S8_UINT = 45
    R24_UNORM_X8_TYPELESS = 46
    X24_TYPELESS_G8_UINT = 47
    R8G8_TYPELESS = 48
    R8G8_UNORM = 49
    R8G8_UINT = 50
    R8G8_SNORM = 51
    R8G8_SINT = 52
    R16_TYPELESS = 53
    R16_FLOAT = 54
    D16_UNORM = 55
    R16_UNORM = 56
    R16_UINT = 57
    R16_SNORM = 58
    R16_SINT = 59
    R8_TYPELESS = 60
    R8_UNORM = 61
    R8_UINT = 62
    R8_SNORM = 63
    R8_SINT = 64
    A8_UNORM = 65
    R1_UNORM = 66
    R9G9B9E5_SHAREDEXP = 67
    R8G8_B8G8_UNORM = 68
    G8R8_G8B8_UNORM = 69
    BC1_TYPELESS = 70
    BC1_UNORM = 71
    BC1_UNORM_SRGB = 72
    BC2_TYPELESS = 73
    BC2_UNORM = 74
    BC2_UNORM_SRGB = 75
    BC3_TYPELESS = 76
    BC3_UNORM = 77
    BC3_UNORM_SRGB = 78
    BC4_TYPELESS = 79
    BC4_UNORM = 80
    BC4_SNORM = 81
    BC5_TYPELESS = 82
    BC5_UNORM = 83
    BC5_SNORM = 84
    B5G6R5_UNORM = 85
    B5G5R5A1_UNORM = 86
    B8G8R8A8_UNORM = 87
    B8G8R8X8_UNORM = 88
    R10G10B10_XR_BIAS_A2_UNORM = 89
    B8G8R8A8_TYPELESS = 90
    B8G8R8A8_UNORM_SRGB = 91
    B8G8R8X8_TYPELESS = 92
    B8G8R8X8_UNORM_SRGB = 93
    BC6H_TYPELESS = 94
    BC6H_UF16 = 95
    BC6H_SF16 = 96
    BC7_TYPELESS = 97
    BC7_UNORM = 98
    BC7_UNORM_SRGB = 99
    AYUV = 100
    Y410 = 101
    Y416 = 102
    NV12 = 103
    P010 = 104
    P016 = 105
    OPAQUE_420 = 106
    YUY2 = 107
    Y210 = 108
    Y216 = 109
    NV11 = 110
    AI44 = 111
    IA44 = 112
    P8 = 113
    A8P8 = 114
    B4G4R4A4_UNORM = 115
    P208 = 130
    V208 = 131
    V408 = 132


class D3D10_RESOURCE_DIMENSION(IntEnum):
    """DDS_HEADER_DXT10.resourceDimension"""
    UNKNOWN = 0
    BUFFER = 1
    TEXTURE1D = 2
    TEXTURE2D = 3
    TEXTURE3D = 4


class DDS_RESOURCE_MISC(IntFlag):
    """DDS_HEADER_DXT10.miscFlag"""
    TEXTURECUBE = 0x4


class DDS_ALPHA_MODE(IntEnum):
    """Lower 3 bits of DDS_HEADER_DXT10.miscFlags2"""
    UNKNOWN = 0
    STRAIGHT = 1
    PREMULTIPLIED = 2
    OPAQUE = 3
    CUSTOM = 4
