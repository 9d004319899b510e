"""ddsdecoder - DDS texture container decoder"""

__version__ = "0.1.0"

# Entry points
from .decoder import DDSDecoder, decode
from .dds import DDS

# Decoded surfaces
from .image import DDSMetadata, Image
from .formats import Compression, PixelFormat
from .resolver import ResolvedFormat, resolve

# Header structures
from .headers import (
    DDS_HEADER,
    DDS_HEADER_DXT10,
    DDS_PIXELFORMAT,
)

# Enumerations and flags
from .enums import (
    DDSD,
    DDPF,
    DDSCAPS,
    DDSCAPS2,
    FourCC,
    DXGI_FORMAT,
    D3D10_RESOURCE_DIMENSION,
    DDS_RESOURCE_MISC,
    DDS_ALPHA_MODE,
)

# Errors
from .errors import (
    DDSError,
    DDSFormatError,
    InvalidHeader,
    NotRecognized,
    TruncatedError,
    UnrecognizedFourCC,
    UnsupportedFormat,
)

from .stream import TypedStream

# CLI entry point
from .cli import main

__all__ = [
    '__version__',
    'DDSDecoder',
    'decode',
    'DDS',
    'DDSMetadata',
    'Image',
    'Compression',
    'PixelFormat',
    'ResolvedFormat',
    'resolve',
    'DDS_HEADER',
    'DDS_HEADER_DXT10',
    'DDS_PIXELFORMAT',
    'DDSD',
    'DDPF',
    'DDSCAPS',
    'DDSCAPS2',
    'FourCC',
    'DXGI_FORMAT',
    'D3D10_RESOURCE_DIMENSION',
    'DDS_RESOURCE_MISC',
    'DDS_ALPHA_MODE',
    'DDSError',
    'DDSFormatError',
    'InvalidHeader',
    'NotRecognized',
    'TruncatedError',
    'UnrecognizedFourCC',
    'UnsupportedFormat',
    'TypedStream',
    'main',
]
