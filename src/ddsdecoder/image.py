"""Decoded surfaces and the file metadata they share"""
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .enums import DXGI_FORMAT
from .errors import UnsupportedFormat
from .formats import Compression, PixelFormat
from .headers import DDS_HEADER, DDS_HEADER_DXT10
from .resolver import effective_dxgi_format


@dataclass(frozen=True)
class DDSMetadata:
    """Parsed headers of one DDS file, shared by every Image decoded from it"""
    header: DDS_HEADER
    header10: Optional[DDS_HEADER_DXT10] = None  # Present only for the DX10 FourCC

    def is_cubemap(self) -> bool:
        """Checks both DDSCAPS2.CUBEMAP and the DX10 TEXTURECUBE misc flag"""
        if self.header10 is not None and self.header10.is_cubemap():
            return True
        return self.header.is_cubemap()

    def is_volume(self) -> bool:
        """Checks both the DX10 resourceDimension and DDSCAPS2.VOLUME"""
        if self.header10 is not None and self.header10.is_volume():
            return True
        return self.header.is_volume()

    @property
    def dxgi_format(self) -> Optional[DXGI_FORMAT]:
        return effective_dxgi_format(self.header, self.header10)

    @property
    def format_str(self) -> str:
        """Human-readable format string"""
        dxgi_format = self.dxgi_format
        if dxgi_format is not None:
            return dxgi_format.name
        return f"FourCC {self.header.ddspf.dwFourCC.name}"


@dataclass(frozen=True)
class Image:
    """One mipmap level of a DDS file, with its data stored exactly as in the file"""
    level: int
    width: int
    height: int
    pixel_format: PixelFormat
    compression: Compression
    contents: bytes
    metadata: DDSMetadata

    @property
    def size(self) -> int:
        return len(self.contents)

    @property
    def is_compressed(self) -> bool:
        return self.compression.is_block_compressed

    def to_array(self) -> np.ndarray:
        """
        View uncompressed level data as a numpy array.

        Returns:
            numpy array of shape (height, width, channels) with dtype uint8,
            channels ordered as in ``pixel_format.channels``

        Raises:
            UnsupportedFormat: If the level is block-compressed
        """
        if self.is_compressed:
            raise UnsupportedFormat(self.compression, "block-compressed data cannot be viewed as pixels")

        channels = self.pixel_format.bytes_per_pixel
        return np.frombuffer(self.contents, dtype=np.uint8).reshape(self.height, self.width, channels)
