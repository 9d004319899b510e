"""Select the pixel format and compression scheme described by the DDS headers"""
from typing import NamedTuple, Optional

from .enums import DXGI_FORMAT, FourCC
from .errors import UnsupportedFormat
from .formats import (
    DXGI_COMPRESSION, DXGI_PIXEL_FORMAT, FOURCC_COMPRESSION, FOURCC_PIXEL_FORMAT, FOURCC_TO_DXGI,
    Compression, PixelFormat,
)
from .headers import DDS_HEADER, DDS_HEADER_DXT10


class ResolvedFormat(NamedTuple):
    pixel_format: PixelFormat
    compression: Compression


def _require_dxt10(header10: Optional[DDS_HEADER_DXT10]) -> DDS_HEADER_DXT10:
    if header10 is None:
        raise UnsupportedFormat(FourCC.DX10, "DX10 FourCC without a DDS_HEADER_DXT10")
    return header10


def resolve_compression(header: DDS_HEADER, header10: Optional[DDS_HEADER_DXT10] = None) -> Compression:
    """
    Determine the block compression of the level data.

    Legacy FourCC codes must name a block-compressed format. DX10 files use
    the DXGI format; DXGI formats that are not block-compressed resolve to
    Compression.NONE.

    Raises:
        UnsupportedFormat: For a legacy FourCC with no compression mapping
    """
    fourcc = header.ddspf.dwFourCC
    if fourcc == FourCC.DX10:
        return DXGI_COMPRESSION.get(_require_dxt10(header10).dxgiFormat, Compression.NONE)

    try:
        return FOURCC_COMPRESSION[fourcc]
    except KeyError:
        raise UnsupportedFormat(fourcc, "image format not supported") from None


def resolve_pixel_format(header: DDS_HEADER, header10: Optional[DDS_HEADER_DXT10] = None) -> PixelFormat:
    """
    Determine the channel layout of the image.

    Raises:
        UnsupportedFormat: If the FourCC or DXGI format has no pixel format mapping
    """
    fourcc = header.ddspf.dwFourCC
    if fourcc == FourCC.DX10:
        dxgi_format = _require_dxt10(header10).dxgiFormat
        try:
            return DXGI_PIXEL_FORMAT[dxgi_format]
        except KeyError:
            raise UnsupportedFormat(dxgi_format, "pixel compression format not supported") from None

    try:
        return FOURCC_PIXEL_FORMAT[fourcc]
    except KeyError:
        raise UnsupportedFormat(fourcc, "image format not supported") from None


def resolve(header: DDS_HEADER, header10: Optional[DDS_HEADER_DXT10] = None) -> ResolvedFormat:
    """Resolve both the pixel format and the compression scheme"""
    compression = resolve_compression(header, header10)
    return ResolvedFormat(resolve_pixel_format(header, header10), compression)


def effective_dxgi_format(header: DDS_HEADER, header10: Optional[DDS_HEADER_DXT10] = None) -> Optional[DXGI_FORMAT]:
    """
    Get the DXGI format of the surface.

    Returns the DXGI format from the DX10 header if present, otherwise the
    equivalent DXGI format for the FourCC code, or None if there is none.
    """
    if header10 is not None:
        return header10.dxgiFormat
    return FOURCC_TO_DXGI.get(header.ddspf.dwFourCC)
