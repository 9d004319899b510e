"""DDS decoder entry point"""
import logging
from typing import BinaryIO, Iterator, Optional, Union

from .enums import FourCC
from .errors import TruncatedError
from .headers import DDS_HEADER, DDS_HEADER_DXT10
from .image import DDSMetadata, Image
from .mipchain import iter_mip_levels
from .resolver import resolve
from .stream import BytesLike, TypedStream

logger = logging.getLogger(__name__)

StreamSource = Union[TypedStream, BinaryIO, BytesLike]


class DDSDecoder:
    """Decoder for DirectDraw Surface files"""

    # DWORD magic number "DDS " (0x20534444)
    MAGIC = b'DDS '

    def decode(self, source: StreamSource) -> Optional[Iterator[Image]]:
        """
        Decode a DDS file into its mipmap levels.

        Only the 4-byte magic number is consumed when the data is not a DDS
        file. Otherwise the headers are parsed and the format resolved
        immediately, and the levels are read lazily as the returned iterator
        is advanced. The underlying stream must stay open until iteration is
        finished.

        Args:
            source: A TypedStream, a binary file object or a bytes-like buffer

        Returns:
            Iterator of Image, one per mipmap level, or None if the data does
            not start with the "DDS " magic number

        Raises:
            TruncatedError: If the stream ends inside the headers
            UnrecognizedFourCC: If the pixel format tag is not a known FourCC
            UnsupportedFormat: If the format has no pixel format or compression mapping
            InvalidHeader: If a DX10 header field is out of range
        """
        stream = source if isinstance(source, TypedStream) else TypedStream(source)

        try:
            magic = stream.read(4, 'magic number')
        except TruncatedError:
            logger.debug("Stream too short for a DDS magic number")
            return None
        if magic != self.MAGIC:
            logger.debug("Not a DDS file (magic %r)", magic)
            return None

        metadata = self.read_metadata(stream)
        resolved = resolve(metadata.header, metadata.header10)
        logger.debug(
            "Resolved %s to pixel format %s, compression %s",
            metadata.format_str, resolved.pixel_format.name, resolved.compression.name,
        )

        return iter_mip_levels(stream, metadata, resolved)

    @staticmethod
    def read_metadata(stream: TypedStream) -> DDSMetadata:
        """Read DDS_HEADER and, for the DX10 FourCC, DDS_HEADER_DXT10"""
        header = DDS_HEADER.read(stream)
        logger.debug(
            "DDS header: %dx%d, %d mipmap level(s), FourCC %s",
            header.dwWidth, header.dwHeight, header.dwMipMapCount, header.ddspf.dwFourCC.name,
        )

        header10 = None
        if header.ddspf.dwFourCC == FourCC.DX10:
            header10 = DDS_HEADER_DXT10.read(stream)
            logger.debug(
                "DX10 header: %s, %s, array size %d",
                header10.dxgiFormat.name, header10.resourceDimension.name, header10.arraySize,
            )

        return DDSMetadata(header, header10)


def decode(source: StreamSource) -> Optional[Iterator[Image]]:
    """Decode a DDS file with a default DDSDecoder; see DDSDecoder.decode"""
    return DDSDecoder().decode(source)
