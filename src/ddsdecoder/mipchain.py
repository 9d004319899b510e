"""Mipmap chain extraction"""
import logging
from typing import Iterator

from .image import DDSMetadata, Image
from .resolver import ResolvedFormat
from .stream import TypedStream

logger = logging.getLogger(__name__)


def level_size(width: int, height: int, resolved: ResolvedFormat) -> int:
    """
    Calculate the size in bytes of a single mipmap level.

    Block-compressed formats store 4x4 pixel blocks, so partial blocks at
    the right and bottom edges still take a whole block.

    Args:
        width: Width of mipmap level in pixels
        height: Height of mipmap level in pixels
        resolved: Pixel format and compression of the surface

    Returns:
        Size of the mipmap level in bytes
    """
    if resolved.compression.is_block_compressed:
        blocks_x = (width + 3) // 4
        blocks_y = (height + 3) // 4
        return blocks_x * blocks_y * resolved.compression.bytes_per_block

    return width * height * resolved.pixel_format.bytes_per_pixel


def iter_mip_levels(stream: TypedStream, metadata: DDSMetadata, resolved: ResolvedFormat) -> Iterator[Image]:
    """
    Read mipmap levels from the stream, largest first.

    Stops after the declared number of levels or once both dimensions have
    shrunk to zero, whichever comes first.

    Raises:
        TruncatedError: When the stream ends inside a level
    """
    header = metadata.header
    width, height = header.dwWidth, header.dwHeight

    level = 0
    while level < header.mip_count and (width or height):
        width, height = max(width, 1), max(height, 1)
        size = level_size(width, height, resolved)

        contents = stream.read(size, f"mipmap level {level} ({width}x{height})")
        logger.debug("Read mipmap level %d: %dx%d, %d bytes", level, width, height, size)

        yield Image(
            level=level,
            width=width,
            height=height,
            pixel_format=resolved.pixel_format,
            compression=resolved.compression,
            contents=contents,
            metadata=metadata,
        )

        width >>= 1
        height >>= 1
        level += 1
