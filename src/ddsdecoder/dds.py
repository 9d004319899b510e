"""Main DDS file handler"""
from typing import List, Optional

from .decoder import DDSDecoder
from .enums import DDPF, DDSCAPS, DDSCAPS2, DDSD, DDS_RESOURCE_MISC, DXGI_FORMAT
from .errors import NotRecognized, TruncatedError
from .headers import DDS_HEADER, DDS_HEADER_DXT10
from .image import DDSMetadata, Image
from .mipchain import iter_mip_levels
from .resolver import resolve
from .stream import BytesLike, TypedStream


def _format_flags(value: int, flag_enum) -> str:
    """
    Format an integer flag value as a list of flag names separated by ' | '.

    Args:
        value: The integer flag value
        flag_enum: The IntFlag enum class to use for decoding

    Returns:
        String with flag names separated by ' | ', or '0' if no flags are set
    """
    if value == 0:
        return '0'

    flags = [flag.name for flag in flag_enum if value & flag]
    if not flags:
        return f'0x{value:X}'

    return ' | '.join(flags)


class DDS:
    """DirectDraw Surface container with every mipmap level read into memory"""
    def __init__(self, metadata: DDSMetadata, images: List[Image]) -> None:
        self.metadata = metadata
        self.images = images

    @property
    def header(self) -> DDS_HEADER:
        return self.metadata.header

    @property
    def header10(self) -> Optional[DDS_HEADER_DXT10]:
        return self.metadata.header10

    def __str__(self) -> str:
        """Return debug string representation of DDS file"""
        lines = ["DDS File Information:"]
        lines.append(f"  Dimensions: {self.header.dwWidth}x{self.header.dwHeight}")
        lines.append(f"  Depth: {self.header.dwDepth}")

        if self.header.dwMipMapCount > 0:
            lines.append(f"  Mipmap Levels: {self.header.dwMipMapCount}")

        lines.append(f"  Flags: {_format_flags(self.header.dwFlags, DDSD)}")

        # Format information
        if self.header10:
            lines.append("  Format: DX10")
            lines.append(f"    DXGI Format: {self.header10.dxgiFormat.name} ({self.header10.dxgiFormat.value})")
            lines.append(f"    Resource Dimension: {self.header10.resourceDimension.name}")
            if self.header10.arraySize > 1:
                lines.append(f"    Array Size: {self.header10.arraySize}")
            if self.header10.miscFlag:
                lines.append(f"    Misc Flags: {_format_flags(self.header10.miscFlag, DDS_RESOURCE_MISC)}")
            lines.append(f"    Alpha Mode: {self.header10.alphaMode.name}")
        else:
            fourcc = self.header.ddspf.dwFourCC
            lines.append(f"  Format: FourCC '{fourcc.name}' (0x{fourcc.value:08X})")
            if not self.header.ddspf.has_flag(DDPF.FOURCC):
                lines.append(f"    Pixel Format Flags: {_format_flags(self.header.ddspf.dwFlags, DDPF)}")

        lines.append(f"  Caps: {_format_flags(self.header.dwCaps, DDSCAPS)}")
        if self.header.dwCaps2:
            lines.append(f"  Caps2: {_format_flags(self.header.dwCaps2, DDSCAPS2)}")

        if self.images:
            lines.append(f"  Pixel Format: {self.images[0].pixel_format.name}")
            lines.append(f"  Compression: {self.images[0].compression.name}")
        lines.append(f"  Levels Read: {len(self.images)}")
        lines.append(f"  Total Data Size: {self.get_size()} bytes")

        return "\n".join(lines)

    @classmethod
    def read(cls, stream: TypedStream) -> 'DDS':
        """
        Read a whole DDS file from the stream.

        Raises:
            NotRecognized: If the data does not start with the "DDS " magic number
        """
        try:
            magic = stream.read(4, 'magic number')
        except TruncatedError:
            raise NotRecognized(b'') from None
        if magic != DDSDecoder.MAGIC:
            raise NotRecognized(magic)

        metadata = DDSDecoder.read_metadata(stream)
        resolved = resolve(metadata.header, metadata.header10)
        return cls(metadata, list(iter_mip_levels(stream, metadata, resolved)))

    @classmethod
    def from_bytes(cls, data: BytesLike) -> 'DDS':
        """Read DDS from bytes"""
        return cls.read(TypedStream(data))

    @classmethod
    def from_file(cls, path: str) -> 'DDS':
        """Read DDS from a file path"""
        with open(path, 'rb') as f:
            return cls.read(TypedStream(f))

    def is_volume(self) -> bool:
        return self.metadata.is_volume()

    def is_cubemap(self) -> bool:
        return self.metadata.is_cubemap()

    def get_format_str(self) -> str:
        """Get a human-readable format string"""
        return self.metadata.format_str

    def get_dxgi_format(self) -> Optional[DXGI_FORMAT]:
        """Get the DXGI format of the texture, or None if there is no equivalent"""
        return self.metadata.dxgi_format

    def get_width(self) -> int:
        """Get the width of the texture in pixels"""
        return self.header.dwWidth

    def get_height(self) -> int:
        """Get the height of the texture in pixels"""
        return self.header.dwHeight

    def get_depth(self) -> int:
        """Get the depth of the texture (for volume textures), or 0 if not a volume texture"""
        return self.header.dwDepth

    def get_mip_count(self) -> int:
        """Get the number of mipmap levels"""
        return self.header.mip_count

    def get_size(self) -> int:
        """Get the total size of all level data in bytes"""
        return sum(image.size for image in self.images)

    def get_image(self, mipmap_level: int = 0) -> Image:
        """Get one mipmap level"""
        if mipmap_level < 0 or mipmap_level >= len(self.images):
            raise ValueError(f"Invalid mipmap level {mipmap_level}. Texture has {len(self.images)} mipmap level(s).")
        return self.images[mipmap_level]
