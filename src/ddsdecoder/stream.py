"""Sequential little-endian reader over a binary source"""
import io
import struct
from typing import BinaryIO, List, Optional, Union

from .errors import TruncatedError

BytesLike = Union[bytes, bytearray, memoryview]


class TypedStream:
    """
    Forward-only reader of fixed-width little-endian values.

    Wraps a binary file object (anything with ``read``) or a bytes-like
    buffer. Every read either returns exactly the requested amount of data
    or raises TruncatedError; nothing is buffered ahead of the cursor.
    """
    def __init__(self, source: Union[BinaryIO, BytesLike]) -> None:
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(bytes(source))
        self._source = source
        self._consumed = 0

    def tell(self) -> int:
        """Number of bytes consumed through this stream so far"""
        return self._consumed

    def read(self, size: int, what: Optional[str] = None) -> bytes:
        """Read exactly ``size`` bytes"""
        if size < 0:
            raise ValueError(f"Cannot read a negative number of bytes: {size}")

        chunks = []
        remaining = size
        while remaining > 0:
            chunk = self._source.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)

        data = b''.join(chunks)
        self._consumed += len(data)
        if len(data) != size:
            raise TruncatedError(size, len(data), what)
        return data

    def uint32(self, what: Optional[str] = None) -> int:
        """Read one unsigned little-endian DWORD"""
        return struct.unpack('<I', self.read(4, what))[0]

    def array(self, count: int, fmt: str = 'I', what: Optional[str] = None) -> List[int]:
        """Read ``count`` little-endian integers of struct type ``fmt``"""
        item = struct.calcsize('<' + fmt)
        return list(struct.unpack(f'<{count}{fmt}', self.read(count * item, what)))
