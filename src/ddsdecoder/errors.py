"""DDS decoding errors"""
from typing import Optional


class DDSError(ValueError):
    """Base class for all errors raised while decoding a DDS file"""


class NotRecognized(DDSError):
    """The data does not start with the "DDS " magic number"""
    def __init__(self, magic: bytes) -> None:
        super().__init__(f"Invalid DDS magic number: {magic!r}")
        self.magic = magic


class TruncatedError(DDSError, EOFError):
    """The stream ended before a required field or level could be read"""
    def __init__(self, expected: int, actual: int, what: Optional[str] = None) -> None:
        target = f" for {what}" if what else ""
        super().__init__(f"Expected {expected} bytes{target}, but only {actual} bytes remaining")
        self.expected = expected
        self.actual = actual
        self.what = what


class DDSFormatError(DDSError):
    """The file is structurally malformed or uses a format this decoder does not handle"""


class UnrecognizedFourCC(DDSFormatError):
    """DDS_PIXELFORMAT.dwFourCC is not one of the known four-character codes"""
    def __init__(self, code: bytes) -> None:
        super().__init__(f"Unrecognized FourCC {code!r} (0x{int.from_bytes(code, 'little'):08X})")
        self.code = code


class UnsupportedFormat(DDSFormatError):
    """A recognised FourCC or DXGI format that has no pixel format or compression mapping"""
    def __init__(self, code, reason: str = "format not supported") -> None:
        name = getattr(code, 'name', None) or str(code)
        super().__init__(f"{name}: {reason}")
        self.code = code


class InvalidHeader(DDSFormatError):
    """An enumerated header field holds a value outside its enumeration"""
