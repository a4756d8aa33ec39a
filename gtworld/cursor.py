"""
Sequential binary cursor used by every codec in the package.

Reads are bounds-checked and forward-only; writes append to the end of the
buffer. All integers are little-endian.
"""

import struct
from typing import Any, Dict, Union

from .errors import EncodeError, InvalidEncoding, TruncatedBuffer

# Wire kinds understood by Cursor.read / Cursor.write
PRIMITIVES: Dict[str, struct.Struct] = {
    'u8': struct.Struct('<B'),
    'u16': struct.Struct('<H'),
    'u32': struct.Struct('<I'),
    'i32': struct.Struct('<i'),
    'f32': struct.Struct('<f'),
}

# String kinds and the primitive used for their length prefix
STRING_PREFIXES: Dict[str, str] = {
    'str': 'u16',
    'str32': 'u32',
}

Kind = Union[str, int]


class Cursor:
    """Bounds-checked reader/writer over a single byte buffer"""

    def __init__(self, data: bytes = b'', encoding: str = 'utf-8'):
        """
        Initialize the cursor

        Args:
            data: Initial buffer contents (empty when encoding)
            encoding: Text encoding of length-prefixed strings
        """
        self._buffer = bytearray(data)
        self.position = 0
        self.encoding = encoding

    def __len__(self) -> int:
        return len(self._buffer)

    @property
    def remaining(self) -> int:
        """Number of unread bytes"""
        return len(self._buffer) - self.position

    @property
    def at_end(self) -> bool:
        return self.position >= len(self._buffer)

    def getvalue(self) -> bytes:
        """Return the whole buffer"""
        return bytes(self._buffer)

    # Reading

    def _require(self, size: int) -> None:
        if size > self.remaining:
            raise TruncatedBuffer(self.position, size, self.remaining)

    def read_bytes(self, size: int) -> bytes:
        """Read exact number of bytes"""
        if size < 0:
            raise ValueError(f"Negative read size {size}")
        self._require(size)
        start = self.position
        self.position += size
        return bytes(self._buffer[start:self.position])

    def _read_primitive(self, kind: str):
        packer = PRIMITIVES[kind]
        self._require(packer.size)
        value = packer.unpack_from(self._buffer, self.position)[0]
        self.position += packer.size
        return value

    def read_u8(self) -> int:
        return self._read_primitive('u8')

    def read_u16(self) -> int:
        return self._read_primitive('u16')

    def read_u32(self) -> int:
        return self._read_primitive('u32')

    def read_i32(self) -> int:
        return self._read_primitive('i32')

    def read_f32(self) -> float:
        return self._read_primitive('f32')

    def read_string(self, prefix: str = 'u16') -> str:
        """
        Read a length-prefixed string

        Args:
            prefix: Primitive kind of the length field ('u16' or 'u32')

        Raises:
            TruncatedBuffer: If the length or the text runs past the end
            InvalidEncoding: If the bytes are not valid text
        """
        start = self.position
        length = self._read_primitive(prefix)
        try:
            raw = self.read_bytes(length)
        except TruncatedBuffer:
            self.position = start
            raise
        try:
            return raw.decode(self.encoding)
        except UnicodeDecodeError as e:
            self.position = start
            raise InvalidEncoding(start, self.encoding, str(e)) from e

    def read(self, kind: Kind) -> Any:
        """
        Read a value of the given wire kind

        Args:
            kind: A primitive name, a string kind, or an int for a fixed
                number of raw bytes
        """
        if isinstance(kind, int):
            return self.read_bytes(kind)
        if kind in STRING_PREFIXES:
            return self.read_string(STRING_PREFIXES[kind])
        if kind in PRIMITIVES:
            return self._read_primitive(kind)
        raise ValueError(f"Unknown wire kind {kind!r}")

    # Writing

    def write_bytes(self, data: bytes, size: int = None) -> None:
        """Append raw bytes, optionally enforcing a fixed size"""
        if size is not None and len(data) != size:
            raise EncodeError(f"Expected {size} bytes, got {len(data)}")
        self._buffer += data
        self.position = len(self._buffer)

    def _write_primitive(self, kind: str, value) -> None:
        try:
            packed = PRIMITIVES[kind].pack(value)
        except struct.error as e:
            raise EncodeError(f"Cannot pack {value!r} as {kind}: {e}") from e
        self.write_bytes(packed)

    def write_u8(self, value: int) -> None:
        self._write_primitive('u8', value)

    def write_u16(self, value: int) -> None:
        self._write_primitive('u16', value)

    def write_u32(self, value: int) -> None:
        self._write_primitive('u32', value)

    def write_i32(self, value: int) -> None:
        self._write_primitive('i32', value)

    def write_f32(self, value: float) -> None:
        self._write_primitive('f32', value)

    def write_string(self, text: str, prefix: str = 'u16') -> None:
        """Write a length-prefixed string"""
        try:
            raw = text.encode(self.encoding)
        except UnicodeEncodeError as e:
            raise EncodeError(f"Cannot encode {text!r} as {self.encoding}") from e
        self._write_primitive(prefix, len(raw))
        self.write_bytes(raw)

    def write(self, kind: Kind, value: Any) -> None:
        """Write a value of the given wire kind"""
        if isinstance(kind, int):
            self.write_bytes(value, kind)
        elif kind in STRING_PREFIXES:
            self.write_string(value, STRING_PREFIXES[kind])
        elif kind in PRIMITIVES:
            self._write_primitive(kind, value)
        else:
            raise ValueError(f"Unknown wire kind {kind!r}")
