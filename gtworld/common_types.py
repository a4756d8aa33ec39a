"""
Fixed-shape binary records shared by the tile and world codecs.

A record is a dataclass paired with a construct Struct describing its exact
wire layout. Field names of the dataclass and of the Struct must match.
"""
from dataclasses import asdict, dataclass, fields
from typing import Any, ClassVar, Dict

from construct import ConstructError, Struct

from .cursor import Cursor
from .errors import EncodeError


@dataclass
class Record:
    """Base class for fixed-size records"""
    LAYOUT: ClassVar[Struct]

    @classmethod
    def size(cls) -> int:
        """Size of one record in bytes"""
        return cls.LAYOUT.sizeof()

    @classmethod
    def unpack(cls, data: bytes) -> 'Record':
        """Unpack from binary data"""
        parsed = cls.LAYOUT.parse(data)
        return cls(**{f.name: parsed[f.name] for f in fields(cls)})

    def pack(self) -> bytes:
        """Pack to binary data"""
        try:
            return self.LAYOUT.build(asdict(self))
        except ConstructError as e:
            raise EncodeError(f"Cannot pack {self!r}: {e}") from e

    @classmethod
    def read(cls, cursor: Cursor) -> 'Record':
        """Read one record at the cursor position"""
        return cls.unpack(cursor.read_bytes(cls.size()))

    def write(self, cursor: Cursor) -> None:
        cursor.write_bytes(self.pack())

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
