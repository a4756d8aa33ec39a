"""
Base class for extra tile data payloads

Each payload is a dataclass whose fields are declared with ``wire()``. The
field order is the wire order. A field declared with ``count=`` is a list
whose length is given by an earlier integer field; on encode the count is
always written from the list length.
"""

import dataclasses
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Optional, Tuple

from ..common_types import Record
from ..cursor import PRIMITIVES, STRING_PREFIXES, Cursor, Kind


def wire(kind: Any, count: Optional[str] = None, **kwargs):
    """
    Declare a payload field and its wire kind

    Args:
        kind: Cursor kind ('u8', 'u16', 'u32', 'i32', 'f32', 'str', 'str32'),
            an int for a fixed number of raw bytes, or a Record subclass
        count: Name of the earlier field holding the element count; makes
            this field a list of ``kind``
    """
    metadata = {'wire': kind}
    if 'default' not in kwargs and 'default_factory' not in kwargs:
        if count is not None:
            kwargs['default_factory'] = list
        elif isinstance(kind, type) and issubclass(kind, Record):
            kwargs['default_factory'] = kind
        elif isinstance(kind, int):
            kwargs['default'] = bytes(kind)
        elif kind in STRING_PREFIXES:
            kwargs['default'] = ''
        elif kind == 'f32':
            kwargs['default'] = 0.0
        elif kind in PRIMITIVES:
            kwargs['default'] = 0
        else:
            raise ValueError(f"Unknown wire kind {kind!r}")
    if count is not None:
        metadata['count'] = count
    return field(metadata=metadata, **kwargs)


def read_value(cursor: Cursor, kind: Any) -> Any:
    if isinstance(kind, type) and issubclass(kind, Record):
        return kind.read(cursor)
    return cursor.read(kind)


def write_value(cursor: Cursor, kind: Any, value: Any) -> None:
    if isinstance(kind, type) and issubclass(kind, Record):
        value.write(cursor)
    else:
        cursor.write(kind, value)


@dataclass
class TileData:
    """Base class for all extra tile data shapes"""

    # Extra tile data type written before the payload
    TAG: ClassVar[Optional[int]] = None

    @classmethod
    def wire_fields(cls) -> Tuple[dataclasses.Field, ...]:
        """Fields that are part of the wire layout, in wire order"""
        return tuple(f for f in dataclasses.fields(cls) if 'wire' in f.metadata)

    @classmethod
    def decode(cls, cursor: Cursor, foreground_item_id: int = 0) -> 'TileData':
        """
        Decode the payload at the cursor position

        Args:
            cursor: Cursor positioned just after the extra tile data type
            foreground_item_id: Item the payload belongs to; a few shapes
                carry extra bytes for specific items

        Returns:
            Decoded payload instance
        """
        values: Dict[str, Any] = {}
        for f in cls.wire_fields():
            kind: Kind = f.metadata['wire']
            count_field = f.metadata.get('count')
            if count_field is None:
                values[f.name] = read_value(cursor, kind)
            else:
                values[f.name] = [
                    read_value(cursor, kind) for _ in range(values[count_field])
                ]
        return cls(**values)

    def encode(self, cursor: Cursor) -> None:
        """Encode the payload (without the type tag) at the cursor"""
        counts = {
            f.metadata['count']: len(getattr(self, f.name))
            for f in self.wire_fields() if 'count' in f.metadata
        }
        for f in self.wire_fields():
            kind = f.metadata['wire']
            value = counts.get(f.name, getattr(self, f.name))
            if 'count' in f.metadata:
                for item in value:
                    write_value(cursor, kind, item)
            else:
                write_value(cursor, kind, value)

    @property
    def type_name(self) -> str:
        return type(self).__name__

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output"""
        data: Dict[str, Any] = {'type': self.type_name}
        for f in dataclasses.fields(self):
            data[f.name] = _jsonable(getattr(self, f.name))
        return data


def _jsonable(value: Any) -> Any:
    if isinstance(value, Record):
        return {k: _jsonable(v) for k, v in value.to_dict().items()}
    if isinstance(value, bytes):
        return value.hex()
    if isinstance(value, list):
        return [_jsonable(item) for item in value]
    return value


@dataclass
class Basic(TileData):
    """Tile without extra data"""
    pass
