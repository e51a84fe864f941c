"""Little-endian integer packing shared by the byte sources and sinks."""

import struct

_STRUCTS = {
    1: struct.Struct("<B"),
    2: struct.Struct("<H"),
    4: struct.Struct("<I"),
}


def _struct_for(width: int) -> struct.Struct:
    try:
        return _STRUCTS[width]
    except KeyError:
        raise ValueError(f"Unsupported integer width: {width}") from None


def pack_le(width: int, value: int) -> bytes:
    """Pack ``value`` as an unsigned little-endian integer of ``width`` bytes.

    Values wider than the field keep only their low-order bits, matching
    a fixed-width integer cast.
    """
    mask = (1 << (width * 8)) - 1
    return _struct_for(width).pack(value & mask)


def unpack_le(width: int, data: bytes) -> int:
    """Unpack an unsigned little-endian integer of ``width`` bytes."""
    return _struct_for(width).unpack(data)[0]
