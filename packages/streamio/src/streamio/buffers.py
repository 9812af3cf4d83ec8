# packages/streamio/src/streamio/buffers.py
from __future__ import annotations

"""
Codec à largeur fixe **dans un tampon mémoire**, à un offset donné.

Même discipline que le codec sur flux : assemblage par décalages, octet de poids
faible en premier pour LE, de poids fort en premier pour BE. Les valeurs 64 bits
sont composées de deux moitiés 32 bits (basse/haute) ; pour les variantes signées,
seule la moitié haute est lue signée, la basse est toujours non signée (sinon
l'extension de signe écraserait les 32 bits hauts).
"""

import numbers
from typing import Any

from .errors import InvalidArgumentError
from .streams import writable_view

__all__ = [
    "get_u16_le", "get_u16_be", "get_i16_le", "get_i16_be",
    "get_u32_le", "get_u32_be", "get_i32_le", "get_i32_be",
    "get_u64_le", "get_u64_be", "get_i64_le", "get_i64_be",
    "put_u16_le", "put_u16_be", "put_i16_le", "put_i16_be",
    "put_u32_le", "put_u32_be", "put_i32_le", "put_i32_be",
    "put_u64_le", "put_u64_be", "put_i64_le", "put_i64_be",
    "to_signed", "check_range",
]


def to_signed(v: int, bits: int) -> int:
    """Réinterprète un entier non signé de `bits` bits en complément à deux."""
    return v - (1 << bits) if v & (1 << (bits - 1)) else v


def check_range(value: int, bits: int, signed: bool) -> int:
    if not isinstance(value, numbers.Integral) or isinstance(value, bool):
        raise InvalidArgumentError(f"value must be an int (got {type(value).__name__})")
    value = int(value)
    if signed:
        lo, hi = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        lo, hi = 0, (1 << bits) - 1
    if not (lo <= value <= hi):
        kind = "i" if signed else "u"
        raise InvalidArgumentError(f"value {value} out of range for {kind}{bits} [{lo},{hi}]")
    return value


def _src(buf: Any, offset: int, size: int) -> memoryview:
    if buf is None:
        raise InvalidArgumentError("buffer must not be None")
    try:
        view = memoryview(buf)
        if view.format != "B" or view.ndim != 1:
            view = view.cast("B")
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"buffer: cannot view as bytes ({e})") from e
    if offset < 0 or offset + size > len(view):
        raise InvalidArgumentError(f"need {size} bytes at offset {offset} (buffer has {len(view)})")
    return view


def _dst(buf: Any, offset: int, size: int) -> memoryview:
    view = writable_view(buf)
    if offset < 0 or offset + size > len(view):
        raise InvalidArgumentError(f"need {size} bytes at offset {offset} (buffer has {len(view)})")
    return view


# ----------------------------- lecture 16/32 -------------------------------

def get_u16_le(buf: Any, offset: int = 0) -> int:
    b = _src(buf, offset, 2)
    return b[offset] | (b[offset + 1] << 8)

def get_u16_be(buf: Any, offset: int = 0) -> int:
    b = _src(buf, offset, 2)
    return (b[offset] << 8) | b[offset + 1]

def get_i16_le(buf: Any, offset: int = 0) -> int:
    return to_signed(get_u16_le(buf, offset), 16)

def get_i16_be(buf: Any, offset: int = 0) -> int:
    return to_signed(get_u16_be(buf, offset), 16)

def get_u32_le(buf: Any, offset: int = 0) -> int:
    b = _src(buf, offset, 4)
    return b[offset] | (b[offset + 1] << 8) | (b[offset + 2] << 16) | (b[offset + 3] << 24)

def get_u32_be(buf: Any, offset: int = 0) -> int:
    b = _src(buf, offset, 4)
    return (b[offset] << 24) | (b[offset + 1] << 16) | (b[offset + 2] << 8) | b[offset + 3]

def get_i32_le(buf: Any, offset: int = 0) -> int:
    return to_signed(get_u32_le(buf, offset), 32)

def get_i32_be(buf: Any, offset: int = 0) -> int:
    return to_signed(get_u32_be(buf, offset), 32)


# ----------------------------- lecture 64 (deux moitiés) -------------------

def get_i64_le(buf: Any, offset: int = 0) -> int:
    return get_u32_le(buf, offset) | (get_i32_le(buf, offset + 4) << 32)

def get_i64_be(buf: Any, offset: int = 0) -> int:
    return (get_i32_be(buf, offset) << 32) | get_u32_be(buf, offset + 4)

def get_u64_le(buf: Any, offset: int = 0) -> int:
    return get_u32_le(buf, offset) | (get_u32_le(buf, offset + 4) << 32)

def get_u64_be(buf: Any, offset: int = 0) -> int:
    return (get_u32_be(buf, offset) << 32) | get_u32_be(buf, offset + 4)


# ----------------------------- écriture ------------------------------------

def _put_le(buf: Any, offset: int, value: int, size: int) -> None:
    b = _dst(buf, offset, size)
    for i in range(size):
        b[offset + i] = (value >> (8 * i)) & 0xFF

def _put_be(buf: Any, offset: int, value: int, size: int) -> None:
    b = _dst(buf, offset, size)
    for i in range(size):
        b[offset + i] = (value >> (8 * (size - 1 - i))) & 0xFF

def put_u16_le(buf: Any, offset: int, value: int) -> None:
    _put_le(buf, offset, check_range(value, 16, False), 2)

def put_u16_be(buf: Any, offset: int, value: int) -> None:
    _put_be(buf, offset, check_range(value, 16, False), 2)

def put_i16_le(buf: Any, offset: int, value: int) -> None:
    _put_le(buf, offset, check_range(value, 16, True), 2)

def put_i16_be(buf: Any, offset: int, value: int) -> None:
    _put_be(buf, offset, check_range(value, 16, True), 2)

def put_u32_le(buf: Any, offset: int, value: int) -> None:
    _put_le(buf, offset, check_range(value, 32, False), 4)

def put_u32_be(buf: Any, offset: int, value: int) -> None:
    _put_be(buf, offset, check_range(value, 32, False), 4)

def put_i32_le(buf: Any, offset: int, value: int) -> None:
    _put_le(buf, offset, check_range(value, 32, True), 4)

def put_i32_be(buf: Any, offset: int, value: int) -> None:
    _put_be(buf, offset, check_range(value, 32, True), 4)

def put_u64_le(buf: Any, offset: int, value: int) -> None:
    value = check_range(value, 64, False)
    _dst(buf, offset, 8)
    put_u32_le(buf, offset, value & 0xFFFFFFFF)
    put_u32_le(buf, offset + 4, value >> 32)

def put_u64_be(buf: Any, offset: int, value: int) -> None:
    value = check_range(value, 64, False)
    _dst(buf, offset, 8)
    put_u32_be(buf, offset, value >> 32)
    put_u32_be(buf, offset + 4, value & 0xFFFFFFFF)

def put_i64_le(buf: Any, offset: int, value: int) -> None:
    value = check_range(value, 64, True)
    _dst(buf, offset, 8)
    put_u32_le(buf, offset, value & 0xFFFFFFFF)
    put_i32_le(buf, offset + 4, value >> 32)

def put_i64_be(buf: Any, offset: int, value: int) -> None:
    value = check_range(value, 64, True)
    _dst(buf, offset, 8)
    put_i32_be(buf, offset, value >> 32)
    put_u32_be(buf, offset + 4, value & 0xFFFFFFFF)
