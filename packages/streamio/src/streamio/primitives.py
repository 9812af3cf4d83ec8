# packages/streamio/src/streamio/primitives.py
# -----------------------------------------------------------------------------
# Codec primitif sur flux : entiers 8/16/32/64 bits (LE/BE, signés ou non)
# et flottants IEEE-754 (ordre natif de l'hôte).

from __future__ import annotations

import sys
from typing import Any

import numpy as np

from . import buffers as B
from .buffers import check_range, to_signed
from .errors import InvalidArgumentError
from .reader import read_byte, read_exact
from .streams import require, write_all

# Règles communes
# ---------------
# - Lecture 8/16/32 bits : un `read_byte` par octet, assemblage par décalages.
#   LE : le premier octet lu est le poids faible ; BE : le poids fort.
# - Lecture 64 bits : 8 octets exacts, puis deux moitiés 32 bits (voir `buffers`).
# - Écriture : un `write` d'un octet par octet émis, LSB d'abord (LE), MSB d'abord (BE).
#   Les 64 bits émettent deux moitiés 32 bits ; la valeur est validée avant
#   le premier octet écrit (InvalidArgumentError si hors bornes).
# - Flottants : octets dans l'ordre natif de l'hôte (pas de variante LE/BE).
#   Le motif binaire est reconstruit en entier puis converti par `ndarray.view`.
#   `read_f32` rend un `np.float32` (jamais élargi en double : les NaN
#   signalants gardent leurs bits).
# - Toute lecture propage EndOfStreamError.

__all__ = [
    "write_byte",
    "read_u8", "read_i8", "write_u8", "write_i8",
    "read_i16_le", "read_i16_be", "read_u16_le", "read_u16_be",
    "read_i32_le", "read_i32_be", "read_u32_le", "read_u32_be",
    "read_i64_le", "read_i64_be", "read_u64_le", "read_u64_be",
    "write_i16_le", "write_i16_be", "write_u16_le", "write_u16_be",
    "write_i32_le", "write_i32_be", "write_u32_le", "write_u32_be",
    "write_i64_le", "write_i64_be", "write_u64_le", "write_u64_be",
    "read_f32", "write_f32", "read_f64", "write_f64",
]

_NATIVE_LE = sys.byteorder == "little"


def write_byte(stream: Any, value: int) -> None:
    """Écrit un octet brut (0..255)."""
    require(stream, "stream")
    write_all(stream, bytes((check_range(value, 8, False),)))


def _emit(stream: Any, value: int, size: int, big: bool) -> None:
    order = range(size - 1, -1, -1) if big else range(size)
    for i in order:
        write_all(stream, bytes(((value >> (8 * i)) & 0xFF,)))


# ----------------------------- 8 bits -------------------------------------

def read_u8(stream: Any) -> int:
    return read_byte(stream)

def read_i8(stream: Any) -> int:
    return to_signed(read_byte(stream), 8)

def write_u8(stream: Any, value: int) -> None:
    write_byte(stream, value)

def write_i8(stream: Any, value: int) -> None:
    require(stream, "stream")
    _emit(stream, check_range(value, 8, True), 1, False)


# ----------------------------- 16 bits ------------------------------------

def read_u16_le(stream: Any) -> int:
    b0 = read_byte(stream)
    b1 = read_byte(stream)
    return b0 | (b1 << 8)

def read_u16_be(stream: Any) -> int:
    b0 = read_byte(stream)
    b1 = read_byte(stream)
    return (b0 << 8) | b1

def read_i16_le(stream: Any) -> int:
    return to_signed(read_u16_le(stream), 16)

def read_i16_be(stream: Any) -> int:
    return to_signed(read_u16_be(stream), 16)


# ----------------------------- 32 bits ------------------------------------

def read_u32_le(stream: Any) -> int:
    b0 = read_byte(stream)
    b1 = read_byte(stream)
    b2 = read_byte(stream)
    b3 = read_byte(stream)
    return b0 | (b1 << 8) | (b2 << 16) | (b3 << 24)

def read_u32_be(stream: Any) -> int:
    b0 = read_byte(stream)
    b1 = read_byte(stream)
    b2 = read_byte(stream)
    b3 = read_byte(stream)
    return (b0 << 24) | (b1 << 16) | (b2 << 8) | b3

def read_i32_le(stream: Any) -> int:
    return to_signed(read_u32_le(stream), 32)

def read_i32_be(stream: Any) -> int:
    return to_signed(read_u32_be(stream), 32)


# ----------------------------- 64 bits ------------------------------------

def read_i64_le(stream: Any) -> int:
    return B.get_i64_le(read_exact(stream, 8))

def read_i64_be(stream: Any) -> int:
    return B.get_i64_be(read_exact(stream, 8))

def read_u64_le(stream: Any) -> int:
    return B.get_u64_le(read_exact(stream, 8))

def read_u64_be(stream: Any) -> int:
    return B.get_u64_be(read_exact(stream, 8))


# ----------------------------- écriture 16/32 -----------------------------

def write_i16_le(stream: Any, value: int) -> None:
    require(stream, "stream")
    _emit(stream, check_range(value, 16, True), 2, False)

def write_i16_be(stream: Any, value: int) -> None:
    require(stream, "stream")
    _emit(stream, check_range(value, 16, True), 2, True)

def write_u16_le(stream: Any, value: int) -> None:
    require(stream, "stream")
    _emit(stream, check_range(value, 16, False), 2, False)

def write_u16_be(stream: Any, value: int) -> None:
    require(stream, "stream")
    _emit(stream, check_range(value, 16, False), 2, True)

def write_i32_le(stream: Any, value: int) -> None:
    require(stream, "stream")
    _emit(stream, check_range(value, 32, True), 4, False)

def write_i32_be(stream: Any, value: int) -> None:
    require(stream, "stream")
    _emit(stream, check_range(value, 32, True), 4, True)

def write_u32_le(stream: Any, value: int) -> None:
    require(stream, "stream")
    _emit(stream, check_range(value, 32, False), 4, False)

def write_u32_be(stream: Any, value: int) -> None:
    require(stream, "stream")
    _emit(stream, check_range(value, 32, False), 4, True)


# ----------------------------- écriture 64 (deux moitiés) -----------------

def write_i64_le(stream: Any, value: int) -> None:
    require(stream, "stream")
    value = check_range(value, 64, True)
    write_u32_le(stream, value & 0xFFFFFFFF)
    write_i32_le(stream, value >> 32)

def write_i64_be(stream: Any, value: int) -> None:
    require(stream, "stream")
    value = check_range(value, 64, True)
    write_i32_be(stream, value >> 32)
    write_u32_be(stream, value & 0xFFFFFFFF)

def write_u64_le(stream: Any, value: int) -> None:
    require(stream, "stream")
    value = check_range(value, 64, False)
    write_u32_le(stream, value & 0xFFFFFFFF)
    write_u32_le(stream, value >> 32)

def write_u64_be(stream: Any, value: int) -> None:
    require(stream, "stream")
    value = check_range(value, 64, False)
    write_u32_be(stream, value >> 32)
    write_u32_be(stream, value & 0xFFFFFFFF)


# ----------------------------- flottants (ordre natif) --------------------

def _bits_to_float(bits: int, itype: type, ftype: type) -> Any:
    # scalaire numpy de type `ftype` : aucun passage par le FPU
    return np.array([bits], dtype=itype).view(ftype)[0]

def _float_to_bits(value: float, itype: type, ftype: type) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float, np.floating, np.integer)):
        raise InvalidArgumentError(f"value must be a real number (got {type(value).__name__})")
    if isinstance(value, ftype):
        # même largeur : copie des octets, pas de conversion
        return int(np.asarray(value).reshape(1).view(itype)[0])
    try:
        arr = np.array([value], dtype=ftype)
    except OverflowError as e:
        raise InvalidArgumentError(f"value {value!r} out of range for {np.dtype(ftype).name}") from e
    return int(arr.view(itype)[0])


def read_f32(stream: Any) -> np.float32:
    """Lit un float IEEE-754 (4 octets, ordre natif de l'hôte).

    Retourne un `np.float32` : le motif binaire lu est conservé tel quel
    (NaN signalants compris) et `write_f32` le réémet à l'identique.
    """
    raw = bytes((read_byte(stream), read_byte(stream), read_byte(stream), read_byte(stream)))
    bits = B.get_u32_le(raw) if _NATIVE_LE else B.get_u32_be(raw)
    return _bits_to_float(bits, np.uint32, np.float32)


def write_f32(stream: Any, value: float) -> None:
    """Écrit un float IEEE-754, ordre natif.

    Un `np.float32` est écrit bit à bit ; un `float` Python est arrondi en
    simple précision. InvalidArgumentError si la valeur n'est pas un réel
    convertible.
    """
    require(stream, "stream")
    bits = _float_to_bits(value, np.uint32, np.float32)
    _emit(stream, bits, 4, not _NATIVE_LE)


def read_f64(stream: Any) -> float:
    """Lit un double IEEE-754 (8 octets, ordre natif de l'hôte)."""
    raw = read_exact(stream, 8)
    bits = B.get_u64_le(raw) if _NATIVE_LE else B.get_u64_be(raw)
    return _bits_to_float(bits, np.uint64, np.float64)


def write_f64(stream: Any, value: float) -> None:
    """Écrit un double IEEE-754 en un seul `write` de 8 octets, ordre natif."""
    require(stream, "stream")
    bits = _float_to_bits(value, np.uint64, np.float64)
    raw = bytearray(8)
    if _NATIVE_LE:
        B.put_u64_le(raw, 0, bits)
    else:
        B.put_u64_be(raw, 0, bits)
    write_all(stream, raw)
