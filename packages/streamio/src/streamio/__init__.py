# packages/streamio/src/streamio/__init__.py
from __future__ import annotations

"""streamio - utilitaires de flux d'octets synchrones (surface publique).

Fonctions sans état, paramétrées uniquement par le flux passé à chaque appel :
transfert en masse, lectures exactes, codec d'entiers/flottants LE/BE,
codec texte à longueur fixe, saut avant, tableaux numpy.
"""

__version__ = "1.0.0"

from .config import DEFAULT_CONFIG, IOConfig
from .errors import EndOfStreamError, InvalidArgumentError, StreamIOError
from .streams import ByteSink, ByteSource, Closeable, SeekableStream

# Transfert
from .transfer import ChunkHandler, copy_stream, process_stream

# Lectures
from .reader import (
    read_all_bytes, read_byte, read_exact, read_exact_into, read_into, read_into_partial,
)

# Codec primitif (flux)
from .primitives import (
    read_f32, read_f64, read_i8, read_i16_be, read_i16_le, read_i32_be, read_i32_le,
    read_i64_be, read_i64_le, read_u8, read_u16_be, read_u16_le, read_u32_be, read_u32_le,
    read_u64_be, read_u64_le,
    write_byte, write_f32, write_f64, write_i8, write_i16_be, write_i16_le, write_i32_be,
    write_i32_le, write_i64_be, write_i64_le, write_u8, write_u16_be, write_u16_le,
    write_u32_be, write_u32_le, write_u64_be, write_u64_le,
)

# Texte, saut, tableaux
from .text import read_ascii, read_string, write_ascii, write_bytes, write_string
from .skip import skip
from .arrays import read_array, write_array

# Codec en mémoire (sous-module)
from . import buffers

__all__ = [
    "__version__",
    "IOConfig", "DEFAULT_CONFIG",
    "StreamIOError", "InvalidArgumentError", "EndOfStreamError",
    "ByteSource", "ByteSink", "SeekableStream", "Closeable",
    "ChunkHandler", "copy_stream", "process_stream",
    "read_into", "read_into_partial", "read_exact_into", "read_exact", "read_byte", "read_all_bytes",
    "read_u8", "read_i8", "write_u8", "write_i8", "write_byte",
    "read_i16_le", "read_i16_be", "read_u16_le", "read_u16_be",
    "read_i32_le", "read_i32_be", "read_u32_le", "read_u32_be",
    "read_i64_le", "read_i64_be", "read_u64_le", "read_u64_be",
    "write_i16_le", "write_i16_be", "write_u16_le", "write_u16_be",
    "write_i32_le", "write_i32_be", "write_u32_le", "write_u32_be",
    "write_i64_le", "write_i64_be", "write_u64_le", "write_u64_be",
    "read_f32", "write_f32", "read_f64", "write_f64",
    "read_string", "read_ascii", "write_string", "write_ascii", "write_bytes",
    "skip",
    "read_array", "write_array",
    "buffers",
]
