# packages/streamio/src/streamio/text.py
# -----------------------------------------------------------------------------
# Codec texte à longueur fixe (aucun préfixe de longueur n'est écrit ni lu).

from __future__ import annotations

import codecs
from typing import Any, Optional, Union

from .config import IOConfig, resolve
from .errors import InvalidArgumentError
from .reader import read_exact
from .streams import require, write_all

__all__ = [
    "read_string", "read_ascii",
    "write_string", "write_ascii", "write_bytes",
]

Encoding = Union[str, codecs.CodecInfo]


def _codec(encoding: Optional[Encoding], config: IOConfig | None) -> codecs.CodecInfo:
    if encoding is None:
        encoding = resolve(config).default_encoding
    if isinstance(encoding, codecs.CodecInfo):
        return encoding
    try:
        return codecs.lookup(encoding)
    except (LookupError, TypeError) as e:
        raise InvalidArgumentError(f"unknown encoding: {encoding!r}") from e


def read_string(stream: Any, length: int, encoding: Optional[Encoding] = None,
                errors: str = "strict", *, config: IOConfig | None = None) -> str:
    """
    Lit exactement `length` octets et les décode avec `encoding`.

    Paramètres
    ----------
    encoding : str | codecs.CodecInfo | None
        Nom d'encodage connu de `codecs` ou `CodecInfo` fourni par l'appelant.
        None = `config.default_encoding` (UTF-8).
    errors : str
        Règle de décodage de `codecs` ("strict", "replace"...).

    Exceptions
    ----------
    EndOfStreamError si le flux contient moins de `length` octets.
    UnicodeDecodeError si `errors="strict"` et les octets sont invalides.
    """
    info = _codec(encoding, config)
    data = read_exact(stream, length)
    return info.decode(data, errors)[0]


def read_ascii(stream: Any, length: int) -> str:
    """ASCII ; un octet > 0x7F devient U+FFFD (règle "replace" de `codecs`)."""
    return read_string(stream, length, "ascii", "replace")


def write_bytes(stream: Any, data: bytes | bytearray | memoryview) -> int:
    """Écrit `data` en entier et retourne le nombre d'octets écrits."""
    require(stream, "stream")
    require(data, "data")
    n = memoryview(data).nbytes
    write_all(stream, data)
    return n


def write_string(stream: Any, text: str, encoding: Optional[Encoding] = None,
                 errors: str = "strict", *, config: IOConfig | None = None) -> int:
    """Encode `text` et écrit tous les octets ; retourne leur nombre."""
    require(stream, "stream")
    if not isinstance(text, str):
        raise InvalidArgumentError(f"text must be str (got {type(text).__name__})")
    info = _codec(encoding, config)
    return write_bytes(stream, info.encode(text, errors)[0])


def write_ascii(stream: Any, text: str) -> int:
    """ASCII avec perte : chaque caractère non ASCII devient `?` (règle "replace")."""
    return write_string(stream, text, "ascii", "replace")
