# packages/streamio/src/streamio/reader.py
# -----------------------------------------------------------------------------
# Lectures exactes / bornées / non bornées sur un flux d'octets synchrone.

from __future__ import annotations

import logging
from typing import Any, Optional

from .config import IOConfig, resolve
from .errors import EndOfStreamError, InvalidArgumentError
from .streams import readinto, require, writable_view

__all__ = [
    "read_into", "read_into_partial", "read_exact_into",
    "read_exact", "read_byte", "read_all_bytes",
]

log = logging.getLogger("streamio.reader")

#: Sentinelle interne de fin de flux pour la lecture d'un octet (jamais retournée).
_EOF = -1


def _check_window(view: memoryview, offset: int, length: Optional[int]) -> int:
    if offset < 0:
        raise InvalidArgumentError(f"offset must be >= 0 (got {offset})")
    if length is None:
        length = len(view) - offset
    if length < 0:
        raise InvalidArgumentError(f"length must be >= 0 (got {length})")
    if offset + length > len(view):
        raise InvalidArgumentError(
            f"offset+length exceeds buffer capacity ({offset}+{length} > {len(view)})"
        )
    return length


def _fill(stream: Any, view: memoryview, offset: int, length: int) -> int:
    """Boucle de lecture commune : retourne le nombre d'octets obtenus (<= length)."""
    total = 0
    while total < length:
        n = readinto(stream, view[offset + total:offset + length])
        if n == 0:
            break
        total += n
    return total


def read_into(stream: Any, buffer: Any, offset: int = 0, length: Optional[int] = None) -> int:
    """
    Remplit **exactement** `length` octets de `buffer` à partir de `offset`.

    Paramètres
    ----------
    stream : source d'octets
        Objet fichier binaire (`readinto` ou `read`).
    buffer : tampon inscriptible
        `bytearray`, `memoryview` inscriptible, tableau numpy contigu...
    offset : int, défaut 0
        Position d'écriture dans le tampon.
    length : int | None
        Nombre d'octets à lire ; None = jusqu'à la fin du tampon.

    Retour
    ------
    int
        Toujours égal à `length`.

    Exceptions
    ----------
    InvalidArgumentError si une référence est absente ou si la fenêtre sort du tampon
    (avant toute I/O). EndOfStreamError si le flux s'épuise avant : les octets reçus
    sont déjà dans le tampon et consommés du flux.
    """
    require(stream, "stream")
    view = writable_view(buffer)
    length = _check_window(view, offset, length)
    got = _fill(stream, view, offset, length)
    if got != length:
        raise EndOfStreamError(requested=length, received=got)
    return got


def read_into_partial(stream: Any, buffer: Any, offset: int = 0, length: Optional[int] = None) -> int:
    """
    Variante **tolérante** de `read_into` : lit jusqu'à `length` octets et retourne
    le nombre réellement lu (plus petit si le flux s'est terminé). Jamais d'EndOfStreamError.
    """
    require(stream, "stream")
    view = writable_view(buffer)
    length = _check_window(view, offset, length)
    return _fill(stream, view, offset, length)


def read_exact_into(stream: Any, buffer: Any, offset: int, length: int,
                    throw_on_shortage: bool = True) -> int:
    """Forme à drapeau : `read_into` si `throw_on_shortage`, sinon `read_into_partial`."""
    if throw_on_shortage:
        return read_into(stream, buffer, offset, length)
    return read_into_partial(stream, buffer, offset, length)


def read_exact(stream: Any, length: int) -> bytes:
    """Alloue et retourne exactement `length` octets lus depuis `stream`."""
    if length < 0:
        raise InvalidArgumentError(f"length must be >= 0 (got {length})")
    require(stream, "stream")
    buf = bytearray(length)
    read_into(stream, buf, 0, length)
    return bytes(buf)


def _read_byte_or_eof(stream: Any) -> int:
    one = bytearray(1)
    if readinto(stream, memoryview(one)) == 0:
        return _EOF
    return one[0]


def read_byte(stream: Any) -> int:
    """Lit un octet (0..255). EndOfStreamError si le flux est vide."""
    require(stream, "stream")
    b = _read_byte_or_eof(stream)
    if b == _EOF:
        raise EndOfStreamError(requested=1, received=0)
    return b


def read_all_bytes(stream: Any, *, config: IOConfig | None = None) -> bytes:
    """
    Lit tout le reste du flux.

    Le tampon démarre à `config.read_all_initial_capacity` octets et double à chaque
    remplissage (coût de copie amorti O(n)), puis il est tronqué aux octets consommés.
    """
    require(stream, "stream")
    cfg = resolve(config)
    buf = bytearray(cfg.read_all_initial_capacity)
    used = 0
    while True:
        if used == len(buf):
            buf.extend(bytes(len(buf)))
        view = memoryview(buf)[used:]
        try:
            n = readinto(stream, view)
        finally:
            view.release()
        if n == 0:
            break
        used += n
    del buf[used:]
    log.debug("read_all_bytes: %d bytes", used)
    return bytes(buf)
