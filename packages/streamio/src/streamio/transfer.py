# packages/streamio/src/streamio/transfer.py
# -----------------------------------------------------------------------------
# Transfert en masse : copie flux → flux et traitement par blocs.

from __future__ import annotations

import logging
from contextlib import ExitStack
from typing import Any, Callable

from .config import IOConfig, resolve
from .errors import InvalidArgumentError
from .streams import readinto, require, write_all

__all__ = ["ChunkHandler", "copy_stream", "process_stream"]

log = logging.getLogger("streamio.transfer")

#: handler(buffer, count) -> bool ; False (ou falsy) arrête le traitement.
ChunkHandler = Callable[[bytearray, int], bool]


def _closer(stream: Any, name: str) -> Callable[[], None]:
    def close() -> None:
        log.debug("copy_stream: closing %s", name)
        stream.close()
    return close


def copy_stream(source: Any, dest: Any, dispose: bool = False, rewind_source: bool = False,
                buffer_size: int = 0, *, config: IOConfig | None = None) -> int:
    """
    Copie `source` dans `dest` jusqu'à une lecture vide ; retourne le nombre d'octets copiés.

    Paramètres
    ----------
    dispose : bool
        Ferme les deux flux (source puis dest) à la sortie, succès ou erreur,
        exactement une fois chacun. L'échec de fermeture de l'un n'empêche pas
        la fermeture de l'autre.
    rewind_source : bool
        `source.seek(0)` avant la copie (la source doit être positionnable ;
        l'erreur du flux est propagée telle quelle).
    buffer_size : int
        Taille du tampon ; 0 = `config.copy_buffer_size` (4096).

    Exceptions
    ----------
    InvalidArgumentError si un flux est None ou `buffer_size < 0` (avant toute I/O,
    aucun flux n'est fermé dans ce cas).
    """
    if source is None or dest is None:
        raise InvalidArgumentError("source and dest must not be None")
    if buffer_size < 0:
        raise InvalidArgumentError(f"buffer_size must be >= 0 (got {buffer_size})")
    if buffer_size == 0:
        buffer_size = resolve(config).copy_buffer_size

    with ExitStack() as stack:
        if dispose:
            # LIFO : source fermée en premier
            stack.callback(_closer(dest, "dest"))
            stack.callback(_closer(source, "source"))
        if rewind_source:
            source.seek(0)
        buf = bytearray(buffer_size)
        view = memoryview(buf)
        total = 0
        while True:
            n = readinto(source, view)
            if n == 0:
                break
            write_all(dest, view[:n])
            total += n
        log.debug("copy_stream: %d bytes (buffer=%d)", total, buffer_size)
        return total


def process_stream(stream: Any, handler: ChunkHandler, chunk_size: int) -> int:
    """
    Lit `stream` par blocs d'au plus `chunk_size` octets et appelle
    `handler(buffer, count)` pour chaque lecture non vide.

    Le même `bytearray` est réutilisé d'un appel à l'autre : le handler ne doit
    pas le conserver. S'arrête sur lecture vide ou quand le handler retourne une
    valeur fausse. Retourne le total d'octets passés au handler.
    """
    require(stream, "stream")
    if handler is None or not callable(handler):
        raise InvalidArgumentError("handler must be callable")
    if chunk_size <= 0:
        raise InvalidArgumentError(f"chunk_size must be > 0 (got {chunk_size})")

    buf = bytearray(chunk_size)
    view = memoryview(buf)
    total = 0
    while True:
        n = readinto(stream, view)
        if n == 0:
            break
        total += n
        if not handler(buf, n):
            log.debug("process_stream: handler stopped after %d bytes", total)
            break
    return total
