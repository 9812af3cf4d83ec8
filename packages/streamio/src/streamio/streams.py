# packages/streamio/src/streamio/streams.py
from __future__ import annotations

"""
Capacité "flux d'octets" consommée par streamio.

La bibliothèque n'implémente aucun flux : elle accepte tout objet fichier Python
binaire (`io.BytesIO`, `open(..., "rb")`, `socket.makefile("rb")`...). Les
protocoles ci-dessous décrivent le minimum requis, en typage structurel.

Source
------
- `readinto(buffer) -> int` (préféré) **ou** `read(n) -> bytes` ;
- `0` / `b""` signale la fin des données ;
- `None` (flux non bloquant sans données prêtes) est traité comme une fin :
  le modèle est strictement bloquant.

Puits
-----
- `write(data)` ; les écritures partielles d'un flux brut sont complétées ici.

Optionnel
---------
- `seekable()`, `seek(offset, whence)`, `tell()`, `close()`.
"""

from typing import Any, Protocol, runtime_checkable

from .errors import InvalidArgumentError

__all__ = [
    "ByteSource", "ByteSink", "SeekableStream", "Closeable",
    "readinto", "write_all", "is_seekable", "writable_view",
]


@runtime_checkable
class ByteSource(Protocol):
    def read(self, size: int = -1, /) -> bytes | None: ...


@runtime_checkable
class ByteSink(Protocol):
    def write(self, data: Any, /) -> int | None: ...


@runtime_checkable
class SeekableStream(Protocol):
    def seekable(self) -> bool: ...
    def seek(self, offset: int, whence: int = 0, /) -> int: ...
    def tell(self) -> int: ...


@runtime_checkable
class Closeable(Protocol):
    def close(self) -> None: ...


def require(obj: Any, name: str) -> None:
    if obj is None:
        raise InvalidArgumentError(f"{name} must not be None")


def readinto(stream: Any, view: memoryview) -> int:
    """Une lecture unique (éventuellement courte) dans `view`. Retourne 0 en fin de flux."""
    fn = getattr(stream, "readinto", None)
    if fn is not None:
        n = fn(view)
        return int(n) if n else 0
    data = stream.read(len(view))
    if not data:
        return 0
    n = len(data)
    if n > len(view):
        raise OSError(f"stream returned {n} bytes for a {len(view)}-byte read")
    view[:n] = data
    return n


def write_all(stream: Any, data: bytes | bytearray | memoryview) -> None:
    """Écrit `data` en entier ; complète les écritures partielles (flux bruts)."""
    view = memoryview(data).cast("B")
    while view:
        n = stream.write(view)
        if n is None or n >= len(view):
            return
        if n <= 0:
            raise OSError("stream write made no progress")
        view = view[n:]


def is_seekable(stream: Any) -> bool:
    fn = getattr(stream, "seekable", None)
    return bool(fn()) if callable(fn) else False


def writable_view(buffer: Any, name: str = "buffer") -> memoryview:
    """Vue octet (format 'B') inscriptible sur un tampon fourni par l'appelant."""
    require(buffer, name)
    try:
        view = memoryview(buffer)
    except TypeError as e:
        raise InvalidArgumentError(f"{name} must support the buffer protocol") from e
    if view.readonly:
        raise InvalidArgumentError(f"{name} must be writable (got read-only {type(buffer).__name__})")
    if not view.c_contiguous:
        raise InvalidArgumentError(f"{name} must be C-contiguous")
    if view.format == "B" and view.ndim == 1:
        return view
    try:
        return view.cast("B")
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"{name}: cannot view as bytes ({e})") from e
