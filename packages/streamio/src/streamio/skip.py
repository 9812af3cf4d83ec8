# packages/streamio/src/streamio/skip.py
from __future__ import annotations

import io
import logging
from typing import Any

from .config import IOConfig, resolve
from .errors import EndOfStreamError, InvalidArgumentError
from .reader import read_byte
from .streams import is_seekable, readinto, require

__all__ = ["skip"]

log = logging.getLogger("streamio.skip")


def skip(stream: Any, count: int, *, config: IOConfig | None = None) -> None:
    """
    Avance la position de lecture de `count` octets sans les exposer.

    - flux positionnable : `seek(count, SEEK_CUR)` (O(1), la fin n'est pas vérifiée) ;
    - sinon, `count <= config.skip_bytewise_max` : lecture octet par octet ;
    - sinon : blocs de `config.skip_block_size` dans un tampon jetable.

    InvalidArgumentError si `count < 0` ; EndOfStreamError si un flux non
    positionnable s'épuise avant `count` octets.
    """
    if count < 0:
        raise InvalidArgumentError(f"count cannot be negative (got {count})")
    require(stream, "stream")
    if count == 0:
        return
    cfg = resolve(config)

    if is_seekable(stream):
        log.debug("skip %d: seek", count)
        stream.seek(count, io.SEEK_CUR)
        return

    if count <= cfg.skip_bytewise_max:
        log.debug("skip %d: bytewise", count)
        for _ in range(count):
            read_byte(stream)
        return

    log.debug("skip %d: blocks of %d", count, cfg.skip_block_size)
    scratch = memoryview(bytearray(cfg.skip_block_size))
    left = count
    while left:
        n = readinto(stream, scratch[:min(left, cfg.skip_block_size)])
        if n == 0:
            raise EndOfStreamError("stream ended during skip", requested=count, received=count - left)
        left -= n
