# packages/streamio/src/streamio/errors.py
from __future__ import annotations

from typing import Optional

__all__ = ["StreamIOError", "InvalidArgumentError", "EndOfStreamError"]


class StreamIOError(Exception):
    """Base commune des erreurs levées par streamio."""


class InvalidArgumentError(StreamIOError, ValueError):
    """Argument invalide (référence absente, longueur/offset hors bornes...).

    Toujours levée **avant** toute I/O : le flux n'est pas touché.
    """


class EndOfStreamError(StreamIOError, EOFError):
    """Le flux s'est terminé avant que l'opération ait reçu ce qu'elle exige.

    Les octets disponibles ont déjà été consommés : le flux reste avancé.
    `requested` / `received` valent None quand l'appelant ne les connaît pas.
    """

    def __init__(self, message: str = "unexpected end of stream",
                 requested: Optional[int] = None, received: Optional[int] = None) -> None:
        if requested is not None and received is not None:
            message = f"{message} (requested={requested}, received={received})"
        super().__init__(message)
        self.requested = requested
        self.received = received
