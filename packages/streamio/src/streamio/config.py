# packages/streamio/src/streamio/config.py
from __future__ import annotations
import codecs
from dataclasses import dataclass

__all__ = ["IOConfig", "DEFAULT_CONFIG"]


@dataclass(frozen=True, slots=True)
class IOConfig:
    """
    Réglages **immuables** des opérations streamio.

    Aucune opération ne garde d'état : chaque fonction reçoit (optionnellement)
    un `IOConfig` via le mot-clé `config=` et retombe sur `DEFAULT_CONFIG` sinon.

    Champs
    ------
    copy_buffer_size : int, default=4096
        Taille du tampon de `copy_stream` quand `buffer_size=0`. Doit être > 0.
    read_all_initial_capacity : int, default=4096
        Capacité initiale de `read_all_bytes` (doublée à chaque remplissage). Doit être > 0.
    skip_block_size : int, default=512
        Taille des blocs jetés par `skip` sur un flux non positionnable. Doit être > 0.
    skip_bytewise_max : int, default=4
        En dessous (ou égal), `skip` lit octet par octet au lieu d'allouer un bloc.
        Doit être >= 0.
    default_encoding : str, default="utf-8"
        Encodage par défaut du codec texte. Doit être connu de `codecs`.

    Notes
    -----
    - Les validations lèvent `ValueError` ; aucune conversion n'est appliquée.
    - Pas de lecture d'ENV : la bibliothèque ne possède aucune variable d'environnement.
    """

    # Transfert
    copy_buffer_size: int = 4096

    # Lecture non bornée
    read_all_initial_capacity: int = 4096

    # Skip
    skip_block_size: int = 512
    skip_bytewise_max: int = 4

    # Texte
    default_encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.copy_buffer_size <= 0:
            raise ValueError("IOConfig.copy_buffer_size must be > 0")
        if self.read_all_initial_capacity <= 0:
            raise ValueError("IOConfig.read_all_initial_capacity must be > 0")
        if self.skip_block_size <= 0:
            raise ValueError("IOConfig.skip_block_size must be > 0")
        if self.skip_bytewise_max < 0:
            raise ValueError("IOConfig.skip_bytewise_max must be >= 0")
        if not isinstance(self.default_encoding, str) or not self.default_encoding:
            raise ValueError("IOConfig.default_encoding must be a non-empty string")
        try:
            codecs.lookup(self.default_encoding)
        except LookupError as e:
            raise ValueError(f"IOConfig.default_encoding unknown: {self.default_encoding!r}") from e


DEFAULT_CONFIG = IOConfig()


def resolve(config: IOConfig | None) -> IOConfig:
    return DEFAULT_CONFIG if config is None else config
