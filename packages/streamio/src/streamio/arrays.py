# packages/streamio/src/streamio/arrays.py
from __future__ import annotations

from typing import Any

import numpy as np

from .errors import InvalidArgumentError
from .reader import read_exact
from .streams import require, write_all

__all__ = ["read_array", "write_array"]


def _dtype(dtype: Any) -> np.dtype:
    try:
        dt = np.dtype(dtype)
    except TypeError as e:
        raise InvalidArgumentError(f"invalid dtype: {dtype!r}") from e
    if dt.hasobject or dt.itemsize == 0:
        raise InvalidArgumentError(f"dtype {dt} has no fixed binary layout")
    return dt


def read_array(stream: Any, count: int, dtype: Any) -> np.ndarray:
    """
    Lit exactement `count` valeurs de type `dtype` (lecture stricte).

    L'ordre des octets est celui du dtype : utiliser "<u4", ">i8", ">f4"... pour
    un ordre explicite, indépendant de l'hôte. Le tableau retourné est une copie
    propre et inscriptible.
    """
    require(stream, "stream")
    if count < 0:
        raise InvalidArgumentError(f"count must be >= 0 (got {count})")
    dt = _dtype(dtype)
    raw = read_exact(stream, count * dt.itemsize)
    return np.frombuffer(raw, dtype=dt, count=count).copy()


def write_array(stream: Any, values: Any, dtype: Any = None) -> int:
    """Écrit `values` (converti en tableau contigu de `dtype`) en un seul appel ; retourne les octets écrits."""
    require(stream, "stream")
    require(values, "values")
    dt = _dtype(dtype) if dtype is not None else None
    arr = np.ascontiguousarray(values, dtype=dt)
    if arr.dtype.hasobject:
        raise InvalidArgumentError("values must be numeric (object arrays have no binary layout)")
    data = arr.tobytes()
    write_all(stream, data)
    return len(data)
