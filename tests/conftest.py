from __future__ import annotations
import io

import pytest


class TrickleSource(io.RawIOBase):
    """Source non positionnable qui ne rend qu'au plus `step` octets par lecture."""

    def __init__(self, data: bytes, step: int = 1):
        self._buf = io.BytesIO(data)
        self.step = step
        self.reads = 0
        self.close_calls = 0

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return False

    def readinto(self, b) -> int:
        self.reads += 1
        chunk = self._buf.read(min(len(b), self.step))
        b[:len(chunk)] = chunk
        return len(chunk)

    def remaining(self) -> int:
        return len(self._buf.getbuffer()) - self._buf.tell()

    def close(self) -> None:
        self.close_calls += 1
        super().close()


class ReadOnlySource:
    """Source minimale : uniquement `read(n)`, ni `readinto` ni `seekable`."""

    def __init__(self, data: bytes):
        self._buf = io.BytesIO(data)

    def read(self, n: int = -1) -> bytes:
        return self._buf.read(n)


class TrackingSink(io.BytesIO):
    """Puits BytesIO qui compte les fermetures et les appels à write."""

    def __init__(self):
        super().__init__()
        self.close_calls = 0
        self.writes = []
        self.data = b""

    def write(self, b) -> int:
        self.writes.append(bytes(b))
        return super().write(b)

    def close(self) -> None:
        self.close_calls += 1
        if not self.closed:
            self.data = self.getvalue()
        super().close()


class FailingSink(TrackingSink):
    """Puits qui lève OSError après `fail_after` écritures."""

    def __init__(self, fail_after: int = 0):
        super().__init__()
        self.fail_after = fail_after

    def write(self, b) -> int:
        if len(self.writes) >= self.fail_after:
            raise OSError("disk full")
        return super().write(b)


@pytest.fixture
def trickle():
    return TrickleSource


@pytest.fixture
def read_only_source():
    return ReadOnlySource


@pytest.fixture
def tracking_sink():
    return TrackingSink


@pytest.fixture
def failing_sink():
    return FailingSink


class StalledSource(io.RawIOBase):
    """Source non bloquante : rend `data` puis `None` (rien de prêt) à chaque lecture."""

    def __init__(self, data: bytes):
        self._pending = data

    def readable(self) -> bool:
        return True

    def readinto(self, b):
        if not self._pending:
            return None
        n = min(len(b), len(self._pending))
        b[:n] = self._pending[:n]
        self._pending = self._pending[n:]
        return n


class CloseFailingSource(TrickleSource):
    """Source dont le premier `close()` lève OSError (le flux est tout de même fermé)."""

    def close(self) -> None:
        first = not self.closed
        self.close_calls += 1
        io.RawIOBase.close(self)
        if first:
            raise OSError("close failed")


class ShortWriteSink(TrackingSink):
    """Puits brut qui n'accepte que la moitié (au moins 1 octet) de chaque écriture."""

    def write(self, b) -> int:
        view = memoryview(b)
        return super().write(view[:max(1, len(view) // 2)])


class StuckSink(TrackingSink):
    """Puits qui n'accepte jamais rien (`write` retourne 0)."""

    def write(self, b) -> int:
        return 0


@pytest.fixture
def stalled_source():
    return StalledSource


@pytest.fixture
def close_failing_source():
    return CloseFailingSource


@pytest.fixture
def short_write_sink():
    return ShortWriteSink


@pytest.fixture
def stuck_sink():
    return StuckSink
