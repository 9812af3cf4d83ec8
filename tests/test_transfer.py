from __future__ import annotations
import io
import logging

import pytest

from streamio import IOConfig, InvalidArgumentError, copy_stream, process_stream

log = logging.getLogger("streamio.tests.transfer")


@pytest.mark.parametrize("n", [0, 1, 4096, 10_000])
def test_copy_stream_identical(n, tracking_sink):
    data = bytes((i * 31) & 0xFF for i in range(n))
    dest = tracking_sink()
    total = copy_stream(io.BytesIO(data), dest)
    assert total == n
    assert dest.getvalue() == data
    assert dest.close_calls == 0


def test_copy_stream_custom_buffer_and_partial_reads(trickle, tracking_sink):
    data = b"x" * 1000
    dest = tracking_sink()
    assert copy_stream(trickle(data, step=3), dest, buffer_size=64) == 1000
    assert dest.getvalue() == data
    assert all(len(w) <= 3 for w in dest.writes)


def test_copy_stream_buffer_size_from_config(tracking_sink):
    dest = tracking_sink()
    copy_stream(io.BytesIO(b"a" * 100), dest, config=IOConfig(copy_buffer_size=16))
    assert max(len(w) for w in dest.writes) == 16


def test_copy_stream_rewind(tracking_sink):
    src = io.BytesIO(b"abcdef")
    src.seek(4)
    dest = tracking_sink()
    assert copy_stream(src, dest, rewind_source=True) == 6
    assert dest.getvalue() == b"abcdef"


def test_copy_stream_rewind_non_seekable_propagates(trickle, tracking_sink):
    with pytest.raises(OSError):
        copy_stream(trickle(b"abc"), tracking_sink(), rewind_source=True)


def test_copy_stream_dispose_on_success(trickle, tracking_sink):
    src, dest = trickle(b"payload", step=2), tracking_sink()
    copy_stream(src, dest, dispose=True)
    assert src.close_calls == 1 and dest.close_calls == 1
    assert dest.data == b"payload"


def test_copy_stream_dispose_on_failure(trickle, failing_sink):
    src, dest = trickle(b"payload", step=2), failing_sink(fail_after=1)
    with pytest.raises(OSError, match="disk full"):
        copy_stream(src, dest, dispose=True)
    assert src.close_calls == 1 and dest.close_calls == 1


def test_copy_stream_no_dispose_on_failure(trickle, failing_sink):
    src, dest = trickle(b"payload"), failing_sink(fail_after=0)
    with pytest.raises(OSError):
        copy_stream(src, dest)
    assert src.close_calls == 0 and dest.close_calls == 0


def test_copy_stream_invalid_arguments(tracking_sink):
    dest = tracking_sink()
    with pytest.raises(InvalidArgumentError):
        copy_stream(None, dest, dispose=True)
    with pytest.raises(InvalidArgumentError):
        copy_stream(io.BytesIO(), None)
    with pytest.raises(InvalidArgumentError):
        copy_stream(io.BytesIO(b"a"), dest, dispose=True, buffer_size=-1)
    assert dest.close_calls == 0


def test_process_stream_chunks():
    data = bytes(range(100))
    seen = []

    def handler(buf, n):
        seen.append(bytes(buf[:n]))
        return True

    assert process_stream(io.BytesIO(data), handler, 32) == 100
    assert [len(c) for c in seen] == [32, 32, 32, 4]
    assert b"".join(seen) == data


def test_process_stream_early_stop(caplog):
    s = io.BytesIO(b"z" * 100)
    calls = []

    def handler(buf, n):
        calls.append(n)
        return False

    with caplog.at_level(logging.DEBUG, logger="streamio.transfer"):
        assert process_stream(s, handler, 10) == 10
    assert calls == [10]
    assert s.tell() == 10
    assert "handler stopped" in caplog.text


def test_process_stream_reuses_buffer():
    ids = set()
    process_stream(io.BytesIO(b"q" * 50), lambda buf, n: ids.add(id(buf)) or True, 8)
    assert len(ids) == 1


def test_process_stream_empty_stream_never_calls_handler():
    def handler(buf, n):
        raise AssertionError("must not be called")

    assert process_stream(io.BytesIO(b""), handler, 4) == 0


@pytest.mark.parametrize("chunk", [0, -3])
def test_process_stream_bad_chunk_size(chunk):
    with pytest.raises(InvalidArgumentError):
        process_stream(io.BytesIO(b"a"), lambda b, n: True, chunk)


def test_process_stream_missing_arguments():
    with pytest.raises(InvalidArgumentError):
        process_stream(None, lambda b, n: True, 4)
    with pytest.raises(InvalidArgumentError):
        process_stream(io.BytesIO(b"a"), None, 4)


def test_copy_stream_dispose_when_source_close_fails(close_failing_source, tracking_sink):
    src, dest = close_failing_source(b"payload", step=4), tracking_sink()
    with pytest.raises(OSError, match="close failed"):
        copy_stream(src, dest, dispose=True)
    assert src.close_calls == 1
    assert dest.close_calls == 1
    assert dest.data == b"payload"


def test_copy_stream_completes_short_writes(short_write_sink):
    data = bytes(i & 0xFF for i in range(1000))
    dest = short_write_sink()
    assert copy_stream(io.BytesIO(data), dest, buffer_size=128) == 1000
    log.info("short-write sink: %d write calls for %d bytes", len(dest.writes), len(data))
    assert dest.getvalue() == data
    assert len(dest.writes) > 1000 // 128


def test_copy_stream_stuck_sink_raises(stuck_sink):
    with pytest.raises(OSError, match="no progress"):
        copy_stream(io.BytesIO(b"abc"), stuck_sink())


def test_write_all_short_and_stuck_sinks(short_write_sink, stuck_sink):
    from streamio.streams import write_all

    sink = short_write_sink()
    write_all(sink, b"0123456789")
    assert sink.getvalue() == b"0123456789"
    with pytest.raises(OSError):
        write_all(stuck_sink(), b"x")
