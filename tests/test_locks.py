"""
Unit tests for the reader/writer lock.
"""

import threading

import pytest

from user_service_api.app.core.locks import ReadWriteLock


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    barrier = threading.Barrier(2, timeout=2)
    errors = []

    def reader():
        with lock.read_locked():
            try:
                # Both readers must be inside at the same time to pass.
                barrier.wait()
            except threading.BrokenBarrierError as exc:
                errors.append(exc)

    threads = [threading.Thread(target=reader) for _ in range(2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)
    assert errors == []


def test_writer_excludes_readers():
    lock = ReadWriteLock()
    entered = threading.Event()

    def reader():
        with lock.read_locked():
            entered.set()

    lock.acquire_write()
    thread = threading.Thread(target=reader)
    thread.start()
    assert not entered.wait(0.1)
    lock.release_write()
    assert entered.wait(2)
    thread.join(timeout=2)


def test_waiting_writer_blocks_new_readers():
    lock = ReadWriteLock()
    lock.acquire_read()
    writer_done = threading.Event()
    late_reader_done = threading.Event()

    def writer():
        with lock.write_locked():
            writer_done.set()

    def late_reader():
        with lock.read_locked():
            late_reader_done.set()

    writer_thread = threading.Thread(target=writer)
    writer_thread.start()
    # Give the writer time to start waiting behind the held read lock.
    assert not writer_done.wait(0.1)

    reader_thread = threading.Thread(target=late_reader)
    reader_thread.start()
    assert not late_reader_done.wait(0.1)

    lock.release_read()
    assert writer_done.wait(2)
    assert late_reader_done.wait(2)
    writer_thread.join(timeout=2)
    reader_thread.join(timeout=2)


def test_unbalanced_release_raises():
    lock = ReadWriteLock()
    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()
