from __future__ import annotations

import threading

from latchtrie.exceptions import LatchError


class ReaderWriterLatch:
    """
    A latch that can be held by many readers, or by a single writer.

    Once a writer is waiting, new readers block until it is done, so a steady stream of readers cannot starve
    writers. The latch is not reentrant.
    """

    def __init__(self):
        self._readers = 0
        self._writers_waiting = 0
        self._writer_active = False
        self._cond = threading.Condition(threading.Lock())

    def w_lock(self):
        """
        acquire the latch exclusively, blocking until all readers and writers are done
        """
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer_active or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer_active = True

    def w_unlock(self):
        with self._cond:
            if not self._writer_active:
                raise LatchError('write')
            self._writer_active = False
            self._cond.notify_all()

    def r_lock(self):
        """
        acquire the latch in shared mode, blocking while a writer is active or waiting
        """
        with self._cond:
            while self._writer_active or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def r_unlock(self):
        with self._cond:
            if not self._readers:
                raise LatchError('read')
            self._readers -= 1
            if not self._readers:
                self._cond.notify_all()

    @property
    def readers(self) -> int:
        """
        :return: the number of readers currently holding the latch
        """
        return self._readers

    @property
    def writer_active(self) -> bool:
        return self._writer_active

    def read(self) -> AutoReaderLatch:
        return AutoReaderLatch(self)

    def write(self) -> AutoWriterLatch:
        return AutoWriterLatch(self)


class AutoReaderLatch:
    """
    Holds a latch in shared mode for the span of a with block
    """
    __slots__ = 'latch',

    def __init__(self, latch: ReaderWriterLatch):
        self.latch = latch

    def __enter__(self):
        self.latch.r_lock()
        return self.latch

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.latch.r_unlock()


class AutoWriterLatch:
    """
    Holds a latch exclusively for the span of a with block
    """
    __slots__ = 'latch',

    def __init__(self, latch: ReaderWriterLatch):
        self.latch = latch

    def __enter__(self):
        self.latch.w_lock()
        return self.latch

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.latch.w_unlock()
