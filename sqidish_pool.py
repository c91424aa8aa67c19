#! /usr/bin/env python3

"""Reusable scratch buffers for assembling ids.

Encoding builds each id from many small fragments; renting a buffer
from a pool avoids allocating a fresh one per call.  Always pair
acquire() with release(), or use rented() which does so even when the
caller raises.
"""

import contextlib
import threading

DEFAULT_INITIAL_CAPACITY = 16

class Buffer:
    """Accumulates text fragments and tracks their total length"""

    __slots__ = ('fragments', 'size', 'rented')

    def __init__(self):
        self.fragments = []
        self.size = 0
        self.rented = False

    def append(self, text):
        self.fragments.append(text)
        self.size += len(text)

    def clear(self):
        self.fragments.clear()
        self.size = 0

    def getvalue(self):
        return ''.join(self.fragments)

    def __len__(self):
        return self.size


class BufferPool:
    """Thread-safe free list of Buffer instances"""

    __slots__ = ('free', 'lock')

    def __init__(self, initial_capacity=DEFAULT_INITIAL_CAPACITY):
        if initial_capacity < 0:
            raise ValueError('initial_capacity must be non-negative, not {}'
                             .format(initial_capacity))
        self.free = [Buffer() for _ in range(initial_capacity)]
        self.lock = threading.Lock()

    def acquire(self):
        """Returns an empty Buffer, reusing a free one when available"""
        with self.lock:
            buffer = self.free.pop() if self.free else Buffer()
            buffer.rented = True
        buffer.clear()
        return buffer

    def release(self, buffer):
        """Clear BUFFER and make it available again.
        Releasing a buffer that is not rented does nothing.
        """
        with self.lock:
            if not buffer.rented:
                return
            buffer.rented = False
            buffer.clear()
            self.free.append(buffer)

    @contextlib.contextmanager
    def rented(self):
        buffer = self.acquire()
        try:
            yield buffer
        finally:
            self.release(buffer)

    def __len__(self):
        """Number of buffers waiting to be rented"""
        with self.lock:
            return len(self.free)
