# pnutil/string

from pnutil import codes

__all__ = ["String"]


class String:
    # Growable byte buffer: a logical size within a larger capacity.

    def __init__(self, initial=b'', capacity=0):
        n = len(initial)
        self._buf = bytearray(max(n, capacity))
        self._buf[:n] = initial
        self._size = n

    def size(self):
        return self._size

    def capacity(self):
        return len(self._buf)

    def tail(self):
        # Writable view of the unused space past the logical size
        return memoryview(self._buf)[self._size:]

    def grow(self, capacity):
        if not isinstance(capacity, int) or capacity < 0:
            raise codes.Error(codes.ARG_ERR, "invalid capacity: %r" % (capacity,))
        extra = capacity - len(self._buf)
        if extra > 0:
            # never shrinks
            self._buf.extend(bytes(extra))

    def resize(self, size):
        if not isinstance(size, int) or not (0 <= size <= len(self._buf)):
            raise codes.Error(codes.ARG_ERR, "invalid size: %r" % (size,))
        self._size = size

    def clear(self):
        self._size = 0

    def getvalue(self):
        return bytes(self._buf[:self._size])

    def __bytes__(self):
        return self.getvalue()

    def __len__(self):
        return self._size

    def __str__(self):
        return self.getvalue().decode('ascii', 'backslashreplace')

    def __repr__(self):
        return "String(%r)" % (self.getvalue(),)
