"""
Byte Sources
============

A byte source is any object with a ``next_byte`` method, which returns
the next byte from the input as an int (0-255), or ``None`` at the end
of the input. A source may raise if the underlying transport fails.

The adapters here cover in-memory data, iterators, file-like streams
and sockets. They share the one method and nothing else, so anything
else with a ``next_byte`` method works as a source too.

"""

import logging

from . import errors


log = logging.getLogger('wsframe')


class BytesSource(object):
    """A source over bytes in memory."""

    def __init__(self, data):
        self._data = memoryview(bytes(data))
        self.position = 0

    def __repr__(self):
        return "<bytes-source {} of {} bytes>".format(
            self.position,
            len(self._data)
        )

    @property
    def remaining(self):
        """Number of unread bytes."""
        return len(self._data) - self.position

    def next_byte(self):
        if self.position >= len(self._data):
            return None
        byte = self._data[self.position]
        self.position += 1
        return byte


class IteratorSource(object):
    """
    A source over an iterable of ints, or of byte chunks.

    Chunks are handed out a byte at a time, empty chunks are skipped.

    """

    def __init__(self, iterable):
        self._iter = iter(iterable)
        self._chunk = b''
        self._chunk_pos = 0

    def __repr__(self):
        return "<iterator-source {!r}>".format(self._iter)

    def next_byte(self):
        while self._chunk_pos >= len(self._chunk):
            try:
                item = next(self._iter)
            except StopIteration:
                return None
            if isinstance(item, int):
                if not 0 <= item <= 255:
                    raise ValueError(
                        "byte must be in range(0, 256), not {}".format(item)
                    )
                return item
            self._chunk = bytes(item)
            self._chunk_pos = 0
        byte = self._chunk[self._chunk_pos]
        self._chunk_pos += 1
        return byte


class StreamSource(object):
    """A source that reads a byte at a time from a file-like object."""

    def __init__(self, stream):
        self.stream = stream

    def __repr__(self):
        return "<stream-source {!r}>".format(self.stream)

    def next_byte(self):
        try:
            data = self.stream.read(1)
        except OSError as error:
            raise errors.SourceError(error) from error
        if not data:
            return None
        return bytearray(data)[0]


class SocketSource(object):
    """A source that receives a byte at a time from a socket."""

    def __init__(self, sock):
        self.sock = sock

    def __repr__(self):
        return "<socket-source {!r}>".format(self.sock)

    def next_byte(self):
        try:
            data = self.sock.recv(1)
        except OSError as error:
            log.debug('recv failed; %s', error)
            raise errors.SourceError(error) from error
        if not data:
            return None
        return data[0]


def byte_source(obj):
    """Get a byte source for ``obj``."""
    if hasattr(obj, 'next_byte'):
        return obj
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return BytesSource(obj)
    if hasattr(obj, 'recv'):
        return SocketSource(obj)
    if hasattr(obj, 'read'):
        return StreamSource(obj)
    if not isinstance(obj, str):
        try:
            return IteratorSource(obj)
        except TypeError:
            pass
    raise TypeError("can't read bytes from {!r}".format(obj))
