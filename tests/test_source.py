import io
import socket

import pytest

from wsframe import errors
from wsframe.source import (
    byte_source,
    BytesSource,
    IteratorSource,
    SocketSource,
    StreamSource
)


def read_all(source):
    data = bytearray()
    while True:
        byte = source.next_byte()
        if byte is None:
            return bytes(data)
        data.append(byte)


def test_bytes_source():
    source = BytesSource(b'\x00\xffA')
    assert source.remaining == 3
    assert source.next_byte() == 0
    assert source.next_byte() == 255
    assert source.position == 2
    assert source.remaining == 1
    assert source.next_byte() == 65
    assert source.next_byte() is None
    # Stays exhausted
    assert source.next_byte() is None
    assert source.position == 3


def test_bytes_source_repr():
    assert repr(BytesSource(b'foo')) == '<bytes-source 0 of 3 bytes>'


def test_iterator_source_ints():
    source = IteratorSource([0x81, 0x00])
    assert read_all(source) == b'\x81\x00'


def test_iterator_source_chunks():
    source = IteratorSource([b'\x81', b'', b'\x05Hel', bytearray(b'lo')])
    assert read_all(source) == b'\x81\x05Hello'


def test_iterator_source_generator():
    def chunks():
        yield b'foo'
        yield 0x21
    assert read_all(IteratorSource(chunks())) == b'foo!'


def test_iterator_source_bad_int():
    source = IteratorSource([256])
    with pytest.raises(ValueError):
        source.next_byte()


def test_stream_source():
    stream = io.BytesIO(b'Hello')
    source = StreamSource(stream)
    assert source.next_byte() == ord('H')
    # Only consumes what it is asked for
    assert stream.tell() == 1
    assert read_all(source) == b'ello'


def test_stream_source_fail():
    class BrokenStream(object):
        def read(self, count):
            raise OSError('broken')

    source = StreamSource(BrokenStream())
    with pytest.raises(errors.SourceError) as e:
        source.next_byte()
    assert isinstance(e.value.error, OSError)
    assert str(e.value) == 'source fail; broken'


def test_socket_source():
    sock_a, sock_b = socket.socketpair()
    try:
        sock_a.sendall(b'\x89\x00')
        sock_a.shutdown(socket.SHUT_WR)
        source = SocketSource(sock_b)
        assert read_all(source) == b'\x89\x00'
    finally:
        sock_a.close()
        sock_b.close()


def test_socket_source_fail():
    class BrokenSocket(object):
        def recv(self, count):
            raise socket.error('reset')

    with pytest.raises(errors.SourceError):
        SocketSource(BrokenSocket()).next_byte()


def test_byte_source():
    assert isinstance(byte_source(b'foo'), BytesSource)
    assert isinstance(byte_source(bytearray(b'foo')), BytesSource)
    assert isinstance(byte_source(memoryview(b'foo')), BytesSource)
    assert isinstance(byte_source(io.BytesIO(b'foo')), StreamSource)
    assert isinstance(byte_source([1, 2, 3]), IteratorSource)
    sock_a, sock_b = socket.socketpair()
    try:
        assert isinstance(byte_source(sock_a), SocketSource)
    finally:
        sock_a.close()
        sock_b.close()


def test_byte_source_passes_through_sources():
    source = BytesSource(b'foo')
    assert byte_source(source) is source


@pytest.mark.parametrize("obj", [42, None, 'text'])
def test_byte_source_type_error(obj):
    with pytest.raises(TypeError):
        byte_source(obj)
