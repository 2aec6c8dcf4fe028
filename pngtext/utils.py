import zlib

from .pngexceptions import InvalidChunkStructureException


def decompress(data):
    try:
        return zlib.decompress(data)
    except zlib.error as e:
        raise InvalidChunkStructureException("failed to decompress value: {}".format(e)) from e


def read_exactly(stream, size):
    """
    Reads exactly size bytes from a binary stream.

    :param stream: any object with a read(n) method returning bytes.
    :param size: the number of bytes to read.
    :returns: the bytes read.
    :raises EOFError: if the stream ends before size bytes could be read.
    """
    data = bytearray()
    while len(data) < size:
        block = stream.read(size - len(data))
        if not block:
            raise EOFError(
                "unexpected end of stream: expected {} bytes, got {}".format(size, len(data))
            )
        data.extend(block)
    return bytes(data)
