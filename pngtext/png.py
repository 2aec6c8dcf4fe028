from io import BytesIO
from struct import unpack
from typing import BinaryIO, Optional
from zlib import crc32 as crc

from . import chunks
from .pngexceptions import (
    ChunkTooLongException,
    CRCMismatchException,
    InvalidChunkStructureException,
    NotPngDataException,
)
from .textual import TextualDataList
from .utils import read_exactly
import requests


"""
This is the main pngtext module. It walks the chunks of a PNG stream
and decodes the textual ones.
"""

_PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'

# The PNG specification limits chunk lengths to 2^31 - 1 bytes
_MAX_CHUNK_LENGTH = (1 << 31) - 1

_LENGTH_SIZE = 4
_TYPE_SIZE = 4
_CRC_SIZE = 4

# Unknown chunks are skipped by blocks of that size
_DISCARD_BLOCK_SIZE = 1 << 16

_END_CHUNK_TYPE = 'IEND'


class ChunkPayload:

    """
    A read-only view over the payload of a single chunk.
    The structure of a png chunk should be as follow:
            [   length (4 bytes, big-endian) |
                type (4 bytes, ascii)        |
                data (length bytes)          |
                crc (4 bytes)                ]

    This view gives access to the data part only, never reads past its end,
    and keeps the chunk's CRC up to date with every byte it reads.
    The crc checksum is calculated with the chunk type and data, but does
    not include the length header.
    """

    def __init__(self, stream: BinaryIO, type_bytes: bytes, length: int) -> None:
        """
        :param stream: the stream, positioned at the start of the chunk's data.
        :param type_bytes: the raw four bytes of the chunk's type, already read from the stream.
        :param length: the length of the chunk's data, as read from its header.
        """
        self.__stream = stream
        self.__remaining = length
        self.__crc = crc(type_bytes)
        self.__type = type_bytes.decode('latin1')

    @property
    def type(self) -> str:
        """
        :returns: the type of this chunk (E.g. tEXt)
        """
        return self.__type

    @property
    def remaining(self) -> int:
        """
        :returns: the number of bytes of the payload that have not been read yet.
        """
        return self.__remaining

    @property
    def crc(self) -> int:
        """
        :returns: the CRC of the chunk type and of the data read so far.
        """
        return self.__crc

    def read(self, size: int = -1) -> bytes:
        """
        :param size: the maximum number of bytes to read. A negative size reads everything left.
        :returns: at most size bytes of the payload, less if the end of the payload is reached.
        :raises EOFError: if the underlying stream ends before the payload does.
        """
        if size < 0 or size > self.__remaining:
            size = self.__remaining
        data = read_exactly(self.__stream, size)
        self.__remaining -= size
        self.__crc = crc(data, self.__crc)
        return data

    def read_byte(self, field: str = 'byte') -> int:
        """
        :param field: name of the value being read, used in error messages.
        :returns: the next byte of the payload.
        :raises InvalidChunkStructureException: if the payload has no byte left.
        """
        if self.__remaining == 0:
            raise InvalidChunkStructureException(
                'failed to read {} in {} chunk: end of chunk reached'.format(field, self.type))
        return self.read(1)[0]

    def read_until_null(self, field: str = 'field') -> bytes:
        """
        Reads a null terminated field.

        :param field: name of the field being read, used in error messages.
        :returns: the bytes of the field, without its null terminator.
        :raises InvalidChunkStructureException: if the payload ends before a null byte is found.
        """
        value = bytearray()
        while True:
            if self.__remaining == 0:
                raise InvalidChunkStructureException(
                    'failed to read {} in {} chunk: missing null terminator'.format(field, self.type))
            byte = self.read(1)
            if byte == b'\x00':
                return bytes(value)
            value += byte

    def discard(self) -> None:
        """
        Reads what is left of the payload without keeping it.
        """
        while self.__remaining > 0:
            self.read(_DISCARD_BLOCK_SIZE)


def parse(stream: BinaryIO, max_chunk_length: Optional[int] = None) -> TextualDataList:
    """
    Reads PNG data from the given stream and decodes its textual chunks (tEXt, zTXt and iTXt).
    The stream is read up to the end of the IEND chunk and is never closed.

    :param stream: a binary stream positioned at the start of the PNG signature.
    :param max_chunk_length: if set, chunks declaring a longer payload are rejected before being read.
    :returns: the decoded textual data, in the order the chunks appear in the stream.
    :raises NotPngDataException: if the stream does not start with the PNG signature.
    :raises CRCMismatchException: if a chunk's CRC does not match its content.
    :raises ChunkTooLongException: if a chunk is longer than allowed.
    :raises InvalidChunkStructureException: if a textual chunk is malformed.
    :raises UnsupportedCompressionMethodException: if a textual chunk uses an unknown compression method.
    :raises EOFError: if the stream ends before the IEND chunk.
    """
    if not read_png_signature(read_exactly(stream, len(_PNG_SIGNATURE))):
        raise NotPngDataException()
    if max_chunk_length is None or max_chunk_length > _MAX_CHUNK_LENGTH:
        max_chunk_length = _MAX_CHUNK_LENGTH

    result = TextualDataList()
    while True:
        length = unpack('>I', read_exactly(stream, _LENGTH_SIZE))[0]
        payload = ChunkPayload(stream, read_exactly(stream, _TYPE_SIZE), length)
        if length > max_chunk_length:
            raise ChunkTooLongException(payload.type, length, max_chunk_length)

        implementation = chunks.implementations.get(payload.type)
        if implementation is not None:
            result.append(implementation.decode(payload))
        # Unknown chunks are skipped but still count towards the CRC
        payload.discard()

        stored = unpack('>I', read_exactly(stream, _CRC_SIZE))[0]
        if stored != payload.crc:
            raise CRCMismatchException(payload.type, stored, payload.crc)

        if payload.type == _END_CHUNK_TYPE:
            return result


_builtin_open = open


def open(filename: str, max_chunk_length: Optional[int] = None) -> TextualDataList:
    """
    :returns: the textual data of a PNG file, reading from the given file name.
        Http and Https links are supported as well.
    """
    if filename.startswith('http://') or filename.startswith('https://'):
        response = requests.get(filename)
        response.raise_for_status()
        return parse(BytesIO(response.content), max_chunk_length=max_chunk_length)
    with _builtin_open(filename, 'rb') as f:
        return parse(f, max_chunk_length=max_chunk_length)


def read_png_signature(data: bytes) -> bool:
    return data[0:8] == _PNG_SIGNATURE
