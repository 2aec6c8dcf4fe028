from .pngexceptions import InvalidChunkStructureException, UnsupportedCompressionMethodException
from .textual import TextualData
from .utils import decompress


"""
This module contains the decoders for the textual chunks of a PNG file.
"""

class ChunkImplementation:

    """
    A superclass for the textual chunk decoders.
    All chunk implementations should extend from this class and
    override the decode method.

    Decoders only ever see the payload of their chunk, through a
    :class:`pngtext.png.ChunkPayload`, and must consume all of it.
    """

    def __init__(self, chunk_type: str):
        """
        :param chunk_type:  The chunk type (tEXt, zTXt, iTXt)

        :raises             TypeError on invalid argument type:
        :raises             ValueError on invalid argument value:
        """
        if type(chunk_type) != str:
            raise TypeError("Invalid type for a chunk type. It should be str")
        if len(chunk_type) != 4:
            raise ValueError("Chunk types must be strings of length 4")
        self.type = chunk_type

    def decode(self, payload) -> TextualData:
        """
        This is to be overridden by every chunk implementation

        :param ChunkPayload payload:    The payload of the chunk to decode

        :return:                        The textual data stored in the chunk
        """
        raise NotImplementedError()

    def _read_compression_method(self, payload, compressed=True):
        code = payload.read_byte('compression method')
        if compressed and code != 0:
            raise UnsupportedCompressionMethodException(code=code)
        return code

    def __repr__(self) -> str:
        return '<{} [{}]>'.format(type(self).__name__, self.type)


class ChunktEXt(ChunkImplementation):
    """tEXt chunks contain text information.
    They are made of a keyword (max 79 bytes),
    and the text itself, separated by a null byte.
    The text is not null terminated, it runs until the end of the chunk.
    Both are latin-1."""

    def __init__(self):
        super(ChunktEXt, self).__init__('tEXt')

    def decode(self, payload):
        keyword = payload.read_until_null('keyword')
        text = payload.read()
        return TextualData(keyword.decode('latin1'), text.decode('latin1'), chunk_type=self.type)


class ChunkzTXt(ChunkImplementation):
    """zTXt chunks hold latin-1 text compressed with zlib:
    a null terminated keyword, a compression method byte (0 is the only one defined)
    and the compressed text."""

    def __init__(self):
        super(ChunkzTXt, self).__init__('zTXt')

    def decode(self, payload):
        keyword = payload.read_until_null('keyword')
        self._read_compression_method(payload)
        text = decompress(payload.read())
        return TextualData(keyword.decode('latin1'), text.decode('latin1'), chunk_type=self.type)


class ChunkiTXt(ChunkImplementation):

    """iTXt chunks hold international text.
    The layout of the payload is:
        keyword (latin-1)               null terminated
        compression flag                1 byte, 0 or 1
        compression method              1 byte, always present
        language tag (latin-1)          null terminated
        translated keyword (utf-8)      null terminated
        text (utf-8)                    until the end of the chunk, compressed if the flag is set
    Bytes that are not valid utf-8 are kept as surrogate escapes."""

    def __init__(self):
        super(ChunkiTXt, self).__init__('iTXt')

    def decode(self, payload):
        keyword = payload.read_until_null('keyword')
        compression_flag = payload.read_byte('compression flag')
        if compression_flag not in (0, 1):
            raise InvalidChunkStructureException(
                'invalid compression flag, it should be 0 or 1 and is {}'.format(compression_flag))
        compressed = compression_flag == 1
        self._read_compression_method(payload, compressed=compressed)
        language = payload.read_until_null('language tag')
        translated_keyword = payload.read_until_null('translated keyword')
        text = payload.read()
        if compressed:
            text = decompress(text)
        return TextualData(
            keyword.decode('latin1'),
            text.decode('utf-8', 'surrogateescape'),
            language_tag=language.decode('latin1'),
            translated_keyword=translated_keyword.decode('utf-8', 'surrogateescape'),
            chunk_type=self.type,
        )


implementations = {
    'tEXt': ChunktEXt(),
    'zTXt': ChunkzTXt(),
    'iTXt': ChunkiTXt(),
}
