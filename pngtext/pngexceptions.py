class PngTextException(Exception):
    """Base class for every error raised while reading textual data."""
    def __init__(self, txt):
        super(PngTextException, self).__init__(txt)

class InvalidPngStructureException(PngTextException):
    """Raised when a png structure is invalid."""
    def __init__(self, txt):
        super(InvalidPngStructureException, self).__init__(txt)

class NotPngDataException(InvalidPngStructureException):
    """Raised when the stream does not start with the PNG signature."""
    def __init__(self):
        super(NotPngDataException, self).__init__("not PNG data")

class CRCMismatchException(InvalidPngStructureException):
    """Raised when a chunk's stored CRC does not match its content."""
    def __init__(self, chunk_type, stored, computed):
        self.chunk_type = chunk_type
        self.stored = stored
        self.computed = computed
        super(CRCMismatchException, self).__init__(
            "CRC doesn't match in {} chunk: stored 0x{:08x}, computed 0x{:08x}".format(
                chunk_type, stored, computed
            )
        )

class ChunkTooLongException(InvalidPngStructureException):
    """Raised when a chunk declares a length above the accepted maximum."""
    def __init__(self, chunk_type, length, max_length):
        self.chunk_type = chunk_type
        self.length = length
        self.max_length = max_length
        super(ChunkTooLongException, self).__init__(
            "{} chunk declares {} bytes, at most {} are accepted".format(
                chunk_type, length, max_length
            )
        )

class InvalidChunkStructureException(PngTextException):
    """Raised when a chunk's internal structure is invalid."""
    def __init__(self, txt):
        super(InvalidChunkStructureException, self).__init__(txt)

class UnsupportedCompressionMethodException(PngTextException):
    """Raised when a chunk uses a compression method other than zlib/deflate"""
    def __init__(self, code):
        self.code = code
        super(UnsupportedCompressionMethodException, self).__init__(
            "unsupported compression type: {}".format(code)
        )
