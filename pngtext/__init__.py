"""
pngtext reads the textual data (tEXt, zTXt and iTXt chunks) stored in PNG files.

    with open('image.png', 'rb') as f:
        data = pngtext.parse(f)
    data.find('Description')
"""

from .png import parse, open, read_png_signature, ChunkPayload
from .textual import TextualData, TextualDataList, compare_keywords
from .pngexceptions import (
    PngTextException,
    InvalidPngStructureException,
    NotPngDataException,
    CRCMismatchException,
    ChunkTooLongException,
    InvalidChunkStructureException,
    UnsupportedCompressionMethodException,
)
