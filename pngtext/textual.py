from typing import Optional


"""
Containers for the textual data found in a PNG file.
See the PNG documentation: https://www.w3.org/TR/PNG/#11textinfo
"""

_TextualData = "TextualData"
_TextualDataList = "TextualDataList"


class TextualData:

    """
    The content of one textual chunk (tEXt, zTXt or iTXt).
    Instances are read-only once created.
    The language tag and the translated keyword only exist in iTXt chunks,
    and are empty strings for the other types.
    """

    __slots__ = ('_keyword', '_text', '_language_tag', '_translated_keyword', '_chunk_type')

    def __init__(self, keyword: str, text: str, language_tag: str = '',
                 translated_keyword: str = '', chunk_type: str = 'tEXt') -> None:
        """
        :param keyword: the keyword of the textual data.
        :param text: the text associated with the keyword.
        :param language_tag: the human language used by the translated keyword and the text.
        :param translated_keyword: a translation of the keyword in the language of the language tag.
        :param chunk_type: the type of the chunk this data was read from.
        """
        self._keyword = keyword
        self._text = text
        self._language_tag = language_tag
        self._translated_keyword = translated_keyword
        self._chunk_type = chunk_type

    @property
    def keyword(self) -> str:
        """
        :returns: the keyword of this textual data (E.g. Title, Description).
        """
        return self._keyword

    @property
    def text(self) -> str:
        """
        :returns: the text associated with the keyword.
        """
        return self._text

    @property
    def language_tag(self) -> str:
        """
        :returns: the language tag of an iTXt chunk, or an empty string.
        """
        return self._language_tag

    @property
    def translated_keyword(self) -> str:
        """
        :returns: the translated keyword of an iTXt chunk, or an empty string.
        """
        return self._translated_keyword

    @property
    def chunk_type(self) -> str:
        """
        :returns: the type of the chunk this data was read from (E.g. zTXt).
        """
        return self._chunk_type

    def __eq__(self, other) -> bool:
        if not isinstance(other, TextualData):
            return NotImplemented
        return (self._keyword, self._text, self._language_tag,
                self._translated_keyword, self._chunk_type) == (
            other._keyword, other._text, other._language_tag,
            other._translated_keyword, other._chunk_type)

    def __hash__(self) -> int:
        return hash((self._keyword, self._text, self._language_tag,
                     self._translated_keyword, self._chunk_type))

    def __lt__(self, other: _TextualData) -> bool:
        if not isinstance(other, TextualData):
            return NotImplemented
        return self._keyword < other._keyword

    def __repr__(self) -> str:
        return 'TextualData[{}]({!r}: {!r})'.format(self._chunk_type, self._keyword, self._text)


def compare_keywords(a: TextualData, b: TextualData) -> int:
    """
    Orders two textual data by keyword.
    Can be used with functools.cmp_to_key.

    :returns: -1 if a sorts before b, 1 if it sorts after, 0 if both keywords are equal.
    """
    if a.keyword < b.keyword:
        return -1
    elif a.keyword > b.keyword:
        return 1
    return 0


class TextualDataList(list):

    """
    A list of :class:`TextualData`, in the order their chunks appear in the file.
    Several entries may share the same keyword.
    """

    def find(self, keyword: str) -> Optional[TextualData]:
        """
        :param keyword: the keyword to look for.
        :returns: the first textual data with the given keyword, or None if there is none.
        """
        for data in self:
            if data.keyword == keyword:
                return data
        return None

    def find_all(self, keyword: str) -> _TextualDataList:
        """
        :param keyword: the keyword to look for.
        :returns: all the textual data with the given keyword, in file order.
        """
        return TextualDataList(filter(lambda d: d.keyword == keyword, self))

    def keywords(self) -> list[str]:
        return [data.keyword for data in self]

    def less(self, i: int, j: int) -> bool:
        """
        :returns: whether the element at index i must sort before the element at index j.
        """
        return compare_keywords(self[i], self[j]) < 0

    def swap(self, i: int, j: int) -> None:
        self[i], self[j] = self[j], self[i]

    def sorted_by_keyword(self) -> _TextualDataList:
        """
        :returns: a new list sorted by keyword. Entries with equal keywords keep their relative order.
        """
        return TextualDataList(sorted(self, key=lambda d: d.keyword))
