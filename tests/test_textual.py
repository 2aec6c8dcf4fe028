import unittest
from functools import cmp_to_key
from itertools import product

from pngtext import TextualData, TextualDataList, compare_keywords


def sample_list():
    return TextualDataList([
        TextualData("keyword-1", "text-1"),
        TextualData("keyword-2", "text-2"),
        TextualData("keyword-3", "text-3"),
    ])


class TextualDataTests(unittest.TestCase):

    def test_defaults(self):
        data = TextualData("Title", "A title")
        self.assertEqual(data.language_tag, "")
        self.assertEqual(data.translated_keyword, "")
        self.assertEqual(data.chunk_type, "tEXt")

    def test_read_only(self):
        data = TextualData("Title", "A title")
        with self.assertRaises(AttributeError):
            data.text = "Another title"
        with self.assertRaises(AttributeError):
            data.comment = "nope"

    def test_equality(self):
        self.assertEqual(TextualData("a", "b"), TextualData("a", "b"))
        self.assertNotEqual(TextualData("a", "b"), TextualData("a", "b", chunk_type="zTXt"))
        self.assertEqual(len({TextualData("a", "b"), TextualData("a", "b")}), 1)


class TextualDataListTests(unittest.TestCase):

    def test_find(self):
        testlist = sample_list()
        self.assertIs(testlist.find("keyword-2"), testlist[1])
        self.assertIsNone(testlist.find("keyword-10"))

    def test_find_returns_first_match(self):
        testlist = TextualDataList([TextualData("a", "first"), TextualData("b", ""), TextualData("a", "second")])
        self.assertEqual(testlist.find("a").text, "first")
        self.assertEqual([d.text for d in testlist.find_all("a")], ["first", "second"])
        self.assertIsInstance(testlist.find_all("a"), TextualDataList)
        self.assertEqual(testlist.find_all("c"), [])

    def test_find_in_empty_list(self):
        self.assertIsNone(TextualDataList().find("keyword"))

    def test_keywords(self):
        self.assertEqual(sample_list().keywords(), ["keyword-1", "keyword-2", "keyword-3"])

    def test_less(self):
        testlist = sample_list()
        for i, j in product(range(len(testlist)), repeat=2):
            self.assertEqual(testlist.less(i, j), testlist[i].keyword < testlist[j].keyword)

    def test_ordering_is_consistent(self):
        a, b, c = TextualData("a", ""), TextualData("b", ""), TextualData("c", "")
        self.assertEqual(compare_keywords(a, b), -1)
        self.assertEqual(compare_keywords(b, a), 1)
        self.assertEqual(compare_keywords(b, c), -1)
        self.assertEqual(compare_keywords(a, c), -1)
        self.assertEqual(compare_keywords(c, a), 1)
        self.assertEqual(compare_keywords(a, TextualData("a", "other")), 0)
        self.assertTrue(a < b < c)
        self.assertFalse(b < a)

    def test_swap(self):
        testlist = sample_list()
        expect = [testlist[2], testlist[1], testlist[0]]
        testlist.swap(0, 2)
        self.assertEqual(testlist, expect)

    def test_sorted_by_keyword(self):
        testlist = TextualDataList([
            TextualData("b", "1"), TextualData("a", "2"), TextualData("b", "3"), TextualData("A", "4"),
        ])
        result = testlist.sorted_by_keyword()
        self.assertIsInstance(result, TextualDataList)
        self.assertEqual([d.text for d in result], ["4", "2", "1", "3"])
        self.assertEqual(testlist.keywords(), ["b", "a", "b", "A"])

    def test_external_sort(self):
        testlist = sample_list()
        testlist.reverse()
        self.assertEqual(sorted(testlist), sample_list())
        self.assertEqual(sorted(testlist, key=cmp_to_key(compare_keywords)), sample_list())


if __name__ == '__main__':
    unittest.main()
