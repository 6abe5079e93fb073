"""Unit tests for word list parsing and lookup"""

import os
import tempfile
import unittest

from ..dictionary import WordDictionary, as_dictionary, load_word_list, parse_word_list
from ..errors import DictionaryFormatError


class TestParseWordList(unittest.TestCase):
    def test_parse_rows(self):
        dictionary = parse_word_list(["cat,2", "", "  Dog , 3 "])
        self.assertEqual(dict(dictionary), {'CAT': 2, 'DOG': 3})

    def test_malformed_rows(self):
        bad_rows = ["cat", "cat,2,3", ",3", "cat,x", "cat,0", "cat,-1"]
        for row in bad_rows:
            with self.subTest(row=row):
                with self.assertRaises(DictionaryFormatError) as ctx:
                    parse_word_list(["dog,1", row])
                self.assertEqual(ctx.exception.line_number, 2)
                self.assertIn("line 2", str(ctx.exception))

    def test_empty_list(self):
        with self.assertRaises(DictionaryFormatError):
            parse_word_list(["", "   "])

    def test_format_error_is_value_error(self):
        with self.assertRaises(ValueError):
            parse_word_list(["cat"])

    def test_load_word_list(self):
        with tempfile.NamedTemporaryFile('w', suffix='.txt', delete=False, encoding='utf-8') as f:
            f.write("cat,1\ncats,2\n")
            path = f.name
        try:
            dictionary = load_word_list(path)
        finally:
            os.remove(path)
        self.assertEqual(len(dictionary), 2)
        self.assertEqual(dictionary['CATS'], 2)


class TestWordDictionary(unittest.TestCase):
    def setUp(self):
        self.dictionary = WordDictionary({'cat': 1, 'Cats': 3})

    def test_case_insensitive_lookup(self):
        self.assertIn('CAT', self.dictionary)
        self.assertIn('cats', self.dictionary)
        self.assertEqual(self.dictionary['cAtS'], 3)
        self.assertTrue(self.dictionary.is_valid('Cat'))
        self.assertFalse(self.dictionary.is_valid('DOG'))

    def test_multiplier(self):
        self.assertEqual(self.dictionary.multiplier('cats'), 3)
        self.assertIsNone(self.dictionary.multiplier('dog'))
        self.assertEqual(self.dictionary.multiplier('dog', 1), 1)

    def test_multiplier_must_be_positive(self):
        for value in (0, -2, 1.5, True):
            with self.subTest(value=value):
                with self.assertRaises(DictionaryFormatError):
                    WordDictionary({'cat': value})

    def test_as_dictionary(self):
        self.assertIs(as_dictionary(self.dictionary), self.dictionary)
        self.assertIn('cat', as_dictionary({'CAT': 1}))


if __name__ == '__main__':
    unittest.main()
