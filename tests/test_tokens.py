import unittest
from wordcase import tokens

class TestStripDisallowed(unittest.TestCase):
    def test_symbols_become_boundaries(self):
        result = tokens.strip_disallowed('hello@world!')
        self.assertEqual(result, 'hello world ')

    def test_delimiters_are_kept(self):
        result = tokens.strip_disallowed('snake_case-text here')
        self.assertEqual(result, 'snake_case-text here')

    def test_non_ascii_letters_are_dropped(self):
        result = tokens.strip_disallowed('café')
        self.assertEqual(result, 'caf ')

class TestSplitCompound(unittest.TestCase):
    def test_lower_to_upper(self):
        result = tokens.split_compound('helloBigWorld')
        self.assertEqual(result, 'hello Big World')

    def test_uppercase_run_is_not_split(self):
        result = tokens.split_compound('HTTPServer')
        self.assertEqual(result, 'HTTPServer')

    def test_digit_before_upper_is_not_split(self):
        result = tokens.split_compound('v2Api')
        self.assertEqual(result, 'v2Api')

class TestSplitWords(unittest.TestCase):
    def test_mixed_delimiter_runs(self):
        result = tokens.split_words('-hello__big - world-')
        self.assertEqual(result, ['hello', 'big', 'world'])

    def test_only_delimiters(self):
        result = tokens.split_words(' -_ ')
        self.assertEqual(result, [])

class TestTokenize(unittest.TestCase):
    def test_spaces(self):
        result = tokens.tokenize('hello world')
        self.assertEqual(result, ['hello', 'world'])

    def test_mixed_styles(self):
        result = tokens.tokenize('Mixed-Style_String here')
        self.assertEqual(result, ['mixed', 'style', 'string', 'here'])

    def test_pascal_case(self):
        result = tokens.tokenize('HelloWorld')
        self.assertEqual(result, ['hello', 'world'])

    def test_uppercase_run(self):
        result = tokens.tokenize('HTTPServer')
        self.assertEqual(result, ['httpserver'])

    def test_digits_are_kept(self):
        result = tokens.tokenize('version 2 release3')
        self.assertEqual(result, ['version', '2', 'release3'])

    def test_surrounding_whitespace(self):
        result = tokens.tokenize('  hello   world  ')
        self.assertEqual(result, ['hello', 'world'])

    def test_empty_inputs(self):
        for text in ['', '   ', '\t\n', '@#$', '---', '_ _']:
            with self.subTest(text=text):
                self.assertEqual(tokens.tokenize(text), [])

    def test_tokens_are_clean(self):
        result = tokens.tokenize(' --Some_weird   INPUT!!withCamel-and.dots ')
        self.assertEqual(result, ['some', 'weird', 'input', 'with', 'camel', 'and', 'dots'])
        for token in result:
            self.assertTrue(token.isalnum())
            self.assertEqual(token, token.lower())

    def test_rejects_non_string(self):
        for value in [123, None, b'hello', ['hello']]:
            with self.subTest(value=value):
                with self.assertRaises(TypeError):
                    tokens.tokenize(value)

class TestWordString(unittest.TestCase):
    def test_tokens(self):
        words = tokens.WordString('parseXML file')
        self.assertEqual(words.tokens, ['parse', 'xml', 'file'])
        self.assertEqual(words.normalized_string, 'parse xml file')
        self.assertEqual(len(words), 3)
        self.assertFalse(words.is_empty)

    def test_empty(self):
        words = tokens.WordString('!!!')
        self.assertTrue(words.is_empty)
        self.assertEqual(words.normalized_string, '')

    def test_rejects_non_string(self):
        with self.assertRaises(TypeError):
            tokens.WordString(42)
