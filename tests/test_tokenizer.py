import unittest

from tfidf_analyzer.tokenizer import Tokenizer, count_words, tokenize


class TestTokenize(unittest.TestCase):
    def test_lowercases_and_splits(self) -> None:
        self.assertEqual(tokenize("The Cat  SAT"), ["the", "cat", "sat"])

    def test_punctuation_is_deleted_not_replaced(self) -> None:
        self.assertEqual(tokenize("don't stop"), ["dont", "stop"])
        self.assertEqual(tokenize("end. Start,again"), ["end", "startagain"])

    def test_underscore_and_symbols_removed(self) -> None:
        self.assertEqual(tokenize("user_id #42 $5"), ["userid", "42", "5"])

    def test_any_whitespace_separates(self) -> None:
        self.assertEqual(tokenize("a\tb\nc\r\n  d"), ["a", "b", "c", "d"])

    def test_only_punctuation_yields_nothing(self) -> None:
        self.assertEqual(tokenize("!!! ... ???"), [])
        self.assertEqual(tokenize(""), [])

    def test_non_ascii_letters_are_kept(self) -> None:
        self.assertEqual(tokenize("Café naïve!"), ["café", "naïve"])

    def test_deterministic(self) -> None:
        tok = Tokenizer()
        text = "Hello, World! Hello again."
        self.assertEqual(tok.tokenize(text), tok.tokenize(text))
        self.assertEqual(tok.tokenize(text), ["hello", "world", "hello", "again"])


class TestWordCount(unittest.TestCase):
    def test_raw_whitespace_count(self) -> None:
        self.assertEqual(count_words("!!! ... ???"), 3)
        self.assertEqual(count_words("  don't   stop "), 2)
        self.assertEqual(count_words(""), 0)

    def test_differs_from_token_count(self) -> None:
        text = "Hi - there"
        self.assertEqual(count_words(text), 3)
        self.assertEqual(len(tokenize(text)), 2)


class TestNormalizeTerm(unittest.TestCase):
    def test_matches_corpus_normalization(self) -> None:
        tok = Tokenizer()
        self.assertEqual(tok.normalize_term("  Cat "), "cat")
        self.assertEqual(tok.normalize_term("Don't"), "dont")


if __name__ == "__main__":
    unittest.main()
