"""
Tokenizer module.
Turns raw document text into normalized word tokens.
"""
import re


class Tokenizer:
    """Lowercasing tokenizer that deletes punctuation before splitting."""

    def __init__(self):
        # Anything that is neither alphanumeric nor whitespace is deleted,
        # so "don't" becomes "dont" rather than "don t".
        self._strip_pattern = re.compile(r'[^\w\s]|_')
        self._split_pattern = re.compile(r'\s+')

    def normalize(self, text):
        """Lowercase text and delete non-alphanumeric characters."""
        return self._strip_pattern.sub('', text.lower())

    def normalize_term(self, term):
        """Normalize a single query term the same way corpus terms are."""
        return self.normalize(term).strip()

    def tokenize(self, text):
        """Convert text into a list of tokens"""
        tokens = self._split_pattern.split(self.normalize(text))
        return [t for t in tokens if t]


_default_tokenizer = Tokenizer()


def tokenize(text):
    return _default_tokenizer.tokenize(text)


def count_words(text):
    """Whitespace word count of the raw text, used for display only."""
    return len(text.split())
