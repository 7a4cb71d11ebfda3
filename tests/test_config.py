import os
import unittest
from unittest import mock

from tfidf_analyzer.config import _env_int


class TestEnvInt(unittest.TestCase):
    def test_unset_and_blank_use_default(self) -> None:
        with mock.patch.dict(os.environ, {"TFIDF_TEST_VALUE": "  "}):
            self.assertEqual(_env_int("TFIDF_TEST_VALUE", 7), 7)
        self.assertEqual(_env_int("TFIDF_TEST_UNSET_VALUE", 7), 7)

    def test_valid_value(self) -> None:
        with mock.patch.dict(os.environ, {"TFIDF_TEST_VALUE": "42"}):
            self.assertEqual(_env_int("TFIDF_TEST_VALUE", 7), 42)

    def test_invalid_and_negative_fall_back(self) -> None:
        with mock.patch.dict(os.environ, {"TFIDF_TEST_VALUE": "abc"}):
            self.assertEqual(_env_int("TFIDF_TEST_VALUE", 7), 7)
        with mock.patch.dict(os.environ, {"TFIDF_TEST_VALUE": "-3"}):
            self.assertEqual(_env_int("TFIDF_TEST_VALUE", 7), 7)


if __name__ == "__main__":
    unittest.main()
