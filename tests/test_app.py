import unittest
from pathlib import Path

from streamlit.testing.v1 import AppTest

from tfidf_analyzer.corpus import CorpusIndex

APP_PATH = str(Path(__file__).resolve().parent.parent / "app.py")


def _app_with_failures():
    corpus = CorpusIndex(verbose=False)
    corpus.add_documents([
        {"name": "a.txt", "raw_text": "the cat sat"},
        {"name": "b.txt", "raw_text": "the dog sat"},
    ])
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.session_state["corpus"] = corpus
    at.session_state["load_failures"] = [("broken.pdf", "not valid utf-8 text")]
    at.run()
    return at


def _button(at, label):
    return next(b for b in at.button if b.label == label)


class TestLoadFailureNotice(unittest.TestCase):
    def test_notice_shown_until_corpus_changes(self) -> None:
        at = _app_with_failures()
        self.assertEqual(len(at.warning), 1)
        self.assertIn("broken.pdf", at.warning[0].value)

        at.run()
        self.assertEqual(len(at.warning), 1)

    def test_remove_clears_notice(self) -> None:
        at = _app_with_failures()
        _button(at, "✕").click().run()
        self.assertEqual(len(at.session_state["corpus"]), 1)
        self.assertEqual(len(at.warning), 0)

    def test_clear_clears_notice(self) -> None:
        at = _app_with_failures()
        _button(at, "Clear corpus").click().run()
        self.assertEqual(len(at.session_state["corpus"]), 0)
        self.assertEqual(len(at.warning), 0)


if __name__ == "__main__":
    unittest.main()
