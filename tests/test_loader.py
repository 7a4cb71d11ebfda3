import tempfile
import unittest
from pathlib import Path

from tfidf_analyzer.corpus import CorpusIndex
from tfidf_analyzer.loader import has_allowed_extension, load_files, load_uploads


class FakeUpload:
    """Stands in for a Streamlit UploadedFile."""

    def __init__(self, name, data):
        self.name = name
        self._data = data

    def getvalue(self):
        return self._data


class TestLoadFiles(unittest.TestCase):
    def test_skips_bad_files_and_keeps_the_rest(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            (root / "a.txt").write_text("the cat sat", encoding="utf-8")
            (root / "b.pdf").write_text("the dog sat", encoding="utf-8")
            (root / "bad.txt").write_bytes(b"\xff\xfe\xfa invalid")
            (root / "empty.txt").write_bytes(b"")
            (root / "image.png").write_bytes(b"png")
            paths = [str(root / n) for n in ["a.txt", "bad.txt", "b.pdf", "empty.txt", "image.png", "missing.txt"]]

            report = load_files(paths, progress=False)

        self.assertEqual([d["name"] for d in report.documents], ["a.txt", "b.pdf"])
        self.assertEqual(report.documents[0]["raw_text"], "the cat sat")
        self.assertEqual(report.failed_names, ["bad.txt", "empty.txt", "image.png", "missing.txt"])

        corpus = CorpusIndex(verbose=False)
        corpus.add_documents(report.documents)
        self.assertEqual(len(corpus), 2)
        self.assertEqual(corpus.document_frequency["sat"], 2)


class TestLoadUploads(unittest.TestCase):
    def test_uploaded_files_and_pairs(self) -> None:
        report = load_uploads([
            FakeUpload("one.txt", "héllo wörld".encode("utf-8")),
            ("two.docs", b"plain text"),
            FakeUpload("three.txt", b"\x80\x81"),
        ])
        self.assertEqual(
            report.documents,
            [
                {"name": "one.txt", "raw_text": "héllo wörld"},
                {"name": "two.docs", "raw_text": "plain text"},
            ],
        )
        self.assertEqual(report.failed_names, ["three.txt"])
        self.assertIn("utf-8", report.failures[0][1])


class TestExtensions(unittest.TestCase):
    def test_allowed_extensions(self) -> None:
        self.assertTrue(has_allowed_extension("notes.TXT"))
        self.assertTrue(has_allowed_extension("paper.pdf"))
        self.assertTrue(has_allowed_extension("draft.docs"))
        self.assertFalse(has_allowed_extension("draft.docx"))
        self.assertFalse(has_allowed_extension("README"))


if __name__ == "__main__":
    unittest.main()
