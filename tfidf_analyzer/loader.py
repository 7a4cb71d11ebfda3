"""
Document loader module.
Reads files or uploaded bytes and decodes them into text for the corpus.

A file that cannot be read or decoded is skipped; the rest of the batch
is still loaded and the skipped names are reported back to the caller.
"""
import os

from tqdm import tqdm

from .config import ALLOWED_EXTENSIONS, ENCODING


class LoadReport:
    """
    Result of loading a batch.

    - documents: [{'name': str, 'raw_text': str}, ...] ready for
      CorpusIndex.add_documents
    - failures: [(name, reason), ...]
    """

    def __init__(self):
        self.documents = []
        self.failures = []

    @property
    def failed_names(self):
        return [name for name, _ in self.failures]

    def __repr__(self):
        return f"LoadReport(loaded={len(self.documents)}, failed={len(self.failures)})"


def has_allowed_extension(name, allowed=ALLOWED_EXTENSIONS):
    ext = os.path.splitext(name)[1].lower().lstrip(".")
    return ext in allowed


def decode_bytes(data, encoding=ENCODING):
    """Decode raw bytes; raises UnicodeDecodeError on invalid input."""
    return data.decode(encoding)


def _skip(report, name, reason):
    print(f"[Loader] Skipped {name}: {reason}")
    report.failures.append((name, reason))


def load_files(paths, encoding=ENCODING, allowed=ALLOWED_EXTENSIONS, progress=True):
    """
    Load documents from the filesystem.

    Args:
        paths: file paths to read
        encoding: text encoding of the files
        allowed: accepted file extensions (without the dot)
        progress: show a tqdm progress bar

    Returns: LoadReport
    """
    paths = list(paths)
    report = LoadReport()
    print(f"[Loader] Loading {len(paths)} file(s)")

    for path in tqdm(paths, desc="Loading", disable=not progress):
        name = os.path.basename(path)
        if not has_allowed_extension(name, allowed):
            _skip(report, name, f"unsupported file type (allowed: {', '.join(allowed)})")
            continue
        try:
            with open(path, 'rb') as f:
                data = f.read()
        except OSError as e:
            _skip(report, name, f"unreadable ({e.strerror or e})")
            continue
        _add_decoded(report, name, data, encoding)

    print(f"[Loader] Done. {len(report.documents)} loaded, {len(report.failures)} skipped")
    return report


def load_uploads(uploads, encoding=ENCODING, allowed=ALLOWED_EXTENSIONS):
    """
    Load documents from in-memory uploads.

    Args:
        uploads: objects with .name and .getvalue() (Streamlit UploadedFile),
                 or (name, bytes) pairs

    Returns: LoadReport
    """
    report = LoadReport()
    for upload in uploads:
        if isinstance(upload, tuple):
            name, data = upload
        else:
            name, data = upload.name, upload.getvalue()
        if not has_allowed_extension(name, allowed):
            _skip(report, name, f"unsupported file type (allowed: {', '.join(allowed)})")
            continue
        _add_decoded(report, name, data, encoding)

    print(f"[Loader] Uploads: {len(report.documents)} loaded, {len(report.failures)} skipped")
    return report


def _add_decoded(report, name, data, encoding):
    if not data:
        _skip(report, name, "empty file")
        return
    try:
        text = decode_bytes(data, encoding)
    except UnicodeDecodeError as e:
        _skip(report, name, f"not valid {encoding} text ({e.reason})")
        return
    report.documents.append({'name': name, 'raw_text': text})
