"""TF-IDF document analyzer."""

from .corpus import CorpusIndex, Document
from .errors import IngestionError
from .loader import LoadReport, load_files, load_uploads
from .tokenizer import Tokenizer, count_words, tokenize

__all__ = [
    "CorpusIndex",
    "Document",
    "IngestionError",
    "LoadReport",
    "load_files",
    "load_uploads",
    "Tokenizer",
    "count_words",
    "tokenize",
]
