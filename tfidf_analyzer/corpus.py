"""
Corpus index module.
Holds the loaded documents and their TF-IDF scores.

structure:
- documents: {doc_id: Document}, insertion order
- vocabulary: set of every distinct term in the corpus
- document_frequency: {term: number of documents containing term}

Every membership change rebuilds all derived statistics from scratch.
"""
import math
from collections import Counter
from collections.abc import Mapping

from .config import ELLIPSIS, PREVIEW_CHARS
from .errors import IngestionError
from .tokenizer import Tokenizer, count_words


class Document:
    """
    A single loaded document.

    term_frequencies and scores are filled in by CorpusIndex.recompute().
    Both are empty until then, and both stay empty for a document with
    no tokens.
    """

    def __init__(self, doc_id, name, raw_text):
        self.id = doc_id
        self.name = name
        self.raw_text = raw_text
        self.word_count = count_words(raw_text)
        self.term_frequencies = {}
        self.scores = {}
        self.length = 0  # normalized token count

    def __repr__(self):
        return f"Document(id={self.id!r}, name={self.name!r}, words={self.word_count})"


class CorpusIndex:
    """
    In-memory TF-IDF index over a small document collection.

    TF(t, d) = count(t, d) / |d|
    IDF(t)   = ln(N / max(1, df(t)))
    score    = TF * IDF

    Not safe for concurrent writers: callers that ingest from several
    threads must serialize add_documents / remove_document / clear.
    """

    def __init__(self, tokenizer=None, verbose=True):
        self.tokenizer = tokenizer or Tokenizer()
        self.verbose = verbose
        self.documents = {}
        self.vocabulary = set()
        self.document_frequency = {}
        self._next_id = 1

    def _log(self, message):
        if self.verbose:
            print(f"[Corpus] {message}")

    def __len__(self):
        return len(self.documents)

    def __iter__(self):
        return iter(list(self.documents.values()))

    # ------------------------------------------------------------------
    # membership
    # ------------------------------------------------------------------

    def add_documents(self, docs):
        """
        Add a batch of documents and rebuild the index.

        Args:
            docs: iterable of mappings with 'name' and 'raw_text' keys.
                  raw_text must already be decoded text.

        Returns: list of assigned document ids, in batch order.

        Malformed entries are skipped and the rest of the batch is still
        added. If any were skipped, IngestionError is raised after the
        rebuild; its added_ids holds the ids of the entries that went in.
        """
        valid = []
        failures = []
        for position, doc in enumerate(docs):
            if not isinstance(doc, Mapping):
                failures.append((f"#{position}", "expected a mapping with name and raw_text"))
                continue
            name = doc.get("name")
            raw_text = doc.get("raw_text")
            label = name if isinstance(name, str) else f"#{position}"
            if not isinstance(name, str):
                failures.append((label, "name is not a string"))
            elif not isinstance(raw_text, str):
                failures.append((label, f"raw_text is {type(raw_text).__name__}, not decoded text"))
            else:
                valid.append(doc)

        new_ids = []
        for doc in valid:
            doc_id = self._next_id
            self._next_id += 1
            self.documents[doc_id] = Document(doc_id, doc["name"], doc["raw_text"])
            new_ids.append(doc_id)

        self._log(f"Added {len(new_ids)} document(s)")
        for name, reason in failures:
            self._log(f"Skipped {name}: {reason}")
        if new_ids:
            self.recompute()
        if failures:
            raise IngestionError(failures, added_ids=new_ids)
        return new_ids

    def remove_document(self, doc_id):
        """Remove one document and rebuild. Unknown ids raise KeyError."""
        if doc_id not in self.documents:
            raise KeyError(doc_id)
        removed = self.documents.pop(doc_id)
        self._log(f"Removed document {doc_id} ({removed.name})")
        self.recompute()

    def clear(self):
        """Drop every document. Ids already handed out are not reused."""
        self.documents = {}
        self._log("Cleared corpus")
        self.recompute()

    # ------------------------------------------------------------------
    # index construction
    # ------------------------------------------------------------------

    def recompute(self):
        """Rebuild term frequencies, document frequencies and scores."""
        # Derived state is assigned only once it is complete.
        counts = {}
        lengths = {}
        for doc_id, doc in self.documents.items():
            tokens = self.tokenizer.tokenize(doc.raw_text)
            counts[doc_id] = dict(Counter(tokens))
            lengths[doc_id] = len(tokens)

        total_docs = len(self.documents)
        vocabulary = set()
        document_frequency = {}
        scores = {doc_id: {} for doc_id in self.documents}

        if total_docs > 0:
            for term_counts in counts.values():
                vocabulary.update(term_counts)
                # exact token-set membership, not substring search
                for term in term_counts:
                    document_frequency[term] = document_frequency.get(term, 0) + 1

            idf = {
                term: math.log(total_docs / max(1, df))
                for term, df in document_frequency.items()
            }

            for doc_id, term_counts in counts.items():
                doc_len = lengths[doc_id]
                if doc_len == 0:
                    continue
                scores[doc_id] = {
                    term: (count / doc_len) * idf[term]
                    for term, count in term_counts.items()
                }

        for doc_id, doc in self.documents.items():
            doc.term_frequencies = counts[doc_id]
            doc.scores = scores[doc_id]
            doc.length = lengths[doc_id]
        self.vocabulary = vocabulary
        self.document_frequency = document_frequency

        self._log(f"Recomputed {total_docs} docs, {len(vocabulary)} unique terms")

    # ------------------------------------------------------------------
    # queries
    # ------------------------------------------------------------------

    def normalize(self, term):
        return self.tokenizer.normalize_term(term)

    def get_document(self, doc_id):
        return self.documents.get(doc_id)

    def list_documents(self):
        """Return [{'id', 'name', 'word_count'}, ...] in insertion order."""
        return [
            {'id': doc.id, 'name': doc.name, 'word_count': doc.word_count}
            for doc in self.documents.values()
        ]

    def idf(self, term):
        """IDF of a term, 0.0 if it is not in the vocabulary."""
        term = self.normalize(term)
        df = self.document_frequency.get(term, 0)
        if df == 0:
            return 0.0
        return math.log(len(self.documents) / max(1, df))

    def term_count(self, term, doc_id):
        doc = self.documents.get(doc_id)
        if doc is None:
            return 0
        return doc.term_frequencies.get(self.normalize(term), 0)

    def term_frequency(self, term, doc_id):
        """Raw TF: occurrences of term over the document's token count."""
        doc = self.documents.get(doc_id)
        if doc is None or doc.length == 0:
            return 0.0
        return doc.term_frequencies.get(self.normalize(term), 0) / doc.length

    def term_score(self, term, doc_id):
        """TF-IDF score of term in a document; 0.0 when the term is absent."""
        doc = self.documents.get(doc_id)
        if doc is None:
            return 0.0
        return doc.scores.get(self.normalize(term), 0.0)

    def top_terms(self, doc_id, k=10):
        """
        Highest scoring terms of a document.

        Returns: [(term, score), ...] by score desc, ties by term asc.
        """
        doc = self.documents.get(doc_id)
        if doc is None or k <= 0:
            return []
        ranked = sorted(doc.scores.items(), key=lambda x: (-x[1], x[0]))
        return ranked[:k]

    def max_score(self, term):
        """Largest score of term across all documents (0.0 if none)."""
        term = self.normalize(term)
        return max(
            (doc.scores.get(term, 0.0) for doc in self.documents.values()),
            default=0.0,
        )

    def term_report(self, term):
        """Per-document breakdown of a single term.

        Returns one row per document, in insertion order:
            {
              'id': int,
              'name': str,
              'count': int,
              'tf': float,
              'score': float,
              'relative': float   # score / max_score(term)
            }
        """
        term = self.normalize(term)
        best = self.max_score(term)
        rows = []
        for doc in self.documents.values():
            count = doc.term_frequencies.get(term, 0)
            score = doc.scores.get(term, 0.0)
            rows.append({
                'id': doc.id,
                'name': doc.name,
                'count': count,
                'tf': count / doc.length if doc.length else 0.0,
                'score': score,
                'relative': score / best if best > 0 else 0.0,
            })
        return rows

    def document_preview(self, doc_id, max_chars=PREVIEW_CHARS):
        """First max_chars characters of the raw text, with an ellipsis if cut."""
        doc = self.documents.get(doc_id)
        if doc is None:
            return ""
        text = doc.raw_text
        max_chars = max(0, max_chars)
        if len(text) > max_chars:
            return text[:max_chars] + ELLIPSIS
        return text

    def stats(self):
        total_docs = len(self.documents)
        total_len = sum(doc.length for doc in self.documents.values())
        return {
            'documents': total_docs,
            'vocabulary': len(self.vocabulary),
            'avg_doc_len': total_len / total_docs if total_docs > 0 else 0.0,
        }
