"""
Simple terminal UI for the TF-IDF analyzer.
"""
import argparse

from tfidf_analyzer.config import PREVIEW_CHARS, TOP_TERMS_K
from tfidf_analyzer.corpus import CorpusIndex
from tfidf_analyzer.errors import IngestionError
from tfidf_analyzer.loader import load_files

HELP = """Commands:
  <word>          TF-IDF analysis of a word across documents
  :docs           list loaded documents
  :top <id>       top terms of a document
  :show <id>      document details and preview
  :rm <id>        remove a document
  :load PATH...   load more files
  exit / quit     leave (an empty line works too)"""


def load_into(corpus, paths):
    report = load_files(paths)
    failures = list(report.failures)
    if report.documents:
        try:
            corpus.add_documents(report.documents)
        except IngestionError as exc:
            failures.extend(exc.failures)
    if failures:
        print(f"[CLI] Could not load {len(failures)} file(s):")
        for name, reason in failures:
            print(f"  - {name}: {reason}")


def print_documents(corpus):
    print(f"\nDocuments ({len(corpus)}):")
    for doc in corpus.list_documents():
        print(f"  [{doc['id']}] {doc['name']} ({doc['word_count']} words)")


def print_term(corpus, term):
    rows = corpus.term_report(term)
    normalized = corpus.normalize(term)
    print(f'\nTF-IDF Analysis for "{normalized}"')
    if corpus.max_score(normalized) == 0:
        print(f'No data available for term "{normalized}"')
    for row in rows:
        bar = "█" * int(round(30 * row["relative"]))
        print(
            f"  {row['name'][:24]:<24} | tf={row['tf'] * 100:6.2f}% "
            f"| {row['score']:.4f} {bar}"
        )


def print_top(corpus, doc_id, k):
    doc = corpus.get_document(doc_id)
    if doc is None:
        print(f"No document with id {doc_id}")
        return
    print(f"\nTop TF-IDF terms for {doc.name}:")
    for term, score in corpus.top_terms(doc_id, k):
        print(f"  {term:<20} {score:.4f}")


def print_details(corpus, doc_id, k, preview_chars):
    doc = corpus.get_document(doc_id)
    if doc is None:
        print(f"No document with id {doc_id}")
        return
    print(f"\n{doc.name}")
    print(f"Word Count: {doc.word_count}")
    print_top(corpus, doc_id, k)
    print("\nPreview:")
    print(corpus.document_preview(doc_id, preview_chars))


def _non_negative_int(arg):
    value = int(arg)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def _parse_id(arg):
    try:
        return int(arg)
    except ValueError:
        print(f"Not a document id: {arg!r}")
        return None


def main():
    parser = argparse.ArgumentParser(description="Terminal TF-IDF document analyzer")
    parser.add_argument("files", nargs="*", help="Text files to analyze")
    parser.add_argument("--top-k", type=_non_negative_int, default=TOP_TERMS_K, help="Number of top terms to show")
    parser.add_argument("--preview-chars", type=_non_negative_int, default=PREVIEW_CHARS, help="Preview length")
    args = parser.parse_args()

    corpus = CorpusIndex()
    if args.files:
        load_into(corpus, args.files)
    print_documents(corpus)

    print("\nEnter a word to analyze (empty line or 'exit' to quit, ':help' for commands).")
    while True:
        try:
            line = input("\nTerm> ").strip()
        except EOFError:
            break

        if not line or line.lower() in {"exit", "quit"}:
            break

        if not line.startswith(":"):
            if not corpus.documents:
                print("No documents loaded. Use :load PATH to add some.")
                continue
            print_term(corpus, line)
            continue

        command, *rest = line.split()
        if command == ":help":
            print(HELP)
        elif command == ":docs":
            print_documents(corpus)
        elif command == ":load" and rest:
            load_into(corpus, rest)
            print_documents(corpus)
        elif command in {":top", ":show", ":rm"} and len(rest) == 1:
            doc_id = _parse_id(rest[0])
            if doc_id is None:
                continue
            if command == ":top":
                print_top(corpus, doc_id, args.top_k)
            elif command == ":show":
                print_details(corpus, doc_id, args.top_k, args.preview_chars)
            else:
                try:
                    corpus.remove_document(doc_id)
                except KeyError:
                    print(f"No document with id {doc_id}")
                    continue
                print_documents(corpus)
        else:
            print(HELP)


if __name__ == "__main__":
    main()
