"""
TF-IDF document analyzer UI.
Run with: streamlit run app.py
"""
import html

import streamlit as st

from tfidf_analyzer.config import ALLOWED_EXTENSIONS, PREVIEW_CHARS, TOP_TERMS_K
from tfidf_analyzer.corpus import CorpusIndex
from tfidf_analyzer.errors import IngestionError
from tfidf_analyzer.loader import load_uploads

st.set_page_config(
    page_title="TF-IDF Document Analyzer",
    page_icon="T",
    layout="wide",
)

st.markdown(
    """
<style>
    :root {
        --ink: #1f2a37;
        --muted: #6b7280;
        --accent: #2563eb;
        --card: #ffffff;
        --shadow: 0 10px 30px rgba(30, 41, 59, 0.08);
    }

    .term-card { padding: 14px 18px; border: 1px solid rgba(31,31,31,0.08); border-radius: 14px; background: var(--card); box-shadow: var(--shadow); margin-bottom: 12px; }
    .term-doc { margin: 0; font-size: 16px; font-weight: 600; color: var(--ink); }
    .term-meta { display: flex; gap: 10px; align-items: center; margin: 6px 0; font-size: 13px; color: var(--muted); }
    .score-pill { background: rgba(37, 99, 235, 0.12); color: #1e3a8a; padding: 2px 10px; border-radius: 999px; font-size: 12px; font-weight: 600; }
    .score-bar { width: 100%; height: 20px; background: rgba(148, 163, 184, 0.2); border-radius: 4px; overflow: hidden; }
    .score-bar-fill { height: 100%; border-radius: 4px; }
    .stat-chip { background: rgba(37, 99, 235, 0.08); color: var(--muted); border-radius: 999px; padding: 6px 12px; font-size: 13px; margin-right: 8px; }

    #MainMenu {visibility: hidden;}
    footer {visibility: hidden;}
</style>
""",
    unsafe_allow_html=True,
)

BAR_COLORS = ["#3b82f6", "#ef4444", "#22c55e", "#f97316", "#a855f7", "#14b8a6", "#ec4899", "#f59e0b"]

ABOUT_TFIDF = """
**TF-IDF** (Term Frequency-Inverse Document Frequency) is a numerical statistic that
reflects how important a word is to a document in a collection.

- **Term Frequency (TF)**: the number of times a term appears in a document divided by
  the total number of terms in the document.
- **Inverse Document Frequency (IDF)**: the natural logarithm of the number of documents
  divided by the number of documents containing the term.
- **TF-IDF = TF x IDF**: high for terms that are frequent in one document but rare
  across the collection. A term found in every document scores 0.
"""


def get_corpus():
    """One corpus per browser session."""
    if "corpus" not in st.session_state:
        print("[App] Creating corpus for new session")
        st.session_state.corpus = CorpusIndex()
    return st.session_state.corpus


def ingest(corpus, uploads):
    report = load_uploads(uploads)
    added = []
    failures = list(report.failures)
    if report.documents:
        try:
            added = corpus.add_documents(report.documents)
        except IngestionError as exc:
            added = exc.added_ids
            failures.extend(exc.failures)
    st.session_state.load_failures = failures
    return added


def render_sidebar(corpus):
    with st.sidebar:
        st.header(f"Documents ({len(corpus)})")

        stats = corpus.stats()
        st.markdown(
            f"<span class='stat-chip'>Vocabulary: {stats['vocabulary']:,}</span>"
            f"<span class='stat-chip'>Avg tokens: {stats['avg_doc_len']:.1f}</span>",
            unsafe_allow_html=True,
        )
        st.markdown("---")

        for doc in corpus.list_documents():
            col1, col2 = st.columns([5, 1])
            with col1:
                st.markdown(f"**{html.escape(doc['name'])}**")
                st.caption(f"{doc['word_count']} words")
            with col2:
                if st.button("✕", key=f"remove_{doc['id']}", help="Remove document"):
                    corpus.remove_document(doc["id"])
                    st.session_state.load_failures = []
                    st.rerun()

        if corpus.documents:
            st.markdown("---")
            if st.button("Clear corpus", use_container_width=True):
                corpus.clear()
                st.session_state.load_failures = []
                st.session_state.search_term = ""
                st.rerun()


def render_term_analysis(corpus, term):
    normalized = corpus.normalize(term)
    st.subheader(f'TF-IDF Analysis for "{normalized}"')
    st.markdown("**Document Comparison**")

    max_score = corpus.max_score(normalized)
    rows = corpus.term_report(normalized)

    if max_score == 0:
        st.info(f'No data available for term "{normalized}"')
    else:
        st.caption("TF-IDF Score by Document")
        for i, row in enumerate(rows):
            pct = max(0.0, min(1.0, row["relative"])) * 100.0
            color = BAR_COLORS[i % len(BAR_COLORS)]
            st.markdown(
                f"""
            <div class="term-card">
                <p class="term-doc">{html.escape(row['name'])}</p>
                <div class="term-meta">
                    <span class="score-pill">{row['score']:.4f}</span>
                    <span>{row['count']} occurrence(s)</span>
                </div>
                <div class="score-bar" title="Relative score">
                    <div class="score-bar-fill" style="width: {pct:.1f}%; background: {color};"></div>
                </div>
            </div>
            """,
                unsafe_allow_html=True,
            )

    st.dataframe(
        [
            {
                "Document": row["name"],
                "Term Frequency": f"{row['tf'] * 100:.2f}%",
                "TF-IDF Score": f"{row['score']:.4f}",
            }
            for row in rows
        ],
        use_container_width=True,
        hide_index=True,
    )


def render_document_details(corpus):
    docs = corpus.list_documents()
    if not docs:
        return
    names = {doc["id"]: doc["name"] for doc in docs}
    doc_id = st.selectbox(
        "Document details",
        list(names),
        format_func=lambda i: f"{names[i]} (#{i})",
    )
    doc = corpus.get_document(doc_id)
    if doc is None:
        return

    st.markdown(f"Word Count: **{doc.word_count}**")
    col1, col2 = st.columns([1, 2])
    with col1:
        st.markdown("**Top TF-IDF Terms**")
        top = corpus.top_terms(doc_id, TOP_TERMS_K)
        if top:
            st.dataframe(
                [{"Term": term, "TF-IDF": f"{score:.4f}"} for term, score in top],
                use_container_width=True,
                hide_index=True,
            )
        else:
            st.caption("This document has no terms.")
    with col2:
        st.markdown("**Preview**")
        st.text_area(
            "Preview",
            corpus.document_preview(doc_id, PREVIEW_CHARS),
            height=260,
            key=f"preview_{doc_id}",
            disabled=True,
            label_visibility="collapsed",
        )


def main():
    if "search_term" not in st.session_state:
        st.session_state.search_term = ""
    if "load_failures" not in st.session_state:
        st.session_state.load_failures = []

    corpus = get_corpus()

    st.title("TF-IDF Document Analyzer")
    with st.expander("About TF-IDF"):
        st.markdown(ABOUT_TFIDF)

    with st.form("load_form", clear_on_submit=True):
        uploads = st.file_uploader(
            "Documents",
            type=list(ALLOWED_EXTENSIONS),
            accept_multiple_files=True,
        )
        load_clicked = st.form_submit_button("Load Documents", type="primary")

    if load_clicked and uploads:
        with st.spinner("Loading documents..."):
            added = ingest(corpus, uploads)
        if added:
            st.success(f"Loaded {len(added)} document(s).")

    if st.session_state.load_failures:
        failed = ", ".join(name for name, _ in st.session_state.load_failures)
        st.warning(f"Some documents could not be loaded: {failed}")

    render_sidebar(corpus)

    if not corpus.documents:
        st.info("No documents loaded. Please upload some documents to begin.")
        return

    with st.form("search_form", clear_on_submit=False):
        term_input = st.text_input(
            "Enter a word to analyze",
            value=st.session_state.search_term,
        )
        search_clicked = st.form_submit_button("Analyze")

    if search_clicked:
        st.session_state.search_term = term_input.strip()

    tab_term, tab_docs = st.tabs(["Term analysis", "Documents"])
    with tab_term:
        if st.session_state.search_term:
            render_term_analysis(corpus, st.session_state.search_term)
        else:
            st.caption("Enter a term to see TF-IDF analysis across documents.")
    with tab_docs:
        render_document_details(corpus)


if __name__ == "__main__":
    main()
