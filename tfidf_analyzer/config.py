"""
Settings for the analyzer.
Defaults can be overridden through environment variables.
"""
import os


def _env_int(name, default):
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        print(f"[Config] Ignoring {name}={raw!r}: not an integer, using {default}")
        return default
    if value < 0:
        print(f"[Config] Ignoring {name}={raw!r}: negative, using {default}")
        return default
    return value


TOP_TERMS_K = _env_int("TFIDF_TOP_TERMS", 10)
PREVIEW_CHARS = _env_int("TFIDF_PREVIEW_CHARS", 500)
ELLIPSIS = "..."

# pdf/docs files are read as plain text, without format-specific parsing
ALLOWED_EXTENSIONS = ("txt", "pdf", "docs")
ENCODING = os.environ.get("TFIDF_ENCODING", "utf-8")
