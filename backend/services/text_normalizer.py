"""Language-aware tokenization shared by the lexicon registry and the rules.

Text is NFC-composed and lowercased, never stripped of accents: lexicon entries
are stored in each language's own orthography. Apostrophes, hyphens and dots
inside a word are kept, so "full-stack" and "node.js" stay single tokens.
"""

import re
import unicodedata
from collections.abc import Collection, Iterable

from models.schemas.analysis_options import Language

_TOKEN_RE = re.compile(r"[^\W_]+(?:['.\-][^\W_]+)*[+#]*")

_APOSTROPHES = str.maketrans({"’": "'", "‘": "'", "ʼ": "'", "`": "'"})
_HYPHENS = str.maketrans({"‐": "-", "‑": "-"})


def fold(text: str) -> str:
    """Trim, compose, unify apostrophes/hyphens and lowercase."""
    cleaned = unicodedata.normalize("NFC", text.strip())
    return cleaned.translate(_APOSTROPHES).translate(_HYPHENS).lower()


def tokenize(text: str | None, elisions: Iterable[str] = ()) -> list[str]:
    """Split text into normalized tokens without consulting the registry.

    ``elisions`` are leading clitics ("l'", "d'") removed from a token when a
    word follows them.
    """
    if not text or not text.strip():
        return []
    tokens = _TOKEN_RE.findall(fold(text))
    if not elisions:
        return tokens
    return [_strip_elision(token, elisions) for token in tokens]


def _strip_elision(token: str, elisions: Iterable[str]) -> str:
    for prefix in elisions:
        if token.startswith(prefix) and len(token) > len(prefix):
            return token[len(prefix):]
    return token


def normalize(text: str | None, language: Language | str) -> list[str]:
    """Normalize raw text into the token form used for lexicon matching."""
    # Deferred: the registry itself normalizes its entries with tokenize().
    from services.lexicon_registry import lexicon_for

    lexicon = lexicon_for(language)
    return tokenize(text, lexicon.elisions)


def normalize_term(term: str, elisions: Iterable[str] = ()) -> str:
    """Canonical form of a lexicon entry: its tokens joined by single spaces."""
    return " ".join(tokenize(term, elisions))


def _term_lengths(terms: Collection[str]) -> list[int]:
    return sorted({term.count(" ") + 1 for term in terms if term}, reverse=True)


def find_terms(tokens: list[str], terms: Collection[str]) -> list[str]:
    """Terms present as contiguous token runs, in order of first occurrence."""
    if not tokens or not terms:
        return []
    lengths = _term_lengths(terms)
    found: dict[str, None] = {}
    for start in range(len(tokens)):
        for size in lengths:
            if start + size > len(tokens):
                continue
            candidate = " ".join(tokens[start:start + size])
            if candidate in terms:
                found.setdefault(candidate)
    return list(found)


def count_term_tokens(tokens: list[str], terms: Collection[str]) -> int:
    """Number of tokens covered by non-overlapping term occurrences."""
    if not tokens or not terms:
        return 0
    lengths = _term_lengths(terms)
    covered = 0
    start = 0
    while start < len(tokens):
        for size in lengths:
            if start + size <= len(tokens) and " ".join(tokens[start:start + size]) in terms:
                covered += size
                start += size
                break
        else:
            start += 1
    return covered
