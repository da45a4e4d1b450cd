"""tsquery compiler.

Compiles search box text into a PostgreSQL `to_tsquery` string.

Rules
- Quoted spans ("..." or '...') are phrases: their words are joined with the
  followed-by operator `<->`, so they must appear adjacent.
- Everything else is a bag of words joined with `&`.
- With `prefix_match`, free words get the `:*` prefix suffix; inside a
  phrase only the last word does.
- Characters with tsquery meaning (& | ! ( ) : < > \\ * ' ") are replaced by
  spaces before a word is placed into the query, so user input can never
  inject operators.
- Words shorter than `min_term_length` are dropped unless they contain a
  dense-script (kanji/kana) character.

Output shape
- "katana"                      -> katana
- "bizen katana"                -> bizen & katana
- '"Rai Kunimitsu"'             -> rai <-> kunimitsu
- '"Rai Kunimitsu" katana'      -> (rai <-> kunimitsu) & katana
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, Iterable, Sequence

from NihontoSearch.core.models import EMPTY_QUERY, CompiledQuery
from NihontoSearch.text.normalize import (
    DEFAULT_MIN_TERM_LENGTH,
    collapse_whitespace,
    is_search_word,
    normalize,
    split_words,
)

AND: Final[str] = "&"
OR: Final[str] = "|"
FOLLOWED_BY: Final[str] = "<->"
PREFIX: Final[str] = ":*"

_SPECIAL_RE = re.compile(r"[&|!():<>\\*'\"]")
_PHRASE_RE = re.compile(r"[\"']([^\"']+)[\"']")
_TOKEN_RE = re.compile(r"<->|[&|()!]|[^\s&|()!]+")
_BINARY_OPS = frozenset({AND, OR, FOLLOWED_BY})


@dataclass(frozen=True, slots=True)
class TsqueryOptions:
    """Builder options.

    Attributes:
        prefix_match: Append `:*` for typeahead-style prefix matching.
        min_term_length: Minimum word length kept in the query.
    """

    prefix_match: bool = False
    min_term_length: int = DEFAULT_MIN_TERM_LENGTH


_DEFAULT_OPTIONS = TsqueryOptions()


def escape_for_tsquery(term: str) -> str:
    """Replace tsquery syntax characters with spaces and collapse whitespace.

    >>> escape_for_tsquery("user's & input")
    'user s input'
    """
    return collapse_whitespace(_SPECIAL_RE.sub(" ", term))


def query_words(text: str, min_term_length: int = DEFAULT_MIN_TERM_LENGTH) -> list[str]:
    """Normalize, escape and split text into the words a query may contain."""
    return split_words(escape_for_tsquery(normalize(text)), min_term_length)


def split_quoted(
    text: str, min_term_length: int = DEFAULT_MIN_TERM_LENGTH
) -> tuple[list[str], list[str]]:
    """Split quoted phrases from the unquoted stretches between them.

    Quotes are scanned left to right; an unmatched quote is left in the
    remaining text (and later escaped away). Phrases shorter than
    `min_term_length` are dropped but still removed from the text.

    Args:
        text: Raw search text.
        min_term_length: Minimum phrase length.

    Returns:
        (phrases in order of appearance, non-empty unquoted pieces in order).
    """
    if not text:
        return [], []
    phrases: list[str] = []
    pieces: list[str] = []
    last = 0
    for match in _PHRASE_RE.finditer(text):
        phrase = match.group(1).strip()
        if is_search_word(phrase, min_term_length):
            phrases.append(phrase)
        pieces.append(text[last : match.start()])
        last = match.end()
    pieces.append(text[last:])
    return phrases, [p for p in map(collapse_whitespace, pieces) if p]


def extract_phrases(
    text: str, min_term_length: int = DEFAULT_MIN_TERM_LENGTH
) -> tuple[list[str], str]:
    """Split quoted phrases from the rest of the text.

    Same as `split_quoted`, with the unquoted pieces joined by spaces.
    """
    phrases, pieces = split_quoted(text, min_term_length)
    return phrases, " ".join(pieces)


def _format_phrase(words: Sequence[str], prefix_match: bool) -> str:
    if not words:
        return ""
    if prefix_match:
        words = [*words[:-1], words[-1] + PREFIX]
    return f" {FOLLOWED_BY} ".join(words)


def _format_terms(words: Iterable[str], prefix_match: bool) -> str:
    suffix = PREFIX if prefix_match else ""
    return f" {AND} ".join(w + suffix for w in words)


def build_phrase_query(phrase: str, options: TsqueryOptions = _DEFAULT_OPTIONS) -> str:
    """Build an adjacency query for one phrase.

    >>> build_phrase_query("Rai Kunimitsu")
    'rai <-> kunimitsu'
    >>> build_phrase_query("Rai Kunimitsu", TsqueryOptions(prefix_match=True))
    'rai <-> kunimitsu:*'
    """
    return _format_phrase(query_words(phrase, options.min_term_length), options.prefix_match)


def build_terms_query(text: str, options: TsqueryOptions = _DEFAULT_OPTIONS) -> str:
    """Build an AND query over the words of `text`.

    >>> build_terms_query("bizen katana", TsqueryOptions(prefix_match=True))
    'bizen:* & katana:*'
    """
    return _format_terms(query_words(text, options.min_term_length), options.prefix_match)


def assemble_query(
    phrases: Sequence[str],
    remaining: str,
    options: TsqueryOptions = _DEFAULT_OPTIONS,
) -> CompiledQuery:
    """Combine already separated phrases and free text into one query.

    Phrases always match exactly (no prefix suffix); `options.prefix_match`
    applies to the free words only.

    Args:
        phrases: Phrase texts in the order they were quoted.
        remaining: Unquoted text.
        options: Builder options.

    Returns:
        Compiled query.
    """
    parts: list[str] = []
    terms: list[str] = []
    phrase_contributed = False

    for phrase in phrases:
        words = query_words(phrase, options.min_term_length)
        if not words:
            continue
        parts.append(_format_phrase(words, prefix_match=False))
        terms.append(" ".join(words))
        phrase_contributed = True

    free_words = query_words(remaining, options.min_term_length) if remaining else []
    if free_words:
        parts.append(_format_terms(free_words, options.prefix_match))
        terms.extend(free_words)

    if not parts:
        return EMPTY_QUERY

    if len(parts) > 1:
        parts = [f"({p})" if FOLLOWED_BY in p else p for p in parts]
    return CompiledQuery(
        query_string=f" {AND} ".join(parts),
        is_phrase_search=phrase_contributed,
        terms=tuple(terms),
        is_empty=False,
    )


def compile_query(text: str, options: TsqueryOptions = _DEFAULT_OPTIONS) -> CompiledQuery:
    """Compile search box text into a tsquery.

    Args:
        text: Raw search text.
        options: Builder options.

    Returns:
        Compiled query; `is_empty` when nothing usable remains.
    """
    if not text or not isinstance(text, str):
        return EMPTY_QUERY
    trimmed = text.strip()
    if not is_search_word(trimmed, options.min_term_length):
        return EMPTY_QUERY
    phrases, remaining = extract_phrases(trimmed, options.min_term_length)
    return assemble_query(phrases, remaining, options)


def is_valid_tsquery(query: str) -> bool:
    """Check a compiled tsquery for structural problems.

    Verifies balanced parentheses, that binary operators (&, |, <->) always
    sit between two operands, that operands are never juxtaposed without an
    operator, and that operands carry no syntax characters other than a
    trailing `:*`. An empty string is well formed (it is what the builder
    returns for an empty query).

    Meant for tests and sanity checks, not for the request path.

    >>> is_valid_tsquery("(rai <-> kunimitsu) & katana:*")
    True
    >>> is_valid_tsquery("rai & & kunimitsu")
    False
    """
    depth = 0
    prev = "start"
    for token in _TOKEN_RE.findall(query or ""):
        if token == "(":
            if prev in ("term", "close"):
                return False
            depth += 1
            prev = "open"
        elif token == ")":
            if prev in ("start", "op", "open", "not"):
                return False
            depth -= 1
            if depth < 0:
                return False
            prev = "close"
        elif token in _BINARY_OPS:
            if prev in ("start", "op", "open", "not"):
                return False
            prev = "op"
        elif token == "!":
            if prev in ("term", "close"):
                return False
            prev = "not"
        else:
            if prev in ("term", "close"):
                return False
            word = token[: -len(PREFIX)] if token.endswith(PREFIX) else token
            if not word or _SPECIAL_RE.search(word):
                return False
            prev = "term"
    return depth == 0 and prev not in ("op", "open", "not")
