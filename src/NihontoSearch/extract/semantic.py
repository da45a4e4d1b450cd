"""Semantic term extraction.

Turns domain vocabulary in a query into exact-match filters, so that e.g.
"tanto juyo goto" filters on certification Juyo and item type tanto and only
"goto" is left for full-text search.

Matching runs on normalized text in two passes:

1. Multi-word phrases, longest first: certifications, then categories, then
   item types. A matched phrase is cut out of the text so its words cannot
   match again on their own.
2. Single words, each offered to an ordered list of classifiers; the first
   classifier that knows the word consumes it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Final, Mapping, Sequence

from NihontoSearch.core.models import SemanticFilters
from NihontoSearch.text.normalize import (
    DEFAULT_MIN_TERM_LENGTH,
    collapse_whitespace,
    is_dense_script,
    normalize,
    split_words,
)
from NihontoSearch.vocabulary import (
    CATEGORY_PHRASES,
    CATEGORY_TERMS,
    CERTIFICATION_PHRASES,
    CERTIFICATION_TERMS,
    ITEM_TYPE_PHRASES,
    ITEM_TYPE_TERMS,
    PROVINCE_TERMS,
    SIGNATURE_STATUS_TERMS,
)

CERTIFICATIONS: Final[str] = "certifications"
ITEM_TYPES: Final[str] = "item_types"
SIGNATURE_STATUSES: Final[str] = "signature_statuses"
PROVINCES: Final[str] = "provinces"


@dataclass(frozen=True, slots=True)
class SemanticExtraction:
    """Result of semantic extraction.

    Attributes:
        filters: Recognized exact-match filters.
        remaining_terms: Normalized words nobody claimed, in input order.
    """

    filters: SemanticFilters = SemanticFilters()
    remaining_terms: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class _Classifier:
    target: str
    lookup: Callable[[str], Sequence[str] | None]


def _single(table: Mapping[str, str]) -> Callable[[str], Sequence[str] | None]:
    def lookup(word: str) -> Sequence[str] | None:
        value = table.get(word)
        return (value,) if value else None

    return lookup


def _expanding(table: Mapping[str, tuple[str, ...]]) -> Callable[[str], Sequence[str] | None]:
    return table.get


_PHRASE_PASSES: Final[tuple[tuple[str, tuple[str, ...], Callable[[str], Sequence[str] | None]], ...]] = (
    (CERTIFICATIONS, CERTIFICATION_PHRASES, _single(CERTIFICATION_TERMS)),
    (ITEM_TYPES, CATEGORY_PHRASES, _expanding(CATEGORY_TERMS)),
    (ITEM_TYPES, ITEM_TYPE_PHRASES, _single(ITEM_TYPE_TERMS)),
)


def _phrase_pattern(phrase: str) -> re.Pattern[str]:
    # Kanji phrases have no word separators; romanized phrases must sit on
    # word boundaries so "japanese swordsmith" is not read as a category.
    if is_dense_script(phrase):
        return re.compile(re.escape(phrase))
    return re.compile(r"(?<!\S)" + re.escape(phrase) + r"(?!\S)")


_PHRASE_PATTERNS: Final[Mapping[str, re.Pattern[str]]] = MappingProxyType(
    {phrase: _phrase_pattern(phrase) for _, phrases, _ in _PHRASE_PASSES for phrase in phrases}
)


class SemanticExtractor:
    """Classify search words against the domain vocabulary.

    Args:
        extract_provinces: Whether province/tradition words become filters.
            When False they stay free text for full-text search.
        min_term_length: Minimum word length (dense-script words exempt).
    """

    def __init__(
        self,
        *,
        extract_provinces: bool = False,
        min_term_length: int = DEFAULT_MIN_TERM_LENGTH,
    ) -> None:
        self.extract_provinces = extract_provinces
        self.min_term_length = min_term_length
        classifiers = [
            _Classifier(CERTIFICATIONS, _single(CERTIFICATION_TERMS)),
            _Classifier(ITEM_TYPES, _expanding(CATEGORY_TERMS)),
            _Classifier(ITEM_TYPES, _single(ITEM_TYPE_TERMS)),
            _Classifier(SIGNATURE_STATUSES, _single(SIGNATURE_STATUS_TERMS)),
        ]
        if extract_provinces:
            classifiers.append(_Classifier(PROVINCES, _single(PROVINCE_TERMS)))
        self._classifiers: tuple[_Classifier, ...] = tuple(classifiers)

    def extract(self, text: str) -> SemanticExtraction:
        """Extract semantic filters from `text`.

        Args:
            text: Search text; normalized here.

        Returns:
            Filters plus the words left for full-text search.
        """
        return self.extract_runs([text])

    def extract_runs(self, runs: Sequence[str]) -> SemanticExtraction:
        """Extract semantic filters from separately typed stretches of text.

        Multi-word phrases only match inside one run, so words that were
        separated in the input (by a range filter or a quoted span) never
        form a phrase together.

        Args:
            runs: Text runs in input order.

        Returns:
            Filters plus the words left for full-text search, in input order.
        """
        if not any(run and run.strip() for run in runs):
            return SemanticExtraction()

        found: dict[str, dict[str, None]] = {
            CERTIFICATIONS: {},
            ITEM_TYPES: {},
            SIGNATURE_STATUSES: {},
            PROVINCES: {},
        }
        words: list[str] = []
        for run in runs:
            working = self._consume_phrases(normalize(run), found)
            words.extend(split_words(working, self.min_term_length))

        remaining: list[str] = []
        for word in words:
            for classifier in self._classifiers:
                values = classifier.lookup(word)
                if values:
                    for value in values:
                        found[classifier.target].setdefault(value, None)
                    break
            else:
                remaining.append(word)

        filters = SemanticFilters(
            certifications=tuple(found[CERTIFICATIONS]),
            item_types=tuple(found[ITEM_TYPES]),
            signature_statuses=tuple(found[SIGNATURE_STATUSES]),
            provinces=tuple(found[PROVINCES]),
        )
        return SemanticExtraction(filters=filters, remaining_terms=tuple(remaining))

    @staticmethod
    def _consume_phrases(working: str, found: dict[str, dict[str, None]]) -> str:
        for target, phrases, lookup in _PHRASE_PASSES:
            for phrase in phrases:
                pattern = _PHRASE_PATTERNS[phrase]
                if not pattern.search(working):
                    continue
                for value in lookup(phrase) or ():
                    found[target].setdefault(value, None)
                working = collapse_whitespace(pattern.sub(" ", working))
        return working


_DEFAULT_EXTRACTORS: Final[Mapping[bool, SemanticExtractor]] = MappingProxyType(
    {
        False: SemanticExtractor(extract_provinces=False),
        True: SemanticExtractor(extract_provinces=True),
    }
)


def extract_semantic(
    text: str,
    *,
    extract_provinces: bool = False,
    min_term_length: int = DEFAULT_MIN_TERM_LENGTH,
) -> SemanticExtraction:
    """Extract semantic filters with a stock extractor."""
    if min_term_length == DEFAULT_MIN_TERM_LENGTH:
        return _DEFAULT_EXTRACTORS[extract_provinces].extract(text)
    return SemanticExtractor(extract_provinces=extract_provinces, min_term_length=min_term_length).extract(text)


def is_semantic_term(word: str) -> bool:
    """Return True if the word is any kind of known vocabulary term."""
    key = normalize(word)
    return bool(
        key in CERTIFICATION_TERMS
        or key in ITEM_TYPE_TERMS
        or key in CATEGORY_TERMS
        or key in SIGNATURE_STATUS_TERMS
        or key in PROVINCE_TERMS
    )


def get_certification_key(term: str) -> str | None:
    return CERTIFICATION_TERMS.get(normalize(term))


def get_item_type_key(term: str) -> str | None:
    return ITEM_TYPE_TERMS.get(normalize(term))


def get_category_types(term: str) -> tuple[str, ...] | None:
    """Return the item types a category term expands to.

    >>> get_category_types("katana") is None
    True
    """
    return CATEGORY_TERMS.get(normalize(term))


def get_signature_status_key(term: str) -> str | None:
    return SIGNATURE_STATUS_TERMS.get(normalize(term))


def get_province_key(term: str) -> str | None:
    return PROVINCE_TERMS.get(normalize(term))
