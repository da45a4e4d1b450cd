"""Tests for vocabulary-driven semantic extraction."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from NihontoSearch.extract.semantic import (
    SemanticExtractor,
    extract_semantic,
    get_category_types,
    get_certification_key,
    get_item_type_key,
    get_province_key,
    get_signature_status_key,
    is_semantic_term,
)
from NihontoSearch.vocabulary import (
    ARMOR_TYPES,
    CATEGORY_PHRASES,
    CERTIFICATION_PHRASES,
    NIHONTO_TYPES,
    TOSOGU_TYPES,
    certification_variants,
    province_variants,
)


class TestSemanticExtraction(unittest.TestCase):
    def test_certification_and_item_type_leave_free_term(self) -> None:
        result = extract_semantic("tanto juyo goto")
        self.assertEqual(result.filters.certifications, ("Juyo",))
        self.assertEqual(result.filters.item_types, ("tanto",))
        self.assertEqual(result.remaining_terms, ("goto",))

    def test_province_stays_free_text_by_default(self) -> None:
        result = extract_semantic("bizen katana")
        self.assertEqual(result.filters.item_types, ("katana",))
        self.assertEqual(result.filters.provinces, ())
        self.assertEqual(result.remaining_terms, ("bizen",))

    def test_province_extraction_when_enabled(self) -> None:
        result = SemanticExtractor(extract_provinces=True).extract("Bizen katana 備前")
        self.assertEqual(result.filters.provinces, ("Bizen",))
        self.assertEqual(result.remaining_terms, ())

    def test_multi_word_certification_consumes_its_words(self) -> None:
        result = extract_semantic("Tokubetsu Juyo katana")
        self.assertEqual(result.filters.certifications, ("Tokuju",))
        self.assertEqual(result.filters.item_types, ("katana",))
        self.assertEqual(result.remaining_terms, ())

    def test_kanji_phrase_without_spaces(self) -> None:
        result = extract_semantic("特別重要刀")
        self.assertEqual(result.filters.certifications, ("Tokuju",))
        self.assertEqual(result.filters.item_types, ("katana",))

    def test_simplified_kanji_matches_traditional_key(self) -> None:
        self.assertEqual(extract_semantic("剣").filters.item_types, ("ken",))

    def test_category_phrase_expands(self) -> None:
        result = extract_semantic("japanese sword signed")
        self.assertEqual(result.filters.item_types, NIHONTO_TYPES)
        self.assertEqual(result.filters.signature_statuses, ("signed",))
        self.assertEqual(result.remaining_terms, ())

    def test_category_phrase_needs_word_boundaries(self) -> None:
        result = extract_semantic("japanese swordsmith")
        self.assertEqual(result.filters.item_types, ())
        self.assertEqual(result.remaining_terms, ("japanese", "swordsmith"))

    def test_single_word_categories(self) -> None:
        self.assertEqual(extract_semantic("tosogu").filters.item_types, TOSOGU_TYPES)
        # category wins over the concrete armor type of the same name
        self.assertEqual(extract_semantic("yoroi").filters.item_types, ARMOR_TYPES)

    def test_fuchi_kashira_phrase(self) -> None:
        result = extract_semantic("Fuchi Kashira mumei")
        self.assertEqual(result.filters.item_types, ("fuchi-kashira",))
        self.assertEqual(result.filters.signature_statuses, ("unsigned",))
        self.assertEqual(result.remaining_terms, ())

    def test_duplicates_collapse_in_first_seen_order(self) -> None:
        result = extract_semantic("katana hozon Katana juyo HOZON")
        self.assertEqual(result.filters.certifications, ("Hozon", "Juyo"))
        self.assertEqual(result.filters.item_types, ("katana",))

    def test_empty_input(self) -> None:
        for text in ("", "   "):
            result = extract_semantic(text)
            self.assertTrue(result.filters.is_empty)
            self.assertEqual(result.remaining_terms, ())

    def test_phrases_do_not_span_runs(self) -> None:
        extractor = SemanticExtractor()
        result = extractor.extract_runs(["tokubetsu", "juyo katana"])
        self.assertEqual(result.filters.certifications, ("Juyo",))
        self.assertEqual(result.filters.item_types, ("katana",))
        self.assertEqual(result.remaining_terms, ("tokubetsu",))

        joined = extractor.extract_runs(["tokubetsu juyo", "katana"])
        self.assertEqual(joined.filters.certifications, ("Tokuju",))
        self.assertEqual(joined.remaining_terms, ())
        self.assertEqual(extractor.extract_runs(["", "  "]).remaining_terms, ())

    def test_phrase_lists_are_longest_first(self) -> None:
        for phrases in (CERTIFICATION_PHRASES, CATEGORY_PHRASES):
            lengths = [len(p) for p in phrases]
            self.assertEqual(lengths, sorted(lengths, reverse=True))


class TestVocabularyLookups(unittest.TestCase):
    def test_lookups(self) -> None:
        self.assertEqual(get_certification_key("Jūyō"), "Juyo")
        self.assertEqual(get_item_type_key("waki"), "wakizashi")
        self.assertIsNone(get_category_types("katana"))
        self.assertEqual(get_signature_status_key("在銘"), "signed")
        self.assertEqual(get_province_key("備前"), "Bizen")
        self.assertTrue(is_semantic_term("Bizen"))
        self.assertFalse(is_semantic_term("goto"))

    def test_db_variants(self) -> None:
        self.assertIn("Tokubetsu Juyo", certification_variants("Tokuju"))
        self.assertEqual(certification_variants("NTHK"), ("NTHK",))
        self.assertEqual(province_variants("Soshu"), ("Soshu", "Sagami"))


if __name__ == "__main__":
    unittest.main()
