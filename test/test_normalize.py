"""Tests for text normalization."""

import random
import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from NihontoSearch.text.normalize import (
    expand_search_aliases,
    get_search_variants,
    has_kanji_variants,
    is_dense_script,
    is_search_word,
    normalize,
    remove_macrons,
    split_words,
    to_traditional_kanji,
)


class TestNormalize(unittest.TestCase):
    def test_macrons_and_case_are_folded(self) -> None:
        self.assertEqual(normalize("Gotō"), "goto")
        self.assertEqual(normalize("JŪYŌ Tōsōgu"), "juyo tosogu")

    def test_combining_diacritics_are_dropped(self) -> None:
        self.assertEqual(normalize("Masamuné"), "masamune")
        self.assertEqual(normalize("café"), "cafe")

    def test_whitespace_collapses(self) -> None:
        self.assertEqual(normalize("  rai \t  kunimitsu\n"), "rai kunimitsu")

    def test_empty_input(self) -> None:
        self.assertEqual(normalize(""), "")
        self.assertEqual(normalize("   "), "")

    def test_simplified_kanji_folds_to_traditional(self) -> None:
        self.assertEqual(normalize("国広"), "國廣")
        self.assertEqual(to_traditional_kanji("正宗"), "正宗")
        self.assertTrue(has_kanji_variants("国広"))
        self.assertFalse(has_kanji_variants("國廣"))

    def test_idempotent_over_random_text(self) -> None:
        rng = random.Random(7)
        alphabet = "abcXYZ āōūĀṒ̀ 国広龍刀 \t\n&|!'\"İß"
        for _ in range(2000):
            s = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 24)))
            once = normalize(s)
            self.assertEqual(normalize(once), once, repr(s))

    def test_remove_macrons_keeps_case(self) -> None:
        self.assertEqual(remove_macrons("Tōkyō Ōsaka"), "Tokyo Osaka")

    def test_dense_script_words_ignore_min_length(self) -> None:
        self.assertTrue(is_dense_script("刀"))
        self.assertFalse(is_dense_script("katana"))
        self.assertTrue(is_search_word("刀"))
        self.assertFalse(is_search_word("a"))
        self.assertEqual(split_words("a 刀 of katana"), ["刀", "of", "katana"])
        self.assertEqual(split_words("of katana", min_length=3), ["katana"])

    def test_ideographic_punctuation_is_not_a_word(self) -> None:
        for mark in ("、", "。", "「", "」", "\u3000"):
            with self.subTest(mark=mark):
                self.assertFalse(is_dense_script(mark))
                self.assertFalse(is_search_word(mark))
        self.assertTrue(is_dense_script("ぁ"))
        self.assertTrue(is_dense_script("カ"))
        self.assertEqual(split_words("、 「 刀 」"), ["刀"])

    def test_search_variants(self) -> None:
        self.assertEqual(get_search_variants(""), [])
        self.assertEqual(get_search_variants("Gotō"), ["goto"])
        self.assertEqual(get_search_variants("国広"), ["国広", "國廣"])

    def test_expand_search_aliases(self) -> None:
        self.assertEqual(expand_search_aliases("Waki"), ("waki", "wakizashi"))
        self.assertEqual(expand_search_aliases("bizen"), ("bizen",))


if __name__ == "__main__":
    unittest.main()
