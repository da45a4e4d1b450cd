"""Text normalization for romanized Japanese and kanji search input.

`normalize` is the single canonical form used by every later stage and by
the vocabulary tables, so two spellings of the same word compare equal:

- long-vowel macrons and other combining diacritics are dropped
  (Gotō -> goto)
- text is lower-cased
- simplified kanji are folded to the traditional forms the catalog stores
  (国 -> 國)
- whitespace runs collapse to one space, ends trimmed

The function is idempotent.
"""

from __future__ import annotations

import re
import unicodedata
from types import MappingProxyType
from typing import Final, Mapping

DEFAULT_MIN_TERM_LENGTH: Final[int] = 2

_MACRONS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "ā": "a", "Ā": "A",
        "ē": "e", "Ē": "E",
        "ī": "i", "Ī": "I",
        "ō": "o", "Ō": "O",
        "ū": "u", "Ū": "U",
    }
)
_MACRON_RE = re.compile("[" + "".join(_MACRONS) + "]")
_COMBINING_RE = re.compile("[\\u0300-\\u036f]")
_WS_RE = re.compile(r"\s+")

# Kana and unified CJK ideographs, plus the CJK compatibility block. One
# character from here can be a whole search term; ideographic punctuation
# (U+3000-U+303F) cannot.
_DENSE_SCRIPT_RE = re.compile("[\\u3040-\\u9fff\\uf900-\\ufaff]")

# Simplified (shinjitai) -> traditional (kyujitai). Common in smith names.
KANJI_VARIANTS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "国": "國",  # kuni
        "広": "廣",  # hiro
        "竜": "龍",  # ryu/tatsu
        "沢": "澤",  # sawa
        "辺": "邊",  # be/hen
        "桜": "櫻",  # sakura
        "円": "圓",  # en
        "剣": "劍",  # ken
        "鉄": "鐵",  # tetsu
        "真": "眞",  # shin
        "斎": "齋",  # sai
        "関": "關",  # seki/kan
        "万": "萬",  # man
        "芸": "藝",  # gei
        "学": "學",  # gaku
        "栄": "榮",  # ei
        "応": "應",  # o
        "仏": "佛",  # butsu
        "変": "變",  # hen
        "弁": "辯",  # ben
        "宝": "寶",  # takara
        "実": "實",  # jitsu
        "写": "寫",  # sha
        "当": "當",  # to
        "帰": "歸",  # ki
        "旧": "舊",  # kyu
        "権": "權",  # gon
        "歳": "歲",  # sai
        "浜": "濱",  # hama
        "画": "畫",  # ga
        "県": "縣",  # ken
        "経": "經",  # kyo
        "継": "繼",  # tsugu
        "総": "總",  # so
        "聴": "聽",  # cho
        "脳": "腦",  # no
        "蔵": "藏",  # kura
        "覚": "覺",  # kaku
        "観": "觀",  # kan
        "訳": "譯",  # yaku
        "読": "讀",  # yomu
        "豊": "豐",  # yutaka
        "辞": "辭",  # ji
        "転": "轉",  # ten
        "遅": "遲",  # chi
        "鋭": "銳",  # ei
        "闘": "鬪",  # to
        "駅": "驛",  # eki
        "験": "驗",  # ken
        "黒": "黑",  # kuro
    }
)
_KANJI_TABLE = str.maketrans(dict(KANJI_VARIANTS))

# Short forms and romanization variants -> spellings used in listing text.
SEARCH_ALIASES: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType(
    {
        "tokuju": ("tokubetsu juyo", "tokubetsu_juyo"),
        "tokuho": ("tokubetsu hozon", "tokubetsu_hozon"),
        "tokukicho": ("tokubetsu kicho", "tokubetsu_kicho"),
        "waki": ("wakizashi",),
        "nagi": ("naginata",),
        "fuchikashira": ("fuchi_kashira", "fuchi-kashira", "fuchi kashira"),
        "tuba": ("tsuba",),
        "tanto": ("tantou", "tantō"),
        "katana": ("katana",),
        # province spellings; only reach the free text when provinces are not filters
        "soshu": ("sagami",),
        "sagami": ("soshu",),
        "bishu": ("bizen",),
        "noshu": ("mino",),
        "oshu": ("mutsu",),
    }
)


def _fold(text: str) -> str:
    folded = remove_macrons(text).lower()
    folded = _COMBINING_RE.sub("", unicodedata.normalize("NFD", folded))
    return unicodedata.normalize("NFC", folded)


def remove_macrons(text: str) -> str:
    """Replace long-vowel macrons with plain vowels, keeping case.

    >>> remove_macrons("Tōkyō")
    'Tokyo'
    """
    if not text:
        return ""
    return _MACRON_RE.sub(lambda m: _MACRONS[m.group(0)], text)


def to_traditional_kanji(text: str) -> str:
    """Replace simplified kanji with their traditional forms."""
    if not text:
        return ""
    return text.translate(_KANJI_TABLE)


def has_kanji_variants(text: str) -> bool:
    """Return True if text contains a simplified kanji with a traditional form."""
    if not text:
        return False
    return any(ch in KANJI_VARIANTS for ch in text)


def normalize(text: str) -> str:
    """Return the canonical search form of `text`.

    Args:
        text: Arbitrary user input.

    Returns:
        Normalized string, possibly empty.
    """
    if not text:
        return ""
    return collapse_whitespace(to_traditional_kanji(_fold(text)))


def collapse_whitespace(text: str) -> str:
    return _WS_RE.sub(" ", text).strip()


def is_dense_script(text: str) -> bool:
    """Return True if text contains at least one dense-script character."""
    return bool(text) and _DENSE_SCRIPT_RE.search(text) is not None


def is_search_word(word: str, min_length: int = DEFAULT_MIN_TERM_LENGTH) -> bool:
    """Return True if a token is long enough to search on.

    Tokens shorter than `min_length` only pass when they carry a dense-script
    character (a single kanji such as 刀 is a complete term).
    """
    return len(word) >= min_length or is_dense_script(word)


def split_words(text: str, min_length: int = DEFAULT_MIN_TERM_LENGTH) -> list[str]:
    """Split on whitespace and keep only searchable words, in order."""
    return [w for w in text.split() if is_search_word(w, min_length)]


def expand_search_aliases(word: str) -> tuple[str, ...]:
    """Return the word plus its known alias spellings.

    >>> expand_search_aliases("tokuju")
    ('tokuju', 'tokubetsu juyo', 'tokubetsu_juyo')
    >>> expand_search_aliases("bizen")
    ('bizen',)
    """
    key = word.lower().strip()
    aliases = SEARCH_ALIASES.get(key)
    if aliases:
        return (key, *aliases)
    return (key,)


def get_search_variants(query: str) -> list[str]:
    """Return distinct normalized forms of a query.

    The first entry is the normalized query with simplified kanji kept as
    typed; a traditional-kanji variant follows when the input has one. This
    supports matching against columns that were not folded on write.
    """
    if not query:
        return []
    as_typed = collapse_whitespace(_fold(query))
    variants = [as_typed]
    if has_kanji_variants(query):
        traditional = normalize(query)
        if traditional != as_typed:
            variants.append(traditional)
    return variants
