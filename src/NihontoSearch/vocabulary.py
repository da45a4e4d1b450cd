"""Domain vocabulary recognized by the semantic extractor.

All tables are built once at import and exposed read-only. Lookup keys are
stored in `normalize()` form, so callers must normalize before looking up.
Multi-word phrase lists are ordered longest-first so that a longer phrase is
always consumed before any phrase it contains.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Iterable, Mapping

from NihontoSearch.text.normalize import normalize


def _term_map(raw: Mapping[str, object]) -> Mapping[str, object]:
    out: dict[str, object] = {}
    for term, value in raw.items():
        key = normalize(term)
        if key and key not in out:
            out[key] = value
    return MappingProxyType(out)


def _phrases(raw: Iterable[str]) -> tuple[str, ...]:
    unique = [p for p in dict.fromkeys(normalize(p) for p in raw) if p]
    return tuple(sorted(unique, key=len, reverse=True))


# -----------------------------------------------------------------------------
# Item type categories
# -----------------------------------------------------------------------------

NIHONTO_TYPES: Final[tuple[str, ...]] = (
    "katana", "wakizashi", "tanto", "tachi", "naginata", "yari", "kodachi", "ken",
    "naginata naoshi", "sword",
)

TOSOGU_TYPES: Final[tuple[str, ...]] = (
    "tsuba", "fuchi-kashira", "fuchi_kashira", "fuchi", "kashira",
    "kozuka", "kogatana", "kogai", "menuki", "koshirae", "tosogu", "mitokoromono",
)

ARMOR_TYPES: Final[tuple[str, ...]] = (
    "armor", "yoroi", "gusoku",
    "helmet", "kabuto",
    "menpo", "mengu",
    "kote",
    "suneate",
    "do",
)

CATEGORY_TERMS: Final[Mapping[str, tuple[str, ...]]] = _term_map(
    {
        "nihonto": NIHONTO_TYPES,
        "nihon-to": NIHONTO_TYPES,
        "sword": NIHONTO_TYPES,
        "swords": NIHONTO_TYPES,
        "blade": NIHONTO_TYPES,
        "blades": NIHONTO_TYPES,
        "japanese sword": NIHONTO_TYPES,
        "japanese swords": NIHONTO_TYPES,
        "tosogu": TOSOGU_TYPES,
        "tōsōgu": TOSOGU_TYPES,
        "fitting": TOSOGU_TYPES,
        "fittings": TOSOGU_TYPES,
        "sword fitting": TOSOGU_TYPES,
        "sword fittings": TOSOGU_TYPES,
        "kodogu": TOSOGU_TYPES,
        "kodōgu": TOSOGU_TYPES,
        "armor": ARMOR_TYPES,
        "armour": ARMOR_TYPES,
        "yoroi": ARMOR_TYPES,
        "gusoku": ARMOR_TYPES,
        "samurai armor": ARMOR_TYPES,
        "samurai armour": ARMOR_TYPES,
        "japanese armor": ARMOR_TYPES,
        "japanese armour": ARMOR_TYPES,
        "kacchu": ARMOR_TYPES,
        "katchū": ARMOR_TYPES,
    }
)

CATEGORY_PHRASES: Final[tuple[str, ...]] = _phrases(
    [
        "japanese sword",
        "japanese swords",
        "sword fittings",
        "sword fitting",
        "samurai armor",
        "samurai armour",
        "japanese armor",
        "japanese armour",
    ]
)

# -----------------------------------------------------------------------------
# Certifications
# -----------------------------------------------------------------------------

CERTIFICATION_TERMS: Final[Mapping[str, str]] = _term_map(
    {
        "juyo": "Juyo",
        "jūyō": "Juyo",
        "juuyou": "Juyo",
        "juyou": "Juyo",
        "重要": "Juyo",
        "tokuju": "Tokuju",
        "tokubetsu juyo": "Tokuju",
        "tokubetsujuyo": "Tokuju",
        "toku juyo": "Tokuju",
        "特別重要": "Tokuju",
        "hozon": "Hozon",
        "hōzon": "Hozon",
        "保存": "Hozon",
        "tokuho": "TokuHozon",
        "tokubetsu hozon": "TokuHozon",
        "tokubetsuhozon": "TokuHozon",
        "toku hozon": "TokuHozon",
        "特別保存": "TokuHozon",
        "kicho": "Kicho",
        "kichō": "Kicho",
        "貴重": "Kicho",
        "tokukicho": "TokuKicho",
        "tokubetsu kicho": "TokuKicho",
        "tokubetsukicho": "TokuKicho",
        "toku kicho": "TokuKicho",
        "特別貴重": "TokuKicho",
        "nthk": "NTHK",
        "nthk kanteisho": "NTHK",
    }
)

CERTIFICATION_PHRASES: Final[tuple[str, ...]] = _phrases(
    [
        "特別重要",
        "特別保存",
        "特別貴重",
        "tokubetsu juyo",
        "tokubetsu hozon",
        "tokubetsu kicho",
        "toku juyo",
        "toku hozon",
        "toku kicho",
        "nthk kanteisho",
    ]
)

# Canonical certification -> spellings found in the cert_type column.
CERTIFICATION_VARIANTS: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType(
    {
        "Juyo": ("Juyo", "juyo"),
        "Tokuju": ("Tokuju", "tokuju", "Tokubetsu Juyo", "tokubetsu_juyo"),
        "TokuHozon": ("TokuHozon", "Tokubetsu Hozon", "tokubetsu_hozon"),
        "Hozon": ("Hozon", "hozon"),
        "TokuKicho": ("TokuKicho", "Tokubetsu Kicho", "tokubetsu_kicho"),
    }
)

# -----------------------------------------------------------------------------
# Concrete item types
# -----------------------------------------------------------------------------

ITEM_TYPE_TERMS: Final[Mapping[str, str]] = _term_map(
    {
        # blades
        "katana": "katana",
        "wakizashi": "wakizashi",
        "waki": "wakizashi",
        "tanto": "tanto",
        "tantou": "tanto",
        "tachi": "tachi",
        "naginata": "naginata",
        "nagi": "naginata",
        "yari": "yari",
        "ken": "ken",
        "kodachi": "kodachi",
        "刀": "katana",
        "脇差": "wakizashi",
        "短刀": "tanto",
        "太刀": "tachi",
        "薙刀": "naginata",
        "槍": "yari",
        "剣": "ken",
        # fittings
        "tsuba": "tsuba",
        "tuba": "tsuba",
        "fuchi": "fuchi",
        "kashira": "kashira",
        "fuchi-kashira": "fuchi-kashira",
        "fuchikashira": "fuchi-kashira",
        "fuchi kashira": "fuchi-kashira",
        "menuki": "menuki",
        "kozuka": "kozuka",
        "kogatana": "kogatana",
        "kogai": "kogai",
        "koshirae": "koshirae",
        "mitokoromono": "mitokoromono",
        "鍔": "tsuba",
        "小柄": "kozuka",
        "目貫": "menuki",
        "笄": "kogai",
        "縁頭": "fuchi-kashira",
        "拵": "koshirae",
        # armor
        "kabuto": "kabuto",
        "helmet": "helmet",
        "menpo": "menpo",
        "mengu": "mengu",
        "kote": "kote",
        "suneate": "suneate",
        "do": "do",
        "兜": "kabuto",
        "甲冑": "armor",
    }
)

ITEM_TYPE_PHRASES: Final[tuple[str, ...]] = _phrases(
    [
        "縁頭",
        "小柄",
        "目貫",
        "甲冑",
        "fuchi kashira",
        "fuchi-kashira",
    ]
)

# -----------------------------------------------------------------------------
# Signature status
# -----------------------------------------------------------------------------

SIGNATURE_STATUS_TERMS: Final[Mapping[str, str]] = _term_map(
    {
        "signed": "signed",
        "mei": "signed",
        "unsigned": "unsigned",
        "mumei": "unsigned",
        "在銘": "signed",
        "無銘": "unsigned",
    }
)

# -----------------------------------------------------------------------------
# Provinces / traditions
# -----------------------------------------------------------------------------

PROVINCE_TERMS: Final[Mapping[str, str]] = _term_map(
    {
        # gokaden
        "soshu": "Soshu",
        "sagami": "Soshu",
        "bizen": "Bizen",
        "bishu": "Bizen",
        "yamashiro": "Yamashiro",
        "yamato": "Yamato",
        "mino": "Mino",
        "noshu": "Mino",
        # other major provinces
        "hizen": "Hizen",
        "satsuma": "Satsuma",
        "echizen": "Echizen",
        "kaga": "Kaga",
        "owari": "Owari",
        "settsu": "Settsu",
        "chikuzen": "Chikuzen",
        "tosa": "Tosa",
        "omi": "Omi",
        "mutsu": "Mutsu",
        "oshu": "Mutsu",
        "awa": "Awa",
        "bungo": "Bungo",
        "iwami": "Iwami",
        "seki": "Seki",
        "備前": "Bizen",
        "山城": "Yamashiro",
        "大和": "Yamato",
        "相模": "Soshu",
        "美濃": "Mino",
        "肥前": "Hizen",
        "薩摩": "Satsuma",
        "越前": "Echizen",
        "加賀": "Kaga",
        "尾張": "Owari",
        "摂津": "Settsu",
        "筑前": "Chikuzen",
        "土佐": "Tosa",
        "近江": "Omi",
        "陸奥": "Mutsu",
        "阿波": "Awa",
        "豊後": "Bungo",
        "石見": "Iwami",
    }
)

# Canonical province -> values matched against province/school columns.
PROVINCE_VARIANTS: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType(
    {
        "Soshu": ("Soshu", "Sagami"),
        "Bizen": ("Bizen", "Bishu"),
        "Yamashiro": ("Yamashiro",),
        "Yamato": ("Yamato",),
        "Mino": ("Mino", "Noshu"),
        "Hizen": ("Hizen",),
        "Satsuma": ("Satsuma",),
        "Echizen": ("Echizen",),
        "Kaga": ("Kaga",),
        "Owari": ("Owari",),
        "Settsu": ("Settsu",),
        "Chikuzen": ("Chikuzen",),
        "Tosa": ("Tosa",),
        "Omi": ("Omi",),
        "Mutsu": ("Mutsu", "Oshu"),
        "Awa": ("Awa",),
        "Bungo": ("Bungo",),
        "Iwami": ("Iwami",),
        "Seki": ("Seki", "Mino"),
    }
)


def certification_variants(certification: str) -> tuple[str, ...]:
    """Return stored spellings for a canonical certification (itself if unknown)."""
    return CERTIFICATION_VARIANTS.get(certification, (certification,))


def province_variants(province: str) -> tuple[str, ...]:
    """Return column values for a canonical province (itself if unknown)."""
    return PROVINCE_VARIANTS.get(province, (province,))
