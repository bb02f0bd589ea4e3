"""Round compositions shared between conversion configurations.

A UnionKey names one ordered combination of dictionary slots. Several
configurations reuse the same composition (every simplified -> traditional
first round is ``S2T``), so the starter index for a composition is built once
and cached under its key.
"""

from enum import Enum


class UnionKey(Enum):
    """Identifier of one round composition."""

    # Simplified <-> Traditional
    S2T = "S2T"
    S2T_PUNCT = "S2T_PUNCT"
    T2S = "T2S"
    T2S_PUNCT = "T2S_PUNCT"

    # Taiwan
    TW_PHRASES_ONLY = "TwPhrasesOnly"
    TW_VARIANTS_ONLY = "TwVariantsOnly"
    TW_PHRASES_REV_ONLY = "TwPhrasesRevOnly"
    TW_REV_PAIR = "TwRevPair"
    TW2SP_R1_TW_REV_TRIPLE = "Tw2SpR1TwRevTriple"

    # Hong Kong
    HK_VARIANTS_ONLY = "HkVariantsOnly"
    HK_REV_PAIR = "HkRevPair"

    # Japan
    JP_VARIANTS_ONLY = "JpVariantsOnly"
    JP_REV_TRIPLE = "JpRevTriple"


# Slot order is the lookup priority at equal match length.
UNION_SLOTS: dict[UnionKey, tuple[str, ...]] = {
    UnionKey.S2T: ("st_phrases", "st_characters"),
    UnionKey.S2T_PUNCT: ("st_phrases", "st_characters", "st_punctuations"),
    UnionKey.T2S: ("ts_phrases", "ts_characters"),
    UnionKey.T2S_PUNCT: ("ts_phrases", "ts_characters", "ts_punctuations"),
    UnionKey.TW_PHRASES_ONLY: ("tw_phrases",),
    UnionKey.TW_VARIANTS_ONLY: ("tw_variants",),
    UnionKey.TW_PHRASES_REV_ONLY: ("tw_phrases_rev",),
    UnionKey.TW_REV_PAIR: ("tw_variants_rev_phrases", "tw_variants_rev"),
    UnionKey.TW2SP_R1_TW_REV_TRIPLE: (
        "tw_phrases_rev",
        "tw_variants_rev_phrases",
        "tw_variants_rev",
    ),
    UnionKey.HK_VARIANTS_ONLY: ("hk_variants",),
    UnionKey.HK_REV_PAIR: ("hk_variants_rev_phrases", "hk_variants_rev"),
    UnionKey.JP_VARIANTS_ONLY: ("jp_variants",),
    UnionKey.JP_REV_TRIPLE: ("jps_phrases", "jps_characters", "jp_variants_rev"),
}
