"""Conversion plans and the plan cache.

A conversion plan is the ordered list of rounds (1 to 3) that one
(configuration, punctuation) pair runs. Which dictionaries make up each round
is pure data: PLAN_TABLE maps every configuration to its round compositions,
and unions.UNION_SLOTS maps every composition to its ordered dictionary
slots. Building a plan is therefore a table lookup plus a starter-index fetch
from the store.

Punctuation dictionaries are only ever spliced into the plain simplified <->
traditional rounds, by switching the round to its ``*_PUNCT`` composition.

Usage:
    cache = PlanCache(store)
    plan = cache.get_plan(Config.S2TWP, punctuation=True)
    for rnd in plan.rounds:
        ...
"""

from dataclasses import dataclass
from typing import Optional
import logging

from .configs import Config, ConfigError
from .schema import DictEntry, DictionaryStore
from .starter import StarterUnion
from .unions import UnionKey

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundSpec:
    """Round composition, with its punctuation variant if it has one."""

    base: UnionKey
    punct: Optional[UnionKey] = None

    def key_for(self, punctuation: bool) -> UnionKey:
        if punctuation and self.punct is not None:
            return self.punct
        return self.base


_S2T = RoundSpec(UnionKey.S2T, UnionKey.S2T_PUNCT)
_T2S = RoundSpec(UnionKey.T2S, UnionKey.T2S_PUNCT)
_TW_PHRASES = RoundSpec(UnionKey.TW_PHRASES_ONLY)
_TW_VARIANTS = RoundSpec(UnionKey.TW_VARIANTS_ONLY)
_TW_PHRASES_REV = RoundSpec(UnionKey.TW_PHRASES_REV_ONLY)
_TW_REV_PAIR = RoundSpec(UnionKey.TW_REV_PAIR)
_TW_REV_TRIPLE = RoundSpec(UnionKey.TW2SP_R1_TW_REV_TRIPLE)
_HK_VARIANTS = RoundSpec(UnionKey.HK_VARIANTS_ONLY)
_HK_REV_PAIR = RoundSpec(UnionKey.HK_REV_PAIR)
_JP_VARIANTS = RoundSpec(UnionKey.JP_VARIANTS_ONLY)
_JP_REV_TRIPLE = RoundSpec(UnionKey.JP_REV_TRIPLE)

PLAN_TABLE: dict[Config, tuple[RoundSpec, ...]] = {
    Config.S2T: (_S2T,),
    Config.T2S: (_T2S,),
    Config.S2TW: (_S2T, _TW_VARIANTS),
    Config.TW2S: (_TW_REV_PAIR, _T2S),
    Config.S2TWP: (_S2T, _TW_PHRASES, _TW_VARIANTS),
    Config.TW2SP: (_TW_REV_TRIPLE, _T2S),
    Config.S2HK: (_S2T, _HK_VARIANTS),
    Config.HK2S: (_HK_REV_PAIR, _T2S),
    Config.T2TW: (_TW_VARIANTS,),
    Config.T2TWP: (_TW_PHRASES, _TW_VARIANTS),
    Config.TW2T: (_TW_REV_PAIR,),
    Config.TW2TP: (_TW_REV_PAIR, _TW_PHRASES_REV),
    Config.T2HK: (_HK_VARIANTS,),
    Config.HK2T: (_HK_REV_PAIR,),
    Config.T2JP: (_JP_VARIANTS,),
    Config.JP2T: (_JP_REV_TRIPLE,),
}


@dataclass(frozen=True)
class Round:
    """One left-to-right pass: ordered dictionaries plus their starter index."""

    union_key: UnionKey
    dictionaries: tuple[DictEntry, ...]
    union: StarterUnion


@dataclass(frozen=True)
class ConversionPlan:
    """Ordered rounds for one (configuration, punctuation) pair."""

    config: Config
    punctuation: bool
    rounds: tuple[Round, ...]

    @property
    def union_keys(self) -> tuple[UnionKey, ...]:
        return tuple(rnd.union_key for rnd in self.rounds)


@dataclass(frozen=True)
class PlanKey:
    """Cache key: configuration plus punctuation flag."""

    config: Config
    punctuation: bool

    def __str__(self) -> str:
        return f"{self.config.value}{'_punct' if self.punctuation else ''}"


def build_plan(store: DictionaryStore, config: Config | str, punctuation: bool) -> ConversionPlan:
    """Build the plan for a configuration from the static tables.

    Args:
        store: Dictionary store supplying entries and starter indexes.
        config: Config or tag string.
        punctuation: Whether to splice in punctuation dictionaries.

    Returns:
        ConversionPlan.

    Raises:
        ConfigError: If the configuration is unknown.
    """
    config = Config.from_str(config)
    specs = PLAN_TABLE.get(config)
    if specs is None:
        raise ConfigError(f"Unhandled config: {config}")

    rounds = []
    for spec in specs:
        key = spec.key_for(punctuation)
        rounds.append(Round(
            union_key=key,
            dictionaries=store.entries_for(key),
            union=store.union_for(key),
        ))

    return ConversionPlan(config=config, punctuation=bool(punctuation), rounds=tuple(rounds))


class PlanCache:
    """Process-lifetime memo of ConversionPlans keyed by PlanKey.

    This is shared mutable state. Lookups and inserts go through a plain
    dict without a lock: a miss builds the plan and inserts it with
    ``setdefault``, so concurrent first calls for one key may build twice but
    always converge on one cached plan. Plans are immutable, so a plan a
    caller already holds stays valid across clear().
    """

    def __init__(self, store: DictionaryStore):
        """Initialize cache.

        Args:
            store: Dictionary store the plans are built from.
        """
        self.store = store
        self._plans: dict[PlanKey, ConversionPlan] = {}

    def get_plan(self, config: Config | str, punctuation: bool = False) -> ConversionPlan:
        """Get the plan for (config, punctuation), building it on first use."""
        key = PlanKey(Config.from_str(config), bool(punctuation))
        plan = self._plans.get(key)
        if plan is None:
            plan = build_plan(self.store, key.config, key.punctuation)
            plan = self._plans.setdefault(key, plan)
            logger.debug("Built plan %s: %s", key, [k.value for k in plan.union_keys])
        return plan

    def clear(self) -> None:
        """Drop all cached plans. Starter indexes on the store are kept."""
        self._plans.clear()

    def __len__(self) -> int:
        return len(self._plans)

    def __contains__(self, key: PlanKey) -> bool:
        return key in self._plans
