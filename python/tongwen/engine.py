"""Conversion facade.

A Converter owns one DictionaryStore and one PlanCache. Create it once at
startup and pass it to whatever needs conversions; every method is safe to
call from several threads at once.

Usage:
    from tongwen.engine import Converter

    converter = Converter.load()
    converter.convert("汉字", "s2t")               # "漢字"
    converter.convert("“鼠标”", "s2twp", True)     # "「滑鼠」"
    converter.zho_check("漢字")                    # 1 (traditional)
"""

from pathlib import Path
from typing import Optional
import logging
import re

from . import config as cfg
from .builder import StoreBuilder
from .configs import Config
from .plan import ConversionPlan, PlanCache
from .punct import translate_punctuation
from .schema import DictionaryStore
from .transducer import apply_plan

logger = logging.getLogger(__name__)

# ASCII punctuation, whitespace, letters and digits (and 著, which reads
# the same in both scripts) carry no script signal.
STRIP_PATTERN = re.compile(r"[!-/:-@\[-`{-~\t\n\v\f\r 0-9A-Za-z_著]")

ZHO_CHECK_SAMPLE = 50

ZHO_UNKNOWN = 0
ZHO_TRADITIONAL = 1
ZHO_SIMPLIFIED = 2


class Converter:
    """Chinese script/variant converter backed by a shared dictionary store."""

    def __init__(self, store: DictionaryStore):
        """Initialize converter.

        Args:
            store: Loaded dictionaries; treated as read-only from now on.
        """
        self.store = store
        self.plans = PlanCache(store)

    @classmethod
    def from_directory(cls, dict_dir: Path | str, encoding: str = "utf-8") -> "Converter":
        """Create from a directory of OpenCC text dictionaries."""
        store, stats = StoreBuilder(dict_dir, encoding=encoding).build()
        if stats.errors:
            logger.warning("%d malformed dictionary lines skipped", len(stats.errors))
        return cls(store)

    @classmethod
    def from_json(cls, filepath: Path | str) -> "Converter":
        """Create from a combined dictionary_maxlength.json file."""
        return cls(DictionaryStore.load(filepath))

    @classmethod
    def load(
        cls,
        dict_dir: Optional[Path | str] = None,
        dict_json: Optional[Path | str] = None,
    ) -> "Converter":
        """Create from the JSON file if it exists, else the text directory.

        Args:
            dict_dir: Text dictionary directory (default from config).
            dict_json: Combined JSON file (default from config).

        Returns:
            Converter.
        """
        json_path = Path(dict_json or cfg.default_dict_json())
        if json_path.is_file():
            return cls.from_json(json_path)
        return cls.from_directory(dict_dir or cfg.default_dict_dir())

    def get_plan(self, config: Config | str, punctuation: bool = False) -> ConversionPlan:
        return self.plans.get_plan(config, punctuation)

    def clear_cache(self) -> None:
        """Drop cached plans (e.g. after swapping dictionaries in tests)."""
        self.plans.clear()

    def convert(self, text: str, config: Config | str, punctuation: bool = False) -> str:
        """Convert text with a named configuration.

        Args:
            text: Any string, including empty.
            config: Config or tag such as "s2twp".
            punctuation: Also convert quote-style punctuation.

        Returns:
            Converted text.

        Raises:
            ConfigError: If the configuration is unknown.
        """
        plan = self.plans.get_plan(config, punctuation)
        return apply_plan(text, plan)

    def zho_check(self, text: str) -> int:
        """Guess the script of text.

        Returns:
            1 if traditional, 2 if simplified, 0 if unknown or mixed.
        """
        if not text:
            return ZHO_UNKNOWN

        sample = STRIP_PATTERN.sub("", text)[:ZHO_CHECK_SAMPLE]
        if not sample:
            return ZHO_UNKNOWN

        if self.convert(sample, Config.T2S) != sample:
            return ZHO_TRADITIONAL
        if self.convert(sample, Config.S2T) != sample:
            return ZHO_SIMPLIFIED
        return ZHO_UNKNOWN

    def convert_punctuation(self, text: str, config: Config | str) -> str:
        """Remap quote-style punctuation toward the config's target family."""
        config = Config.from_str(config)
        return translate_punctuation(text, to_traditional=not config.targets_simplified)
