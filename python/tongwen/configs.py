"""Conversion configuration identifiers.

Each configuration names one conversion direction. The tag is the stable,
lowercase string callers pass around (``"s2t"``, ``"tw2sp"``); a ``p``
suffix means region phrase dictionaries are applied as well as character
variants.
"""

from enum import Enum
from typing import Optional


class ConfigError(ValueError):
    """Unknown or empty configuration tag."""


class Config(Enum):
    """Supported conversion configurations."""

    S2T = "s2t"        # Simplified -> Traditional
    T2S = "t2s"        # Traditional -> Simplified
    S2TW = "s2tw"      # Simplified -> Traditional (Taiwan)
    TW2S = "tw2s"      # Traditional (Taiwan) -> Simplified
    S2TWP = "s2twp"    # Simplified -> Traditional (Taiwan, with phrases)
    TW2SP = "tw2sp"    # Traditional (Taiwan, with phrases) -> Simplified
    S2HK = "s2hk"      # Simplified -> Traditional (Hong Kong)
    HK2S = "hk2s"      # Traditional (Hong Kong) -> Simplified
    T2TW = "t2tw"      # Traditional -> Traditional (Taiwan)
    T2TWP = "t2twp"    # Traditional -> Traditional (Taiwan, with phrases)
    TW2T = "tw2t"      # Traditional (Taiwan) -> Traditional
    TW2TP = "tw2tp"    # Traditional (Taiwan, with phrases) -> Traditional
    T2HK = "t2hk"      # Traditional -> Traditional (Hong Kong)
    HK2T = "hk2t"      # Traditional (Hong Kong) -> Traditional
    T2JP = "t2jp"      # Traditional -> Japanese Shinjitai
    JP2T = "jp2t"      # Japanese Shinjitai -> Traditional

    @classmethod
    def try_parse(cls, value: Optional[str]) -> Optional["Config"]:
        """Parse a tag case-insensitively; None if it is not a known config."""
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        trimmed = value.strip().lower()
        if not trimmed:
            return None
        try:
            return cls(trimmed)
        except ValueError:
            return None

    @classmethod
    def from_str(cls, value: Optional[str]) -> "Config":
        """Parse a tag case-insensitively.

        Args:
            value: Tag such as "s2t", "S2TWP" or " tw2sp ".

        Returns:
            Matching Config.

        Raises:
            ConfigError: If value is None, empty or unknown.
        """
        if value is None or not str(value).strip():
            raise ConfigError("Config string cannot be empty")
        config = cls.try_parse(value)
        if config is None:
            raise ConfigError(
                f"Unknown config: {value}. Available: {supported_configs()}"
            )
        return config

    @property
    def targets_simplified(self) -> bool:
        """Whether the output uses simplified-family punctuation."""
        return self in _SIMPLIFIED_TARGETS

    def __str__(self) -> str:
        return self.value


_SIMPLIFIED_TARGETS = frozenset({Config.T2S, Config.TW2S, Config.TW2SP, Config.HK2S})


def supported_configs() -> list[str]:
    """Return all configuration tags in declaration order."""
    return [c.value for c in Config]


def canonical_name(value: str) -> str:
    """Return the lowercase tag for value, raising ConfigError if unknown."""
    return Config.from_str(value).value
