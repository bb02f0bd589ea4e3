"""tongwen - Dictionary-driven Chinese script and variant conversion.

Converts text between Simplified and Traditional Chinese and between
regional variants (Taiwan, Hong Kong, Japanese Shinjitai) using OpenCC
dictionaries.

Core concepts:
    - A configuration (e.g. "s2twp") compiles to 1-3 rounds
    - Each round is a greedy longest-match pass over an ordered set of
      dictionaries, with a starter index to skip positions that cannot match
    - Plans are built once per (configuration, punctuation) and shared

Example:
    "鼠标" --s2twp--> round 1 "鼠標" --> round 2 "滑鼠" --> round 3 "滑鼠"

Usage:
    from tongwen import Converter

    converter = Converter.from_directory("./dicts")
    converter.convert("“鼠标”", "s2twp", punctuation=True)   # "「滑鼠」"
    converter.zho_check("汉字")                               # 2 (simplified)
    converter.convert_punctuation("“你好”", "s2t")            # "「你好」"
"""

__version__ = "0.1.0"

from .configs import Config, ConfigError, supported_configs
from .engine import Converter
from .schema import DictEntry, DictionaryError, DictionaryStore

__all__ = [
    "Config",
    "ConfigError",
    "Converter",
    "DictEntry",
    "DictionaryError",
    "DictionaryStore",
    "supported_configs",
]
