"""Configuration loader for tongwen.

Loads defaults from config.json at project root, with hardcoded fallbacks.

Example config.json:
    {
        "defaults": {
            "config": "s2twp",
            "punctuation": true,
            "dict_dir": "dicts"
        }
    }
"""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "config": "s2t",
    "punctuation": False,
    "dict_dir": "dicts",
    "dict_json": "dicts/dictionary_maxlength.json",
    "in_encoding": "utf-8",
    "out_encoding": "utf-8",
    "verbose": False,
}

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Find config.json by walking up from current file."""
    paths = [
        Path(__file__).parent.parent.parent / "config.json",  # python/tongwen -> root
        Path.cwd() / "config.json",
        Path.cwd().parent / "config.json",
    ]
    for path in paths:
        if path.exists():
            return path
    return None


def load() -> dict[str, Any]:
    """Load configuration from config.json or use fallbacks."""
    global _config
    if _config is not None:
        return _config

    config_path = _find_config()
    if config_path:
        try:
            with open(config_path, encoding="utf-8") as f:
                _config = json.load(f)
                return _config
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable config %s: %s", config_path, e)

    # Fallback
    _config = {"defaults": dict(FALLBACK_DEFAULTS)}
    return _config


def reset() -> None:
    """Forget the loaded configuration so the next load() re-reads it."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


# Convenience accessors
def default_config() -> str:
    return get_default("config", FALLBACK_DEFAULTS["config"])


def default_punctuation() -> bool:
    return bool(get_default("punctuation", FALLBACK_DEFAULTS["punctuation"]))


def default_dict_dir() -> str:
    return get_default("dict_dir", FALLBACK_DEFAULTS["dict_dir"])


def default_dict_json() -> str:
    return get_default("dict_json", FALLBACK_DEFAULTS["dict_json"])


def default_in_encoding() -> str:
    return get_default("in_encoding", FALLBACK_DEFAULTS["in_encoding"])


def default_out_encoding() -> str:
    return get_default("out_encoding", FALLBACK_DEFAULTS["out_encoding"])


def default_verbose() -> bool:
    return bool(get_default("verbose", FALLBACK_DEFAULTS["verbose"]))
