"""Dictionary builder module.

Builds the conversion dictionary store:
- From a directory of OpenCC text dictionaries
- Combined JSON output for fast loading
"""

from .store import BuildStats, StoreBuilder, generate_json

__all__ = [
    "BuildStats",
    "StoreBuilder",
    "generate_json",
]
