"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from tongwen import config as cfg
from tongwen.builder import StoreBuilder
from tongwen.engine import Converter

# Small OpenCC-format dictionaries: file name -> content
SAMPLE_DICTS = {
    "STCharacters.txt": """汉\t漢
长\t長 镸
头\t頭
发\t發 髮
标\t標
里\t裏 裡 里
后\t後 后
卫\t衛
软\t軟
""",
    "STPhrases.txt": """头发\t頭髮
长江\t長江
鼠标\t鼠標
""",
    "TSCharacters.txt": """漢\t汉
長\t长
頭\t头
發\t发
髮\t发
標\t标
裏\t里
後\t后
衛\t卫
軟\t软
""",
    "TSPhrases.txt": """頭髮\t头发
""",
    "TWPhrases.txt": """鼠標\t滑鼠
軟件\t軟體
""",
    "TWPhrasesRev.txt": """滑鼠\t鼠標
軟體\t軟件
""",
    "TWVariants.txt": """裏\t裡
""",
    "TWVariantsRev.txt": """裡\t裏
""",
    "TWVariantsRevPhrases.txt": """一口吃個\t一口喫個
""",
    "HKVariants.txt": """衛\t衞
""",
    "HKVariantsRev.txt": """衞\t衛
""",
    "HKVariantsRevPhrases.txt": """衞生\t衛生
""",
    "JPShinjitaiCharacters.txt": """発\t發
""",
    "JPShinjitaiPhrases.txt": """発表\t發表
""",
    "JPVariants.txt": """發\t発
國\t国
""",
    "JPVariantsRev.txt": """発\t發
国\t國
""",
}


def write_dicts(directory: Path, dicts: dict[str, str] = SAMPLE_DICTS) -> Path:
    """Write dictionary files into directory."""
    directory.mkdir(parents=True, exist_ok=True)
    for filename, content in dicts.items():
        (directory / filename).write_text(content, encoding="utf-8")
    return directory


@pytest.fixture
def dict_dir(tmp_path):
    """Directory with the sample dictionaries (no punctuation files)."""
    return write_dicts(tmp_path / "dicts")


@pytest.fixture
def store(dict_dir):
    """DictionaryStore built from the sample dictionaries."""
    store, _ = StoreBuilder(dict_dir).build()
    return store


@pytest.fixture
def converter(store):
    """Converter over the sample store."""
    return Converter(store)


@pytest.fixture(autouse=True)
def fresh_config():
    """Make every test start from an unloaded configuration."""
    cfg.reset()
    yield
    cfg.reset()
