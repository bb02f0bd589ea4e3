"""Tests for the dictionary store builder."""

import json

import pytest

from tongwen.builder import StoreBuilder, generate_json
from tongwen.punct import PUNCT_T2S_MAP

from conftest import SAMPLE_DICTS, write_dicts


class TestStoreBuilder:
    """Tests for StoreBuilder."""

    def test_build(self, dict_dir):
        store, stats = StoreBuilder(dict_dir).build()

        assert stats.by_slot["st_phrases"] == 3
        assert stats.max_lengths["tw_variants_rev_phrases"] == 4
        assert len(stats.files_read) == len(SAMPLE_DICTS)
        assert stats.total_entries == sum(stats.by_slot.values())
        assert stats.errors == []
        assert store.get("st_characters").mapping["发"] == "發"

    def test_punctuation_fallback(self, dict_dir):
        store, stats = StoreBuilder(dict_dir).build()
        assert sorted(stats.fallbacks) == ["st_punctuations", "ts_punctuations"]
        assert store.get("ts_punctuations").mapping == PUNCT_T2S_MAP

    def test_punctuation_file_used_when_present(self, dict_dir):
        (dict_dir / "STPunctuations.txt").write_text("“\t「\n", encoding="utf-8")
        store, stats = StoreBuilder(dict_dir).build()
        assert stats.fallbacks == ["ts_punctuations"]
        assert store.get("st_punctuations").mapping == {"“": "「"}

    def test_missing_required_file(self, dict_dir):
        (dict_dir / "HKVariants.txt").unlink()
        builder = StoreBuilder(dict_dir)
        assert builder.missing_files() == ["HKVariants.txt"]
        with pytest.raises(FileNotFoundError, match="HKVariants.txt"):
            builder.build()

    def test_malformed_lines_collected(self, tmp_path):
        dicts = dict(SAMPLE_DICTS)
        dicts["TWVariants.txt"] = "裏\t裡\n孤\n"
        store, stats = StoreBuilder(write_dicts(tmp_path / "d", dicts)).build()
        assert len(stats.errors) == 1
        assert store.get("tw_variants").mapping == {"裏": "裡"}

    def test_unknown_ingestor(self, dict_dir):
        with pytest.raises(ValueError):
            StoreBuilder(dict_dir, ingestor="nope")


def test_generate_json(dict_dir, tmp_path):
    output = tmp_path / "out" / "dictionary_maxlength.json"
    stats = generate_json(dict_dir, output)

    data = json.loads(output.read_text(encoding="utf-8"))
    assert len(data) == 18
    assert data["jps_phrases"] == [{"発表": "發表"}, 2]
    assert stats.total_entries > 0
