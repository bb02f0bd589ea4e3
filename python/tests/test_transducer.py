"""Tests for the round transducer."""

import pytest

from tongwen.configs import Config
from tongwen.plan import ConversionPlan, Round
from tongwen.schema import DictEntry
from tongwen.starter import StarterUnion
from tongwen.transducer import apply_plan, convert_round
from tongwen.unions import UnionKey


def make_round(*mappings, key=UnionKey.S2T):
    """Build a Round from plain dicts, in order."""
    entries = tuple(
        DictEntry.from_mapping(f"d{i}", mapping) for i, mapping in enumerate(mappings)
    )
    return Round(union_key=key, dictionaries=entries, union=StarterUnion.build(entries))


class TestConvertRound:
    """Tests for convert_round."""

    def test_longest_match_wins(self):
        """Test a phrase beats its first character."""
        rnd = make_round({"头发": "頭髮"}, {"头": "頭", "发": "發"})
        assert convert_round("头发", rnd) == "頭髮"

    def test_longer_key_in_later_dictionary(self):
        """Test a longer key wins even when it sits in a later dictionary."""
        rnd = make_round({"头": "頭"}, {"头发": "頭髮"})
        assert convert_round("头发", rnd) == "頭髮"

    def test_earlier_dictionary_wins_at_equal_length(self):
        rnd = make_round({"后": "後"}, {"后": "后"})
        assert convert_round("后", rnd) == "後"

    def test_falls_back_to_shorter(self):
        """Test a starter whose long key does not fit the remaining text."""
        rnd = make_round({"头发丝": "頭髮絲"}, {"头": "頭"})
        assert convert_round("头发", rnd) == "頭发"

    def test_unmatched_copied(self):
        rnd = make_round({"汉": "漢"})
        assert convert_round("汉字abc 123", rnd) == "漢字abc 123"

    def test_non_starter_positions_skipped(self):
        rnd = make_round({"长江": "長江"})
        assert convert_round("江长江", rnd) == "江長江"

    def test_starter_without_match(self):
        """Test a starter whose candidates all miss copies one character."""
        rnd = make_round({"长江": "長江"})
        assert convert_round("长城", rnd) == "长城"

    def test_astral_characters(self):
        """Test supplementary-plane characters are single units."""
        rnd = make_round({"𠮶": "其", "𠮶们": "其們"})
        assert convert_round("𠮶们𠮶", rnd) == "其們其"
        assert convert_round("𩸽", rnd) == "𩸽"

    def test_value_may_change_length(self):
        rnd = make_round({"鼠標": "滑鼠", "軟件": "軟體"})
        assert convert_round("鼠標和軟件", rnd) == "滑鼠和軟體"

    def test_empty(self):
        rnd = make_round({"汉": "漢"})
        assert convert_round("", rnd) == ""

    def test_no_rescan_of_output(self):
        """Test replaced text is not scanned again in the same round."""
        rnd = make_round({"a": "ab", "b": "c"})
        assert convert_round("a", rnd) == "ab"


class TestApplyPlan:
    """Tests for running several rounds."""

    def test_rounds_chain(self):
        plan = ConversionPlan(
            config=Config.S2TWP,
            punctuation=False,
            rounds=(
                make_round({"鼠标": "鼠標"}, {"标": "標"}),
                make_round({"鼠標": "滑鼠"}, key=UnionKey.TW_PHRASES_ONLY),
            ),
        )
        assert apply_plan("鼠标", plan) == "滑鼠"

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_input(self, text):
        plan = ConversionPlan(Config.S2T, False, (make_round({"汉": "漢"}),))
        assert apply_plan(text, plan) == ""
