"""Tests for the command line interface."""

import io
import json
import sys

import pytest

from tongwen import config as cfg
from tongwen.main import build_parser, main


@pytest.fixture(autouse=True)
def no_config_file(monkeypatch):
    """Ignore any config.json on the machine running the tests."""
    monkeypatch.setattr(cfg, "_find_config", lambda: None)


def dict_args(dict_dir, tmp_path):
    return ["--dict-dir", str(dict_dir), "--dict-json", str(tmp_path / "none.json")]


class TestConvertCommand:
    """Tests for the convert subcommand."""

    def test_file_to_file(self, dict_dir, tmp_path, capsys):
        src = tmp_path / "in.txt"
        src.write_text("“鼠标”和软件\n", encoding="utf-8")
        dst = tmp_path / "out" / "out.txt"

        code = main(["convert", "-c", "s2twp", "-p", "-i", str(src), "-o", str(dst),
                     *dict_args(dict_dir, tmp_path)])

        assert code == 0
        assert dst.read_text(encoding="utf-8") == "「滑鼠」和軟體\n"
        assert "Conversion completed (s2twp)" in capsys.readouterr().err

    def test_stdin_to_stdout(self, dict_dir, tmp_path, monkeypatch, capsysbinary):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO("头发".encode("utf-8"))))
        code = main(["convert", "-c", "S2T", *dict_args(dict_dir, tmp_path)])

        assert code == 0
        assert capsysbinary.readouterr().out.decode("utf-8") == "頭髮"

    def test_encodings(self, dict_dir, tmp_path):
        src = tmp_path / "in.txt"
        src.write_bytes("漢字".encode("big5"))
        dst = tmp_path / "out.txt"

        code = main(["convert", "-c", "t2s", "-i", str(src), "-o", str(dst),
                     "--in-enc", "big5", "--out-enc", "gb2312",
                     *dict_args(dict_dir, tmp_path)])

        assert code == 0
        assert dst.read_bytes().decode("gb2312") == "汉字"

    def test_uses_json_when_present(self, store, tmp_path):
        combined = tmp_path / "combined.json"
        store.save(combined)
        src = tmp_path / "in.txt"
        src.write_text("汉", encoding="utf-8")
        dst = tmp_path / "out.txt"

        code = main(["convert", "-i", str(src), "-o", str(dst),
                     "--dict-dir", str(tmp_path / "no-dicts"), "--dict-json", str(combined)])

        assert code == 0
        assert dst.read_text(encoding="utf-8") == "漢"

    def test_list_configs(self, capsys):
        assert main(["convert", "--list-configs"]) == 0
        out = capsys.readouterr().out
        assert "Available configurations:" in out
        assert "  tw2sp" in out

    def test_unknown_config(self, dict_dir, tmp_path, capsys):
        code = main(["convert", "-c", "s2x", *dict_args(dict_dir, tmp_path)])
        assert code == 1
        assert "Unknown config: s2x" in capsys.readouterr().err

    def test_missing_dictionaries(self, tmp_path, capsys):
        src = tmp_path / "in.txt"
        src.write_text("汉", encoding="utf-8")
        code = main(["convert", "-i", str(src), *dict_args(tmp_path / "empty", tmp_path)])
        assert code == 1
        assert "Error:" in capsys.readouterr().err


class TestDetectCommand:
    """Tests for the detect subcommand."""

    @pytest.mark.parametrize("text, expected", [
        ("汉字", "2 (simplified)"),
        ("漢字", "1 (traditional)"),
        ("Hello123!", "0 (unknown)"),
    ])
    def test_detect(self, dict_dir, tmp_path, capsys, text, expected):
        src = tmp_path / "in.txt"
        src.write_text(text, encoding="utf-8")
        assert main(["detect", "-i", str(src), *dict_args(dict_dir, tmp_path)]) == 0
        assert capsys.readouterr().out.strip() == expected


class TestDictgenCommand:
    """Tests for the dictgen subcommand."""

    def test_dictgen(self, dict_dir, tmp_path, capsys):
        output = tmp_path / "dictionary_maxlength.json"
        assert main(["dictgen", "--dict-dir", str(dict_dir), "-o", str(output)]) == 0

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["st_characters"][1] == 1
        out = capsys.readouterr().out
        assert "Dictionary saved in JSON format" in out
        assert "st_punctuations" in out

    def test_dictgen_missing_dir(self, tmp_path, capsys):
        code = main(["dictgen", "--dict-dir", str(tmp_path / "nope"),
                     "-o", str(tmp_path / "x.json")])
        assert code == 1


class TestParser:
    """Tests for argument defaults."""

    def test_defaults_from_config(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        path.write_text('{"defaults": {"config": "tw2sp", "punctuation": true}}',
                        encoding="utf-8")
        monkeypatch.setattr(cfg, "_find_config", lambda: path)

        args = build_parser().parse_args(["convert"])
        assert args.config == "tw2sp"
        assert args.punct is True
        assert args.out_enc == "utf-8"

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_dict_options_from_config(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"defaults": {
            "verbose": True,
            "dict_dir": "/opt/opencc",
            "dict_json": "/opt/opencc/all.json",
            "in_encoding": "big5",
        }}), encoding="utf-8")
        monkeypatch.setattr(cfg, "_find_config", lambda: path)

        args = build_parser().parse_args(["detect"])
        assert args.verbose is True
        assert str(args.dict_dir) == "/opt/opencc"
        assert str(args.dict_json) == "/opt/opencc/all.json"
        assert args.in_enc == "big5"
