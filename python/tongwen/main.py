"""tongwen CLI - Chinese script and variant conversion.

Usage:
    python -m tongwen.main convert -c s2twp -i input.txt -o output.txt --punct
    python -m tongwen.main convert --list-configs
    python -m tongwen.main detect -i input.txt
    python -m tongwen.main dictgen --dict-dir dicts -o dictionary_maxlength.json
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import config as cfg
from .builder import generate_json
from .configs import Config, supported_configs
from .engine import Converter, ZHO_SIMPLIFIED, ZHO_TRADITIONAL, ZHO_UNKNOWN

ZHO_LABELS = {
    ZHO_UNKNOWN: "unknown",
    ZHO_TRADITIONAL: "traditional",
    ZHO_SIMPLIFIED: "simplified",
}


def _read_input(path: Optional[Path], encoding: str) -> str:
    if path is not None:
        return path.read_text(encoding=encoding)
    if sys.stdin.isatty():
        print("Input text to convert, <Ctrl+D> (Unix) <Ctrl+Z> (Windows) to submit:",
              file=sys.stderr)
    return sys.stdin.buffer.read().decode(encoding)


def _write_output(path: Optional[Path], text: str, encoding: str) -> None:
    if path is not None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding=encoding)
        return
    sys.stdout.buffer.write(text.encode(encoding))
    sys.stdout.flush()


def _load_converter(args: argparse.Namespace) -> Converter:
    return Converter.load(dict_dir=args.dict_dir, dict_json=args.dict_json)


def cmd_convert(args: argparse.Namespace) -> int:
    """Convert a file or stdin."""
    if args.list_configs:
        print("Available configurations:")
        for name in supported_configs():
            print(f"  {name}")
        return 0

    config = Config.from_str(args.config)
    converter = _load_converter(args)

    text = _read_input(args.input, args.in_enc)
    result = converter.convert(text, config, args.punct)
    _write_output(args.output, result, args.out_enc)

    in_from = str(args.input) if args.input else "<stdin>"
    out_to = str(args.output) if args.output else "stdout"
    print(f"Conversion completed ({config}): {in_from} -> {out_to}", file=sys.stderr)
    return 0


def cmd_detect(args: argparse.Namespace) -> int:
    """Report whether the input reads as traditional or simplified."""
    converter = _load_converter(args)
    text = _read_input(args.input, args.in_enc)
    code = converter.zho_check(text)
    print(f"{code} ({ZHO_LABELS[code]})")
    return 0


def cmd_dictgen(args: argparse.Namespace) -> int:
    """Generate the combined JSON dictionary."""
    output = args.output.resolve()

    print("=" * 60)
    print("tongwen - Dictionary Generation")
    print("=" * 60)
    print(f"Source: {args.dict_dir}")
    print(f"Output: {output}")
    print()

    stats = generate_json(args.dict_dir, output)

    print(f"  Total entries: {stats.total_entries:,}")
    print(f"  Files read: {len(stats.files_read)}")
    for slot, count in stats.by_slot.items():
        print(f"    {slot}: {count:,} (max {stats.max_lengths[slot]})")
    if stats.fallbacks:
        print(f"  Built-in punctuation used for: {', '.join(stats.fallbacks)}")
    if stats.errors:
        print(f"  Malformed lines skipped: {len(stats.errors)}")

    print("\n" + "=" * 60)
    print(f"Dictionary saved in JSON format at: {output}")
    print("=" * 60)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="tongwen",
        description="tongwen - Chinese script and variant conversion",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=cfg.default_verbose(),
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    dict_options = argparse.ArgumentParser(add_help=False)
    dict_options.add_argument(
        "--dict-dir",
        type=Path,
        default=Path(cfg.default_dict_dir()),
        help="Directory of OpenCC text dictionaries",
    )
    dict_options.add_argument(
        "--dict-json",
        type=Path,
        default=Path(cfg.default_dict_json()),
        help="Combined JSON dictionary (used when it exists)",
    )
    dict_options.add_argument(
        "--in-enc",
        type=str,
        default=cfg.default_in_encoding(),
        help="Input encoding (default: utf-8)",
    )

    p_convert = subparsers.add_parser(
        "convert", parents=[dict_options], help="Convert text"
    )
    p_convert.add_argument(
        "--config",
        "-c",
        type=str,
        default=cfg.default_config(),
        help=f"Conversion configuration (default: {cfg.default_config()})",
    )
    p_convert.add_argument("--input", "-i", type=Path, help="Input file (default: stdin)")
    p_convert.add_argument("--output", "-o", type=Path, help="Output file (default: stdout)")
    p_convert.add_argument(
        "--punct",
        "-p",
        action="store_true",
        default=cfg.default_punctuation(),
        help="Also convert punctuation",
    )
    p_convert.add_argument(
        "--out-enc",
        type=str,
        default=cfg.default_out_encoding(),
        help="Output encoding (default: utf-8)",
    )
    p_convert.add_argument(
        "--list-configs",
        action="store_true",
        help="List all supported conversion configurations",
    )
    p_convert.set_defaults(func=cmd_convert)

    p_detect = subparsers.add_parser(
        "detect", parents=[dict_options], help="Detect traditional or simplified text"
    )
    p_detect.add_argument("--input", "-i", type=Path, help="Input file (default: stdin)")
    p_detect.set_defaults(func=cmd_detect)

    p_dictgen = subparsers.add_parser("dictgen", help="Generate the JSON dictionary")
    p_dictgen.add_argument(
        "--dict-dir",
        type=Path,
        default=Path(cfg.default_dict_dir()),
        help="Directory of OpenCC text dictionaries",
    )
    p_dictgen.add_argument(
        "--output",
        "-o",
        type=Path,
        default=Path("dictionary_maxlength.json"),
        help="Output filename (default: dictionary_maxlength.json)",
    )
    p_dictgen.set_defaults(func=cmd_dictgen)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
