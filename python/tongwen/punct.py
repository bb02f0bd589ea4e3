"""Structural character classifiers for CJK text.

Fixed lookup tables for sentence terminators, dialog quotes, brackets,
comma-like separators and visual divider lines, plus small scanners that
locate the first/last/previous non-whitespace character of a line.

These are consumed by punctuation remapping and by downstream paragraph
reflow logic. Nothing here touches the dictionary engine.

Example:
    >>> has_unclosed_bracket("（abc")
    True
    >>> is_box_drawing_line("──────")
    True
    >>> last_non_whitespace("你好。  ")
    ScanResult(found=True, index=2, char='。')
"""

from dataclasses import dataclass
from typing import Optional

# Sentence-ending punctuation (CJK plus a few ASCII equivalents)
CJK_PUNCT_END: frozenset[str] = frozenset(
    # Standard CJK sentence endings
    "。！？；：…—"
    # Closing quotes
    "”’」』"
    # Full-width / CJK closing brackets
    "）】》〗〕］｝"
    # Angle brackets
    "＞〉>"
    # ASCII endings
    ".):!?"
)

STRONG_SENTENCE_END: frozenset[str] = frozenset("。！？!?")

# Order and pairing of openers and closers must stay aligned.
DIALOG_OPENERS = "“‘「『﹁﹃"
DIALOG_CLOSERS = "”’」』﹂﹄"

DIALOG_PAIRS: dict[str, str] = dict(zip(DIALOG_OPENERS, DIALOG_CLOSERS))

COMMA_LIKE: frozenset[str] = frozenset("，,、")

METADATA_SEPARATORS: frozenset[str] = frozenset((
    "：",      # full-width colon
    ":",       # ASCII colon
    "\u3000",  # ideographic space
    "·",       # middle dot
    "・",      # katakana middle dot
))

BRACKET_PAIRS: dict[str, str] = {
    # Parentheses
    "（": "）", "(": ")",
    # Square brackets
    "[": "]", "［": "］",
    # Curly braces
    "{": "}", "｛": "｝",
    # Angle brackets
    "<": ">", "＜": "＞", "〈": "〉",
    # CJK brackets
    "【": "】", "《": "》", "〔": "〕", "〖": "〗",
}

_OPEN_BRACKETS = frozenset(BRACKET_PAIRS)
_CLOSE_BRACKETS = frozenset(BRACKET_PAIRS.values())

# Unicode box drawing block
BOX_DRAWING_RANGE = ("─", "╿")
DIVIDER_ASCII: frozenset[str] = frozenset("-=_~～")
DIVIDER_STARS: frozenset[str] = frozenset("*＊★☆")
DIVIDER_MIN_LENGTH = 3

# Quote-style punctuation remapping (simplified-style <-> traditional-style)
PUNCT_S2T_MAP: dict[str, str] = {
    "“": "「",
    "”": "」",
    "‘": "『",
    "’": "』",
}
PUNCT_T2S_MAP: dict[str, str] = {v: k for k, v in PUNCT_S2T_MAP.items()}

PUNCT_S2T_TABLE = str.maketrans(PUNCT_S2T_MAP)
PUNCT_T2S_TABLE = str.maketrans(PUNCT_T2S_MAP)


@dataclass(frozen=True)
class ScanResult:
    """Outcome of a non-whitespace scan.

    Falsy when nothing was found, so callers can write
    ``if (hit := last_non_whitespace(line)): ...``.
    """

    found: bool
    index: int = -1
    char: str = ""

    def __bool__(self) -> bool:
        return self.found


NOT_FOUND = ScanResult(found=False)


def is_cjk_punct_end(ch: str) -> bool:
    return ch in CJK_PUNCT_END


def is_strong_sentence_end(ch: str) -> bool:
    return ch in STRONG_SENTENCE_END


def is_dialog_opener(ch: str) -> bool:
    return len(ch) == 1 and ch in DIALOG_OPENERS


def is_dialog_closer(ch: str) -> bool:
    return len(ch) == 1 and ch in DIALOG_CLOSERS


def is_quote_closer(ch: str) -> bool:
    return is_dialog_closer(ch)


def is_comma_like(ch: str) -> bool:
    return ch in COMMA_LIKE


def is_metadata_separator(ch: str) -> bool:
    return ch in METADATA_SEPARATORS


def is_bracket_opener(ch: str) -> bool:
    return ch in _OPEN_BRACKETS


def is_bracket_closer(ch: str) -> bool:
    return ch in _CLOSE_BRACKETS


def closing_bracket(open_ch: str) -> Optional[str]:
    """Return the closer paired with ``open_ch``, or None."""
    return BRACKET_PAIRS.get(open_ch)


def is_matching_bracket(open_ch: str, close_ch: str) -> bool:
    return BRACKET_PAIRS.get(open_ch) == close_ch


def is_dialog_starter(s: str) -> bool:
    """Check whether the first non-whitespace character opens a dialog."""
    hit = first_non_whitespace(s)
    return hit.found and is_dialog_opener(hit.char)


def has_unclosed_bracket(s: str) -> bool:
    """Detect unbalanced brackets in a single left-to-right pass.

    A closer with nothing open, or a closer that does not match the most
    recent opener, reports True immediately. Otherwise the result is True
    only if some bracket was seen and openers remain on the stack.

    Args:
        s: Text to scan.

    Returns:
        True if the text has unclosed or invalid brackets.
    """
    if not s:
        return False

    seen_bracket = False
    stack: list[str] = []

    for ch in s:
        if ch in _OPEN_BRACKETS:
            seen_bracket = True
            stack.append(ch)
            continue

        if ch not in _CLOSE_BRACKETS:
            continue

        seen_bracket = True

        # stray closer
        if not stack:
            return True

        if BRACKET_PAIRS[stack.pop()] != ch:
            return True

    return seen_bracket and bool(stack)


def _is_divider_char(ch: str) -> bool:
    if BOX_DRAWING_RANGE[0] <= ch <= BOX_DRAWING_RANGE[1]:
        return True
    return ch in DIVIDER_ASCII or ch in DIVIDER_STARS


def is_box_drawing_line(s: str) -> bool:
    """Detect visual divider lines such as ``──────`` or ``=====``.

    Intended for a probe line with indentation already stripped. Whitespace
    is ignored; any other character outside the divider set disqualifies
    the line.

    Args:
        s: Line to classify.

    Returns:
        True if the line is a pure divider of at least three visible chars.
    """
    if not s:
        return False

    total = 0
    for ch in s:
        if ch.isspace():
            continue
        if not _is_divider_char(ch):
            return False
        total += 1

    return total >= DIVIDER_MIN_LENGTH


def index_of_first_non_whitespace(s: str) -> int:
    """Return index of the first non-whitespace character, or -1."""
    for i, ch in enumerate(s or ""):
        if not ch.isspace():
            return i
    return -1


def first_non_whitespace(s: str) -> ScanResult:
    idx = index_of_first_non_whitespace(s)
    if idx < 0:
        return NOT_FOUND
    return ScanResult(True, idx, s[idx])


def last_non_whitespace(s: str) -> ScanResult:
    if not s:
        return NOT_FOUND
    return prev_non_whitespace(s, len(s))


def prev_non_whitespace(s: str, before_index: int) -> ScanResult:
    """Find the last non-whitespace character strictly before ``before_index``.

    ``before_index == len(s)`` scans the whole string backwards.
    """
    if not s:
        return NOT_FOUND

    i = min(before_index - 1, len(s) - 1)
    while i >= 0:
        ch = s[i]
        if not ch.isspace():
            return ScanResult(True, i, ch)
        i -= 1
    return NOT_FOUND


def translate_punctuation(text: str, to_traditional: bool) -> str:
    """Swap quote-style punctuation between the two fixed conventions.

    Args:
        text: Text to remap.
        to_traditional: True for “” ‘’ -> 「」 『』, False for the reverse.

    Returns:
        Remapped text; all other characters are untouched.
    """
    return text.translate(PUNCT_S2T_TABLE if to_traditional else PUNCT_T2S_TABLE)
