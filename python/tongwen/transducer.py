"""Round transducer: greedy longest-match dictionary substitution.

Every round of every plan runs the same scan. At each position the starter
index decides whether any key can begin there; if so, candidate lengths are
tried longest first and, for each length, dictionaries in round order. The
first hit wins, so a longer match always beats a shorter one and an earlier
dictionary beats a later one at equal length.

Example:
    round dictionaries: {"头发": "頭髮"}, {"头": "頭", "发": "發"}
    convert_round("头发", rnd) -> "頭髮"    (not "頭發")
"""

from .plan import ConversionPlan, Round


def convert_round(text: str, rnd: Round) -> str:
    """Apply one round to text.

    Args:
        text: Input text.
        rnd: Round with ordered dictionaries and starter index.

    Returns:
        Converted text. Characters with no match are copied unchanged.
    """
    if not text:
        return text

    union = rnd.union
    tables = [(entry.mapping, entry.max_length) for entry in rnd.dictionaries]
    n = len(text)
    out: list[str] = []
    i = 0

    while i < n:
        lengths = union.lengths_for(text[i])
        if not lengths:
            out.append(text[i])
            i += 1
            continue

        remaining = n - i
        match = None
        for length in lengths:
            if length > remaining or length > union.max_length:
                continue

            word = text[i:i + length]
            for mapping, max_length in tables:
                if max_length < length:
                    continue
                value = mapping.get(word)
                if value is not None:
                    match = value
                    break

            if match is not None:
                out.append(match)
                i += length
                break

        if match is None:
            out.append(text[i])
            i += 1

    return "".join(out)


def apply_plan(text: str, plan: ConversionPlan) -> str:
    """Run every round of a plan in sequence.

    Each round consumes the previous round's output.
    """
    if not text:
        return ""

    for rnd in plan.rounds:
        text = convert_round(text, rnd)
    return text
