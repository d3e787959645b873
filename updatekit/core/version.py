"""Version name comparison.

Tokens are ordered by character length first and only then lexically, so
"1.10" > "1.9" but also "1.03" > "1.2". This is not a numeric comparison:
zero-padded or non-numeric tokens are ordered by their length. Downstream
consumers depend on this exact ordering; do not replace it with integer
parsing.

Lengths and character order are measured in UTF-16 code units, so a
character outside the BMP counts as two, matching clients that store
version names as UTF-16 strings.
"""


def _split_tokens(version_name: str) -> list[str]:
    """Split on '.', dropping trailing empty tokens ("1.2." -> ["1", "2"])."""
    tokens = version_name.split('.')
    if not version_name:
        return tokens
    while tokens and not tokens[-1]:
        tokens.pop()
    return tokens


def _utf16_units(token: str) -> list[int]:
    units = []
    for ch in token:
        code = ord(ch)
        if code > 0xFFFF:
            code -= 0x10000
            units.append(0xD800 + (code >> 10))
            units.append(0xDC00 + (code & 0x3FF))
        else:
            units.append(code)
    return units


def _compare_text(a: list[int], b: list[int]) -> int:
    for ca, cb in zip(a, b):
        if ca != cb:
            return ca - cb
    return len(a) - len(b)


def compare_version_name(version_name1: str, version_name2: str) -> int:
    """Compare two dotted version names.

    Returns > 0 if version_name1 is newer, 0 if equal, < 0 if older.
    A version with extra sub-tokens wins over its prefix ("1.2.1" > "1.2").
    Never raises for any string input.
    """
    if version_name1 == version_name2:
        return 0

    tokens1 = _split_tokens(version_name1)
    tokens2 = _split_tokens(version_name2)

    diff = 0
    for t1, t2 in zip(tokens1, tokens2):
        t1, t2 = _utf16_units(t1), _utf16_units(t2)
        diff = len(t1) - len(t2)
        if diff == 0:
            diff = _compare_text(t1, t2)
        if diff != 0:
            return diff

    return len(tokens1) - len(tokens2)


def is_newer(remote_version: str, installed_version: str) -> bool:
    return compare_version_name(remote_version, installed_version) > 0
