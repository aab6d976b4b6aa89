from __future__ import annotations

_ORD_A = ord('a')
_ORD_Z = ord('z')
# ASCII case folding only; str.lower() would also fold non-ASCII letters
_CASE_OFFSET = ord('a') - ord('A')


def character_score(word: str) -> int:
    """Sum of alphabet positions ('a' -> 1 ... 'z' -> 26), case-insensitive.

    Characters outside a-z/A-Z contribute 0.
    """
    total = 0
    for ch in word:
        code = ord(ch)
        if 'A' <= ch <= 'Z':
            code += _CASE_OFFSET
        if _ORD_A <= code <= _ORD_Z:
            total += code - _ORD_A + 1
    return total
