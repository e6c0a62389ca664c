"""Phonetic coding for names that sound alike but are spelled differently.

Soundex variant: the previous digit is tracked for every letter, so a
vowel (or h, w, y) between two consonants of the same group lets the
second one through. Scores downstream are calibrated to this behavior;
it is intentionally not textbook Soundex.
"""

import re

CODE_LENGTH = 4

_SOUNDEX_CODES: dict[str, str] = {
    **dict.fromkeys("bfpv", "1"),
    **dict.fromkeys("cgjkqsxz", "2"),
    **dict.fromkeys("dt", "3"),
    "l": "4",
    **dict.fromkeys("mn", "5"),
    "r": "6",
}

_NON_LETTERS = re.compile(r"[^a-z]")


def soundex(text: str) -> str:
    """Reduce a word to a 4-character phonetic code.

    Returns an empty string when the input has no ASCII letters.
    """
    letters = _NON_LETTERS.sub("", (text or "").lower())
    if not letters:
        return ""

    code = letters[0].upper()
    prev = _SOUNDEX_CODES.get(letters[0], "0")

    for letter in letters[1:]:
        if len(code) >= CODE_LENGTH:
            break
        current = _SOUNDEX_CODES.get(letter, "0")
        if current != "0" and current != prev:
            code += current
        prev = current

    return code.ljust(CODE_LENGTH, "0")


def sounds_like(a: str, b: str) -> bool:
    """Check if two strings share a phonetic code."""
    return soundex(a) == soundex(b)
