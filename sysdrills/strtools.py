"""Small string exercises: reversing, palindromes, integer conversion, words."""

from __future__ import annotations

import re
import sys
from typing import Optional, Sequence

__all__ = [
    "MAX_STRING_LENGTH",
    "reverse_str",
    "is_palindrome",
    "my_atoi",
    "my_itoa",
    "reverse_words",
    "count_words",
    "main",
]

MAX_STRING_LENGTH = 100

_DIGITS = "0123456789"
_WORD = re.compile(r"[^ \t\n]+")


def reverse_str(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def is_palindrome(text: str) -> bool:
    """Return True when ``text`` reads the same in both directions."""
    return text == text[::-1]


def my_atoi(text: str) -> int:
    """Parse an optional sign followed by decimal digits.

    Any other character raises ValueError. An empty string, or a bare
    sign, parses as zero.
    """
    sign = 1
    digits = text
    if text[:1] == "-":
        sign, digits = -1, text[1:]
    elif text[:1] == "+":
        digits = text[1:]
    result = 0
    for ch in digits:
        if ch not in _DIGITS:
            raise ValueError(f"invalid character {ch!r} in {text!r}")
        result = result * 10 + _DIGITS.index(ch)
    return sign * result


def my_itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    magnitude = abs(number)
    digits = []
    while True:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(_DIGITS[digit])
        if not magnitude:
            break
    if number < 0:
        digits.append("-")
    return "".join(reversed(digits))


def reverse_words(text: str) -> str:
    """Reverse the order of space-separated words, keeping every space."""
    return " ".join(reversed(text.split(" ")))


def count_words(text: str) -> int:
    """Count runs of characters separated by spaces, tabs or newlines."""
    return len(_WORD.findall(text))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the exercises on fixed samples and print the results."""
    out = sys.stdout
    out.write("========== STARTING TESTS ==========\n\n")

    out.write("--- Testing ReverseStr ---\n")
    sample = "Hello World"
    out.write(f"Original: '{sample}'\n")
    out.write(f"Reversed: '{reverse_str(sample)}'\n\n")

    out.write("--- Testing IsPalindrome ---\n")
    for candidate in ("racecar", "hello"):
        verdict = "Yes!" if is_palindrome(candidate) else "No."
        out.write(f"Is '{candidate}' a palindrome? {verdict}\n")
    out.write("\n")

    out.write("--- Testing MyAToI ---\n")
    number_text = "-404"
    out.write(
        f"Success! String '{number_text}' is now math integer: "
        f"{my_atoi(number_text)}\n"
    )
    garbage = "12abc"
    try:
        my_atoi(garbage)
    except ValueError:
        out.write(f"Correctly caught error for garbage string: '{garbage}'\n")
    out.write("\n")

    out.write("--- Testing MyIToA ---\n")
    for value in (-9876, 0):
        out.write(
            f"Integer {value} successfully converted to string: "
            f"'{my_itoa(value)}'\n"
        )
    out.write("\n")

    out.write("--- Testing ReverseWordsInString ---\n")
    sentence = "cat dog bird"
    out.write(f"Original: '{sentence}'\n")
    out.write(f"Reversed: '{reverse_words(sentence)}'\n\n")

    out.write("--- Testing CountWordsInString ---\n")
    messy = "   hello   world   test  "
    out.write(f"String: '{messy}'\n")
    out.write(f"Word count: {count_words(messy)}\n")

    out.write("\n========== TESTS COMPLETE ==========\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())