"""
Palindrome API — Palindrome Predicate
======================================

What:  Pure functions deciding whether text reads the same both ways.
How:   Keep Unicode letters only, lowercase them, then walk two indices
       toward the middle. No reversed copy of the string is built.

Examples:
    is_palindrome("Race car")  → True
    is_palindrome("hello")     → False
    is_palindrome("12321")     → True   (no letters left, trivially symmetric)
    is_palindrome("")          → True
"""


def normalize(text: str) -> str:
    """Letters-only, lowercased form of `text` (what is_palindrome compares)."""
    return "".join(ch for ch in text.lower() if ch.isalpha())


def is_palindrome(text: str) -> bool:
    """
    Return True when the letters of `text` form a palindrome.

    Non-letters (digits, spaces, punctuation) are ignored and case is folded
    to lowercase. An input with no letters at all is a palindrome.
    """
    letters = normalize(text)
    left, right = 0, len(letters) - 1
    while left < right:
        if letters[left] != letters[right]:
            return False
        left += 1
        right -= 1
    return True
