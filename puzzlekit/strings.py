"""Puzzles over strings and characters."""

from __future__ import annotations

from collections import Counter
from itertools import groupby, pairwise

_MAX_RUN = 9


def wonderful_substrings(word):
    """Substrings in which at most one of the letters a-j occurs an odd number of times."""
    seen = Counter({0: 1})
    mask = 0
    total = 0
    for char in word:
        mask ^= 1 << (ord(char) - ord("a"))
        total += seen[mask]
        seen[mask] += 1
        total += sum(seen[mask ^ (1 << bit)] for bit in range(10))
    return total


def reverse_prefix(word, ch):
    """Reverse word up to and including the first ch; unchanged if ch is absent."""
    end = word.find(ch) + 1
    return word[:end][::-1] + word[end:]


def append_characters(s, t):
    """Characters to append to s so that t becomes a subsequence of it."""
    matched = 0
    for char in s:
        if matched < len(t) and char == t[matched]:
            matched += 1
    return len(t) - matched


def is_palindrome_permutation(s):
    """True if the characters of s can be arranged into a palindrome."""
    return sum(count & 1 for count in Counter(s).values()) <= 1


def count_seniors(details):
    """Passengers older than 60, age read from characters 11 and 12."""
    return sum(1 for detail in details if int(detail[11:13]) > 60)


def min_changes(s):
    """Changes that make every aligned pair of characters equal."""
    return sum(1 for a, b in zip(s[::2], s[1::2]) if a != b)


def score_of_string(s):
    """Sum of absolute code differences of neighbouring characters."""
    return sum(abs(ord(b) - ord(a)) for a, b in pairwise(s))


def compressed_string(word):
    """Run-length encoding with runs of at most nine, count before character."""
    parts = []
    for char, run in groupby(word):
        length = sum(1 for _ in run)
        while length:
            chunk = min(length, _MAX_RUN)
            parts.append(f"{chunk}{char}")
            length -= chunk
    return "".join(parts)


def reverse_string(chars):
    """Reverse a list of characters in place; returns None."""
    chars.reverse()


def longest_palindrome(s):
    """Length of the longest palindrome buildable from the characters of s."""
    counts = Counter(s).values()
    even_part = sum(count - count % 2 for count in counts)
    return even_part + (1 if any(count % 2 for count in counts) else 0)


def rotate_string(s, goal):
    """True if some rotation of s equals goal."""
    return len(s) == len(goal) and goal in s + s