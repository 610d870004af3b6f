"""Puzzles built on integer bit patterns."""

from __future__ import annotations

from functools import reduce
from math import isqrt
from operator import xor


def number_of_steps(num):
    """Steps to reach zero, halving even numbers and decrementing odd ones."""
    if num < 0:
        raise ValueError("num must not be negative")
    if num == 0:
        return 0
    return num.bit_length() + num.bit_count() - 1


def subset_xor_sum(nums):
    """Sum of the XOR totals of every subset of nums."""
    values = list(nums)
    return sum(
        reduce(xor, (v for bit, v in enumerate(values) if mask >> bit & 1), 0)
        for mask in range(1 << len(values))
    )


def min_bit_flips(start, goal):
    """Number of bits that differ between start and goal."""
    if start < 0 or goal < 0:
        raise ValueError("start and goal must not be negative")
    return (start ^ goal).bit_count()


def largest_combination(candidates):
    """Size of the largest subset whose bitwise AND is non-zero (32-bit values)."""
    values = list(candidates)
    return max(sum(1 for value in values if value >> bit & 1) for bit in range(32))


def sum_indices_with_k_set_bits(nums, k):
    """Sum of the elements whose index has exactly k set bits."""
    return sum(value for index, value in enumerate(nums) if index.bit_count() == k)


def count_bits(n):
    """Set-bit counts of every number from 0 to n."""
    results = [0]
    for number in range(1, n + 1):
        results.append(results[number >> 1] + (number & 1))
    return results


def judge_square_sum(c):
    """True if c is the sum of two squares of non-negative integers."""
    if c < 0:
        return False
    for b in range(isqrt(c), -1, -1):
        a = isqrt(c - b * b)
        if a * a + b * b == c:
            return True
    return False


def pass_the_pillow(n, time):
    """Who holds the pillow after time seconds, passed back and forth along n people."""
    if n < 2:
        raise ValueError("n must be at least 2")
    if time < 0:
        raise ValueError("time must not be negative")
    rounds, offset = divmod(time, n - 1)
    if rounds % 2:
        return n - offset
    return 1 + offset