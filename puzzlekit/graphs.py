"""Puzzles over small undirected graphs."""

from __future__ import annotations

from collections import Counter


def find_center(edges):
    """Centre of a star graph, read from its first two edges; -1 if they share none."""
    first, second = edges[0], edges[1]
    return next((node for node in first if node in second[:2]), -1)


def maximum_importance(n, roads):
    """Largest total road importance when cities get values 1..n."""
    degree = Counter()
    for a, b in roads:
        for city in (a, b):
            if not 0 <= city < n:
                raise IndexError(f"city {city} is outside 0..{n - 1}")
            degree[city] += 1
    ordered = sorted(degree[city] for city in range(n))
    return sum(count * value for value, count in enumerate(ordered, 1))