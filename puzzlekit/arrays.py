"""Puzzles over integer lists and grids."""

from __future__ import annotations

import heapq
import struct
from collections import Counter, deque
from itertools import combinations, groupby

MEDALS = ("Gold Medal", "Silver Medal", "Bronze Medal")


def height_checker(heights):
    """Count positions where heights differ from their sorted order."""
    return sum(a != b for a, b in zip(heights, sorted(heights)))


def max_satisfied(customers, grumpy, minutes):
    """Most customers satisfied when the owner can stay calm for one window of minutes."""
    if minutes < 0:
        raise ValueError("minutes must not be negative")
    pairs = list(zip(customers, grumpy))
    always = sum(c for c, g in pairs if not g)
    gained = [c if g else 0 for c, g in pairs]
    window = best = sum(gained[:minutes])
    for entering, leaving in zip(gained[minutes:], gained):
        window += entering - leaving
        best = max(best, window)
    return always + best


def relative_sort_array(arr1, arr2):
    """Order arr1 by the order of arr2, the rest ascending at the end."""
    counts = Counter(arr1)
    result = []
    for value in arr2:
        result.extend([value] * counts.pop(value, 0))
    for value in sorted(counts):
        result.extend([value] * counts[value])
    return result


def three_consecutive_odds(arr):
    """True if three odd numbers follow one another somewhere in arr."""
    run = 0
    for value in arr:
        run = run + 1 if value & 1 else 0
        if run == 3:
            return True
    return False


def restore_matrix(row_sum, col_sum):
    """Build a non-negative matrix with the given row and column sums."""
    columns_left = list(col_sum)
    matrix = []
    for remaining in row_sum:
        row = []
        for index, column_left in enumerate(columns_left):
            cell = min(remaining, column_left)
            row.append(cell)
            remaining -= cell
            columns_left[index] = column_left - cell
        matrix.append(row)
    return matrix


def special_array(nums):
    """The x with exactly x elements >= x, or -1 when there is none."""
    values = sorted(nums)
    size = len(values)
    start = next((i for i, v in enumerate(values) if v != 0), size)
    seen = 0
    for index, value in enumerate(values[start:], start):
        left = size - index
        if value == left and value != seen:
            return value
        if seen < left < value:
            return left
        seen = value
    return -1


def eaten_apples(apples, days):
    """Number of apples eaten, one a day, from batches that rot after their lifetime."""
    eaten = 0
    heap = []
    for day, (count, lifetime) in enumerate(zip(apples, days, strict=True)):
        if not heap:
            if count == 0:
                continue
            eaten += 1
            if count - 1 != 0:
                heapq.heappush(heap, (lifetime + day, count - 1))
            continue
        if count != 0:
            heapq.heappush(heap, (lifetime + day, count))
        expiry, left = heapq.heappop(heap)
        eaten += 1
        if left - 1 != 0 and expiry > day + 1:
            heapq.heappush(heap, (expiry, left - 1))
        while heap and heap[0][0] == day + 1:
            heapq.heappop(heap)

    day = len(apples)
    while heap:
        while heap and (heap[0][0] < day + 1 or heap[0][1] == 0):
            heapq.heappop(heap)
        if heap:
            eaten += 1
            expiry, left = heapq.heappop(heap)
            heapq.heappush(heap, (expiry, left - 1))
        day += 1
    return eaten


def min_moves_to_seat(seats, students):
    """Fewest single-step moves to put every student in a seat."""
    return sum(abs(st - se) for se, st in zip(sorted(seats), sorted(students)))


def watering_plants(plants, capacity):
    """Steps walked watering plants in a row, refilling at the river behind the first."""
    steps = 0
    water = capacity
    for position, need in enumerate(plants):
        if water < need:
            water = capacity
            steps += 2 * position
        water -= need
        steps += 1
    return steps


def largest_local(grid):
    """Maximum of every 3x3 block of a square grid."""
    size = len(grid)
    return [
        [max(max(row[j - 1:j + 2]) for row in grid[i - 1:i + 2]) for j in range(1, size - 1)]
        for i in range(1, size - 1)
    ]


def find_max_k(nums):
    """Largest k such that both k and -k are in nums, or -1."""
    values = sorted(nums)
    low, high = 0, len(values) - 1
    while low < high:
        left, right = values[low], values[high]
        if abs(left) > abs(right):
            low += 1
        elif abs(left) < abs(right):
            high -= 1
        elif -left == right:
            return abs(left)
        else:
            low += 1
            high -= 1
    return -1


def min_operations(nums):
    """Fewest removals of two or three equal elements to empty nums, or -1."""
    counts = Counter(nums).values()
    if 1 in counts:
        return -1
    return sum(-(-count // 3) for count in counts)


def _popcount(value):
    return (value & 0xFFFFFFFF).bit_count()


def can_sort_array(nums):
    """True if swapping neighbours with equal set-bit counts can sort nums."""
    previous_max = None
    for _, group in groupby(nums, key=_popcount):
        block = list(group)
        if previous_max is not None and min(block) < previous_max:
            return False
        previous_max = max(block)
    return True


def maximum_happiness_sum(happiness, k):
    """Happiest total picking k children, each pick lowering the others by one."""
    top = sorted(happiness, reverse=True)[:max(k, 0)]
    return sum(max(value - turn, 0) for turn, value in enumerate(top))


def intersect(nums1, nums2):
    """Common elements with multiplicity, ascending."""
    first, second = sorted(nums1), sorted(nums2)
    result = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] == second[j]:
            result.append(first[i])
            i += 1
            j += 1
        elif first[i] < second[j]:
            i += 1
        else:
            j += 1
    return result


def find_relative_ranks(score):
    """Rank names for each score: medals for the top three, places otherwise."""
    first_place = {}
    for place, value in enumerate(sorted(score, reverse=True)):
        first_place.setdefault(value, place)
    places = (first_place[value] for value in score)
    return [MEDALS[p] if p < len(MEDALS) else str(p + 1) for p in places]


def sort_colors(nums):
    """Sort nums in place by counting values; returns None."""
    counts = Counter(nums)
    nums[:] = [value for value in sorted(counts) for _ in range(counts[value])]


def _as_single(value):
    return struct.unpack("f", struct.pack("f", value))[0]


def kth_smallest_prime_fraction(arr, k):
    """The k-th smallest fraction arr[i]/arr[j] with i < j, as [numerator, denominator]."""
    fractions = [(_as_single(a / b), a, b) for a, b in combinations(arr, 2)]
    if not 1 <= k <= len(fractions):
        raise ValueError(f"k must be between 1 and {len(fractions)}")
    _, numerator, denominator = heapq.nsmallest(k, fractions)[-1]
    return [numerator, denominator]


def subsets(nums):
    """Every subset of nums, ordered by bit mask over positions."""
    return [
        [value for bit, value in enumerate(nums) if mask >> bit & 1]
        for mask in range(1 << len(nums))
    ]


def is_n_straight_hand(hand, group_size):
    """True if hand splits into runs of group_size consecutive cards."""
    if group_size < 1:
        raise ValueError("group_size must be positive")
    if len(hand) % group_size or len(hand) < group_size:
        return False
    cards = sorted(hand)
    count = 0
    current = 0
    index = len(cards) - 1
    while index >= 0:
        if count % group_size == 0:
            current = cards.pop()
            count = 1
            index = len(cards) - 1
            continue
        card = cards[index]
        if card == current - 1:
            current = card
            count += 1
            del cards[index]
        elif card != current:
            return False
        index -= 1
    return not cards


def num_rescue_boats(people, limit):
    """Boats needed when each boat holds at most two people within the weight limit."""
    weights = sorted(people)
    light, heavy = 0, len(weights) - 1
    boats = 0
    while light <= heavy:
        if weights[heavy] + weights[light] <= limit:
            light += 1
        heavy -= 1
        boats += 1
    return boats


def min_increment_for_unique(nums):
    """Fewest unit increments that make every element distinct."""
    moves = 0
    top = None
    for value in sorted(nums):
        if top is None or value > top:
            top = value
        else:
            moves += top - value + 1
            top += 1
    return moves


def deck_revealed_increasing(deck):
    """Deck order that reveals cards ascending when every other card goes to the bottom."""
    cards = sorted(deck, reverse=True)
    if not cards:
        return []
    result = deque(cards[:1])
    for card in cards[1:]:
        result.rotate(-(len(result) - 1))
        result.appendleft(card)
    return list(result)