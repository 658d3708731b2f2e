"""Array puzzles: prefix sums, searches, greedy picks and climbing budgets."""

import bisect
import heapq
from collections import Counter
from itertools import accumulate


def subarray_sum(nums, k):
    """Number of contiguous subarrays of ``nums`` whose sum is ``k``."""
    seen = Counter({0: 1})
    count = 0
    for prefix in accumulate(nums):
        count += seen[prefix - k]
        seen[prefix] += 1
    return count


def are_equal(a, b):
    """True if ``a`` and ``b`` hold the same elements with the same multiplicities."""
    return len(a) == len(b) and Counter(a) == Counter(b)


def binary_search(arr, x):
    """Index of some occurrence of ``x`` in the sorted sequence ``arr``.

    Raises ``ValueError`` if ``x`` is not present.
    """
    lo, hi = 0, len(arr) - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if arr[mid] == x:
            return mid
        if arr[mid] > x:
            hi = mid - 1
        else:
            lo = mid + 1
    raise ValueError(f"{x!r} is not in the sequence")


def count_occurrences(arr, x):
    """How many times ``x`` appears in the sorted sequence ``arr``."""
    low = bisect.bisect_left(arr, x)
    if low == len(arr) or arr[low] != x:
        return 0
    return bisect.bisect_right(arr, x, lo=low) - low


def max_sum_subarray(arr):
    """Largest sum of a non-empty contiguous subarray.

    Returns ``(total, start, end)`` with ``start`` and ``end`` inclusive indices.
    """
    if not arr:
        raise ValueError("array must not be empty")
    best = running = arr[0]
    start = end = candidate_start = 0
    for i, value in enumerate(arr[1:], start=1):
        running += value
        if running < value:
            running = value
            candidate_start = i
        if running > best:
            best = running
            start, end = candidate_start, i
    return best, start, end


def longest_increasing_subsequence(arr):
    """Length of the longest strictly increasing subsequence."""
    tails = []
    for value in arr:
        pos = bisect.bisect_left(tails, value)
        if pos == len(tails):
            tails.append(value)
        else:
            tails[pos] = value
    return len(tails)


def longest_zero_sum_subarray(arr):
    """Length of the longest contiguous subarray summing to zero."""
    first_seen = {0: -1}
    longest = 0
    for i, prefix in enumerate(accumulate(arr)):
        if prefix in first_seen:
            longest = max(longest, i - first_seen[prefix])
        else:
            first_seen[prefix] = i
    return longest


def max_profit(prices):
    """Best gain from buying once and selling later; zero if no gain is possible."""
    best = 0
    lowest = None
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        elif price - lowest > best:
            best = price - lowest
    return best


def max_expression(p, x):
    """Indices ``(i, j)`` maximising ``p[i] - x[i]`` and ``p[j] + x[j]``.

    Among equal values the smallest index wins.
    """
    if len(p) != len(x):
        raise ValueError("p and x must have the same length")
    if not x:
        raise ValueError("arrays must not be empty")
    diffs = [pi - xi for pi, xi in zip(p, x)]
    sums = [pi + xi for pi, xi in zip(p, x)]
    best_i = max(range(len(x)), key=lambda i: (diffs[i], -i))
    best_j = max(range(len(x)), key=lambda j: (sums[j], -j))
    return best_i, best_j


def maximise_param(x, p):
    """Greedy two-pointer maximum of ``x[i] + x[j] + p[j] - p[i]`` for sorted ``p``."""
    if len(x) != len(p):
        raise ValueError("x and p must have the same length")
    if len(x) < 2:
        raise ValueError("at least two elements are needed")
    left, right = 0, len(x) - 1
    best = None
    while left < right:
        value = x[left] + x[right] + p[right] - p[left]
        best = value if best is None else max(best, value)
        if x[left + 1] - p[left + 1] < x[right - 1] + p[right - 1]:
            left += 1
        else:
            right -= 1
    return best


def max_point_count(arr, k):
    """Largest sum of ``k`` elements taken from the two ends of ``arr``."""
    if not 0 <= k <= len(arr):
        raise ValueError(f"k must be between 0 and {len(arr)}")
    current = sum(arr[:k])
    best = current
    for taken_back in range(1, k + 1):
        current += arr[-taken_back] - arr[k - taken_back]
        best = max(best, current)
    return best


def max_sum_from_ends(arr, k):
    """Sum of ``k`` elements picked greedily, the larger end first.

    If ``k`` exceeds the length, the sum of the whole array.
    """
    if k > len(arr):
        return sum(arr)
    front, back = 0, len(arr) - 1
    total = 0
    while k > 0 and front <= back:
        if arr[front] > arr[back]:
            total += arr[front]
            front += 1
        else:
            total += arr[back]
            back -= 1
        k -= 1
    return total


def find_max_sum(arr, b, k):
    """Greedy weighted sum of ``k`` end-picks of ``arr`` with weights ``b``, two at a time."""
    if len(b) < k:
        raise ValueError("b must hold at least k weights")

    def at(i):
        if not 0 <= i < len(arr):
            raise IndexError(f"position {i} out of range")
        return arr[i]

    total = 0
    idx = 0
    left, right = 0, len(arr) - 1
    while k > 0 and left <= right:
        if k == 1:
            total += b[idx] * max(at(left), at(right))
            k -= 1
            idx += 1
            continue
        hi_w, lo_w = max(b[idx], b[idx + 1]), min(b[idx], b[idx + 1])
        if at(left) > at(right) and at(left + 1) > at(right):
            pair = (at(left), at(left + 1))
            left += 2
        elif at(left) > at(right) and at(right - 1) > at(left):
            pair = (at(right), at(right - 1))
            right -= 2
        else:
            pair = (at(left), at(right))
            left += 1
            right -= 1
        total += max(pair) * hi_w + min(pair) * lo_w
        k -= 2
        idx += 2
    return total


def sorted_intersection(a, b):
    """Common elements of two sorted sequences, repeats matched pairwise."""
    result = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            i += 1
        elif b[j] < a[i]:
            j += 1
        else:
            result.append(b[j])
            i += 1
            j += 1
    return result


def furthest_building(heights, bricks, ladders):
    """Index of the furthest building reachable with the given bricks and ladders."""
    if not heights:
        raise ValueError("heights must not be empty")
    paid = []  # max-heap of climbs paid with bricks, stored negated
    for i, (here, there) in enumerate(zip(heights, heights[1:])):
        diff = there - here
        if diff <= 0:
            continue
        if diff <= bricks:
            bricks -= diff
            heapq.heappush(paid, -diff)
        elif ladders > 0:
            if paid and diff < -paid[0]:
                bricks += -heapq.heapreplace(paid, -diff) - diff
            ladders -= 1
        else:
            return i
    return len(heights) - 1


def is_possible_climb(heights, ropes, bricks):
    """True if the last building can be reached from the first.

    Each distinct upward climb height is counted once; ropes cover the largest
    ones and bricks pay for the rest.
    """
    if ropes < 0:
        raise ValueError("ropes must not be negative")
    climbs = sorted({there - here for here, there in zip(heights, heights[1:]) if there > here})
    if ropes >= len(climbs):
        return True
    return bricks - sum(climbs[: len(climbs) - ropes]) >= 0


def sort_stack(stack):
    """Sort a stack (top at the end) using a second stack.

    Returns a new stack whose top holds the smallest element; ``stack`` is left as it was.
    """
    source = list(stack)
    result = []
    while source:
        item = source.pop()
        while result and result[-1] < item:
            source.append(result.pop())
        result.append(item)
    return result