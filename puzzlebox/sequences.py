"""Number sequences, step counts, fast powers, a Fenwick tree and random text."""

import random
import string

MOD = 10**9 + 7
MONKEY_TARGET = "methinks it is like a weasel"
MONKEY_ALPHABET = string.ascii_lowercase + " "
WORD_ALPHABET = string.ascii_uppercase


def min_possible_number(seq):
    """Smallest permutation of 1..len(seq)+1 following an I/D pattern.

    Any character other than ``I`` counts as a decrease.
    """
    result = [1]
    run = 0
    for i, ch in enumerate(seq, start=1):
        if ch == "I":
            run = 0
            result.insert(i, i + 1)
        else:
            run += 1
            result.insert(i - run, i + 1)
    return result


def collatz(n):
    """Collatz sequence from ``n`` up to the closing ``4, 2, 1``."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    sequence = []
    while n != 4:
        sequence.append(n)
        n = n // 2 if n % 2 == 0 else 3 * n + 1
    sequence.extend((4, 2, 1))
    return sequence


def kaprekar_next(n):
    """Digits of ``n`` sorted descending minus digits sorted ascending."""
    if n < 0:
        raise ValueError("n must not be negative")
    digits = sorted(str(n))
    return int("".join(reversed(digits))) - int("".join(digits))


def kaprekar_sequence(n):
    """Terms of the Kaprekar routine from ``n`` until the next term is a fixed point.

    The fixed point itself is not included. A routine that cycles without
    reaching a fixed point raises ``ValueError``.
    """
    seen = set()
    sequence = []
    while True:
        if n in seen:
            raise ValueError("Kaprekar routine cycles without a fixed point")
        seen.add(n)
        sequence.append(n)
        n = kaprekar_next(n)
        if n == kaprekar_next(n):
            return sequence


def num_of_ways(n):
    """Ways to paint an n x 3 grid in three colours, no equal neighbours, modulo 1e9+7."""
    two_colors = three_colors = 6
    for _ in range(1, n):
        two_colors, three_colors = (
            (3 * two_colors + 2 * three_colors) % MOD,
            (2 * two_colors + 2 * three_colors) % MOD,
        )
    return (two_colors + three_colors) % MOD


def count_min_steps(n):
    """Fewest steps from 1 to ``n`` using +1, *2 and *3."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    steps = [0, 0] + [n] * (n - 1)
    for i in range(1, n + 1):
        for nxt in (i + 1, 2 * i, 3 * i):
            if nxt <= n:
                steps[nxt] = min(steps[nxt], steps[i] + 1)
    return steps[n]


def min_steps_to_one(n):
    """Fewest steps from ``n`` down to 1 using -1, /2 and /3."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    steps = [0, 0]
    for i in range(2, n + 1):
        best = steps[i - 1]
        if i % 3 == 0:
            best = min(best, steps[i // 3])
        if i % 2 == 0:
            best = min(best, steps[i // 2])
        steps.append(best + 1)
    return steps[n]


def power_iter(a, b):
    """``a`` to the integer power ``b`` by repeated squaring."""
    result = 1.0
    a = float(a)
    if b < 0:
        a = 1.0 / a
        b = -b
    while b:
        if b % 2 == 1:
            result *= a
        b //= 2
        a *= a
    return result


def power_rec(a, b):
    """``a`` to the integer power ``b``, recursively halving the exponent."""
    if b == 0:
        return 1.0
    half = power_rec(a, b // 2 if b >= 0 else -(-b // 2))
    square = half * half
    if b % 2 == 0:
        return square
    if b < 0:
        return square / a
    return square * a


class Fenwick:
    """Binary indexed tree over positions 1..capacity-1 holding integer counts."""

    def __init__(self, size):
        capacity = 1
        while capacity <= size:
            capacity *= 2
        self._tree = [0] * capacity

    def add(self, index, value):
        """Add ``value`` at position ``index``."""
        if not 0 < index < len(self._tree):
            raise IndexError(f"position {index} out of range")
        while index < len(self._tree):
            self._tree[index] += value
            index += index & -index

    def prefix_sum(self, index):
        """Sum of positions 1..index."""
        if not 0 <= index < len(self._tree):
            raise IndexError(f"position {index} out of range")
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total


def process_queries(queries, m):
    """For each query, its position in a list 1..m, after which it moves to the front."""
    tree = Fenwick(2 * m + 1)
    positions = {}
    for value in range(1, m + 1):
        tree.add(m + value, 1)
        positions[value] = m + value
    result = []
    free = m
    for query in queries:
        if query not in positions:
            raise ValueError(f"query {query} outside 1..{m}")
        result.append(tree.prefix_sum(positions[query]) - 1)
        tree.add(free, 1)
        tree.add(positions[query], -1)
        positions[query] = free
        free -= 1
    return result


def infinite_monkey(target=MONKEY_TARGET, rounds=1000, rng=None):
    """Best of ``rounds`` random strings, scored by characters matching ``target``.

    Returns an empty string if no round matched a single character.
    """
    rng = rng or random.Random()
    best_score = 0
    best = ""
    for _ in range(rounds):
        candidate = "".join(rng.choice(MONKEY_ALPHABET) for _ in target)
        score = sum(got == want for got, want in zip(candidate, target))
        if score > best_score:
            best_score = score
            best = candidate
    return best


def make_word(length, rng=None):
    """A random string of ``length`` uppercase letters."""
    rng = rng or random.Random()
    return "".join(rng.choice(WORD_ALPHABET) for _ in range(length))


def load_words(path):
    """The set of whitespace-separated words in the file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return set(handle.read().split())


def generate_words(words, length, count=10, rng=None):
    """Yield ``count`` pairs of (failed attempts, word) for random hits in ``words``."""
    if not any(
        len(word) == length and all(c in WORD_ALPHABET for c in word) for word in words
    ):
        raise ValueError(f"no uppercase word of length {length} to find")
    rng = rng or random.Random()

    def _generate():
        for _ in range(count):
            attempts = 0
            while (word := make_word(length, rng)) not in words:
                attempts += 1
            yield attempts, word

    return _generate()