"""String puzzles: substring matching, entity decoding, pattern removal and word counts."""

import heapq
import re

_ENTITIES = {
    "&gt;": ">",
    "&lt;": "<",
    "&quot;": '"',
    "&apos;": "'",
    "&frasl;": "/",
    "&amp;": "&",
}
_ENTITY_RE = re.compile("|".join(re.escape(entity) for entity in _ENTITIES))


def string_matching(words):
    """Return, sorted and without repeats, every word found inside a longer word."""
    return sorted(
        {
            small
            for small in words
            if small
            for big in words
            if len(small) < len(big) and small in big
        }
    )


def parse_html(text):
    """Replace the known HTML entities in ``text`` with the characters they stand for."""
    return _ENTITY_RE.sub(lambda match: _ENTITIES[match.group(0)], text)


def min_length_after_removal(text, pattern):
    """Length of ``text`` after repeatedly deleting occurrences of ``pattern``."""
    if not pattern:
        return len(text)
    target = list(pattern)
    size = len(target)
    stack = []
    for ch in text:
        stack.append(ch)
        if len(stack) >= size and stack[-size:] == target:
            del stack[-size:]
    return len(stack)


def reverse_sentence(sentence):
    """Reverse the order of the words that are each followed by a space.

    Every word in the result is followed by a single space; trailing text
    after the last space is dropped.
    """
    pieces = sentence.split(" ")
    return "".join(word + " " for word in reversed(pieces[:-1]))


def is_alphabetic_order(s):
    """True if ``s`` runs through the alphabet in order without skipping a letter."""
    if len(s) < 26:
        return False
    return all(
        prev <= cur and ord(cur) - ord(prev) <= 1 for prev, cur in zip(s, s[1:])
    )


def is_anagram(known, word):
    """True if ``word`` uses exactly the letters of ``known``."""
    return sorted(known) == sorted(word)


def find_user(message):
    """Split a ``<user> text`` message: return the user name and the index of ``>``.

    A message with no closing bracket gives ``("", 0)``.
    """
    end = message.find(">", 1)
    if end == -1:
        return "", 0
    return message[1:end], end


def count_words(message):
    """Count words in a message body.

    A space ends a word only when the text since the last word holds a
    lowercase letter; any text left after the last counted word is one more word.
    """
    start = 0
    count = 0
    for i, ch in enumerate(message):
        if ch == " " and any("a" <= c <= "z" for c in message[start:i]):
            count += 1
            start = i + 1
    if start != len(message):
        count += 1
    return count


def top_n(messages, n):
    """Names of the ``n`` users with the most words, fewest words first."""
    if n < 1:
        raise ValueError("n must be at least 1")
    totals = {}
    for message in messages:
        name, end = find_user(message)
        totals[name] = totals.get(name, 0) + count_words(message[end + 1:])
    heap = []
    for order, (name, total) in enumerate(totals.items()):
        entry = (total, order, name)
        if len(heap) < n:
            heapq.heappush(heap, entry)
        elif heap[0][0] < total:
            heapq.heapreplace(heap, entry)
    return [name for _, _, name in sorted(heap)]