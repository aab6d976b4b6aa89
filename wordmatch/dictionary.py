from __future__ import annotations
import bisect
import threading
from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional, Set, Tuple

from .scoring import character_score


# Code-point order, not UTF-16 code-unit order; the two differ for astral-plane text.
def compare_text(a: str, b: str) -> int:
    """Signed distance between two strings.

    Difference of the first mismatching code points, or of the lengths when
    one string is a prefix of the other. Sign agrees with ``a < b``.
    """
    for ca, cb in zip(a, b):
        if ca != cb:
            return ord(ca) - ord(cb)
    return len(a) - len(b)


class WordStore:
    """Known words kept sorted and unique.

    Every operation runs under one re-entrant lock, so callers may hold
    ``locked()`` to group a search and an ``add`` into one critical section.
    """

    def __init__(self, words: Optional[Iterable[str]] = None):
        self._lock = threading.RLock()
        self._words: List[str] = []
        self._members: Set[str] = set()
        if words:
            self.seed(words)

    @contextmanager
    def locked(self) -> Iterator['WordStore']:
        with self._lock:
            yield self

    def seed(self, words: Iterable[str]) -> None:
        # File order is arbitrary; dedupe then sort
        with self._lock:
            self._members = set(words)
            self._words = sorted(self._members)

    def add(self, word: str) -> None:
        with self._lock:
            if word in self._members:
                return
            bisect.insort(self._words, word)
            self._members.add(word)

    def snapshot(self) -> Tuple[str, ...]:
        with self._lock:
            return tuple(self._words)

    def __len__(self) -> int:
        with self._lock:
            return len(self._words)

    def __contains__(self, word: object) -> bool:
        with self._lock:
            return word in self._members

    def find_closest_by_score(self, target: str) -> Optional[str]:
        target_score = character_score(target)
        best: Optional[str] = None
        best_diff: Optional[int] = None
        with self._lock:
            for word in self._words:
                if word == target:
                    continue
                diff = abs(character_score(word) - target_score)
                # strict comparison keeps the lexicographically smallest on ties
                if best_diff is None or diff < best_diff:
                    best_diff = diff
                    best = word
        return best

    def find_closest_lexical(self, target: str) -> Optional[str]:
        # Only midpoints visited by the binary search are candidates, so this
        # is not a global nearest neighbour.
        closest: Optional[str] = None
        min_distance: Optional[int] = None
        with self._lock:
            left, right = 0, len(self._words) - 1
            while left <= right:
                mid = (left + right) // 2
                current = self._words[mid]
                distance = compare_text(current, target)
                if distance == 0:
                    return current
                if distance < 0:
                    left = mid + 1
                else:
                    right = mid - 1
                if min_distance is None or abs(distance) < min_distance:
                    min_distance = abs(distance)
                    closest = current
        return closest
