"""Leftmost-longest multi-pattern matcher (Aho-Corasick over UTF-8 bytes)."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

@dataclass(frozen=True)
class Match:
    start: int
    end: int

class MentionMatcher:
    """Immutable automaton that finds every vocabulary entry in a byte buffer.

    Matching is case-sensitive and exact. Reported matches never overlap:
    the earliest starting match wins, and among matches sharing a start the
    longest wins. Scanning resumes at the end of each reported match.

    Offsets are byte offsets into the UTF-8 buffer. Every pattern is valid
    UTF-8, so matches in valid UTF-8 text always fall on character
    boundaries.
    """

    def __init__(self, patterns: Iterable[str]):
        self._goto: list[dict[int, int]] = [{}]
        self._fail: list[int] = [0]
        self._depth: list[int] = [0]
        # Length of the longest pattern that is a suffix of the state's path.
        self._out: list[int] = [0]

        count = 0
        for pattern in patterns:
            if not pattern:
                raise ValueError("Matcher patterns must be non-empty")
            self._insert(pattern.encode("utf-8"))
            count += 1
        self._pattern_count = count
        self._link()

    def __len__(self) -> int:
        return self._pattern_count

    def _insert(self, key: bytes) -> None:
        state = 0
        for b in key:
            nxt = self._goto[state].get(b)
            if nxt is None:
                nxt = len(self._goto)
                self._goto.append({})
                self._fail.append(0)
                self._depth.append(self._depth[state] + 1)
                self._out.append(0)
                self._goto[state][b] = nxt
            state = nxt
        self._out[state] = len(key)

    def _link(self) -> None:
        queue: deque[int] = deque(self._goto[0].values())
        while queue:
            state = queue.popleft()
            for b, child in self._goto[state].items():
                queue.append(child)
                fallback = self._fail[state]
                while fallback and b not in self._goto[fallback]:
                    fallback = self._fail[fallback]
                target = self._goto[fallback].get(b, 0)
                self._fail[child] = target if target != child else 0
                if not self._out[child]:
                    self._out[child] = self._out[self._fail[child]]

    def _step(self, state: int, b: int) -> int:
        goto = self._goto
        while state and b not in goto[state]:
            state = self._fail[state]
        return goto[state].get(b, 0)

    def find_iter(self, data: bytes) -> Iterator[Match]:
        n = len(data)
        state = 0
        best: Optional[Match] = None
        i = 0
        while True:
            if i >= n:
                if best is None:
                    return
                # Text ran out with a match pending; resume right after it.
                yield best
                i = best.end
                state = 0
                best = None
                continue

            state = self._step(state, data[i])
            i += 1

            length = self._out[state]
            if length:
                start = i - length
                # Ends only grow, so a later hit at the same start is longer.
                if best is None or start <= best.start:
                    best = Match(start, i)

            # No future match can start before i - depth[state].
            if best is not None and i - self._depth[state] > best.start:
                yield best
                i = best.end
                state = 0
                best = None

    def find_all(self, data: bytes) -> list[Match]:
        return list(self.find_iter(data))
