"""Function-backed store comonads kept for comparison with ``FocusedGrid``.

``Store`` holds a lookup function and a position. Its ``extend`` never
materialises anything: the new lookup closes over the previous one, so
reading generation ``n`` re-evaluates every earlier generation on demand.

``MemoStore`` caches each generation's lookup by position. That removes
the recomputation but the caches are never evicted, so memory grows with
every generation that remains reachable through the closure chain.

Neither is used by the stepper; ``FocusedGrid`` bounds both cost and
memory by building one dense table per generation.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

S = TypeVar("S")
H = TypeVar("H", bound=Hashable)
A = TypeVar("A")
B = TypeVar("B")


def memoize(f: Callable[[H], B]) -> Callable[[H], B]:
    """Cache ``f`` by argument in an unbounded dict."""
    cache: dict[H, B] = {}

    def lookup(key: H) -> B:
        if key not in cache:
            cache[key] = f(key)
        return cache[key]

    return lookup


@dataclass(frozen=True)
class Store(Generic[S, A]):
    """Lazy store comonad: ``peek`` is recomputed on every read."""

    peek: Callable[[S], A]
    pos: S

    def extract(self) -> A:
        return self.peek(self.pos)

    def seek(self, s: S) -> Store[S, A]:
        return self.duplicate().peek(s)

    def experiment(self, relate: Callable[[S], Iterable[S]]) -> list[A]:
        return [self.peek(s) for s in relate(self.pos)]

    def extend(self, f: Callable[[Store[S, A]], B]) -> Store[S, B]:
        peek = self.peek
        return Store(peek=lambda s: f(Store(peek=peek, pos=s)), pos=self.pos)

    def duplicate(self) -> Store[S, Store[S, A]]:
        return self.extend(lambda w: w)


@dataclass(frozen=True)
class MemoStore(Generic[H, A]):
    """Store comonad whose ``extend`` memoises the derived lookup by position."""

    peek: Callable[[H], A]
    pos: H

    def extract(self) -> A:
        return self.peek(self.pos)

    def seek(self, s: H) -> MemoStore[H, A]:
        return self.duplicate().peek(s)

    def experiment(self, relate: Callable[[H], Iterable[H]]) -> list[A]:
        return [self.peek(s) for s in relate(self.pos)]

    def extend(self, f: Callable[[MemoStore[H, A]], B]) -> MemoStore[H, B]:
        peek = self.peek
        return MemoStore(peek=memoize(lambda s: f(MemoStore(peek=peek, pos=s))), pos=self.pos)

    def duplicate(self) -> MemoStore[H, MemoStore[H, A]]:
        return self.extend(lambda w: w)
