from __future__ import annotations

from typing import Iterator, Sequence, TypeVar

T = TypeVar("T")


def swap_permutations(items: Sequence[T]) -> Iterator[tuple[T, ...]]:
    """Lazily yield every ordering of ``items`` by swap/backtrack.

    The order matches the classic recursive generator: position ``d`` is
    swapped in turn with ``d, d+1, ..., n-1`` and the swap is undone before the
    next candidate. The first ordering yielded is always the input order.
    An empty input yields a single empty tuple.
    """

    pool = list(items)
    n = len(pool)
    if n == 0:
        yield ()
        return

    # stack[d] is the index last swapped into position d; d - 1 means none yet.
    stack: list[int] = [-1]
    while stack:
        depth = len(stack) - 1
        if depth == n - 1:
            yield tuple(pool)
            stack.pop()
            continue

        prev = stack[depth]
        if prev >= depth:
            pool[depth], pool[prev] = pool[prev], pool[depth]
            nxt = prev + 1
        else:
            nxt = depth

        if nxt >= n:
            stack.pop()
            continue

        stack[depth] = nxt
        pool[depth], pool[nxt] = pool[nxt], pool[depth]
        stack.append(depth)
