"""Exhaustive enumeration of center visiting orders.

Every permutation of the required centers is produced, so the work grows as
n! in the number of centers. That is only acceptable because the catalog is
small and fixed; a larger catalog needs a non-exhaustive search instead.
"""

from __future__ import annotations

from typing import Iterator, Sequence

from .models import Route


def _permute(remaining: tuple[str, ...], prefix: Route) -> Iterator[Route]:
    if not remaining:
        yield prefix
        return
    for index, center in enumerate(remaining):
        rest = remaining[:index] + remaining[index + 1:]
        yield from _permute(rest, prefix + (center,))


def iter_routes(centers: Sequence[str]) -> Iterator[Route]:
    """Lazily yield every visiting order of ``centers``.

    Routes come out in selection order: the first input center leads the
    first (n-1)! routes, and so on.
    """
    centers = tuple(centers)
    if not centers:
        return
    yield from _permute(centers, ())


def enumerate_routes(centers: Sequence[str]) -> list[Route]:
    return list(iter_routes(centers))
