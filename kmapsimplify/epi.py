"""Picking essential prime implicants out of the groups found on a map."""

from __future__ import annotations

from .groups import GroupList
from .kmap import KMap


def select_epi_bits(kmap: KMap, epi_groups: GroupList) -> None:
    """Mark every cell of every group as covered."""
    for group in epi_groups:
        kmap.select(group)


def remove_doubles(epi_groups: GroupList) -> None:
    """Drop each group whose first point lies in a group after it."""
    snapshot = list(epi_groups)
    for index, group in enumerate(snapshot):
        first = group[0]
        if any(first in later for later in snapshot[index + 1:]):
            epi_groups.remove(group)


def locate_epi(kmap: KMap, epi_groups: GroupList, test_groups: GroupList) -> None:
    """Move the groups whose first point starts no other group into ``epi_groups``.

    The chosen groups are thinned with :func:`remove_doubles`, their cells
    are marked as covered, and ``test_groups`` is emptied.
    """
    candidates = list(test_groups)
    for index, group in enumerate(candidates):
        first = group[0]
        shared = any(
            other_index != index and other[0] == first
            for other_index, other in enumerate(candidates)
        )
        if not shared:
            epi_groups.add(group)
    if len(epi_groups) > 0:
        remove_doubles(epi_groups)
        select_epi_bits(kmap, epi_groups)
    test_groups.clear()