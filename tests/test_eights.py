import pytest

from kmapsimplify.eights import find_groups_of_eight
from kmapsimplify.groups import GroupList
from kmapsimplify.kmap import KMap


def _kmap(minterms, input_size=4):
    size = 2**input_size
    return KMap.from_outputs([1 if i in minterms else 0 for i in range(size)], input_size)


LEFT_COLUMNS = {0, 1, 4, 5, 8, 9, 12, 13}
OUTER_ROWS = {0, 1, 2, 3, 8, 9, 10, 11}


def test_empty_map_has_no_groups():
    kmap = _kmap(set())
    groups = GroupList()
    find_groups_of_eight(kmap, groups)
    assert len(groups) == 0


def test_full_map_groups_are_eight_cells_of_ones():
    kmap = _kmap(set(range(16)))
    groups = GroupList()
    find_groups_of_eight(kmap, groups)
    assert len(groups) > 0
    for group in groups:
        assert len(group) == 8
        assert all(kmap[point] for point in group)


def test_two_columns_found_from_each_start():
    kmap = _kmap(LEFT_COLUMNS)
    groups = GroupList()
    find_groups_of_eight(kmap, groups)
    expected = {(r, c) for r in range(4) for c in (0, 1)}
    assert len(groups) == 4
    for group in groups:
        assert set(group) == expected
    assert [group[0] for group in groups] == [(r, 0) for r in range(4)]


def test_searching_for_epi_leaves_cells_unselected():
    kmap = _kmap(LEFT_COLUMNS)
    find_groups_of_eight(kmap, GroupList())
    assert all(v == 0 for row in kmap.selected for v in row)


def test_covering_stops_repeat_groups():
    kmap = _kmap(LEFT_COLUMNS)
    kmap.search_for_epi = False
    groups = GroupList()
    find_groups_of_eight(kmap, groups)
    assert len(groups) == 1
    for r in range(4):
        for c in (0, 1):
            assert kmap.selected[r][c] == 1
        for c in (2, 3):
            assert kmap.selected[r][c] == 0


def test_outer_rows_top_and_bottom_groups():
    kmap = _kmap(OUTER_ROWS)
    groups = GroupList()
    find_groups_of_eight(kmap, groups)
    top = [g for g in groups if g[0][0] == 0]
    bottom = [g for g in groups if g[0][0] == 3]
    assert len(top) == len(bottom) == 4
    expected = {(r, c) for r in (0, 3) for c in range(4)}
    for group in top:
        assert set(group) == expected
    assert bottom[0] == ((3, 0), (3, 1), (3, 2), (3, 3), (0, 0), (1, 0), (2, 0), (3, 0))


@pytest.mark.parametrize("col", range(4))
def test_bottom_groups_record_left_column(col):
    kmap = _kmap(OUTER_ROWS)
    groups = GroupList()
    find_groups_of_eight(kmap, groups)
    group = next(g for g in groups if g[0] == (3, col))
    assert group[4:] == tuple((r, 0) for r in range(4))
    assert set(group[:4]) == {(3, c) for c in range(4)}


def test_outer_rows_covered_after_first_group():
    kmap = _kmap(OUTER_ROWS)
    kmap.search_for_epi = False
    groups = GroupList()
    find_groups_of_eight(kmap, groups)
    assert len(groups) == 1
    assert all(kmap.selected[r][c] == 1 for r in (0, 3) for c in range(4))
    assert all(kmap.selected[r][c] == 0 for r in (1, 2) for c in range(4))