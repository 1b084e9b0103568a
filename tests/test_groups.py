import pytest

from kmapsimplify.groups import GroupList, format_group


def test_add_stores_points_in_order():
    groups = GroupList()
    added = groups.add([(0, 1), (1, 1)])
    assert added == ((0, 1), (1, 1))
    assert list(groups) == [((0, 1), (1, 1))]
    assert len(groups) == 1


def test_add_copies_input():
    points = [(0, 0), (0, 1)]
    groups = GroupList()
    groups.add(points)
    points.append((1, 1))
    assert groups[0] == ((0, 0), (0, 1))


def test_add_keeps_duplicates():
    groups = GroupList()
    groups.add([(1, 0)])
    groups.add([(1, 0)])
    assert len(groups) == 2


def test_remove_drops_matching_group():
    groups = GroupList([[(0, 0), (0, 1)], [(1, 0), (1, 1)]])
    groups.remove([(0, 0), (0, 1)])
    assert list(groups) == [((1, 0), (1, 1))]


def test_remove_missing_group_raises():
    groups = GroupList([[(0, 0)]])
    with pytest.raises(ValueError):
        groups.remove([(1, 1)])
    assert len(groups) == 1


def test_remove_from_empty_raises():
    with pytest.raises(ValueError):
        GroupList().remove([(0, 0)])


def test_clear_empties_list():
    groups = GroupList([[(0, 0)], [(0, 1)]])
    groups.clear()
    assert len(groups) == 0
    assert list(groups) == []


def test_contains():
    groups = GroupList([[(0, 0), (1, 0)]])
    assert [(0, 0), (1, 0)] in groups
    assert [(1, 0), (0, 0)] not in groups


def test_format_group():
    assert format_group([(0, 0), (0, 1)]) == "\t(0,0) (0,1) "


def test_format_group_empty_raises():
    with pytest.raises(ValueError):
        format_group([])


def test_format_empty_list():
    assert GroupList().format(4) == "No Groups of 4 found.\n\n"


def test_format_lists_each_group():
    groups = GroupList([[(0, 0), (0, 1)], [(1, 1), (0, 1)]])
    text = groups.format(2)
    assert text.startswith("Groups of 2 found: \n\n")
    assert text.endswith("\n\n")
    lines = text.split("\n")
    assert lines[2] == format_group(groups[0])
    assert lines[3] == format_group(groups[1])


def test_equality_follows_contents():
    assert GroupList([[(0, 0)]]) == GroupList([[(0, 0)]])
    assert not GroupList([[(0, 0)]]) == GroupList([[(0, 1)]])