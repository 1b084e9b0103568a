import pytest

from kmapsimplify.parsing import get_input_size, get_output_values


@pytest.mark.parametrize(
    "function, expected",
    [
        ("f(a,b)=sum(0,1)", 2),
        ("f(a,b,c)=sum(1,2)", 3),
        ("f(a,b,c,d)=prod(1)", 4),
    ],
)
def test_input_size_counts_inputs(function, expected):
    assert get_input_size(function) == expected


def test_input_size_ignores_commas_after_paren():
    assert get_input_size("f(a,b)=sum(0,1,2,3)") == get_input_size("f(a,b)=sum(0)")


def test_input_size_without_paren_raises():
    with pytest.raises(ValueError):
        get_input_size("f(a,b")


def test_sum_sets_listed_terms():
    assert get_output_values("f(a,b)=sum(0,3)", 4) == [1, 0, 0, 1]


def test_prod_clears_listed_terms():
    assert get_output_values("f(a,b)=prod(0,3)", 4) == [0, 1, 1, 0]


def test_sum_and_prod_complement_each_other():
    minterms = get_output_values("f(a,b,c)=sum(1,4,6)", 8)
    maxterms = get_output_values("f(a,b,c)=prod(1,4,6)", 8)
    assert all(m + n == 1 for m, n in zip(minterms, maxterms))


def test_multi_digit_terms():
    outputs = get_output_values("f(a,b,c,d)=sum(10,15)", 16)
    assert [i for i, v in enumerate(outputs) if v] == [10, 15]


def test_leading_number_is_not_read():
    outputs = get_output_values("3 sum(1)", 4)
    assert [i for i, v in enumerate(outputs) if v] == [1]


def test_no_terms_in_sum_gives_all_zero():
    assert get_output_values("f(a,b)=sum()", 4) == [0] * 4


def test_out_of_range_term_raises():
    with pytest.raises(ValueError):
        get_output_values("f(a,b)=sum(4)", 4)