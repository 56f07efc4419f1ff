import pytest

from guests.core.exceptions import MatsListError
from guests.models.mats_list import MAX_MAT_NUMBER, MAX_RANGE_SIZE, MatsList


@pytest.mark.parametrize("text", ["-1", "1,-2"])
def test_dash_without_low_number_is_blank(text):
    with pytest.raises(MatsListError, match="cannot be blank$"):
        MatsList(text)


@pytest.mark.parametrize("text", ["", "3,,5", ",4", "1,2,"])
def test_empty_item_is_blank(text):
    with pytest.raises(MatsListError, match="cannot be blank$"):
        MatsList(text)


@pytest.mark.parametrize("text", ["0", "2,0", "3,4,0"])
def test_must_be_positive(text):
    with pytest.raises(MatsListError, match="must be positive$"):
        MatsList(text)


@pytest.mark.parametrize("text", ["a", "1,b,3", "1,2,c"])
def test_not_a_number(text):
    with pytest.raises(MatsListError, match="is not a number$"):
        MatsList(text)


@pytest.mark.parametrize("text", ["2147483648", "1,9223372036854775808", "1-2147483648"])
def test_number_beyond_integer_range(text):
    with pytest.raises(MatsListError, match="is not a number$"):
        MatsList(text)


def test_largest_integer_is_accepted():
    assert MatsList(f"1,{MAX_MAT_NUMBER}").exploded == (1, MAX_MAT_NUMBER)


def test_range_too_wide():
    with pytest.raises(MatsListError, match=f"must not span more than {MAX_RANGE_SIZE} mats$"):
        MatsList("1-2000000000")
    assert len(MatsList(f"1-{MAX_RANGE_SIZE}")) == MAX_RANGE_SIZE


@pytest.mark.parametrize("text", ["1,1", "2,1", "1,2,2", "1,3,2", "2,2"])
def test_single_numbers_out_of_order(text):
    with pytest.raises(MatsListError, match="is out of ascending order$"):
        MatsList(text)


@pytest.mark.parametrize("text", ["6-1", "1-3,5-4", "1,2,4-3"])
def test_backwards_range(text):
    with pytest.raises(MatsListError, match="must have lower number first$"):
        MatsList(text)


@pytest.mark.parametrize("text", ["1-3,2-4", "1-3,2,4-5", "1-3,3-5"])
def test_ranges_out_of_order(text):
    with pytest.raises(MatsListError, match="is out of ascending order$"):
        MatsList(text)


def test_more_than_one_dash():
    with pytest.raises(MatsListError, match="more than one dash") as excinfo:
        MatsList("1-2-3")
    assert excinfo.value.item == "1-2-3"


def test_none_rejected():
    with pytest.raises(MatsListError):
        MatsList(None)


def test_error_names_offending_item():
    with pytest.raises(MatsListError) as excinfo:
        MatsList("1,b,3")
    assert excinfo.value.item == "b"
    assert "'b'" in str(excinfo.value)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1", "1"),
        ("1,2", "1,2"),
        ("2,3,4", "2,3,4"),
        (" 1 ", "1"),
        (" 1 , 2 ", "1,2"),
        (" 2 , 3, 4 ", "2,3,4"),
    ],
)
def test_valid_single_numbers(text, expected):
    assert str(MatsList(text)) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1-6", "1,2,3,4,5,6"),
        ("1-3, 4-6", "1,2,3,4,5,6"),
        (" 1 - 4 ", "1,2,3,4"),
        ("1-2, 4 - 6 ", "1,2,4,5,6"),
        ("1,2,4,5-6", "1,2,4,5,6"),
        ("1,2-2,3", "1,2,3"),
        ("3,4,7-9", "3,4,7,8,9"),
    ],
)
def test_valid_ranges_expand(text, expected):
    assert str(MatsList(text)) == expected


def test_exploded_members():
    mats = MatsList("1-3,5")
    assert mats.exploded == (1, 2, 3, 5)
    assert list(mats) == [1, 2, 3, 5]
    assert len(mats) == 4
    assert mats.is_member_of(5)
    assert not mats.is_member_of(4)
    assert 2 in mats


@pytest.mark.parametrize(
    "parent, child",
    [
        ("1-3, 5, 7-8", "1,3,5,7-8"),
        ("1,5-6", "1,5-6"),
        ("1-7", "2-4,6"),
    ],
)
def test_is_subset(parent, child):
    assert MatsList(child).is_subset_of(MatsList(parent))


@pytest.mark.parametrize(
    "parent, child",
    [
        ("1-3, 5, 7-8", "4,6"),
        ("1,5-6", "3,4"),
        ("1-7", "8"),
    ],
)
def test_is_not_subset(parent, child):
    assert not MatsList(child).is_subset_of(MatsList(parent))


def test_equality_uses_members():
    assert MatsList("1-3") == MatsList("1,2,3")
    assert hash(MatsList("1-3")) == hash(MatsList("1,2,3"))
    assert MatsList("1-3") != MatsList("1-4")
