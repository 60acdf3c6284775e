import pytest
from hypothesis import given, strategies as st

from libft.convert import atodbl, atoi, itoa, safe_atoi

int32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)
spaces = st.text(alphabet="\t\n\v\f\r ", max_size=5)


@given(int32)
def test_atoi_round_trips_itoa(n):
    assert atoi(itoa(n)) == n


@given(spaces, int32, st.text(alphabet="abc xyz.-+", max_size=5))
def test_atoi_skips_space_and_stops_at_non_digit(lead, n, tail):
    assert atoi(lead + str(n) + tail) == n


def test_atoi_handles_explicit_plus_and_minus():
    assert atoi("  \t-42abc") == -42
    assert atoi("+42") == 42


def test_atoi_without_digits_is_zero():
    assert atoi("") == 0
    assert atoi("--5") == 0
    assert atoi("x12") == 0


def test_atoi_wraps_past_int_range():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


@given(int32)
def test_itoa_matches_decimal_text(n):
    assert itoa(n) == str(n)
    assert safe_atoi(itoa(n)) == n


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_rejects_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2**31)
    with pytest.raises(OverflowError):
        itoa(-(2**31) - 1)


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("5")


@given(
    st.integers(min_value=0, max_value=10**6),
    st.integers(min_value=0, max_value=10**6),
    st.sampled_from(["", "-", "+"]),
)
def test_atodbl_agrees_with_float(whole, frac, sign):
    text = f"{sign}{whole}.{frac}"
    assert atodbl(text) == pytest.approx(float(text), rel=1e-12, abs=1e-12)


def test_atodbl_skips_whitespace_and_sign():
    assert atodbl("  -0.75") == pytest.approx(-0.75)
    assert atodbl("\t2.5") == pytest.approx(2.5)


@given(st.integers(min_value=0, max_value=10**9))
def test_atodbl_whole_numbers(n):
    assert atodbl(str(n)) == float(n)


@given(int32)
def test_safe_atoi_accepts_every_int32(n):
    assert safe_atoi(str(n)) == n


def test_safe_atoi_limits():
    assert safe_atoi("2147483647") == 2147483647
    assert safe_atoi("-2147483648") == -2147483648
    assert safe_atoi("+7") == 7


@pytest.mark.parametrize(
    "text",
    ["", "-", "+", "2147483648", "-2147483649", "12a", " 12", "a", "--1", "1.5"],
)
def test_safe_atoi_rejects_invalid(text):
    with pytest.raises(ValueError):
        safe_atoi(text)


@given(st.integers(min_value=2**31, max_value=2**40))
def test_safe_atoi_rejects_large_values(n):
    with pytest.raises(ValueError):
        safe_atoi(str(n))
    with pytest.raises(ValueError):
        safe_atoi(str(-n - 1))