import pytest
from hypothesis import given
from hypothesis import strategies as st

from libft.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


@given(st.binary(min_size=0, max_size=64), st.integers(min_value=-512, max_value=512), st.data())
def test_memset_fills_prefix_and_keeps_rest(data, c, draw):
    n = draw.draw(st.integers(min_value=0, max_value=len(data)))
    buf = bytearray(data)
    result = memset(buf, c, n)
    assert result is buf
    assert all(b == (c & 0xFF) for b in buf[:n])
    assert buf[n:] == data[n:]


def test_memset_truncates_to_byte():
    buf = bytearray(3)
    memset(buf, 0x141, 3)
    assert buf == bytearray([0x41] * 3)


@given(st.binary(min_size=0, max_size=64), st.data())
def test_bzero_zeroes_prefix(data, draw):
    n = draw.draw(st.integers(min_value=0, max_value=len(data)))
    buf = bytearray(data)
    assert bzero(buf, n) is None
    assert buf[:n] == bytes(n)
    assert buf[n:] == data[n:]


@given(st.binary(max_size=32), st.binary(max_size=32), st.data())
def test_memcpy_copies_prefix(src, dst_data, draw):
    n = draw.draw(st.integers(min_value=0, max_value=min(len(src), len(dst_data))))
    dst = bytearray(dst_data)
    result = memcpy(dst, src, n)
    assert result is dst
    assert dst[:n] == src[:n]
    assert dst[n:] == dst_data[n:]


def test_memmove_overlap_forward():
    original = b"abcdefgh"
    buf = bytearray(original)
    view = memoryview(buf)
    dst = view[2:]
    result = memmove(dst, view, 5)
    assert result is dst
    assert bytes(result[:5]) == original[:5]
    assert bytes(buf) == original[:2] + original[:5] + original[7:]


def test_memmove_overlap_backward():
    original = b"abcdefgh"
    buf = bytearray(original)
    view = memoryview(buf)
    result = memmove(view, view[3:], 5)
    assert result is view
    assert bytes(result[:5]) == original[3:]
    assert bytes(buf) == original[3:] + original[5:]


@given(st.binary(min_size=1, max_size=40), st.data())
def test_memmove_any_overlap_matches_slice_assignment(data, draw):
    n = draw.draw(st.integers(min_value=0, max_value=len(data)))
    src_off = draw.draw(st.integers(min_value=0, max_value=len(data) - n))
    dst_off = draw.draw(st.integers(min_value=0, max_value=len(data) - n))
    buf = bytearray(data)
    view = memoryview(buf)
    dst = view[dst_off:]
    result = memmove(dst, view[src_off:], n)
    assert result is dst
    assert bytes(result[:n]) == data[src_off:src_off + n]
    expected = bytearray(data)
    expected[dst_off:dst_off + n] = data[src_off:src_off + n]
    assert buf == expected


@given(st.binary(max_size=40), st.integers(min_value=0, max_value=255))
def test_memchr_finds_first_occurrence(data, c):
    result = memchr(data, c, len(data))
    if c in data:
        assert result == data.index(c)
    else:
        assert result is None


def test_memchr_respects_limit():
    data = b"hello"
    assert memchr(data, ord("o"), 4) is None
    assert memchr(data, ord("o"), 5) == 4


def test_memchr_uses_low_byte():
    assert memchr(b"\x00A", 0x141, 2) == 1


@given(st.binary(max_size=20), st.binary(max_size=20))
def test_memcmp_sign_matches_bytes_ordering(a, b):
    n = min(len(a), len(b))
    result = memcmp(a, b, n)
    pa, pb = a[:n], b[:n]
    assert (result > 0) == (pa > pb)
    assert (result < 0) == (pa < pb)
    assert (result == 0) == (pa == pb)


def test_memcmp_returns_byte_difference():
    assert memcmp(b"\x80", b"\x00", 1) == 0x80
    assert memcmp(b"ab", b"ac", 2) == ord("b") - ord("c")


def test_memcmp_zero_length_is_equal():
    assert memcmp(b"x", b"y", 0) == 0


@given(st.integers(min_value=0, max_value=64), st.integers(min_value=0, max_value=64))
def test_calloc_zeroed(nmemb, size):
    buf = calloc(nmemb, size)
    assert len(buf) == nmemb * size
    assert not any(buf)


def test_calloc_overflow_raises():
    with pytest.raises(MemoryError):
        calloc(2**33, 2**33)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_count_beyond_buffer_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)
    with pytest.raises(ValueError):
        memcpy(bytearray(5), b"ab", 3)


def test_negative_count_raises():
    with pytest.raises(ValueError):
        bzero(bytearray(2), -1)